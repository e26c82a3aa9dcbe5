import pytest

from evgcore.particle import pdg


@pytest.mark.parametrize(
    "pdg_code, expected",
    [
        (12, (True, False)),
        (14, (True, False)),
        (16, (True, False)),
        (-14, (False, True)),
        (11, (False, False)),
        (-13, (False, False)),
    ],
)
def test_neutrinos(pdg_code, expected):
    result = (pdg.is_neutrino(pdg_code), pdg.is_antineutrino(pdg_code))
    assert result == expected


@pytest.mark.parametrize("pdg_code", [1, 2, 3, 4, 5, 6])
def test_quarks(pdg_code):
    assert pdg.is_quark(pdg_code)
    assert not pdg.is_antiquark(pdg_code)
    assert pdg.is_antiquark(-pdg_code)
    assert not pdg.is_quark(-pdg_code)


@pytest.mark.parametrize("pdg_code", [0, 7, 21, 2212])
def test_no_quarks(pdg_code):
    assert not pdg.is_quark(pdg_code)
    assert not pdg.is_antiquark(-pdg_code)


def test_hadrons():
    assert pdg.is_nucleon(2212)
    assert pdg.is_nucleon(2112)
    assert not pdg.is_nucleon(-2212)
    assert pdg.is_proton(2212) and not pdg.is_neutron(2212)
    assert pdg.is_neutron(2112) and not pdg.is_proton(2112)
    for pion in [211, 111, -211]:
        assert pdg.is_pion(pion)
    assert not pdg.is_pion(-111)


@pytest.mark.parametrize(
    "z, a, expected",
    [
        (26, 56, 1000260560),
        (1, 1, 1000010010),
        (0, 1, 1000000010),
        (82, 208, 1000822080),
    ],
)
def test_ion_code(z, a, expected):
    code = pdg.ion_code(z, a)
    assert code == expected
    assert pdg.is_ion(code)
    assert pdg.ion_z(code) == z
    assert pdg.ion_a(code) == a


@pytest.mark.parametrize("pdg_code", [0, 11, 2212, 1000000000, 2000000000])
def test_not_ion(pdg_code):
    assert not pdg.is_ion(pdg_code)
