"""PDG particle codes and predicates used throughout `evgcore`.

Nuclei are identified with the PDG ion convention :code:`10LZZZAAAI`, see
`ion_code`.
"""

PROTON = 2212
NEUTRON = 2112
PI_PLUS = 211
PI_ZERO = 111
PI_MINUS = -211

NU_E = 12
NU_MU = 14
NU_TAU = 16

_ION_BASE = 1000000000
_QUARKS = {1, 2, 3, 4, 5, 6}  # d, u, s, c, b, t


def is_neutrino(pdg_code: int) -> bool:
    return pdg_code in (NU_E, NU_MU, NU_TAU)


def is_antineutrino(pdg_code: int) -> bool:
    return -pdg_code in (NU_E, NU_MU, NU_TAU)


def is_quark(pdg_code: int) -> bool:
    return pdg_code in _QUARKS


def is_antiquark(pdg_code: int) -> bool:
    return -pdg_code in _QUARKS


def is_proton(pdg_code: int) -> bool:
    return pdg_code == PROTON


def is_neutron(pdg_code: int) -> bool:
    return pdg_code == NEUTRON


def is_nucleon(pdg_code: int) -> bool:
    return pdg_code in (PROTON, NEUTRON)


def is_pion(pdg_code: int) -> bool:
    return pdg_code in (PI_PLUS, PI_ZERO, PI_MINUS)


def ion_code(z: int, a: int) -> int:
    """Compose the PDG ion code of a nucleus with ``z`` protons and mass ``a``.

    >>> ion_code(z=26, a=56)
    1000260560
    >>> ion_code(z=1, a=1)
    1000010010
    """
    return _ION_BASE + 10000 * z + 10 * a


def is_ion(pdg_code: int) -> bool:
    return pdg_code > _ION_BASE and pdg_code < 2 * _ION_BASE


def ion_z(pdg_code: int) -> int:
    """Extract the proton count from an ion code.

    >>> ion_z(1000260560)
    26
    """
    return (pdg_code // 10000) % 1000


def ion_a(pdg_code: int) -> int:
    """Extract the mass number from an ion code.

    >>> ion_a(1000260560)
    56
    """
    return (pdg_code // 10) % 1000
