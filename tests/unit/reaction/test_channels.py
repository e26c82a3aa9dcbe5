import pytest

from evgcore.interaction import InteractionType
from evgcore.particle.pdg import NEUTRON, PROTON
from evgcore.reaction.channels import (
    SPP_CHANNELS,
    ProbeType,
    SppChannel,
    determine_probe_type,
    spp_channels,
)


@pytest.mark.parametrize(
    "probe_pdg, expected",
    [
        (12, ProbeType.NEUTRINO),
        (14, ProbeType.NEUTRINO),
        (16, ProbeType.NEUTRINO),
        (-12, ProbeType.ANTINEUTRINO),
        (-14, ProbeType.ANTINEUTRINO),
        (-16, ProbeType.ANTINEUTRINO),
        (11, None),
        (13, None),
        (2212, None),
    ],
)
def test_determine_probe_type(probe_pdg, expected):
    assert determine_probe_type(probe_pdg) is expected


@pytest.mark.parametrize(
    "probe_type, interaction_type, expected",
    [
        (
            ProbeType.NEUTRINO,
            InteractionType.WEAK_CC,
            ["vp_cc_10100", "vn_cc_10010", "vn_cc_01100"],
        ),
        (
            ProbeType.NEUTRINO,
            InteractionType.WEAK_NC,
            ["vp_nc_10010", "vp_nc_01100", "vn_nc_01010", "vn_nc_10001"],
        ),
        (
            ProbeType.ANTINEUTRINO,
            InteractionType.WEAK_CC,
            ["vbn_cc_01001", "vbp_cc_01010", "vbp_cc_10001"],
        ),
        (
            ProbeType.ANTINEUTRINO,
            InteractionType.WEAK_NC,
            ["vbp_nc_10010", "vbp_nc_01100", "vbn_nc_01010", "vbn_nc_10001"],
        ),
        (ProbeType.NEUTRINO, InteractionType.EM, []),
    ],
)
def test_spp_channels_order(probe_type, interaction_type, expected):
    channels = spp_channels(probe_type, interaction_type)
    assert [channel.label for channel in channels] == expected


def test_channel_content():
    channel = SppChannel.VN_CC_01100
    assert channel.initial_nucleon == NEUTRON
    assert channel.final_nucleon == NEUTRON
    assert channel.final_pion == 211
    assert SppChannel.VBP_CC_10001.initial_nucleon == PROTON
    assert SppChannel.VBP_CC_10001.final_pion == -211


@pytest.mark.parametrize("channel", list(SppChannel))
def test_charge_conservation(channel: SppChannel):
    """Charge of the hadronic system changes by the charge of the W boson."""
    charges = {PROTON: 1, NEUTRON: 0, 211: 1, 111: 0, -211: -1}
    initial_charge = charges[channel.initial_nucleon]
    final_charge = charges[channel.final_nucleon] + charges[channel.final_pion]
    if "_nc_" in channel.label:
        assert final_charge == initial_charge
    elif channel.label.startswith("vb"):
        assert final_charge == initial_charge - 1
    else:
        assert final_charge == initial_charge + 1


def test_every_channel_is_catalogued():
    catalogued = [c for channels in SPP_CHANNELS.values() for c in channels]
    assert sorted(c.label for c in catalogued) == sorted(
        c.label for c in SppChannel
    )
