"""Catalogue of resonant single pion production channels.

Each `SppChannel` encodes the nucleon that is struck in the initial state and
the nucleon and pion in the final state. The channels are grouped by probe
(neutrino or antineutrino) and current (charged or neutral) in
`SPP_CHANNELS`, in the order in which they are enumerated:

.. code-block:: text

    neutrino CC:          v p -> l- p pi+      v n -> l- p pi0
                          v n -> l- n pi+
    neutrino NC:          v p -> v p pi0       v p -> v n pi+
                          v n -> v n pi0       v n -> v p pi-
    antineutrino CC:      vb n -> l+ n pi-     vb p -> l+ n pi0
                          vb p -> l+ p pi-
    antineutrino NC:      vb p -> vb p pi0     vb p -> vb n pi+
                          vb n -> vb n pi0     vb n -> vb p pi-
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from evgcore.interaction import InteractionType
from evgcore.particle import pdg


class ProbeType(Enum):
    NEUTRINO = "neutrino"
    ANTINEUTRINO = "antineutrino"


def determine_probe_type(probe_pdg: int) -> Optional[ProbeType]:
    if pdg.is_neutrino(probe_pdg):
        return ProbeType.NEUTRINO
    if pdg.is_antineutrino(probe_pdg):
        return ProbeType.ANTINEUTRINO
    return None


class SppChannel(Enum):
    """Single pion production channels.

    The suffix of each name lists the final state multiplicities in the order
    :math:`(p, n, \\pi^+, \\pi^0, \\pi^-)`.
    """

    VP_CC_10100 = ("vp_cc_10100", pdg.PROTON, pdg.PROTON, pdg.PI_PLUS)
    VN_CC_10010 = ("vn_cc_10010", pdg.NEUTRON, pdg.PROTON, pdg.PI_ZERO)
    VN_CC_01100 = ("vn_cc_01100", pdg.NEUTRON, pdg.NEUTRON, pdg.PI_PLUS)
    VP_NC_10010 = ("vp_nc_10010", pdg.PROTON, pdg.PROTON, pdg.PI_ZERO)
    VP_NC_01100 = ("vp_nc_01100", pdg.PROTON, pdg.NEUTRON, pdg.PI_PLUS)
    VN_NC_01010 = ("vn_nc_01010", pdg.NEUTRON, pdg.NEUTRON, pdg.PI_ZERO)
    VN_NC_10001 = ("vn_nc_10001", pdg.NEUTRON, pdg.PROTON, pdg.PI_MINUS)
    VBN_CC_01001 = ("vbn_cc_01001", pdg.NEUTRON, pdg.NEUTRON, pdg.PI_MINUS)
    VBP_CC_01010 = ("vbp_cc_01010", pdg.PROTON, pdg.NEUTRON, pdg.PI_ZERO)
    VBP_CC_10001 = ("vbp_cc_10001", pdg.PROTON, pdg.PROTON, pdg.PI_MINUS)
    VBP_NC_10010 = ("vbp_nc_10010", pdg.PROTON, pdg.PROTON, pdg.PI_ZERO)
    VBP_NC_01100 = ("vbp_nc_01100", pdg.PROTON, pdg.NEUTRON, pdg.PI_PLUS)
    VBN_NC_01010 = ("vbn_nc_01010", pdg.NEUTRON, pdg.NEUTRON, pdg.PI_ZERO)
    VBN_NC_10001 = ("vbn_nc_10001", pdg.NEUTRON, pdg.PROTON, pdg.PI_MINUS)

    def __init__(
        self,
        label: str,
        initial_nucleon: int,
        final_nucleon: int,
        final_pion: int,
    ) -> None:
        self.label = label
        self.initial_nucleon = initial_nucleon
        self.final_nucleon = final_nucleon
        self.final_pion = final_pion


SPP_CHANNELS: Dict[
    Tuple[ProbeType, InteractionType], Tuple[SppChannel, ...]
] = {
    (ProbeType.NEUTRINO, InteractionType.WEAK_CC): (
        SppChannel.VP_CC_10100,
        SppChannel.VN_CC_10010,
        SppChannel.VN_CC_01100,
    ),
    (ProbeType.NEUTRINO, InteractionType.WEAK_NC): (
        SppChannel.VP_NC_10010,
        SppChannel.VP_NC_01100,
        SppChannel.VN_NC_01010,
        SppChannel.VN_NC_10001,
    ),
    (ProbeType.ANTINEUTRINO, InteractionType.WEAK_CC): (
        SppChannel.VBN_CC_01001,
        SppChannel.VBP_CC_01010,
        SppChannel.VBP_CC_10001,
    ),
    (ProbeType.ANTINEUTRINO, InteractionType.WEAK_NC): (
        SppChannel.VBP_NC_10010,
        SppChannel.VBP_NC_01100,
        SppChannel.VBN_NC_01010,
        SppChannel.VBN_NC_10001,
    ),
}


def spp_channels(
    probe_type: ProbeType, interaction_type: InteractionType
) -> Tuple[SppChannel, ...]:
    """Channels for a probe and current, in enumeration order.

    Returns an empty `tuple` for a current that has no single pion channels.
    """
    return SPP_CHANNELS.get((probe_type, interaction_type), tuple())
