"""Data model of a simulated interaction.

An `Interaction` bundles the `InitialState` (probe and `.Target`), the
`ProcessInfo` (scattering mechanism and current type), and an optional
`ExclusiveTag` that describes the final state multiplicities. Interactions are
created by the generators in `evgcore.reaction` and one of them is selected as
the summary of an `.EventRecord`.
"""

import logging
from copy import deepcopy
from enum import Enum, auto
from typing import Optional

import attr
from attr.validators import instance_of

from evgcore.kinematics import FourMomentum

from .target import NUCLEON_MASS, Target

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "ExclusiveTag",
    "InitialState",
    "Interaction",
    "InteractionType",
    "NUCLEON_MASS",
    "ProcessInfo",
    "ScatteringType",
    "Target",
]


class ScatteringType(Enum):
    """Scattering mechanisms in the form of an enumerate."""

    QUASI_ELASTIC = auto()
    ELASTIC = auto()
    RESONANT = auto()
    DEEP_INELASTIC = auto()
    COHERENT = auto()
    DIFFRACTIVE = auto()


class InteractionType(Enum):
    """Types of interactions in the form of an enumerate."""

    WEAK_CC = auto()
    WEAK_NC = auto()
    EM = auto()


_SCATTERING_LABELS = {
    ScatteringType.QUASI_ELASTIC: "QES",
    ScatteringType.ELASTIC: "EL",
    ScatteringType.RESONANT: "RES",
    ScatteringType.DEEP_INELASTIC: "DIS",
    ScatteringType.COHERENT: "COH",
    ScatteringType.DIFFRACTIVE: "DFR",
}
_INTERACTION_LABELS = {
    InteractionType.WEAK_CC: "Weak[CC]",
    InteractionType.WEAK_NC: "Weak[NC]",
    InteractionType.EM: "EM",
}


@attr.s(frozen=True)
class ProcessInfo:
    scattering_type: ScatteringType = attr.ib(
        validator=instance_of(ScatteringType)
    )
    interaction_type: InteractionType = attr.ib(
        validator=instance_of(InteractionType)
    )

    @property
    def is_resonant(self) -> bool:
        return self.scattering_type == ScatteringType.RESONANT

    @property
    def is_weak_cc(self) -> bool:
        return self.interaction_type == InteractionType.WEAK_CC

    @property
    def is_weak_nc(self) -> bool:
        return self.interaction_type == InteractionType.WEAK_NC

    def as_string(self) -> str:
        return (
            f"{_INTERACTION_LABELS[self.interaction_type]},"
            f"{_SCATTERING_LABELS[self.scattering_type]}"
        )


def _non_negative(
    instance: object, attribute: attr.Attribute, value: int
) -> None:
    if value < 0:
        raise ValueError(
            f"{instance.__class__.__name__}.{attribute.name} has to be"
            f" non-negative, not {value}"
        )


@attr.s(frozen=True)
class ExclusiveTag:
    """Final state multiplicities of an exclusive channel."""

    n_protons: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )
    n_neutrons: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )
    n_pi_plus: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )
    n_pi_0: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )
    n_pi_minus: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )

    @property
    def n_nucleons(self) -> int:
        return self.n_protons + self.n_neutrons

    @property
    def n_pions(self) -> int:
        return self.n_pi_plus + self.n_pi_0 + self.n_pi_minus

    def as_string(self) -> str:
        return (
            f"N(p={self.n_protons},n={self.n_neutrons}),"
            f"pi(+={self.n_pi_plus},0={self.n_pi_0},-={self.n_pi_minus})"
        )


@attr.s(eq=True)
class InitialState:
    """Probe and target that enter an interaction."""

    probe_pdg: int = attr.ib(converter=int)
    target: Target = attr.ib(validator=instance_of(Target))
    probe_p4: FourMomentum = attr.ib(
        factory=FourMomentum, validator=instance_of(FourMomentum)
    )

    def set_probe_p4(self, p4: FourMomentum) -> None:
        self.probe_p4 = p4

    def copy(self) -> "InitialState":
        return deepcopy(self)

    def as_string(self) -> str:
        return f"nu:{self.probe_pdg};tgt:{self.target.as_string()}"


def _warn_on_replaced_tag(  # pylint: disable=unused-argument
    instance: "Interaction",
    attribute: attr.Attribute,
    value: Optional[ExclusiveTag],
) -> Optional[ExclusiveTag]:
    if instance.exclusive_tag is not None:
        _LOGGER.warning(
            f"Replacing exclusive tag {instance.exclusive_tag.as_string()}"
            f" of interaction {instance.as_string()}"
        )
    return value


@attr.s(eq=True)
class Interaction:
    """One candidate interaction: initial state, process and final state tag.

    The `initial_state` and `process_info` cannot be replaced once the
    interaction has been created, but the initial state itself can be
    modified (for instance its struck nucleon and probe four-momentum).
    The `exclusive_tag` is meant to be assigned once. Replacing an existing
    tag is allowed, but logs a warning.
    """

    initial_state: InitialState = attr.ib(
        validator=instance_of(InitialState),
        on_setattr=attr.setters.frozen,
    )
    process_info: ProcessInfo = attr.ib(
        validator=instance_of(ProcessInfo),
        on_setattr=attr.setters.frozen,
    )
    exclusive_tag: Optional[ExclusiveTag] = attr.ib(
        default=None, on_setattr=_warn_on_replaced_tag
    )

    @property
    def target(self) -> Target:
        return self.initial_state.target

    def copy(self) -> "Interaction":
        """Create a deep copy that shares nothing mutable with the original."""
        return deepcopy(self)

    def as_string(self) -> str:
        output = (
            f"{self.initial_state.as_string()};"
            f"proc:{self.process_info.as_string()};"
        )
        if self.exclusive_tag is not None:
            output += f"xcl:{self.exclusive_tag.as_string()};"
        return output

    def __str__(self) -> str:
        return (
            f"{self.as_string()}\n"
            f" probe PDG code = {self.initial_state.probe_pdg},"
            f" P4 = {self.initial_state.probe_p4}\n"
            f"{self.target}"
        )
