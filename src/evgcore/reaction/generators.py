"""Enumerate the candidate interactions for an initial state.

Every interaction family (single pion production, diffractive scattering, ...)
has its own `InteractionListGenerator`. A generator maps an `.InitialState` to
an `InteractionList` with one `.Interaction` per allowed channel. There are two
ways in which no candidates can come out of a generator, and they are kept
apart:

- the family is not modeled: `~InteractionListGenerator.create_interaction_list`
  returns an **empty** `InteractionList`;
- no channel is viable for this initial state (unsupported probe, or the target
  has none of the required nucleons): it returns `None`.

`InteractionListGenerator.enumerate` wraps both cases in an
`EnumerationResult` with an explicit `EnumerationStatus`.
"""

import logging
from abc import ABC, abstractmethod
from collections import abc
from enum import Enum, auto
from typing import (
    Any,
    Iterable,
    List,
    Mapping,
    Optional,
    Union,
    overload,
)

import attr

from evgcore.interaction import (
    ExclusiveTag,
    InitialState,
    Interaction,
    InteractionType,
    ProcessInfo,
    ScatteringType,
)
from evgcore.particle import pdg

from .channels import SppChannel, determine_probe_type, spp_channels

_LOGGER = logging.getLogger(__name__)


class InteractionList(abc.MutableSequence):
    """Ordered collection of candidate `.Interaction` instances.

    The list owns its elements: consumers that want to modify an interaction
    (such as an `.InteractionSelector`) work on a copy.
    """

    def __init__(
        self, interactions: Optional[Iterable[Interaction]] = None
    ) -> None:
        self.__interactions: List[Interaction] = list()
        if interactions is not None:
            self.extend(interactions)

    @overload
    def __getitem__(self, index: int) -> Interaction:
        ...

    @overload
    def __getitem__(self, index: slice) -> "InteractionList":
        ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[Interaction, "InteractionList"]:
        if isinstance(index, slice):
            return InteractionList(self.__interactions[index])
        return self.__interactions[index]

    def __setitem__(self, index: int, value: Interaction) -> None:  # type: ignore
        self.__interactions[index] = self.__check(value)

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self.__interactions[index]

    def __len__(self) -> int:
        return len(self.__interactions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, abc.Sequence):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        output = f"{self.__class__.__name__}(["
        for interaction in self:
            output += f"\n    {interaction.as_string()},"
        output += "])"
        return output

    def insert(self, index: int, value: Interaction) -> None:
        self.__interactions.insert(index, self.__check(value))

    @staticmethod
    def __check(value: Interaction) -> Interaction:
        if not isinstance(value, Interaction):
            raise TypeError(
                f"Cannot add a {value.__class__.__name__} to an InteractionList"
            )
        return value


class EnumerationStatus(Enum):
    """Outcome of `InteractionListGenerator.enumerate`."""

    CHANNELS = auto()
    """At least one candidate interaction was found."""
    NOT_MODELED = auto()
    """The interaction family is not modeled, which is not an error."""
    NONE_VIABLE = auto()
    """No channel is allowed for this initial state."""


@attr.s(frozen=True)
class EnumerationResult:
    status: EnumerationStatus = attr.ib()
    interactions: InteractionList = attr.ib(factory=InteractionList)

    @property
    def has_channels(self) -> bool:
        return self.status == EnumerationStatus.CHANNELS


class InteractionListGenerator(ABC):
    """Interface for the generators of candidate interactions.

    Generators are configured once with a mapping of options (see
    `configure`) and are stateless afterwards: calling
    `create_interaction_list` again with the same initial state gives the same
    candidates, in the same order.
    """

    name = "abstract"

    def __init__(self, config: Optional[Mapping[str, Any]] = None) -> None:
        self.configure({} if config is None else config)

    def configure(self, config: Mapping[str, Any]) -> None:
        """Load the options of this generator. No options by default."""

    @abstractmethod
    def create_interaction_list(
        self, initial_state: InitialState
    ) -> Optional[InteractionList]:
        """Create the candidate interactions for an initial state.

        Returns `None` if no channel is viable and an empty `InteractionList`
        if the interaction family is not modeled.
        """

    def enumerate(self, initial_state: InitialState) -> EnumerationResult:
        interactions = self.create_interaction_list(initial_state)
        if interactions is None:
            _LOGGER.error(
                f"{self.name}: no viable channel for init-state"
                f" {initial_state.as_string()}"
            )
            return EnumerationResult(EnumerationStatus.NONE_VIABLE)
        if len(interactions) == 0:
            _LOGGER.info(
                f"{self.name}: interaction family not modeled for init-state"
                f" {initial_state.as_string()}"
            )
            return EnumerationResult(EnumerationStatus.NOT_MODELED)
        return EnumerationResult(EnumerationStatus.CHANNELS, interactions)


class SinglePionProductionGenerator(InteractionListGenerator):
    """Resonant single pion production, for neutrinos and antineutrinos.

    Options:

    - :code:`is-CC`: enumerate charged current channels;
    - :code:`is-NC`: enumerate neutral current channels.

    The two options are mutually exclusive. If both are set, charged current
    channels are enumerated. If neither is set, no channel is viable.

    A channel is only admitted if the target contains its struck nucleon:
    :math:`Z > 0` for protons and :math:`N > 0` for neutrons. See
    `.reaction.channels` for the catalogue of channels.
    """

    name = "single-pion-production"

    def __init__(self, config: Optional[Mapping[str, Any]] = None) -> None:
        self.__is_cc = False
        self.__is_nc = False
        super().__init__(config)

    def configure(self, config: Mapping[str, Any]) -> None:
        """Load the current options.

        Raises:
            TypeError: if :code:`is-CC` or :code:`is-NC` is not a `bool`.
        """
        for key in ("is-CC", "is-NC"):
            value = config.get(key, False)
            if not isinstance(value, bool):
                raise TypeError(
                    f'{self.name}: option "{key}" has to be a bool, not'
                    f" {value.__class__.__name__} {value!r}"
                )
        self.__is_cc = config.get("is-CC", False)
        self.__is_nc = config.get("is-NC", False)
        if self.__is_cc and self.__is_nc:
            _LOGGER.warning(
                f"{self.name}: both is-CC and is-NC are set,"
                " only CC channels will be enumerated"
            )

    @property
    def interaction_type(self) -> Optional[InteractionType]:
        if self.__is_cc:
            return InteractionType.WEAK_CC
        if self.__is_nc:
            return InteractionType.WEAK_NC
        return None

    def create_interaction_list(
        self, initial_state: InitialState
    ) -> Optional[InteractionList]:
        _LOGGER.info(f"InitialState = {initial_state.as_string()}")
        probe_type = determine_probe_type(initial_state.probe_pdg)
        if probe_type is None:
            _LOGGER.warning(
                "Cannot handle probe! Returning no InteractionList for"
                f" init-state {initial_state.as_string()}"
            )
            return None
        target = initial_state.target
        has_protons = target.z > 0
        has_neutrons = target.n > 0

        interactions = InteractionList()
        interaction_type = self.interaction_type
        if interaction_type is not None:
            for channel in spp_channels(probe_type, interaction_type):
                struck_nucleon = channel.initial_nucleon
                if (struck_nucleon == pdg.PROTON and has_protons) or (
                    struck_nucleon == pdg.NEUTRON and has_neutrons
                ):
                    interactions.append(
                        self.__create_interaction(
                            initial_state, interaction_type, channel
                        )
                    )

        if len(interactions) == 0:
            _LOGGER.error(
                "Returning no InteractionList for init-state"
                f" {initial_state.as_string()}"
            )
            return None
        return interactions

    @staticmethod
    def __create_interaction(
        initial_state: InitialState,
        interaction_type: InteractionType,
        channel: SppChannel,
    ) -> Interaction:
        interaction = Interaction(
            initial_state=initial_state.copy(),
            process_info=ProcessInfo(
                ScatteringType.RESONANT, interaction_type
            ),
        )
        interaction.target.set_struck_nucleon_code(channel.initial_nucleon)
        interaction.exclusive_tag = create_exclusive_tag(
            channel.final_nucleon, channel.final_pion
        )
        return interaction


def create_exclusive_tag(final_nucleon: int, final_pion: int) -> ExclusiveTag:
    """Create the tag of a single nucleon, single pion final state.

    Codes that are not a nucleon or a pion are logged as errors and do not
    contribute to the multiplicities.
    """
    n_protons = 0
    n_neutrons = 0
    n_pi_plus = 0
    n_pi_0 = 0
    n_pi_minus = 0

    if final_nucleon == pdg.PROTON:
        n_protons = 1
    elif final_nucleon == pdg.NEUTRON:
        n_neutrons = 1
    else:
        _LOGGER.error(
            "Final state nucleon not a proton or a neutron!"
            f" (pdg={final_nucleon})"
        )

    if final_pion == pdg.PI_PLUS:
        n_pi_plus = 1
    elif final_pion == pdg.PI_ZERO:
        n_pi_0 = 1
    elif final_pion == pdg.PI_MINUS:
        n_pi_minus = 1
    else:
        _LOGGER.error(
            f"Final state pion not a pi+/pi-/pi0! (pdg={final_pion})"
        )

    return ExclusiveTag(
        n_protons=n_protons,
        n_neutrons=n_neutrons,
        n_pi_plus=n_pi_plus,
        n_pi_0=n_pi_0,
        n_pi_minus=n_pi_minus,
    )


class DiffractiveGenerator(InteractionListGenerator):
    """Diffractive scattering, which is not modeled yet.

    Always returns an empty `InteractionList`: there is nothing to generate,
    but that is not an error.
    """

    name = "diffractive"

    def create_interaction_list(
        self, initial_state: InitialState
    ) -> Optional[InteractionList]:
        _LOGGER.info(f"InitialState = {initial_state.as_string()}")
        return InteractionList()
