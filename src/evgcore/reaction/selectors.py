"""Select one candidate interaction and wrap it into an `EventRecord`.

All selectors follow the same protocol in
`InteractionSelector.select_interaction`: validate the list of candidates,
draw an index, copy the drawn interaction and give it the probe
four-momentum, and attach the copy to a new `EventRecord`. Only the way in
which the index is drawn differs between the implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

import attr
import numpy as np

from evgcore.interaction import Interaction
from evgcore.kinematics import FourMomentum
from evgcore.rng import RandomService

from .generators import InteractionList

_LOGGER = logging.getLogger(__name__)

WeightFunction = Callable[[Interaction, FourMomentum], float]
"""Signature of the weights for a `WeightedSelector`, such as a cross section."""


@attr.s
class EventRecord:
    """Container of a generated event, seeded by the selected interaction."""

    summary: Optional[Interaction] = attr.ib(default=None)

    def attach_summary(self, interaction: Interaction) -> None:
        if self.summary is not None:
            _LOGGER.warning("Replacing the summary of an event record")
        self.summary = interaction


class InteractionSelector(ABC):
    """Interface for the algorithms that pick one candidate interaction."""

    name = "abstract"

    def __init__(self, rng: RandomService) -> None:
        self.__rng = rng

    @property
    def rng(self) -> RandomService:
        return self.__rng

    def select_interaction(
        self,
        interactions: Optional[InteractionList],
        probe_p4: FourMomentum,
    ) -> Optional[EventRecord]:
        """Select an interaction and create an `EventRecord` for it.

        Returns `None` if there is nothing to select from. The interactions in
        the list are not modified: the summary of the event record is a copy.
        """
        if interactions is None:
            _LOGGER.error("No InteractionList! Can't select interaction")
            return None
        if len(interactions) == 0:
            _LOGGER.error("Empty InteractionList! Can't select interaction")
            return None

        index = self._draw_index(interactions, probe_p4)
        if index is None:
            return None

        selected_interaction = interactions[index].copy()
        selected_interaction.initial_state.set_probe_p4(probe_p4)
        _LOGGER.info(f"Interaction to generate:\n{selected_interaction}")

        event_record = EventRecord()
        event_record.attach_summary(selected_interaction)
        return event_record

    @abstractmethod
    def _draw_index(
        self, interactions: InteractionList, probe_p4: FourMomentum
    ) -> Optional[int]:
        """Draw the index of the interaction to select from a non-empty list."""


class UniformSelector(InteractionSelector):
    """Select each candidate with the same probability."""

    name = "uniform"

    def _draw_index(
        self, interactions: InteractionList, probe_p4: FourMomentum
    ) -> Optional[int]:
        return self.rng.integer(len(interactions))


class WeightedSelector(InteractionSelector):
    """Select candidates with a probability proportional to a weight.

    Args:
        rng: Random number service.
        weight: Function that computes the weight of a candidate for a given
            probe four-momentum, typically its cross section.
    """

    name = "weighted"

    def __init__(self, rng: RandomService, weight: WeightFunction) -> None:
        super().__init__(rng)
        self.__weight = weight

    def _draw_index(
        self, interactions: InteractionList, probe_p4: FourMomentum
    ) -> Optional[int]:
        weights = np.array(
            [self.__weight(i, probe_p4) for i in interactions], dtype=float
        )
        if not np.all(np.isfinite(weights)):
            _LOGGER.error(
                "InteractionList has non-finite weights!"
                " Can't select interaction"
            )
            return None
        if np.any(weights < 0):
            _LOGGER.warning("Negative weights are treated as zero")
            weights = np.clip(weights, 0.0, None)
        cumulative = np.cumsum(weights)
        total = cumulative[-1]
        if not total > 0:
            _LOGGER.error(
                "Total weight of the InteractionList is zero!"
                " Can't select interaction"
            )
            return None
        draw = self.rng.uniform() * total
        index = int(np.searchsorted(cumulative, draw, side="right"))
        return min(index, len(interactions) - 1)
