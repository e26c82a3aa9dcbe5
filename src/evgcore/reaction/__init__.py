"""Enumeration and selection of candidate interactions.

This is the core of `evgcore`. For a given `.InitialState`, an
`.InteractionListGenerator` enumerates the channels of an interaction family
that are allowed by the nucleon content of the target. An
`.InteractionSelector` then picks one of these candidates and turns it into an
`.EventRecord`, the starting point of the downstream event generation.
"""

__all__ = [
    "DiffractiveGenerator",
    "EnumerationResult",
    "EnumerationStatus",
    "EventRecord",
    "InteractionList",
    "InteractionListGenerator",
    "InteractionSelector",
    "SinglePionProductionGenerator",
    "SppChannel",
    "UniformSelector",
    "WeightedSelector",
    "create_generator",
    "create_selector",
]

from .channels import SppChannel
from .default_settings import create_generator, create_selector
from .generators import (
    DiffractiveGenerator,
    EnumerationResult,
    EnumerationStatus,
    InteractionList,
    InteractionListGenerator,
    SinglePionProductionGenerator,
)
from .selectors import (
    EventRecord,
    InteractionSelector,
    UniformSelector,
    WeightedSelector,
)
