"""Registry of the generator and selector algorithms.

Algorithms are looked up by the name under which they appear in a
configuration file (see `evgcore.io`). Some have a short alias as well.
"""

from typing import Any, Dict, Mapping, Optional, Type

from evgcore.rng import RandomService

from .generators import (
    DiffractiveGenerator,
    InteractionListGenerator,
    SinglePionProductionGenerator,
)
from .selectors import InteractionSelector, UniformSelector, WeightedSelector

GENERATORS: Dict[str, Type[InteractionListGenerator]] = {
    SinglePionProductionGenerator.name: SinglePionProductionGenerator,
    DiffractiveGenerator.name: DiffractiveGenerator,
}
SELECTORS: Dict[str, Type[InteractionSelector]] = {
    UniformSelector.name: UniformSelector,
    WeightedSelector.name: WeightedSelector,
}

__ALIASES = {
    "rspp": SinglePionProductionGenerator.name,
    "dfrc": DiffractiveGenerator.name,
    "toy": UniformSelector.name,
}


def _resolve_name(name: str) -> str:
    name = name.lower()
    return __ALIASES.get(name, name)


def create_generator(
    name: str, config: Optional[Mapping[str, Any]] = None
) -> InteractionListGenerator:
    """Create a configured `.InteractionListGenerator` by name.

    >>> generator = create_generator("RSPP", {"is-CC": True})
    >>> generator.name
    'single-pion-production'
    """
    algorithm_name = _resolve_name(name)
    if algorithm_name not in GENERATORS:
        raise ValueError(
            f'No generator with name "{name}". Choose one of'
            f" {sorted(GENERATORS)}"
        )
    return GENERATORS[algorithm_name](config)


def create_selector(
    name: str, rng: RandomService, **kwargs: Any
) -> InteractionSelector:
    """Create an `.InteractionSelector` by name.

    Additional keyword arguments are forwarded to the selector, for instance
    the :code:`weight` function of a `.WeightedSelector`.
    """
    algorithm_name = _resolve_name(name)
    if algorithm_name not in SELECTORS:
        raise ValueError(
            f'No selector with name "{name}". Choose one of'
            f" {sorted(SELECTORS)}"
        )
    return SELECTORS[algorithm_name](rng, **kwargs)  # type: ignore
