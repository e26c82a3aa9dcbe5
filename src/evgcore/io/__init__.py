"""Configuration files for `evgcore`.

A configuration is a YAML (or JSON) file that lists the generators to run and
the selector with which to pick interactions, for instance:

.. code-block:: yaml

    seed: 42
    selector: uniform
    generators:
      - algorithm: single-pion-production
        is-CC: true
      - algorithm: diffractive

The file is validated against :download:`validation.json
</../src/evgcore/io/validation.json>`.
"""

import json
from os.path import dirname, realpath
from typing import Any, Callable, List, Optional

import jsonschema
import yaml

from evgcore.reaction import (
    InteractionListGenerator,
    InteractionSelector,
    create_generator,
    create_selector,
)
from evgcore.rng import RandomService


def load_config(filename: str) -> dict:
    with open(filename) as stream:
        file_extension = _get_file_extension(filename)
        if file_extension == "json":
            definition = json.load(stream)
        elif file_extension in ["yaml", "yml"]:
            definition = yaml.load(stream, Loader=yaml.SafeLoader)
        else:
            raise NotImplementedError(
                f'No loader defined for file type "{file_extension}"'
            )
    validate_config(definition)
    return definition


def validate_config(instance: dict) -> None:
    jsonschema.validate(instance=instance, schema=__SCHEMA_CONFIG)


def build_generators(definition: dict) -> List[InteractionListGenerator]:
    generators = []
    for generator_def in definition["generators"]:
        options = dict(generator_def)
        name = options.pop("algorithm")
        generators.append(create_generator(name, options))
    return generators


def build_selector(
    definition: dict,
    rng: Optional[RandomService] = None,
    weight: Optional[Callable[..., float]] = None,
) -> InteractionSelector:
    """Create the selector of a configuration, ``uniform`` by default.

    If no random number service is given, one is created with the
    :code:`seed` of the configuration.
    """
    if rng is None:
        rng = RandomService(seed=definition.get("seed"))
    name = definition.get("selector", "uniform")
    kwargs: dict = {}
    if weight is not None:
        kwargs["weight"] = weight
    return create_selector(name, rng, **kwargs)


def _get_file_extension(filename: str) -> str:
    return filename.lower().split(".")[-1]


def _load_schema() -> Any:
    with open(f"{dirname(realpath(__file__))}/validation.json") as stream:
        return json.load(stream)


__SCHEMA_CONFIG = _load_schema()
