"""Channel enumeration and interaction selection for neutrino event generators.

The responsibility of `evgcore` is to determine which reaction channels are
possible for a probe hitting a target, and to pick the one that seeds an event.

`evgcore` consists of the following components:

  `evgcore.particle`
    ― tables of particle properties (from the PDG) and of known isotopes.

  `evgcore.interaction`
    ― the data model: `.Target`, `.InitialState`, `.ProcessInfo`,
    `.ExclusiveTag` and `.Interaction`.

  `evgcore.reaction`
    ― the core of `evgcore`: generators that enumerate the candidate
    interactions for an initial state, and selectors that pick one of them and
    put it into an `.EventRecord`.

Finally, the `.io` module reads configuration files and `.driver` runs
enumeration and selection for a number of events.
"""


__all__ = [
    # Main modules
    "interaction",
    "io",
    "particle",
    "reaction",
    # Facade functions
    "generate_events",
    "load_default_particles",
]


from . import interaction, io, particle, reaction
from .driver import generate_events
from .particle import load_default_particles
