"""Drive enumeration and selection over a number of events."""

import logging
from typing import List, Optional, Sequence

from tqdm.auto import tqdm

from evgcore.interaction import InitialState
from evgcore.kinematics import FourMomentum
from evgcore.reaction import (
    EnumerationStatus,
    EventRecord,
    InteractionList,
    InteractionListGenerator,
    InteractionSelector,
)

_LOGGER = logging.getLogger(__name__)


def merge_interaction_lists(
    initial_state: InitialState,
    generators: Sequence[InteractionListGenerator],
) -> Optional[InteractionList]:
    """Collect the candidates of several generators into one list.

    Generators that do not model the initial state or have no viable channel
    are skipped. Returns `None` if no generator contributes any candidate.
    """
    merged = InteractionList()
    for generator in generators:
        result = generator.enumerate(initial_state)
        if result.status == EnumerationStatus.CHANNELS:
            merged.extend(result.interactions)
    if len(merged) == 0:
        return None
    return merged


def generate_events(  # pylint: disable=too-many-arguments
    initial_state: InitialState,
    generators: Sequence[InteractionListGenerator],
    selector: InteractionSelector,
    probe_p4: FourMomentum,
    n_events: int,
    progress: bool = True,
) -> List[EventRecord]:
    """Generate event records for a fixed initial state.

    The candidate interactions are enumerated once, since enumeration only
    depends on the initial state. An event for which no interaction can be
    selected is skipped, so fewer than :code:`n_events` records can be
    returned.
    """
    interactions = merge_interaction_lists(initial_state, generators)
    if interactions is None:
        _LOGGER.error(
            "No generator produced candidates for init-state"
            f" {initial_state.as_string()}, skipping all events"
        )
        return []
    event_records: List[EventRecord] = []
    progress_bar = tqdm(
        total=n_events,
        desc="Selecting interactions",
        disable=not progress or logging.getLogger().level > logging.WARNING,
    )
    for _ in range(n_events):
        event_record = selector.select_interaction(interactions, probe_p4)
        if event_record is not None:
            event_records.append(event_record)
        progress_bar.update()
    progress_bar.close()
    n_skipped = n_events - len(event_records)
    if n_skipped:
        _LOGGER.warning(f"Skipped {n_skipped} of {n_events} events")
    return event_records
