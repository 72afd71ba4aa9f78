"""Progress counting over catalog sections."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from checklist_metrics.core.ids import normalize
from checklist_metrics.model.nodes import ProgressResult, Section, StateSnapshot

logger = logging.getLogger(__name__)


def aggregate(sections: Iterable[Section], state: StateSnapshot) -> ProgressResult:
    """Count completed and eligible items across ``sections``.

    ``out_of`` starts at the total number of items.  For every item, a
    true completion flag increments ``completed`` and, independently, a
    true ignore flag decrements ``out_of``.  An item that is both
    completed and ignored does both, so ``completed`` may exceed
    ``out_of``.

    Parameters
    ----------
    sections:
        Sections whose checklists are counted.
    state:
        Snapshot of the completion and ignore stores.

    Returns
    -------
    ProgressResult
        ``ProgressResult(0, 0)`` for no sections or no items.
    """
    sections = tuple(sections)
    out_of = sum(len(section.checklist) for section in sections)
    completed = 0
    for section in sections:
        for item in section.checklist:
            item_id = normalize(item.point)
            if state.is_completed(item_id):
                completed += 1
            if state.is_ignored(item_id):
                out_of -= 1
    if completed > out_of:
        logger.debug(
            "Completed count %d exceeds eligible count %d; "
            "some items are both completed and ignored",
            completed,
            out_of,
        )
    return ProgressResult(completed=completed, out_of=out_of)


def percentage(progress: ProgressResult) -> float:
    """Return the completion percentage, treating ``out_of == 0`` as 0%."""
    return progress.percentage()
