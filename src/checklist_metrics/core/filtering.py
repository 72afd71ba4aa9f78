"""Priority filtering of catalog sections."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from checklist_metrics.core.ids import normalize
from checklist_metrics.model.nodes import ChecklistItem, PriorityTier, Section


def matches_tier(item: ChecklistItem, tier: PriorityTier | str) -> bool:
    """Return True if the item's priority normalizes to ``tier``.

    An item whose priority is not one of the known tiers never matches.
    """
    target = tier.value if isinstance(tier, PriorityTier) else normalize(tier)
    return normalize(item.priority) == target


def filter_by_priority(
    sections: Iterable[Section], tier: PriorityTier | str
) -> tuple[Section, ...]:
    """Restrict every section's checklist to items of ``tier``.

    Section count and order are preserved, including sections left with
    an empty checklist.  The input sections are not modified.

    Parameters
    ----------
    sections:
        Sections to filter.
    tier:
        The tier to keep, as a ``PriorityTier`` or a raw string.

    Returns
    -------
    tuple[Section, ...]
        New sections with the same titles and filtered checklists.
    """
    return tuple(
        replace(
            section,
            checklist=tuple(item for item in section.checklist if matches_tier(item, tier)),
        )
        for section in sections
    )
