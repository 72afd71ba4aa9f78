"""checklist-metrics: completion metrics for prioritized checklists.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import checklist_metrics as cm

    catalog = cm.load_catalog("checklist.yml")
    state = cm.load_state("local-storage.json")

    # Headline totals
    total = cm.summarize(catalog, state)

    # One result per priority tier
    tiers = cm.summarize_tiers(catalog, state)

    # Per-section, per-tier percentages for a radar chart
    radar = cm.build_radar(catalog, state)

    cm.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from checklist_metrics.model.nodes import (
    ChecklistItem,
    PriorityTier,
    ProgressResult,
    RadarDataset,
    RadarSeries,
    Section,
    StateSnapshot,
    TierGauge,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from checklist_metrics.model.nodes import Catalog


def normalize(point: str) -> str:
    """Return the lookup id for an item's display text."""
    from checklist_metrics.core.ids import normalize as _normalize

    return _normalize(point)


def filter_by_priority(
    sections: Iterable[Section], tier: PriorityTier | str
) -> tuple[Section, ...]:
    """Restrict every section's checklist to items of ``tier``."""
    from checklist_metrics.core.filtering import filter_by_priority as _filter

    return _filter(sections, tier)


def aggregate(sections: Iterable[Section], state: StateSnapshot) -> ProgressResult:
    """Count completed and eligible items across ``sections``."""
    from checklist_metrics.core.progress import aggregate as _aggregate

    return _aggregate(sections, state)


def build_radar(
    sections: Iterable[Section], state: StateSnapshot, max_workers: int | None = None
) -> RadarDataset:
    """Build the per-section, per-tier radar dataset.

    Parameters
    ----------
    sections:
        Catalog sections; one radar axis each, in order.
    state:
        Snapshot of the completion and ignore stores.
    max_workers:
        Thread pool size for cell evaluation; ``None`` runs sequentially.

    Raises
    ------
    checklist_metrics.errors.RadarBuildError
        If any cell fails.
    """
    from checklist_metrics.core.radar import build_radar as _build_radar

    return _build_radar(sections, state, max_workers=max_workers)


def summarize(catalog: Iterable[Section], state: StateSnapshot) -> ProgressResult:
    """Return completed / eligible counts over the whole catalog."""
    from checklist_metrics.core.summary import summarize as _summarize

    return _summarize(catalog, state)


def summarize_tiers(
    catalog: Iterable[Section], state: StateSnapshot
) -> dict[PriorityTier, ProgressResult]:
    """Return one ``ProgressResult`` per priority tier."""
    from checklist_metrics.core.summary import summarize_tiers as _summarize_tiers

    return _summarize_tiers(catalog, state)


def load_catalog(path: Path | str, allow_collisions: bool = False) -> "Catalog":
    """Read a YAML or JSON catalog file.

    Raises
    ------
    checklist_metrics.errors.CatalogError
        If the file is unreadable, malformed, or has id collisions.
    """
    from checklist_metrics.catalog.loader import load_catalog as _load_catalog

    return _load_catalog(path, allow_collisions=allow_collisions)


def load_state(
    path: Path | str,
    completion_key: str = "PSC_PROGRESS",
    ignore_key: str = "PSC_IGNORED",
) -> StateSnapshot:
    """Read a dump of the completion and ignore stores.

    ``completion_key`` and ``ignore_key`` name the two stores inside the dump.

    Raises
    ------
    checklist_metrics.errors.StateStoreError
        If the file is unreadable or malformed.
    """
    from checklist_metrics.state.store import load_state as _load_state

    return _load_state(path, completion_key=completion_key, ignore_key=ignore_key)


__all__ = [
    "__version__",
    "ChecklistItem",
    "PriorityTier",
    "ProgressResult",
    "RadarDataset",
    "RadarSeries",
    "Section",
    "StateSnapshot",
    "TierGauge",
    "normalize",
    "filter_by_priority",
    "aggregate",
    "build_radar",
    "summarize",
    "summarize_tiers",
    "load_catalog",
    "load_state",
]
