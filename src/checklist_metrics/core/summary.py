"""Headline and per-tier progress."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from checklist_metrics.core.filtering import filter_by_priority
from checklist_metrics.core.progress import aggregate
from checklist_metrics.model.nodes import (
    GAUGE_ORDER,
    PriorityTier,
    ProgressResult,
    Section,
    StateSnapshot,
    TierGauge,
)


def summarize(catalog: Iterable[Section], state: StateSnapshot) -> ProgressResult:
    """Return completed / eligible counts over the whole, unfiltered catalog.

    Items with an unrecognized priority are counted here even though no
    tier view includes them.
    """
    return aggregate(catalog, state)


def summarize_tiers(
    catalog: Iterable[Section],
    state: StateSnapshot,
    tiers: Iterable[PriorityTier] = GAUGE_ORDER,
) -> dict[PriorityTier, ProgressResult]:
    """Return one ``ProgressResult`` per tier, in ``tiers`` order."""
    catalog = tuple(catalog)
    return {tier: aggregate(filter_by_priority(catalog, tier), state) for tier in tiers}


def tier_gauges(
    catalog: Iterable[Section],
    state: StateSnapshot,
    colors: Mapping[PriorityTier, str] | None = None,
    tiers: Iterable[PriorityTier] = GAUGE_ORDER,
) -> tuple[TierGauge, ...]:
    """Return single-gauge hand-offs for each tier."""
    colors = colors or {}
    return tuple(
        TierGauge(tier=tier, progress=progress, color=colors.get(tier))
        for tier, progress in summarize_tiers(catalog, state, tiers).items()
    )
