"""Value types for checklist-metrics.

Re-exports every node type from ``checklist_metrics.model.nodes``.
"""
from __future__ import annotations

from checklist_metrics.model.nodes import (
    GAUGE_LABELS,
    GAUGE_ORDER,
    RADAR_ORDER,
    Catalog,
    ChecklistItem,
    PriorityTier,
    ProgressResult,
    RadarDataset,
    RadarSeries,
    Section,
    StateSnapshot,
    TierGauge,
)

__all__ = [
    "Catalog",
    "ChecklistItem",
    "GAUGE_LABELS",
    "GAUGE_ORDER",
    "PriorityTier",
    "ProgressResult",
    "RADAR_ORDER",
    "RadarDataset",
    "RadarSeries",
    "Section",
    "StateSnapshot",
    "TierGauge",
]
