"""Core aggregation pipeline.

Pure functions over immutable catalogs and state snapshots.
Submodules in core/ should not import from catalog/, state/ or cli/.
"""
from __future__ import annotations

from checklist_metrics.core.filtering import filter_by_priority, matches_tier
from checklist_metrics.core.ids import normalize
from checklist_metrics.core.progress import aggregate, percentage
from checklist_metrics.core.radar import RadarBuilder, build_radar, section_percentage
from checklist_metrics.core.summary import summarize, summarize_tiers, tier_gauges

__all__ = [
    "normalize",
    "filter_by_priority",
    "matches_tier",
    "aggregate",
    "percentage",
    "RadarBuilder",
    "build_radar",
    "section_percentage",
    "summarize",
    "summarize_tiers",
    "tier_gauges",
]
