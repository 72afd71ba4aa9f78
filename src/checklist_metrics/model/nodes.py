"""Value types for checklist catalogs, persisted state, and computed metrics.

Every type here is a frozen dataclass so that catalogs, snapshots and
results are immutable and hashable.  Mapping fields are read-only views
and take no part in the hash.  The pipeline never mutates its inputs;
each computation returns fresh value objects.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


# ---------------------------------------------------------------------------
# Priority tiers
# ---------------------------------------------------------------------------


class PriorityTier(Enum):
    """Importance classification of a checklist item."""

    RECOMMENDED = "recommended"
    OPTIONAL = "optional"
    ADVANCED = "advanced"

    @property
    def label(self) -> str:
        """Return the capitalised display label, e.g. ``"Recommended"``."""
        return self.value[:1].upper() + self.value[1:]

    @classmethod
    def parse(cls, value: "str | PriorityTier") -> "PriorityTier | None":
        """Return the tier matching ``value``, or ``None`` if unrecognized.

        Matching uses the same lower-case, space-to-hyphen rule as item
        ids, so ``"Recommended"`` and ``"recommended"`` are equivalent.
        """
        if isinstance(value, PriorityTier):
            return value
        from checklist_metrics.core.ids import normalize

        key = normalize(value)
        for tier in cls:
            if tier.value == key:
                return tier
        return None


# Radar series order.  Presentation only; values do not depend on it.
RADAR_ORDER: tuple[PriorityTier, ...] = (
    PriorityTier.ADVANCED,
    PriorityTier.OPTIONAL,
    PriorityTier.RECOMMENDED,
)

# Gauge order, as laid out on the dashboard.
GAUGE_ORDER: tuple[PriorityTier, ...] = (
    PriorityTier.RECOMMENDED,
    PriorityTier.OPTIONAL,
    PriorityTier.ADVANCED,
)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ChecklistItem:
    """A single checklist point.

    Parameters
    ----------
    point:
        Display text of the item.  Its normalized form is the lookup key
        into the completion and ignore stores.
    priority:
        Raw priority string as it appears in the catalog.  Kept verbatim
        so that unrecognized priorities survive loading.
    details:
        Optional longer description.
    """

    point: str
    priority: str
    details: str | None = field(default=None, compare=False)

    @property
    def id(self) -> str:
        """Return the normalized id for this item."""
        from checklist_metrics.core.ids import normalize

        return normalize(self.point)

    @property
    def tier(self) -> PriorityTier | None:
        """Return the parsed tier, or ``None`` for an unknown priority."""
        return PriorityTier.parse(self.priority)


@dataclass(frozen=True, slots=True)
class Section:
    """A titled group of checklist items; one radar axis."""

    title: str
    checklist: tuple[ChecklistItem, ...] = ()
    slug: str | None = field(default=None, compare=False)
    description: str | None = field(default=None, compare=False)

    @property
    def item_count(self) -> int:
        return len(self.checklist)


Catalog = tuple[Section, ...]


# ---------------------------------------------------------------------------
# Persisted state
# ---------------------------------------------------------------------------


def _freeze(flags: Mapping[str, Any] | None) -> Mapping[str, bool]:
    return MappingProxyType({str(k): bool(v) for k, v in (flags or {}).items()})


@dataclass(frozen=True, slots=True)
class StateSnapshot:
    """Read-only view of the completion and ignore stores.

    Keys are normalized item ids.  An absent key means ``False``.
    """

    completed: Mapping[str, bool] = field(default_factory=dict, hash=False)
    ignored: Mapping[str, bool] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "completed", _freeze(self.completed))
        object.__setattr__(self, "ignored", _freeze(self.ignored))

    @classmethod
    def empty(cls) -> "StateSnapshot":
        """Return a snapshot in which nothing is completed or ignored."""
        return cls()

    def is_completed(self, item_id: str) -> bool:
        return self.completed.get(item_id, False)

    def is_ignored(self, item_id: str) -> bool:
        return self.ignored.get(item_id, False)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ProgressResult:
    """Completed versus eligible item counts.

    ``completed <= out_of`` normally holds, but an item that is both
    completed and ignored is counted in ``completed`` and removed from
    ``out_of``, so ``completed`` can exceed ``out_of``.
    """

    completed: int = 0
    out_of: int = 0

    def percentage(self) -> float:
        """Return ``completed / out_of * 100``, or ``0.0`` when ``out_of <= 0``."""
        if self.out_of <= 0:
            return 0.0
        return self.completed / self.out_of * 100

    def rounded_percentage(self) -> int:
        """Return the percentage rounded half-up to an int, as gauges show it."""
        return int(self.percentage() + 0.5)

    @property
    def remaining(self) -> int:
        return max(self.out_of - self.completed, 0)


@dataclass(frozen=True, slots=True)
class RadarSeries:
    """One tier's values across every section.

    Parameters
    ----------
    tier:
        The priority tier this series describes.
    values:
        Completion percentages (0-100), aligned with ``RadarDataset.labels``.
    label:
        Legend label; defaults to the tier's display label.
    color:
        Fill color handed to the renderer.
    border_width:
        Stroke width handed to the renderer.
    extensions:
        Extra renderer options, merged verbatim into the exported series.
    """

    tier: PriorityTier
    values: tuple[float, ...]
    label: str = ""
    color: str | None = None
    border_width: int | None = None
    extensions: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.tier.label)
        object.__setattr__(self, "extensions", MappingProxyType(dict(self.extensions)))


@dataclass(frozen=True, slots=True)
class RadarDataset:
    """Multi-axis dataset: one label per section, one series per tier."""

    labels: tuple[str, ...] = ()
    series: tuple[RadarSeries, ...] = ()

    def series_for(self, tier: PriorityTier) -> RadarSeries:
        """Return the series for ``tier``.

        Raises
        ------
        KeyError
            If the dataset has no series for ``tier``.
        """
        for series in self.series:
            if series.tier is tier:
                return series
        raise KeyError(tier)


# Gauge captions shown under each single-tier chart.
GAUGE_LABELS: dict[PriorityTier, str] = {
    PriorityTier.RECOMMENDED: "Essential",
    PriorityTier.OPTIONAL: "Optional",
    PriorityTier.ADVANCED: "Advanced",
}


@dataclass(frozen=True, slots=True)
class TierGauge:
    """Single-gauge hand-off: one tier's progress plus render hints."""

    tier: PriorityTier
    progress: ProgressResult
    target: str = ""
    color: str | None = None
    label: str = ""

    def __post_init__(self) -> None:
        if not self.target:
            object.__setattr__(self, "target", f"#{self.tier.value}-container")
        if not self.label:
            object.__setattr__(self, "label", GAUGE_LABELS[self.tier])

    @property
    def percent(self) -> int:
        return self.progress.rounded_percentage()
