"""One-shot dashboard pass, gated on all inputs being loaded.

The pipeline must not run against a partially loaded store: that would
under-count completion.  ``DashboardSession`` collects the catalog and
both stores as they arrive and refuses to compute until all three are
present.

Usage
-----
::

    session = DashboardSession()
    session.set_catalog(load_catalog("checklist.yml"))
    session.set_completion(progress_flags)
    session.set_ignored(ignored_flags)
    if session.is_ready:
        dashboard = session.compute()
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from checklist_metrics.config import MetricsConfig
from checklist_metrics.core.radar import RadarBuilder
from checklist_metrics.core.summary import summarize, tier_gauges
from checklist_metrics.errors import DataNotReadyError
from checklist_metrics.model.nodes import (
    Catalog,
    ProgressResult,
    RadarDataset,
    Section,
    StateSnapshot,
    TierGauge,
)
from checklist_metrics.state.store import snapshot_from_mappings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dashboard:
    """Everything the renderer needs for one pass."""

    summary: ProgressResult
    tiers: tuple[TierGauge, ...]
    radar: RadarDataset


def build_dashboard(
    catalog: Iterable[Section],
    state: StateSnapshot,
    config: MetricsConfig | None = None,
) -> Dashboard:
    """Compute headline totals, per-tier gauges and the radar dataset."""
    config = config or MetricsConfig()
    catalog = tuple(catalog)
    builder = RadarBuilder(
        colors=config.radar_colors,
        border_width=config.border_width,
        max_workers=config.max_workers,
    )
    return Dashboard(
        summary=summarize(catalog, state),
        tiers=tier_gauges(catalog, state, colors=config.gauge_colors),
        radar=builder.build(catalog, state),
    )


class DashboardSession:
    """Collects pipeline inputs and runs the pipeline once all are loaded.

    Parameters
    ----------
    config:
        Settings for the computed dashboard.
    """

    def __init__(self, config: MetricsConfig | None = None) -> None:
        self._config = config or MetricsConfig()
        self._catalog: Catalog | None = None
        self._completed: dict[str, Any] | None = None
        self._ignored: dict[str, Any] | None = None

    def set_catalog(self, catalog: Iterable[Section]) -> None:
        self._catalog = tuple(catalog)

    def set_completion(self, flags: Mapping[str, Any]) -> None:
        self._completed = dict(flags)

    def set_ignored(self, flags: Mapping[str, Any]) -> None:
        self._ignored = dict(flags)

    @property
    def missing(self) -> tuple[str, ...]:
        """Names of inputs that have not been loaded yet."""
        pending = (
            ("catalog", self._catalog),
            ("completion", self._completed),
            ("ignored", self._ignored),
        )
        return tuple(name for name, value in pending if value is None)

    @property
    def is_ready(self) -> bool:
        return not self.missing

    def compute(self) -> Dashboard:
        """Run the pipeline over a snapshot of the loaded inputs.

        Raises
        ------
        DataNotReadyError
            If any input is still missing.
        """
        missing = self.missing
        if missing:
            raise DataNotReadyError(missing)
        catalog: Catalog = self._catalog or ()
        state = snapshot_from_mappings(self._completed, self._ignored)
        logger.debug("Computing dashboard over %d section(s)", len(catalog))
        return build_dashboard(catalog, state, self._config)
