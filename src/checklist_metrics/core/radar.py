"""Radar dataset assembly.

The radar chart has one axis per section and one series per priority
tier.  Each value is the completion percentage of that tier within that
section.  Cells are independent of each other: each reads only the
immutable section and state snapshot and writes to its own slot, so
they can be evaluated on a thread pool and joined afterwards.

Usage
-----
::

    from checklist_metrics.core.radar import RadarBuilder

    builder = RadarBuilder(max_workers=4)
    dataset = builder.build(catalog, state)
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Any

from checklist_metrics.core.filtering import filter_by_priority
from checklist_metrics.core.progress import aggregate
from checklist_metrics.errors import RadarBuildError
from checklist_metrics.model.nodes import (
    RADAR_ORDER,
    PriorityTier,
    RadarDataset,
    RadarSeries,
    Section,
    StateSnapshot,
)

logger = logging.getLogger(__name__)

Cell = tuple[PriorityTier, int]


def section_percentage(section: Section, tier: PriorityTier, state: StateSnapshot) -> float:
    """Return the completion percentage of ``tier`` items within ``section``."""
    progress = aggregate(filter_by_priority((section,), tier), state)
    return progress.percentage()


class RadarBuilder:
    """Builds a ``RadarDataset`` from sections and a state snapshot.

    Parameters
    ----------
    tiers:
        Series order.  Defaults to advanced, optional, recommended.
    colors:
        Optional fill color per tier.
    border_width:
        Stroke width applied to every series.
    extensions:
        Extra renderer options applied to every series.
    max_workers:
        Thread pool size for cell evaluation.  ``None`` or ``1`` evaluates
        cells sequentially in the calling thread.
    """

    def __init__(
        self,
        tiers: Iterable[PriorityTier] = RADAR_ORDER,
        colors: Mapping[PriorityTier, str] | None = None,
        border_width: int | None = 1,
        extensions: Mapping[str, Any] | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._tiers = tuple(tiers)
        self._colors = dict(colors or {})
        self._border_width = border_width
        self._extensions = dict(extensions or {})
        self._max_workers = max_workers

    def build(self, sections: Iterable[Section], state: StateSnapshot) -> RadarDataset:
        """Compute every (section, tier) cell and assemble the dataset.

        Raises
        ------
        RadarBuildError
            If any cell fails.  No partial dataset is returned.
        """
        sections = tuple(sections)
        cells: list[Cell] = [
            (tier, index) for tier in self._tiers for index in range(len(sections))
        ]
        if self._max_workers is not None and self._max_workers > 1 and len(cells) > 1:
            results = self._run_concurrent(sections, state, cells)
        else:
            results = self._run_sequential(sections, state, cells)

        series = tuple(
            RadarSeries(
                tier=tier,
                values=tuple(results[(tier, index)] for index in range(len(sections))),
                color=self._colors.get(tier),
                border_width=self._border_width,
                extensions=self._extensions,
            )
            for tier in self._tiers
        )
        return RadarDataset(labels=tuple(s.title for s in sections), series=series)

    # ------------------------------------------------------------------
    # Cell evaluation
    # ------------------------------------------------------------------

    def _run_sequential(
        self, sections: tuple[Section, ...], state: StateSnapshot, cells: list[Cell]
    ) -> dict[Cell, float]:
        results: dict[Cell, float] = {}
        for tier, index in cells:
            try:
                results[(tier, index)] = section_percentage(sections[index], tier, state)
            except Exception as exc:
                raise RadarBuildError(index, tier.value, exc) from exc
        return results

    def _run_concurrent(
        self, sections: tuple[Section, ...], state: StateSnapshot, cells: list[Cell]
    ) -> dict[Cell, float]:
        logger.debug(
            "Dispatching %d radar cells to %d workers", len(cells), self._max_workers
        )
        results: dict[Cell, float] = {}
        executor = ThreadPoolExecutor(max_workers=self._max_workers)
        try:
            futures: dict[Future[float], Cell] = {
                executor.submit(section_percentage, sections[index], tier, state): (tier, index)
                for tier, index in cells
            }
            for future in as_completed(futures):
                tier, index = futures[future]
                try:
                    results[(tier, index)] = future.result()
                except Exception as exc:
                    executor.shutdown(wait=True, cancel_futures=True)
                    raise RadarBuildError(index, tier.value, exc) from exc
        finally:
            executor.shutdown(wait=True)
        return results


def build_radar(
    sections: Iterable[Section],
    state: StateSnapshot,
    max_workers: int | None = None,
) -> RadarDataset:
    """Convenience function: build a radar dataset with default styling."""
    return RadarBuilder(max_workers=max_workers).build(sections, state)
