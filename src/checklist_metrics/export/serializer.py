"""Renderer hand-off: convert computed metrics to plain data.

The radar dataset is emitted in the shape Chart.js expects for a radar
chart (``labels`` plus ``datasets``); gauges carry their target element
id and color.  Formatting, animation and drawing belong to the renderer.

Usage
-----
::

    from checklist_metrics.export import DashboardSerializer

    serializer = DashboardSerializer()
    payload = serializer.to_json(dashboard)
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from checklist_metrics.dashboard import Dashboard
from checklist_metrics.model.nodes import ProgressResult, RadarDataset, RadarSeries, TierGauge


class DashboardSerializer:
    """Converts dashboard values into JSON-compatible dicts."""

    def progress_to_dict(self, progress: ProgressResult) -> dict[str, Any]:
        return {
            "completed": progress.completed,
            "outOf": progress.out_of,
            "percent": progress.rounded_percentage(),
        }

    def gauge_to_dict(self, gauge: TierGauge) -> dict[str, Any]:
        data: dict[str, Any] = {
            "tier": gauge.tier.value,
            "label": gauge.label,
            "target": gauge.target,
            "color": gauge.color,
        }
        data.update(self.progress_to_dict(gauge.progress))
        return data

    def series_to_dict(self, series: RadarSeries) -> dict[str, Any]:
        data: dict[str, Any] = dict(series.extensions)
        data["label"] = series.label
        data["data"] = list(series.values)
        if series.color is not None:
            data["backgroundColor"] = series.color
        if series.border_width is not None:
            data["borderWidth"] = series.border_width
        return data

    def radar_to_dict(self, radar: RadarDataset) -> dict[str, Any]:
        return {
            "labels": list(radar.labels),
            "datasets": [self.series_to_dict(s) for s in radar.series],
        }

    def to_dict(self, dashboard: Dashboard) -> dict[str, Any]:
        """Serialize a whole ``Dashboard``."""
        return {
            "summary": self.progress_to_dict(dashboard.summary),
            "tiers": [self.gauge_to_dict(g) for g in dashboard.tiers],
            "radar": self.radar_to_dict(dashboard.radar),
        }

    def to_json(self, dashboard: Dashboard, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(dashboard), indent=indent)

    def to_yaml(self, dashboard: Dashboard) -> str:
        return yaml.safe_dump(self.to_dict(dashboard), sort_keys=False)
