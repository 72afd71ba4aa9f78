"""Settings for checklist-metrics.

Settings are a frozen ``MetricsConfig``.  Build one from keyword
arguments, from a plain mapping, or from a YAML file::

    # metrics.yml
    completion_key: PSC_PROGRESS
    ignore_key: PSC_IGNORED
    max_workers: 4
    radar_colors:
      advanced: "hsl(0 91% 71%/75%)"
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from checklist_metrics.errors import ConfigError
from checklist_metrics.model.nodes import PriorityTier

logger = logging.getLogger(__name__)

DEFAULT_GAUGE_COLORS: dict[PriorityTier, str] = {
    PriorityTier.RECOMMENDED: "hsl(var(--su, 158 64% 52%))",
    PriorityTier.OPTIONAL: "hsl(var(--wa, 43 96% 56%))",
    PriorityTier.ADVANCED: "hsl(var(--er, 0 91% 71%))",
}

DEFAULT_RADAR_COLORS: dict[PriorityTier, str] = {
    PriorityTier.ADVANCED: "hsl(0 91% 71%/75%)",
    PriorityTier.OPTIONAL: "hsl(43 96% 56%/75%)",
    PriorityTier.RECOMMENDED: "hsl(158 64% 52%/75%)",
}


@dataclass(frozen=True)
class MetricsConfig:
    """Pipeline and hand-off settings.

    Parameters
    ----------
    completion_key:
        Key of the completion store inside a state dump.
    ignore_key:
        Key of the ignore store inside a state dump.
    max_workers:
        Radar thread pool size; ``None`` or ``1`` runs sequentially.
    border_width:
        Stroke width for every radar series.
    gauge_colors:
        Color per tier for single-tier gauges.
    radar_colors:
        Fill color per tier for radar series.
    allow_collisions:
        Accept catalogs in which distinct items share a normalized id.
    """

    completion_key: str = "PSC_PROGRESS"
    ignore_key: str = "PSC_IGNORED"
    max_workers: int | None = None
    border_width: int = 1
    gauge_colors: Mapping[PriorityTier, str] = field(
        default_factory=lambda: dict(DEFAULT_GAUGE_COLORS)
    )
    radar_colors: Mapping[PriorityTier, str] = field(
        default_factory=lambda: dict(DEFAULT_RADAR_COLORS)
    )
    allow_collisions: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MetricsConfig":
        """Build a config from a plain mapping, e.g. decoded YAML.

        Color mappings are merged over the defaults, so a file may
        override a single tier.

        Raises
        ------
        ConfigError
            On unknown keys, unknown tiers, or wrongly typed values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

        config = cls()
        updates: dict[str, Any] = {}
        for key, value in data.items():
            if key in ("gauge_colors", "radar_colors"):
                merged = dict(getattr(config, key))
                merged.update(_parse_colors(key, value))
                updates[key] = merged
            elif key in ("max_workers", "border_width"):
                if value is None and key == "max_workers":
                    updates[key] = None
                elif isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
                else:
                    updates[key] = value
            elif key == "allow_collisions":
                if not isinstance(value, bool):
                    raise ConfigError(f"allow_collisions must be a boolean, got {value!r}")
                updates[key] = value
            else:
                if not isinstance(value, str) or not value:
                    raise ConfigError(f"{key} must be a non-empty string, got {value!r}")
                updates[key] = value
        return replace(config, **updates)


def _parse_colors(key: str, value: Any) -> dict[PriorityTier, str]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"{key} must be a mapping of tier to color")
    colors: dict[PriorityTier, str] = {}
    for raw_tier, color in value.items():
        tier = PriorityTier.parse(str(raw_tier))
        if tier is None:
            raise ConfigError(f"{key}: unknown priority tier {raw_tier!r}")
        colors[tier] = str(color)
    return colors


def load_config(path: Path | str) -> MetricsConfig:
    """Load a ``MetricsConfig`` from a YAML file.

    An empty file yields the defaults.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid YAML, or is invalid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config {str(path)!r}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {str(path)!r}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Config {str(path)!r} must contain a mapping")
    logger.debug("Loaded config from %s: %s", path, sorted(data))
    return MetricsConfig.from_mapping(data)
