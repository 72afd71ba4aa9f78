"""Unit tests for settings."""
from __future__ import annotations

from pathlib import Path

import pytest

from checklist_metrics.config import (
    DEFAULT_GAUGE_COLORS,
    DEFAULT_RADAR_COLORS,
    MetricsConfig,
    load_config,
)
from checklist_metrics.errors import ConfigError
from checklist_metrics.model.nodes import PriorityTier


class TestMetricsConfig:
    def test_defaults(self) -> None:
        config = MetricsConfig()
        assert config.completion_key == "PSC_PROGRESS"
        assert config.ignore_key == "PSC_IGNORED"
        assert config.max_workers is None
        assert config.border_width == 1
        assert config.allow_collisions is False
        assert dict(config.radar_colors) == DEFAULT_RADAR_COLORS
        assert dict(config.gauge_colors) == DEFAULT_GAUGE_COLORS

    def test_from_mapping_overrides(self) -> None:
        config = MetricsConfig.from_mapping(
            {"completion_key": "done", "max_workers": 4, "allow_collisions": True}
        )
        assert config.completion_key == "done"
        assert config.max_workers == 4
        assert config.allow_collisions is True

    def test_colors_merge_over_defaults(self) -> None:
        config = MetricsConfig.from_mapping({"radar_colors": {"Advanced": "black"}})
        assert config.radar_colors[PriorityTier.ADVANCED] == "black"
        assert config.radar_colors[PriorityTier.OPTIONAL] == DEFAULT_RADAR_COLORS[PriorityTier.OPTIONAL]

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="colour"):
            MetricsConfig.from_mapping({"colour": "red"})

    def test_unknown_tier(self) -> None:
        with pytest.raises(ConfigError):
            MetricsConfig.from_mapping({"gauge_colors": {"essential": "red"}})

    @pytest.mark.parametrize("value", [-1, "4", True, 1.5])
    def test_bad_max_workers(self, value: object) -> None:
        with pytest.raises(ConfigError):
            MetricsConfig.from_mapping({"max_workers": value})

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ConfigError):
            MetricsConfig.from_mapping({"ignore_key": ""})


class TestLoadConfig:
    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.yml"
        path.write_text("max_workers: 2\nborder_width: 3\n", encoding="utf-8")
        config = load_config(path)
        assert config.max_workers == 2
        assert config.border_width == 3

    def test_empty_file_is_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == MetricsConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yml")

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.yml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)
