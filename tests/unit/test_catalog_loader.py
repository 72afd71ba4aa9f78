"""Unit tests for the catalog loader."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from checklist_metrics.catalog.loader import find_collisions, load_catalog, parse_catalog
from checklist_metrics.errors import CatalogError, CatalogUnavailableError, DuplicateItemIdError
from checklist_metrics.model.nodes import ChecklistItem, Section

_YAML = """\
sections:
  - title: Authentication
    slug: authentication
    description: Keep accounts safe
    checklist:
      - point: Use a Strong Password
        priority: Recommended
        details: Long and unique
      - point: Use a Hardware Key
        priority: Advanced
  - title: Networking
"""


class TestLoadCatalog:
    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "checklist.yml"
        path.write_text(_YAML, encoding="utf-8")
        catalog = load_catalog(path)
        assert [s.title for s in catalog] == ["Authentication", "Networking"]
        assert catalog[0].slug == "authentication"
        assert catalog[0].checklist[0] == ChecklistItem("Use a Strong Password", "Recommended")
        assert catalog[0].checklist[0].details == "Long and unique"
        assert catalog[1].checklist == ()

    def test_json_list(self, tmp_path: Path) -> None:
        path = tmp_path / "checklist.json"
        path.write_text(
            json.dumps([{"title": "Auth", "checklist": [{"point": "Use MFA", "priority": "recommended"}]}]),
            encoding="utf-8",
        )
        catalog = load_catalog(str(path))
        assert catalog == (
            Section(title="Auth", checklist=(ChecklistItem("Use MFA", "recommended"),)),
        )

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogUnavailableError) as exc_info:
            load_catalog(tmp_path / "missing.yml")
        assert exc_info.value.path.name == "missing.yml"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_empty_yaml_is_empty_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_catalog(path) == ()

    def test_empty_json_is_empty_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("  \n", encoding="utf-8")
        assert load_catalog(path) == ()


class TestParseCatalog:
    def test_none(self) -> None:
        assert parse_catalog(None) == ()

    def test_mapping_without_sections(self) -> None:
        assert parse_catalog({}) == ()

    def test_unknown_priority_is_kept(self) -> None:
        catalog = parse_catalog([{"title": "S", "checklist": [{"point": "X", "priority": "essential"}]}])
        assert catalog[0].checklist[0].priority == "essential"

    def test_not_a_list(self) -> None:
        with pytest.raises(CatalogError):
            parse_catalog("sections")

    def test_section_without_title(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_catalog([{"checklist": []}])
        assert exc_info.value.location == "sections[0]"

    def test_item_without_priority(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_catalog([{"title": "S", "checklist": [{"point": "X"}]}])
        assert exc_info.value.location == "sections[0].checklist[0]"

    def test_checklist_not_a_list(self) -> None:
        with pytest.raises(CatalogError):
            parse_catalog([{"title": "S", "checklist": "nope"}])


_COLLIDING = [
    {"title": "A", "checklist": [{"point": "Use MFA", "priority": "recommended"}]},
    {"title": "B", "checklist": [{"point": "use mfa", "priority": "optional"}]},
]


class TestCollisions:
    def test_rejected_at_load_time(self) -> None:
        with pytest.raises(DuplicateItemIdError) as exc_info:
            parse_catalog(_COLLIDING)
        assert exc_info.value.collisions == {"use-mfa": ("Use MFA", "use mfa")}

    def test_allowed_items_share_state(self) -> None:
        from checklist_metrics.core.progress import aggregate
        from checklist_metrics.model.nodes import StateSnapshot

        catalog = parse_catalog(_COLLIDING, allow_collisions=True)
        result = aggregate(catalog, StateSnapshot(completed={"use-mfa": True}))
        assert result.completed == 2
        assert result.out_of == 2

    def test_same_text_twice_is_not_a_collision(self) -> None:
        data = [
            {"title": "A", "checklist": [{"point": "Use MFA", "priority": "recommended"}]},
            {"title": "B", "checklist": [{"point": "Use MFA", "priority": "recommended"}]},
        ]
        assert len(parse_catalog(data)) == 2

    def test_find_collisions_empty(self, catalog: tuple[Section, ...]) -> None:
        assert find_collisions(catalog) == {}
