"""Unit tests for priority filtering."""
from __future__ import annotations

import pytest

from checklist_metrics.core.filtering import filter_by_priority, matches_tier
from checklist_metrics.model.nodes import ChecklistItem, PriorityTier, Section


def _item(point: str, priority: str) -> ChecklistItem:
    return ChecklistItem(point=point, priority=priority)


class TestMatchesTier:
    def test_exact_match(self) -> None:
        assert matches_tier(_item("A", "recommended"), PriorityTier.RECOMMENDED)

    def test_case_insensitive(self) -> None:
        assert matches_tier(_item("A", "ADVANCED"), PriorityTier.ADVANCED)

    def test_string_tier(self) -> None:
        assert matches_tier(_item("A", "Optional"), "optional")

    def test_other_tier_does_not_match(self) -> None:
        assert not matches_tier(_item("A", "optional"), PriorityTier.RECOMMENDED)

    def test_unknown_priority_matches_nothing(self) -> None:
        item = _item("A", "essential")
        assert not any(matches_tier(item, tier) for tier in PriorityTier)

    def test_spaces_in_priority_are_normalized(self) -> None:
        item = _item("A", "Very Advanced")
        assert matches_tier(item, "very advanced")
        assert not matches_tier(item, PriorityTier.ADVANCED)


class TestFilterByPriority:
    def test_keeps_only_matching_items(self, auth_sections: tuple[Section, ...]) -> None:
        result = filter_by_priority(auth_sections, PriorityTier.RECOMMENDED)
        assert len(result) == 1
        assert [i.point for i in result[0].checklist] == ["Use MFA"]

    def test_preserves_title(self, auth_sections: tuple[Section, ...]) -> None:
        result = filter_by_priority(auth_sections, "optional")
        assert result[0].title == "Auth"

    @pytest.mark.parametrize("tier", list(PriorityTier))
    def test_section_count_preserved(
        self, catalog: tuple[Section, ...], tier: PriorityTier
    ) -> None:
        result = filter_by_priority(catalog, tier)
        assert len(result) == len(catalog)
        assert [s.title for s in result] == [s.title for s in catalog]
        for filtered, original in zip(result, catalog):
            assert len(filtered.checklist) <= len(original.checklist)

    def test_empty_checklists_are_kept(self, catalog: tuple[Section, ...]) -> None:
        result = filter_by_priority(catalog, PriorityTier.OPTIONAL)
        assert result[1].checklist == ()
        assert result[2].checklist == ()

    def test_does_not_mutate_input(self, auth_sections: tuple[Section, ...]) -> None:
        before = auth_sections[0].checklist
        filter_by_priority(auth_sections, PriorityTier.ADVANCED)
        assert auth_sections[0].checklist == before
        assert len(auth_sections[0].checklist) == 2

    def test_empty_input(self) -> None:
        assert filter_by_priority([], PriorityTier.RECOMMENDED) == ()

    def test_keeps_section_metadata(self) -> None:
        section = Section(title="T", checklist=(_item("A", "advanced"),), slug="t")
        result = filter_by_priority([section], PriorityTier.ADVANCED)
        assert result[0].slug == "t"
