"""Shared test fixtures for checklist-metrics.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from checklist_metrics.model.nodes import ChecklistItem, Section, StateSnapshot


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "checklist_metrics"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def auth_sections() -> tuple[Section, ...]:
    """One section with a recommended and an optional item."""
    return (
        Section(
            title="Auth",
            checklist=(
                ChecklistItem(point="Use MFA", priority="recommended"),
                ChecklistItem(point="Rotate Keys", priority="optional"),
            ),
        ),
    )


@pytest.fixture()
def auth_state() -> StateSnapshot:
    return StateSnapshot(completed={"use-mfa": True}, ignored={})


@pytest.fixture()
def catalog() -> tuple[Section, ...]:
    """A three-section catalog with mixed priorities."""
    return (
        Section(
            title="Authentication",
            checklist=(
                ChecklistItem(point="Use a Strong Password", priority="Recommended"),
                ChecklistItem(point="Enable 2FA", priority="Recommended"),
                ChecklistItem(point="Use a Password Manager", priority="Optional"),
                ChecklistItem(point="Use a Hardware Key", priority="Advanced"),
            ),
        ),
        Section(
            title="Browsing",
            checklist=(
                ChecklistItem(point="Block Trackers", priority="recommended"),
                ChecklistItem(point="Use Tor", priority="advanced"),
            ),
        ),
        Section(title="Networking", checklist=()),
    )
