"""Persisted-store boundary.

Exports ``load_state``, ``parse_state``, ``read_store`` and
``snapshot_from_mappings``.
"""
from __future__ import annotations

from checklist_metrics.state.store import (
    COMPLETION_KEY,
    IGNORE_KEY,
    load_state,
    parse_state,
    read_store,
    snapshot_from_mappings,
)

__all__ = [
    "COMPLETION_KEY",
    "IGNORE_KEY",
    "load_state",
    "parse_state",
    "read_store",
    "snapshot_from_mappings",
]
