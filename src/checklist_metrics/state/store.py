"""Persisted-store boundary: read completion and ignore flags.

The stores are key-value maps from normalized item id to a boolean.  A
state dump holds both, keyed by store name, as a browser's local
storage would::

    {
      "PSC_PROGRESS": {"use-mfa": true},
      "PSC_IGNORED": "{\\"rotate-keys\\": true}"
    }

Store values may be mappings or JSON-encoded strings of mappings.  A
missing store is treated as empty.  This module only reads; nothing in
checklist-metrics writes to the stores.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from checklist_metrics.errors import StateStoreError, StateStoreUnavailableError
from checklist_metrics.model.nodes import StateSnapshot

logger = logging.getLogger(__name__)

COMPLETION_KEY = "PSC_PROGRESS"
IGNORE_KEY = "PSC_IGNORED"


def load_state(
    path: Path | str,
    completion_key: str = COMPLETION_KEY,
    ignore_key: str = IGNORE_KEY,
) -> StateSnapshot:
    """Read a state dump file into a ``StateSnapshot``.

    Raises
    ------
    StateStoreUnavailableError
        If the file cannot be read.
    StateStoreError
        If the dump is malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise StateStoreUnavailableError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StateStoreUnavailableError(path, str(exc)) from exc

    try:
        if path.suffix.lower() in (".yml", ".yaml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text) if text.strip() else None
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise StateStoreError(f"Cannot decode {str(path)!r}: {exc}") from exc

    snapshot = parse_state(data, completion_key=completion_key, ignore_key=ignore_key)
    logger.debug(
        "Loaded state %s: %d completion flag(s), %d ignore flag(s)",
        path,
        len(snapshot.completed),
        len(snapshot.ignored),
    )
    return snapshot


def parse_state(
    data: Any,
    completion_key: str = COMPLETION_KEY,
    ignore_key: str = IGNORE_KEY,
) -> StateSnapshot:
    """Build a ``StateSnapshot`` from a decoded state dump."""
    if data is None:
        return StateSnapshot.empty()
    if not isinstance(data, Mapping):
        raise StateStoreError("state dump must be a mapping of store name to flags")
    return snapshot_from_mappings(
        read_store(data.get(completion_key), completion_key),
        read_store(data.get(ignore_key), ignore_key),
    )


def read_store(raw: Any, name: str = "store") -> dict[str, bool]:
    """Decode one store's flags.

    ``None`` and empty strings mean an empty store.  Values are coerced
    by truthiness.
    """
    if raw is None:
        return {}
    if isinstance(raw, str):
        if not raw.strip():
            return {}
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StateStoreError(f"{name}: stored value is not valid JSON: {exc}") from exc
        if raw is None:
            return {}
    if not isinstance(raw, Mapping):
        raise StateStoreError(f"{name}: expected a mapping of item id to flag")
    return {str(key): bool(value) for key, value in raw.items()}


def snapshot_from_mappings(
    completed: Mapping[str, Any] | None = None,
    ignored: Mapping[str, Any] | None = None,
) -> StateSnapshot:
    """Build a snapshot from two already-loaded stores."""
    return StateSnapshot(completed=dict(completed or {}), ignored=dict(ignored or {}))
