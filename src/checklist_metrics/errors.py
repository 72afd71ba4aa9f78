"""Exception types for checklist-metrics.

Only failures at the boundary (a catalog or store that cannot be read,
inputs that are not loaded yet, a radar cell that blew up) are raised.
Malformed or missing *data* inside a well-formed input never raises;
the aggregation functions always return a result for it.
"""
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ChecklistMetricsError(Exception):
    """Base class for all checklist-metrics errors."""


class ConfigError(ChecklistMetricsError):
    """Raised when a configuration file or mapping is invalid."""


# ---------------------------------------------------------------------------
# Catalog provider
# ---------------------------------------------------------------------------


class CatalogError(ChecklistMetricsError):
    """Raised when a catalog document is structurally invalid.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    location:
        Dotted path to the offending node, e.g. ``"sections[2].checklist[0]"``.
    """

    def __init__(self, message: str, location: str | None = None) -> None:
        self.location = location
        text = f"{location}: {message}" if location else message
        super().__init__(text)


class CatalogUnavailableError(CatalogError):
    """Raised when the catalog source cannot be read at all."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read catalog {str(path)!r}: {reason}")


class DuplicateItemIdError(CatalogError):
    """Raised when distinct item texts normalize to the same id."""

    def __init__(self, collisions: dict[str, Sequence[str]]) -> None:
        self.collisions = {k: tuple(v) for k, v in collisions.items()}
        details = "; ".join(
            f"{item_id!r} <- {', '.join(repr(p) for p in points)}"
            for item_id, points in sorted(self.collisions.items())
        )
        super().__init__(
            f"{len(self.collisions)} item id collision(s): {details}. "
            "Reword the items or load with allow_collisions=True."
        )


# ---------------------------------------------------------------------------
# Persisted stores
# ---------------------------------------------------------------------------


class StateStoreError(ChecklistMetricsError):
    """Raised when a persisted store dump is structurally invalid."""


class StateStoreUnavailableError(StateStoreError):
    """Raised when the persisted store source cannot be read at all."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read state {str(path)!r}: {reason}")


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class DataNotReadyError(ChecklistMetricsError):
    """Raised when the pipeline is asked to run before its inputs are loaded."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            "Dashboard inputs not loaded yet: " + ", ".join(self.missing)
        )


class RadarBuildError(ChecklistMetricsError):
    """Raised when any single radar cell fails; no partial dataset is returned.

    Parameters
    ----------
    section_index:
        Index of the section whose computation failed.
    tier:
        Value of the priority tier being computed.
    """

    def __init__(self, section_index: int, tier: str, cause: BaseException) -> None:
        self.section_index = section_index
        self.tier = tier
        super().__init__(
            f"Radar computation failed for section {section_index} "
            f"tier {tier!r}: {cause}"
        )
