"""Catalog provider: read checklist catalogs from YAML or JSON.

A catalog document is either a list of sections or a mapping with a
``sections`` list::

    sections:
      - title: Authentication
        slug: authentication
        checklist:
          - point: Use a Strong Password
            priority: Recommended
            details: ...

Items keep their priority string verbatim; an unknown priority is not a
load error.  Distinct item texts that normalize to the same id are
rejected unless ``allow_collisions`` is set, in which case those items
read the same completion and ignore flags.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from checklist_metrics.core.ids import normalize
from checklist_metrics.errors import CatalogError, CatalogUnavailableError, DuplicateItemIdError
from checklist_metrics.model.nodes import Catalog, ChecklistItem, Section

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yml", ".yaml"})


def load_catalog(path: Path | str, allow_collisions: bool = False) -> Catalog:
    """Read and parse a catalog file.

    Parameters
    ----------
    path:
        A ``.yml``/``.yaml`` file or a JSON file.
    allow_collisions:
        If ``False``, raise ``DuplicateItemIdError`` when two distinct
        items normalize to the same id.

    Raises
    ------
    CatalogUnavailableError
        If the file cannot be read.
    CatalogError
        If the document is malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CatalogUnavailableError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogUnavailableError(path, str(exc)) from exc

    data = _decode(text, path)
    catalog = parse_catalog(data, allow_collisions=allow_collisions)
    logger.debug(
        "Loaded catalog %s: %d section(s), %d item(s)",
        path,
        len(catalog),
        sum(section.item_count for section in catalog),
    )
    return catalog


def _decode(text: str, path: Path) -> Any:
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text) if text.strip() else None
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Cannot decode {str(path)!r}: {exc}") from exc


def parse_catalog(data: Any, allow_collisions: bool = False) -> Catalog:
    """Build a ``Catalog`` from decoded YAML/JSON data.

    ``None`` and an empty document produce an empty catalog.
    """
    if data is None:
        return ()
    if isinstance(data, Mapping):
        data = data.get("sections") or []
    if not isinstance(data, list):
        raise CatalogError("catalog must be a list of sections", "sections")

    catalog = tuple(_parse_section(raw, f"sections[{i}]") for i, raw in enumerate(data))

    collisions = find_collisions(catalog)
    if collisions:
        if not allow_collisions:
            raise DuplicateItemIdError(collisions)
        logger.warning(
            "Catalog has %d id collision(s); colliding items share state: %s",
            len(collisions),
            ", ".join(sorted(collisions)),
        )
    return catalog


def _parse_section(raw: Any, location: str) -> Section:
    if not isinstance(raw, Mapping):
        raise CatalogError("section must be a mapping", location)
    title = raw.get("title")
    if not isinstance(title, str):
        raise CatalogError("section 'title' must be a string", location)
    checklist = raw.get("checklist") or []
    if not isinstance(checklist, list):
        raise CatalogError("section 'checklist' must be a list", f"{location}.checklist")
    return Section(
        title=title,
        checklist=tuple(
            _parse_item(item, f"{location}.checklist[{i}]") for i, item in enumerate(checklist)
        ),
        slug=_optional_str(raw.get("slug")),
        description=_optional_str(raw.get("description")),
    )


def _parse_item(raw: Any, location: str) -> ChecklistItem:
    if not isinstance(raw, Mapping):
        raise CatalogError("checklist item must be a mapping", location)
    point = raw.get("point")
    priority = raw.get("priority")
    if not isinstance(point, str):
        raise CatalogError("item 'point' must be a string", location)
    if not isinstance(priority, str):
        raise CatalogError("item 'priority' must be a string", location)
    return ChecklistItem(point=point, priority=priority, details=_optional_str(raw.get("details")))


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def find_collisions(catalog: Iterable[Section]) -> dict[str, tuple[str, ...]]:
    """Return ids shared by more than one distinct item text.

    The same text appearing twice is not a collision: both occurrences
    are the same item as far as the stores can tell.

    Returns
    -------
    dict[str, tuple[str, ...]]
        Normalized id mapped to the distinct texts that produce it, in
        catalog order.
    """
    seen: dict[str, list[str]] = {}
    for section in catalog:
        for item in section.checklist:
            points = seen.setdefault(normalize(item.point), [])
            if item.point not in points:
                points.append(item.point)
    return {item_id: tuple(points) for item_id, points in seen.items() if len(points) > 1}
