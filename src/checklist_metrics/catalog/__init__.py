"""Catalog provider.

Exports ``load_catalog``, ``parse_catalog`` and ``find_collisions``.
"""
from __future__ import annotations

from checklist_metrics.catalog.loader import find_collisions, load_catalog, parse_catalog

__all__ = ["load_catalog", "parse_catalog", "find_collisions"]
