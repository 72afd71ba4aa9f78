"""Renderer hand-off serialization."""
from __future__ import annotations

from checklist_metrics.export.serializer import DashboardSerializer

__all__ = ["DashboardSerializer"]
