"""Composable read/write projections into a configuration tree."""
from __future__ import annotations

from leaderkey.projection.lens import (
    ActionProjection,
    ConfigRoot,
    GroupProjection,
    IndexedProjection,
    Projection,
    format_path,
    parse_path,
    resolve,
    resolve_group,
)

__all__ = [
    "Projection",
    "ConfigRoot",
    "IndexedProjection",
    "ActionProjection",
    "GroupProjection",
    "resolve",
    "resolve_group",
    "parse_path",
    "format_path",
]
