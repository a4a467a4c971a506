"""Display helpers for configuration trees."""
from __future__ import annotations

from leaderkey.render.plain import to_json, to_plain, to_yaml
from leaderkey.render.tree import render_tree

__all__ = [
    "render_tree",
    "to_plain",
    "to_json",
    "to_yaml",
]
