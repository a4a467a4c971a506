"""Editing operations on a configuration tree.

``GroupEditor`` performs structural edits on a group's children;
``dispatch`` turns each child into an ``ActionRow`` or ``GroupRow`` for
field edits.
"""
from __future__ import annotations

from leaderkey.editor.group_editor import GroupEditor
from leaderkey.editor.rows import ActionRow, Chooser, GroupRow, dispatch

__all__ = [
    "GroupEditor",
    "ActionRow",
    "GroupRow",
    "Chooser",
    "dispatch",
]
