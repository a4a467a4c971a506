"""Leader-key configuration tree model.

Exports the node types, the ``ActionOrGroup`` union and the display-name
helpers.
"""
from __future__ import annotations

from leaderkey.model.nodes import (
    COMMAND_LABEL_LIMIT,
    GROUP_PLACEHOLDER,
    Action,
    ActionOrGroup,
    ActionType,
    Group,
    best_guess_display_name,
    group_display_name,
    kind_of,
)

__all__ = [
    # Node types
    "Action",
    "Group",
    "ActionOrGroup",
    "ActionType",
    # Helpers
    "kind_of",
    "best_guess_display_name",
    "group_display_name",
    "COMMAND_LABEL_LIMIT",
    "GROUP_PLACEHOLDER",
]
