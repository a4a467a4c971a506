"""Per-item rows: field edits on one action or group.

``dispatch`` looks at the current node behind a projection and returns
either an ``ActionRow`` or a ``GroupRow``.  Each row writes through a
projection narrowed to its own node kind, so editing fields can never
turn an action into a group or the reverse.  Both rows also carry the
delete and duplicate callbacks bound to the item's index at dispatch
time.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Optional

from leaderkey.config import EditorConfig
from leaderkey.editor.group_editor import GroupEditor
from leaderkey.errors import ChooserUnavailableError, VariantMismatchError
from leaderkey.model.nodes import Action, ActionOrGroup, ActionType, Group
from leaderkey.projection.lens import ActionProjection, GroupProjection, Projection

logger = logging.getLogger(__name__)

#: Shows a native path picker for ``(action_type, start_directory)`` and
#: returns the chosen path, or ``None`` if the user cancelled.
Chooser = Callable[[ActionType, str], Optional[str]]


class ActionRow:
    """Field edits on a single action.

    Parameters
    ----------
    action:
        Projection onto the action.
    on_delete:
        Removes this item from its parent group.
    on_duplicate:
        Inserts a copy of this item right after it.
    """

    kind = "action"

    def __init__(
        self,
        action: Projection[Action],
        on_delete: Callable[[], object],
        on_duplicate: Callable[[], object],
    ) -> None:
        self._action = action
        self._on_delete = on_delete
        self._on_duplicate = on_duplicate

    @property
    def action(self) -> Action:
        return self._action.get()

    @property
    def display_name(self) -> str:
        return self._action.get().display_name

    def set_key(self, key: str) -> Action:
        return self._action.modify(lambda a: replace(a, key=key))

    def set_type(self, action_type: ActionType) -> Action:
        """Change the type; ``value`` is kept verbatim and reinterpreted."""
        action_type = ActionType(action_type)
        return self._action.modify(lambda a: replace(a, type=action_type))

    def set_value(self, value: str) -> Action:
        return self._action.modify(lambda a: replace(a, value=value))

    def set_label(self, label: str | None) -> Action:
        """Set the label; an empty label is stored as unset."""
        return self._action.modify(lambda a: replace(a, label=label or None))

    def choose_value(self, chooser: Chooser, config: EditorConfig) -> bool:
        """Ask ``chooser`` for a path and store it as the value.

        Returns
        -------
        bool
            ``True`` if a path was stored, ``False`` if the chooser was
            cancelled (the value is left as it was).

        Raises
        ------
        ChooserUnavailableError
            If the action's type is edited as text rather than picked.
        """
        action_type = self._action.get().type
        if not action_type.offers_chooser:
            raise ChooserUnavailableError(action_type.value)
        chosen = chooser(action_type, config.start_directory(action_type))
        if chosen is None:
            logger.debug("Chooser cancelled; value unchanged")
            return False
        self.set_value(chosen)
        return True

    def delete(self) -> None:
        self._on_delete()

    def duplicate(self) -> None:
        self._on_duplicate()

    def __repr__(self) -> str:
        return f"ActionRow({self.action!r})"


class GroupRow:
    """Field edits on a single group, plus access to its children.

    Parameters
    ----------
    group:
        Projection onto the group.
    on_delete:
        Removes this item from its parent group.
    on_duplicate:
        Inserts a copy of this item right after it.
    """

    kind = "group"

    def __init__(
        self,
        group: Projection[Group],
        on_delete: Callable[[], object],
        on_duplicate: Callable[[], object],
    ) -> None:
        self._group = group
        self._on_delete = on_delete
        self._on_duplicate = on_duplicate

    @property
    def group(self) -> Group:
        return self._group.get()

    @property
    def display_name(self) -> str:
        return self._group.get().display_name

    @property
    def content(self) -> GroupEditor:
        """Return an editor for this group's children."""
        return GroupEditor(self._group)

    def set_key(self, key: str) -> Group:
        return self._group.modify(lambda g: replace(g, key=key))

    def set_label(self, label: str | None) -> Group:
        """Set the label; an empty label is stored as unset."""
        return self._group.modify(lambda g: replace(g, label=label or None))

    def delete(self) -> None:
        self._on_delete()

    def duplicate(self) -> None:
        self._on_duplicate()

    def __repr__(self) -> str:
        return f"GroupRow(key={self.group.key!r}, items={len(self.group.actions)})"


def dispatch(
    item: Projection[ActionOrGroup],
    on_delete: Callable[[], object],
    on_duplicate: Callable[[], object],
) -> ActionRow | GroupRow:
    """Return the row matching the node currently behind ``item``.

    Raises
    ------
    VariantMismatchError
        If the projection yields something that is not a node.
    """
    value = item.get()
    if isinstance(value, Action):
        return ActionRow(ActionProjection(item), on_delete, on_duplicate)
    if isinstance(value, Group):
        return GroupRow(GroupProjection(item), on_delete, on_duplicate)
    raise VariantMismatchError("action or group", type(value).__name__)
