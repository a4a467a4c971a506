"""Structural edits on the children of one group.

``GroupEditor`` owns a projection onto a ``Group`` and is the only code
that changes how many children a group has: ``add_action``,
``add_group``, ``delete_at`` and ``duplicate_at``.  Field edits on an
existing child go through the rows returned by ``rows()`` instead.

A ``GroupEditor`` for a nested group is obtained from its ``GroupRow``;
it writes through the same projection chain, so edits at any depth land
in the root.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from functools import partial
from typing import TYPE_CHECKING

from leaderkey.errors import IndexOutOfRangeError
from leaderkey.model.nodes import Action, ActionOrGroup, ActionType, Group
from leaderkey.projection.lens import ConfigRoot, IndexedProjection, Projection

if TYPE_CHECKING:
    from leaderkey.editor.rows import ActionRow, GroupRow

logger = logging.getLogger(__name__)


class GroupEditor:
    """Add, delete and duplicate the direct children of a group.

    Parameters
    ----------
    group:
        Projection onto the group being edited.
    """

    def __init__(self, group: Projection[Group]) -> None:
        self._group = group

    @classmethod
    def for_root(cls, root: ConfigRoot) -> "GroupEditor":
        """Return an editor for the top-level group held by ``root``."""
        return cls(root)

    @property
    def group(self) -> Group:
        """Return the current value of the edited group."""
        return self._group.get()

    def __len__(self) -> int:
        return len(self._group.get().actions)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------

    def add_action(self) -> int:
        """Append an empty application action and return its index."""
        return self._append(Action(key="", type=ActionType.APPLICATION, value=""))

    def add_group(self) -> int:
        """Append an empty group and return its index."""
        return self._append(Group(key="", actions=()))

    def delete_at(self, index: int) -> ActionOrGroup:
        """Remove and return the child at ``index``.

        Later children shift one position to the left.

        Raises
        ------
        IndexOutOfRangeError
            If ``index`` is not a current position.
        """
        group = self._group.get()
        self._check(group, index)
        removed = group.actions[index]
        actions = group.actions[:index] + group.actions[index + 1:]
        self._group.set(replace(group, actions=actions))
        logger.debug("Deleted item %d; group now has %d item(s)", index, len(actions))
        return removed

    def duplicate_at(self, index: int) -> int:
        """Insert a copy of the child at ``index`` right after it.

        Nodes are immutable, so the copy shares no mutable state with the
        original: editing either one replaces only that position.  Returns
        the index of the copy.

        Raises
        ------
        IndexOutOfRangeError
            If ``index`` is not a current position.
        """
        group = self._group.get()
        self._check(group, index)
        original = group.actions[index]
        actions = group.actions[: index + 1] + (original,) + group.actions[index + 1:]
        self._group.set(replace(group, actions=actions))
        logger.debug("Duplicated item %d; group now has %d item(s)", index, len(actions))
        return index + 1

    # ------------------------------------------------------------------
    # Access to children
    # ------------------------------------------------------------------

    def item(self, index: int) -> IndexedProjection:
        """Return a fresh projection onto the child at ``index``."""
        return IndexedProjection(self._group, index)

    def rows(self) -> list["ActionRow | GroupRow"]:
        """Dispatch every child to its row, bound to its current index.

        The result is only valid until the next structural edit of this
        group; call ``rows()`` again afterwards.
        """
        return [self.row(index) for index in range(len(self))]

    def row(self, index: int) -> "ActionRow | GroupRow":
        """Dispatch the single child at ``index``."""
        from leaderkey.editor.rows import dispatch

        return dispatch(
            self.item(index),
            on_delete=partial(self.delete_at, index),
            on_duplicate=partial(self.duplicate_at, index),
        )

    def _append(self, item: ActionOrGroup) -> int:
        group = self._group.get()
        actions = group.actions + (item,)
        self._group.set(replace(group, actions=actions))
        logger.debug(
            "Added %s at index %d; group now has %d item(s)",
            type(item).__name__.lower(),
            len(actions) - 1,
            len(actions),
        )
        return len(actions) - 1

    @staticmethod
    def _check(group: Group, index: int) -> None:
        if not 0 <= index < len(group.actions):
            raise IndexOutOfRangeError(index, len(group.actions))

    def __repr__(self) -> str:
        return f"GroupEditor({len(self)} item(s))"
