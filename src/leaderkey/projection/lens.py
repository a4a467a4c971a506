"""Read/write projections into a configuration tree.

A ``Projection`` is a get/set accessor onto one value somewhere in the
tree.  Projections compose: an ``IndexedProjection`` addresses one child
of the group behind its parent projection, and ``ActionProjection`` /
``GroupProjection`` narrow that child to one half of the
``ActionOrGroup`` union.  Writing through the innermost projection
rebuilds each enclosing group on the way up and finally replaces the
tree held by the ``ConfigRoot``.

Positions are captured when a projection is built.  Adding, deleting or
duplicating children renumbers siblings, so callers must build fresh
projections after any such edit rather than keeping old ones around.

Usage
-----
::

    from leaderkey.projection import ConfigRoot, resolve

    root = ConfigRoot(tree)
    item = resolve(root, (3, 1, 0))
    item.modify(lambda action: replace(action, key="m"))
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Generic, TypeVar

from leaderkey.errors import IndexOutOfRangeError, VariantMismatchError
from leaderkey.model.nodes import Action, ActionOrGroup, Group, kind_of

T = TypeVar("T")


class Projection(ABC, Generic[T]):
    """Abstract get/set accessor onto a single value."""

    @abstractmethod
    def get(self) -> T:
        """Return the current value."""

    @abstractmethod
    def set(self, value: T) -> None:
        """Replace the value, leaving everything around it untouched."""

    def modify(self, fn: Callable[[T], T]) -> T:
        """Apply ``fn`` to the current value, write the result and return it."""
        updated = fn(self.get())
        self.set(updated)
        return updated


class ConfigRoot(Projection[Group]):
    """The cell that owns a configuration tree.

    The surrounding application keeps one ``ConfigRoot`` for the lifetime
    of an editing session; every edit anywhere in the tree ends with a
    call to ``set`` here.
    """

    def __init__(self, group: Group | None = None) -> None:
        self._group = group if group is not None else Group(key="")

    def get(self) -> Group:
        return self._group

    def set(self, value: Group) -> None:
        if not isinstance(value, Group):
            raise VariantMismatchError("group", kind_of(value))
        self._group = value

    def __repr__(self) -> str:
        return f"ConfigRoot({len(self._group.actions)} item(s))"


class IndexedProjection(Projection[ActionOrGroup]):
    """Projection onto the child at ``index`` of the group behind ``parent``.

    Parameters
    ----------
    parent:
        Projection onto the group that owns the child.
    index:
        Position of the child.  Must be valid when the projection is built.

    Raises
    ------
    IndexOutOfRangeError
        If ``index`` is negative or past the end of the group's children,
        at construction or on any later ``get`` / ``set``.
    """

    def __init__(self, parent: Projection[Group], index: int) -> None:
        self._parent = parent
        self._index = index
        self._check(parent.get())

    @property
    def index(self) -> int:
        """Return the position this projection addresses."""
        return self._index

    @property
    def parent(self) -> Projection[Group]:
        """Return the projection onto the owning group."""
        return self._parent

    def get(self) -> ActionOrGroup:
        group = self._parent.get()
        self._check(group)
        return group.actions[self._index]

    def set(self, value: ActionOrGroup) -> None:
        group = self._parent.get()
        self._check(group)
        current = group.actions[self._index]
        if kind_of(value) != kind_of(current):
            raise VariantMismatchError(kind_of(current), kind_of(value))
        actions = list(group.actions)
        actions[self._index] = value
        self._parent.set(replace(group, actions=tuple(actions)))

    def _check(self, group: Group) -> None:
        if not 0 <= self._index < len(group.actions):
            raise IndexOutOfRangeError(self._index, len(group.actions))

    def __repr__(self) -> str:
        return f"IndexedProjection(index={self._index})"


class ActionProjection(Projection[Action]):
    """Narrow a projection onto an ``ActionOrGroup`` to its ``Action`` half."""

    def __init__(self, item: Projection[ActionOrGroup]) -> None:
        self._item = item

    def get(self) -> Action:
        value = self._item.get()
        if not isinstance(value, Action):
            raise VariantMismatchError("action", kind_of(value))
        return value

    def set(self, value: Action) -> None:
        if not isinstance(value, Action):
            raise VariantMismatchError("action", kind_of(value))
        self._item.set(value)


class GroupProjection(Projection[Group]):
    """Narrow a projection onto an ``ActionOrGroup`` to its ``Group`` half."""

    def __init__(self, item: Projection[ActionOrGroup]) -> None:
        self._item = item

    def get(self) -> Group:
        value = self._item.get()
        if not isinstance(value, Group):
            raise VariantMismatchError("group", kind_of(value))
        return value

    def set(self, value: Group) -> None:
        if not isinstance(value, Group):
            raise VariantMismatchError("group", kind_of(value))
        self._item.set(value)


# ---------------------------------------------------------------------------
# Index paths
# ---------------------------------------------------------------------------


def resolve(root: Projection[Group], path: Sequence[int]) -> IndexedProjection:
    """Compose projections from ``root`` down an index path.

    ``(3, 1, 0)`` addresses the first child of the second child of the
    fourth child of the root group.

    Raises
    ------
    ValueError
        If ``path`` is empty (the root itself is not an item).
    IndexOutOfRangeError
        If any position along the path is out of range.
    VariantMismatchError
        If the path passes through an action.
    """
    if not path:
        raise ValueError("An item path needs at least one index")
    item = IndexedProjection(root, path[0])
    for index in path[1:]:
        item = IndexedProjection(GroupProjection(item), index)
    return item


def resolve_group(root: Projection[Group], path: Sequence[int]) -> Projection[Group]:
    """Return a projection onto the group at ``path``; ``()`` is the root."""
    if not path:
        return root
    return GroupProjection(resolve(root, path))


def parse_path(text: str) -> tuple[int, ...]:
    """Parse a dotted index path such as ``"3.1.0"``.

    The empty string (or ``"."``) parses to ``()``.

    Raises
    ------
    ValueError
        If any component is not a non-negative integer.
    """
    stripped = text.strip()
    if stripped in ("", "."):
        return ()
    parts = stripped.split(".")
    if not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid item path {text!r}; expected e.g. '0' or '3.1.0'")
    return tuple(int(p) for p in parts)


def format_path(path: Sequence[int]) -> str:
    """Return the dotted form of ``path``."""
    return ".".join(str(i) for i in path)
