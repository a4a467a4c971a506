"""Node definitions for a leader-key configuration tree.

A configuration is a tree of ``Group`` nodes whose children are either
terminal ``Action`` nodes or further groups.  Both node types are frozen
dataclasses: a node never changes in place, edits build a new value and
write it back through a projection (see ``leaderkey.projection``).

``ActionOrGroup`` is the union of the two node types.  The node's class
is its tag; downstream code dispatches with ``isinstance`` or
``kind_of``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import Union
from urllib.parse import urlsplit

from leaderkey.errors import VariantMismatchError

#: Default width, in characters, of the display name derived from a command.
COMMAND_LABEL_LIMIT: int = 24

GROUP_PLACEHOLDER: str = "Group"


class ActionType(Enum):
    """What an action's ``value`` means and how it is edited."""

    APPLICATION = "application"
    URL = "url"
    COMMAND = "command"
    FOLDER = "folder"

    @property
    def title(self) -> str:
        """Return the human-readable name shown in the type picker."""
        return _TYPE_TITLES[self]

    @property
    def offers_chooser(self) -> bool:
        """Return True if the value is picked from the filesystem."""
        return self in (ActionType.APPLICATION, ActionType.FOLDER)


_TYPE_TITLES: dict[ActionType, str] = {
    ActionType.APPLICATION: "Application",
    ActionType.URL: "URL",
    ActionType.COMMAND: "Command",
    ActionType.FOLDER: "Folder",
}


@dataclass(frozen=True, slots=True)
class Action:
    """A terminal mapping from a key to a typed command.

    Parameters
    ----------
    key:
        Keystroke identifier.  ``None`` or ``""`` means unset.
    type:
        Determines how ``value`` is interpreted.
    value:
        A path (``application``, ``folder``), a URL (``url``) or a shell
        command (``command``).  Not validated.
    label:
        Optional display name; when unset a name is derived from ``value``.
    """

    key: str | None = None
    type: ActionType = ActionType.APPLICATION
    value: str = ""
    label: str | None = None

    @property
    def display_name(self) -> str:
        """Return ``best_guess_display_name(self)``."""
        return best_guess_display_name(self)


@dataclass(frozen=True, slots=True)
class Group:
    """A keyed, ordered container of actions and nested groups.

    Parameters
    ----------
    key:
        Keystroke that enters this subtree.  ``None`` or ``""`` means unset.
    label:
        Optional display name.
    actions:
        Children in display order.
    """

    key: str | None = None
    label: str | None = None
    actions: tuple["ActionOrGroup", ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        """Return ``group_display_name(self)``."""
        return group_display_name(self)


ActionOrGroup = Union[Action, Group]


def kind_of(item: object) -> str:
    """Return ``"action"`` or ``"group"`` for a node.

    Raises
    ------
    VariantMismatchError
        If ``item`` is neither an ``Action`` nor a ``Group``.
    """
    if isinstance(item, Action):
        return "action"
    if isinstance(item, Group):
        return "group"
    raise VariantMismatchError("action or group", type(item).__name__)


# ---------------------------------------------------------------------------
# Display names
# ---------------------------------------------------------------------------


def best_guess_display_name(action: Action, limit: int = COMMAND_LABEL_LIMIT) -> str:
    """Return the name to show for ``action``.

    An explicit, non-empty ``label`` always wins.  Otherwise a name is
    derived from ``value`` according to ``type``; if nothing useful can
    be derived the type's title is returned, so the result is never
    empty.  The action is not modified.

    Parameters
    ----------
    action:
        The action to name.
    limit:
        Maximum length of a name derived from a command.
    """
    if action.label:
        return action.label

    if action.type in (ActionType.APPLICATION, ActionType.FOLDER):
        derived = _path_stem(action.value)
    elif action.type is ActionType.URL:
        derived = _url_tail(action.value)
    else:
        derived = _truncate(" ".join(action.value.split()), limit)

    return derived or action.type.title


def group_display_name(group: Group) -> str:
    """Return the group's label, else its key, else a placeholder."""
    return group.label or group.key or GROUP_PLACEHOLDER


def _path_stem(value: str) -> str:
    stripped = value.strip().rstrip("/")
    if not stripped:
        return ""
    return PurePosixPath(stripped).stem


def _url_tail(value: str) -> str:
    text = value.strip()
    parts = urlsplit(text)
    segments = [s for s in parts.path.split("/") if s]
    if segments:
        return segments[-1]
    return parts.netloc or text


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"
