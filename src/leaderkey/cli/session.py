"""Line-command editing surface over a configuration tree.

``EditSession`` turns one line of user input into one call on the
editing core.  Items are addressed by dotted index paths as shown by
``render_tree`` (``0``, ``3.1.0``); group commands take the path of the
group, with no path meaning the top level.  Every command resolves its
projection fresh from the root, so no handle outlives a structural edit.

See ``HELP_TEXT`` for the command list.
"""
from __future__ import annotations

import logging
import shlex
from collections.abc import Callable
from dataclasses import dataclass

from leaderkey.config import EditorConfig
from leaderkey.editor.group_editor import GroupEditor
from leaderkey.editor.rows import ActionRow, Chooser, GroupRow
from leaderkey.errors import EditorError, VariantMismatchError
from leaderkey.model.nodes import ActionType
from leaderkey.projection.lens import ConfigRoot, format_path, parse_path, resolve_group
from leaderkey.render.plain import to_json, to_yaml

logger = logging.getLogger(__name__)

HELP_TEXT = """\
add-action [GROUP]      Append an empty application action
add-group [GROUP]       Append an empty group
delete PATH             Delete an item
duplicate PATH          Insert a copy of an item right after it
key PATH [TEXT]         Set an item's key
label PATH [TEXT]       Set an item's label (no text clears it)
type PATH TYPE          Change an action's type (value is kept)
value PATH TEXT         Set an action's value
choose PATH             Pick an application/folder path for an action
show                    Render the tree
dump [json|yaml]        Print the tree as JSON or YAML
help                    List commands
quit                    End the session"""


@dataclass(frozen=True)
class Reply:
    """Outcome of one session command.

    Parameters
    ----------
    message:
        Text to show the user.
    error:
        ``True`` if the command was rejected; the tree is unchanged.
    changed:
        ``True`` if the command edited the tree.
    show_tree:
        ``True`` if the caller should render the tree.
    dump:
        Serialized tree text for ``dump``.
    dump_format:
        ``"json"`` or ``"yaml"`` when ``dump`` is set.
    done:
        ``True`` if the session should end.
    """

    message: str = ""
    error: bool = False
    changed: bool = False
    show_tree: bool = False
    dump: str | None = None
    dump_format: str | None = None
    done: bool = False


def _cancel_chooser(action_type: ActionType, start_directory: str) -> None:
    return None


class EditSession:
    """Apply text commands to the tree held by a ``ConfigRoot``.

    Parameters
    ----------
    root:
        The tree being edited.
    config:
        Editor settings; defaults to ``EditorConfig()``.
    chooser:
        Path picker used by ``choose``.  The default behaves like a
        cancelled dialog.
    """

    def __init__(
        self,
        root: ConfigRoot,
        config: EditorConfig | None = None,
        chooser: Chooser = _cancel_chooser,
    ) -> None:
        self.root = root
        self.config = config or EditorConfig()
        self._chooser = chooser
        self._commands: dict[str, Callable[[list[str]], Reply]] = {
            "add-action": self._add_action,
            "add-group": self._add_group,
            "delete": self._delete,
            "duplicate": self._duplicate,
            "key": self._key,
            "label": self._label,
            "type": self._type,
            "value": self._value,
            "choose": self._choose,
            "show": lambda args: Reply(show_tree=True),
            "dump": self._dump,
            "help": lambda args: Reply(message=HELP_TEXT),
            "quit": lambda args: Reply(message="Bye.", done=True),
            "exit": lambda args: Reply(message="Bye.", done=True),
        }

    def execute(self, line: str) -> Reply:
        """Run one command line and return its outcome.

        Editor errors and malformed input are reported in the reply, not
        raised.
        """
        try:
            words = shlex.split(line)
        except ValueError as exc:
            return Reply(message=f"Cannot parse command: {exc}", error=True)
        if not words:
            return Reply()

        name, args = words[0].lower(), words[1:]
        handler = self._commands.get(name)
        if handler is None:
            return Reply(message=f"Unknown command {name!r}; type 'help'", error=True)

        logger.debug("Executing %s %r", name, args)
        try:
            return handler(args)
        except (EditorError, ValueError) as exc:
            return Reply(message=str(exc), error=True)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _group_editor(self, args: list[str]) -> tuple[GroupEditor, tuple[int, ...]]:
        path = parse_path(args[0]) if args else ()
        return GroupEditor(resolve_group(self.root, path)), path

    def _row(self, args: list[str]) -> tuple[ActionRow | GroupRow, tuple[int, ...]]:
        if not args:
            raise ValueError("This command needs an item path, e.g. '0' or '3.1.0'")
        path = parse_path(args[0])
        if not path:
            raise ValueError("The top-level group is not an item; give an item path")
        editor = GroupEditor(resolve_group(self.root, path[:-1]))
        return editor.row(path[-1]), path

    def _action_row(self, args: list[str]) -> tuple[ActionRow, tuple[int, ...]]:
        row, path = self._row(args)
        if not isinstance(row, ActionRow):
            raise VariantMismatchError("action", row.kind)
        return row, path

    # ------------------------------------------------------------------
    # Structural commands
    # ------------------------------------------------------------------

    def _add_action(self, args: list[str]) -> Reply:
        editor, path = self._group_editor(args)
        index = editor.add_action()
        return Reply(message=f"Added action {format_path(path + (index,))}", changed=True)

    def _add_group(self, args: list[str]) -> Reply:
        editor, path = self._group_editor(args)
        index = editor.add_group()
        return Reply(message=f"Added group {format_path(path + (index,))}", changed=True)

    def _delete(self, args: list[str]) -> Reply:
        row, path = self._row(args)
        name = row.display_name
        row.delete()
        return Reply(message=f"Deleted {row.kind} {format_path(path)} ({name})", changed=True)

    def _duplicate(self, args: list[str]) -> Reply:
        row, path = self._row(args)
        row.duplicate()
        copy_path = path[:-1] + (path[-1] + 1,)
        return Reply(
            message=f"Duplicated {format_path(path)} as {format_path(copy_path)}",
            changed=True,
        )

    # ------------------------------------------------------------------
    # Field commands
    # ------------------------------------------------------------------

    def _key(self, args: list[str]) -> Reply:
        row, path = self._row(args)
        key = " ".join(args[1:])
        row.set_key(key)
        return Reply(message=f"Key of {format_path(path)} set to {key!r}", changed=True)

    def _label(self, args: list[str]) -> Reply:
        row, path = self._row(args)
        label = " ".join(args[1:])
        row.set_label(label)
        if not label:
            return Reply(
                message=f"Label of {format_path(path)} cleared ({row.display_name})",
                changed=True,
            )
        return Reply(message=f"Label of {format_path(path)} set to {label!r}", changed=True)

    def _type(self, args: list[str]) -> Reply:
        row, path = self._action_row(args)
        if len(args) < 2:
            raise ValueError("Usage: type PATH TYPE")
        try:
            action_type = ActionType(args[1].lower())
        except ValueError:
            choices = ", ".join(t.value for t in ActionType)
            raise ValueError(f"Unknown type {args[1]!r}; choose one of: {choices}") from None
        row.set_type(action_type)
        return Reply(message=f"Type of {format_path(path)} set to {action_type.title}", changed=True)

    def _value(self, args: list[str]) -> Reply:
        row, path = self._action_row(args)
        value = " ".join(args[1:])
        row.set_value(value)
        return Reply(message=f"Value of {format_path(path)} set to {value!r}", changed=True)

    def _choose(self, args: list[str]) -> Reply:
        row, path = self._action_row(args)
        if row.choose_value(self._chooser, self.config):
            return Reply(
                message=f"Value of {format_path(path)} set to {row.action.value!r}",
                changed=True,
            )
        return Reply(message="Cancelled; value unchanged")

    def _dump(self, args: list[str]) -> Reply:
        fmt = args[0].lower() if args else "yaml"
        if fmt == "json":
            return Reply(dump=to_json(self.root.get()), dump_format="json")
        if fmt == "yaml":
            return Reply(dump=to_yaml(self.root.get()), dump_format="yaml")
        raise ValueError(f"Unknown dump format {fmt!r}; choose json or yaml")
