"""leaderkey-config — editing core for leader-key launcher configurations.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import leaderkey
    from leaderkey import Action, ActionType, ConfigRoot, Group, GroupEditor

    root = ConfigRoot(Group(key="", actions=(
        Action(key="t", type=ActionType.APPLICATION, value="/Applications/Foo.app"),
    )))
    editor = GroupEditor.for_root(root)

    editor.duplicate_at(0)
    editor.row(1).set_key("f")
    editor.delete_at(0)

    root.get().actions[0].key
    'f'

    leaderkey.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from leaderkey.config import EditorConfig
from leaderkey.editor import ActionRow, Chooser, GroupEditor, GroupRow, dispatch
from leaderkey.errors import (
    ChooserUnavailableError,
    EditorError,
    IndexOutOfRangeError,
    VariantMismatchError,
)
from leaderkey.model import (
    Action,
    ActionOrGroup,
    ActionType,
    Group,
    best_guess_display_name,
    group_display_name,
    kind_of,
)
from leaderkey.projection import (
    ActionProjection,
    ConfigRoot,
    GroupProjection,
    IndexedProjection,
    Projection,
    parse_path,
    resolve,
    resolve_group,
)

__all__ = [
    "__version__",
    # Model
    "Action",
    "ActionOrGroup",
    "ActionType",
    "Group",
    "best_guess_display_name",
    "group_display_name",
    "kind_of",
    # Projections
    "Projection",
    "ConfigRoot",
    "IndexedProjection",
    "ActionProjection",
    "GroupProjection",
    "resolve",
    "resolve_group",
    "parse_path",
    # Editing
    "GroupEditor",
    "ActionRow",
    "GroupRow",
    "Chooser",
    "dispatch",
    "EditorConfig",
    # Errors
    "EditorError",
    "IndexOutOfRangeError",
    "VariantMismatchError",
    "ChooserUnavailableError",
]
