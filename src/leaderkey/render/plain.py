"""Plain dict, JSON and YAML views of a configuration tree.

These are display dumps of whatever the tree currently holds.  Groups
and actions carry a ``"kind"`` discriminator so the two halves of the
union are unambiguous in the output.
"""
from __future__ import annotations

import json

import yaml

from leaderkey.model.nodes import Action, ActionOrGroup, Group


def to_plain(group: Group) -> dict[str, object]:
    """Return a JSON-compatible dict for ``group`` and its descendants."""
    return _group_to_dict(group)


def _item_to_dict(item: ActionOrGroup) -> dict[str, object]:
    if isinstance(item, Action):
        return _action_to_dict(item)
    if isinstance(item, Group):
        return _group_to_dict(item)
    raise TypeError(f"Unknown item type: {type(item)}")


def _action_to_dict(action: Action) -> dict[str, object]:
    return {
        "kind": "action",
        "key": action.key,
        "type": action.type.value,
        "value": action.value,
        "label": action.label,
    }


def _group_to_dict(group: Group) -> dict[str, object]:
    return {
        "kind": "group",
        "key": group.key,
        "label": group.label,
        "actions": [_item_to_dict(i) for i in group.actions],
    }


def to_json(group: Group, indent: int = 2) -> str:
    """Return ``group`` as a JSON string."""
    return json.dumps(to_plain(group), indent=indent, ensure_ascii=False)


def to_yaml(group: Group) -> str:
    """Return ``group`` as a YAML string."""
    return yaml.dump(
        to_plain(group), default_flow_style=False, allow_unicode=True, sort_keys=False
    )
