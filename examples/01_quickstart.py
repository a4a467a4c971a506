#!/usr/bin/env python3
"""Example: Quickstart — leaderkey-config

Minimal working example: build a configuration tree, edit it at the top
level and deep inside a nested group, and render the result.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install leaderkey-config
"""
from __future__ import annotations

from rich.console import Console

import leaderkey
from leaderkey import ActionRow, ActionType, ConfigRoot, GroupEditor, GroupRow
from leaderkey.render import render_tree, to_yaml
from leaderkey.samples import sample_tree


def main() -> None:
    console = Console()
    console.print(f"leaderkey-config version: {leaderkey.__version__}")

    # Step 1: The application owns the root of the tree
    root = ConfigRoot(sample_tree())
    editor = GroupEditor.for_root(root)
    console.print(f"Top-level items: {len(editor)}")

    # Step 2: Structural edits at the top level
    index = editor.add_action()
    row = editor.row(index)
    assert isinstance(row, ActionRow)
    row.set_key("n")
    row.set_type(ActionType.COMMAND)
    row.set_value("open -a Notes")
    console.print(f"Added {row.display_name!r} at {index}")

    # Step 3: Edit deep inside the raycast group; the change lands in root
    raycast = editor.row(3)
    assert isinstance(raycast, GroupRow)
    window = raycast.content.row(1)
    assert isinstance(window, GroupRow)
    window.content.duplicate_at(0)
    copy = window.content.row(1)
    assert isinstance(copy, ActionRow)
    copy.set_key("c")
    copy.set_value("raycast://window-management/center")

    # Step 4: Render
    console.print(render_tree(root.get()))
    console.print(to_yaml(root.get()))


if __name__ == "__main__":
    main()
