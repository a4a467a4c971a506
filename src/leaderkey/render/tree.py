"""Render a configuration tree with Rich.

Each action line shows its index path, key, type, value and display
name; groups show their path, key and display name, with children
nested underneath.  Groups are always rendered expanded.
"""
from __future__ import annotations

from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

from leaderkey.config import EditorConfig
from leaderkey.model.nodes import Action, ActionOrGroup, Group, best_guess_display_name
from leaderkey.projection.lens import format_path

KEY_PLACEHOLDER = "·"


def render_tree(
    group: Group,
    config: EditorConfig | None = None,
    title: str = "Leader Key",
) -> Tree:
    """Return a ``rich.tree.Tree`` for ``group`` and all its descendants."""
    config = config or EditorConfig()
    tree = Tree(f"[bold]{escape(title)}[/bold] [dim]({len(group.actions)} item(s))[/dim]")
    _add_children(tree, group, (), config)
    return tree


def _add_children(
    branch: Tree, group: Group, prefix: tuple[int, ...], config: EditorConfig
) -> None:
    for index, item in enumerate(group.actions):
        path = prefix + (index,)
        child = branch.add(_item_label(item, path, config))
        if isinstance(item, Group):
            _add_children(child, item, path, config)


def _item_label(item: ActionOrGroup, path: tuple[int, ...], config: EditorConfig) -> Text:
    key = item.key or KEY_PLACEHOLDER
    label = Text()
    label.append(f"{format_path(path):<8}", style="dim")
    label.append(f"[{key}]", style="bold cyan" if item.key else "bold red")
    label.append(" ")
    if isinstance(item, Action):
        label.append(f"{item.type.title:<12}", style="magenta")
        label.append(item.value or "(no value)", style="" if item.value else "dim")
        label.append("  → ", style="dim")
        label.append(
            best_guess_display_name(item, limit=config.command_label_limit),
            style="green" if item.label else "italic",
        )
    else:
        label.append(f"{'Group':<12}", style="yellow")
        label.append(item.display_name, style="green" if item.label else "italic")
    return label
