"""Unit tests for leaderkey.render — Rich tree and plain/JSON/YAML dumps."""
from __future__ import annotations

import json

import yaml
from rich.console import Console

from leaderkey.config import EditorConfig
from leaderkey.model.nodes import Action, ActionType, Group
from leaderkey.render.plain import to_json, to_plain, to_yaml
from leaderkey.render.tree import KEY_PLACEHOLDER, render_tree
from leaderkey.samples import sample_tree


def _render_text(group: Group, config: EditorConfig | None = None) -> str:
    console = Console(record=True, width=160, color_system=None)
    console.print(render_tree(group, config))
    return console.export_text()


class TestRenderTree:
    def test_shows_paths_keys_and_names(self) -> None:
        text = _render_text(sample_tree())
        assert "3.1.0" in text
        assert "[t]" in text
        assert "WezTerm" in text
        assert "Google Chrome" in text
        assert "maximize" in text

    def test_group_children_nested_under_group(self) -> None:
        tree = render_tree(sample_tree())
        assert len(tree.children) == 4
        assert len(tree.children[3].children) == 2
        assert len(tree.children[3].children[1].children) == 2

    def test_unset_key_placeholder(self) -> None:
        text = _render_text(Group(key="", actions=(Action(key=""),)))
        assert f"[{KEY_PLACEHOLDER}]" in text
        assert "(no value)" in text

    def test_label_shown_when_set(self) -> None:
        group = Group(actions=(Action(key="a", value="/x/y.app", label="Why"),))
        assert "Why" in _render_text(group)

    def test_command_limit_from_config(self) -> None:
        group = Group(actions=(Action(key="a", type=ActionType.COMMAND, value="abcdefghijkl"),))
        text = _render_text(group, EditorConfig(command_label_limit=4))
        assert "abc…" in text


class TestPlain:
    def test_action_dict(self) -> None:
        group = Group(key="", actions=(Action(key="u", type=ActionType.URL, value="https://x"),))
        assert to_plain(group)["actions"] == [
            {"kind": "action", "key": "u", "type": "url", "value": "https://x", "label": None}
        ]

    def test_nested_group_dict(self) -> None:
        data = to_plain(sample_tree())
        assert data["kind"] == "group"
        raycast = data["actions"][3]
        assert raycast["kind"] == "group"
        assert raycast["key"] == "r"
        assert [a["key"] for a in raycast["actions"][1]["actions"]] == ["f", "h"]

    def test_json_parses(self) -> None:
        assert json.loads(to_json(sample_tree())) == to_plain(sample_tree())

    def test_yaml_parses(self) -> None:
        assert yaml.safe_load(to_yaml(sample_tree())) == to_plain(sample_tree())

    def test_yaml_keeps_field_order(self) -> None:
        text = to_yaml(Group(key="", actions=(Action(key="a"),)))
        assert text.index("kind") < text.index("key") < text.index("actions")
