"""Unit tests for leaderkey.cli.session — the line-command editing surface."""
from __future__ import annotations

import json

import pytest

from leaderkey.config import EditorConfig
from leaderkey.cli.session import HELP_TEXT, EditSession
from leaderkey.model.nodes import Action, ActionType, Group
from leaderkey.projection.lens import ConfigRoot


@pytest.fixture()
def session(sample_root: ConfigRoot) -> EditSession:
    return EditSession(sample_root)


def _keys(group: Group) -> list[str | None]:
    return [item.key for item in group.actions]


class TestParsing:
    def test_blank_line_is_a_no_op(self, session: EditSession) -> None:
        before = session.root.get()
        reply = session.execute("   ")
        assert not reply.error
        assert not reply.changed
        assert session.root.get() is before

    def test_unknown_command(self, session: EditSession) -> None:
        reply = session.execute("frobnicate 0")
        assert reply.error
        assert "frobnicate" in reply.message

    def test_unbalanced_quotes(self, session: EditSession) -> None:
        reply = session.execute('value 0 "open')
        assert reply.error

    def test_command_names_are_case_insensitive(self, session: EditSession) -> None:
        assert not session.execute("SHOW").error

    def test_help(self, session: EditSession) -> None:
        assert session.execute("help").message == HELP_TEXT

    @pytest.mark.parametrize("word", ["quit", "exit"])
    def test_quit(self, session: EditSession, word: str) -> None:
        assert session.execute(word).done


class TestStructuralCommands:
    def test_add_action_at_top_level(self, session: EditSession) -> None:
        reply = session.execute("add-action")
        assert reply.changed
        assert reply.message == "Added action 4"
        assert session.root.get().actions[4] == Action(key="", type=ActionType.APPLICATION)

    def test_add_group_in_nested_group(self, session: EditSession) -> None:
        reply = session.execute("add-group 3.1")
        assert reply.message == "Added group 3.1.2"
        assert session.root.get().actions[3].actions[1].actions[2] == Group(key="")

    def test_add_into_action_fails(self, session: EditSession) -> None:
        reply = session.execute("add-action 0")
        assert reply.error
        assert not reply.changed

    def test_delete(self, session: EditSession) -> None:
        reply = session.execute("delete 1")
        assert reply.changed
        assert "Firefox" in reply.message
        assert _keys(session.root.get()) == ["t", "b", "r"]

    def test_delete_nested(self, session: EditSession) -> None:
        session.execute("delete 3.1.0")
        assert _keys(session.root.get().actions[3].actions[1]) == ["h"]

    def test_delete_out_of_range(self, session: EditSession) -> None:
        reply = session.execute("delete 9")
        assert reply.error
        assert "out of range" in reply.message
        assert len(session.root.get().actions) == 4

    def test_delete_needs_path(self, session: EditSession) -> None:
        assert session.execute("delete").error

    def test_delete_root_is_rejected(self, session: EditSession) -> None:
        assert session.execute("delete .").error

    def test_duplicate(self, session: EditSession) -> None:
        reply = session.execute("duplicate 2")
        assert reply.message == "Duplicated 2 as 3"
        tree = session.root.get()
        assert _keys(tree) == ["t", "f", "b", "b", "r"]
        assert tree.actions[2] == tree.actions[3]


class TestFieldCommands:
    def test_key(self, session: EditSession) -> None:
        session.execute("key 3.0 x")
        assert session.root.get().actions[3].actions[0].key == "x"

    def test_key_without_text_clears(self, session: EditSession) -> None:
        session.execute("key 0")
        assert session.root.get().actions[0].key == ""

    def test_label_on_group(self, session: EditSession) -> None:
        session.execute('label 2 "Web browsers"')
        assert session.root.get().actions[2].label == "Web browsers"

    def test_label_cleared(self, session: EditSession) -> None:
        session.execute("label 0 Term")
        reply = session.execute("label 0")
        assert session.root.get().actions[0].label is None
        assert "WezTerm" in reply.message

    def test_type_keeps_value(self, session: EditSession) -> None:
        reply = session.execute("type 0 command")
        action = session.root.get().actions[0]
        assert reply.message == "Type of 0 set to Command"
        assert action.type is ActionType.COMMAND
        assert action.value == "/Applications/WezTerm.app"

    def test_unknown_type(self, session: EditSession) -> None:
        reply = session.execute("type 0 script")
        assert reply.error
        assert "application" in reply.message

    def test_type_on_group_is_a_mismatch(self, session: EditSession) -> None:
        reply = session.execute("type 2 url")
        assert reply.error
        assert session.root.get().actions[2].key == "b"

    def test_value_joins_words(self, session: EditSession) -> None:
        session.execute("type 1 command")
        session.execute("value 1 open -a Firefox")
        assert session.root.get().actions[1].value == "open -a Firefox"

    def test_value_on_group_is_a_mismatch(self, session: EditSession) -> None:
        assert session.execute("value 3 x").error


class TestChoose:
    def test_choose_uses_chooser(self, sample_root: ConfigRoot) -> None:
        calls: list[tuple[ActionType, str]] = []

        def chooser(action_type: ActionType, start: str) -> str:
            calls.append((action_type, start))
            return "/Applications/Kitty.app"

        session = EditSession(
            sample_root, config=EditorConfig(applications_dir="/Apps"), chooser=chooser
        )
        reply = session.execute("choose 0")
        assert reply.changed
        assert calls == [(ActionType.APPLICATION, "/Apps")]
        assert sample_root.get().actions[0].value == "/Applications/Kitty.app"

    def test_default_chooser_cancels(self, session: EditSession) -> None:
        reply = session.execute("choose 0")
        assert not reply.error
        assert not reply.changed
        assert session.root.get().actions[0].value == "/Applications/WezTerm.app"

    def test_choose_on_url_is_rejected(self, session: EditSession) -> None:
        reply = session.execute("choose 3.0")
        assert reply.error
        assert "chooser" in reply.message


class TestDisplayCommands:
    def test_show(self, session: EditSession) -> None:
        assert session.execute("show").show_tree

    def test_dump_json(self, session: EditSession) -> None:
        reply = session.execute("dump json")
        assert reply.dump_format == "json"
        assert json.loads(reply.dump or "")["actions"][0]["key"] == "t"

    def test_dump_defaults_to_yaml(self, session: EditSession) -> None:
        reply = session.execute("dump")
        assert reply.dump_format == "yaml"
        assert "kind: group" in (reply.dump or "")

    def test_dump_unknown_format(self, session: EditSession) -> None:
        assert session.execute("dump toml").error


class TestWalkthrough:
    def test_duplicate_edit_delete(self, single_root: ConfigRoot) -> None:
        session = EditSession(single_root)
        session.execute("duplicate 0")
        session.execute("key 1 f")
        assert single_root.get().actions[0].key == "t"
        session.execute("delete 0")
        assert _keys(single_root.get()) == ["f"]
