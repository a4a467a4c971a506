"""A small nested configuration used by ``leaderkey-config preview``."""
from __future__ import annotations

from leaderkey.model.nodes import Action, ActionType, Group


def sample_tree() -> Group:
    """Return a demo tree with actions, a group and a nested subgroup."""
    return Group(
        key="",
        actions=(
            Action(key="t", type=ActionType.APPLICATION, value="/Applications/WezTerm.app"),
            Action(key="f", type=ActionType.APPLICATION, value="/Applications/Firefox.app"),
            Group(
                key="b",
                actions=(
                    Action(
                        key="c",
                        type=ActionType.APPLICATION,
                        value="/Applications/Google Chrome.app",
                    ),
                    Action(key="s", type=ActionType.APPLICATION, value="/Applications/Safari.app"),
                ),
            ),
            Group(
                key="r",
                actions=(
                    Action(
                        key="e",
                        type=ActionType.URL,
                        value="raycast://extensions/raycast/emoji-symbols/search-emoji-symbols",
                    ),
                    Group(
                        key="w",
                        actions=(
                            Action(
                                key="f",
                                type=ActionType.URL,
                                value="raycast://window-management/maximize",
                            ),
                            Action(
                                key="h",
                                type=ActionType.URL,
                                value="raycast://window-management/left-half",
                            ),
                        ),
                    ),
                ),
            ),
        ),
    )
