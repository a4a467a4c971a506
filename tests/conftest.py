"""Shared test fixtures for leaderkey-config.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from leaderkey.model.nodes import Action, ActionType, Group
from leaderkey.projection.lens import ConfigRoot
from leaderkey.samples import sample_tree


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "leaderkey"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def foo_action() -> Action:
    """The single action of the duplicate-edit-delete scenario."""
    return Action(key="t", type=ActionType.APPLICATION, value="/Applications/Foo.app")


@pytest.fixture()
def single_root(foo_action: Action) -> ConfigRoot:
    """A root holding one application action."""
    return ConfigRoot(Group(key="", actions=(foo_action,)))


@pytest.fixture()
def sample_root() -> ConfigRoot:
    """A root holding the nested sample tree."""
    return ConfigRoot(sample_tree())
