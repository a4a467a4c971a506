"""Editor settings.

``EditorConfig`` holds the few knobs the editing surface needs: where the
application and folder choosers start, and how long a display name
derived from a command may get.  Values come from defaults, then the
environment, then CLI options.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from leaderkey.model.nodes import COMMAND_LABEL_LIMIT, ActionType

ENV_APPLICATIONS_DIR = "LEADERKEY_APPLICATIONS_DIR"
ENV_FOLDERS_DIR = "LEADERKEY_FOLDERS_DIR"
ENV_COMMAND_LABEL_LIMIT = "LEADERKEY_COMMAND_LABEL_LIMIT"


def _home() -> str:
    return str(Path.home())


@dataclass(frozen=True)
class EditorConfig:
    """Settings for the editing surface.

    Parameters
    ----------
    applications_dir:
        Starting directory of the application chooser.
    folders_dir:
        Starting directory of the folder chooser.
    command_label_limit:
        Maximum length of a display name derived from a command.
    """

    applications_dir: str = "/Applications"
    folders_dir: str = field(default_factory=_home)
    command_label_limit: int = COMMAND_LABEL_LIMIT

    def __post_init__(self) -> None:
        if not self.applications_dir:
            raise ValueError("applications_dir must not be empty")
        if not self.folders_dir:
            raise ValueError("folders_dir must not be empty")
        if self.command_label_limit < 2:
            raise ValueError(
                f"command_label_limit must be at least 2, got {self.command_label_limit}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EditorConfig":
        """Build a config from ``LEADERKEY_*`` environment variables.

        Unset variables keep their defaults.

        Raises
        ------
        ValueError
            If ``LEADERKEY_COMMAND_LABEL_LIMIT`` is not an integer or any
            value fails validation.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        if env.get(ENV_APPLICATIONS_DIR):
            overrides["applications_dir"] = env[ENV_APPLICATIONS_DIR]
        if env.get(ENV_FOLDERS_DIR):
            overrides["folders_dir"] = env[ENV_FOLDERS_DIR]
        if env.get(ENV_COMMAND_LABEL_LIMIT):
            raw = env[ENV_COMMAND_LABEL_LIMIT]
            try:
                overrides["command_label_limit"] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_COMMAND_LABEL_LIMIT} must be an integer, got {raw!r}"
                ) from None
        return cls(**overrides)  # type: ignore[arg-type]

    def start_directory(self, action_type: ActionType) -> str:
        """Return where the chooser for ``action_type`` opens."""
        if action_type is ActionType.FOLDER:
            return self.folders_dir
        return self.applications_dir
