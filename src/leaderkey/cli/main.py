"""CLI entry point for leaderkey-config.

Invoked as::

    leaderkey-config [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m leaderkey.cli.main

Commands
--------
preview     Render the built-in sample configuration
edit        Edit a configuration tree interactively
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from leaderkey.config import EditorConfig
from leaderkey.model.nodes import ActionType, Group

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _prompt_chooser(action_type: ActionType, start_directory: str) -> str | None:
    """Ask for a path on the terminal; an empty answer cancels.

    Relative answers are taken relative to ``start_directory``.
    """
    kind = "folder" if action_type is ActionType.FOLDER else "application"
    answer = click.prompt(
        f"Choose {kind} in {start_directory} (empty to cancel)",
        default="",
        show_default=False,
    ).strip()
    if not answer:
        return None
    return str(Path(start_directory) / Path(answer).expanduser())


def _print_tree(group: Group, config: EditorConfig) -> None:
    from leaderkey.render.tree import render_tree

    console.print(render_tree(group, config))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="leaderkey-config")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log edits to stderr")
@click.option(
    "--applications-dir",
    default=None,
    help="Starting directory of the application chooser",
)
@click.option("--folders-dir", default=None, help="Starting directory of the folder chooser")
@click.option(
    "--command-label-limit",
    type=int,
    default=None,
    help="Maximum length of names derived from commands",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    applications_dir: str | None,
    folders_dir: str | None,
    command_label_limit: int | None,
) -> None:
    """Edit leader-key launcher configuration trees."""
    _configure_logging(verbose)
    overrides = {
        "applications_dir": applications_dir,
        "folders_dir": folders_dir,
        "command_label_limit": command_label_limit,
    }
    try:
        config = replace(
            EditorConfig.from_env(),
            **{k: v for k, v in overrides.items() if v is not None},
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    ctx.obj = config


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from leaderkey import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]leaderkey-config[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# preview command
# ---------------------------------------------------------------------------


@cli.command(name="preview")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["tree", "json", "yaml"], case_sensitive=False),
    default="tree",
    help="Output format",
)
@click.pass_obj
def preview_command(config: EditorConfig, output_format: str) -> None:
    """Render the built-in sample configuration."""
    from leaderkey.render.plain import to_json, to_yaml
    from leaderkey.samples import sample_tree

    tree = sample_tree()
    output_format = output_format.lower()
    if output_format == "tree":
        _print_tree(tree, config)
    elif output_format == "json":
        console.print(Syntax(to_json(tree), "json"))
    else:
        console.print(Syntax(to_yaml(tree), "yaml"))


# ---------------------------------------------------------------------------
# edit command
# ---------------------------------------------------------------------------


@cli.command(name="edit")
@click.option(
    "--sample/--empty",
    default=False,
    help="Start from the sample configuration instead of an empty one",
)
@click.pass_obj
def edit_command(config: EditorConfig, sample: bool) -> None:
    """Edit a configuration tree interactively.

    Type 'help' at the prompt for the list of commands.  The tree is
    printed as JSON or YAML with 'dump'; nothing is written to disk.
    """
    from leaderkey.cli.session import EditSession
    from leaderkey.projection.lens import ConfigRoot
    from leaderkey.samples import sample_tree

    root = ConfigRoot(sample_tree() if sample else Group(key=""))
    session = EditSession(root, config=config, chooser=_prompt_chooser)

    _print_tree(root.get(), config)
    while True:
        try:
            line = click.prompt("leaderkey", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            console.print()
            break

        reply = session.execute(line)
        if reply.error:
            err_console.print(f"[red]Error:[/red] {escape(reply.message)}")
            continue
        if reply.message:
            console.print(reply.message, markup=False)
        if reply.dump is not None:
            console.print(Syntax(reply.dump, reply.dump_format or "text"))
        if reply.done:
            break
        if reply.show_tree or reply.changed:
            _print_tree(root.get(), config)


if __name__ == "__main__":
    cli()
