"""Click CLI interface definitions.

Defines the command-line structure and routes commands to the runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from DocPresenter.cli.runner import CommandRunner
from DocPresenter.config import DEFAULT_CONFIG_PATH, load_config_with_defaults


@click.group(help="DocPresenter: render search-index documents for display.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file (merged over the default config).",
)
@click.option(
    "--defaults",
    "default_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the default YAML config.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path, default_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading config, so
    accessor and helper modules can depend on them.
    """
    load_dotenv()
    ctx.obj = load_config_with_defaults(config_path, default_path=default_path)


@cli.command("show")
@click.argument("documents", nargs=-1, required=True, type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.pass_context
def show_cmd(ctx: click.Context, documents: tuple[Path, ...]) -> None:
    """Render documents as on their detail page."""
    CommandRunner(ctx.obj).run_present(ctx.command.name, documents, view="show")


@cli.command("index")
@click.argument("documents", nargs=-1, required=True, type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.pass_context
def index_cmd(ctx: click.Context, documents: tuple[Path, ...]) -> None:
    """Render documents as in a result list."""
    CommandRunner(ctx.obj).run_present(ctx.command.name, documents, view="index")
