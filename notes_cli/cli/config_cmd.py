"""Config command for notes-cli."""

from __future__ import annotations

from typing import Any

import click
import yaml

from ..config import Config
from ._common import get_config

FIELDS = ("home", "git", "editor", "pager")


@click.command(name="config")
@click.argument("name", required=False, type=click.Choice(FIELDS))
@click.pass_context
def config(ctx: click.Context, name: str | None) -> None:
    """Show the resolved configuration, or a single NAME from it."""

    values = _config_values(get_config(ctx))
    if name is not None:
        click.echo(values[name])
        return

    click.echo(yaml.safe_dump(values, sort_keys=False).strip())


def _config_values(config: Config) -> dict[str, Any]:
    return {
        "home": str(config.home_path),
        "git": config.git_path,
        "editor": config.editor_cmd,
        "pager": config.pager_cmd,
    }


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
