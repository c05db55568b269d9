"""Shared helpers for notes-cli commands."""

from __future__ import annotations

from typing import Any

import click

from ..config import Config, ConfigError, resolve

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class NotesCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_config(ctx: click.Context) -> Config:
    """Return the Config resolved for the current CLI invocation."""

    config: Config | None = ctx.obj.get("config")
    if config is not None:
        return config

    try:
        config = resolve()
    except ConfigError as exc:
        raise NotesCliError(str(exc)) from exc

    ctx.obj["config"] = config
    return config
