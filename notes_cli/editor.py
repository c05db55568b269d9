"""Utilities for launching an editor on a note file."""

from __future__ import annotations

from pathlib import Path

import click


class EditorError(RuntimeError):
    """Raised when the editor cannot be launched or exits with an error."""


def open_editor(path: Path, editor_cmd: str) -> None:
    """Open ``path`` with ``editor_cmd`` and wait until the editor exits.

    ``editor_cmd`` may carry arguments (e.g. ``"vim -g"``); the note path is
    appended as the last argument.
    """

    if not editor_cmd:
        raise EditorError(
            "Editor is not set. Please set $NOTES_CLI_EDITOR or $EDITOR"
        )

    try:
        click.edit(filename=str(path), editor=editor_cmd, require_save=False)
    except click.ClickException as exc:
        raise EditorError(f"Failed to edit note: {exc.format_message()}") from exc
