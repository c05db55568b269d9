"""New command for notes-cli."""

from __future__ import annotations

import click

from ..note import NoteError
from ..services.notes import create_new_note
from ._common import NotesCliError, get_config


@click.command(name="new")
@click.argument("category")
@click.argument("filename")
@click.argument("tags", required=False, default="")
@click.option(
    "--no-inline-input",
    "no_inline",
    is_flag=True,
    help="Do not request inline input even if no editor is set.",
)
@click.pass_context
def new(
    ctx: click.Context, category: str, filename: str, tags: str, no_inline: bool
) -> None:
    """Create a new note.

    CATEGORY is a directory name under the notes home, FILENAME the note's
    file name and TAGS an optional comma-separated list of tags.
    """

    config = get_config(ctx)

    try:
        result = create_new_note(
            config, category, filename, tags, no_inline=no_inline
        )
    except NoteError as exc:
        raise NotesCliError(str(exc)) from exc

    if result.prints_path:
        click.echo(str(result.note.file_path))


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(new)
