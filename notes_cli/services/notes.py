"""High-level note workflows used by the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Callable

import click

from ..config import Config
from ..editor import EditorError
from ..editor import open_editor as default_open_editor
from ..git import GitError, new_git
from ..note import Note, NoteIOError, create_note

WarnFunc = Callable[[str], None]
OpenFunc = Callable[[Path, str], None]

INLINE_PROMPT = "Input notes inline (Send EOF by Ctrl+D to stop):"


class InputStage(Enum):
    """Stages of content acquisition for a freshly created note."""

    TRY_EDITOR = "editor"
    TRY_INLINE_STDIN = "inline"
    PATH_ONLY = "path"


@dataclass(slots=True)
class NewNoteResult:
    """Outcome of the ``new`` workflow."""

    note: Note
    stage: InputStage

    @property
    def prints_path(self) -> bool:
        return self.stage is not InputStage.TRY_EDITOR


def next_stage(stage: InputStage, *, no_inline: bool) -> InputStage:
    """Return the stage that follows a failed ``stage``."""

    if stage is InputStage.TRY_EDITOR:
        return InputStage.PATH_ONLY if no_inline else InputStage.TRY_INLINE_STDIN
    raise ValueError(f"Stage '{stage.value}' has no fallback")


def _default_warn(message: str) -> None:
    click.echo(message, err=True)


def read_inline_input(note: Note, stdin: BinaryIO, *, warn: WarnFunc) -> None:
    """Append everything available on ``stdin`` to the note file."""

    warn(INLINE_PROMPT)
    try:
        data = stdin.read()
    except OSError as exc:
        raise NoteIOError(f"Cannot read from stdin: {exc}") from exc

    try:
        with note.file_path.open("ab") as fh:
            fh.write(data)
    except OSError as exc:
        raise NoteIOError(
            f"Cannot write to note file '{note.file_path}': {exc}"
        ) from exc

    warn("")


def acquire_content(
    note: Note,
    *,
    no_inline: bool = False,
    open_fn: OpenFunc | None = None,
    stdin: BinaryIO | None = None,
    warn: WarnFunc | None = None,
) -> InputStage:
    """Populate ``note`` through the editor, inline stdin, or not at all.

    Returns the stage that completed the flow. ``TRY_EDITOR`` means the
    editor exited cleanly; the two other stages leave printing the note path
    to the caller.
    """

    of = open_fn or default_open_editor
    wf = warn or _default_warn

    stage = InputStage.TRY_EDITOR
    while True:
        if stage is InputStage.TRY_EDITOR:
            try:
                of(note.file_path, note.config.editor_cmd)
            except EditorError as exc:
                if not no_inline:
                    wf(f"Note: {exc}")
                stage = next_stage(stage, no_inline=no_inline)
                continue
            return stage

        if stage is InputStage.TRY_INLINE_STDIN:
            source = stdin if stdin is not None else click.get_binary_stream("stdin")
            read_inline_input(note, source, warn=wf)
            return stage

        # Final fallback only shows the path; users open the note themselves.
        return stage


def create_new_note(
    config: Config,
    category: str,
    filename: str,
    tags: str = "",
    *,
    no_inline: bool = False,
    open_fn: OpenFunc | None = None,
    stdin: BinaryIO | None = None,
    warn: WarnFunc | None = None,
) -> NewNoteResult:
    """Create a note on disk, register the home with git, and fill it in."""

    wf = warn or _default_warn

    note = create_note(category, filename, tags, config)

    git = new_git(config)
    if git is not None:
        try:
            git.init()
        except GitError as exc:
            wf(f"Warning: {exc}")

    stage = acquire_content(
        note, no_inline=no_inline, open_fn=open_fn, stdin=stdin, warn=wf
    )
    return NewNoteResult(note=note, stage=stage)
