"""Note model and on-disk creation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import Config


class NoteError(RuntimeError):
    """Base error for note creation issues."""


class ValidationError(NoteError):
    """Raised when a category or filename cannot be used as a path segment."""


class NoteExistsError(NoteError):
    """Raised when the target note file is already on disk."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Cannot create new note since file '{path}' already exists"
        )
        self.path = path


class NoteIOError(NoteError):
    """Raised when reading or writing note files fails."""


def _check_segment(kind: str, value: str) -> None:
    if not value:
        raise ValidationError(f"{kind.capitalize()} must not be empty")
    separators = {"/", os.sep, "\x00"}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in value for sep in separators) or value in {".", ".."}:
        raise ValidationError(
            f"{kind.capitalize()} '{value}' must be a single directory name"
        )


@dataclass(slots=True)
class Note:
    """A note file placed at ``<home>/<category>/<filename>``."""

    category: str
    filename: str
    tags: str
    config: Config

    @property
    def category_path(self) -> Path:
        return self.config.home_path / self.category

    @property
    def file_path(self) -> Path:
        return self.category_path / self.filename

    def validate(self) -> None:
        _check_segment("category", self.category)
        _check_segment("filename", self.filename)

    def create(self) -> None:
        """Create the category directory and an empty note file.

        Never truncates an existing file: ``NoteExistsError`` is raised
        instead so callers can tell the user.
        """

        try:
            self.category_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise NoteIOError(
                f"Cannot create category directory '{self.category_path}': {exc}"
            ) from exc

        try:
            with self.file_path.open("x", encoding="utf-8"):
                pass
        except FileExistsError as exc:
            raise NoteExistsError(self.file_path) from exc
        except OSError as exc:
            raise NoteIOError(
                f"Cannot create note file '{self.file_path}': {exc}"
            ) from exc


def create_note(category: str, filename: str, tags: str, config: Config) -> Note:
    """Validate the note location and create the file on disk."""

    note = Note(category=category, filename=filename, tags=tags or "", config=config)
    note.validate()
    note.create()
    return note
