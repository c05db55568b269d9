from __future__ import annotations

from pathlib import Path

import click
import pytest
from notes_cli.editor import EditorError, open_editor


def test_editor_is_called_with_note_path(tmp_path: Path, monkeypatch) -> None:
    captured: dict[str, object] = {}

    def fake_edit(**kwargs) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("notes_cli.editor.click.edit", fake_edit)

    open_editor(tmp_path / "todo", "vim -g")

    assert captured["filename"] == str(tmp_path / "todo")
    assert captured["editor"] == "vim -g"
    assert captured["require_save"] is False


def test_windows_editor_path_is_passed_unchanged(
    tmp_path: Path, monkeypatch
) -> None:
    captured: dict[str, object] = {}

    def fake_edit(**kwargs) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("notes_cli.editor.click.edit", fake_edit)

    open_editor(tmp_path / "todo", r"C:\Tools\notepad.exe")

    assert captured["editor"] == r"C:\Tools\notepad.exe"


def test_empty_editor_command_fails(tmp_path: Path, monkeypatch) -> None:
    def fake_edit(**kwargs) -> None:
        raise AssertionError("editor must not be launched")

    monkeypatch.setattr("notes_cli.editor.click.edit", fake_edit)

    with pytest.raises(EditorError) as excinfo:
        open_editor(tmp_path / "note", "")
    assert "NOTES_CLI_EDITOR" in str(excinfo.value)


def test_editing_failure_becomes_editor_error(tmp_path: Path, monkeypatch) -> None:
    def fake_edit(**kwargs) -> None:
        raise click.ClickException("vim: Editing failed")

    monkeypatch.setattr("notes_cli.editor.click.edit", fake_edit)

    with pytest.raises(EditorError) as excinfo:
        open_editor(tmp_path / "note", "vim")

    assert "Editing failed" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, click.ClickException)
