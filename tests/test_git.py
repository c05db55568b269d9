from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest
from notes_cli import git as git_module
from notes_cli.config import Config
from notes_cli.git import Git, GitError, new_git


def test_new_git_is_none_when_disabled(tmp_path: Path) -> None:
    assert new_git(Config(home_path=tmp_path, git_path="")) is None


def test_new_git_uses_configured_executable(tmp_path: Path) -> None:
    git = new_git(Config(home_path=tmp_path, git_path="/opt/bin/git"))

    assert git is not None
    assert git.git_path == "/opt/bin/git"
    assert git.home_path == tmp_path


def test_init_runs_git_init_in_home(tmp_path: Path, monkeypatch) -> None:
    calls: list[tuple[list[str], Path]] = []

    def fake_run(args, cwd, **kwargs):
        calls.append((list(args), cwd))
        return subprocess.CompletedProcess(args, 0, stdout="", stderr="")

    monkeypatch.setattr(git_module.subprocess, "run", fake_run)

    Git("/opt/bin/git", tmp_path).init()

    assert calls == [(["/opt/bin/git", "init"], tmp_path)]


def test_init_skips_existing_repository(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".git").mkdir()

    def fake_run(*args, **kwargs):
        raise AssertionError("git must not be invoked")

    monkeypatch.setattr(git_module.subprocess, "run", fake_run)

    Git("/opt/bin/git", tmp_path).init()


def test_init_failure_surfaces_exit_status(tmp_path: Path, monkeypatch) -> None:
    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args, 128, stdout="", stderr="fatal: nope\n")

    monkeypatch.setattr(git_module.subprocess, "run", fake_run)

    with pytest.raises(GitError) as excinfo:
        Git("/opt/bin/git", tmp_path).init()

    assert "exit 128" in str(excinfo.value)
    assert "fatal: nope" in str(excinfo.value)


def test_init_launch_failure_is_git_error(tmp_path: Path) -> None:
    with pytest.raises(GitError):
        Git(str(tmp_path / "missing-git"), tmp_path).init()


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
def test_init_with_real_git_is_idempotent(tmp_path: Path) -> None:
    git = Git(shutil.which("git") or "git", tmp_path)

    git.init()
    git.init()

    assert (tmp_path / ".git").is_dir()
