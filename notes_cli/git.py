"""Integration with Git for keeping the notes home under version control."""

from __future__ import annotations

import subprocess
from pathlib import Path

from .config import Config


class GitError(RuntimeError):
    """Base error for git invocation issues."""


class Git:
    """Wrapper around the configured ``git`` executable."""

    def __init__(self, git_path: str, home_path: Path) -> None:
        self.git_path = git_path
        self.home_path = home_path

    def init(self) -> None:
        """Initialize a repository at the notes home unless one already exists."""

        if (self.home_path / ".git").is_dir():
            return
        self._run_git("init")

    # ---------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------
    def _run_git(self, *args: str) -> str:
        args_display = " ".join(args)
        try:
            process = subprocess.run(
                [self.git_path, *args],
                cwd=self.home_path,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise GitError(f"Cannot run git {args_display}: {exc}") from exc
        if process.returncode != 0:
            stderr = process.stderr.strip()
            raise GitError(
                f"git {args_display} failed (exit {process.returncode}): {stderr}"
            )
        return process.stdout


def new_git(config: Config) -> Git | None:
    """Return a :class:`Git` for ``config``, or ``None`` when git is disabled."""

    if not config.git_path:
        return None
    return Git(config.git_path, config.home_path)
