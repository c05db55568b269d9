"""Configuration resolution for notes-cli.

Everything the tool knows about its environment is read once by
:func:`resolve` and carried around in an immutable :class:`Config`.
"""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

APP_DIRNAME = "notes-cli"
DEFAULT_PAGER_CMD = "less -R -F -X"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class ResolutionError(ConfigError):
    """Raised when the notes home directory cannot be located or created."""


@dataclass(frozen=True, slots=True)
class Config:
    """Resolved configuration of a single notes-cli invocation.

    ``git_path``, ``editor_cmd`` and ``pager_cmd`` are empty strings when the
    corresponding tool is not available.
    """

    home_path: Path
    git_path: str = ""
    editor_cmd: str = ""
    pager_cmd: str = ""


def _user_home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ResolutionError(
            "Cannot locate home directory. Please set $NOTES_CLI_HOME"
        ) from exc


def home_path(environ: Mapping[str, str], platform: str) -> Path:
    """Return the notes home directory without touching the filesystem.

    Precedence: ``$NOTES_CLI_HOME``, ``$XDG_DATA_HOME/notes-cli``,
    ``$APPLOCALDATA/notes-cli`` (Windows only), then
    ``~/.local/share/notes-cli``.
    """

    env = environ.get("NOTES_CLI_HOME", "")
    if env:
        if env.startswith("~" + os.sep) or env.startswith("~/"):
            env = str(_user_home() / env[2:])
        return Path(os.path.abspath(env))

    xdg = environ.get("XDG_DATA_HOME", "")
    if xdg:
        return Path(os.path.abspath(os.path.join(xdg, APP_DIRNAME)))

    if platform == "win32":
        local = environ.get("APPLOCALDATA", "")
        if local:
            return Path(os.path.abspath(os.path.join(local, APP_DIRNAME)))

    return _user_home() / ".local" / "share" / APP_DIRNAME


def git_path(environ: Mapping[str, str]) -> str:
    candidate = "git"
    if "NOTES_CLI_GIT" in environ:
        candidate = os.path.normpath(environ["NOTES_CLI_GIT"])

    found = shutil.which(candidate)
    if found is None:
        # Git is optional
        return ""
    return os.path.abspath(found)


def editor_cmd(environ: Mapping[str, str]) -> str:
    if "NOTES_CLI_EDITOR" in environ:
        return environ["NOTES_CLI_EDITOR"]
    return environ.get("EDITOR", "")


def pager_cmd(environ: Mapping[str, str]) -> str:
    if "NOTES_CLI_PAGER" in environ:
        return environ["NOTES_CLI_PAGER"]
    if "PAGER" in environ:
        return environ["PAGER"]
    if shutil.which("less") is not None:
        return DEFAULT_PAGER_CMD
    return ""


def resolve(
    environ: Mapping[str, str] | None = None, *, platform: str | None = None
) -> Config:
    """Build a :class:`Config` from the process environment.

    Parameters
    ----------
    environ:
        Environment mapping to read. Defaults to ``os.environ``.
    platform:
        Platform identifier in ``sys.platform`` form. Defaults to the
        running platform.

    Raises
    ------
    ResolutionError
        If the user's home directory is needed but unknown, or if the notes
        home directory cannot be created.
    """

    env = os.environ if environ is None else environ
    plat = sys.platform if platform is None else platform

    home = home_path(env, plat)
    try:
        home.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        raise ResolutionError(f"Could not create home '{home}': {exc}") from exc

    return Config(
        home_path=home,
        git_path=git_path(env),
        editor_cmd=editor_cmd(env),
        pager_cmd=pager_cmd(env),
    )
