# uncased_env/root.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

__all__ = ["ProjectRootNotFoundError", "find_project_root"]


class ProjectRootNotFoundError(RuntimeError):
    """Raised when no project root can be located."""


# Python packaging + VCS
_ROOT_FILES: tuple[str, ...] = ("pyproject.toml", "setup.cfg", "setup.py")
_ROOT_DIRS: tuple[str, ...] = (".git", ".hg", ".svn")


def _walk_up(start: Path) -> Iterable[Path]:
    cur = start
    while True:
        yield cur
        if cur.parent == cur:
            return
        cur = cur.parent


def _is_root(cur: Path) -> bool:
    if any((cur / f).is_file() for f in _ROOT_FILES):
        return True
    return any((cur / d).exists() for d in _ROOT_DIRS)


def find_project_root(start: str | Path | None = None) -> Path:
    """
    Find the nearest directory above `start` holding packaging or VCS markers.

    `start` defaults to the working directory; the nearest match wins.
    """
    start_path = (Path.cwd() if start is None else Path(start)).resolve(strict=False)
    for cur in _walk_up(start_path):
        if _is_root(cur):
            return cur
    raise ProjectRootNotFoundError(f"No project root found from {start_path}")
