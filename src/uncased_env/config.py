from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

try:  # pragma: no cover - Python <3.11
    import tomllib  # type: ignore
except Exception:  # pragma: no cover - fallback
    import tomli as tomllib  # type: ignore

from .errors import ConfigError
from .folding import ASCII, CaseFolding, folding_for
from .root import ProjectRootNotFoundError, find_project_root

logger = logging.getLogger(__name__)

ENV_VAR = "UNCASED_ENV_FOLDING"
TOOL_TABLE = "uncased-env"
DEFAULT_FOLDING = ASCII.name


# ---------------------------------------------------------------------------
# pyproject.toml
# ---------------------------------------------------------------------------

def _read_pyproject(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to read config %s: %s", path, exc)
        return {}


def _table(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key, {})
    return value if isinstance(value, Mapping) else {}


def pyproject_folding(start: str | Path | None = None) -> str | None:
    """Return ``[tool.uncased-env] folding`` from the nearest ``pyproject.toml``.

    The search starts at *start*, or the working directory at call time.
    Unusable values are logged and ignored.
    """
    try:
        root = find_project_root(start)
    except ProjectRootNotFoundError:
        return None
    ppt = root / "pyproject.toml"
    if not ppt.is_file():
        return None
    table = _table(_table(_read_pyproject(ppt), "tool"), TOOL_TABLE)
    value = table.get("folding")
    if value is None:
        return None
    if not isinstance(value, str):
        logger.warning(
            "Ignoring config %s: tool.%s.folding must be a string", ppt, TOOL_TABLE
        )
        return None
    return value


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def _usable(raw: str | None, source: str) -> CaseFolding | None:
    if not raw:
        return None
    try:
        return folding_for(raw)
    except ConfigError as exc:
        logger.warning("Ignoring %s: %s", source, exc)
        return None


def configured_folding(
    environ: Mapping[str, str] | None = None,
    *,
    start: str | Path | None = None,
) -> CaseFolding:
    """Resolve the folding capability.

    The ``UNCASED_ENV_FOLDING`` variable wins over the project's
    ``pyproject.toml``; without either the ASCII rules apply.  An unknown
    value is logged and skipped, so resolution never fails.
    """

    env = os.environ if environ is None else environ
    source = ENV_VAR
    folding = _usable(env.get(ENV_VAR), source)
    if folding is None:
        source = "pyproject.toml"
        folding = _usable(pyproject_folding(start), source)
    if folding is None:
        source = "default"
        folding = folding_for(DEFAULT_FOLDING)
    logger.debug("Using %s case folding (from %s)", folding.name, source)
    return folding
