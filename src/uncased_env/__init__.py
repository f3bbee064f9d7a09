from __future__ import annotations

from collections.abc import Iterator

from .errors import ConfigError, UncasedEnvError, VarNotFoundError
from .folding import ASCII, UNICODE, AsciiFolding, CaseFolding, UncasedKey, UnicodeFolding
from .lookup import EnvLookup

# Built on first use so that the folding configuration is read once.
_default: EnvLookup | None = None


def default_lookup() -> EnvLookup:
    """Return the process-wide lookup over ``os.environ``."""
    global _default
    if _default is None:
        _default = EnvLookup()
    return _default


def reset_default() -> None:
    """Forget the process-wide lookup; the configuration is re-read on next use."""
    global _default
    _default = None


def exact_var(key: str) -> str:
    """Return the value of *key* exactly as spelled."""
    return default_lookup().exact_var(key)


def uncased_var(key: str) -> str:
    """Return the value of *key* matched regardless of case."""
    return default_lookup().uncased_var(key)


def lower_var(key: str) -> str:
    """Return the value of the variable whose lowercased name matches *key*."""
    return default_lookup().lower_var(key)


def upper_var(key: str) -> str:
    """Return the value of the variable whose uppercased name matches *key*."""
    return default_lookup().upper_var(key)


def uncased_vars() -> Iterator[tuple[UncasedKey, str]]:
    """Iterate the environment with names that compare regardless of case."""
    return default_lookup().uncased_vars()


def lower_vars() -> Iterator[tuple[str, str]]:
    """Iterate the environment with lowercased names."""
    return default_lookup().lower_vars()


def upper_vars() -> Iterator[tuple[str, str]]:
    """Iterate the environment with uppercased names."""
    return default_lookup().upper_vars()


__all__ = [
    "EnvLookup",
    "CaseFolding",
    "AsciiFolding",
    "UnicodeFolding",
    "UncasedKey",
    "ASCII",
    "UNICODE",
    "UncasedEnvError",
    "VarNotFoundError",
    "ConfigError",
    "default_lookup",
    "reset_default",
    "exact_var",
    "uncased_var",
    "lower_var",
    "upper_var",
    "uncased_vars",
    "lower_vars",
    "upper_vars",
]
