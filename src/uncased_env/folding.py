"""Case folding strategies used to compare environment variable names."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod

from .errors import ConfigError

__all__ = [
    "CaseFolding",
    "AsciiFolding",
    "UnicodeFolding",
    "UncasedKey",
    "ASCII",
    "UNICODE",
    "folding_for",
]

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class CaseFolding(ABC):
    """Abstract case policy applied to both sides of a comparison."""

    name: str = ""

    @abstractmethod
    def lower(self, s: str) -> str:  # pragma: no cover - interface
        ...

    @abstractmethod
    def upper(self, s: str) -> str:  # pragma: no cover - interface
        ...

    @abstractmethod
    def fold(self, s: str) -> str:  # pragma: no cover - interface
        """Return the canonical form used for case-insensitive equality."""

    def equal(self, a: str, b: str) -> bool:
        return self.fold(a) == self.fold(b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AsciiFolding(CaseFolding):
    """Only ``A-Z`` and ``a-z`` change case; everything else passes through."""

    name = "ascii"

    def lower(self, s: str) -> str:
        return s.translate(_TO_LOWER)

    def upper(self, s: str) -> str:
        return s.translate(_TO_UPPER)

    def fold(self, s: str) -> str:
        return s.translate(_TO_LOWER)


class UnicodeFolding(CaseFolding):
    """Full Unicode case mapping, e.g. ``"ß".upper() == "SS"``."""

    name = "unicode"

    def lower(self, s: str) -> str:
        return s.lower()

    def upper(self, s: str) -> str:
        return s.upper()

    def fold(self, s: str) -> str:
        return s.casefold()


ASCII = AsciiFolding()
UNICODE = UnicodeFolding()

_BY_NAME: dict[str, CaseFolding] = {ASCII.name: ASCII, UNICODE.name: UNICODE}


def folding_for(name: str) -> CaseFolding:
    """Return the shared folding strategy called *name*."""
    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(_BY_NAME))
        raise ConfigError(
            f"unknown case folding {name!r}; expected one of: {choices}"
        ) from None


class UncasedKey:
    """An environment variable name that compares equal regardless of case.

    ``UncasedKey("Path") == "PATH"`` holds under either folding.  The
    original spelling is kept in :attr:`name`.
    """

    __slots__ = ("name", "folding")

    def __init__(self, name: str, folding: CaseFolding = ASCII) -> None:
        self.name = name
        self.folding = folding

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UncasedKey):
            other = other.name
        if not isinstance(other, str):
            return NotImplemented
        return self.folding.equal(self.name, other)

    def __hash__(self) -> int:
        return hash(self.folding.fold(self.name))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"UncasedKey({self.name!r}, folding={self.folding.name!r})"
