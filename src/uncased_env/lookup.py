"""Environment variable lookup under exact, uncased, lower and upper policies.

The environment is never copied: every call reads the mapping given to
:class:`EnvLookup` (``os.environ`` by default) as it is at that moment, so
variables set elsewhere in the process are seen by the next lookup.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Mapping

from .errors import VarNotFoundError
from .folding import CaseFolding, UncasedKey

logger = logging.getLogger(__name__)

__all__ = ["EnvLookup"]


class EnvLookup:
    """Resolve environment variable names with a fixed folding capability."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        folding: CaseFolding | None = None,
    ) -> None:
        if folding is None:
            from .config import configured_folding

            folding = configured_folding()
        self._environ = environ
        self.folding = folding

    def __repr__(self) -> str:
        source = "os.environ" if self._environ is None else "mapping"
        return f"EnvLookup({source}, folding={self.folding.name!r})"

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    # ------------------------------------------------------------------
    # iterators
    # ------------------------------------------------------------------
    def uncased_vars(self) -> Iterator[tuple[UncasedKey, str]]:
        """Yield ``(name, value)`` pairs whose names compare regardless of case."""
        for name, value in list(self.environ.items()):
            yield UncasedKey(name, self.folding), value

    def lower_vars(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs with lowercased names."""
        lower = self.folding.lower
        for name, value in list(self.environ.items()):
            yield lower(name), value

    def upper_vars(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs with uppercased names."""
        upper = self.folding.upper
        for name, value in list(self.environ.items()):
            yield upper(name), value

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------
    def exact_var(self, key: str) -> str:
        """Return the value of *key* exactly as spelled."""
        try:
            return self.environ[key]
        except (KeyError, UnicodeEncodeError):
            raise self._missing(key, "exact") from None

    def uncased_var(self, key: str) -> str:
        """Return the value of the first variable equal to *key* ignoring case."""
        wanted = self.folding.fold(key)
        fold = self.folding.fold
        for name, value in list(self.environ.items()):
            if fold(name) == wanted:
                return value
        raise self._missing(key, "uncased")

    def lower_var(self, key: str) -> str:
        """Return the value of the variable whose lowercased name is ``lower(key)``."""
        return self._normalized(key, self.folding.lower, "lower")

    def upper_var(self, key: str) -> str:
        """Return the value of the variable whose uppercased name is ``upper(key)``."""
        return self._normalized(key, self.folding.upper, "upper")

    def _normalized(
        self, key: str, transform: Callable[[str], str], policy: str
    ) -> str:
        wanted = transform(key)
        env = self.environ
        # a variable already spelled in the normalized case wins
        try:
            value = env.get(wanted)
        except UnicodeEncodeError:
            # not representable in the process environment
            value = None
        if value is not None:
            return value
        for name, value in list(env.items()):
            if transform(name) == wanted:
                return value
        raise self._missing(key, policy)

    def _missing(self, key: str, policy: str) -> VarNotFoundError:
        logger.debug("No environment variable matches %r (%s)", key, policy)
        return VarNotFoundError(key, policy)
