class UncasedEnvError(Exception):
    """Base class for uncased-env errors."""


class VarNotFoundError(UncasedEnvError, KeyError):
    """Raised when no environment variable matches a key under a case policy."""

    def __init__(self, key: str, policy: str = "exact") -> None:
        super().__init__(key)
        self.key = key
        self.policy = policy

    def __str__(self) -> str:
        return f"environment variable not found ({self.policy}): {self.key!r}"


class ConfigError(UncasedEnvError):
    """Raised when the folding configuration is invalid."""
