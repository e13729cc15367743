"""Custom exception hierarchy for fragcache."""

from __future__ import annotations


class FragCacheError(Exception):
    """Base exception for all fragcache errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class UnknownFragmentKeyError(FragCacheError, KeyError):
    """A lookup used a string that is not a registered fragment key."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Unknown fragment key: {key!r}")
        self.key = key

    def __str__(self) -> str:
        return self.message


class GeneratorTableError(FragCacheError):
    """Generator table does not cover exactly the registered keys."""

    def __init__(
        self,
        message: str = "",
        missing: list[str] | None = None,
        unexpected: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.missing = missing or []
        self.unexpected = unexpected or []


class ConfigError(FragCacheError):
    """Resolved configuration holds a value of the wrong type or range."""
