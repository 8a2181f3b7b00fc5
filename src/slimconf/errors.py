"""Typed load-time errors raised while resolving a configuration scheme."""

from __future__ import annotations


class ConfigLoadError(ValueError):
    """Raised when a configuration scheme cannot be loaded."""


class NoResolverError(ConfigLoadError):
    """Raised when no registered resolver matches a reference."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"no resolver for {reference!r}")


class ResolveError(ConfigLoadError):
    """Raised when a matching resolver fails to fetch or parse a reference."""

    def __init__(self, reference: str, cause: BaseException | str) -> None:
        self.reference = reference
        self.cause = cause
        super().__init__(f"error resolving {reference!r}: {cause}")


class ConcurrentLoadError(ConfigLoadError):
    """Raised when a load starts while another load is still in progress."""


class PathNotFoundError(KeyError):
    """Raised by ``lookup`` when a dotted path does not resolve."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"path not found: {self.path!r}"


__all__ = [
    "ConcurrentLoadError",
    "ConfigLoadError",
    "NoResolverError",
    "PathNotFoundError",
    "ResolveError",
]
