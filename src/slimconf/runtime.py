"""
slimconf — process-wide configuration slot.

File: src/slimconf/runtime.py
Last updated: 2026-10-17

Purpose
- Offer a load-once-at-startup singleton for applications that prefer module
  functions (``runtime.get_int("db.port", 5432)``) over passing a ``Config``.

What should be included in this file
- Registered resolvers and the active ``Config`` behind a lock.
- ``load``: builds a new ``Config`` off to the side and publishes it in one
  assignment; a failed load leaves the previous handle in place.
- A single-acquisition guard rejecting loads that overlap another load.
- Module-level read API delegating to the active handle.
"""

from __future__ import annotations

import threading
from typing import Any, TypeVar

import structlog

from slimconf.config import Config
from slimconf.environment import EnvironSource
from slimconf.errors import ConcurrentLoadError
from slimconf.loader import default_resolvers, load_config
from slimconf.resolvers.base import Resolver
from slimconf.values import Value

F = TypeVar("F")

_STATE_LOCK = threading.Lock()
_LOAD_GUARD = threading.Lock()
_ACTIVE_CONFIG: Config = Config.empty()
_RESOLVERS: tuple[Resolver, ...] = default_resolvers()


def set_resolvers(*resolvers: Resolver) -> None:
    """Replace the resolvers used by ``load``. Order decides dispatch."""

    global _RESOLVERS
    with _STATE_LOCK:
        _RESOLVERS = tuple(resolvers)


def get_resolvers() -> tuple[Resolver, ...]:
    with _STATE_LOCK:
        return _RESOLVERS


def load(
    prefix: str,
    *references: str,
    environ: EnvironSource | None = None,
    logger: Any | None = None,
) -> Config:
    """Load a scheme and publish the result as the active configuration.

    Intended to be called once at startup. Raises ``ConcurrentLoadError`` if
    another ``load`` is still running, and any ``ConfigLoadError`` from the
    loader, in which case the active configuration is left untouched.
    """

    if not _LOAD_GUARD.acquire(blocking=False):
        raise ConcurrentLoadError("a configuration load is already in progress")
    try:
        loaded = load_config(
            *references,
            prefix=prefix,
            resolvers=get_resolvers(),
            environ=environ,
            logger=logger,
        )
        _publish(loaded)
    finally:
        _LOAD_GUARD.release()

    log = logger if logger is not None else structlog.get_logger(__name__)
    log.info("config_published", top_level_keys=sorted(loaded.to_dict()))
    return loaded


def current() -> Config:
    """Return the active configuration (empty until a load succeeds)."""

    with _STATE_LOCK:
        return _ACTIVE_CONFIG


def reset() -> None:
    """Drop the active configuration and restore the default resolvers."""

    global _ACTIVE_CONFIG, _RESOLVERS
    with _STATE_LOCK:
        _ACTIVE_CONFIG = Config.empty()
        _RESOLVERS = default_resolvers()


def _publish(config: Config) -> None:
    global _ACTIVE_CONFIG
    with _STATE_LOCK:
        _ACTIVE_CONFIG = config


def get_string(path: str, fallback: str = "") -> str:
    return current().get_string(path, fallback)


def get_int(path: str, fallback: int = 0) -> int:
    return current().get_int(path, fallback)


def get_float(path: str, fallback: float = 0.0) -> float:
    return current().get_float(path, fallback)


def get_bool(path: str, fallback: bool = False) -> bool:
    return current().get_bool(path, fallback)


def get_any(path: str, fallback: F = None) -> Value | F:  # type: ignore[assignment]
    return current().get_any(path, fallback)


def get_string_slice(path: str, fallback: list[str] | None = None) -> list[str]:
    return current().get_string_slice(path, fallback)


def get_int_slice(path: str, fallback: list[int] | None = None) -> list[int]:
    return current().get_int_slice(path, fallback)


def get_float_slice(path: str, fallback: list[float] | None = None) -> list[float]:
    return current().get_float_slice(path, fallback)


def get_bool_slice(path: str, fallback: list[bool] | None = None) -> list[bool]:
    return current().get_bool_slice(path, fallback)


def get_string_map(path: str, fallback: dict[str, str] | None = None) -> dict[str, str]:
    return current().get_string_map(path, fallback)


def get_int_map(path: str, fallback: dict[str, int] | None = None) -> dict[str, int]:
    return current().get_int_map(path, fallback)


def get_float_map(path: str, fallback: dict[str, float] | None = None) -> dict[str, float]:
    return current().get_float_map(path, fallback)


def get_bool_map(path: str, fallback: dict[str, bool] | None = None) -> dict[str, bool]:
    return current().get_bool_map(path, fallback)


__all__ = [
    "current",
    "get_any",
    "get_bool",
    "get_bool_map",
    "get_bool_slice",
    "get_float",
    "get_float_map",
    "get_float_slice",
    "get_int",
    "get_int_map",
    "get_int_slice",
    "get_resolvers",
    "get_string",
    "get_string_map",
    "get_string_slice",
    "load",
    "reset",
    "set_resolvers",
]
