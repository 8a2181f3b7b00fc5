"""
slimconf — dotted-path lookup and typed getters.

File: src/slimconf/accessor.py
Last updated: 2026-10-17

Purpose
- Resolve ``a.b.c`` paths against a document and coerce the found value.

Functional requirements
- Non-final segments must be map-shaped (canonical or foreign mapping).
- Typed getters never raise: any failure yields the caller's fallback.
- Container getters drop elements that fail to coerce; an empty container
  yields an empty result, not the fallback.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Final, TypeVar

from slimconf.errors import PathNotFoundError
from slimconf.values import (
    Value,
    as_document,
    convert_mapping,
    convert_sequence,
    to_bool,
    to_float,
    to_int,
    to_text,
)

PATH_SEPARATOR: Final[str] = "."

T = TypeVar("T")
F = TypeVar("F")


def lookup(document: Mapping[object, object], path: str) -> Value:
    """Return the raw value at ``path``. Raises ``PathNotFoundError``."""

    current: object = document
    for segment in path.split(PATH_SEPARATOR):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
            continue
        # Foreign mappings (non-string keys, other Mapping types) need key stringification.
        mapping = as_document(current)
        if mapping is None or segment not in mapping:
            raise PathNotFoundError(path)
        current = mapping[segment]
    return current  # type: ignore[return-value]


def has_path(document: Mapping[object, object], path: str) -> bool:
    try:
        lookup(document, path)
    except PathNotFoundError:
        return False
    return True


def get_string(document: Mapping[object, object], path: str, fallback: str) -> str:
    return _get_scalar(document, path, fallback, to_text)


def get_int(document: Mapping[object, object], path: str, fallback: int) -> int:
    return _get_scalar(document, path, fallback, to_int)


def get_float(document: Mapping[object, object], path: str, fallback: float) -> float:
    return _get_scalar(document, path, fallback, to_float)


def get_bool(document: Mapping[object, object], path: str, fallback: bool) -> bool:
    return _get_scalar(document, path, fallback, to_bool)


def get_any(document: Mapping[object, object], path: str, fallback: F) -> Value | F:
    """Return a copy of the raw value at ``path`` without coercion."""

    try:
        found = lookup(document, path)
    except PathNotFoundError:
        return fallback
    return copy.deepcopy(found)


def get_string_slice(
    document: Mapping[object, object], path: str, fallback: list[str]
) -> list[str]:
    return _get_slice(document, path, fallback, to_text)


def get_int_slice(document: Mapping[object, object], path: str, fallback: list[int]) -> list[int]:
    return _get_slice(document, path, fallback, to_int)


def get_float_slice(
    document: Mapping[object, object], path: str, fallback: list[float]
) -> list[float]:
    return _get_slice(document, path, fallback, to_float)


def get_bool_slice(
    document: Mapping[object, object], path: str, fallback: list[bool]
) -> list[bool]:
    return _get_slice(document, path, fallback, to_bool)


def get_string_map(
    document: Mapping[object, object], path: str, fallback: dict[str, str]
) -> dict[str, str]:
    return _get_map(document, path, fallback, to_text)


def get_int_map(
    document: Mapping[object, object], path: str, fallback: dict[str, int]
) -> dict[str, int]:
    return _get_map(document, path, fallback, to_int)


def get_float_map(
    document: Mapping[object, object], path: str, fallback: dict[str, float]
) -> dict[str, float]:
    return _get_map(document, path, fallback, to_float)


def get_bool_map(
    document: Mapping[object, object], path: str, fallback: dict[str, bool]
) -> dict[str, bool]:
    return _get_map(document, path, fallback, to_bool)


def _get_scalar(
    document: Mapping[object, object],
    path: str,
    fallback: T,
    coerce: Callable[[object], T],
) -> T:
    try:
        return coerce(lookup(document, path))
    except (PathNotFoundError, TypeError, ValueError):
        return fallback


def _get_slice(
    document: Mapping[object, object],
    path: str,
    fallback: list[T],
    coerce: Callable[[object], T],
) -> list[T]:
    try:
        found = lookup(document, path)
    except PathNotFoundError:
        return fallback
    converted = convert_sequence(found, coerce)
    return fallback if converted is None else converted


def _get_map(
    document: Mapping[object, object],
    path: str,
    fallback: dict[str, T],
    coerce: Callable[[object], T],
) -> dict[str, T]:
    try:
        found = lookup(document, path)
    except PathNotFoundError:
        return fallback
    converted = convert_mapping(found, coerce)
    return fallback if converted is None else converted


__all__ = [
    "PATH_SEPARATOR",
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
    "get_string",
    "get_string_map",
    "get_string_slice",
    "has_path",
    "lookup",
]
