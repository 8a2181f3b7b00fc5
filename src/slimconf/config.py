"""
slimconf — immutable configuration handle.

File: src/slimconf/config.py
Last updated: 2026-10-17

Purpose
- Own one fully merged document and expose typed, side-effect-free reads over it.

What should be included in this file
- ``Config``: constructed from a document it copies; never mutated afterwards.
- Typed getter methods delegating to ``slimconf.accessor``.
- Diagnostic dumps delegating to ``slimconf.serialize``.

Non-functional requirements
- Safe to share between threads: no method mutates the owned document and
  no method hands out a reference into it.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TypeVar

from slimconf import accessor
from slimconf.serialize import dump_json, dump_yaml
from slimconf.values import Document, Value, as_document

F = TypeVar("F")


class Config:
    """Read-only view over a merged configuration document."""

    __slots__ = ("_document",)

    def __init__(self, document: Mapping[object, object] | None = None) -> None:
        canonical = as_document(document if document is not None else {})
        if canonical is None:
            raise TypeError(f"config document must be a mapping, got {type(document).__name__}")
        self._document: Document = canonical

    @classmethod
    def empty(cls) -> Config:
        return cls({})

    def __repr__(self) -> str:
        return f"Config(keys={sorted(self._document)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self._document == other._document

    __hash__ = None  # type: ignore[assignment]

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and accessor.has_path(self._document, path)

    def __bool__(self) -> bool:
        return bool(self._document)

    def lookup(self, path: str) -> Value:
        """Return a copy of the raw value at ``path``; raises ``PathNotFoundError``."""
        return copy.deepcopy(accessor.lookup(self._document, path))

    def has(self, path: str) -> bool:
        return accessor.has_path(self._document, path)

    def to_dict(self) -> Document:
        return copy.deepcopy(self._document)

    def to_json(self, *, redact: bool = False, indent: int | None = 2) -> str:
        return dump_json(self._document, redact=redact, indent=indent)

    def to_yaml(self, *, redact: bool = False) -> str:
        return dump_yaml(self._document, redact=redact)

    # Scalars -------------------------------------------------------------

    def get_string(self, path: str, fallback: str = "") -> str:
        return accessor.get_string(self._document, path, fallback)

    def get_int(self, path: str, fallback: int = 0) -> int:
        return accessor.get_int(self._document, path, fallback)

    def get_float(self, path: str, fallback: float = 0.0) -> float:
        return accessor.get_float(self._document, path, fallback)

    def get_bool(self, path: str, fallback: bool = False) -> bool:
        return accessor.get_bool(self._document, path, fallback)

    def get_any(self, path: str, fallback: F = None) -> Value | F:  # type: ignore[assignment]
        return accessor.get_any(self._document, path, fallback)

    # Sequences -----------------------------------------------------------

    def get_string_slice(self, path: str, fallback: list[str] | None = None) -> list[str]:
        return accessor.get_string_slice(self._document, path, _or_empty_list(fallback))

    def get_int_slice(self, path: str, fallback: list[int] | None = None) -> list[int]:
        return accessor.get_int_slice(self._document, path, _or_empty_list(fallback))

    def get_float_slice(self, path: str, fallback: list[float] | None = None) -> list[float]:
        return accessor.get_float_slice(self._document, path, _or_empty_list(fallback))

    def get_bool_slice(self, path: str, fallback: list[bool] | None = None) -> list[bool]:
        return accessor.get_bool_slice(self._document, path, _or_empty_list(fallback))

    # Mappings ------------------------------------------------------------

    def get_string_map(
        self, path: str, fallback: dict[str, str] | None = None
    ) -> dict[str, str]:
        return accessor.get_string_map(self._document, path, _or_empty_dict(fallback))

    def get_int_map(self, path: str, fallback: dict[str, int] | None = None) -> dict[str, int]:
        return accessor.get_int_map(self._document, path, _or_empty_dict(fallback))

    def get_float_map(
        self, path: str, fallback: dict[str, float] | None = None
    ) -> dict[str, float]:
        return accessor.get_float_map(self._document, path, _or_empty_dict(fallback))

    def get_bool_map(
        self, path: str, fallback: dict[str, bool] | None = None
    ) -> dict[str, bool]:
        return accessor.get_bool_map(self._document, path, _or_empty_dict(fallback))


def _or_empty_list(fallback: list[F] | None) -> list[F]:
    return [] if fallback is None else fallback


def _or_empty_dict(fallback: dict[str, F] | None) -> dict[str, F]:
    return {} if fallback is None else fallback


__all__ = ["Config"]
