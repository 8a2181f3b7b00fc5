"""
slimconf — configuration value model.

File: src/slimconf/values.py
Last updated: 2026-10-17

Purpose
- Define the canonical value shapes every source is reduced to.
- Reinterpret foreign mappings and sequences as canonical documents/lists.
- Provide the scalar coercions shared by the merge engine and typed getters.

What should be included in this file
- ``Value``/``Document`` aliases.
- ``as_document``/``as_sequence``: explicit "reinterpret as" conversions.
- ``to_text``/``to_int``/``to_float``/``to_bool`` scalar coercions.
- Element-wise container conversion with drop-on-failure semantics.

Functional requirements
- Mapping keys are stringified with ``to_text`` everywhere.
- An empty foreign container converts to an empty canonical container.

Non-functional requirements
- Pure functions only; inputs are never mutated.
"""

from __future__ import annotations

import json
import math
import numbers
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Final, TypeVar

Scalar = str | int | float | bool | None
Value = Scalar | list["Value"] | dict[str, "Value"]
Document = dict[str, Value]

T = TypeVar("T")

_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)


def is_map_shaped(value: object) -> bool:
    return isinstance(value, Mapping)


def is_sequence_shaped(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def canonicalize(value: object) -> Value:
    """Return a canonical deep copy of ``value``.

    Mappings become ``dict[str, Value]`` and non-text sequences become lists,
    recursively. Scalars and unknown objects are returned unchanged.
    """

    if isinstance(value, Mapping):
        return _document_from_mapping(value)
    if is_sequence_shaped(value):
        return [canonicalize(item) for item in value]  # type: ignore[union-attr]
    return value  # type: ignore[return-value]


def as_document(value: object) -> Document | None:
    """Reinterpret ``value`` as a canonical document, or ``None`` if not map-shaped."""

    if not isinstance(value, Mapping):
        return None
    return _document_from_mapping(value)


def as_sequence(value: object) -> list[Value] | None:
    """Reinterpret ``value`` as a canonical list, or ``None`` if not sequence-shaped."""

    if not is_sequence_shaped(value):
        return None
    return [canonicalize(item) for item in value]  # type: ignore[union-attr]


def to_text(value: object) -> str:
    """Render ``value`` in its canonical human-readable form. Never fails."""

    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, Mapping) or is_sequence_shaped(value):
        return json.dumps(
            canonicalize(value),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            default=to_text,
        )
    return str(value)


def to_int(value: object) -> int:
    """Coerce ``value`` to ``int``; floats truncate toward zero.

    Raises ``ValueError`` when the value cannot be converted.
    """

    if isinstance(value, bool):
        raise ValueError(f"cannot convert boolean {value!r} to int")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        as_float = _real_to_float(value)
        if not math.isfinite(as_float):
            raise ValueError(f"cannot convert non-finite {value!r} to int")
        return math.trunc(as_float)

    text = to_text(value)
    if _INT_PATTERN.fullmatch(text) is None:
        raise ValueError(f"invalid integer literal {text!r}")
    return int(text)


def to_float(value: object) -> float:
    """Coerce ``value`` to ``float``. Raises ``ValueError`` on failure."""

    if isinstance(value, bool):
        raise ValueError(f"cannot convert boolean {value!r} to float")
    if isinstance(value, numbers.Real):
        return _real_to_float(value)

    text = to_text(value)
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float literal {text!r}")
    return float(text)


def to_bool(value: object) -> bool:
    """Coerce ``value`` to ``bool`` using conventional literals."""

    if isinstance(value, bool):
        return value
    text = to_text(value)
    if text in _BOOLEAN_TRUE:
        return True
    if text in _BOOLEAN_FALSE:
        return False
    raise ValueError(f"invalid boolean literal {text!r} (expected 1/0/t/f/true/false)")


def convert_sequence(value: object, coerce: Callable[[object], T]) -> list[T] | None:
    """Convert a sequence element-wise, dropping elements that fail to coerce.

    Returns ``None`` when ``value`` is not sequence-shaped.
    """

    items = as_sequence(value)
    if items is None:
        return None
    converted: list[T] = []
    for item in items:
        try:
            converted.append(coerce(item))
        except (TypeError, ValueError):
            continue
    return converted


def convert_mapping(value: object, coerce: Callable[[object], T]) -> dict[str, T] | None:
    """Convert a mapping value-wise, dropping entries that fail to coerce.

    Returns ``None`` when ``value`` is not map-shaped.
    """

    document = as_document(value)
    if document is None:
        return None
    converted: dict[str, T] = {}
    for key, item in document.items():
        try:
            converted[key] = coerce(item)
        except (TypeError, ValueError):
            continue
    return converted


def _real_to_float(value: numbers.Real) -> float:
    try:
        return float(value)
    except OverflowError as exc:
        raise ValueError(f"number too large for a float: {type(value).__name__}") from exc


def _document_from_mapping(value: Mapping[object, object]) -> Document:
    out: Document = {}
    for key, item in value.items():
        out[to_text(key)] = canonicalize(item)
    return out


__all__ = [
    "Document",
    "Scalar",
    "Value",
    "as_document",
    "as_sequence",
    "canonicalize",
    "convert_mapping",
    "convert_sequence",
    "is_map_shaped",
    "is_sequence_shaped",
    "to_bool",
    "to_float",
    "to_int",
    "to_text",
]
