"""Diagnostic rendering of merged documents as JSON or YAML, with optional redaction."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any, Final

import yaml

from slimconf.values import Document, Value, canonicalize, to_text

REDACTED_VALUE: Final[str] = "<redacted>"

_CAMEL_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")

_SENSITIVE_KEY_TOKENS: Final[frozenset[str]] = frozenset(
    {
        "secret",
        "token",
        "password",
        "passwd",
        "apikey",
        "private",
        "credential",
        "credentials",
    }
)
_SENSITIVE_KEY_PHRASES: Final[tuple[str, ...]] = (
    "api_key",
    "access_key",
    "access_token",
    "refresh_token",
    "client_secret",
    "private_key",
    "connection_string",
    "password",
    "secret",
)


def redact_document(document: Mapping[object, object]) -> Document:
    """Return a canonical copy of ``document`` with sensitive values replaced."""

    redacted = _redact_value(canonicalize(document))
    if isinstance(redacted, dict):
        return redacted
    return {}


def dump_json(
    document: Mapping[object, object],
    *,
    redact: bool = False,
    indent: int | None = 2,
) -> str:
    """Render ``document`` as deterministic JSON with sorted keys."""

    payload = redact_document(document) if redact else canonicalize(document)
    separators = (",", ": ") if indent is not None else (",", ":")
    return json.dumps(
        payload,
        indent=indent,
        sort_keys=True,
        separators=separators,
        ensure_ascii=False,
        default=to_text,
    )


def dump_yaml(document: Mapping[object, object], *, redact: bool = False) -> str:
    """Render ``document`` as block-style YAML with sorted keys."""

    payload = redact_document(document) if redact else canonicalize(document)
    return yaml.safe_dump(
        _yaml_safe(payload),
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )


def is_sensitive_key(key: str) -> bool:
    normalized = _normalize_key(key)
    if any(phrase in normalized for phrase in _SENSITIVE_KEY_PHRASES):
        return True
    tokens = tuple(token for token in normalized.split("_") if token)
    return any(token in _SENSITIVE_KEY_TOKENS for token in tokens)


def _redact_value(value: Value) -> Value:
    if isinstance(value, dict):
        out: Document = {}
        for key in sorted(value):
            if is_sensitive_key(key):
                out[key] = REDACTED_VALUE
            else:
                out[key] = _redact_value(value[key])
        return out
    if isinstance(value, list):
        return [_redact_value(item) for item in value]
    return value


def _yaml_safe(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _yaml_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_yaml_safe(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return to_text(value)


def _normalize_key(key: str) -> str:
    with_boundaries = _CAMEL_CASE_BOUNDARY.sub(r"\1_\2", key.strip())
    return _NON_ALNUM.sub("_", with_boundaries.lower()).strip("_")


__all__ = [
    "REDACTED_VALUE",
    "dump_json",
    "dump_yaml",
    "is_sensitive_key",
    "redact_document",
]
