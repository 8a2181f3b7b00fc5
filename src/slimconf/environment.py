"""
slimconf — environment variable overlay.

File: src/slimconf/environment.py
Last updated: 2026-10-17

Purpose
- Translate ``<PREFIX>_a__b__c=value`` variables into nested documents.
- Read the configuration scheme from ``<PREFIX>_CONFIG``.

What should be included in this file
- Deterministic variable-name to path mapping (``__`` separates segments).
- Composition of variables sharing a path prefix through the merge engine.

Functional requirements
- Segment casing is preserved; leaf values are always strings.
- ``<PREFIX>_CONFIG`` carries the scheme and is never a data key.

Non-functional requirements
- Same environment, same document, regardless of variable ordering.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

from slimconf.merge import merge_all
from slimconf.values import Document

ENV_SUFFIX: Final[str] = "CONFIG"
PATH_SEPARATOR: Final[str] = "__"
SCHEME_SEPARATOR: Final[str] = ","

EnvironSource = Mapping[str, str] | Iterable[str]


def scheme_variable(prefix: str) -> str:
    return f"{prefix}_{ENV_SUFFIX}"


def env_path(name: str, prefix: str) -> tuple[str, ...] | None:
    """Return the document path for variable ``name``, or ``None`` if it is not an override."""

    if not prefix:
        return None
    marker = f"{prefix}_"
    if not name.startswith(marker):
        return None
    remainder = name[len(marker) :]
    if not remainder or remainder == ENV_SUFFIX:
        return None
    return tuple(remainder.split(PATH_SEPARATOR))


def overlay_from_env(prefix: str, environ: EnvironSource) -> Document:
    """Build the override document for every ``<prefix>_*`` variable in ``environ``."""

    fragments: list[Document] = []
    for name, value in sorted(_iter_environ(environ)):
        path = env_path(name, prefix)
        if path is None:
            continue
        fragments.append(_single_path_document(path, value))
    return merge_all(fragments)


def scheme_from_env(prefix: str, environ: EnvironSource) -> tuple[str, ...] | None:
    """Return references from ``<prefix>_CONFIG``, or ``None`` when unset or blank."""

    if not prefix:
        return None
    wanted = scheme_variable(prefix)
    raw: str | None = None
    for name, value in _iter_environ(environ):
        if name == wanted:
            raw = value
    if raw is None or not raw.strip():
        return None
    references = tuple(part.strip() for part in raw.split(SCHEME_SEPARATOR) if part.strip())
    return references or None


def environ_mapping(environ: EnvironSource) -> dict[str, str]:
    """Materialize ``environ`` (mapping or ``KEY=VALUE`` entries) as a plain dict."""

    return dict(_iter_environ(environ))


def _single_path_document(path: tuple[str, ...], value: str) -> Document:
    document: Document = {path[-1]: value}
    for segment in reversed(path[:-1]):
        document = {segment: document}
    return document


def _iter_environ(environ: EnvironSource) -> list[tuple[str, str]]:
    if isinstance(environ, Mapping):
        return [(str(name), str(value)) for name, value in environ.items()]

    pairs: list[tuple[str, str]] = []
    for entry in environ:
        name, separator, value = entry.partition("=")
        if not separator:
            continue
        pairs.append((name, value))
    return pairs


__all__ = [
    "ENV_SUFFIX",
    "EnvironSource",
    "PATH_SEPARATOR",
    "env_path",
    "environ_mapping",
    "overlay_from_env",
    "scheme_from_env",
    "scheme_variable",
]
