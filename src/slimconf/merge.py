"""
slimconf — document merge engine.

File: src/slimconf/merge.py
Last updated: 2026-10-17

Purpose
- Deep-merge an overlay document onto a base document with right-biased precedence.

What should be included in this file
- ``merge_documents``: pure merge returning a fresh canonical document.
- ``merge_all``: left fold of ``merge_documents`` over an ordered scheme.

Functional requirements
- Absent key: insert the overlay value.
- Non-map overlay value: replace the base value entirely (lists are never combined).
- Map overlay value over a map-shaped base value: merge recursively,
  canonicalizing a foreign base mapping first.
- Map overlay value over a non-map base value: replace it with the overlay map.

Non-functional requirements
- Inputs are never mutated; ``merge(D, D) == D`` and ``merge({}, D) == D``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from slimconf.values import Document, as_document


def merge_documents(base: Mapping[object, object], overlay: Mapping[object, object]) -> Document:
    """Deep-merge ``overlay`` onto ``base`` and return a new document."""

    merged = as_document(base)
    if merged is None:
        raise TypeError(f"base must be a mapping, got {type(base).__name__}")
    _merge_into(merged, overlay)
    return merged


def merge_all(documents: Iterable[Mapping[object, object]]) -> Document:
    """Fold ``merge_documents`` left to right, starting from an empty document."""

    merged: Document = {}
    for document in documents:
        _merge_into(merged, document)
    return merged


def _merge_into(target: Document, overlay: Mapping[object, object]) -> None:
    incoming = as_document(overlay)
    if incoming is None:
        raise TypeError(f"overlay must be a mapping, got {type(overlay).__name__}")

    for key, value in incoming.items():
        if key not in target or not isinstance(value, dict):
            target[key] = value
            continue

        # Target documents are canonical, so map-shaped means ``dict`` here.
        existing = target[key]
        if isinstance(existing, dict):
            _merge_into(existing, value)
        else:
            target[key] = value


__all__ = ["merge_all", "merge_documents"]
