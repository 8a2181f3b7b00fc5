"""In-memory resolver bound to a single reference."""

from __future__ import annotations

import copy
from collections.abc import Mapping

from slimconf.values import Document, as_document


class MemoryResolver:
    """Serve a fixed document for exactly one reference.

    Useful for built-in defaults placed first in a scheme, and for tests.
    """

    def __init__(self, reference: str, data: Mapping[object, object] | None = None) -> None:
        self.reference = reference
        canonical = as_document(data if data is not None else {})
        if canonical is None:
            raise TypeError(f"memory resolver data must be a mapping, got {type(data).__name__}")
        self._data: Document = canonical

    def __repr__(self) -> str:
        return f"MemoryResolver(reference={self.reference!r})"

    def matches(self, reference: str) -> bool:
        return reference == self.reference

    def resolve(self, reference: str) -> Document:
        return copy.deepcopy(self._data)


__all__ = ["MemoryResolver"]
