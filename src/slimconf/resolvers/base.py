"""
slimconf — resolver capability contract and dispatch.

File: src/slimconf/resolvers/base.py
Last updated: 2026-10-17

Purpose
- Define the two-operation resolver capability (``matches``/``resolve``).
- Select the first matching resolver for a reference, in registration order.
- Provide a fetch-then-unmarshal building block for remote resolvers.

Functional requirements
- Dispatch order is caller-controlled and significant.
- A reference that no resolver matches raises ``NoResolverError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Protocol, runtime_checkable

from slimconf.errors import NoResolverError

Fetcher = Callable[[str], bytes | str]
Unmarshaller = Callable[[bytes | str], object]


@runtime_checkable
class Resolver(Protocol):
    """Recognizes references and fetches the document they name."""

    def matches(self, reference: str) -> bool:
        """Return ``True`` when this resolver can handle ``reference``."""
        ...

    def resolve(self, reference: str) -> Mapping[object, object]:
        """Return the document for ``reference``; raise on any failure."""
        ...


def dispatch(resolvers: Sequence[Resolver], reference: str) -> Resolver:
    """Return the first resolver in ``resolvers`` that matches ``reference``."""

    for resolver in resolvers:
        if resolver.matches(reference):
            return resolver
    raise NoResolverError(reference)


def require_mapping(payload: object, reference: str) -> Mapping[object, object]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValueError(
            f"document root for {reference!r} must be a mapping, got {type(payload).__name__}"
        )
    return payload


class FetchingResolver(ABC):
    """Resolver that fetches raw bytes and unmarshals them into a mapping.

    Matching is left to subclasses, which usually also translate the reference
    into the fetcher's own naming before calling ``fetch``.
    """

    def __init__(self, fetch: Fetcher, unmarshal: Unmarshaller) -> None:
        self._fetch = fetch
        self._unmarshal = unmarshal

    @abstractmethod
    def matches(self, reference: str) -> bool:
        """Return ``True`` when this resolver can handle ``reference``."""

    def resolve(self, reference: str) -> Mapping[object, object]:
        data = self._fetch(reference)
        return require_mapping(self._unmarshal(data), reference)


__all__ = [
    "FetchingResolver",
    "Fetcher",
    "Resolver",
    "Unmarshaller",
    "dispatch",
    "require_mapping",
]
