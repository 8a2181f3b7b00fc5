"""
slimconf — configuration scheme loader.

File: src/slimconf/loader.py
Last updated: 2026-10-17

Purpose
- Load an effective configuration from an ordered scheme of references plus
  ``<PREFIX>_`` environment overrides.

What should be included in this file
- Precedence: env overrides > later references > earlier references.
- Scheme selection: a non-empty ``<PREFIX>_CONFIG`` supersedes programmatic references.
- All-or-nothing semantics: every reference is dispatched before any is
  resolved, and nothing is returned unless every reference resolved.

Functional requirements
- Errors identify the failing reference and chain the underlying cause.
- Emit machine-parseable load events through ``structlog``.

Non-functional requirements
- The merged document is assembled in local state and handed out as one
  immutable ``Config``; no shared state is touched here.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import structlog

from slimconf.config import Config
from slimconf.environment import (
    EnvironSource,
    environ_mapping,
    overlay_from_env,
    scheme_from_env,
)
from slimconf.errors import ConfigLoadError, ResolveError
from slimconf.merge import merge_documents
from slimconf.resolvers.base import Resolver, dispatch
from slimconf.resolvers.files import JsonFileResolver
from slimconf.values import Document


def default_resolvers() -> tuple[Resolver, ...]:
    """Return the resolvers used when none are supplied: JSON files only."""

    return (JsonFileResolver(),)


@dataclass(frozen=True, slots=True)
class LoadPlan:
    """References paired with the resolver selected for each, in scheme order."""

    steps: tuple[tuple[str, Resolver], ...]

    @property
    def references(self) -> tuple[str, ...]:
        return tuple(reference for reference, _ in self.steps)


def effective_scheme(
    references: Sequence[str],
    *,
    prefix: str = "",
    environ: EnvironSource | None = None,
) -> tuple[str, ...]:
    """Return the references to load, honoring ``<prefix>_CONFIG`` when set."""

    from_env = scheme_from_env(prefix, os.environ if environ is None else environ)
    if from_env is not None:
        return from_env
    return tuple(reference.strip() for reference in references)


def plan_scheme(references: Sequence[str], resolvers: Sequence[Resolver]) -> LoadPlan:
    """Dispatch every reference up front; raises ``NoResolverError`` on the first miss."""

    steps = tuple((reference, dispatch(resolvers, reference)) for reference in references)
    return LoadPlan(steps=steps)


def resolve_scheme(plan: LoadPlan, *, logger: Any | None = None) -> Document:
    """Resolve each planned reference and fold the documents in scheme order."""

    log = logger if logger is not None else structlog.get_logger(__name__)
    merged: Document = {}
    for reference, resolver in plan.steps:
        try:
            document = resolver.resolve(reference)
            if not isinstance(document, Mapping):
                raise TypeError(
                    f"resolver returned {type(document).__name__}, expected a mapping"
                )
            merged = merge_documents(merged, document)
        except Exception as exc:
            raise ResolveError(reference, exc) from exc
        log.debug(
            "config_reference_resolved",
            reference=reference,
            resolver=type(resolver).__name__,
            keys=sorted(str(key) for key in document),
        )
    return merged


def load_config(
    *references: str,
    prefix: str = "",
    resolvers: Sequence[Resolver] | None = None,
    environ: EnvironSource | None = None,
    logger: Any | None = None,
) -> Config:
    """Load and merge a configuration scheme, then apply environment overrides.

    Parameters
    ----------
    references:
        Scheme references in precedence order (later wins). Ignored when
        ``<prefix>_CONFIG`` is set to a non-empty value.
    prefix:
        Environment prefix; empty disables both the scheme variable and overrides.
    resolvers:
        Resolvers in dispatch order. Defaults to ``default_resolvers()``.
    environ:
        Environment mapping or ``KEY=VALUE`` entries. Defaults to ``os.environ``.
    logger:
        Optional structlog-compatible logger.
    """

    log = logger if logger is not None else structlog.get_logger(__name__)
    env_source = environ_mapping(os.environ if environ is None else environ)
    registered = tuple(resolvers) if resolvers is not None else default_resolvers()

    scheme = effective_scheme(references, prefix=prefix, environ=env_source)
    try:
        plan = plan_scheme(scheme, registered)
        merged = resolve_scheme(plan, logger=log)
    except ConfigLoadError as exc:
        log.warning(
            "config_load_failed",
            reference=getattr(exc, "reference", None),
            error=str(exc),
        )
        raise
    log.info("config_scheme_resolved", references=list(scheme), prefix=prefix or None)

    if prefix:
        overlay = overlay_from_env(prefix, env_source)
        if overlay:
            merged = merge_documents(merged, overlay)
            log.info(
                "config_env_overlay_applied",
                prefix=prefix,
                keys=sorted(overlay),
            )

    return Config(merged)


__all__ = [
    "LoadPlan",
    "default_resolvers",
    "effective_scheme",
    "load_config",
    "plan_scheme",
    "resolve_scheme",
]
