"""
slimconf — file-backed resolvers.

File: src/slimconf/resolvers/files.py
Last updated: 2026-10-17

Purpose
- Resolve local JSON, YAML, and TOML files named by path or ``file://`` URI.

Functional requirements
- Match on reference suffix only; the file is not touched until ``resolve``.
- Empty YAML documents resolve to ``{}``; any non-mapping root is an error.
- I/O and parse errors propagate unchanged to the loader.
"""

from __future__ import annotations

import json
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Final

import yaml

from slimconf.resolvers.base import require_mapping

PROTOCOL_FILE: Final[str] = "file://"


def path_from_reference(reference: str) -> Path:
    """Strip an optional ``file://`` prefix and return the filesystem path."""

    if reference.startswith(PROTOCOL_FILE):
        reference = reference[len(PROTOCOL_FILE) :]
    return Path(reference).expanduser()


class FileResolver(ABC):
    """Base class for suffix-matched file resolvers."""

    default_extensions: tuple[str, ...] = ()
    binary: bool = False

    def __init__(self, *extensions: str) -> None:
        self.extensions: tuple[str, ...] = extensions or self.default_extensions

    def __repr__(self) -> str:
        return f"{type(self).__name__}(extensions={self.extensions!r})"

    def matches(self, reference: str) -> bool:
        return any(reference.endswith(extension) for extension in self.extensions)

    def resolve(self, reference: str) -> Mapping[object, object]:
        path = path_from_reference(reference)
        if self.binary:
            with path.open("rb") as handle:
                payload = self.parse(handle)
        else:
            with path.open("r", encoding="utf-8") as handle:
                payload = self.parse(handle)
        return require_mapping(payload, reference)

    @abstractmethod
    def parse(self, handle: IO[str] | IO[bytes]) -> object:
        """Decode an open file into a document root."""


class JsonFileResolver(FileResolver):
    """Resolve ``.json`` files."""

    default_extensions = (".json",)

    def parse(self, handle: IO[str] | IO[bytes]) -> object:
        return json.load(handle)


class YamlFileResolver(FileResolver):
    """Resolve ``.yaml``/``.yml`` files with ``yaml.safe_load``."""

    default_extensions = (".yaml", ".yml")

    def parse(self, handle: IO[str] | IO[bytes]) -> object:
        return yaml.safe_load(handle)


class TomlFileResolver(FileResolver):
    """Resolve ``.toml`` files with ``tomllib``."""

    default_extensions = (".toml",)
    binary = True

    def parse(self, handle: IO[str] | IO[bytes]) -> object:
        return tomllib.load(handle)  # type: ignore[arg-type]


__all__ = [
    "FileResolver",
    "JsonFileResolver",
    "PROTOCOL_FILE",
    "TomlFileResolver",
    "YamlFileResolver",
    "path_from_reference",
]
