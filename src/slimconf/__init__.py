"""
slimconf — layered configuration loading.

File: src/slimconf/__init__.py
Last updated: 2026-10-17

Purpose
- Package root. Re-exports the public loading, merging and read API.

Functional requirements
- Must not have side effects at import time (no config loading, no logging init).
"""

from slimconf.config import Config
from slimconf.environment import overlay_from_env, scheme_from_env
from slimconf.errors import (
    ConcurrentLoadError,
    ConfigLoadError,
    NoResolverError,
    PathNotFoundError,
    ResolveError,
)
from slimconf.loader import default_resolvers, load_config
from slimconf.merge import merge_all, merge_documents
from slimconf.resolvers import (
    FetchingResolver,
    FileResolver,
    JsonFileResolver,
    MemoryResolver,
    Resolver,
    SecretsManagerResolver,
    SecretVersionResolver,
    TomlFileResolver,
    YamlFileResolver,
)
from slimconf.serialize import dump_json, dump_yaml, redact_document

__version__ = "0.1.0"

__all__ = [
    "ConcurrentLoadError",
    "Config",
    "ConfigLoadError",
    "FetchingResolver",
    "FileResolver",
    "JsonFileResolver",
    "MemoryResolver",
    "NoResolverError",
    "PathNotFoundError",
    "ResolveError",
    "Resolver",
    "SecretVersionResolver",
    "SecretsManagerResolver",
    "TomlFileResolver",
    "YamlFileResolver",
    "__version__",
    "default_resolvers",
    "dump_json",
    "dump_yaml",
    "load_config",
    "merge_all",
    "merge_documents",
    "overlay_from_env",
    "redact_document",
    "scheme_from_env",
]
