"""Resolver capability contract, dispatch, and built-in resolvers."""

from slimconf.resolvers.base import (
    FetchingResolver,
    Fetcher,
    Resolver,
    Unmarshaller,
    dispatch,
)
from slimconf.resolvers.files import (
    FileResolver,
    JsonFileResolver,
    TomlFileResolver,
    YamlFileResolver,
)
from slimconf.resolvers.memory import MemoryResolver
from slimconf.resolvers.secrets import SecretsManagerResolver, SecretVersionResolver

__all__ = [
    "FetchingResolver",
    "Fetcher",
    "FileResolver",
    "JsonFileResolver",
    "MemoryResolver",
    "Resolver",
    "SecretVersionResolver",
    "SecretsManagerResolver",
    "TomlFileResolver",
    "Unmarshaller",
    "YamlFileResolver",
    "dispatch",
]
