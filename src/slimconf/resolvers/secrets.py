"""
slimconf — secret-manager resolvers.

File: src/slimconf/resolvers/secrets.py
Last updated: 2026-10-17

Purpose
- Resolve configuration documents stored as secrets in AWS Secrets Manager
  or Google Cloud Secret Manager.

What should be included in this file
- Reference matching/translation for both secret naming schemes.
- Fetchers written against the SDK client call shapes; the client itself is
  injected so the package carries no cloud SDK dependency.

Functional requirements
- AWS references look like ``aws-secretsmanager://<secret-id>``.
- GCP references are ``projects/<p>/secrets/<s>`` (latest version),
  ``projects/<p>/secrets/<s>/versions/<v>`` or
  ``projects/<p>/locations/<l>/secrets/<s>/versions/<v>``.
- Remote calls are bounded by the resolver's own timeout where the client supports one.
"""

from __future__ import annotations

import json
from typing import Any, Final

from slimconf.resolvers.base import FetchingResolver, Unmarshaller

AWS_SCHEME: Final[str] = "aws-secretsmanager"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 5.0


def aws_secret_id(reference: str) -> str:
    """Return the secret id for an AWS reference, or ``""`` if it is not one."""

    scheme, separator, secret_id = reference.partition("://")
    if not separator or scheme != AWS_SCHEME:
        return ""
    return secret_id


def gcp_secret_version_name(reference: str) -> str:
    """Return the full secret version name for a GCP reference, or ``""``."""

    parts = reference.split("/")
    if len(parts) == 4 and parts[0] == "projects" and parts[2] == "secrets":
        return f"{reference}/versions/latest"
    if len(parts) == 6 and parts[0] == "projects" and parts[2] == "secrets":
        return reference
    if (
        len(parts) == 8
        and parts[0] == "projects"
        and parts[2] == "locations"
        and parts[4] == "secrets"
    ):
        return reference
    return ""


class SecretsManagerResolver(FetchingResolver):
    """Resolve ``aws-secretsmanager://`` references with a boto3-style client.

    ``client`` must provide ``get_secret_value(SecretId=...)`` returning a
    mapping with a ``SecretString`` entry, as ``boto3.client("secretsmanager")``
    does.
    """

    def __init__(self, client: Any, unmarshal: Unmarshaller = json.loads) -> None:
        self._client = client
        super().__init__(self._fetch_secret, unmarshal)

    def matches(self, reference: str) -> bool:
        return aws_secret_id(reference) != ""

    def _fetch_secret(self, reference: str) -> str:
        secret_id = aws_secret_id(reference)
        response = self._client.get_secret_value(SecretId=secret_id)
        secret = response.get("SecretString")
        if secret is None:
            raise ValueError(f"secret {secret_id!r} has no string payload")
        return str(secret)


class SecretVersionResolver(FetchingResolver):
    """Resolve GCP secret version references with a Secret Manager client.

    ``client`` must provide ``access_secret_version(request=..., timeout=...)``
    returning an object whose ``payload.data`` holds the secret bytes, as
    ``google.cloud.secretmanager.SecretManagerServiceClient`` does.
    """

    def __init__(
        self,
        client: Any,
        unmarshal: Unmarshaller = json.loads,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
        self._client = client
        self._timeout = timeout
        super().__init__(self._fetch_secret, unmarshal)

    def matches(self, reference: str) -> bool:
        return gcp_secret_version_name(reference) != ""

    def _fetch_secret(self, reference: str) -> bytes:
        name = gcp_secret_version_name(reference)
        response = self._client.access_secret_version(
            request={"name": name}, timeout=self._timeout
        )
        return bytes(response.payload.data)


__all__ = [
    "AWS_SCHEME",
    "DEFAULT_TIMEOUT_SECONDS",
    "SecretVersionResolver",
    "SecretsManagerResolver",
    "aws_secret_id",
    "gcp_secret_version_name",
]
