"""
slimconf — unit tests for diagnostic rendering

File: tests/unit/serialize/test_serialize.py
Last updated: 2026-10-17

Purpose
- Validate deterministic JSON/YAML dumps and sensitive-key redaction.
"""

from __future__ import annotations

import json

import pytest
import yaml

from slimconf.serialize import (
    REDACTED_VALUE,
    dump_json,
    dump_yaml,
    is_sensitive_key,
    redact_document,
)

DOCUMENT = {
    "service": {"host": "h", "apiKey": "abc", "port": 80},
    "db": {"password": "pw", "users": [{"name": "u", "client_secret": "cs"}]},
    "credentials": {"nested": "whole subtree"},
}


@pytest.mark.parametrize(
    "key",
    ["password", "apiKey", "API_KEY", "client-secret", "refresh_token", "credentials", "privateKey"],
)
def test_sensitive_keys(key: str) -> None:
    assert is_sensitive_key(key)


@pytest.mark.parametrize("key", ["host", "port", "tokenizer_model", "name"])
def test_non_sensitive_keys(key: str) -> None:
    assert not is_sensitive_key(key)


def test_redaction_replaces_whole_values_and_recurses_into_lists() -> None:
    redacted = redact_document(DOCUMENT)

    assert redacted["service"] == {"host": "h", "apiKey": REDACTED_VALUE, "port": 80}
    assert redacted["db"]["password"] == REDACTED_VALUE
    assert redacted["db"]["users"] == [{"name": "u", "client_secret": REDACTED_VALUE}]
    assert redacted["credentials"] == REDACTED_VALUE
    assert DOCUMENT["db"]["password"] == "pw"


def test_dump_json_is_sorted_and_deterministic() -> None:
    rendered = dump_json({"b": 1, "a": {"d": 2, "c": 3}})

    assert rendered == dump_json({"a": {"c": 3, "d": 2}, "b": 1})
    assert list(json.loads(rendered)) == ["a", "b"]
    assert dump_json({"b": 1, "a": 2}, indent=None) == '{"a":2,"b":1}'


def test_dump_yaml_round_trips_through_safe_load() -> None:
    rendered = dump_yaml(DOCUMENT, redact=True)

    assert yaml.safe_load(rendered) == redact_document(DOCUMENT)
    assert "pw" not in rendered
