"""
slimconf — unit tests for structlog wiring

File: tests/unit/observability/test_logging.py
Last updated: 2026-10-17

Purpose
- Validate level filtering and key/value rendering of load events.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import pytest
import structlog

from slimconf.loader import load_config
from slimconf.observability import configure_logging, parse_log_level
from slimconf.resolvers import MemoryResolver


@pytest.fixture(autouse=True)
def _restore_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def test_parse_log_level_accepts_names_and_ints() -> None:
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level(" Warning ") == logging.WARNING
    assert parse_log_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        parse_log_level("chatty")


def test_events_below_level_are_filtered() -> None:
    stream = io.StringIO()
    configure_logging("WARNING", stream=stream)

    load_config("defaults", resolvers=[MemoryResolver("defaults", {"a": 1})], environ={})

    assert stream.getvalue() == ""


def test_info_events_render_as_key_value_lines() -> None:
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)

    load_config("defaults", resolvers=[MemoryResolver("defaults", {"a": 1})], environ={})

    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    assert "level='info'" in lines[0]
    assert "event='config_scheme_resolved'" in lines[0]
    assert "references=['defaults']" in lines[0]
