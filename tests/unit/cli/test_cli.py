"""
slimconf — unit tests for the command-line interface

File: tests/unit/cli/test_cli.py
Last updated: 2026-10-17

Purpose
- Validate ``dump`` and ``get`` commands and the exit-code contract.

What this test file should cover
- Multi-format file schemes merged in order, with env overrides.
- ``get`` typing, defaults, and not-found behavior.
- Load errors mapped to exit code 2.

Functional requirements
- Uses ``monkeypatch`` for environment variables; never depends on the host environment.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
import yaml

from slimconf.errors import PathNotFoundError, ResolveError
from slimconf.main import ExitCode, cli_entrypoint, exit_code_for


@pytest.fixture(autouse=True)
def _restore_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture()
def scheme(tmp_path: Path) -> tuple[str, str, str]:
    base = _write(tmp_path / "base.yaml", "service:\n  host: a\n  port: 80\nflags: [x, y]\n")
    mid = _write(tmp_path / "mid.toml", '[service]\nport = 8080\npassword = "pw"\n')
    top = _write(tmp_path / "top.json", json.dumps({"debug": "t"}))
    return str(base), str(mid), str(top)


def test_dump_merges_files_in_order(
    scheme: tuple[str, str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli_entrypoint(["dump", *scheme])

    assert exit_code == ExitCode.SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "debug": "t",
        "flags": ["x", "y"],
        "service": {"host": "a", "password": "pw", "port": 8080},
    }


def test_dump_yaml_redacted(
    scheme: tuple[str, str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli_entrypoint(["dump", "--format", "yaml", "--redact", *scheme])

    assert exit_code == ExitCode.SUCCESS
    payload = yaml.safe_load(capsys.readouterr().out)
    assert payload["service"]["password"] == "<redacted>"


def test_dump_applies_prefixed_env_and_scheme_variable(
    scheme: tuple[str, str, str],
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    base, _, _ = scheme
    monkeypatch.setenv("SLIMCONF_TEST_CONFIG", base)
    monkeypatch.setenv("SLIMCONF_TEST_service__host", "from-env")

    exit_code = cli_entrypoint(["dump", "--prefix", "SLIMCONF_TEST", *scheme])

    assert exit_code == ExitCode.SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"flags": ["x", "y"], "service": {"host": "from-env", "port": 80}}


def test_get_typed_values(
    scheme: tuple[str, str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli_entrypoint(["get", "service.port", *scheme, "--type", "int"]) == 0
    assert cli_entrypoint(["get", "debug", *scheme, "--type", "bool"]) == 0
    assert cli_entrypoint(["get", "flags", *scheme, "--type", "any"]) == 0

    assert capsys.readouterr().out.splitlines() == ["8080", "true", '["x","y"]']


def test_get_missing_path_without_default_is_not_found(
    scheme: tuple[str, str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli_entrypoint(["get", "service.missing", *scheme])

    assert exit_code == ExitCode.NOT_FOUND
    assert "path not found" in capsys.readouterr().err


def test_get_uses_default_for_missing_or_unconvertible(
    scheme: tuple[str, str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli_entrypoint(["get", "service.missing", *scheme, "--default", "fb"]) == 0
    assert cli_entrypoint(["get", "service.host", *scheme, "--type", "int", "--default", "-1"]) == 0

    assert capsys.readouterr().out.splitlines() == ["fb", "-1"]


def test_get_unconvertible_without_default_is_not_found(
    scheme: tuple[str, str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli_entrypoint(["get", "service.host", *scheme, "--type", "float"])

    assert exit_code == ExitCode.NOT_FOUND
    assert "cannot read service.host as float" in capsys.readouterr().err


def test_load_errors_exit_with_config_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli_entrypoint(["dump", str(tmp_path / "absent.json")])

    assert exit_code == ExitCode.CONFIG_ERROR
    assert "error resolving" in capsys.readouterr().err


def test_unknown_reference_kind_exits_with_config_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = cli_entrypoint(["dump", "settings.ini"])

    assert exit_code == ExitCode.CONFIG_ERROR
    assert "no resolver for 'settings.ini'" in capsys.readouterr().err


def test_usage_errors_exit_with_config_error(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli_entrypoint(["get"])

    assert exit_code == ExitCode.CONFIG_ERROR
    assert "usage" in capsys.readouterr().err


def test_get_float_beyond_float_range_is_not_convertible(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = _write(tmp_path / "big.json", '{"big": 1' + "0" * 400 + "}")

    assert cli_entrypoint(["get", "big", str(source), "--type", "float"]) == ExitCode.NOT_FOUND
    assert cli_entrypoint(["get", "big", str(source), "--type", "float", "--default", "0.5"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0.5"]


def test_exit_codes_follow_the_cause_chain() -> None:
    try:
        try:
            raise FileNotFoundError("absent.json")
        except FileNotFoundError as exc:
            raise ResolveError("absent.json", exc) from exc
    except ResolveError as wrapped:
        resolve_error = wrapped

    try:
        try:
            raise PathNotFoundError("a.b")
        except PathNotFoundError:
            raise RuntimeError("while reading")  # noqa: B904 - implicit context
    except RuntimeError as contextual:
        with_context = contextual

    assert exit_code_for(resolve_error) is ExitCode.CONFIG_ERROR
    assert exit_code_for(PermissionError("denied")) is ExitCode.CONFIG_ERROR
    assert exit_code_for(with_context) is ExitCode.NOT_FOUND
    assert exit_code_for(RuntimeError("boom")) is ExitCode.INTERNAL_ERROR
