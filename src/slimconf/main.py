"""Executable CLI entrypoint for ``slimconf``."""

from __future__ import annotations

import sys
import traceback
from collections.abc import Iterator
from enum import IntEnum
from typing import TYPE_CHECKING, Final

from slimconf.cli import run_cli
from slimconf.errors import ConfigLoadError, PathNotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence


class ExitCode(IntEnum):
    """Deterministic process exit-code contract."""

    SUCCESS = 0
    NOT_FOUND = 1
    CONFIG_ERROR = 2
    INTERNAL_ERROR = 3


# First match along the cause chain wins.
_EXIT_ROUTES: Final[tuple[tuple[type[BaseException], ExitCode], ...]] = (
    (PathNotFoundError, ExitCode.NOT_FOUND),
    (ConfigLoadError, ExitCode.CONFIG_ERROR),
    (OSError, ExitCode.CONFIG_ERROR),
)


def cli_entrypoint(argv: Sequence[str] | None = None) -> int:
    """Entrypoint used by ``python -m slimconf`` and the console script."""

    try:
        return _exit_status(run_cli(argv))
    except SystemExit as exc:
        return _exit_status(exc.code)
    except Exception as exc:  # noqa: BLE001 - CLI boundary normalization.
        exit_code = exit_code_for(exc)
        if exit_code is ExitCode.INTERNAL_ERROR:
            traceback.print_exception(exc, file=sys.stderr)
        else:
            sys.stderr.write(f"error: {exc}\n")
        return int(exit_code)


def exit_code_for(exc: BaseException) -> ExitCode:
    """Map an exception, or anything in its cause chain, to an exit code."""

    for item in _cause_chain(exc):
        for error_type, exit_code in _EXIT_ROUTES:
            if isinstance(item, error_type):
                return exit_code
    return ExitCode.INTERNAL_ERROR


def _exit_status(raw_code: object) -> int:
    if raw_code is None:
        return int(ExitCode.SUCCESS)
    if isinstance(raw_code, int) and raw_code in ExitCode._value2member_map_:
        return raw_code
    if isinstance(raw_code, str) and raw_code.strip():
        sys.stderr.write(raw_code.strip() + "\n")
    return int(ExitCode.INTERNAL_ERROR)


def _cause_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


__all__ = ["ExitCode", "cli_entrypoint", "exit_code_for"]
