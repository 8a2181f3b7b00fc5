"""Command-line interface router for slimconf."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

from slimconf.config import Config
from slimconf.loader import load_config
from slimconf.observability import configure_logging
from slimconf.resolvers import JsonFileResolver, Resolver, TomlFileResolver, YamlFileResolver
from slimconf.values import to_bool, to_float, to_int, to_text

OUTPUT_FORMATS: Final[tuple[str, ...]] = ("json", "yaml")
VALUE_TYPES: Final[tuple[str, ...]] = ("string", "int", "float", "bool", "any")

_COERCERS: Final[dict[str, Callable[[object], object]]] = {
    "string": to_text,
    "int": to_int,
    "float": to_float,
    "bool": to_bool,
    "any": lambda value: value,
}


@dataclass(frozen=True, slots=True)
class CLIError(RuntimeError):
    """Typed CLI failure with an explicit process exit code."""

    message: str
    exit_code: int = 1

    def __str__(self) -> str:
        return self.message


def cli_resolvers() -> tuple[Resolver, ...]:
    """File resolvers available on the command line, in dispatch order."""

    return (YamlFileResolver(), TomlFileResolver(), JsonFileResolver())


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse command router."""

    parser = argparse.ArgumentParser(
        prog="slimconf",
        description=(
            "slimconf — merge layered configuration files and environment overrides.\n\n"
            "Common workflows:\n"
            "  slimconf dump base.yaml prod.json          Print the merged document\n"
            "  slimconf dump --prefix APP --redact        Scheme from APP_CONFIG, secrets hidden\n"
            "  slimconf get db.port base.yaml --type int  Read one value\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--prefix",
        default="",
        help="Environment prefix; enables <PREFIX>_CONFIG and <PREFIX>_a__b overrides.",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Log load events to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # dump ----------------------------------------------------------------
    dump_parser = subparsers.add_parser(
        "dump",
        parents=[common],
        help="Print the merged configuration",
        description=(
            "Resolve the scheme, apply environment overrides, and print the result.\n\n"
            "Examples:\n"
            "  slimconf dump defaults.yaml local.toml\n"
            "  slimconf dump --format yaml --redact app.json\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    dump_parser.add_argument("references", nargs="*", help="Scheme references, lowest precedence first")
    dump_parser.add_argument("--format", choices=OUTPUT_FORMATS, default="json")
    dump_parser.add_argument("--redact", action="store_true", help="Hide sensitive values")
    dump_parser.set_defaults(handler=_cmd_dump)

    # get -----------------------------------------------------------------
    get_parser = subparsers.add_parser(
        "get",
        parents=[common],
        help="Print a single value by dotted path",
        description=(
            "Look up one value after merging.\n\n"
            "Examples:\n"
            "  slimconf get service.port base.yaml --type int\n"
            "  slimconf get feature.enabled --prefix APP --type bool --default false\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    get_parser.add_argument("path", help="Dotted path, e.g. service.host")
    get_parser.add_argument("references", nargs="*", help="Scheme references, lowest precedence first")
    get_parser.add_argument("--type", dest="value_type", choices=VALUE_TYPES, default="string")
    get_parser.add_argument(
        "--default",
        dest="default",
        default=None,
        help="Printed when the path is missing or cannot be converted.",
    )
    get_parser.set_defaults(handler=_cmd_get)

    return parser


# ---------------------------------------------------------------------------
# Entrypoints
# ---------------------------------------------------------------------------


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse argv, route to a command handler, and return process exit code."""

    parser = build_parser()
    namespace = parser.parse_args(list(argv) if argv is not None else None)
    handler = getattr(namespace, "handler", None)
    if not callable(handler):
        parser.print_help(sys.stderr)
        return 2

    configure_logging("INFO" if _flag(namespace, "verbose") else "WARNING")
    try:
        result = handler(namespace)
    except CLIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code
    return int(result)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_dump(args: argparse.Namespace) -> int:
    config = _load(args)
    redact = _flag(args, "redact")
    if args.format == "yaml":
        sys.stdout.write(config.to_yaml(redact=redact))
    else:
        print(config.to_json(redact=redact))
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    config = _load(args)
    path = _require_str(args.path, "path")
    coerce = _COERCERS[args.value_type]
    default: str | None = args.default

    if default is not None and not config.has(path):
        print(default)
        return 0

    raw = config.lookup(path)
    try:
        value = coerce(raw)
    except ValueError as exc:
        if default is None:
            raise CLIError(f"cannot read {path} as {args.value_type}: {exc}", exit_code=1) from exc
        print(default)
        return 0

    print(to_text(value))
    return 0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load(args: argparse.Namespace) -> Config:
    references = tuple(_require_str(item, "reference") for item in args.references)
    return load_config(*references, prefix=args.prefix.strip(), resolvers=cli_resolvers())


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise CLIError(f"invalid {name}: expected string", exit_code=2)
    cleaned = value.strip()
    if not cleaned:
        raise CLIError(f"invalid {name}: value cannot be empty", exit_code=2)
    return cleaned


def _flag(args: argparse.Namespace, name: str) -> bool:
    value = getattr(args, name, False)
    return bool(value)


__all__ = ["CLIError", "build_parser", "cli_resolvers", "run_cli"]
