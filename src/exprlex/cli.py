"""Command-line interface for exprlex."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from exprlex.errors import LexicalError
from exprlex.tokens import TokenKind

_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    expression: str | None
    input_file: Path | None
    output_format: str
    positions: bool
    strict: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="exprlex",
        description="Tokenize a math expression",
    )
    p.add_argument("expression", nargs="?", help="Expression to tokenize (default: stdin)")
    p.add_argument("-f", "--file", metavar="FILE", help="Read the expression from FILE")
    p.add_argument(
        "--format",
        default=None,
        metavar="FORMAT",
        help="Output format: text or json (default: text)",
    )
    p.add_argument(
        "--positions",
        action="store_true",
        default=None,
        help="Include line:column positions in the output",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with status 2 when any INVALID token is produced",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover exprlex.toml)",
    )
    return p


def parse_format_arg(s: str) -> str:
    """Validate an output format name."""
    if s not in _FORMATS:
        raise argparse.ArgumentTypeError(
            f"invalid format (expected one of {', '.join(_FORMATS)}): {s}"
        )
    return s


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "exprlex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))

    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}
    cfg_check = config.get("check")
    if not isinstance(cfg_check, dict):
        cfg_check = {}

    # Output format: config < CLI
    output_format = "text"
    cfg_format = cfg_output.get("format")
    if isinstance(cfg_format, str):
        output_format = parse_format_arg(cfg_format)
    if args.format is not None:
        output_format = parse_format_arg(args.format)

    positions = False
    cfg_positions = cfg_output.get("positions")
    if isinstance(cfg_positions, bool):
        positions = cfg_positions
    if args.positions is not None:
        positions = args.positions

    strict = False
    cfg_strict = cfg_check.get("strict")
    if isinstance(cfg_strict, bool):
        strict = cfg_strict
    if args.strict is not None:
        strict = args.strict

    return CliOptions(
        expression=args.expression,
        input_file=Path(args.file) if args.file else None,
        output_format=output_format,
        positions=positions,
        strict=strict,
    )


def read_expression(options: CliOptions) -> str:
    """Return the expression text from the argument, a file, or stdin."""
    if options.expression is not None:
        return options.expression
    if options.input_file is not None:
        return options.input_file.read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    from exprlex.debug import dump_tokens, tokens_to_json
    from exprlex.lexer import tokenize

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    source = read_expression(options)

    try:
        tokens = tokenize(source)
    except LexicalError as exc:
        name = str(options.input_file) if options.input_file is not None else "<expr>"
        print(exc.format(name), file=sys.stderr)
        return 1

    if options.output_format == "json":
        json.dump(tokens_to_json(tokens, positions=options.positions), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        dump_tokens(tokens, file=sys.stdout, positions=options.positions)

    invalid = [t for t in tokens if t.kind == TokenKind.INVALID]
    if options.strict and invalid:
        for tok in invalid:
            start = tok.span.start
            print(f"error: invalid token {tok.text!r} at {start.line}:{start.column}", file=sys.stderr)
        return 2

    return 0


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())
