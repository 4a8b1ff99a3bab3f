"""Command-line interface for docblock."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from docblock.errors import ParseError
from docblock.scan import find_comments

FORMATS = ("tree", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    tokens: bool
    fail_fast: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="docblock",
        description="Parse the doc-block comments of a source file",
    )
    p.add_argument("input", help="Source file to scan for /** ... */ comments")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: tree)",
    )
    p.add_argument(
        "--tokens",
        action="store_true",
        help="Dump the screened tokens instead of the parsed documents",
    )
    p.add_argument(
        "--fail-fast",
        action="store_true",
        default=None,
        help="Stop at the first comment that fails to parse",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover docblock.toml)",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "docblock.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Output format: config < CLI
    fmt = "tree"
    cfg_format = config.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(
                f"invalid format in config (expected one of {', '.join(FORMATS)}): {cfg_format}"
            )
        fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    # Fail fast: config < CLI
    fail_fast = False
    cfg_fail_fast = config.get("fail_fast")
    if isinstance(cfg_fail_fast, bool):
        fail_fast = cfg_fail_fast
    if args.fail_fast is not None:
        fail_fast = args.fail_fast

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        tokens=args.tokens,
        fail_fast=fail_fast,
    )


def process_source(source: str, options: CliOptions, out: TextIO) -> list[ParseError]:
    """Parse every doc-block in source, writing results to out.

    Returns the parse errors; with fail_fast, at most one.
    """
    from docblock.debug import document_to_dict, dump_document, dump_tokens
    from docblock.parser import parse
    from docblock.screener import screen

    errors: list[ParseError] = []
    results: list[dict[str, Any]] = []

    for comment in find_comments(source):
        position = comment.position(source)
        try:
            if options.tokens:
                tokens = screen(comment.text)
                out.write(f"# line {position.line}\n")
                dump_tokens(tokens, file=out)
                continue
            doc = parse(comment.text)
        except ParseError as exc:
            print(exc.format(str(options.input_file), position), file=sys.stderr)
            errors.append(exc)
            if options.fail_fast:
                break
            continue

        if options.format == "json":
            results.append({"line": position.line, "document": document_to_dict(doc)})
        else:
            out.write(f"# line {position.line}\n")
            dump_document(doc, file=out)

    if options.format == "json" and not options.tokens:
        json.dump(results, out, indent=2, ensure_ascii=False)
        out.write("\n")
    return errors


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        source = options.input_file.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: cannot read {options.input_file}: {exc.strerror}", file=sys.stderr)
        return 2

    if options.output_file:
        with open(options.output_file, "w", encoding="utf-8") as out:
            errors = process_source(source, options, out)
    else:
        errors = process_source(source, options, sys.stdout)

    return 1 if errors else 0
