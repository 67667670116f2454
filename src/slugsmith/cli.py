"""CLI for slugsmith - turn text into slugs and check existing ones."""

import argparse
import json
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .adapters.yaml_langs import dump_language_tables
from .errors import ConfigError
from .logging import configure_logging
from .runtime import build_runtime


def _read_inputs(args: argparse.Namespace) -> list[str]:
    if args.text:
        return list(args.text)
    return [line.rstrip("\r\n") for line in sys.stdin]


def cmd_make(args: argparse.Namespace, rt: Any) -> int:
    """Print a slug for every input."""
    results = []
    for text in _read_inputs(args):
        results.append({"input": text, "slug": rt.generator.generate(text)})

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
    else:
        for item in results:
            print(item["slug"])
    return 0


def cmd_check(args: argparse.Namespace, rt: Any) -> int:
    """Validate slugs; exit code 1 if any is invalid."""
    results = []
    for text in _read_inputs(args):
        results.append({"slug": text, "valid": rt.validator(text)})

    invalid = [item for item in results if not item["valid"]]

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
    elif not args.quiet:
        for item in results:
            mark = "✓" if item["valid"] else "✗"
            print(f"{mark} {item['slug']}")
        if invalid:
            print(f"\n{len(invalid)} of {len(results)} invalid")

    return 1 if invalid else 0


def cmd_langs(args: argparse.Namespace, rt: Any) -> int:
    """List registered language replacement tables."""
    tables = {code: rt.registry.get(code) for code in rt.registry.codes()}

    if args.json:
        print(json.dumps(tables, ensure_ascii=False, indent=2))
    elif args.yaml:
        print(dump_language_tables(tables), end="")
    else:
        for code, table in tables.items():
            pairs = ", ".join(f"{old!r} -> {new!r}" for old, new in table.items())
            print(f"{code}: {pairs}")
    return 0


def _version_text() -> str:
    return (
        f"slugsmith {__version__}\n"
        f"python {platform.python_version()}\n"
        f"platform {platform.platform()}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slug", description="Configurable slug generator"
    )
    parser.add_argument(
        "--version", action="version", version=_version_text()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/slug.toml)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Maximum slug length in characters (negative: no limit)",
    )
    parser.add_argument(
        "--separator", default=None, help="Word separator (default: -)"
    )
    parser.add_argument(
        "--form",
        default=None,
        choices=["none", "NFC", "NFD", "NFKC", "NFKD"],
        help="Unicode normalization form (default: NFKC)",
    )
    parser.add_argument(
        "--no-lower",
        dest="lowercase",
        action="store_const",
        const=False,
        default=None,
        help="Keep the original letter case",
    )
    parser.add_argument(
        "--lang",
        action="append",
        default=[],
        help="Apply replacements for a language code (repeatable, e.g. --lang en)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "--json", action="store_true", help="Machine-readable output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # make command
    parser_make = subparsers.add_parser("make", help="Generate slugs")
    parser_make.add_argument(
        "text", nargs="*", help="Text to slugify (default: one line per stdin line)"
    )

    # check command
    parser_check = subparsers.add_parser("check", help="Validate slugs")
    parser_check.add_argument(
        "text",
        nargs="*",
        help="Slugs to check (default: one per stdin line); put -- before slugs "
        "that start with a dash",
    )

    # langs command
    parser_langs = subparsers.add_parser("langs", help="List language tables")
    parser_langs.add_argument(
        "--yaml", action="store_true", help="Print tables as YAML"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG)

    handlers = {
        "make": cmd_make,
        "check": cmd_check,
        "langs": cmd_langs,
    }
    handler = handlers.get(args.cmd)
    if handler is None:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)

    try:
        rt = build_runtime(
            config_path=args.config,
            overrides={
                "max_length": args.max_length,
                "separator": args.separator,
                "form": args.form,
                "lowercase": args.lowercase,
            },
            languages=args.lang,
        )
        exit_code = handler(args, rt)
    except (ConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
