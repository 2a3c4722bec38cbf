"""Command-line interface for the radix converter.

WHY: Quick conversions (a hex id to base62, a spelled-out number to
decimal) should not need a Python shell. The CLI wires presets, inline
alphabets and alphabet files to RadixConverter.convert_into().

HOW: argparse picks a source and a target system, each from exactly one
of a preset name, an inline alphabet string or an alphabet file. Values
come from positional arguments or, when absent (or "-"), from stdin.
Each converted value is printed on its own stdout line.

RULES:
- Defaults for --from/--to/--validate come from config (.env)
- Results go to stdout; errors go to stderr as "Error: ..." with exit 1
- --validate applies to inline alphabets and alphabet files; presets are
  always valid
- Logging is configured here, never in library modules
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from radix_converter.alphabet_file import load_converter
from radix_converter.config import (
    DEFAULT_SOURCE_PRESET,
    DEFAULT_TARGET_PRESET,
    DEFAULT_VALIDATE_NUMERALS,
    LOG_LEVEL,
)
from radix_converter.core.converter import RadixConverter
from radix_converter.presets import PRESETS, get_converter, list_presets

logger = logging.getLogger(__name__)


def _resolve_converter(
    preset: Optional[str],
    alphabet: Optional[str],
    alphabet_file: Optional[str],
    validate: bool,
) -> RadixConverter:
    """Build the converter for one side of the conversion.

    Inline alphabets and files win over the preset, which is always set
    because it carries the configured default.
    """
    if alphabet is not None:
        return RadixConverter(alphabet, validate=validate)
    if alphabet_file is not None:
        return load_converter(alphabet_file, validate=validate)
    return get_converter(preset)


def _read_values(values: List[str]) -> List[str]:
    """Return the values to convert, reading stdin for none or "-"."""
    if not values or values == ["-"]:
        return sys.stdin.read().split()
    return values


def _configure_logging(level_name: str) -> None:
    """Configure root logging for a CLI run.

    WHY: RADIX_LOG_LEVEL comes from the environment, so a typo must be
    reported like any other bad input instead of as a traceback.

    HOW: Resolves the name with logging.getLevelName(), which returns an
    int only for registered level names, then calls basicConfig().

    RULES:
    - Raises ValueError for unknown level names
    - Log records go to stderr, never stdout
    """
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(
            "Unknown log level '{}'. Set RADIX_LOG_LEVEL to one of: "
            "DEBUG, INFO, WARNING, ERROR, CRITICAL".format(level_name)
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _print_presets() -> None:
    """Print one ``name radix sample`` line per preset.

    The sample column is 255 encoded in that preset, so the digit order
    of each alphabet is visible at a glance.
    """
    for name in list_presets():
        converter = get_converter(name)
        print("{:<10} {:>3}  {}".format(name, converter.radix, converter.from_decimal(255)))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: zero or more values in the source system
    - --from / --from-alphabet / --from-file are mutually exclusive
    - --to / --to-alphabet / --to-file are mutually exclusive
    """
    parser = argparse.ArgumentParser(
        prog="radix-convert",
        description="Convert non-negative integers between numeral systems "
                    "with arbitrary (even multi-character) numerals.",
    )

    parser.add_argument(
        "values",
        nargs="*",
        help="Values to convert. Reads whitespace-separated values from stdin "
             "when omitted or '-'.",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--from",
        dest="source",
        default=DEFAULT_SOURCE_PRESET,
        metavar="PRESET",
        help="Source preset (default: %(default)s). "
             "Available: {}.".format(", ".join(sorted(PRESETS))),
    )
    source.add_argument(
        "--from-alphabet",
        default=None,
        metavar="CHARS",
        help="Source alphabet given inline, one numeral per character.",
    )
    source.add_argument(
        "--from-file",
        default=None,
        metavar="PATH",
        help="Source alphabet file (.json string/array or one token per line).",
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--to",
        dest="target",
        default=DEFAULT_TARGET_PRESET,
        metavar="PRESET",
        help="Target preset (default: %(default)s).",
    )
    target.add_argument(
        "--to-alphabet",
        default=None,
        metavar="CHARS",
        help="Target alphabet given inline, one numeral per character.",
    )
    target.add_argument(
        "--to-file",
        default=None,
        metavar="PATH",
        help="Target alphabet file (.json string/array or one token per line).",
    )

    parser.add_argument(
        "--validate",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_VALIDATE_NUMERALS,
        help="Reject custom alphabets whose tokens prefix each other "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the preset alphabets and exit.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(LOG_LEVEL)

        if args.list_presets:
            _print_presets()
            return

        source = _resolve_converter(args.source, args.from_alphabet, args.from_file, args.validate)
        target = _resolve_converter(args.target, args.to_alphabet, args.to_file, args.validate)
        convert = source.convert_into(target)

        values = _read_values(args.values)
        logger.info("Converting %d value(s) from %r to %r", len(values), source, target)
        results = [convert(value) for value in values]
    except ValueError as e:
        # RadixError and unknown presets are both ValueErrors
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    for result in results:
        print(result)


if __name__ == "__main__":
    main()
