#!/usr/bin/env python3
"""
numwords — Command-Line Entry Point
===================================

Spell one or more numbers as words.

Usage:
    python main.py 1234.5                     # English cardinal
    python main.py 2.50 --lang ru --currency  # два рубля пятьдесят копеек
    python main.py 1984 --year --era          # nineteen eighty-four AD
    python main.py 10001 --lang zh            # 一万零一
    python main.py --list-locales

Exit codes:
    0  every value converted
    1  at least one value resolved to the fallback string
    2  unknown locale
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from numwords.converter import NumberToWords
from numwords.exceptions import UnknownLocaleError
from numwords.locales import available_locales, load_locale
from numwords.models import ConversionOptions, ConversionResult, DecimalSeparatorStyle, Gender, OutputFormat

load_dotenv()


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_result(value: str, result: ConversionResult) -> None:
    """Print one conversion, with the error code when it fell back."""
    if result.ok:
        print(f"  {_DIM}{value:>24}{_RESET}  {_GREEN}→{_RESET} {_BOLD}{result.text}{_RESET}")
        return
    print(f"  {_DIM}{value:>24}{_RESET}  {_RED}→ {result.text}{_RESET}")
    print(f"  {'':>24}    {_RED}[{result.error_code}]{_RESET} {_DIM}{result.error_message}{_RESET}")


def print_locales() -> None:
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  LOCALES{_RESET}")
    print(f"{'=' * _WIDTH}")
    for code in available_locales():
        rules = load_locale(code)
        currencies = ", ".join(sorted(rules.currencies))
        print(f"  {_BOLD}{code:<5}{_RESET} {rules.name:<16} {_DIM}{currencies}{_RESET}")
    print(f"{'=' * _WIDTH}\n")


# ─── Arguments ───────────────────────────────────────────────────────


def currency_code(text: str) -> str:
    """argparse type for --currency: a three-letter ISO code, upper-cased."""
    if len(text) != 3 or not text.isalpha():
        raise argparse.ArgumentTypeError(f"expected a three-letter currency code, got {text!r}")
    return text.upper()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numwords",
        description="Spell numbers as words.",
    )
    parser.add_argument("values", nargs="*", help="numbers to spell (quote negatives: -- -5)")
    parser.add_argument(
        "--lang",
        "-l",
        default=os.getenv("NUMWORDS_DEFAULT_LOCALE", "en"),
        help="locale code (default: $NUMWORDS_DEFAULT_LOCALE or en)",
    )
    parser.add_argument("--list-locales", action="store_true", help="list locales and exit")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--currency",
        "-c",
        nargs="?",
        const="",
        type=currency_code,
        metavar="CODE",
        help="spell as money (optional ISO code)",
    )
    mode.add_argument("--year", "-y", action="store_true", help="spell as a calendar year")

    parser.add_argument("--era", action="store_true", help="append the era marker to positive years")
    parser.add_argument("--round", action="store_true", help="round the sub-unit half-up instead of truncating")

    separator = parser.add_mutually_exclusive_group()
    separator.add_argument("--point", action="store_true", help="read the decimal separator as 'point'")
    separator.add_argument("--comma", action="store_true", help="read the decimal separator as 'comma'")

    parser.add_argument("--gender", choices=[g.value.lower() for g in Gender], help="agreement for plain numbers")
    parser.add_argument("--and", dest="conjunction", action="store_true", help="use the optional conjunction")
    parser.add_argument("--alternate", action="store_true", help="use the alternate zero connector")
    parser.add_argument("--negative", metavar="WORD", help="override the negative prefix")
    parser.add_argument("--fallback", metavar="TEXT", help="text to print when a value cannot be spelled")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser


def options_from_args(args: argparse.Namespace) -> ConversionOptions:
    decimal_separator = None
    if args.point:
        decimal_separator = DecimalSeparatorStyle.POINT
    elif args.comma:
        decimal_separator = DecimalSeparatorStyle.COMMA

    return ConversionOptions(
        currency=args.currency is not None,
        currency_code=args.currency or None,
        format=OutputFormat.YEAR if args.year else OutputFormat.STANDARD,
        decimal_separator=decimal_separator,
        include_era_suffix=args.era,
        round_currency_subunit=args.round,
        negative_prefix=args.negative,
        fallback_on_error=args.fallback,
        gender=Gender(args.gender.upper()) if args.gender else None,
        include_conjunction=args.conjunction,
        alternate_connector=args.alternate,
    )


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert every value on the command line; returns the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else os.getenv("NUMWORDS_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        parser.error(f"NUMWORDS_LOG_LEVEL: unknown logging level {level!r}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.list_locales:
        print_locales()
        return 0
    if not args.values:
        parser.error("no values given")

    try:
        converter = NumberToWords(load_locale(args.lang))
    except UnknownLocaleError as exc:
        print(f"  {_RED}{_BOLD}[{exc.code}]{_RESET} {exc}", file=sys.stderr)
        print(f"  {_DIM}available: {', '.join(available_locales())}{_RESET}", file=sys.stderr)
        return 2

    options = options_from_args(args)
    exit_code = 0
    for value in args.values:
        result = converter.convert_detailed(value, options)
        print_result(value, result)
        if not result.ok:
            exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
