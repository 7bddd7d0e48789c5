"""Command line interface: print canonical forms of fractions."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Type

from .arithmetic import gcd
from .base import RationalBase
from .config import VARIANTS, load_settings
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


def parse_fraction(text: str, cls: Type[RationalBase]) -> RationalBase:
    """Parse ``"N/D"`` or ``"N"`` into an instance of *cls*."""
    numerator, sep, denominator = text.strip().partition("/")
    try:
        num = int(numerator)
        den = int(denominator) if sep else 1
    except ValueError:
        raise InvalidArgument(f"Not a fraction: {text!r}") from None
    return cls.construct(num, den)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lowterms",
        description="Reduce fractions to lowest terms.",
    )
    parser.add_argument("--config", dest="config", help="Path to a TOML settings file")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level regardless of the configured level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    simplify_cmd = commands.add_parser(
        "simplify",
        help="Print the canonical form of each fraction",
    )
    simplify_cmd.add_argument(
        "fractions",
        nargs="+",
        help="Fractions as N/D or N (put -- before a leading minus sign)",
    )
    simplify_cmd.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        help="Rational type to construct (overrides the config file)",
    )

    gcd_cmd = commands.add_parser("gcd", help="Print the greatest common divisor")
    gcd_cmd.add_argument("a", type=int)
    gcd_cmd.add_argument("b", type=int)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "gcd":
        print(gcd(args.a, args.b))
        return 0

    cls = VARIANTS[args.variant] if args.variant else settings.rational_class
    logger.debug("Using %s", cls.__name__)
    results: List[RationalBase] = [parse_fraction(text, cls) for text in args.fractions]
    for text, value in zip(args.fractions, results):
        print(f"{text} -> {value}")
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
