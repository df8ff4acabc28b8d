"""CLI for attack tables and self-checks.

Usage:
    python -m hyperattack.cli [--dimensions D [D ...]] [--side-length L]
        [--diagonal-mode {Classic,Hyper}] [--knight-mode {Standard,Alternative}]
        [--pieces NAME [NAME ...]] [--check]

Prints JSON on stdout. With --check, exits 1 if any self-check fails.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from hyperattack.checks import all_checks_pass, run_checks, summarize
from hyperattack.config import Settings
from hyperattack.constants import DiagonalMode, KnightMode
from hyperattack.table import build_attack_table

logger = logging.getLogger(__name__)


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _positive(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Maximum attacked cells per piece on d-dimensional boards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dimensions", nargs="+", type=_non_negative,
        help=f"Dimensions to evaluate (default: {settings.dimensions} for the table, "
             "2 through 10 for --check)",
    )
    parser.add_argument(
        "--side-length", type=_positive, default=settings.side_length,
        help="Cells per axis (default: %(default)s)",
    )
    parser.add_argument(
        "--diagonal-mode", default=settings.diagonal_mode.value,
        choices=[m.value for m in DiagonalMode],
        help="Bishop/pawn diagonal rule (default: %(default)s)",
    )
    parser.add_argument(
        "--knight-mode", default=settings.knight_mode.value,
        choices=[m.value for m in KnightMode],
        help="Knight jump rule (default: %(default)s)",
    )
    parser.add_argument(
        "--pieces", nargs="+", metavar="NAME",
        help="Pieces to include (default: all six)",
    )
    parser.add_argument(
        "--check", action="store_true",
        help="Run self-checks instead of printing the table",
    )
    parser.set_defaults(table_dimensions=settings.dimensions)
    return parser


def run(args: argparse.Namespace) -> tuple[dict, int]:
    """Produce the JSON payload and exit code for parsed arguments."""
    if args.check:
        results = run_checks(
            args.diagonal_mode, args.knight_mode, args.side_length, args.dimensions,
        )
        passed, failed = summarize(results)
        for line in failed:
            logger.warning("check failed: %s", line)
        ok = all_checks_pass(results)
        return {"all_passed": ok, "passed": passed, "failed": failed}, 0 if ok else 1

    table = build_attack_table(
        dimensions=(args.dimensions if args.dimensions is not None
                    else args.table_dimensions),
        diagonal_mode=args.diagonal_mode,
        knight_mode=args.knight_mode,
        side_length=args.side_length,
        pieces=args.pieces,
    )
    return table.to_dict(), 0


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args = build_parser(settings).parse_args(argv)
    payload, code = run(args)
    json.dump(payload, sys.stdout, indent=2)
    print()
    return code


if __name__ == "__main__":
    sys.exit(main())
