"""Self-checks for the attack formulas.

Runs the sanity properties every configuration should satisfy (non-negative
counts, growth with dimension, queen dominating rook and bishop) plus, on the
traditional 8-cell board, agreement with ordinary 2D chess. The expected 2D
values come from python-chess attack tables; KNOWN_2D_VALUES records the same
numbers as a literal table.
"""

from dataclasses import dataclass

import chess

from hyperattack.constants import DEFAULT_SIDE_LENGTH, PIECE_ORDER, DiagonalMode, KnightMode
from hyperattack.registry import PieceInfo, get_piece_info

__all__ = [
    "CheckResult",
    "KNOWN_2D_VALUES",
    "reference_2d_attacks",
    "run_checks",
    "all_checks_pass",
    "summarize",
]

# Centre-square attack counts on an empty 8x8 board
KNOWN_2D_VALUES: dict[str, int] = {
    "Knight": 8,
    "Rook": 14,
    "Bishop": 13,
    "Queen": 27,
    "King": 8,
    "Pawn": 2,
}

_CHESS_PIECE_TYPES: dict[str, chess.PieceType] = {
    "Knight": chess.KNIGHT,
    "Rook": chess.ROOK,
    "Bishop": chess.BISHOP,
    "Queen": chess.QUEEN,
    "King": chess.KING,
    "Pawn": chess.PAWN,
}


@dataclass
class CheckResult:
    name: str
    expected: int | str
    actual: int | str
    passed: bool
    message: str = ""


def reference_2d_attacks(square: chess.Square = chess.D4) -> dict[str, int]:
    """Attack counts of each lone white piece on an otherwise empty board."""
    counts: dict[str, int] = {}
    for name, piece_type in _CHESS_PIECE_TYPES.items():
        board = chess.BaseBoard.empty()
        board.set_piece_at(square, chess.Piece(piece_type, chess.WHITE))
        counts[name] = len(board.attacks(square))
    return counts


def _baseline_checks(calculators: dict[str, PieceInfo]) -> list[CheckResult]:
    results = []
    for name, expected in reference_2d_attacks().items():
        actual = calculators[name].calculate(2)
        results.append(CheckResult(
            name=f"{name} 2D",
            expected=expected,
            actual=actual,
            passed=actual == expected,
        ))
    return results


def _non_negative_checks(calculators: dict[str, PieceInfo],
                         dimensions: list[int]) -> list[CheckResult]:
    results = []
    for name, info in calculators.items():
        for d in dimensions:
            value = info.calculate(d)
            passed = value >= 0
            results.append(CheckResult(
                name=f"{name} {d}-D",
                expected=0,
                actual=value,
                passed=passed,
                message=(f"Non-negative check passed ({value})" if passed
                         else f"Got negative value: {value}"),
            ))
    return results


def _growth_checks(calculators: dict[str, PieceInfo],
                   dimensions: list[int]) -> list[CheckResult]:
    results = []
    ordered = sorted(set(dimensions))
    for name, info in calculators.items():
        for d, nxt in zip(ordered, ordered[1:]):
            current, following = info.calculate(d), info.calculate(nxt)
            passed = following > current
            results.append(CheckResult(
                name=f"{name} dimension increase {d}->{nxt}",
                expected=f"{nxt}D > {d}D",
                actual=f"{following} {'>' if passed else '<='} {current}",
                passed=passed,
                message=(f"{name} attacks more cells as dimensions increase" if passed
                         else f"{name} in {nxt}D ({following}) should attack more "
                              f"cells than in {d}D ({current})"),
            ))
    return results


def _hierarchy_checks(calculators: dict[str, PieceInfo],
                      dimensions: list[int]) -> list[CheckResult]:
    results = []
    for d in dimensions:
        queen = calculators["Queen"].calculate(d)
        for other in ("Bishop", "Rook"):
            value = calculators[other].calculate(d)
            passed = queen >= value
            results.append(CheckResult(
                name=f"Hierarchy {d}-D Queen >= {other}",
                expected=0,
                actual=max(value - queen, 0),
                passed=passed,
                message=(f"Queen attacks at least as many cells as {other}" if passed
                         else f"Queen ({queen}) attacks fewer cells than {other} ({value})"),
            ))
    return results


def run_checks(
    diagonal_mode=DiagonalMode.HYPER,
    knight_mode=KnightMode.ALTERNATIVE,
    side_length: int = DEFAULT_SIDE_LENGTH,
    dimensions: list[int] | None = None,
) -> list[CheckResult]:
    """Run every self-check for one configuration.

    The 2D baseline only applies when side_length is 8.
    """
    dims = list(range(2, 11)) if dimensions is None else list(dimensions)
    calculators = {
        name: get_piece_info(name, diagonal_mode, knight_mode, side_length)
        for name in PIECE_ORDER
    }

    results: list[CheckResult] = []
    if side_length == DEFAULT_SIDE_LENGTH:
        results.extend(_baseline_checks(calculators))
    results.extend(_non_negative_checks(calculators, dims))
    results.extend(_growth_checks(calculators, dims))
    results.extend(_hierarchy_checks(calculators, dims))
    return results


def all_checks_pass(results: list[CheckResult]) -> bool:
    return all(r.passed for r in results)


def summarize(results: list[CheckResult]) -> tuple[list[str], list[str]]:
    """Split results into passed and failed one-line messages."""
    passed: list[str] = []
    failed: list[str] = []
    for r in results:
        if r.passed:
            passed.append(f"{r.name}: {r.message}" if r.message
                          else f"{r.name}: ok ({r.actual})")
        else:
            failed.append(f"{r.name}: {r.message}" if r.message
                          else f"{r.name}: expected {r.expected}, got {r.actual}")
    return passed, failed
