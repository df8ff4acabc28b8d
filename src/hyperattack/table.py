"""Attack counts for a set of pieces across a range of dimensions."""

import logging
from dataclasses import dataclass, field

from hyperattack.constants import (
    DEFAULT_DIMENSIONS,
    DEFAULT_SIDE_LENGTH,
    PIECE_ORDER,
    DiagonalMode,
    KnightMode,
)
from hyperattack.registry import get_piece_info

logger = logging.getLogger(__name__)

__all__ = ["AttackRow", "AttackTable", "build_attack_table", "format_count"]


@dataclass
class AttackRow:
    piece: str
    counts: dict[int, int]  # dimension -> attack count
    formula: str


@dataclass
class AttackTable:
    dimensions: list[int]
    side_length: int
    diagonal_mode: DiagonalMode
    knight_mode: KnightMode
    rows: list[AttackRow] = field(default_factory=list)

    def row(self, piece: str) -> AttackRow | None:
        for r in self.rows:
            if r.piece.lower() == piece.lower():
                return r
        return None

    def to_dict(self) -> dict:
        return {
            "dimensions": list(self.dimensions),
            "side_length": self.side_length,
            "diagonal_mode": self.diagonal_mode.value,
            "knight_mode": self.knight_mode.value,
            "rows": [
                {
                    "piece": r.piece,
                    # JSON object keys must be strings
                    "counts": {str(d): n for d, n in r.counts.items()},
                    "formula": r.formula,
                }
                for r in self.rows
            ],
        }


def build_attack_table(
    dimensions: list[int] | None = None,
    diagonal_mode=DiagonalMode.HYPER,
    knight_mode=KnightMode.ALTERNATIVE,
    side_length: int = DEFAULT_SIDE_LENGTH,
    pieces: list[str] | None = None,
) -> AttackTable:
    """Evaluate every requested piece at every requested dimension.

    Unknown piece names are skipped rather than failing the whole table.
    """
    dims = list(DEFAULT_DIMENSIONS if dimensions is None else dimensions)
    table = AttackTable(
        dimensions=dims,
        side_length=side_length,
        diagonal_mode=DiagonalMode(diagonal_mode),
        knight_mode=KnightMode(knight_mode),
    )
    for name in PIECE_ORDER if pieces is None else pieces:
        info = get_piece_info(name, table.diagonal_mode, table.knight_mode, side_length)
        if info is None:
            logger.warning("Skipping unknown piece: %s", name)
            continue
        table.rows.append(AttackRow(
            piece=info.name,
            counts={d: info.calculate(d) for d in dims},
            formula=info.describe(),
        ))
    return table


def format_count(n: int) -> str:
    """Thousands-separated count for display: 1234567 -> '1,234,567'."""
    return f"{n:,}"
