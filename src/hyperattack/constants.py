"""Movement modes and shared defaults."""

import enum

__all__ = [
    "DiagonalMode",
    "KnightMode",
    "DEFAULT_SIDE_LENGTH",
    "DEFAULT_DIMENSIONS",
    "PIECE_ORDER",
]


class DiagonalMode(str, enum.Enum):
    """How bishops (and pawn captures) generalize diagonals."""
    CLASSIC = "Classic"  # exactly two axes move at once
    HYPER = "Hyper"      # any subset of two or more axes moves uniformly


class KnightMode(str, enum.Enum):
    """How the knight's (2, 1) jump generalizes."""
    STANDARD = "Standard"        # 2 steps on one axis, 1 on another
    ALTERNATIVE = "Alternative"  # any Manhattan-3 jump touching >= 2 axes


DEFAULT_SIDE_LENGTH = 8

# Dimension columns shown by the display table
DEFAULT_DIMENSIONS: list[int] = [1, 2, 3, 4, 5, 6, 7, 10, 20, 50]

PIECE_ORDER: list[str] = ["Knight", "Rook", "Bishop", "Queen", "King", "Pawn"]
