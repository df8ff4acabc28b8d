"""Piece lookup: bind a piece's formula to one board configuration."""

import enum
from dataclasses import dataclass
from functools import partial
from typing import Callable

from hyperattack import formulas, pieces
from hyperattack.constants import DEFAULT_SIDE_LENGTH, DiagonalMode, KnightMode

__all__ = ["Piece", "PieceInfo", "get_piece_info", "parse_piece"]


class Piece(enum.Enum):
    KNIGHT = "Knight"
    ROOK = "Rook"
    BISHOP = "Bishop"
    QUEEN = "Queen"
    KING = "King"
    PAWN = "Pawn"


@dataclass(frozen=True)
class PieceInfo:
    piece: Piece
    calculate: Callable[[int], int]  # dimension -> attack count
    formula: str                     # LaTeX, display only
    diagonal_mode: DiagonalMode = DiagonalMode.HYPER
    knight_mode: KnightMode = KnightMode.ALTERNATIVE
    side_length: int = DEFAULT_SIDE_LENGTH

    @property
    def name(self) -> str:
        return self.piece.value

    def describe(self) -> str:
        return self.formula


def parse_piece(name) -> Piece | None:
    """Resolve a piece name case-insensitively; None for anything else."""
    if isinstance(name, Piece):
        return name
    if not isinstance(name, str):
        return None
    key = name.strip().capitalize()
    try:
        return Piece(key)
    except ValueError:
        return None


def _bind(piece: Piece, diagonal_mode: DiagonalMode, knight_mode: KnightMode,
          l: int) -> tuple[Callable[[int], int], str]:
    if piece == Piece.KNIGHT:
        return (partial(pieces.knight_attacks, knight_mode=knight_mode, l=l),
                formulas.knight_formula(knight_mode, l))
    if piece == Piece.ROOK:
        return partial(pieces.rook_attacks, l=l), formulas.rook_formula(l)
    if piece == Piece.BISHOP:
        return (partial(pieces.bishop_attacks, diagonal_mode=diagonal_mode, l=l),
                formulas.bishop_formula(diagonal_mode, l))
    if piece == Piece.QUEEN:
        return (partial(pieces.queen_attacks, diagonal_mode=diagonal_mode, l=l),
                formulas.queen_formula(diagonal_mode, l))
    if piece == Piece.KING:
        return partial(pieces.king_attacks, l=l), formulas.king_formula(l)
    return (partial(pieces.pawn_attacks, diagonal_mode=diagonal_mode, l=l),
            formulas.pawn_formula(diagonal_mode, l))


def get_piece_info(
    name,
    diagonal_mode=DiagonalMode.HYPER,
    knight_mode=KnightMode.ALTERNATIVE,
    side_length: int = DEFAULT_SIDE_LENGTH,
) -> PieceInfo | None:
    """Look up a piece by name and bind it to the given configuration.

    Returns None for an unrecognized name. The returned ``calculate`` takes
    only the dimension; modes and side length are fixed at lookup time, so
    two lookups with different settings never affect each other.
    """
    piece = parse_piece(name)
    if piece is None:
        return None
    diagonal_mode = DiagonalMode(diagonal_mode)
    knight_mode = KnightMode(knight_mode)
    calculate, formula = _bind(piece, diagonal_mode, knight_mode, side_length)
    return PieceInfo(
        piece=piece,
        calculate=calculate,
        formula=formula,
        diagonal_mode=diagonal_mode,
        knight_mode=knight_mode,
        side_length=side_length,
    )
