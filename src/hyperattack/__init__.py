"""Maximum attacked cells for chess pieces on d-dimensional boards.

All functions are pure: configuration (side length, diagonal mode, knight
mode) is passed as arguments and nothing is cached between calls.
"""

from hyperattack.combinatorics import binomial
from hyperattack.constants import (
    DEFAULT_DIMENSIONS,
    DEFAULT_SIDE_LENGTH,
    PIECE_ORDER,
    DiagonalMode,
    KnightMode,
)
from hyperattack.pieces import (
    bishop_attacks,
    king_attacks,
    knight_attacks,
    pawn_attacks,
    queen_attacks,
    rook_attacks,
)
from hyperattack.registry import Piece, PieceInfo, get_piece_info

__all__ = [
    "binomial",
    "DEFAULT_DIMENSIONS",
    "DEFAULT_SIDE_LENGTH",
    "PIECE_ORDER",
    "DiagonalMode",
    "KnightMode",
    "bishop_attacks",
    "king_attacks",
    "knight_attacks",
    "pawn_attacks",
    "queen_attacks",
    "rook_attacks",
    "Piece",
    "PieceInfo",
    "get_piece_info",
]
