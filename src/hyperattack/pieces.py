"""Closed-form attack counts for pieces on a d-dimensional board.

Every function returns the number of cells a lone piece attacks from the
best available cell of a board with ``l`` cells along each of ``d`` axes.
No board is built and no moves are generated: each count is a piecewise
formula whose branches account for how short axes truncate the moves a
piece would have on an unbounded board.

All functions are total over non-negative integers and never return a
negative count. Mode arguments accept either the enum member or its string
value ("Classic", "Hyper", "Standard", "Alternative").
"""

from hyperattack.combinatorics import binomial
from hyperattack.constants import DEFAULT_SIDE_LENGTH, DiagonalMode, KnightMode

__all__ = [
    "rook_attacks",
    "bishop_attacks",
    "knight_attacks",
    "queen_attacks",
    "king_attacks",
    "pawn_attacks",
]


def rook_attacks(d: int, l: int = DEFAULT_SIDE_LENGTH) -> int:
    """Every other cell on each of the d axis lines through the rook."""
    if l < 1:
        return 0
    return d * (l - 1)


def _hyper_ray_cells(r: int, l: int) -> int:
    """Cells reached along all diagonals spanning one fixed set of r axes.

    There are 2^(r-1) diagonal lines through the cell. On an odd axis the
    centre cell sees l-1 cells along each line; on an even axis there is no
    centre, so every line but one loses a step on its short side.
    """
    lines = 2 ** (r - 1)
    if l % 2 == 0:
        return lines * (l - 1) - (lines - 1)
    return lines * (l - 1)


def bishop_attacks(d: int, diagonal_mode=DiagonalMode.HYPER,
                   l: int = DEFAULT_SIDE_LENGTH) -> int:
    mode = DiagonalMode(diagonal_mode)
    if l < 2:
        return 0

    if mode == DiagonalMode.CLASSIC:
        planes = binomial(d, 2)
        if l == 2:
            return planes
        per_plane = 2 * l - 2 if l % 2 == 1 else 2 * l - 3
        return planes * per_plane

    return sum(binomial(d, r) * _hyper_ray_cells(r, l) for r in range(2, d + 1))


def knight_attacks(d: int, knight_mode=KnightMode.ALTERNATIVE,
                   l: int = DEFAULT_SIDE_LENGTH) -> int:
    """Knight jumps that land on the board from the best starting cell.

    Below l=5 no cell has room for a 2-step in both directions, so the
    knight sits in a corner and only one sign per axis survives.
    """
    mode = KnightMode(knight_mode)

    if mode == KnightMode.STANDARD:
        if l < 3:
            return 0
        if l < 5:
            return d * (d - 1)
        return 4 * d * (d - 1)

    # Alternative: jumps of Manhattan length 3 split into (2,1) over two
    # axes and (1,1,1) over three axes
    pairs = binomial(d, 2)
    triples = binomial(d, 3)
    if l < 2:
        return 0
    if l == 2:
        return triples  # only (1,1,1) fits; zero below three axes
    if l < 5:
        return 2 * pairs + triples
    return 8 * (pairs + triples)


def queen_attacks(d: int, diagonal_mode=DiagonalMode.HYPER,
                  l: int = DEFAULT_SIDE_LENGTH) -> int:
    """Rook lines plus bishop diagonals."""
    return rook_attacks(d, l) + bishop_attacks(d, diagonal_mode, l)


def king_attacks(d: int, l: int = DEFAULT_SIDE_LENGTH) -> int:
    """One step of -1, 0 or +1 per axis, minus standing still.

    Axes shorter than 3 offer only l of those offsets.
    """
    if l < 1:
        return 0
    return min(l, 3) ** d - 1


def pawn_attacks(d: int, diagonal_mode=DiagonalMode.HYPER,
                 l: int = DEFAULT_SIDE_LENGTH) -> int:
    """Forward captures, with axis 0 taken as the pawn's forward direction.

    Classic captures step sideways along exactly one other axis; Hyper
    captures combine a king-like step over all d-1 sideways axes.
    """
    mode = DiagonalMode(diagonal_mode)

    if mode == DiagonalMode.CLASSIC:
        if d < 2 or l < 2:
            return 0
        return (d - 1) * min(l - 1, 2)

    if d < 1 or l < 1:
        return 0
    return min(l, 3) ** (d - 1) - 1
