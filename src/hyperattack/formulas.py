"""LaTeX descriptions of the attack formulas.

Each function returns the branch of the matching formula in
``hyperattack.pieces`` that is active for the given side length, written in
terms of d and l. The strings are display metadata only.
"""

from hyperattack.constants import DEFAULT_SIDE_LENGTH, DiagonalMode, KnightMode

__all__ = [
    "rook_formula",
    "bishop_formula",
    "knight_formula",
    "queen_formula",
    "king_formula",
    "pawn_formula",
]


def rook_formula(l: int = DEFAULT_SIDE_LENGTH) -> str:
    if l < 1:
        return "0"
    return "d(l-1)"


def bishop_formula(diagonal_mode=DiagonalMode.HYPER, l: int = DEFAULT_SIDE_LENGTH) -> str:
    mode = DiagonalMode(diagonal_mode)
    if l < 2:
        return "0"
    if mode == DiagonalMode.CLASSIC:
        if l == 2:
            return r"\binom{d}{2}"
        if l % 2 == 1:
            return r"\binom{d}{2}(2l-2)"
        return r"\binom{d}{2}(2l-3)"
    if l % 2 == 0:
        return r"\sum_{r=2}^{d} \binom{d}{r}\left(2^{r-1}(l-1) - (2^{r-1}-1)\right)"
    return r"\sum_{r=2}^{d} \binom{d}{r} 2^{r-1}(l-1)"


def knight_formula(knight_mode=KnightMode.ALTERNATIVE, l: int = DEFAULT_SIDE_LENGTH) -> str:
    mode = KnightMode(knight_mode)
    if mode == KnightMode.STANDARD:
        if l < 3:
            return "0"
        if l < 5:
            return "d(d-1)"
        return "4d(d-1)"
    if l < 2:
        return "0"
    if l == 2:
        return r"\binom{d}{3}"
    if l < 5:
        return r"2\binom{d}{2} + \binom{d}{3}"
    return r"8\left(\binom{d}{2} + \binom{d}{3}\right)"


def queen_formula(diagonal_mode=DiagonalMode.HYPER, l: int = DEFAULT_SIDE_LENGTH) -> str:
    rook = rook_formula(l)
    bishop = bishop_formula(diagonal_mode, l)
    if bishop == "0":
        return rook
    if rook == "0":
        return bishop
    return f"{rook} + {bishop}"


def king_formula(l: int = DEFAULT_SIDE_LENGTH) -> str:
    if l < 1:
        return "0"
    return f"{min(l, 3)}^d - 1"


def pawn_formula(diagonal_mode=DiagonalMode.HYPER, l: int = DEFAULT_SIDE_LENGTH) -> str:
    mode = DiagonalMode(diagonal_mode)
    if mode == DiagonalMode.CLASSIC:
        if l < 2:
            return "0"
        body = "d-1" if l == 2 else "2(d-1)"
        return body + r" \quad (d \geq 2)"
    if l < 1:
        return "0"
    return f"{min(l, 3)}^{{d-1}} - 1" + r" \quad (d \geq 1)"
