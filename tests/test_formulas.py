"""Tests for formula descriptions: the branch shown follows the side length."""

import pytest

from hyperattack.formulas import (
    bishop_formula,
    king_formula,
    knight_formula,
    pawn_formula,
    queen_formula,
    rook_formula,
)


class TestRookFormula:
    def test_default(self):
        assert rook_formula() == "d(l-1)"

    def test_empty_axis(self):
        assert rook_formula(0) == "0"


class TestBishopFormula:
    def test_classic_parity(self):
        assert bishop_formula("Classic", 8) == r"\binom{d}{2}(2l-3)"
        assert bishop_formula("Classic", 7) == r"\binom{d}{2}(2l-2)"

    def test_classic_side_two(self):
        assert bishop_formula("Classic", 2) == r"\binom{d}{2}"

    def test_hyper_even_has_parity_correction(self):
        assert "2^{r-1}-1" in bishop_formula("Hyper", 8)
        assert "2^{r-1}-1" not in bishop_formula("Hyper", 9)

    @pytest.mark.parametrize("mode", ["Classic", "Hyper"])
    def test_narrow_board(self, mode):
        assert bishop_formula(mode, 1) == "0"


class TestKnightFormula:
    def test_standard_branches(self):
        assert knight_formula("Standard", 2) == "0"
        assert knight_formula("Standard", 4) == "d(d-1)"
        assert knight_formula("Standard", 8) == "4d(d-1)"

    def test_alternative_branches(self):
        assert knight_formula("Alternative", 1) == "0"
        assert knight_formula("Alternative", 2) == r"\binom{d}{3}"
        assert knight_formula("Alternative", 3) == r"2\binom{d}{2} + \binom{d}{3}"
        assert knight_formula("Alternative", 8).startswith("8")


class TestQueenFormula:
    def test_joins_rook_and_bishop(self):
        assert queen_formula("Classic", 8) == r"d(l-1) + \binom{d}{2}(2l-3)"

    def test_drops_zero_bishop_term(self):
        assert queen_formula("Hyper", 1) == "d(l-1)"

    def test_empty_board(self):
        assert queen_formula("Hyper", 0) == "0"


class TestKingAndPawnFormula:
    def test_king_base_follows_side_length(self):
        assert king_formula(8) == "3^d - 1"
        assert king_formula(2) == "2^d - 1"

    def test_pawn_classic(self):
        assert pawn_formula("Classic", 8) == r"2(d-1) \quad (d \geq 2)"
        assert pawn_formula("Classic", 2) == r"d-1 \quad (d \geq 2)"
        assert pawn_formula("Classic", 1) == "0"

    def test_pawn_hyper(self):
        assert pawn_formula("Hyper", 8) == r"3^{d-1} - 1 \quad (d \geq 1)"
        assert pawn_formula("Hyper", 2) == r"2^{d-1} - 1 \quad (d \geq 1)"
