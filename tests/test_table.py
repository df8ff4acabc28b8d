import logging

from hyperattack.constants import DEFAULT_DIMENSIONS, PIECE_ORDER, DiagonalMode
from hyperattack.table import build_attack_table, format_count


class TestBuildAttackTable:
    def test_default_layout(self):
        table = build_attack_table()
        assert table.dimensions == DEFAULT_DIMENSIONS
        assert [r.piece for r in table.rows] == PIECE_ORDER
        assert table.side_length == 8

    def test_counts(self):
        table = build_attack_table(dimensions=[2, 3], diagonal_mode="Classic")
        assert table.row("Rook").counts == {2: 14, 3: 21}
        assert table.row("queen").counts == {2: 27, 3: 60}
        assert table.diagonal_mode == DiagonalMode.CLASSIC

    def test_large_dimension_counts_are_exact(self):
        table = build_attack_table(dimensions=[50], pieces=["King"])
        assert table.row("King").counts[50] == 3 ** 50 - 1

    def test_unknown_pieces_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hyperattack.table"):
            table = build_attack_table(dimensions=[2], pieces=["Rook", "Dragon"])
        assert [r.piece for r in table.rows] == ["Rook"]
        assert "Dragon" in caplog.text
        assert table.row("Dragon") is None

    def test_formula_per_row(self):
        table = build_attack_table(dimensions=[2], side_length=4, pieces=["Knight"],
                                   knight_mode="Standard")
        assert table.row("Knight").formula == "d(d-1)"

    def test_to_dict_uses_string_keys(self):
        data = build_attack_table(dimensions=[1, 2], pieces=["King"]).to_dict()
        assert data["diagonal_mode"] == "Hyper"
        assert data["knight_mode"] == "Alternative"
        assert data["rows"] == [{"piece": "King", "counts": {"1": 2, "2": 8}, "formula": "3^d - 1"}]


def test_format_count():
    assert format_count(7) == "7"
    assert format_count(1234567) == "1,234,567"
