import math

import pytest

from hyperattack.combinatorics import binomial


class TestBinomial:
    @pytest.mark.parametrize("n,k,expected", [
        (0, 0, 1),
        (5, 0, 1),
        (5, 5, 1),
        (5, 2, 10),
        (8, 3, 56),
        (52, 5, 2598960),
    ])
    def test_small_values(self, n, k, expected):
        assert binomial(n, k) == expected

    def test_k_greater_than_n_is_zero(self):
        assert binomial(3, 5) == 0
        assert binomial(0, 1) == 0

    def test_negative_k_is_zero(self):
        assert binomial(3, -1) == 0

    def test_symmetry(self):
        for k in range(0, 21):
            assert binomial(20, k) == binomial(20, 20 - k)

    def test_exact_for_large_inputs(self):
        """Float factorial division loses digits long before n=300."""
        assert binomial(100, 50) == 100891344545564193334812497256
        assert binomial(300, 150) == math.comb(300, 150)
        assert isinstance(binomial(300, 150), int)
