"""Exact combinatorics helpers for the attack formulas."""

__all__ = ["binomial"]


def binomial(n: int, k: int) -> int:
    """Number of k-subsets of an n-set, or 0 when k is out of range.

    Accumulates the product one factor at a time so every intermediate
    value is itself a binomial coefficient and the division is exact.
    """
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - k + i) // i
    return result
