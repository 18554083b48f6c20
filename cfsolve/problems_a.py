"""Solutions to the division-A style problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def common_multiple(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    return len(set(values))


def dinner_time(n: int, m: int, p: int, q: int) -> bool:
    """Decide whether n portions split in blocks of p can total m.

    Only when n is a whole number of blocks is the total forced
    to be ``n // p * q``; otherwise any total is reachable.
    """
    if p == 0:
        raise ValueError("block length p must be non-zero")
    return not (n % p == 0 and n // p * q != m)


def game_of_division(values: Sequence[int], k: int) -> int | None:
    """Return the 1-based index of a value whose difference with every
    other value is not divisible by k, or None if there is none."""
    if k == 0:
        raise ValueError("k must be non-zero")
    for i, chosen in enumerate(values, start=1):
        if all(
            abs(chosen - other) % k != 0
            for j, other in enumerate(values, start=1)
            if j != i
        ):
            return i
    return None


def time_to_duel(reports: Sequence[int]) -> bool:
    """Decide whether the duel reports (1 = won, 0 = lost) are contradictory."""
    if all(r != 0 for r in reports) or all(r == 0 for r in reports):
        return True
    return any(
        middle == 0 and (left != 1 or right != 1)
        for left, middle, right in zip(reports, reports[1:], reports[2:])
    )


def lrc_and_vip(values: Sequence[int]) -> list[int] | None:
    """Split values into groups 1 and 2 so that the groups' GCDs differ.

    Returns the group of each value, or None when all values are equal.
    """
    if len(set(values)) <= 1:
        return None
    top = max(values)
    return [1 if v == top else 2 for v in values]


def milya_two_arrays(a: Iterable[int], b: Iterable[int]) -> bool:
    """Decide whether pairwise sums can yield at least three distinct values."""
    return len(set(a)) + len(set(b)) >= 4


def permutation_warm_up(n: int) -> int:
    """Return the number of distinct values the permutation score can take."""
    return n * n // 4 + 1