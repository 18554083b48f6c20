"""Solutions to the division-B style problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence


def apples_in_boxes(values: Sequence[int], k: int) -> str:
    """Return the winner ("Tom" or "Jerry") of the apple-taking game."""
    if not values:
        raise ValueError("at least one box is required")
    counts = Counter(values)
    top = max(values)
    low = min(values)
    if counts[top] == 1:
        top -= 1
    if top - low > k:
        return "Jerry"
    return "Tom" if sum(values) % 2 else "Jerry"


def binary_typewriter(s: str) -> int:
    """Return the minimal cost of typing the binary string s.

    The cursor starts on '0'; up to two changes can be saved by
    reversing one substring beforehand.
    """
    if any(ch not in "01" for ch in s):
        raise ValueError("string must consist of '0' and '1' only")
    changes = 0
    current = "0"
    for ch in s:
        if ch != current:
            changes += 1
            current = ch
    if changes >= 3:
        return len(s) + changes - 2
    if changes > 1:
        return len(s) + changes - 1
    return len(s) + changes


def cost_of_array(values: Sequence[int], k: int) -> int:
    """Return the minimal cost of splitting values into k subarrays."""
    n = len(values)
    if n == k:
        expected = 1
        for value in values[1::2]:
            if value != expected:
                return expected
            expected += 1
        return expected
    window = values[1 : n - k + 2]
    return 2 if all(v == 1 for v in window) else 1


def gardener_and_array(sets: Iterable[Iterable[int]]) -> bool:
    """Decide whether some element's bits all appear in other elements too.

    Each entry lists the bit positions set in one number of the array.
    """
    groups = [list(bits) for bits in sets]
    counts = Counter(bit for bits in groups for bit in bits)
    return any(all(counts[bit] != 1 for bit in bits) for bits in groups)


def paint_a_strip(n: int) -> int:
    """Return the minimal number of first-type operations to paint n cells."""
    if n == 1:
        return 1
    if n <= 4:
        return 2
    moves = 2
    ones = 4
    while n > ones:
        moves += 1
        ones += ones + 2
    return moves


def sumdamental_decomposition(n: int, x: int) -> int | None:
    """Return the minimal sum of n positive integers whose XOR is x.

    Returns None when no such array exists.
    """
    if x < 0:
        raise ValueError("x must be non-negative")
    if n == 1:
        return None if x == 0 else x
    bits = bin(x).count("1")
    if n <= bits:
        return x
    extra = n - bits
    answer = x + extra
    if extra % 2:
        answer += 3 if x in (0, 1) else 1
    return answer


def apartment_purchase(positions: Sequence[int], k: int) -> int:
    """Return how many apartment positions can be optimal after removing
    at most k friends' houses."""
    if not positions:
        raise ValueError("at least one position is required")
    if k < 0:
        raise ValueError("k must be non-negative")
    ordered = sorted(positions)
    n = len(ordered)
    eligible = [v for i, v in enumerate(ordered) if abs(i - (n - i - 1)) <= k + 1]
    return eligible[-1] - eligible[0] + 1


def _halvings(size: int) -> int:
    """Number of ceil-halvings needed to bring size down to 1."""
    return max(size - 1, 0).bit_length()


def slice_to_survive(n: int, m: int, a: int, b: int) -> int:
    """Return the number of turns of the grid-cutting game."""
    options = [(a, m), (n - a + 1, m), (n, b), (n, m - b + 1)]
    return min(_halvings(rows) + _halvings(cols) for rows, cols in options) + 1


def picky_cat(values: Sequence[int]) -> bool:
    """Decide whether the first value can become the median after sign flips."""
    if not values:
        raise ValueError("at least one value is required")
    magnitudes = sorted(abs(v) for v in values)
    first = abs(values[0])
    return bisect_left(magnitudes, first) <= len(values) // 2