"""Solutions to the division-C style problems."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def hacking_numbers_easy(n: int) -> list[str]:
    """Return the commands that turn any unknown x in [1, 10**9] into n.

    Two digit sums bring x into 1..9, four subtractions of 8, 4, 2 and 1
    (each ignored by the judge when it would leave the range) pin it to 1,
    and a final addition reaches n.
    """
    return [
        "digit",
        "digit",
        "add -8",
        "add -4",
        "add -2",
        "add -1",
        f"add {n - 1}",
        "!",
    ]


def hacking_numbers_medium(n: int) -> list[str]:
    """Return the commands that turn any unknown x in [1, 10**9] into n.

    Multiplying by 9 makes the digit sum a multiple of 9, and two digit
    sums then leave exactly 9.
    """
    return [
        "mul 9",
        "digit",
        "digit",
        f"add {n - 9}",
        "!",
    ]


def fanum_tax_easy(values: Sequence[int], x: int) -> bool:
    """Decide whether replacing some a_i by x - a_i can sort values."""
    if not values:
        raise ValueError("at least one value is required")
    previous = min(values[0], x - values[0])
    for value in values[1:]:
        smaller = min(value, x - value)
        current = smaller if smaller >= previous else max(value, x - value)
        if current < previous:
            return False
        previous = current
    return True


def fanum_tax_hard(values: Sequence[int], b: Sequence[int]) -> bool:
    """Decide whether replacing some a_i by b_j - a_i can sort values."""
    if not values:
        raise ValueError("at least one value is required")
    if not b:
        raise ValueError("b must not be empty")
    options = sorted(b)
    previous = min(values[0], options[0] - values[0])
    for value in values[1:]:
        current = value
        pos = bisect_left(options, value + previous)
        if pos < len(options):
            target = options[pos]
            current = min(current, target - current)
            if current < previous:
                current = target - current
        if current < previous:
            return False
        previous = current
    return True


def mex_grid(n: int) -> list[list[int]]:
    """Fill an n by n grid with 0..n*n-1 as an inward clockwise spiral
    starting from the largest value in the top-left corner."""
    if n < 0:
        raise ValueError("n must be non-negative")
    grid = [[0] * n for _ in range(n)]
    top, left = 0, 0
    bottom, right = n - 1, n - 1
    counter = iter(range(n * n - 1, -1, -1))
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            grid[top][col] = next(counter)
        for row in range(top + 1, bottom + 1):
            grid[row][right] = next(counter)
        if top != bottom:
            for col in range(right - 1, left - 1, -1):
                grid[bottom][col] = next(counter)
        if left != right:
            for row in range(bottom - 1, top, -1):
                grid[row][left] = next(counter)
        top += 1
        left += 1
        bottom -= 1
        right -= 1
    return grid


def prime_factors(n: int) -> dict[int, int]:
    """Return the prime factorisation of n as {prime: exponent}, in
    increasing order of primes."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors: dict[int, int] = {}
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            n //= divisor
        divisor += 1
    if n != 1:
        factors[n] = factors.get(n, 0) + 1
    return factors