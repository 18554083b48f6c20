"""Command-line driver that reads judge-style input and prints answers.

Input starts with the number of test cases, followed by each case in the
layout the problem defines. Interactive problems read the judge's reply
after every command they print.
"""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterable

from cfsolve.problems_a import (
    common_multiple,
    dinner_time,
    game_of_division,
    lrc_and_vip,
    milya_two_arrays,
    permutation_warm_up,
    time_to_duel,
)
from cfsolve.problems_b import (
    apartment_purchase,
    apples_in_boxes,
    binary_typewriter,
    cost_of_array,
    gardener_and_array,
    paint_a_strip,
    picky_cat,
    slice_to_survive,
    sumdamental_decomposition,
)
from cfsolve.problems_c import (
    fanum_tax_easy,
    fanum_tax_hard,
    hacking_numbers_easy,
    hacking_numbers_medium,
    mex_grid,
    prime_factors,
)


class _Tokens:
    """Whitespace-separated tokens pulled lazily from lines of text."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._pending: deque[str] = deque()

    def word(self) -> str:
        while not self._pending:
            line = next(self._lines, None)
            if line is None:
                raise ValueError("unexpected end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


Emit = Callable[[str], None]
Solver = Callable[[_Tokens, Emit], None]

_SOLVERS: dict[str, Solver] = {}


def _solver(name: str) -> Callable[[Solver], Solver]:
    def register(func: Solver) -> Solver:
        _SOLVERS[name] = func
        return func

    return register


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _join(values: Iterable[int]) -> str:
    return " ".join(str(v) for v in values)


@_solver("common_multiple")
def _common_multiple(tokens: _Tokens, emit: Emit) -> None:
    n = tokens.number()
    emit(str(common_multiple(tokens.numbers(n))))


@_solver("dinner_time")
def _dinner_time(tokens: _Tokens, emit: Emit) -> None:
    n, m, p, q = tokens.numbers(4)
    emit(_yes_no(dinner_time(n, m, p, q)))


@_solver("game_of_division")
def _game_of_division(tokens: _Tokens, emit: Emit) -> None:
    n, k = tokens.numbers(2)
    index = game_of_division(tokens.numbers(n), k)
    if index is None:
        emit("NO")
    else:
        emit("YES")
        emit(str(index))


@_solver("time_to_duel")
def _time_to_duel(tokens: _Tokens, emit: Emit) -> None:
    n = tokens.number()
    emit(_yes_no(time_to_duel(tokens.numbers(n))))


@_solver("lrc_and_vip")
def _lrc_and_vip(tokens: _Tokens, emit: Emit) -> None:
    n = tokens.number()
    groups = lrc_and_vip(tokens.numbers(n))
    if groups is None:
        emit("NO")
    else:
        emit("YES")
        emit(_join(groups))


@_solver("milya_two_arrays")
def _milya_two_arrays(tokens: _Tokens, emit: Emit) -> None:
    n = tokens.number()
    a = tokens.numbers(n)
    b = tokens.numbers(n)
    emit(_yes_no(milya_two_arrays(a, b)))


@_solver("permutation_warm_up")
def _permutation_warm_up(tokens: _Tokens, emit: Emit) -> None:
    emit(str(permutation_warm_up(tokens.number())))


@_solver("apples_in_boxes")
def _apples_in_boxes(tokens: _Tokens, emit: Emit) -> None:
    n, k = tokens.numbers(2)
    emit(apples_in_boxes(tokens.numbers(n), k))


@_solver("binary_typewriter")
def _binary_typewriter(tokens: _Tokens, emit: Emit) -> None:
    n = tokens.number()
    s = tokens.word()
    emit(str(binary_typewriter(s[:n])))


@_solver("cost_of_array")
def _cost_of_array(tokens: _Tokens, emit: Emit) -> None:
    n, k = tokens.numbers(2)
    emit(str(cost_of_array(tokens.numbers(n), k)))


@_solver("gardener_and_array")
def _gardener_and_array(tokens: _Tokens, emit: Emit) -> None:
    n = tokens.number()
    sets = [tokens.numbers(tokens.number()) for _ in range(n)]
    emit("Yes" if gardener_and_array(sets) else "No")


@_solver("paint_a_strip")
def _paint_a_strip(tokens: _Tokens, emit: Emit) -> None:
    emit(str(paint_a_strip(tokens.number())))


@_solver("sumdamental_decomposition")
def _sumdamental_decomposition(tokens: _Tokens, emit: Emit) -> None:
    n, x = tokens.numbers(2)
    answer = sumdamental_decomposition(n, x)
    emit("-1" if answer is None else str(answer))


@_solver("apartment_purchase")
def _apartment_purchase(tokens: _Tokens, emit: Emit) -> None:
    n, k = tokens.numbers(2)
    emit(str(apartment_purchase(tokens.numbers(n), k)))


@_solver("slice_to_survive")
def _slice_to_survive(tokens: _Tokens, emit: Emit) -> None:
    n, m, a, b = tokens.numbers(4)
    emit(str(slice_to_survive(n, m, a, b)))


@_solver("picky_cat")
def _picky_cat(tokens: _Tokens, emit: Emit) -> None:
    n = tokens.number()
    emit(_yes_no(picky_cat(tokens.numbers(n))))


def _interact(commands: list[str], tokens: _Tokens, emit: Emit) -> None:
    for command in commands:
        emit(command)
        tokens.number()


@_solver("hacking_numbers_easy")
def _hacking_numbers_easy(tokens: _Tokens, emit: Emit) -> None:
    _interact(hacking_numbers_easy(tokens.number()), tokens, emit)


@_solver("hacking_numbers_medium")
def _hacking_numbers_medium(tokens: _Tokens, emit: Emit) -> None:
    _interact(hacking_numbers_medium(tokens.number()), tokens, emit)


@_solver("fanum_tax_easy")
def _fanum_tax_easy(tokens: _Tokens, emit: Emit) -> None:
    n, _m = tokens.numbers(2)
    values = tokens.numbers(n)
    x = tokens.number()
    emit(_yes_no(fanum_tax_easy(values, x)))


@_solver("fanum_tax_hard")
def _fanum_tax_hard(tokens: _Tokens, emit: Emit) -> None:
    n, m = tokens.numbers(2)
    values = tokens.numbers(n)
    b = tokens.numbers(m)
    emit(_yes_no(fanum_tax_hard(values, b)))


@_solver("mex_grid")
def _mex_grid(tokens: _Tokens, emit: Emit) -> None:
    for row in mex_grid(tokens.number()):
        emit(_join(row))


@_solver("prime_factors")
def _prime_factors(tokens: _Tokens, emit: Emit) -> None:
    for prime, exponent in prime_factors(tokens.number()).items():
        emit(f"{prime} -> {exponent}")


PROBLEMS = tuple(sorted(_SOLVERS))


def _lookup(problem: str) -> Solver:
    try:
        return _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None


def _drive(solver: Solver, lines: Iterable[str], emit: Emit) -> None:
    tokens = _Tokens(lines)
    for _ in range(tokens.number()):
        solver(tokens, emit)


def run(problem: str, text: str) -> str:
    """Solve every test case in text for the named problem and return the output."""
    solver = _lookup(problem)
    output: list[str] = []
    _drive(solver, text.splitlines(), output.append)
    return "".join(f"{line}\n" for line in output)


def main(argv: list[str] | None = None) -> int:
    """Entry point: read judge input, print the answers, return an exit code."""
    parser = argparse.ArgumentParser(
        prog="cfsolve", description="Solve judge-style input for a problem."
    )
    parser.add_argument("problem", choices=PROBLEMS)
    parser.add_argument(
        "input", nargs="?", help="file to read; standard input by default"
    )
    args = parser.parse_args(argv)
    solver = _lookup(args.problem)

    out = sys.stdout

    def emit(line: str) -> None:
        out.write(f"{line}\n")
        out.flush()

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as handle:
                _drive(solver, handle, emit)
        else:
            _drive(solver, sys.stdin, emit)
    except (ValueError, OSError) as exc:
        print(f"cfsolve: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())