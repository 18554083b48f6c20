import itertools

import pytest

from cfsolve.problems_a import (
    common_multiple,
    dinner_time,
    game_of_division,
    lrc_and_vip,
    milya_two_arrays,
    permutation_warm_up,
    time_to_duel,
)


@pytest.mark.parametrize("values", [[1, 2, 2, 3], [5, 5, 5], [7, 1, 9, 1, 7]])
def test_common_multiple_ignores_duplicates(values):
    assert common_multiple(values + values) == common_multiple(values)
    assert common_multiple(list(reversed(values))) == common_multiple(values)


def test_common_multiple_all_equal_is_one():
    assert common_multiple([4, 4, 4, 4]) == common_multiple([4])


def test_common_multiple_distinct_counts_all():
    values = [3, 1, 4, 10, 5]
    assert common_multiple(values) == len(values)


@pytest.mark.parametrize("n,p,q", [(6, 3, 2), (10, 5, 7), (4, 1, 4)])
def test_dinner_time_divisible_requires_exact_total(n, p, q):
    exact = n // p * q
    assert dinner_time(n, exact, p, q)
    assert not dinner_time(n, exact + 1, p, q)


def test_dinner_time_non_divisible_always_possible():
    assert all(dinner_time(7, m, 3, 2) for m in range(0, 20))


def test_dinner_time_zero_block_rejected():
    with pytest.raises(ValueError):
        dinner_time(5, 5, 0, 1)


@pytest.mark.parametrize(
    "values,k",
    [([1, 2, 3], 2), ([1, 2, 4, 5], 3), ([10, 7, 3, 1], 3), ([6, 2, 8], 5)],
)
def test_game_of_division_answer_is_valid(values, k):
    index = game_of_division(values, k)
    if index is None:
        for i, a in enumerate(values):
            assert any(
                abs(a - b) % k == 0 for j, b in enumerate(values) if j != i
            )
    else:
        chosen = values[index - 1]
        others = values[: index - 1] + values[index:]
        assert all(abs(chosen - b) % k != 0 for b in others)


def test_game_of_division_same_residues_has_no_answer():
    assert game_of_division([1, 4, 7, 10], 3) is None
    assert game_of_division([5, 9, 2], 1) is None


def test_game_of_division_returns_first_valid_index():
    assert game_of_division([2, 4, 5], 2) == 3


def test_game_of_division_zero_k_rejected():
    with pytest.raises(ValueError):
        game_of_division([1, 2], 0)


def test_time_to_duel_uniform_reports_are_contradictory():
    assert time_to_duel([1, 1, 1])
    assert time_to_duel([0, 0])


def test_time_to_duel_consistent_pattern():
    assert not time_to_duel([1, 0, 1])
    assert not time_to_duel([0, 1])


def test_time_to_duel_zero_with_zero_neighbour():
    assert time_to_duel([0, 0, 1])
    assert time_to_duel([1, 0, 0, 1])


def test_lrc_and_vip_all_equal_is_none():
    assert lrc_and_vip([3, 3, 3]) is None
    assert lrc_and_vip([8]) is None


@pytest.mark.parametrize("values", [[1, 2], [4, 4, 6, 2], [9, 3, 9, 1, 1]])
def test_lrc_and_vip_groups_split_by_maximum(values):
    groups = lrc_and_vip(values)
    assert len(groups) == len(values)
    assert set(groups) == {1, 2}
    top = max(values)
    for v, g in zip(values, groups):
        assert (g == 1) == (v == top)


@pytest.mark.parametrize(
    "a,b",
    [([1, 2], [1, 2]), ([1, 1], [2, 2]), ([1, 2, 3], [5, 5, 5]), ([4, 4], [4, 4])],
)
def test_milya_two_arrays_matches_distinct_count(a, b):
    assert milya_two_arrays(a, b) == (common_multiple(a) + common_multiple(b) >= 4)
    assert milya_two_arrays(a, b) == milya_two_arrays(b, a)


def test_milya_two_arrays_known_results():
    assert milya_two_arrays([1, 2, 1, 2], [1, 2, 1, 2])
    assert not milya_two_arrays([1, 1, 1], [1, 1, 1])


def test_permutation_warm_up_small_values():
    assert permutation_warm_up(1) == 1
    assert permutation_warm_up(2) == 2


def test_permutation_warm_up_non_decreasing():
    results = [permutation_warm_up(n) for n in range(1, 50)]
    assert all(x <= y for x, y in itertools.pairwise(results)) if hasattr(
        itertools, "pairwise"
    ) else all(x <= y for x, y in zip(results, results[1:]))
    assert all(x <= y for x, y in zip(results, results[1:]))