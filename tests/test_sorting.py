import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from solidkit.sorting import (
    ALGORITHMS,
    SortStats,
    benchmark,
    binary_insertion_sort,
    bubble_sort,
    format_array,
    insertion_sort,
    merge_sorted,
    quick_sort,
    selection_sort,
    shell_sort,
)

int_lists = st.lists(st.integers(min_value=-50, max_value=49), max_size=40)
distinct_lists = st.lists(
    st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=30, unique=True
)


def _inversions(values):
    return sum(
        1
        for i, a in enumerate(values)
        for b in values[i + 1 :]
        if a > b
    )


@given(values=int_lists)
def test_every_algorithm_sorts(values):
    expected = sorted(values)
    assert bubble_sort(values)[0] == expected
    assert selection_sort(values)[0] == expected
    assert insertion_sort(values)[0] == expected
    assert binary_insertion_sort(values)[0] == expected
    assert shell_sort(values)[0] == expected
    assert quick_sort(values)[0] == expected


def test_input_is_not_modified():
    values = [3, -1, 2, 0]
    assert bubble_sort(values)[0] == [-1, 0, 2, 3]
    assert selection_sort(values)[0] == [-1, 0, 2, 3]
    assert insertion_sort(values)[0] == [-1, 0, 2, 3]
    assert binary_insertion_sort(values)[0] == [-1, 0, 2, 3]
    assert shell_sort(values)[0] == [-1, 0, 2, 3]
    assert quick_sort(values)[0] == [-1, 0, 2, 3]
    assert values == [3, -1, 2, 0]


@given(values=int_lists)
def test_bubble_compares_every_pair(values):
    _, stats = bubble_sort(values)
    n = len(values)
    assert stats.iterations == n * (n - 1) // 2
    assert stats.conditions == stats.exchanges


@given(values=int_lists)
def test_selection_runs_full_passes_and_swaps_inversions(values):
    _, stats = selection_sort(values)
    n = len(values)
    assert stats.iterations == n * max(n - 1, 0)
    assert stats.exchanges == _inversions(values)
    assert stats.conditions == stats.exchanges


@given(values=distinct_lists)
def test_insertion_shifts_equal_inversions(values):
    _, stats = insertion_sort(values)
    assert stats.exchanges == _inversions(values)
    assert stats.iterations == stats.exchanges
    assert stats.conditions == 0


@given(values=distinct_lists)
def test_binary_insertion_counts(values):
    _, stats = binary_insertion_sort(values)
    n = len(values)
    assert stats.exchanges == _inversions(values) + n - 1
    assert stats.iterations == stats.conditions + _inversions(values)


@given(values=int_lists)
def test_shell_counts_moves_only(values):
    _, stats = shell_sort(values)
    assert stats.iterations == stats.exchanges
    assert stats.conditions == 0


@given(values=int_lists)
def test_quick_conditions_match_swaps(values):
    _, stats = quick_sort(values)
    assert stats.conditions == stats.exchanges


def test_sorted_input_needs_no_exchanges():
    values = list(range(-5, 10))
    for algorithm in (bubble_sort, selection_sort, insertion_sort, shell_sort):
        result, stats = algorithm(values)
        assert result == values
        assert stats.exchanges == 0


def test_stats_iadd_accumulates():
    total = SortStats(1, 2, 3)
    same = total
    total += SortStats(4, 5, 6)
    assert total is same
    assert total == SortStats(5, 7, 9)


def test_stats_iadd_rejects_other_types():
    total = SortStats(1, 2, 3)
    with pytest.raises(TypeError):
        total += 5
    assert total == SortStats(1, 2, 3)


def test_merge_sorted_source_example():
    first = [-1, 1, 2, 3, 3]
    second = [-2, 0, 2, 4, 4]
    assert merge_sorted(first, second) == [-2, -1, 0, 1, 2, 2, 3, 3, 4, 4]


@given(first=int_lists, second=int_lists)
def test_merge_sorted_matches_sorting(first, second):
    first, second = sorted(first), sorted(second)
    assert merge_sorted(first, second) == sorted(first + second)


def test_format_array_width():
    assert format_array([-1, 1, 2]) == "[  -1   1   2]"
    assert format_array([]) == "[]"


@given(values=int_lists)
def test_format_array_has_four_chars_per_small_value(values):
    assert len(format_array(values)) == 2 + 4 * len(values)


def test_benchmark_is_deterministic_with_seed():
    first = benchmark(15, 5, random.Random(7))
    second = benchmark(15, 5, random.Random(7))
    assert first == second
    assert list(first) == list(ALGORITHMS)


def test_benchmark_bubble_iterations_fixed_by_size():
    result = benchmark(15, 3, random.Random(1))
    assert result["bubble"].iterations == 15 * 14 // 2
    assert result["selection"].iterations == 15 * 14


def test_benchmark_rejects_bad_arguments():
    with pytest.raises(ValueError):
        benchmark(15, 0, random.Random(1))
    with pytest.raises(ValueError):
        benchmark(-1, 1, random.Random(1))