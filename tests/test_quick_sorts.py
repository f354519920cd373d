import sys
from collections import Counter
from random import Random

import numpy as np
import pytest

from conftest import is_sorted
from quicksort_bench.Config import DEFAULT_METHODS, PATTERNS
from quicksort_bench.partitions import get_partition_scheme, lomuto_partition
from quicksort_bench.patterns import generate_test_data
from quicksort_bench.pivot_selectors import last_pivot, median_of_three_pivot, pivot_selectors, random_pivot
from quicksort_bench.quick_sorts import (
    InvalidRangeError,
    UnknownSortMethodError,
    get_sort_method,
    quick_sort,
    quick_sort_dual_pivot,
    quick_sort_three_way,
    sort_methods,
)
from quicksort_bench.QuickSortStats import ZERO_STATS, QuickSortStats

LOMUTO = get_partition_scheme("Lomuto")
HOARE = get_partition_scheme("Hoare")


@pytest.mark.parametrize("method", sort_methods, ids=lambda m: m.name)
@pytest.mark.parametrize("pattern", PATTERNS)
@pytest.mark.parametrize("size", [0, 1, 2, 3, 17, 200])
def test_every_method_sorts(method, pattern: str, size: int, rng: Random, np_rng: np.random.Generator):
    data = generate_test_data(size, pattern, np_rng)
    arr = data.copy()
    stats = method.func(arr, rng)
    assert is_sorted(arr)
    assert Counter(arr) == Counter(data)
    assert stats.execution_time == 0.0


@pytest.mark.parametrize("method", sort_methods, ids=lambda m: m.name)
def test_every_method_sorts_random_lists(method, rng: Random):
    for _ in range(50):
        data = [rng.randint(-20, 20) for _ in range(rng.randint(0, 40))]
        arr = data.copy()
        method.func(arr, rng)
        assert arr == sorted(data)


def test_lomuto_last_pivot_scenario():
    arr = [5, 3, 8, 4, 2]
    quick_sort(arr, 0, 4, LOMUTO, last_pivot)
    assert arr == [2, 3, 4, 5, 8]


def test_dual_pivot_scenario():
    arr = [9, 1, 8, 2, 7, 3]
    stats = quick_sort_dual_pivot(arr, 0, 5)
    assert arr == [1, 2, 3, 7, 8, 9]
    assert stats.comparisons > 0


@pytest.mark.parametrize("selector", pivot_selectors, ids=lambda s: s.name)
def test_three_way_collapses_equal_values(selector, rng: Random):
    arr = [4, 4, 4, 4]
    stats = quick_sort_three_way(arr, 0, 3, selector.func, rng)
    assert arr == [4, 4, 4, 4]
    # a single partition step, nothing recursed into
    assert stats == QuickSortStats(comparisons=3, swaps=0, memory_usage=1)


@pytest.mark.parametrize("n", [2, 10, 500])
def test_all_equal_swaps_are_bounded(n: int, rng: Random):
    arr = [7] * n
    assert quick_sort_three_way(arr, 0, n - 1, random_pivot, rng).swaps == 0
    stats = quick_sort_dual_pivot(arr, 0, n - 1)
    assert stats.swaps == 2
    assert stats.memory_usage == 1
    assert arr == [7] * n


@pytest.mark.parametrize(
    "sort",
    [
        lambda arr, low, high: quick_sort(arr, low, high, LOMUTO, last_pivot),
        lambda arr, low, high: quick_sort(arr, low, high, HOARE, random_pivot, Random(1)),
        lambda arr, low, high: quick_sort_three_way(arr, low, high, median_of_three_pivot),
        quick_sort_dual_pivot,
    ],
    ids=["lomuto", "hoare", "three-way", "dual-pivot"],
)
def test_boundaries(sort):
    arr = [3, 1, 2]
    assert sort(arr, 0, -1) == ZERO_STATS
    assert sort(arr, 2, 1) == ZERO_STATS
    assert sort(arr, 1, 1) == ZERO_STATS
    assert sort([], 0, -1) == ZERO_STATS
    assert arr == [3, 1, 2]

    arr = [9, 8, 7, 6, 5]
    sort(arr, 1, 3)
    assert arr == [9, 6, 7, 8, 5]


@pytest.mark.parametrize("method", sort_methods, ids=lambda m: m.name)
def test_sorted_input_is_idempotent(method, rng: Random):
    n = 100
    arr = list(range(n))
    stats = method.func(arr, rng)
    assert arr == list(range(n))
    assert stats.comparisons >= n - 1


def test_lomuto_last_pivot_worst_case():
    n = 1500
    arr = list(range(n))
    stats = quick_sort(arr, 0, n - 1, LOMUTO, last_pivot)
    assert arr == list(range(n))
    assert stats.comparisons == n * (n - 1) // 2
    assert stats.memory_usage == n - 1
    assert sys.getrecursionlimit() > n


def test_median_pivot_halves_sorted_input():
    n = 1024
    arr = list(range(n))
    stats = quick_sort(arr, 0, n - 1, LOMUTO, median_of_three_pivot)
    assert arr == list(range(n))
    assert stats.memory_usage <= 10


def test_stats_are_the_sum_of_partition_steps(rng: Random):
    steps = []

    def recording_partition(L, low, high):
        p, stats = lomuto_partition(L, low, high)
        steps.append(stats)
        return p, stats

    arr = [rng.randint(0, 50) for _ in range(300)]
    total = quick_sort(arr, 0, len(arr) - 1, LOMUTO._replace(func=recording_partition), random_pivot, rng)
    assert is_sorted(arr)
    assert total.comparisons == sum(s.comparisons for s in steps)
    assert total.swaps == sum(s.swaps for s in steps)
    assert 1 <= total.memory_usage <= len(steps)


def test_same_seed_same_stats():
    method = get_sort_method("Three-Way Median Random Pivot")
    data = [Random(5).randint(0, 1000) for _ in range(500)]
    a, b = data.copy(), data.copy()
    assert method.func(a, Random(11)) == method.func(b, Random(11))
    assert a == b


def test_random_selector_without_rng():
    arr = [5, 1, 4, 2, 3]
    quick_sort(arr, 0, 4, HOARE, random_pivot)
    assert arr == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("low, high", [(-1, 2), (0, 3), (2, 10)])
def test_invalid_range(low: int, high: int):
    arr = [3, 2, 1]
    with pytest.raises(InvalidRangeError):
        quick_sort(arr, low, high, LOMUTO, last_pivot)
    with pytest.raises(IndexError):
        quick_sort_three_way(arr, low, high, last_pivot)
    with pytest.raises(IndexError):
        quick_sort_dual_pivot(arr, low, high)
    assert arr == [3, 2, 1]


def test_sort_methods_registry():
    names = [method.name for method in sort_methods]
    assert len(names) == len(set(names)) == 13
    assert "Lomuto Last Pivot" in names
    assert "Hoare Median Random Pivot" in names
    assert "Three-Way Median Random Pivot" in names
    assert names[-1] == "Dual Pivot"
    for name in DEFAULT_METHODS:
        assert get_sort_method(name).name == name
    with pytest.raises(UnknownSortMethodError):
        get_sort_method("Bogo Pivot")


def test_worst_case_depth_from_a_deep_caller():
    n = 2000

    def nested(depth: int) -> QuickSortStats:
        if depth:
            return nested(depth - 1)
        return quick_sort(arr, 0, n - 1, LOMUTO, last_pivot)

    arr = list(range(n))
    stats = nested(500)
    assert arr == list(range(n))
    assert stats.memory_usage == n - 1


def test_default_random_source_is_shared(monkeypatch: pytest.MonkeyPatch):
    from quicksort_bench import quick_sorts

    def no_new_sources(*args):
        raise AssertionError("a random source was created per call")

    monkeypatch.setattr(quick_sorts, "_default_rng", Random(9))
    monkeypatch.setattr(quick_sorts, "Random", no_new_sources)
    data = [Random(4).randint(0, 100) for _ in range(200)]
    a, b = data.copy(), data.copy()
    first = quick_sort(a, 0, len(a) - 1, HOARE, random_pivot)
    second = quick_sort_three_way(a, 0, len(a) - 1, random_pivot)

    expected_rng = Random(9)
    assert first == quick_sort(b, 0, len(b) - 1, HOARE, random_pivot, expected_rng)
    assert second == quick_sort_three_way(b, 0, len(b) - 1, random_pivot, expected_rng)


def test_dual_pivot_takes_no_random_source():
    arr = [3, 1, 2]
    with pytest.raises(TypeError):
        quick_sort_dual_pivot(arr, 0, 2, Random(1))
    get_sort_method("Dual Pivot").func(arr, None)
    assert arr == [1, 2, 3]
