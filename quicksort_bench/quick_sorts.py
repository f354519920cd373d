import inspect
import logging
import sys
from collections.abc import Callable, MutableSequence, Sequence
from itertools import product
from random import Random
from typing import NamedTuple, Optional

from .Config import RECURSION_HEADROOM
from .partitions import PartitionScheme, dual_pivot_partition, partition_schemes, three_way_partition
from .pivot_selectors import PivotSelector, pivot_selectors
from .QuickSortStats import ZERO_STATS, QuickSortStats

logger = logging.getLogger(__name__)

PivotFunc = Callable[[Sequence, int, int, Optional[Random]], int]

# shared by every call that does not bring its own random source, seeded once per process
_default_rng = Random()


class InvalidRangeError(IndexError):
    def __init__(self, low: int, high: int, length: int) -> None:
        super().__init__(f"Range [{low}, {high}] is out of bounds for a sequence of length {length}")


class UnknownSortMethodError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown sort method: {name!r}")


def _prepare(arr: Sequence, low: int, high: int) -> None:
    if low > high:
        return
    if low < 0 or high >= len(arr):
        raise InvalidRangeError(low, high, len(arr))
    # a bad pivot peels one element per level, on top of the frames already in use
    needed = len(inspect.stack(0)) + high - low + 1 + RECURSION_HEADROOM
    if sys.getrecursionlimit() < needed:
        logger.debug("Raising recursion limit from %d to %d", sys.getrecursionlimit(), needed)
        sys.setrecursionlimit(needed)


def _merge(partition_stats: QuickSortStats, *children: QuickSortStats) -> QuickSortStats:
    stats = partition_stats.combine(*children)
    return stats._replace(memory_usage=stats.memory_usage + 1)


def quick_sort(
    arr: MutableSequence,
    low: int,
    high: int,
    scheme: PartitionScheme,
    pivot_selector: PivotFunc,
    rng: Optional[Random] = None,
) -> QuickSortStats:
    _prepare(arr, low, high)
    if rng is None:
        rng = _default_rng

    def impl(low: int, high: int) -> QuickSortStats:
        if low >= high:
            return ZERO_STATS
        pivot_index = pivot_selector(arr, low, high, rng)
        slot = scheme.pivot_slot(low, high)
        arr[pivot_index], arr[slot] = arr[slot], arr[pivot_index]
        p, stats = scheme.func(arr, low, high)
        left, right = scheme.subranges(low, high, p)
        return _merge(stats, impl(*left), impl(*right))

    return impl(low, high)


def quick_sort_three_way(
    arr: MutableSequence,
    low: int,
    high: int,
    pivot_selector: PivotFunc,
    rng: Optional[Random] = None,
) -> QuickSortStats:
    _prepare(arr, low, high)
    if rng is None:
        rng = _default_rng

    def impl(low: int, high: int) -> QuickSortStats:
        if low >= high:
            return ZERO_STATS
        pivot_index = pivot_selector(arr, low, high, rng)
        arr[pivot_index], arr[low] = arr[low], arr[pivot_index]
        lt, gt, stats = three_way_partition(arr, low, high)
        return _merge(stats, impl(low, lt - 1), impl(gt + 1, high))

    return impl(low, high)


def quick_sort_dual_pivot(arr: MutableSequence, low: int, high: int) -> QuickSortStats:
    "The pivots are always the range ends, so no selector is needed"
    _prepare(arr, low, high)

    def impl(low: int, high: int) -> QuickSortStats:
        if low >= high:
            return ZERO_STATS
        lt, gt, stats = dual_pivot_partition(arr, low, high)
        # everything between two equal pivots equals them
        middle = ZERO_STATS if arr[lt] == arr[gt] else impl(lt + 1, gt - 1)
        return _merge(stats, impl(low, lt - 1), middle, impl(gt + 1, high))

    return impl(low, high)


class SortMethod(NamedTuple):
    name: str
    func: Callable[[MutableSequence, Random], QuickSortStats]


def _single_pivot_method(scheme: PartitionScheme, selector: PivotSelector) -> SortMethod:
    def func(arr: MutableSequence, rng: Random) -> QuickSortStats:
        return quick_sort(arr, 0, len(arr) - 1, scheme, selector.func, rng)

    return SortMethod(f"{scheme.name} {selector.name} Pivot", func)


def _three_way_method(selector: PivotSelector) -> SortMethod:
    def func(arr: MutableSequence, rng: Random) -> QuickSortStats:
        return quick_sort_three_way(arr, 0, len(arr) - 1, selector.func, rng)

    return SortMethod(f"Three-Way {selector.name} Pivot", func)


sort_methods: list[SortMethod] = [
    *(_single_pivot_method(scheme, selector) for scheme, selector in product(partition_schemes, pivot_selectors)),
    *(_three_way_method(selector) for selector in pivot_selectors),
    SortMethod("Dual Pivot", lambda arr, _: quick_sort_dual_pivot(arr, 0, len(arr) - 1)),
]


def get_sort_method(name: str) -> SortMethod:
    for method in sort_methods:
        if method.name == name:
            return method
    raise UnknownSortMethodError(name)
