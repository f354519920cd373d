from collections.abc import Callable, MutableSequence, Sequence
from typing import NamedTuple

from .QuickSortStats import QuickSortStats


class UnknownPartitionSchemeError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown partition scheme: {name!r}")


def lomuto_partition(L: MutableSequence, low: int, high: int) -> tuple[int, QuickSortStats]:
    comparisons = swaps = 0
    pivot = L[high]
    i = low
    for j in range(low, high):
        comparisons += 1
        if L[j] <= pivot:
            L[i], L[j] = L[j], L[i]
            swaps += 1
            i += 1
    L[i], L[high] = L[high], L[i]
    swaps += 1
    return i, QuickSortStats(comparisons, swaps)


def hoare_partition(L: MutableSequence, low: int, high: int) -> tuple[int, QuickSortStats]:
    comparisons = swaps = 0
    pivot = L[low]
    i = low - 1
    j = high + 1
    while True:
        i += 1
        comparisons += 1
        while L[i] < pivot:
            i += 1
            comparisons += 1
        j -= 1
        comparisons += 1
        while L[j] > pivot:
            j -= 1
            comparisons += 1
        if i >= j:
            return j, QuickSortStats(comparisons, swaps)
        L[i], L[j] = L[j], L[i]
        swaps += 1


def three_way_partition(L: MutableSequence, low: int, high: int) -> tuple[int, int, QuickSortStats]:
    comparisons = swaps = 0
    pivot = L[low]
    lt, i, gt = low, low + 1, high
    while i <= gt:
        comparisons += 1
        if L[i] < pivot:
            L[lt], L[i] = L[i], L[lt]
            lt += 1
            i += 1
            swaps += 1
        elif L[i] > pivot:
            # the element swapped in from gt is unexamined, so i stays
            L[i], L[gt] = L[gt], L[i]
            gt -= 1
            swaps += 1
        else:
            i += 1
    return lt, gt, QuickSortStats(comparisons, swaps)


def dual_pivot_partition(L: MutableSequence, low: int, high: int) -> tuple[int, int, QuickSortStats]:
    if low >= high:
        return low, high, QuickSortStats()
    comparisons = swaps = 0
    if L[low] > L[high]:
        L[low], L[high] = L[high], L[low]
        swaps += 1
    pivot1, pivot2 = L[low], L[high]
    lt, gt = low + 1, high - 1
    i = lt
    while i <= gt:
        comparisons += 1
        if L[i] < pivot1:
            L[lt], L[i] = L[i], L[lt]
            lt += 1
            i += 1
            swaps += 1
            continue
        comparisons += 1
        if L[i] > pivot2:
            L[i], L[gt] = L[gt], L[i]
            gt -= 1
            swaps += 1
        else:
            i += 1
    lt -= 1
    gt += 1
    L[low], L[lt] = L[lt], L[low]
    L[high], L[gt] = L[gt], L[high]
    swaps += 2
    return lt, gt, QuickSortStats(comparisons, swaps)


def lomuto_validator(L: Sequence, low: int, high: int, p: int) -> bool:
    if not low <= p <= high:
        return False
    pivot = L[p]
    return all(L[k] <= pivot for k in range(low, p)) and all(L[k] > pivot for k in range(p + 1, high + 1))


def hoare_validator(L: Sequence, low: int, high: int, p: int) -> bool:
    if not low <= p <= high:
        return False
    return p == high or max(L[low : p + 1]) <= min(L[p + 1 : high + 1])


def three_way_validator(L: Sequence, low: int, high: int, lt: int, gt: int) -> bool:
    if not low <= lt <= gt <= high:
        return False
    pivot = L[lt]
    return (
        all(L[k] < pivot for k in range(low, lt))
        and all(L[k] == pivot for k in range(lt, gt + 1))
        and all(L[k] > pivot for k in range(gt + 1, high + 1))
    )


def dual_pivot_validator(L: Sequence, low: int, high: int, lt: int, gt: int) -> bool:
    if low >= high:
        return (lt, gt) == (low, high)
    if not low <= lt < gt <= high:
        return False
    pivot1, pivot2 = L[lt], L[gt]
    return (
        pivot1 <= pivot2
        and all(L[k] < pivot1 for k in range(low, lt))
        and all(pivot1 <= L[k] <= pivot2 for k in range(lt + 1, gt))
        and all(L[k] > pivot2 for k in range(gt + 1, high + 1))
    )


class PartitionScheme(NamedTuple):
    "A single-pivot scheme, with where it reads its pivot from and how it splits the range"

    name: str
    func: Callable[[MutableSequence, int, int], tuple[int, QuickSortStats]]
    pivot_slot: Callable[[int, int], int]
    subranges: Callable[[int, int, int], tuple[tuple[int, int], tuple[int, int]]]


partition_schemes = [
    PartitionScheme(
        "Lomuto",
        lomuto_partition,
        pivot_slot=lambda low, high: high,
        subranges=lambda low, high, p: ((low, p - 1), (p + 1, high)),
    ),
    PartitionScheme(
        "Hoare",
        hoare_partition,
        pivot_slot=lambda low, high: low,
        # the element at p is not in its final place, so it stays in the left half
        subranges=lambda low, high, p: ((low, p), (p + 1, high)),
    ),
]


def get_partition_scheme(name: str) -> PartitionScheme:
    for scheme in partition_schemes:
        if scheme.name == name:
            return scheme
    raise UnknownPartitionSchemeError(name)
