"Pivot selectors return an index in [low, high] and never touch the array"
from collections.abc import Callable, Sequence
from random import Random
from typing import NamedTuple, Optional


class UnknownPivotSelectorError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown pivot selector: {name!r}")


def _median_index(arr: Sequence, indices: list[int]) -> int:
    return sorted(indices, key=arr.__getitem__)[1]


def last_pivot(arr: Sequence, low: int, high: int, rng: Optional[Random] = None) -> int:
    return high


def random_pivot(arr: Sequence, low: int, high: int, rng: Random) -> int:
    return rng.randint(low, high)


def median_of_three_pivot(arr: Sequence, low: int, high: int, rng: Optional[Random] = None) -> int:
    return _median_index(arr, [low, (low + high) // 2, high])


def median_of_three_random_pivot(arr: Sequence, low: int, high: int, rng: Random) -> int:
    # sampled with replacement, repeated indices are fine
    return _median_index(arr, [rng.randint(low, high) for _ in range(3)])


class PivotSelector(NamedTuple):
    name: str
    func: Callable[[Sequence, int, int, Optional[Random]], int]


pivot_selectors = [
    PivotSelector("Last", last_pivot),
    PivotSelector("Random", random_pivot),
    PivotSelector("Median", median_of_three_pivot),
    PivotSelector("Median Random", median_of_three_random_pivot),
]


def get_pivot_selector(name: str) -> PivotSelector:
    for selector in pivot_selectors:
        if selector.name == name:
            return selector
    raise UnknownPivotSelectorError(name)
