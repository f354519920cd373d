from collections.abc import Callable
from time import perf_counter
from typing import NamedTuple


class QuickSortStats(NamedTuple):
    comparisons: int = 0
    swaps: int = 0
    memory_usage: int = 0
    execution_time: float = 0.0

    def combine(self, *others: "QuickSortStats") -> "QuickSortStats":
        """Sum the counters and keep the deepest memory usage. The execution time is left untouched."""
        comparisons, swaps, memory_usage = self.comparisons, self.swaps, self.memory_usage
        for other in others:
            comparisons += other.comparisons
            swaps += other.swaps
            memory_usage = max(memory_usage, other.memory_usage)
        return self._replace(comparisons=comparisons, swaps=swaps, memory_usage=memory_usage)


ZERO_STATS = QuickSortStats()


def timed(func: Callable[..., QuickSortStats], *args, **kwargs) -> QuickSortStats:
    start_time = perf_counter()
    stats = func(*args, **kwargs)
    return stats._replace(execution_time=perf_counter() - start_time)
