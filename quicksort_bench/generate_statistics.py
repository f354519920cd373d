import logging
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from itertools import pairwise, product
from random import Random
from time import time_ns
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .Config import *
from .patterns import Pattern, generate_test_data
from .quick_sorts import SortMethod, get_sort_method
from .QuickSortStats import timed

logger = logging.getLogger(__name__)


class InvalidSortResultError(Exception):
    def __init__(self, method: str, size: int, pattern: str) -> None:
        super().__init__(f"{method} produced an invalid result for size {size}, pattern {pattern}")


class BenchmarkResult(NamedTuple):
    size: int
    pattern: str
    method: str
    comparisons: int
    swaps: int
    memory_usage: int
    execution_time: float


def format_duration(seconds: float) -> str:
    for unit, scale in (("s", 1), ("ms", 1e-3), ("µs", 1e-6)):
        if seconds >= scale:
            return f"{seconds / scale:.3f}{unit}"
    return f"{seconds * 1e9:.0f}ns"


def format_result(result: BenchmarkResult) -> str:
    return (
        f"Size: {result.size} Pattern: {result.pattern} Method: {result.method} "
        f"Comparisons: {result.comparisons} Swaps: {result.swaps} Execution Time: {format_duration(result.execution_time)}"
    )


def is_valid_result(original: Sequence, result: Sequence) -> bool:
    return all(a <= b for a, b in pairwise(result)) and Counter(original) == Counter(result)


def make_random_sources(seed: Optional[int] = None) -> tuple[Random, np.random.Generator, int]:
    "Seed once per process; the pivot selectors and the data generator share the seed"
    if seed is None:
        seed = time_ns()
    return Random(seed), np.random.default_rng(seed), seed


def run_benchmark(size: int, pattern: str, method: SortMethod, data: Sequence[int], rng: Random, validate: bool = VALIDATE) -> BenchmarkResult:
    arr = list(data)
    stats = timed(method.func, arr, rng)
    if validate and not is_valid_result(data, arr):
        raise InvalidSortResultError(method.name, size, pattern)
    return BenchmarkResult(size, pattern, method.name, stats.comparisons, stats.swaps, stats.memory_usage, stats.execution_time)


def generate_statistics(
    sizes: Iterable[int] = SIZES,
    patterns: Iterable[Pattern] = PATTERNS,
    methods: Optional[Sequence[SortMethod]] = None,
    seed: Optional[int] = SEED,
    validate: bool = VALIDATE,
    progress: bool = True,
    report: Optional[Callable[[str], None]] = tqdm.write,
) -> list[BenchmarkResult]:
    # each (size, pattern, method) cell is run once, in first-seen order
    sizes, patterns = list(dict.fromkeys(sizes)), list(dict.fromkeys(patterns))
    if methods is None:
        methods = [get_sort_method(name) for name in DEFAULT_METHODS]
    methods = list({method.name: method for method in methods}.values())
    for size in sizes:
        if not 0 <= size <= MAX_SIZE:
            raise ValueError(f"Size {size} is outside [0, {MAX_SIZE}]")

    rng, np_rng, seed = make_random_sources(seed)
    logger.info("Seed: %d", seed)

    results = []
    with tqdm(total=len(sizes) * len(patterns) * len(methods), disable=not progress) as bar:
        for size, pattern in product(sizes, patterns):
            data = generate_test_data(size, pattern, np_rng)
            for method in methods:
                bar.set_description(f"{method.name} n={size} {pattern}")
                result = run_benchmark(size, pattern, method, data, rng, validate)
                results.append(result)
                if report is not None:
                    report(format_result(result))
                bar.update()
    return results


def results_frame(results: Iterable[BenchmarkResult]) -> pd.DataFrame:
    df = pd.DataFrame(list(results), columns=list(BenchmarkResult._fields))
    return df.sort_values(["size", "pattern", "method"], kind="stable").reset_index(drop=True)


def summary_table(df: pd.DataFrame, value: str = "comparisons") -> pd.DataFrame:
    if value not in REPORT_VALUES:
        raise ValueError(f"Cannot summarize {value!r}, expected one of {REPORT_VALUES}")
    table = df.pivot(index=["size", "pattern"], columns="method", values=value)
    if value == "execution_time":
        table = table.apply(lambda column: column.map(format_duration))
    return table
