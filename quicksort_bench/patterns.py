from collections.abc import Callable
from typing import Literal

import numpy as np

from .Config import FEW_UNIQUE_VALUES

Pattern = Literal["random", "sorted", "reversed", "fewUnique", "triangular"]


class UnknownPatternError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown pattern: {name!r}")


def _triangular(size: int, _: np.random.Generator) -> np.ndarray:
    half = size // 2
    return np.concatenate((np.arange(half), size - 1 - np.arange(half, size)))


generators: dict[str, Callable[[int, np.random.Generator], np.ndarray]] = {
    "random": lambda size, rng: rng.integers(0, size, size) if size else np.empty(0, dtype=np.int64),
    "sorted": lambda size, _: np.arange(size),
    "reversed": lambda size, _: np.arange(size, 0, -1),
    "fewUnique": lambda size, rng: rng.integers(0, FEW_UNIQUE_VALUES, size),
    "triangular": _triangular,
}


def generate_test_data(size: int, pattern: Pattern, rng: np.random.Generator) -> list[int]:
    if pattern not in generators:
        raise UnknownPatternError(pattern)
    # plain ints are much faster to index and compare than numpy scalars
    return generators[pattern](size, rng).tolist()
