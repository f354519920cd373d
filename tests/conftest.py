from random import Random

import numpy as np
import pytest

SEED = 20240229


@pytest.fixture
def rng() -> Random:
    return Random(SEED)


@pytest.fixture
def np_rng() -> np.random.Generator:
    return np.random.default_rng(SEED)


def is_sorted(arr) -> bool:
    return all(arr[i] <= arr[i + 1] for i in range(len(arr) - 1))
