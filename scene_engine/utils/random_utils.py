"""Helpers drawing from an injected ``random.Random``. Never the module-global one."""
import random
from typing import List, Sequence, TypeVar

import numpy as np

T = TypeVar('T')


def get_random_element(rng: random.Random, items: Sequence[T]) -> T:
    if not items:
        raise IndexError("cannot choose from an empty sequence")
    return items[rng.randrange(len(items))]


def get_random_elements(rng: random.Random, items: Sequence[T], amount: int) -> List[T]:
    """Pick ``amount`` elements, reusing the pool only once it is exhausted."""
    if amount > 0 and not items:
        raise IndexError("cannot choose from an empty sequence")
    result: List[T] = []
    pool = list(items)
    remaining = amount
    while remaining > 0:
        rng.shuffle(pool)
        extracted = pool[:remaining]
        result.extend(extracted)
        remaining -= len(extracted)
    return result


def true_with_probability(rng: random.Random, probability: float) -> bool:
    if probability >= 1:
        return True
    return rng.random() < probability


def random_between(rng: random.Random, low: float, high: float) -> float:
    return low + rng.random() * (high - low)


def random_int_between(rng: random.Random, low: int, high: int) -> int:
    """Integer in [low, high)."""
    if high <= low:
        return low
    return rng.randrange(low, high)


def numpy_generator(rng: random.Random) -> np.random.Generator:
    """numpy generator seeded from the injected source so noise stays reproducible."""
    return np.random.default_rng(rng.getrandbits(64))
