"""Uniform-deviate helpers shared by the mode and rational generators.

Every draw in the domain goes through a ``UniformSource``: a zero-argument
callable returning a float in ``[0, 1)``. Tests pass a scripted sequence,
the app passes numpy's generator.
"""

import math
from typing import Callable, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

UniformSource = Callable[[], float]


def default_uniform_source(seed: Optional[int] = None) -> UniformSource:
    """Return a numpy-backed uniform source, reproducible when seeded."""
    rng = np.random.default_rng(seed)
    return lambda: float(rng.random())


def random_int_inclusive(uniform: UniformSource, low: int, high: int) -> int:
    """Draw an integer in ``[low, high]`` with equal probability."""
    return math.floor(uniform() * (high - low + 1)) + low


def random_choice(uniform: UniformSource, items: Sequence[T]) -> T:
    return items[math.floor(uniform() * len(items))]


def random_sign(uniform: UniformSource) -> int:
    return -1 if uniform() < 0.5 else 1
