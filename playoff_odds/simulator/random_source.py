"""
Random sources for the simulation engine.

The engine only needs uniform floats in [0, 1). Anything with a ``next()``
method returning such a value can be injected, which keeps tests deterministic
and lets each worker process own its own stream.
"""

import math
import random
from typing import Optional, Protocol

from .errors import RandomSourceError


class RandomSource(Protocol):
    """Uniform random number generator."""

    def next(self) -> float:
        ...


class SeededRandom:
    """RandomSource backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


def draw(source: RandomSource) -> float:
    """
    Pull one value from a random source and check it.

    Raises:
        RandomSourceError: If the source raises or returns a value outside [0, 1)
    """
    try:
        value = source.next()
    except RandomSourceError:
        raise
    except Exception as e:
        raise RandomSourceError(f"Random source failed: {e}") from e

    if not isinstance(value, (int, float)) or not 0.0 <= value < 1.0:
        raise RandomSourceError(f"Random source returned {value!r}, expected a float in [0, 1)")
    return float(value)


def normal(source: RandomSource, mean: float, std_dev: float) -> float:
    """Sample a normal distribution with the Box-Muller transform."""
    # 1 - [0, 1) lies in (0, 1], keeping log() finite
    u = 1.0 - draw(source)
    v = draw(source)

    z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
    return z * std_dev + mean


def shard_seeds(seed: Optional[int], shards: int) -> list:
    """
    Derive one seed per worker shard from a base seed.

    A ``None`` base seed gives ``None`` for every shard so each worker seeds
    itself from system entropy.
    """
    if seed is None:
        return [None] * shards

    parent = random.Random(seed)
    return [parent.getrandbits(64) for _ in range(shards)]
