"""Small numeric helpers shared by the visualiser."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

_rng = random.Random()


def random_between(a: int, b: int) -> int:
    """Return a uniformly distributed integer in the closed range [a, b]."""
    if a > b:
        raise ValueError(f"empty range: {a} > {b}")
    return _rng.randint(a, b)


def int_pow(base: int, power: int) -> int:
    """Raise ``base`` to a non-negative integer ``power``."""
    if power < 0:
        raise ValueError("power must be non-negative")
    result = 1
    for _ in range(power):
        result *= base
    return result


def map_range(
    x: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Linearly map ``x`` from one range onto another, clamping outside values."""
    if x > in_max:
        return out_max
    if x < in_min:
        return out_min
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def multiplied_pairs(n: int) -> list[tuple[int, int]]:
    """Return the factor pairs ``(i, n // i)`` of ``n`` with ``i <= sqrt(n)``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return [(i, n // i) for i in range(1, math.isqrt(n) + 1) if n % i == 0]


def downsample(source: Sequence[int], factor: int) -> list[int]:
    """Average consecutive blocks of ``source`` to shrink it by ``factor``.

    The last block absorbs whatever elements remain.
    """
    if factor <= 0:
        raise ValueError("factor must be positive")
    src_len = len(source)
    if factor >= src_len:
        return list(source)

    dest_len = src_len // factor
    if factor > dest_len:
        dest_len, factor = factor, src_len // factor

    result = [
        sum(source[j * factor:(j + 1) * factor]) // factor
        for j in range(dest_len - 1)
    ]
    tail = source[(dest_len - 1) * factor:]
    result.append(sum(tail) // len(tail))
    return result