"""Deterministic randomness shared by every process rendering the panel.

All viewers evaluating the same inputs at the same wall-clock minute must
arrive at the same "random" choice, so nothing here keeps hidden state.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence, TypeVar

T = TypeVar("T")

LCG_A = 1664525
LCG_C = 1013904223
LCG_M = 2**32


def _lcg_step(seed: int) -> int:
    return (LCG_A * seed + LCG_C) % LCG_M


def seeded_random(seed: int) -> float:
    """Return a float in [0, 1) that depends only on ``seed``."""
    return _lcg_step(seed) / LCG_M


def seeded_shuffle(items: Sequence[T], seed: int) -> list[T]:
    """Fisher-Yates shuffle driven by successive LCG steps from ``seed``.

    Returns a new list; ``items`` is left untouched.
    """
    result = list(items)
    current = seed
    for i in range(len(result) - 1, 0, -1):
        current = _lcg_step(current)
        j = int((current / LCG_M) * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def hash_string(text: str) -> int:
    """Polynomial rolling hash (``h*31 + c``) over UTF-16 code units.

    The accumulator wraps to a signed 32-bit integer after every step and the
    absolute value is returned.
    Lone surrogates are hashed as the code units they are.
    """
    h = 0
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + unit)
    return abs(h)


def short_hash(text: str) -> str:
    """First 8 hex digits of :func:`hash_string`."""
    return format(hash_string(text), "x")[:8]


def time_seed(now: datetime) -> int:
    """YYYYMMDD as an integer."""
    return now.year * 10000 + now.month * 100 + now.day


def hour_seed(now: datetime) -> int:
    """YYYYMMDDHH as an integer."""
    return time_seed(now) * 100 + now.hour
