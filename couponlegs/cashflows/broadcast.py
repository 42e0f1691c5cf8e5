"""Per-period lookup of leg parameters."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")
D = TypeVar("D")


def broadcast(values: Sequence[T], i: int, default: D = None) -> T | D:
    """
    Returns the value of a leg parameter for period `i`.

    A parameter can be given as one flat value, as one value per period, or as
    a vector shorter than the schedule, in which case the remaining periods
    keep its last value

        values = (100, 90, 80)   ->   100, 90, 80, 80, 80 ...

    An empty vector yields `default` for every period.
    """
    if len(values) == 0:
        return default
    if i < len(values):
        return values[i]
    return values[-1]


__all__ = ["broadcast"]
