"""Rounding helpers shared by the aggregators."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def to_pct(count: int, total: int) -> int:
    """Integer percentage of count over total, 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(count / total * 100)


def to_avg(value: float, total: int, digits: int = 2) -> float:
    """Average rounded to `digits` decimals, 0.0 when total is 0."""
    if total <= 0:
        return 0.0
    return round(value / total, digits)
