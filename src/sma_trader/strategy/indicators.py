"""Moving average helpers for the crossover strategy."""

from __future__ import annotations

from typing import Sequence

# Returned for an empty window; next_signal treats it as "not enough data".
INSUFFICIENT_DATA = 0.0


def simple_moving_average(values: Sequence[float]) -> float:
    if not values:
        return INSUFFICIENT_DATA
    return sum(values) / len(values)
