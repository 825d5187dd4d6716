"""Fixed-capacity rolling window of recent samples."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class RollingWindow(Generic[T]):
    """Ring buffer holding the most recent ``capacity`` samples.

    Storage is allocated once at construction. ``push`` is O(1) and
    ``snapshot`` is O(capacity); once full, every push evicts the oldest
    sample.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Window capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._buffer: list[Optional[T]] = [None] * capacity
        self._cursor = 0
        self._full = False

    def push(self, value: T) -> None:
        self._buffer[self._cursor] = value
        self._cursor = (self._cursor + 1) % self.capacity
        if self._cursor == 0:
            self._full = True

    def snapshot(self) -> list[T]:
        """Return held samples oldest first."""
        if not self._full:
            return list(self._buffer[: self._cursor])
        return list(self._buffer[self._cursor :]) + list(self._buffer[: self._cursor])

    def is_full(self) -> bool:
        return self._full

    def clear(self) -> None:
        self._buffer = [None] * self.capacity
        self._cursor = 0
        self._full = False

    def __len__(self) -> int:
        return self.capacity if self._full else self._cursor
