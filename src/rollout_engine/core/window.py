"""Fixed-capacity reward window with an incrementally maintained sum."""

from __future__ import annotations

import numpy as np


class RewardWindow:
    """Ring buffer of the most recent discounted rewards.

    Pushing onto a full window evicts the oldest value. ``total`` is updated on
    every insert/evict and always equals the sum of the held values.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("window capacity must be positive.")
        self.capacity = int(capacity)
        self.total = 0.0
        self._buffer = np.zeros(self.capacity, dtype=np.float64)
        self._head = 0  # slot the next push writes to
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def is_full(self) -> bool:
        return self._size == self.capacity

    @property
    def last(self) -> float:
        """Most recently pushed value."""
        if self._size == 0:
            raise IndexError("last on an empty RewardWindow.")
        return float(self._buffer[(self._head - 1) % self.capacity])

    def mean(self) -> float:
        """Window average over the full capacity."""
        return self.total / self.capacity

    def push(self, value: float) -> None:
        value = float(value)
        if self.is_full:
            self.total -= float(self._buffer[self._head])
        else:
            self._size += 1
        self._buffer[self._head] = value
        self.total += value
        self._head = (self._head + 1) % self.capacity

    def values(self) -> tuple[float, ...]:
        """Held values, oldest first."""
        start = (self._head - self._size) % self.capacity
        return tuple(
            float(self._buffer[(start + offset) % self.capacity])
            for offset in range(self._size)
        )

    def has_converged(self, threshold: float) -> bool:
        """Whether the latest value sits within ``threshold`` of the mean."""
        if not self.is_full:
            return False
        return abs(self.last - self.mean()) < threshold
