"""Running discount multiplier and discounted-return accumulator."""

from __future__ import annotations


class DiscountAccumulator:
    """Tracks ``gamma`` and the discounted return of one rollout."""

    def __init__(self, discount: float) -> None:
        discount = float(discount)
        if not (0.0 <= discount <= 1.0):
            raise ValueError(f"discount must be in [0, 1], got {discount}.")
        self.discount = discount
        self.gamma = 1.0
        self.total = 0.0

    def add(self, reward: float) -> float:
        """Add ``gamma * reward`` to the return and hand it back."""
        discounted = self.gamma * float(reward)
        self.total += discounted
        return discounted

    def advance(self) -> None:
        self.gamma *= self.discount
