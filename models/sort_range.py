"""
Sort range model for the Algorithm Demonstrations.

Represents the inclusive [low, high] subrange a sort kernel is working on.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SortRange:
    """
    Inclusive bounds of the active subrange.

    Attributes:
        low: First index of the range
        high: Last index of the range

    Invariant:
        Ranges produced by split() are strictly smaller than their parent.
    """
    low: int
    high: int

    @property
    def size(self) -> int:
        """Number of elements in the range (0 for an empty range)."""
        return max(0, self.high - self.low + 1)

    @property
    def is_active(self) -> bool:
        """True when the range holds at least two elements."""
        return self.low < self.high

    @property
    def midpoint(self) -> int:
        """Split point used by merge sort."""
        return (self.low + self.high) // 2

    def split(self, pivot: int) -> Tuple["SortRange", "SortRange"]:
        """
        Ranges either side of a partition index.

        Args:
            pivot: Final position of the pivot element

        Returns:
            Tuple of (left range, right range), pivot excluded from both
        """
        return SortRange(self.low, pivot - 1), SortRange(pivot + 1, self.high)

    def __str__(self) -> str:
        return f"[{self.low}, {self.high}]"
