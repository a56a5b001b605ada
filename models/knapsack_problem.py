"""
Knapsack problem model for the Algorithm Demonstrations.

Holds one 0/1 knapsack instance: a capacity and parallel weight/value lists.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from algorithms.errors import (
    InvalidCapacityError,
    InvalidValueError,
    InvalidWeightError,
    LengthMismatchError,
)


def validate_knapsack_inputs(
    n: int,
    capacity: int,
    weight: Sequence[int],
    value: Sequence[int]
) -> None:
    """
    Validate a knapsack instance before the table is built.

    Args:
        n: Number of leading items to consider
        capacity: Knapsack capacity W
        weight: Item weights
        value: Item values (paired with weight by index)

    Raises:
        InvalidCapacityError: capacity is negative or not an integer
        LengthMismatchError: weight/value lengths differ, or n is not an
            integer in [0, len(weight)]
        InvalidWeightError: some weight is negative or not an integer
        InvalidValueError: some value is not an integer
    """
    if not _is_integer(capacity):
        raise InvalidCapacityError(f"Capacity must be an integer, got {capacity!r}")
    if capacity < 0:
        raise InvalidCapacityError(f"Capacity cannot be negative (capacity: {capacity})")

    if len(weight) != len(value):
        raise LengthMismatchError(
            f"Weights and values must pair up (weights: {len(weight)}, values: {len(value)})"
        )
    if not _is_integer(n):
        raise LengthMismatchError(f"Item count must be an integer, got {n!r}")
    if n < 0 or n > len(weight):
        raise LengthMismatchError(f"Item count {n} outside [0, {len(weight)}]")

    for i, w in enumerate(weight):
        if not _is_integer(w):
            raise InvalidWeightError(f"Item {i}: weight must be an integer, got {w!r}")
        if w < 0:
            raise InvalidWeightError(f"Item {i}: weight cannot be negative (weight: {w})")

    for i, v in enumerate(value):
        if not _is_integer(v):
            raise InvalidValueError(f"Item {i}: value must be an integer, got {v!r}")


def _is_integer(x) -> bool:
    """True for Python and numpy integers, excluding bool."""
    return not isinstance(x, (bool, np.bool_)) and isinstance(x, (int, np.integer))


@dataclass
class KnapsackProblem:
    """
    A 0/1 knapsack instance.

    Attributes:
        capacity: Maximum total weight W
        weights: Weight of each item
        values: Value of each item
        n: Number of leading items in play (defaults to all of them)
    """
    capacity: int
    weights: List[int]
    values: List[int]
    n: Optional[int] = None

    def __post_init__(self):
        """Default n to the item count and validate the instance."""
        if self.n is None:
            self.n = len(self.weights)
        validate_knapsack_inputs(self.n, self.capacity, self.weights, self.values)

    def items(self) -> List[tuple]:
        """(index, weight, value) for each item in play."""
        return [(i, self.weights[i], self.values[i]) for i in range(self.n)]


DEMO_KNAPSACK = KnapsackProblem(
    capacity=5,
    weights=[2, 1, 3, 2],
    values=[12, 10, 20, 15],
    n=4,
)
