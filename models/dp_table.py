"""
DP table model for the Algorithm Demonstrations.

Wraps the (n+1) x (W+1) knapsack table built by algorithms.knapsack.
"""

from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass
class DPTable:
    """
    Filled 0/1 knapsack table.

    Cell (i, w) holds the best value reachable with the first i items
    under capacity w. Row 0 and column 0 are zero.

    Attributes:
        table: numpy matrix of shape (n+1, W+1)
        weights: Item weights the table was built from
        values: Item values the table was built from
    """
    table: np.ndarray
    weights: List[int]
    values: List[int]

    @property
    def rows(self) -> int:
        """Number of item-prefix rows (n+1)."""
        return self.table.shape[0]

    @property
    def cols(self) -> int:
        """Number of capacity columns (W+1)."""
        return self.table.shape[1]

    @property
    def best_value(self) -> int:
        """Answer cell dp[n][W]."""
        return int(self.table[-1, -1])

    def value_at(self, i: int, w: int) -> int:
        """Best value using the first i items under capacity w."""
        return int(self.table[i, w])

    def selected_items(self) -> List[int]:
        """
        Backtrack one optimal subset from the filled table.

        Walks rows bottom-up: item i-1 was taken whenever dp[i][w]
        differs from dp[i-1][w].

        Returns:
            Ascending indices of the chosen items
        """
        chosen = []
        w = self.cols - 1
        for i in range(self.rows - 1, 0, -1):
            if self.table[i, w] != self.table[i - 1, w]:
                chosen.append(i - 1)
                w -= self.weights[i - 1]
        chosen.reverse()
        return chosen

    def display(self) -> str:
        """
        Generate readable string representation of the table.

        Returns:
            Formatted grid, one row per item prefix
        """
        width = max(3, len(str(int(self.table.max()))) + 1)
        output = []
        output.append("\nDP Table (rows: items, cols: capacity):")
        output.append("      " + "".join([f"{w:>{width}}" for w in range(self.cols)]))
        for i in range(self.rows):
            row = f"  i={i:<2}"
            row += "".join([f"{int(self.table[i, w]):>{width}}" for w in range(self.cols)])
            output.append(row)
        return "\n".join(output)
