"""
0/1 Knapsack solver for the Algorithm Demonstrations.

Bottom-up dynamic programming over a numpy table indexed by item prefix i
(0..n) and capacity w (0..W).
"""

import numpy as np
from typing import Optional, Sequence

from models.dp_table import DPTable
from models.knapsack_problem import KnapsackProblem, validate_knapsack_inputs
from analysis.events import EventLog, EventType, TraceEvent


def build_table(
    n: int,
    capacity: int,
    weight: Sequence[int],
    value: Sequence[int],
    event_log: Optional[EventLog] = None
) -> DPTable:
    """
    Fill the (n+1) x (W+1) knapsack table.

    Transition for i in 1..n, w in 1..W:
        dp[i][w] = max(value[i-1] + dp[i-1][w - weight[i-1]], dp[i-1][w])
                   if weight[i-1] <= w, else dp[i-1][w]
    Row 0 and column 0 stay zero.

    Time Complexity: O(n×W)

    Args:
        n: Number of leading items to consider
        capacity: Knapsack capacity W
        weight: Item weights
        value: Item values
        event_log: Optional log receiving a TABLE_ROW event per row

    Returns:
        DPTable wrapping the filled matrix

    Raises:
        AlgorithmInputError subclasses for invalid inputs
    """
    validate_knapsack_inputs(n, capacity, weight, value)

    table = np.zeros((n + 1, capacity + 1), dtype=_table_dtype(value, n))

    for i in range(1, n + 1):
        item_weight = int(weight[i - 1])
        item_value = int(value[i - 1])
        previous = table[i - 1]

        # Columns the item does not fit into copy the row above
        table[i] = previous
        start = max(item_weight, 1)
        if start <= capacity:
            take = item_value + previous[start - item_weight:capacity + 1 - item_weight]
            table[i, start:] = np.maximum(previous[start:], take)

        if event_log is not None:
            event_log.add(TraceEvent(
                step=event_log.next_step(),
                event_type=EventType.TABLE_ROW,
                low=i,
                high=capacity,
                message=f"weight={item_weight}, value={item_value}, best={int(table[i, capacity])}"
            ))

    return DPTable(table=table, weights=list(weight[:n]), values=list(value[:n]))


def knapsack(
    n: int,
    capacity: int,
    weight: Sequence[int],
    value: Sequence[int],
    event_log: Optional[EventLog] = None
) -> int:
    """
    Maximum total value of a subset of the first n items with total
    weight <= capacity, each item used at most once.

    Args:
        n: Number of leading items to consider
        capacity: Knapsack capacity W
        weight: Item weights (non-negative)
        value: Item values, paired with weight by index

    Returns:
        dp[n][W]
    """
    return build_table(n, capacity, weight, value, event_log).best_value


def knapsack_rolling(
    n: int,
    capacity: int,
    weight: Sequence[int],
    value: Sequence[int]
) -> int:
    """
    Same answer as knapsack() using a single row of W+1 cells.

    Capacities are updated from W down so each item is counted once.
    """
    validate_knapsack_inputs(n, capacity, weight, value)

    row = np.zeros(capacity + 1, dtype=_table_dtype(value, n))
    for i in range(n):
        item_weight = int(weight[i])
        item_value = int(value[i])
        for w in range(capacity, max(item_weight, 1) - 1, -1):
            candidate = item_value + row[w - item_weight]
            if candidate > row[w]:
                row[w] = candidate
    return int(row[capacity])


def solve(problem: KnapsackProblem, event_log: Optional[EventLog] = None) -> DPTable:
    """Build the table for a KnapsackProblem instance."""
    return build_table(problem.n, problem.capacity, problem.weights, problem.values, event_log)


def _table_dtype(value: Sequence[int], n: int):
    """
    int64 when no cell can leave its range, else object (Python ints).

    A cell never exceeds the sum of the absolute values of the items in play.
    """
    bound = sum(abs(int(v)) for v in value[:n])
    if bound > np.iinfo(np.int64).max:
        return object
    return np.int64
