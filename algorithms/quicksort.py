"""
Quicksort for the Algorithm Demonstrations.

In-place quicksort with a first-element pivot and two converging cursors.
"""

from typing import List, Optional

from models.sort_range import SortRange
from analysis.events import EventLog, EventType, TraceEvent


def quick_sort(nums: List, event_log: Optional[EventLog] = None) -> List:
    """
    Sort a list ascending in place.

    Worst case O(n²) on already-sorted or reverse-sorted input,
    O(n log n) on average. Not stable.

    Args:
        nums: Mutable sequence of mutually comparable items
        event_log: Optional log receiving PARTITION and SWAP events

    Returns:
        The same list object, sorted
    """
    n = len(nums)
    if n == 0:
        return nums
    sort_range(nums, 0, n - 1, event_log)
    return nums


def sort_range(arr: List, low: int, high: int, event_log: Optional[EventLog] = None) -> None:
    """
    Sort the inclusive subrange [low, high] of arr.

    Pending ranges live on an explicit work stack instead of the call
    stack, so sorted input never runs into the recursion limit.
    """
    pending = [SortRange(low, high)]
    while pending:
        current = pending.pop()
        if not current.is_active:
            continue
        p_index = partition(arr, current.low, current.high, event_log)
        left, right = current.split(p_index)
        # Right pushed first so the left side is finished first
        pending.append(right)
        pending.append(left)


def partition(arr: List, low: int, high: int, event_log: Optional[EventLog] = None) -> int:
    """
    Partition arr[low..high] around the pivot arr[low].

    Algorithm:
    1. i walks right from low past elements <= pivot (stops after high)
    2. j walks left from high past elements > pivot (stops at low)
    3. If i < j: swap arr[i] and arr[j], repeat from step 1
    4. Swap the pivot into arr[j]

    Args:
        arr: Sequence being sorted
        low: First index of the range
        high: Last index of the range

    Returns:
        Partition index: everything left of it is <= pivot,
        everything right of it is > pivot
    """
    pivot = arr[low]
    i = low
    j = high

    while i < j:
        while i <= high and arr[i] <= pivot:
            i += 1
        while j >= low and arr[j] > pivot:
            j -= 1
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
            _record_swap(event_log, i, j)

    arr[low], arr[j] = arr[j], arr[low]

    if event_log is not None:
        event_log.add(TraceEvent(
            step=event_log.next_step(),
            event_type=EventType.PARTITION,
            low=low,
            high=high,
            index=j,
            message=f"pivot={pivot}"
        ))
    return j


def _record_swap(event_log: Optional[EventLog], i: int, j: int) -> None:
    if event_log is not None:
        event_log.add(TraceEvent(
            step=event_log.next_step(),
            event_type=EventType.SWAP,
            low=i,
            high=j
        ))
