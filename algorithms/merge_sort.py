"""
Merge Sort for the Algorithm Demonstrations.

Top-down recursive merge sort over an inclusive [low, high] range. Each
merge builds its own temporary buffer and copies it back into the caller's
storage.
"""

from typing import Any, Callable, List, Optional

from models.sort_range import SortRange
from analysis.events import EventLog, EventType, TraceEvent


def merge_sort(
    arr: List,
    low: int = 0,
    high: Optional[int] = None,
    key: Optional[Callable[[Any], Any]] = None,
    event_log: Optional[EventLog] = None
) -> List:
    """
    Sort arr[low..high] ascending, writing the result back into arr.

    Stable: equal elements keep their input order. O(n log n) time,
    O(n) auxiliary space per merge.

    Args:
        arr: Mutable sequence to sort
        low: First index of the range (default 0)
        high: Last index of the range (default len(arr) - 1)
        key: One-argument function extracting a comparison key,
             same semantics as sorted(key=...)
        event_log: Optional log receiving MERGE events

    Returns:
        arr
    """
    if high is None:
        high = len(arr) - 1
    _sort(arr, SortRange(low, high), key, event_log)
    return arr


def _sort(arr: List, bounds: SortRange, key, event_log: Optional[EventLog]) -> None:
    if not bounds.is_active:
        return
    mid = bounds.midpoint
    _sort(arr, SortRange(bounds.low, mid), key, event_log)
    _sort(arr, SortRange(mid + 1, bounds.high), key, event_log)
    merge(arr, bounds.low, mid, bounds.high, key, event_log)


def merge(
    arr: List,
    low: int,
    mid: int,
    high: int,
    key: Optional[Callable[[Any], Any]] = None,
    event_log: Optional[EventLog] = None
) -> None:
    """
    Merge the sorted runs arr[low..mid] and arr[mid+1..high].

    The right head is taken only when strictly smaller than the left
    head, so ties resolve to the left run.

    Args:
        arr: Sequence holding both runs
        low: Start of the left run
        mid: End of the left run
        high: End of the right run
        key: Optional comparison key function
        event_log: Optional log receiving a MERGE event
    """
    left = low
    right = mid + 1
    temp = []

    while left <= mid and right <= high:
        left_key = key(arr[left]) if key is not None else arr[left]
        right_key = key(arr[right]) if key is not None else arr[right]
        if right_key < left_key:
            temp.append(arr[right])
            right += 1
        else:
            temp.append(arr[left])
            left += 1

    # Append remaining tail
    temp.extend(arr[left:mid + 1])
    temp.extend(arr[right:high + 1])

    arr[low:high + 1] = temp

    if event_log is not None:
        event_log.add(TraceEvent(
            step=event_log.next_step(),
            event_type=EventType.MERGE,
            low=low,
            high=high,
            index=mid,
            message=f"{len(temp)} elements"
        ))
