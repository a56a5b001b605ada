"""
Event Model for the Algorithm Demonstrations.

Defines trace events recorded by the kernels when an EventLog is supplied.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventType(Enum):
    """Types of trace events."""
    PARTITION = "partition"
    SWAP = "swap"
    MERGE = "merge"
    TABLE_ROW = "table_row"


@dataclass
class TraceEvent:
    """
    Represents a single kernel step.

    Attributes:
        step: Sequence number of the event within its log
        event_type: Type of event
        low: Lower bound of the range involved (or row index)
        high: Upper bound of the range involved
        index: Partition index or swapped position (if applicable)
        message: Human-readable detail
    """
    step: int
    event_type: EventType
    low: int
    high: Optional[int] = None
    index: Optional[int] = None
    message: str = ""

    def __str__(self) -> str:
        """Format event for logging."""
        base = f"Step {self.step}:"

        if self.event_type == EventType.PARTITION:
            return f"{base} partition [{self.low}, {self.high}] -> pivot at {self.index} ({self.message})"
        elif self.event_type == EventType.SWAP:
            return f"{base} swap {self.low} <-> {self.high}"
        elif self.event_type == EventType.MERGE:
            return f"{base} merge [{self.low}, {self.index}] + [{self.index + 1}, {self.high}] ({self.message})"
        elif self.event_type == EventType.TABLE_ROW:
            return f"{base} row {self.low} filled ({self.message})"
        else:
            return f"{base} {self.event_type.value}: {self.message}"


@dataclass
class EventLog:
    """Collection of trace events."""
    events: list = None

    def __post_init__(self):
        if self.events is None:
            self.events = []

    def add(self, event: TraceEvent) -> None:
        """Add an event to the log."""
        self.events.append(event)

    def next_step(self) -> int:
        """Sequence number for the next event."""
        return len(self.events)

    def get_events_by_type(self, event_type: EventType) -> list:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]

    def count(self, event_type: EventType) -> int:
        """Number of events of a specific type."""
        return len(self.get_events_by_type(event_type))

    def display(self) -> str:
        """Format all events for display."""
        return "\n".join(str(event) for event in self.events)
