"""
Day aggregator for the contribution graph.

Reduces raw event records into a per-calendar-day total.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Mapping, Union

from contribution_graph.errors import InvalidEventTimestamp

Timestamp = Union[datetime, date, str]


@dataclass(frozen=True)
class Event:
    """A single timestamped quantity to be drawn on the graph."""

    occurred_at: Timestamp
    amount: float = 1

    @classmethod
    def from_dict(cls, data: Mapping) -> "Event":
        """
        Build an event from a mapping.

        Accepts ``occurred_at`` or the ``created_at`` / ``createdAt`` aliases.
        """
        for key in ("occurred_at", "created_at", "createdAt"):
            if key in data:
                return cls(occurred_at=data[key], amount=data.get("amount", 1))
        raise InvalidEventTimestamp(f"Event has no timestamp: {dict(data)!r}")


def to_date_key(occurred_at: Timestamp) -> date:
    """
    Truncate a timestamp to its calendar date.

    Aware datetimes keep their own offset; nothing is converted to UTC.

    Raises:
        InvalidEventTimestamp: If the value cannot be parsed as a timestamp
    """
    if isinstance(occurred_at, datetime):
        return occurred_at.date()
    if isinstance(occurred_at, date):
        return occurred_at
    if isinstance(occurred_at, str):
        text = occurred_at.strip()
        # fromisoformat only accepts a trailing "Z" from 3.11 onwards
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as e:
            raise InvalidEventTimestamp(f"Invalid event timestamp: {occurred_at!r}") from e
    raise InvalidEventTimestamp(
        f"Unsupported timestamp type: {type(occurred_at).__name__}"
    )


def aggregate(events: Iterable[Union[Event, Mapping]]) -> dict[date, float]:
    """
    Sum event amounts per calendar day.

    Args:
        events: Event instances or mappings with a timestamp and ``amount``

    Returns:
        Mapping of calendar date -> total amount for that day

    Raises:
        InvalidEventTimestamp: If any event has a malformed timestamp.
            A single bad record fails the whole aggregation.
    """
    totals: dict[date, float] = {}
    for event in events:
        if not isinstance(event, Event):
            event = Event.from_dict(event)
        key = to_date_key(event.occurred_at)
        totals[key] = totals.get(key, 0) + event.amount
    return totals


def max_total(totals: Mapping[date, float]) -> float:
    """Return the largest daily total, floored at 1."""
    return max([*totals.values(), 1])
