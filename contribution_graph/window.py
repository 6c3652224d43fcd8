"""
Window planner for the contribution graph.

Computes the date range to display and the shape of its week grid.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from contribution_graph.errors import InvalidReferenceDate
from contribution_graph.policies import GraphPolicy, get_policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Window:
    """The displayed date range and its grid size."""

    start: date
    end: date
    total_days: int
    weeks: int
    start_weekday: int  # 0=Sun

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def parse_reference_date(value: Union[date, str]) -> date:
    """
    Coerce a reference date to a ``date``.

    Raises:
        InvalidReferenceDate: If the value is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidReferenceDate(f"Invalid reference date: {value!r}") from e
    raise InvalidReferenceDate(
        f"Reference date must be a date or YYYY-MM-DD string, "
        f"got {type(value).__name__}"
    )


def plan(policy: Union[GraphPolicy, str], reference_date: Union[date, str]) -> Window:
    """
    Plan the window for a policy around a reference date.

    Args:
        policy: A GraphPolicy or its name ("calendar-year" or "rolling-365")
        reference_date: The date the window is anchored on

    Returns:
        Window with start, end, day count and number of week columns

    Raises:
        InvalidReferenceDate: If reference_date is not a valid date
        UnknownPolicy: If the policy name is not recognized
    """
    policy = get_policy(policy)
    reference = parse_reference_date(reference_date)
    start, end, total_days = policy.window_fn(reference)

    window = Window(
        start=start,
        end=end,
        total_days=total_days,
        weeks=math.ceil(total_days / 7),
        start_weekday=(start.weekday() + 1) % 7,
    )
    logger.debug(
        "Planned %s window %s..%s (%d days, %d weeks)",
        policy.name,
        window.start,
        window.end,
        window.total_days,
        window.weeks,
    )
    return window
