"""
Window policies for the contribution graph.

A policy bundles everything that differs between the calendar-year and the
rolling-365 graphs: how the date window is chosen, the shading range, the
empty-cell colors, which labels are drawn and how the canvas is padded.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Union

from contribution_graph.errors import UnknownPolicy


@dataclass(frozen=True)
class ColorRange:
    """Linear map from intensity (0..1) to a signed shading percent."""

    offset: float
    scale: float

    def percent(self, intensity: float) -> float:
        return self.offset + intensity * self.scale


@dataclass(frozen=True)
class EmptyColors:
    """Fill colors for days with no activity."""

    light: str
    dark: str


@dataclass(frozen=True)
class LabelSet:
    """Which labels a policy draws."""

    year_label: bool
    day_label_rows: tuple[int, ...]  # 0=Sun


@dataclass(frozen=True)
class PaddingLayout:
    """
    Canvas reservations around the grid.

    The grid's top edge sits at ``padding * top_padding_multiplier +
    month_label_gutter``; the canvas height adds one more ``padding`` below.
    """

    day_label_gutter: int
    month_label_gutter: int
    top_padding_multiplier: int


@dataclass(frozen=True)
class GraphPolicy:
    """A named window policy."""

    name: str
    window_fn: Callable[[date], tuple[date, date, int]]
    color_range: ColorRange
    empty_colors: EmptyColors
    label_set: LabelSet
    padding_layout: PaddingLayout


def calendar_year_bounds(reference_date: date) -> tuple[date, date, int]:
    """Jan 1 to Dec 31 of the reference year, counted inclusively."""
    start = date(reference_date.year, 1, 1)
    end = date(reference_date.year, 12, 31)
    return start, end, (end - start).days + 1


def one_year_before(day: date) -> date:
    """Same month and day one year earlier; Feb 29 becomes Feb 28."""
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        return day.replace(year=day.year - 1, day=28)


def rolling_365_bounds(reference_date: date) -> tuple[date, date, int]:
    """
    One calendar year back from the reference date.

    The day count excludes the start day even though the end day is drawn.
    """
    start = one_year_before(reference_date)
    return start, reference_date, (reference_date - start).days


CALENDAR_YEAR = GraphPolicy(
    name="calendar-year",
    window_fn=calendar_year_bounds,
    color_range=ColorRange(offset=-0.2, scale=0.4),
    empty_colors=EmptyColors(light="#f0f0f0", dark="#94949480"),
    label_set=LabelSet(year_label=True, day_label_rows=(1, 3, 5)),
    padding_layout=PaddingLayout(
        day_label_gutter=30,
        month_label_gutter=20,
        top_padding_multiplier=1,
    ),
)

ROLLING_365 = GraphPolicy(
    name="rolling-365",
    window_fn=rolling_365_bounds,
    color_range=ColorRange(offset=-0.6, scale=0.6),
    empty_colors=EmptyColors(light="#ebedf0", dark="#161b22"),
    label_set=LabelSet(year_label=False, day_label_rows=()),
    padding_layout=PaddingLayout(
        day_label_gutter=0,
        month_label_gutter=0,
        top_padding_multiplier=2,
    ),
)

POLICIES = {policy.name: policy for policy in (CALENDAR_YEAR, ROLLING_365)}


def get_policy(policy: Union[GraphPolicy, str]) -> GraphPolicy:
    """
    Resolve a policy by name.

    Raises:
        UnknownPolicy: If the name is not a known policy
    """
    if isinstance(policy, GraphPolicy):
        return policy
    try:
        return POLICIES[policy]
    except (KeyError, TypeError):
        raise UnknownPolicy(
            f"Unknown policy {policy!r}. Expected one of: {', '.join(POLICIES)}"
        ) from None
