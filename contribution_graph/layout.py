"""
Grid layout engine for the contribution graph.

Places each day of a window on a (week column, weekday row) grid, computes
pixel geometry and positions the month, day and year labels.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import date, timedelta
from typing import Mapping, Optional

from contribution_graph.aggregator import max_total
from contribution_graph.colors import ColorMapper
from contribution_graph.window import Window

logger = logging.getLogger(__name__)

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

LABEL_FONT_SIZE = 10
YEAR_FONT_SIZE = 12


@dataclass(frozen=True)
class GraphOptions:
    """Geometry and color options. Each one scales independently."""

    square_size: int = 12
    square_gap: int = 3
    padding: int = 25
    color: str = "#3e3eff"


def format_total(total: float) -> str:
    """Render a total without a trailing ``.0`` for whole numbers."""
    if isinstance(total, float) and total.is_integer():
        return str(int(total))
    return str(total)


@dataclass(frozen=True)
class Cell:
    """One drawable day square."""

    date: date
    total: float
    column: int
    row: int
    x: float
    y: float
    size: int
    fill_color: str
    is_empty: bool

    @property
    def tooltip(self) -> str:
        return f"{format_total(self.total)} activity on {self.date.isoformat()}"


@dataclass(frozen=True)
class Label:
    """A text label drawn on the canvas."""

    text: str
    x: float
    y: float
    kind: str  # "year", "month" or "day"
    font_size: int = LABEL_FONT_SIZE
    bold: bool = False


@dataclass(frozen=True)
class DrawPlan:
    """Everything a renderer needs to draw one graph."""

    policy: str
    window: Window
    canvas_width: float
    canvas_height: float
    empty_color_light: str
    empty_color_dark: str
    cells: list[Cell] = field(default_factory=list)
    month_labels: list[Label] = field(default_factory=list)
    day_labels: list[Label] = field(default_factory=list)
    year_label: Optional[Label] = None
    theme_is_dark: bool = False

    @property
    def labels(self) -> list[Label]:
        """All labels in drawing order."""
        labels = [self.year_label] if self.year_label else []
        return labels + self.month_labels + self.day_labels

    def to_dict(self) -> dict:
        """JSON-ready representation with ISO dates."""
        data = asdict(self)
        data["window"]["start"] = self.window.start.isoformat()
        data["window"]["end"] = self.window.end.isoformat()
        for cell, cell_data in zip(self.cells, data["cells"]):
            cell_data["date"] = cell.date.isoformat()
            cell_data["tooltip"] = cell.tooltip
        return data


class GridLayoutEngine:
    """Computes cell and label geometry for a window."""

    def __init__(self, options: Optional[GraphOptions] = None):
        """
        Initialize the layout engine.

        Args:
            options: Geometry options. Defaults to GraphOptions().
        """
        self.options = options or GraphOptions()

    @property
    def step(self) -> int:
        """Distance between the origins of adjacent squares."""
        return self.options.square_size + self.options.square_gap

    def layout(
        self,
        window: Window,
        totals: Mapping[date, float],
        color_mapper: ColorMapper,
        theme_is_dark: bool = False,
    ) -> DrawPlan:
        """
        Lay out a window as a draw plan.

        Args:
            window: Planned window to draw
            totals: Per-day totals from the aggregator
            color_mapper: Mapper for the policy being drawn
            theme_is_dark: Whether empty cells take the dark empty color

        Returns:
            DrawPlan with cells, labels and canvas size
        """
        policy = color_mapper.policy
        padding_layout = policy.padding_layout
        padding = self.options.padding
        size = self.options.square_size

        left = padding + padding_layout.day_label_gutter
        top = padding * padding_layout.top_padding_multiplier + padding_layout.month_label_gutter
        peak = max_total(totals)

        cells = []
        day = window.start
        for week in range(window.weeks):
            for weekday in range(7):
                # Slots past the end stay allocated but are not emitted
                if day > window.end:
                    continue
                total = totals.get(day, 0)
                cells.append(
                    Cell(
                        date=day,
                        total=total,
                        column=week,
                        row=weekday,
                        x=left + week * self.step,
                        y=top + weekday * self.step,
                        size=size,
                        fill_color=color_mapper.cell_color(total, peak, theme_is_dark),
                        is_empty=total == 0,
                    )
                )
                day += timedelta(days=1)

        year_label = None
        if policy.label_set.year_label:
            year_label = Label(
                text=str(window.start.year),
                x=padding,
                y=padding - 5,
                kind="year",
                font_size=YEAR_FONT_SIZE,
                bold=True,
            )

        plan = DrawPlan(
            policy=policy.name,
            window=window,
            canvas_width=window.weeks * self.step + padding * 2 + padding_layout.day_label_gutter,
            canvas_height=(
                7 * self.step
                + padding * (padding_layout.top_padding_multiplier + 1)
                + padding_layout.month_label_gutter
            ),
            empty_color_light=policy.empty_colors.light,
            empty_color_dark=policy.empty_colors.dark,
            cells=cells,
            month_labels=self._month_labels(window, left, padding),
            day_labels=[
                Label(
                    text=DAY_NAMES[row],
                    x=5,
                    y=top + row * self.step + size / 2 + 3,
                    kind="day",
                )
                for row in policy.label_set.day_label_rows
            ],
            year_label=year_label,
            theme_is_dark=theme_is_dark,
        )
        logger.debug(
            "Laid out %d cells on a %sx%s canvas",
            len(cells),
            plan.canvas_width,
            plan.canvas_height,
        )
        return plan

    def _month_labels(self, window: Window, left: int, padding: int) -> list[Label]:
        """
        Label each week column whose first day falls in a new month.

        Months are sampled once per week, so a label lands on the first
        column whose starting day is in that month, not on the 1st itself.
        """
        labels = []
        current_month = None
        for week in range(window.weeks):
            sampled = window.start + timedelta(weeks=week)
            if sampled.month != current_month:
                labels.append(
                    Label(
                        text=MONTH_NAMES[sampled.month - 1],
                        x=left + week * self.step,
                        y=padding + 10,
                        kind="month",
                    )
                )
                current_month = sampled.month
        return labels
