"""
Color mapping for the contribution graph.

Days are shaded by moving the base color's RGB channels linearly toward
black (negative percent) or white (positive percent).
"""

import math
import re
from dataclasses import dataclass

from contribution_graph.errors import InvalidColor
from contribution_graph.policies import GraphPolicy

HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def parse_hex_color(color: str) -> tuple[int, int, int]:
    """
    Parse a ``#RRGGBB`` literal into an (r, g, b) tuple.

    Raises:
        InvalidColor: If the value is not a 6-hex-digit color literal
    """
    if not isinstance(color, str) or not HEX_COLOR_RE.match(color):
        raise InvalidColor(f"Invalid color {color!r}. Expected #RRGGBB.")
    value = int(color[1:], 16)
    return value >> 16, (value >> 8) & 0xFF, value & 0xFF


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def shade_color(color: str, percent: float) -> str:
    """
    Darken or lighten a color.

    Args:
        color: Base color as ``#RRGGBB``
        percent: -1..1; negative moves toward black, positive toward white

    Returns:
        The shaded color as a lowercase ``#rrggbb`` string
    """
    target = 0 if percent < 0 else 255
    p = abs(percent)
    channels = [
        _round_half_up((target - channel) * p + channel)
        for channel in parse_hex_color(color)
    ]
    return "#" + "".join(f"{channel:02x}" for channel in channels)


@dataclass(frozen=True)
class ColorSpec:
    """Base color plus the empty-cell colors for both themes."""

    base_color: str
    empty_color_light: str
    empty_color_dark: str


class ColorMapper:
    """Maps daily totals to fill colors for one policy."""

    def __init__(self, base_color: str, policy: GraphPolicy):
        """
        Initialize the mapper.

        Args:
            base_color: ``#RRGGBB`` color that full-intensity days are shaded from
            policy: Policy supplying the shading range and empty colors

        Raises:
            InvalidColor: If base_color is not a valid hex literal
        """
        parse_hex_color(base_color)
        self.base_color = base_color
        self.policy = policy

    @property
    def spec(self) -> ColorSpec:
        return ColorSpec(
            base_color=self.base_color,
            empty_color_light=self.policy.empty_colors.light,
            empty_color_dark=self.policy.empty_colors.dark,
        )

    def empty_color(self, theme_is_dark: bool) -> str:
        """Color for days with a zero total."""
        if theme_is_dark:
            return self.policy.empty_colors.dark
        return self.policy.empty_colors.light

    def intensity(self, total: float, max_total: float) -> float:
        """A day's total relative to the window maximum, clamped to 0..1."""
        return min(max(total / max_total, 0.0), 1.0)

    def fill(self, total: float, max_total: float) -> str:
        """Shaded base color for a day's total."""
        percent = self.policy.color_range.percent(self.intensity(total, max_total))
        return shade_color(self.base_color, percent)

    def cell_color(self, total: float, max_total: float, theme_is_dark: bool = False) -> str:
        """Fill for a cell: the empty color for zero totals, otherwise a shade."""
        if total == 0:
            return self.empty_color(theme_is_dark)
        return self.fill(total, max_total)
