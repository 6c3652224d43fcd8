"""
Public entry points for building contribution graphs.

Typical use::

    graph = create(events, GraphOptions(color="#216e39"))
    plan = graph.render(reference_date=date(2025, 6, 15), policy="rolling-365")
"""

from datetime import date
from typing import Iterable, Mapping, Optional, Union

from contribution_graph.aggregator import Event, aggregate
from contribution_graph.colors import ColorMapper, parse_hex_color
from contribution_graph.layout import DrawPlan, GraphOptions, GridLayoutEngine
from contribution_graph.policies import GraphPolicy, get_policy
from contribution_graph.styles import ensure_keyframes
from contribution_graph.window import plan


class ContributionGraph:
    """A set of events plus the options used to draw them."""

    def __init__(
        self,
        events: Iterable[Union[Event, Mapping]],
        options: Optional[GraphOptions] = None,
    ):
        """
        Initialize the graph.

        Args:
            events: Event instances or mappings with a timestamp and amount
            options: Geometry and color options. Defaults to GraphOptions().

        Raises:
            InvalidColor: If options.color is not a #RRGGBB literal
        """
        self.events = list(events or [])
        self.options = options or GraphOptions()
        parse_hex_color(self.options.color)

    def render(
        self,
        reference_date: Optional[Union[date, str]] = None,
        policy: Union[GraphPolicy, str] = "calendar-year",
        theme_is_dark: bool = False,
    ) -> DrawPlan:
        """
        Compute the draw plan for this graph.

        Args:
            reference_date: Date the window is anchored on. Defaults to today.
            policy: "calendar-year", "rolling-365" or a GraphPolicy
            theme_is_dark: Whether empty cells use the dark empty color

        Returns:
            DrawPlan ready for a renderer

        Raises:
            InvalidReferenceDate: If reference_date is not a valid date
            InvalidEventTimestamp: If any event timestamp is malformed
            UnknownPolicy: If the policy name is not recognized
        """
        ensure_keyframes()

        policy = get_policy(policy)
        if reference_date is None:
            reference_date = date.today()

        window = plan(policy, reference_date)
        totals = aggregate(self.events)
        mapper = ColorMapper(self.options.color, policy)
        return GridLayoutEngine(self.options).layout(window, totals, mapper, theme_is_dark)


def create(
    events: Iterable[Union[Event, Mapping]],
    options: Optional[GraphOptions] = None,
) -> ContributionGraph:
    """Create a contribution graph for a list of events."""
    return ContributionGraph(events, options)


def render(graph: ContributionGraph, **kwargs) -> DrawPlan:
    """Render a graph. Keyword arguments are passed to ContributionGraph.render."""
    return graph.render(**kwargs)
