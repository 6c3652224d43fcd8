"""
Tests for the public create/render entry points.
"""

from datetime import date
from unittest.mock import patch

import pytest

from contribution_graph.aggregator import Event
from contribution_graph.errors import (
    InvalidColor,
    InvalidEventTimestamp,
    InvalidReferenceDate,
    UnknownPolicy,
)
from contribution_graph.graph import ContributionGraph, create, render
from contribution_graph.layout import GraphOptions
from contribution_graph.styles import KEYFRAMES_ID, registered_styles


class TestCreate:
    """Tests for the create function."""

    def test_defaults(self):
        graph = create([])

        assert isinstance(graph, ContributionGraph)
        assert graph.options == GraphOptions(12, 3, 25, "#3e3eff")
        assert graph.events == []

    def test_invalid_color_fails_fast(self):
        with pytest.raises(InvalidColor):
            create([], GraphOptions(color="#3e3e"))

    def test_generator_input_is_materialized(self):
        graph = create(Event("2025-03-05", n) for n in range(3))
        assert len(graph.events) == 3


class TestRenderScenarios:
    """End-to-end scenarios."""

    def test_single_event_calendar_year(self):
        graph = create([{"occurred_at": "2025-03-05", "amount": 4}])
        plan = graph.render(reference_date=date(2025, 6, 15), policy="calendar-year")

        colored = {c.date: c.fill_color for c in plan.cells if not c.is_empty}
        assert colored == {date(2025, 3, 5): "#6565ff"}
        assert len(plan.cells) == 365
        assert sum(1 for c in plan.cells if c.is_empty) == 364

    def test_empty_rolling_window(self):
        plan = create([]).render(reference_date="2025-06-15", policy="rolling-365")

        assert plan.window.weeks == 53
        assert all(c.is_empty and c.fill_color == "#ebedf0" for c in plan.cells)
        assert 13 <= len(plan.month_labels) <= 14

    def test_all_zero_dataset_is_empty(self):
        events = [Event("2025-03-05", 0), Event("2025-03-06", 0)]
        plan = create(events).render(reference_date="2025-06-15")

        assert all(c.is_empty for c in plan.cells)

    def test_maximum_day_gets_full_intensity(self):
        events = [Event("2025-03-05", 2), Event("2025-03-06", 8)]
        plan = create(events).render(reference_date="2025-06-15", policy="rolling-365")
        by_date = {c.date: c for c in plan.cells}

        # rolling-365 tops out at the base color itself
        assert by_date[date(2025, 3, 6)].fill_color == "#3e3eff"
        assert by_date[date(2025, 3, 5)].fill_color != "#3e3eff"

    def test_dark_theme(self):
        plan = create([]).render(reference_date="2025-06-15", theme_is_dark=True)
        assert {c.fill_color for c in plan.cells} == {"#94949480"}

    def test_reference_date_defaults_to_today(self):
        with patch("contribution_graph.graph.date") as mock_date:
            mock_date.today.return_value = date(2023, 4, 1)
            plan = create([]).render()

        assert plan.window.start == date(2023, 1, 1)
        assert plan.year_label.text == "2023"

    def test_render_alias(self):
        graph = create([Event("2025-03-05", 1)])
        assert render(graph, reference_date="2025-06-15") == graph.render(
            reference_date="2025-06-15"
        )

    def test_render_registers_keyframes(self):
        create([]).render(reference_date="2025-06-15")
        assert KEYFRAMES_ID in registered_styles()


class TestRenderErrors:
    """Errors surface synchronously with no partial plan."""

    def test_invalid_reference_date(self):
        with pytest.raises(InvalidReferenceDate):
            create([]).render(reference_date="2025-02-30")

    def test_bad_event_timestamp(self):
        graph = create([{"occurred_at": "tomorrow-ish", "amount": 1}])
        with pytest.raises(InvalidEventTimestamp):
            graph.render(reference_date="2025-06-15")

    def test_unknown_policy(self):
        with pytest.raises(UnknownPolicy):
            create([]).render(reference_date="2025-06-15", policy="weekly")
