"""
Tests for the FastAPI web application.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from contribution_graph.app import app


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def graph_request():
    """Sample graph request body."""
    return {
        "events": [
            {"occurred_at": "2025-03-05T10:00:00Z", "amount": 4},
            {"occurred_at": "2025-03-05T18:00:00Z", "amount": 0},
        ],
        "reference_date": "2025-06-15",
    }


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_returns_ok(self, client):
        """Health endpoint should return status ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestGraphEndpoint:
    """Tests for the /api/graph endpoint."""

    def test_returns_draw_plan(self, client, graph_request):
        """Graph endpoint should return cells, labels and canvas size."""
        response = client.post("/api/graph", json=graph_request)
        assert response.status_code == 200

        data = response.json()
        assert data["policy"] == "calendar-year"
        assert data["canvas_width"] == 875
        assert data["canvas_height"] == 175
        assert data["window"]["start"] == "2025-01-01"
        assert data["window"]["weeks"] == 53
        assert len(data["cells"]) == 365
        assert data["year_label"]["text"] == "2025"
        assert [label["text"] for label in data["day_labels"]] == ["Mon", "Wed", "Fri"]

    def test_active_cell(self, client, graph_request):
        """The aggregated day should carry its total, color and tooltip."""
        data = client.post("/api/graph", json=graph_request).json()
        cell = next(c for c in data["cells"] if c["date"] == "2025-03-05")

        assert cell["total"] == 4
        assert cell["fill_color"] == "#6565ff"
        assert cell["is_empty"] is False
        assert cell["tooltip"] == "4 activity on 2025-03-05"

    def test_rolling_policy_and_dark_theme(self, client):
        """Rolling policy should use its own empty colors."""
        response = client.post(
            "/api/graph",
            json={"policy": "rolling-365", "reference_date": "2025-06-15", "theme": "dark"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["year_label"] is None
        assert data["empty_color_light"] == "#ebedf0"
        assert {c["fill_color"] for c in data["cells"]} == {"#161b22"}

    def test_options_override_geometry(self, client, graph_request):
        """Options in the request should change the canvas."""
        graph_request["options"] = {"square_size": 10, "square_gap": 2, "padding": 10}
        data = client.post("/api/graph", json=graph_request).json()

        assert data["canvas_width"] == 53 * 12 + 20 + 30

    def test_invalid_color_returns_400(self, client, graph_request):
        graph_request["options"] = {"color": "red"}
        response = client.post("/api/graph", json=graph_request)

        assert response.status_code == 400
        assert "Invalid color" in response.json()["detail"]

    def test_invalid_reference_date_returns_400(self, client, graph_request):
        graph_request["reference_date"] = "2025-02-30"
        response = client.post("/api/graph", json=graph_request)
        assert response.status_code == 400

    def test_bad_timestamp_returns_400(self, client):
        response = client.post(
            "/api/graph",
            json={"events": [{"occurred_at": "soon", "amount": 1}], "reference_date": "2025-06-15"},
        )
        assert response.status_code == 400

    def test_unknown_policy_is_rejected(self, client):
        response = client.post("/api/graph", json={"policy": "weekly"})
        assert response.status_code == 422


class TestGraphSvgEndpoint:
    """Tests for the /api/graph.svg endpoint."""

    def test_returns_svg(self, client, graph_request):
        response = client.post("/api/graph.svg", json=graph_request)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith("<svg")
        assert "<title>4 activity on 2025-03-05</title>" in response.text

    def test_animation_can_be_disabled(self, client, graph_request):
        graph_request["animate"] = False
        response = client.post("/api/graph.svg", json=graph_request)

        assert "animation-delay" not in response.text


class TestNonFiniteAmounts:
    """Non-finite amounts are rejected before any layout happens."""

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_amount_returns_422(self, client, amount):
        body = (
            '{"events": [{"occurred_at": "2025-03-05", "amount": %s}], '
            '"reference_date": "2025-06-15"}' % amount
        )
        response = client.post(
            "/api/graph",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422


class TestLifespan:
    """Tests for application startup."""

    def test_logging_configured_on_startup(self):
        with patch("contribution_graph.app.configure_logging") as mock_configure:
            with TestClient(app) as test_client:
                assert test_client.get("/health").status_code == 200

        mock_configure.assert_called_once_with()

    def test_import_does_not_configure_logging(self):
        """Building a client without entering it runs no startup code."""
        with patch("contribution_graph.app.configure_logging") as mock_configure:
            TestClient(app).get("/health")

        mock_configure.assert_not_called()
