"""
FastAPI web application for contribution-graph.

Provides REST endpoints that turn a list of events into a draw plan or SVG.
"""

from contextlib import asynccontextmanager
from dataclasses import replace
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from contribution_graph.config import configure_logging, default_options
from contribution_graph.errors import ContributionGraphError
from contribution_graph.graph import create
from contribution_graph.layout import DrawPlan
from contribution_graph.svg_renderer import render_svg


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging when the server starts."""
    configure_logging()
    yield


app = FastAPI(
    title="contribution-graph",
    description="Calendar heatmap layout and rendering",
    version="0.1.0",
    lifespan=lifespan,
)


class EventIn(BaseModel):
    """A single event in a graph request."""

    occurred_at: str = Field(..., description="ISO-8601 date or datetime")
    amount: float = Field(
        1, allow_inf_nan=False, description="Quantity recorded for the event"
    )


class OptionsIn(BaseModel):
    """Optional geometry and color overrides."""

    square_size: int | None = Field(None, ge=1, le=100)
    square_gap: int | None = Field(None, ge=0, le=100)
    padding: int | None = Field(None, ge=0, le=500)
    color: str | None = Field(None, description="Base color as #RRGGBB")


class GraphRequest(BaseModel):
    """Request model for rendering a graph."""

    events: list[EventIn] = Field(default_factory=list)
    options: OptionsIn | None = None
    policy: Literal["calendar-year", "rolling-365"] = "calendar-year"
    reference_date: str | None = Field(None, description="YYYY-MM-DD, defaults to today")
    theme: Literal["light", "dark"] = "light"
    animate: bool = True


def _build_plan(request: GraphRequest) -> DrawPlan:
    """
    Build a draw plan for a request.

    Raises:
        HTTPException: 400 when the request holds an invalid date, color or timestamp
    """
    options = default_options()
    if request.options:
        overrides = request.options.model_dump(exclude_none=True)
        options = replace(options, **overrides)

    try:
        graph = create(
            [event.model_dump() for event in request.events],
            options,
        )
        return graph.render(
            reference_date=request.reference_date,
            policy=request.policy,
            theme_is_dark=request.theme == "dark",
        )
    except ContributionGraphError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/graph")
def get_graph(request: GraphRequest):
    """
    Compute a draw plan.

    Returns:
        JSON with cells, labels and canvas size
    """
    return _build_plan(request).to_dict()


@app.post("/api/graph.svg")
def get_graph_svg(request: GraphRequest):
    """
    Render a graph as SVG.

    Returns:
        image/svg+xml document
    """
    plan = _build_plan(request)
    return Response(
        content=render_svg(plan, animate=request.animate),
        media_type="image/svg+xml",
    )
