"""
Configuration management for contribution-graph.

Loads rendering defaults from environment variables.
"""

import logging
import os

from dotenv import load_dotenv

from contribution_graph.colors import HEX_COLOR_RE
from contribution_graph.layout import GraphOptions
from contribution_graph.policies import POLICIES

# Load .env file from project root
load_dotenv()

SQUARE_SIZE = os.getenv("CONTRIBUTION_GRAPH_SQUARE_SIZE", "12")
SQUARE_GAP = os.getenv("CONTRIBUTION_GRAPH_SQUARE_GAP", "3")
PADDING = os.getenv("CONTRIBUTION_GRAPH_PADDING", "25")
COLOR = os.getenv("CONTRIBUTION_GRAPH_COLOR", "#3e3eff")
POLICY = os.getenv("CONTRIBUTION_GRAPH_POLICY", "calendar-year")
LOG_LEVEL = os.getenv("CONTRIBUTION_GRAPH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def validate_config():
    """Validate that every configured value is usable."""
    invalid = []

    for name, value in (
        ("CONTRIBUTION_GRAPH_SQUARE_SIZE", SQUARE_SIZE),
        ("CONTRIBUTION_GRAPH_SQUARE_GAP", SQUARE_GAP),
        ("CONTRIBUTION_GRAPH_PADDING", PADDING),
    ):
        if not value.isdigit():
            invalid.append(name)

    if not HEX_COLOR_RE.match(COLOR):
        invalid.append("CONTRIBUTION_GRAPH_COLOR")

    if POLICY not in POLICIES:
        invalid.append("CONTRIBUTION_GRAPH_POLICY")

    if not isinstance(logging.getLevelName(LOG_LEVEL.upper()), int):
        invalid.append("CONTRIBUTION_GRAPH_LOG_LEVEL")

    if invalid:
        raise ValueError(
            f"Invalid configuration: {', '.join(invalid)}\n"
            "Sizes must be non-negative integers, the color a #RRGGBB literal "
            f"and the policy one of: {', '.join(POLICIES)}."
        )


def default_options() -> GraphOptions:
    """Build graph options from the configured defaults."""
    return GraphOptions(
        square_size=int(SQUARE_SIZE),
        square_gap=int(SQUARE_GAP),
        padding=int(PADDING),
        color=COLOR,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the CLI and web entry points."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
