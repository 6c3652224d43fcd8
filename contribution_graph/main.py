"""
contribution-graph: render a calendar heatmap from a JSON list of events.

Entry point for the command-line tool.
"""

import argparse
import json
import sys

from contribution_graph.config import (
    POLICY,
    configure_logging,
    default_options,
    validate_config,
)
from contribution_graph.graph import create
from contribution_graph.layout import GraphOptions
from contribution_graph.policies import POLICIES
from contribution_graph.svg_renderer import render_svg


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="contribution-graph",
        description="Render a calendar heatmap of daily activity as SVG.",
    )
    parser.add_argument("events", help="JSON file with a list of {occurred_at, amount} events")
    parser.add_argument("--policy", choices=list(POLICIES), default=None)
    parser.add_argument("--reference-date", help="YYYY-MM-DD, defaults to today")
    parser.add_argument("-o", "--output", help="Write SVG here instead of stdout")
    parser.add_argument("--dark", action="store_true", help="Use the dark empty-cell color")
    parser.add_argument("--no-animate", action="store_true", help="Disable the fade-in")
    parser.add_argument("--square-size", type=int)
    parser.add_argument("--square-gap", type=int)
    parser.add_argument("--padding", type=int)
    parser.add_argument("--color", help="Base color as #RRGGBB")
    return parser


def _options_from_args(args: argparse.Namespace) -> GraphOptions:
    """Overlay command-line options on the configured defaults."""
    defaults = default_options()
    return GraphOptions(
        square_size=args.square_size if args.square_size is not None else defaults.square_size,
        square_gap=args.square_gap if args.square_gap is not None else defaults.square_gap,
        padding=args.padding if args.padding is not None else defaults.padding,
        color=args.color or defaults.color,
    )


def _load_events(path: str) -> list:
    """Read a JSON list of events from a file."""
    with open(path, encoding="utf-8") as f:
        events = json.load(f)
    if not isinstance(events, list):
        raise ValueError(f"{path} must contain a JSON list of events")
    return events


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Validate configuration
    try:
        validate_config()
    except ValueError as e:
        print(f"Configuration Error:\n{e}", file=sys.stderr)
        return 1

    configure_logging()

    try:
        events = _load_events(args.events)
        graph = create(events, _options_from_args(args))
        plan = graph.render(
            reference_date=args.reference_date,
            policy=args.policy or POLICY,
            theme_is_dark=args.dark,
        )
    except (OSError, TypeError, ValueError) as e:
        # ContributionGraphError subclasses are ValueErrors as well
        print(f"Error: {e}", file=sys.stderr)
        return 1

    svg = render_svg(plan, animate=not args.no_animate)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
        print(
            f"Wrote {len(plan.cells)} days ({plan.window.start} to {plan.window.end}) "
            f"to {args.output}"
        )
    else:
        print(svg)

    return 0


if __name__ == "__main__":
    sys.exit(main())
