"""
SVG renderer for contribution graph draw plans.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from contribution_graph.layout import Cell, DrawPlan
from contribution_graph.styles import ensure_keyframes, registered_styles

ANIMATION_STEP_SECONDS = 0.004


def _format_number(value) -> str:
    """Drop a trailing ``.0`` so coordinates read like the input options."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def animation_delay(cell: Cell) -> str:
    """Staggered fade-in delay for a cell, in seconds."""
    return f"{(cell.column * 7 + cell.row) * ANIMATION_STEP_SECONDS:.3f}"


env = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "templates"),
    autoescape=select_autoescape(["svg", "svg.j2"], default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["num"] = _format_number


def render_svg(plan: DrawPlan, animate: bool = True) -> str:
    """
    Draw a plan as a standalone SVG document.

    Args:
        plan: Draw plan from ContributionGraph.render()
        animate: Whether cells fade in with a staggered delay

    Returns:
        SVG markup
    """
    ensure_keyframes()
    template = env.get_template("graph.svg.j2")
    return template.render(
        plan=plan,
        styles=registered_styles() if animate else {},
        animate=animate,
        animation_delay=animation_delay,
    )
