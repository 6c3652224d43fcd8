"""
Exceptions raised by the contribution graph core.
"""


class ContributionGraphError(Exception):
    """Base exception for contribution graph errors."""

    pass


class InvalidReferenceDate(ContributionGraphError, ValueError):
    """Raised when the reference date is not a valid calendar date."""

    pass


class InvalidColor(ContributionGraphError, ValueError):
    """Raised when a color is not a #RRGGBB hex literal."""

    pass


class InvalidEventTimestamp(ContributionGraphError, ValueError):
    """Raised when an event's timestamp cannot be parsed."""

    pass


class UnknownPolicy(ContributionGraphError, ValueError):
    """Raised when a window policy name is not recognized."""

    pass
