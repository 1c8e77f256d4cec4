"""Exceptions raised while laying out a production."""


class LayoutError(Exception):
    """Base class for layout failures. Every layout failure aborts the run."""


class MalformedBoundError(LayoutError, ValueError):
    """An axis bound whose low value lies past its high value."""


class DegeneratePlacementError(LayoutError):
    """A resolved placement leaves no usable room for the element."""
