"""Core layout algebra: bounds, stage records and errors."""

from .bounds import AxisBound, Bound, Lenient, Strict, extract, resolve_axis, resolve_direction
from .errors import DegeneratePlacementError, LayoutError, MalformedBoundError
from .stage import Aspect, Instruction, LayoutState, Placement, Stage

__all__ = [
    "Aspect",
    "AxisBound",
    "Bound",
    "DegeneratePlacementError",
    "Instruction",
    "LayoutError",
    "LayoutState",
    "Lenient",
    "MalformedBoundError",
    "Placement",
    "Stage",
    "Strict",
    "extract",
    "resolve_axis",
    "resolve_direction",
]
