"""Stage, instruction and layout state records."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Self

from .bounds import AxisBound


class Aspect(Enum):
    """Which way a stage is longer."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Stage:
    """A rectangle in absolute coordinates.

    Describes both the full region available for one run and, once an
    element is placed, the rectangle it actually occupies.
    """

    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def aspect(self) -> Aspect:
        """Horizontal if the stage is wider than it is tall, else vertical."""
        if self.width > self.height:
            return Aspect.HORIZONTAL
        return Aspect.VERTICAL


# The rectangle a renderer reports back after placing an element.
Placement = Stage


@dataclass(frozen=True)
class Instruction:
    """What an element receives from a director: bounds for both axes."""

    horizontal: AxisBound
    vertical: AxisBound


@dataclass(frozen=True)
class LayoutState:
    """How much of the stage has been consumed so far.

    Attributes:
        x_offset: Horizontal frontier relative to the stage origin
        y_offset: Vertical frontier relative to the stage origin
        horizontal_margin: Added to the frontier once in instruct and once in adjust;
            the first element starts one margin in and neighbours are
            margin + separator apart
        vertical_margin: The same as horizontal_margin, for vertical stacking
        x_size: Accumulated horizontal extent
        y_size: Accumulated vertical extent
    """

    x_offset: float = 0.0
    y_offset: float = 0.0
    horizontal_margin: float = 0.0
    vertical_margin: float = 0.0
    x_size: float = 0.0
    y_size: float = 0.0

    def replace(self, **changes: float) -> Self:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)
