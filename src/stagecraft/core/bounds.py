"""Strict and lenient bound values and the axis resolver.

A bound is one end of one axis as handed out by a director. A ``Strict``
value cannot be overruled; a ``Lenient`` value leaves room for expression.

Examples:
    [Strict(0),  Strict(20)]   - must start at 0, must end at 20
    [Strict(0),  Lenient(20)]  - must start at 0, may end anywhere up to 20
    [Lenient(0), Strict(20)]   - may start at 0 but not before, must end at 20
    [Lenient(0), Lenient(20)]  - anywhere within 0-20
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .errors import MalformedBoundError


@dataclass(frozen=True)
class Bound:
    """Base class for the two bound variants. Use Strict or Lenient."""

    value: float

    def __post_init__(self) -> None:
        if type(self) is Bound:
            raise TypeError("Bound is abstract, use Strict or Lenient")
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class Strict(Bound):
    """A non-negotiable bound."""


@dataclass(frozen=True)
class Lenient(Bound):
    """A negotiable ceiling or floor."""


@dataclass(frozen=True)
class AxisBound:
    """Lower and upper bound for one axis.

    Read as left->right on the horizontal axis and top->bottom on the
    vertical one. Values are absolute coordinates, never deltas.

    Raises:
        MalformedBoundError: If low.value > high.value
    """

    low: Bound
    high: Bound

    def __post_init__(self) -> None:
        if self.low.value > self.high.value:
            raise MalformedBoundError(
                f"Axis bound low {self.low!r} lies past high {self.high!r}"
            )


def extract(bound: Bound) -> float:
    """Return the raw threshold of a bound, regardless of its kind."""
    return bound.value


def _pin_unless_below(low: Bound, high: Bound, incoming: float) -> float:
    if incoming < low.value:
        return low.value
    return high.value


def _ceiling_unless_below(low: Bound, high: Bound, incoming: float) -> float:
    if incoming < low.value:
        return low.value
    return min(high.value, incoming)


def _pin_high(low: Bound, high: Bound, incoming: float) -> float:
    return high.value


# One entry per (low, high) kind; the table is the whole policy.
AXIS_RESOLVERS: dict[tuple[type[Bound], type[Bound]], Callable[[Bound, Bound, float], float]] = {
    (Strict, Strict): _pin_unless_below,
    (Strict, Lenient): _ceiling_unless_below,
    (Lenient, Lenient): _ceiling_unless_below,
    (Lenient, Strict): _pin_high,
}


def resolve_axis(axis: AxisBound, incoming: float) -> float:
    """Resolve the final high-side coordinate of an axis.

    Args:
        axis: Bounds offered for the axis
        incoming: The coordinate the element would like to end at

    Returns:
        The coordinate the element actually ends at
    """
    resolver = AXIS_RESOLVERS[type(axis.low), type(axis.high)]
    return resolver(axis.low, axis.high, float(incoming))


def resolve_direction(bound: Bound, incoming: float) -> float:
    """Resolve a single bound: lenient clamps, strict pins."""
    if isinstance(bound, Lenient):
        return min(bound.value, float(incoming))
    if isinstance(bound, Strict):
        return bound.value
    raise TypeError(f"Unknown bound kind: {type(bound).__name__}")
