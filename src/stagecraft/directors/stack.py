"""Directors that stack elements one after another."""

from __future__ import annotations

from ..core.bounds import AxisBound, Lenient, Strict
from ..core.stage import Aspect, Instruction, LayoutState, Placement, Stage
from .base import SEPARATOR, Director


class HorizontalStack(Director):
    """Stacks elements left to right.

    Every element is offered the full stage height; only the horizontal
    frontier advances.

    Args:
        separator: Units left empty after each element
    """

    def __init__(self, separator: float = SEPARATOR) -> None:
        self.separator = float(separator)

    def instruct(self, stage: Stage, state: LayoutState) -> Instruction:
        return Instruction(
            horizontal=AxisBound(
                Strict(state.x_offset + state.horizontal_margin), Lenient(stage.right)
            ),
            vertical=AxisBound(Strict(stage.top), Lenient(stage.bottom)),
        )

    def adjust(self, stage: Stage, placement: Placement, state: LayoutState) -> LayoutState:
        return state.replace(
            x_offset=state.x_offset
            + (placement.right - placement.left)
            + self.separator
            + state.horizontal_margin,
            x_size=state.x_size + placement.left + placement.right,
        )

    def __repr__(self) -> str:
        return f"HorizontalStack(separator={self.separator})"


class VerticalStack(Director):
    """Stacks elements top to bottom, offering the full stage width.

    Args:
        separator: Units left empty after each element
    """

    def __init__(self, separator: float = SEPARATOR) -> None:
        self.separator = float(separator)

    def instruct(self, stage: Stage, state: LayoutState) -> Instruction:
        return Instruction(
            horizontal=AxisBound(Strict(stage.left), Lenient(stage.right)),
            vertical=AxisBound(
                Strict(state.y_offset + state.vertical_margin), Lenient(stage.bottom)
            ),
        )

    def adjust(self, stage: Stage, placement: Placement, state: LayoutState) -> LayoutState:
        return state.replace(
            y_offset=state.y_offset
            + (placement.bottom - placement.top)
            + self.separator
            + state.vertical_margin,
            y_size=state.y_size + placement.top + placement.bottom + self.separator,
        )

    def __repr__(self) -> str:
        return f"VerticalStack(separator={self.separator})"


class AdaptiveStack(Director):
    """Picks horizontal or vertical stacking from the stage's aspect ratio.

    Wide stages stack horizontally, tall (and square) ones vertically.
    Both instruct() and adjust() dispatch the same way, so a run never
    mixes the two.

    Args:
        separator: Units left empty after each element
    """

    def __init__(self, separator: float = SEPARATOR) -> None:
        self.directors: dict[Aspect, Director] = {
            Aspect.HORIZONTAL: HorizontalStack(separator),
            Aspect.VERTICAL: VerticalStack(separator),
        }

    def for_stage(self, stage: Stage) -> Director:
        """Return the director this stage dispatches to."""
        return self.directors[stage.aspect()]

    def instruct(self, stage: Stage, state: LayoutState) -> Instruction:
        return self.for_stage(stage).instruct(stage, state)

    def adjust(self, stage: Stage, placement: Placement, state: LayoutState) -> LayoutState:
        return self.for_stage(stage).adjust(stage, placement, state)

    def __repr__(self) -> str:
        return f"AdaptiveStack(separator={self.directors[Aspect.HORIZONTAL].separator})"
