"""Framed text buttons.

A button is its text surrounded by a border:

    |-------|
    | First |
    |-------|

Columns of a placement are half-open ([left, right)), rows are inclusive
([top, bottom]).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.bounds import Lenient, extract, resolve_axis, resolve_direction
from ..core.errors import DegeneratePlacementError
from ..core.stage import Instruction, Placement, Stage
from .screen import Screen


def split_value(number: int) -> tuple[int, int]:
    """Split a number in two halves, the second taking any remainder."""
    half = number // 2
    return half, number - half


@dataclass(frozen=True)
class ButtonCue:
    """Draws one button into a screen buffer."""

    text: str
    placement: Placement
    border: int = 1

    def paint(self, screen: Screen) -> None:
        """Draw the framed button at its placement.

        Raises:
            DegeneratePlacementError: If the placement has no room inside the border
            IndexError: If the placement lies outside the screen
        """
        col_start = int(self.placement.left)
        col_end = int(self.placement.right)
        row_start = int(self.placement.top)
        row_end = int(self.placement.bottom)
        border = self.border

        width = col_end - col_start
        inner = width - border * 2
        if inner <= 0 or row_end - row_start + 1 <= border * 2:
            raise DegeneratePlacementError(
                f"Button {self.text!r} has no room inside {self.placement}"
            )

        side = "|" * border
        text = self.text[:inner]
        left_pad, right_pad = split_value(inner - len(text))
        text_row = row_start + (row_end - row_start) // 2

        for row in range(row_start, row_end + 1):
            if row < row_start + border or row > row_end - border:
                line = side + "-" * inner + side
            elif row == text_row:
                line = side + " " * left_pad + text + " " * right_pad + side
            else:
                line = side + " " * inner + side
            screen.write(row, col_start, line)


class ButtonRenderer:
    """Sizes buttons to their text within a director's instruction.

    Args:
        border: Border thickness on every side
        text_height: Rows needed by the text
    """

    def __init__(self, border: int = 1, text_height: int = 1) -> None:
        if border < 0 or text_height < 1:
            raise ValueError(
                f"Invalid button metrics: border={border}, text_height={text_height}"
            )
        self.border = int(border)
        self.text_height = int(text_height)

    def render(self, instruction: Instruction, element: str) -> tuple[Placement, ButtonCue]:
        """Place a button for the element.

        Args:
            instruction: Absolute bounds offered by the director
            element: Button text

        Returns:
            The occupied rectangle and the cue that draws it

        Raises:
            DegeneratePlacementError: If the bounds leave no room inside the border
        """
        horizontal = instruction.horizontal
        vertical = instruction.vertical
        frame = self.border * 2

        x_start = extract(horizontal.low)
        y_start = extract(vertical.low)
        # Text longer than the room on offer is truncated
        glyphs = int(resolve_direction(Lenient(extract(horizontal.high) - x_start), len(element)))

        x_end = resolve_axis(horizontal, x_start + glyphs + frame)
        y_end = resolve_axis(vertical, y_start + self.text_height + frame)

        if x_end - x_start - frame <= 0 or y_end - y_start - frame <= 0:
            raise DegeneratePlacementError(
                f"No room for {element!r}: columns [{x_start:g}, {x_end:g}), "
                f"rows [{y_start:g}, {y_end:g}) with border {self.border}"
            )

        placement = Stage(x_start, x_end, y_start, y_end - 1)
        return placement, ButtonCue(element, placement, self.border)

    def __repr__(self) -> str:
        return f"ButtonRenderer(border={self.border}, text_height={self.text_height})"
