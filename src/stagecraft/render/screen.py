"""Character screen buffer and buffer assembly."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import numpy as np
from numpy.typing import NDArray

from ..core.stage import Stage

if TYPE_CHECKING:
    from ..production.pipeline import Performance


class Screen:
    """A fixed-size grid of characters, blank on creation.

    Rows are indexed top to bottom and columns left to right, both from 0.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a blank screen.

        Args:
            width: Number of columns
            height: Number of rows
        """
        if width < 0 or height < 0:
            raise ValueError(f"Screen size must not be negative, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.buffer: NDArray[np.str_] = np.full((self.height, self.width), " ", dtype="<U1")

    @classmethod
    def for_stage(cls, stage: Stage) -> Screen:
        """Create a screen covering a stage from the origin to its far corner."""
        return cls(int(stage.right), int(stage.bottom))

    def write(self, row: int, col: int, text: str) -> None:
        """Write text on a row starting at a column.

        Raises:
            IndexError: If any character would fall outside the screen
        """
        if not 0 <= row < self.height or col < 0 or col + len(text) > self.width:
            raise IndexError(
                f"Text of length {len(text)} at row {row}, column {col} "
                f"does not fit a {self.width}x{self.height} screen"
            )
        self.buffer[row, col:col + len(text)] = list(text)

    def lines(self) -> list[str]:
        """Return the screen contents, one string per row."""
        return ["".join(row) for row in self.buffer]

    def to_string(self) -> str:
        return "\n".join(self.lines())


def assemble(performances: Iterable[Performance], screen: Screen) -> Screen:
    """Paint every performance's cue into the screen, in order.

    Returns:
        The same screen, for chaining
    """
    for _, cue in performances:
        cue.paint(screen)
    return screen


def ruler(width: int) -> str:
    """Column ruler: the last digit of every even column, blanks between."""
    return "".join(str(idx % 10) if idx % 2 == 0 else " " for idx in range(width))


def format_screen(screen: Screen) -> str:
    """Frame a screen for printing, with a column ruler on top."""
    rule = "-" * screen.width
    out = [
        "-" * (screen.width + 2),
        f"|{ruler(screen.width)}|",
        f"|{rule}|",
    ]
    out.extend(f"|{line}|" for line in screen.lines())
    out.append(f"|{rule}|")
    return "\n".join(out)
