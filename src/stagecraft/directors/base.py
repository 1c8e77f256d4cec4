"""Base class for directors (stacking strategies)."""

from abc import ABC, abstractmethod

from ..core.stage import Instruction, LayoutState, Placement, Stage


# Units left empty between two stacked elements.
SEPARATOR = 1.0


class Director(ABC):
    """Interprets the stage and decides what room the next element gets.

    A director is stateless; everything it knows about earlier elements
    arrives through the LayoutState it is handed. For each element
    instruct() is called with the current state, and adjust() then folds
    the element's placement into the next state.
    """

    @abstractmethod
    def instruct(self, stage: Stage, state: LayoutState) -> Instruction:
        """Compute the bounds offered to the next element.

        Args:
            stage: The full stage for this run
            state: Layout state after all earlier elements

        Returns:
            Absolute bounds for both axes
        """

    @abstractmethod
    def adjust(self, stage: Stage, placement: Placement, state: LayoutState) -> LayoutState:
        """Fold a completed placement into a new layout state.

        Args:
            stage: The full stage for this run
            placement: Rectangle the element actually occupied
            state: The state the element was instructed from

        Returns:
            The state for the next element
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
