"""Sequential layout pipeline.

A production runs in a single forward pass. For every element the director
instructs, the renderer performs, and the director adjusts the layout state
from what the renderer actually occupied. The resulting StageSet feeds the
next element; nothing is ever re-laid out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, NamedTuple, Protocol, runtime_checkable

from ..core.stage import Instruction, LayoutState, Placement, Stage
from ..directors.base import Director

if TYPE_CHECKING:
    from ..render.screen import Screen

logger = logging.getLogger(__name__)


@runtime_checkable
class Cue(Protocol):
    """Deferred drawing of one placed element.

    The pipeline only carries cues along; they are painted later, during
    buffer assembly.
    """

    def paint(self, screen: Screen) -> None:
        """Draw the element into the screen buffer."""
        ...


@runtime_checkable
class Renderer(Protocol):
    """Turns an instruction and an element into a placement.

    The placement must respect the instruction's strict bounds and must not
    exceed its lenient ceilings. A renderer that cannot place the element
    raises; the run is aborted.
    """

    def render(self, instruction: Instruction, element: str) -> tuple[Placement, Cue]:
        """Place an element within the instruction's bounds."""
        ...


class Performance(NamedTuple):
    """What one element produced: the rectangle it occupied and its cue."""

    placement: Placement
    cue: Cue


@dataclass(frozen=True)
class StageSet:
    """Everything one pipeline step needs.

    The stage, director and renderer stay the same for a whole run; only
    the layout state is replaced after each element.
    """

    stage: Stage
    layout_state: LayoutState
    director: Director
    renderer: Renderer


def produce_one(stage_set: StageSet, element: str) -> tuple[StageSet, Performance]:
    """Place a single element.

    Args:
        stage_set: Current set, carrying the layout state after earlier elements
        element: The element to place

    Returns:
        The set for the next element and this element's performance
    """
    stage = stage_set.stage
    state = stage_set.layout_state

    instruction = stage_set.director.instruct(stage, state)
    placement, cue = stage_set.renderer.render(instruction, element)
    next_state = stage_set.director.adjust(stage, placement, state)

    logger.debug(
        "Placed %r at [%g, %g]x[%g, %g], frontier now (%g, %g)",
        element,
        placement.left,
        placement.right,
        placement.top,
        placement.bottom,
        next_state.x_offset,
        next_state.y_offset,
    )

    return replace(stage_set, layout_state=next_state), Performance(placement, cue)


def produce_scenes(
    stage_set: StageSet, elements: Iterable[str]
) -> tuple[StageSet, list[Performance]]:
    """Place elements in order, threading the set from one step to the next.

    Args:
        stage_set: Initial set with the seed layout state
        elements: Elements in placement order

    Returns:
        The final set and one performance per element, in input order
    """
    performances: list[Performance] = []
    for element in elements:
        stage_set, performance = produce_one(stage_set, element)
        performances.append(performance)

    logger.debug("Produced %d element(s) with %r", len(performances), stage_set.director)
    return stage_set, performances


def produce_many(stage_set: StageSet, elements: Iterable[str]) -> list[Performance]:
    """Place elements in order and return their performances."""
    _, performances = produce_scenes(stage_set, elements)
    return performances
