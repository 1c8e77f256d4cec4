"""Button bar scene: three buttons on a wide stage."""

from ..core.stage import LayoutState, Stage
from ..directors import AdaptiveStack
from ..production import Production, StageSet
from ..render import ButtonRenderer

BUTTONS = ["First", "Second button", "Third interaction"]


def create_button_bar_production() -> Production:
    """Create a 60x20 stage where the adaptive director stacks buttons horizontally.

    Returns:
        A Production with three buttons.
    """
    stage_set = StageSet(
        stage=Stage(0, 60, 0, 20),
        layout_state=LayoutState(horizontal_margin=0.0, vertical_margin=0.0),
        director=AdaptiveStack(),
        renderer=ButtonRenderer(),
    )
    return Production("button_bar", stage_set, list(BUTTONS))
