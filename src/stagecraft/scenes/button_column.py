"""Button column scene: the button bar on a tall stage."""

from ..production import Production, ProductionLoader

BUTTON_COLUMN_YAML = """
name: button_column
stage: [0, 20, 0, 30]
director: adaptive
elements:
  - First
  - Second button
  - Third interaction
"""


def create_button_column_production() -> Production:
    """Create a 20x30 stage where the adaptive director stacks buttons vertically."""
    return ProductionLoader().load_string(BUTTON_COLUMN_YAML)
