"""Toolbar scene: horizontally stacked buttons with margins."""

from ..production import Production, ProductionLoader

TOOLBAR_YAML = """
name: toolbar
stage: [0, 80, 0, 5]
margins:
  horizontal: 2
director: horizontal
elements:
  - Open
  - Save
  - Save as...
  - Close
"""


def create_toolbar_production() -> Production:
    """Create a toolbar leaving two columns of margin around every button."""
    return ProductionLoader().load_string(TOOLBAR_YAML)
