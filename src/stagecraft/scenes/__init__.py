"""Pre-built productions for stagecraft."""

from .button_bar import create_button_bar_production
from .button_column import create_button_column_production
from .toolbar import create_toolbar_production

__all__ = ["create_button_bar_production", "create_button_column_production", "create_toolbar_production"]
