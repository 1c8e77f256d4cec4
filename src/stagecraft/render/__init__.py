"""Rendering collaborators: buttons, the screen buffer and image export."""

from .button import ButtonCue, ButtonRenderer, split_value
from .image import save_image, screen_to_image
from .screen import Screen, assemble, format_screen

__all__ = [
    "ButtonCue",
    "ButtonRenderer",
    "Screen",
    "assemble",
    "format_screen",
    "save_image",
    "screen_to_image",
    "split_value",
]
