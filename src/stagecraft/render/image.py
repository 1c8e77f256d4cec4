"""Rasterise a character screen into an image."""

from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .screen import Screen


def screen_to_image(
    screen: Screen,
    cell_size: tuple[int, int] = (8, 16),
    foreground: tuple[int, int, int] = (230, 230, 230),
    background: tuple[int, int, int] = (24, 24, 32),
) -> Image.Image:
    """Draw every character of the screen into its own cell.

    Args:
        screen: The assembled screen
        cell_size: Pixel size of one character cell (width, height)
        foreground: RGB colour of the glyphs
        background: RGB colour of the empty canvas

    Returns:
        PIL Image in RGB mode, screen.width * cell width pixels wide
    """
    cell_w, cell_h = cell_size
    image = Image.new("RGB", (screen.width * cell_w, screen.height * cell_h), background)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    # Blank cells need no drawing
    rows, cols = np.nonzero(screen.buffer != " ")
    for row, col in zip(rows, cols):
        draw.text((int(col) * cell_w, int(row) * cell_h), screen.buffer[row, col], fill=foreground, font=font)

    return image


def save_image(screen: Screen, path: str | Path, cell_size: tuple[int, int] = (8, 16)) -> Path:
    """Render the screen to an image file.

    Returns:
        The path written to
    """
    path = Path(path)
    screen_to_image(screen, cell_size).save(str(path))
    return path
