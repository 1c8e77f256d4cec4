"""Main entry point for stagecraft."""

import argparse
import logging
import sys
from pathlib import Path

from .core.errors import LayoutError
from .production import Production, ProductionLoader
from .render import format_screen, save_image
from .scenes import create_button_bar_production, create_button_column_production, create_toolbar_production

logger = logging.getLogger(__name__)


# Scene registry - maps scene names to factory functions
SCENES = {
    "button_bar": create_button_bar_production,
    "button_column": create_button_column_production,
    "toolbar": create_toolbar_production,
}


def cell_size(value: str) -> tuple[int, int]:
    """Parse a WxH cell size into positive pixel dimensions."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got '{value}'") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"cell size must be positive, got '{value}'")
    return width, height


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Stagecraft - Sequential Constraint Layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-s", "--scene",
        choices=list(SCENES.keys()),
        default="button_bar",
        help="Pre-built production to lay out (default: button_bar)",
    )
    source.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="Load the production from a YAML file",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Also render the screen to an image file",
    )
    parser.add_argument(
        "--cell",
        metavar="WxH",
        type=cell_size,
        default="8x16",
        help="Pixel size of one character cell when rendering (default: 8x16)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every placement",
    )
    return parser.parse_args(argv)


def load_production(args: argparse.Namespace) -> Production:
    """Load the production selected on the command line."""
    if args.file:
        return ProductionLoader().load(args.file)
    return SCENES[args.scene]()


def main(argv: list[str] | None = None) -> int:
    """Lay out a production and print it."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        production = load_production(args)
        screen = production.to_screen()
    except (LayoutError, ValueError, IndexError, OSError) as e:
        logger.error("Layout failed: %s", e)
        return 1

    print(f"Stagecraft - {production.name}")
    print(f"{len(production.elements)} element(s) on a {screen.width}x{screen.height} stage")
    print(format_screen(screen))

    if args.render:
        output_path = save_image(screen, Path(args.render), args.cell)
        print(f"Saved render to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
