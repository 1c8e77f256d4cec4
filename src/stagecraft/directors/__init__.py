"""Directors decide where each element may go next."""

from .base import SEPARATOR, Director
from .stack import AdaptiveStack, HorizontalStack, VerticalStack


# Registry of available directors, keyed by the name used in production files
DIRECTORS: dict[str, type[Director]] = {
    "horizontal": HorizontalStack,
    "vertical": VerticalStack,
    "adaptive": AdaptiveStack,
}


def get_director(name: str, separator: float = SEPARATOR) -> Director:
    """Create a director by name.

    Args:
        name: One of the DIRECTORS keys
        separator: Units left empty between stacked elements

    Returns:
        A new director instance

    Raises:
        ValueError: If the name is not registered
    """
    director_cls = DIRECTORS.get(name)
    if director_cls is None:
        raise ValueError(
            f"Unknown director '{name}', expected one of: {', '.join(DIRECTORS)}"
        )
    return director_cls(separator)


__all__ = [
    "DIRECTORS",
    "SEPARATOR",
    "AdaptiveStack",
    "Director",
    "HorizontalStack",
    "VerticalStack",
    "get_director",
]
