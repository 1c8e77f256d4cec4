"""Production pipeline: placing elements one after another."""

from .loader import Production, ProductionLoader
from .pipeline import Cue, Performance, Renderer, StageSet, produce_many, produce_one, produce_scenes

__all__ = [
    "Cue",
    "Performance",
    "Production",
    "ProductionLoader",
    "Renderer",
    "StageSet",
    "produce_many",
    "produce_one",
    "produce_scenes",
]
