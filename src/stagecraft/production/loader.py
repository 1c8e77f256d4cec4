"""YAML loader for production definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.stage import LayoutState, Stage
from ..directors import SEPARATOR, get_director
from ..render.button import ButtonRenderer
from ..render.screen import Screen, assemble
from .pipeline import Performance, StageSet, produce_scenes


@dataclass
class Production:
    """A stage set together with the elements to place on it."""

    name: str
    stage_set: StageSet
    elements: list[str] = field(default_factory=list)

    def perform(self) -> tuple[StageSet, list[Performance]]:
        """Lay out every element in order.

        Returns:
            The final stage set and one performance per element
        """
        return produce_scenes(self.stage_set, self.elements)

    def to_screen(self) -> Screen:
        """Lay out every element and paint them into a screen for the stage."""
        _, performances = self.perform()
        return assemble(performances, Screen.for_stage(self.stage_set.stage))


class ProductionLoader:
    """Loads production definitions from YAML files.

    YAML format:
    ```yaml
    name: button_bar
    stage: [0, 60, 0, 20]           # left, right, top, bottom
    margins:                        # optional, default 0
      horizontal: 0
      vertical: 0
    director: adaptive              # horizontal | vertical | adaptive
    separator: 1                    # optional, units between elements
    button:                         # optional
      border: 1
      text_height: 1
    elements:
      - First
      - Second button
      - Third interaction
    ```
    """

    def load(self, path: str | Path) -> Production:
        """Load a production from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Production ready to perform

        Raises:
            ValueError: If the definition is invalid
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._build_production(data, default_name=path.stem)

    def load_string(self, yaml_string: str) -> Production:
        """Load a production from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._build_production(data)

    def _build_production(self, data: Any, default_name: str = "production") -> Production:
        """Build a production from parsed YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Production definition must be a mapping")

        stage = self._parse_stage(data.get("stage"))

        margins = self._parse_mapping(data, "margins")
        layout_state = LayoutState(
            horizontal_margin=float(margins.get("horizontal", 0.0)),
            vertical_margin=float(margins.get("vertical", 0.0)),
        )

        director = get_director(
            data.get("director", "adaptive"),
            separator=float(data.get("separator", SEPARATOR)),
        )

        button = self._parse_mapping(data, "button")
        renderer = ButtonRenderer(
            border=int(button.get("border", 1)),
            text_height=int(button.get("text_height", 1)),
        )

        elements = data.get("elements")
        if elements is None:
            raise ValueError("Production must list its 'elements'")
        if not isinstance(elements, list) or not all(isinstance(e, str) for e in elements):
            raise ValueError("'elements' must be a list of strings")

        return Production(
            name=data.get("name", default_name),
            stage_set=StageSet(stage, layout_state, director, renderer),
            elements=list(elements),
        )

    def _parse_mapping(self, data: dict[str, Any], key: str) -> dict[str, Any]:
        """Return an optional nested mapping, empty when absent."""
        value = data.get(key) or {}
        if not isinstance(value, dict):
            raise ValueError(f"'{key}' must be a mapping, got {value!r}")
        return value

    def _parse_stage(self, stage_data: Any) -> Stage:
        """Parse [left, right, top, bottom] into a Stage."""
        if stage_data is None:
            raise ValueError("Production must define a 'stage'")
        if not isinstance(stage_data, list) or len(stage_data) != 4:
            raise ValueError(
                f"'stage' must be [left, right, top, bottom], got {stage_data!r}"
            )

        left, right, top, bottom = (float(v) for v in stage_data)
        if left > right or top > bottom:
            raise ValueError(f"Stage {stage_data!r} has negative size")

        return Stage(left, right, top, bottom)
