"""Tests for loading productions from YAML."""

import pytest

from stagecraft.core import LayoutState, Stage
from stagecraft.directors import AdaptiveStack, HorizontalStack, VerticalStack
from stagecraft.production import ProductionLoader

FULL_YAML = """
name: toolbar
stage: [0, 40, 0, 6]
margins:
  horizontal: 2
  vertical: 1
director: horizontal
separator: 0
button:
  border: 1
  text_height: 2
elements:
  - Open
  - Close
"""


def test_load_string_full():
    production = ProductionLoader().load_string(FULL_YAML)
    stage_set = production.stage_set

    assert production.name == "toolbar"
    assert production.elements == ["Open", "Close"]
    assert stage_set.stage == Stage(0, 40, 0, 6)
    assert stage_set.layout_state == LayoutState(horizontal_margin=2, vertical_margin=1)
    assert isinstance(stage_set.director, HorizontalStack)
    assert stage_set.director.separator == 0
    assert stage_set.renderer.text_height == 2


def test_defaults():
    production = ProductionLoader().load_string("stage: [0, 10, 0, 30]\nelements: [a]\n")
    assert production.name == "production"
    assert isinstance(production.stage_set.director, AdaptiveStack)
    assert production.stage_set.layout_state == LayoutState()
    assert production.stage_set.renderer.border == 1


def test_load_file_uses_stem_as_name(tmp_path):
    path = tmp_path / "column.yaml"
    path.write_text("stage: [0, 20, 0, 30]\ndirector: vertical\nelements: [One, Two]\n")
    production = ProductionLoader().load(path)
    assert production.name == "column"
    assert isinstance(production.stage_set.director, VerticalStack)


def test_perform_and_screen():
    production = ProductionLoader().load_string(FULL_YAML)
    final_set, performances = production.perform()
    assert [p.placement for p in performances] == [
        Stage(2, 8, 0, 3),
        Stage(10, 17, 0, 3),
    ]
    assert final_set.layout_state.x_offset == 6 + 2 + 7 + 2

    lines = production.to_screen().lines()
    assert len(lines) == 6
    assert lines[0] == "  |----|  |-----|" + " " * 23
    assert lines[1] == "  |Open|  |Close|" + " " * 23


@pytest.mark.parametrize(
    "yaml_string,message",
    [
        ("- just\n- a list\n", "mapping"),
        ("elements: [a]\n", "stage"),
        ("stage: [0, 10, 0]\nelements: [a]\n", "left, right, top, bottom"),
        ("stage: [10, 0, 0, 5]\nelements: [a]\n", "negative size"),
        ("stage: [0, 10, 0, 5]\n", "elements"),
        ("stage: [0, 10, 0, 5]\nelements: [1, 2]\n", "list of strings"),
        ("stage: [0, 10, 0, 5]\ndirector: diagonal\nelements: [a]\n", "Unknown director"),
        ("stage: [0, 10, 0, 5]\nmargins: [1, 2]\nelements: [a]\n", "'margins' must be a mapping"),
        ("stage: [0, 10, 0, 5]\nbutton: thick\nelements: [a]\n", "'button' must be a mapping"),
    ],
)
def test_invalid_definitions(yaml_string, message):
    with pytest.raises(ValueError, match=message):
        ProductionLoader().load_string(yaml_string)


def test_yaml_boolean_labels_must_be_quoted():
    """Unquoted Yes/No load as booleans, not button labels."""
    with pytest.raises(ValueError, match="list of strings"):
        ProductionLoader().load_string("stage: [0, 30, 0, 5]\nelements: [Yes]\n")

    production = ProductionLoader().load_string('stage: [0, 30, 0, 5]\nelements: ["Yes", "No"]\n')
    assert production.elements == ["Yes", "No"]
