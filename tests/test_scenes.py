"""Tests for all pre-built productions - lays out and renders each one."""

from pathlib import Path

import pytest
from PIL import Image

from stagecraft.core import Strict
from stagecraft.main import SCENES, cell_size, main
from stagecraft.render import format_screen, save_image

BUTTON_BAR_SCREEN = [
    "|-----| |-------------| |-----------------|",
    "|First| |Second button| |Third interaction|",
    "|-----| |-------------| |-----------------|",
]


@pytest.mark.parametrize("scene_name,scene_factory", list(SCENES.items()))
def test_scene_loads(scene_name, scene_factory):
    """Test that each production loads without errors."""
    production = scene_factory()
    assert production.name == scene_name
    assert len(production.elements) > 0


@pytest.mark.parametrize("scene_name,scene_factory", list(SCENES.items()))
def test_scene_lays_out(scene_name, scene_factory):
    """Test that each production yields one placement per element, inside the stage."""
    production = scene_factory()
    stage = production.stage_set.stage
    _, performances = production.perform()

    assert len(performances) == len(production.elements)
    for placement, _ in performances:
        assert stage.left <= placement.left < placement.right <= stage.right
        assert stage.top <= placement.top < placement.bottom < stage.bottom


@pytest.mark.parametrize("scene_name,scene_factory", list(SCENES.items()))
def test_scene_renders_to_file(scene_name, scene_factory, tmp_path):
    """Test that each production can be saved to an image."""
    screen = scene_factory().to_screen()
    output_path = save_image(screen, tmp_path / f"{scene_name}.png")

    assert output_path.exists()
    assert output_path.stat().st_size > 0
    loaded = Image.open(output_path)
    assert loaded.size == (screen.width * 8, screen.height * 16)


def test_button_bar_screen():
    production = SCENES["button_bar"]()
    screen = production.to_screen()
    assert [line.rstrip() for line in screen.lines()[:3]] == BUTTON_BAR_SCREEN
    assert all(not line.strip() for line in screen.lines()[3:])


def test_button_bar_frontier():
    """Every instruction starts one column past the previous button."""
    production = SCENES["button_bar"]()
    _, performances = production.perform()
    lows = [0.0] + [p.placement.right + 1 for p in performances[:-1]]
    assert [Strict(p.placement.left) for p in performances] == [Strict(low) for low in lows]


def test_button_column_stacks_vertically():
    screen = SCENES["button_column"]().to_screen()
    lines = [line.rstrip() for line in screen.lines()]
    assert lines[:9] == [
        "|-----|",
        "|First|",
        "|-----|",
        "|-------------|",
        "|Second button|",
        "|-------------|",
        "|-----------------|",
        "|Third interaction|",
        "|-----------------|",
    ]


def test_main_prints_scene(capsys):
    assert main(["-s", "button_bar"]) == 0
    out = capsys.readouterr().out
    assert "button_bar" in out
    assert format_screen(SCENES["button_bar"]().to_screen()) in out


def test_main_loads_file_and_renders(tmp_path, capsys):
    source = tmp_path / "bar.yaml"
    source.write_text('stage: [0, 30, 0, 5]\nelements: ["Yes", "No"]\n')
    output = tmp_path / "bar.png"

    assert main(["-f", str(source), "-r", str(output), "--cell", "4x8"]) == 0
    assert "bar" in capsys.readouterr().out
    assert Image.open(output).size == (120, 40)


def test_main_reports_layout_failure(tmp_path):
    source = tmp_path / "cramped.yaml"
    source.write_text("stage: [0, 12, 0, 5]\ndirector: horizontal\nelements: [aaaa, bbbb, cccc]\n")
    assert main(["-f", str(source)]) == 1


def test_main_reports_missing_file(tmp_path):
    assert main(["-f", str(Path(tmp_path) / "missing.yaml")]) == 1


@pytest.mark.parametrize("cell", ["big", "8x", "8x16x2", "0x16"])
def test_main_rejects_bad_cell_size(cell, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-s", "button_bar", "-r", str(tmp_path / "out.png"), "--cell", cell])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "--cell" in captured.err
    assert "Stagecraft" not in captured.out
    assert not (tmp_path / "out.png").exists()


def test_cell_size():
    assert cell_size("4x8") == (4, 8)
    assert cell_size("10X20") == (10, 20)
