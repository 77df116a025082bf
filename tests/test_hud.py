"""Tests for HUD text and font setup."""

import pytest

from config import cloud as config
from pointcloud import ControlSurface, PointCloudPipeline, ViewConfigChannel

try:
    from core.application import hud_lines
    import rendering.text as text
except Exception as e:
    pytest.skip(f"pygame/OpenGL not importable: {e}", allow_module_level=True)


def _hud(show_help):
    channel = ViewConfigChannel()
    pipeline = PointCloudPipeline(2, channel)
    pipeline.update(1.5)
    controls = ControlSurface(channel, grid_count=2)
    return hud_lines(pipeline, controls, 60.0, 8, show_help)


def test_hud_lines_are_ascii():
    """Every HUD line renders with a plain monospace font."""
    for line in _hud(show_help=True):
        assert line.isascii()


def test_hud_help_toggle():
    """The help line is only present when requested."""
    assert len(_hud(show_help=True)) == 4
    assert len(_hud(show_help=False)) == 3


def test_hud_reports_state():
    """Point counts, angles and parameters appear in the HUD."""
    lines = _hud(show_help=False)

    assert lines[0].startswith("Points: 8/8")
    assert "ax: 67.5 deg" in lines[1]
    assert "Speed X: 0.25pi" in lines[2]
    assert "Grid: 2" in lines[2]


def test_text_renderer_reads_font_from_config(monkeypatch):
    """Font name, size and color default to the configured values."""
    requested = []
    monkeypatch.setattr(text.pygame.font, "init", lambda: None)
    monkeypatch.setattr(
        text.pygame.font, "SysFont",
        lambda name, size: requested.append((name, size)) or object()
    )

    renderer = text.TextRenderer()

    assert requested == [(config.WINDOW["hud_font"], config.WINDOW["hud_font_size"])]
    assert renderer.color == tuple(int(c * 255) for c in config.COLORS["text"])
