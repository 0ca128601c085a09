"""Tests for the terminal text renderer."""

from PIL import Image

from ascii_pic.config import RenderConfig
from ascii_pic.rendering.renderer import Renderer
from ascii_pic.rendering.terminal_mode import RESET, rgb_to_ansi_fg


def test_monochrome_two_cells(black_white):
    text = Renderer().render(black_white, RenderConfig(width=2))
    assert text == " @\n"


def test_color_wraps_every_cell(black_white):
    text = Renderer().render(black_white, RenderConfig(width=2, color=True))
    assert text == (
        "\x1b[38;2;0;0;0m \x1b[0m"
        "\x1b[38;2;255;255;255m@\x1b[0m"
        "\n"
    )


def test_escape_helpers():
    assert rgb_to_ansi_fg(1, 2, 3) == "\x1b[38;2;1;2;3m"
    assert RESET == "\x1b[0m"


def test_one_line_per_row(gradient):
    text = Renderer().render(gradient, RenderConfig(width=20))
    lines = text.split("\n")
    assert lines[-1] == ""
    assert len(lines) - 1 == 5
    assert all(len(line) == 20 for line in lines[:-1])


def test_color_output_uses_unboosted_source(gradient):
    text = Renderer().render(gradient, RenderConfig(width=20, color=True, brightness_boost=200))
    # brightness boost only applies to PNG export
    assert text.count("\x1b[38;2;") == 100
    assert text.count(RESET) == 100


def test_multibyte_glyphs():
    img = Image.new("RGB", (2, 1), (255, 255, 255))
    text = Renderer().render(img, RenderConfig(width=2, palette_id="b"))
    assert text == "██\n"


def test_unknown_palette_falls_back(black_white):
    r = Renderer()
    assert r.render(black_white, RenderConfig(width=2, palette_id="z")) == \
        r.render(black_white, RenderConfig(width=2, palette_id="a"))


def test_empty_grid_renders_nothing():
    img = Image.new("RGB", (100, 1))
    assert Renderer().render(img, RenderConfig(width=1)) == ""


def test_deterministic(gradient):
    cfg = RenderConfig(width=33, color=True, palette_id="e")
    assert Renderer().render(gradient, cfg) == Renderer().render(gradient, cfg)


def test_color_goes_through_shared_transform(black_white, monkeypatch):
    from ascii_pic.rendering import terminal_mode

    calls = []

    def fake_transform(rgb, boost_percent=100, tint_percent=None):
        calls.append((rgb, boost_percent, tint_percent))
        return (1, 2, 3), None

    monkeypatch.setattr(terminal_mode, "transform_color", fake_transform)
    text = Renderer().render(black_white, RenderConfig(width=2, color=True))
    assert calls == [((0, 0, 0), 100, None), ((255, 255, 255), 100, None)]
    assert text.count("\x1b[38;2;1;2;3m") == 2
