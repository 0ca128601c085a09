"""Tests for glyph palettes."""

import pytest

from ascii_pic.rendering.palettes import (
    DEFAULT_PALETTE_ID,
    PALETTES,
    GlyphPalette,
    get_palette,
    glyph_for,
    glyph_index,
    has_palette,
)

ALL = sorted(PALETTES)


def test_registry_has_fifteen_palettes():
    assert ALL == list("abcdefghijklmno")
    for pid, p in PALETTES.items():
        assert p.id == pid
        assert len(p) >= 1
        assert p.description


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        PALETTES["z"] = PALETTES["a"]


@pytest.mark.parametrize("pid", ALL)
def test_monotonic(pid):
    p = PALETTES[pid]
    indices = [p.index(b) for b in range(256)]
    assert indices == sorted(indices)


@pytest.mark.parametrize("pid", ALL)
def test_boundaries(pid):
    p = PALETTES[pid]
    assert p.index(0) == 0
    assert p.index(255) == len(p) - 1


def test_glyph_index_formula():
    assert glyph_index(128, 10) == 5
    assert glyph_index(25, 10) == 0
    assert glyph_index(26, 10) == 1
    assert glyph_index(300, 10) == 9
    assert glyph_index(200, 1) == 0


def test_classic_ramp_ends():
    p = PALETTES["a"]
    assert p.ramp == " .:-=+*#%@"
    assert glyph_for(0, p) == " "
    assert glyph_for(255, p) == "@"


def test_unknown_id_falls_back_to_default():
    assert get_palette("z").glyphs == get_palette("a").glyphs
    assert get_palette(None).id == DEFAULT_PALETTE_ID
    assert get_palette("").id == DEFAULT_PALETTE_ID


def test_lookup_is_case_insensitive():
    assert get_palette("B") is PALETTES["b"]
    assert has_palette("E")
    assert not has_palette("z")
    assert not has_palette(None)


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        GlyphPalette("x", "Empty", ())
