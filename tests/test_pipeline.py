"""Tests for the decode -> render pipeline."""

import struct
import zlib

import numpy as np
import pytest
from PIL import Image

from ascii_pic.config import RenderConfig
from ascii_pic.errors import AsciiPicError, DecodeError, GeometryError, ImageIOError
from ascii_pic.pipeline import convert_file, load_image


def test_convert_to_text(png_file):
    result = convert_file(png_file, RenderConfig(width=2))
    assert result.text == " @\n"
    assert result.output_path is None


def test_convert_to_png(tmp_path, png_file):
    out = tmp_path / "art.png"
    cfg = RenderConfig(width=2, export_image=True, output_path=str(out), font_size=10)
    result = convert_file(png_file, cfg)
    assert result.text is None
    assert result.output_path == out
    with Image.open(out) as im:
        assert im.size == (2 * 10 + 80, 18 + 80)


def test_load_image_converts_to_rgb(tmp_path):
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (3, 2), (255, 255, 255, 0)).save(path)
    img = load_image(path)
    assert img.mode == "RGB"
    assert img.size == (3, 2)
    assert convert_file(path, RenderConfig(width=3)).text == "@@@\n"


def test_gif_first_frame(tmp_path):
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (4, 4), c) for c in ((255, 255, 255), (0, 0, 0))]
    frames[0].save(path, save_all=True, append_images=frames[1:])
    assert convert_file(path, RenderConfig(width=4)).text == "@@@@\n@@@@\n"


def test_missing_file_is_io_error(tmp_path):
    with pytest.raises(ImageIOError):
        load_image(tmp_path / "nope.png")


def test_garbage_is_decode_error(tmp_path):
    path = tmp_path / "junk.png"
    path.write_bytes(b"definitely not an image")
    with pytest.raises(DecodeError):
        load_image(path)


def test_truncated_png_is_decode_error(tmp_path):
    path = tmp_path / "cut.png"
    noise = np.random.default_rng(1).integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
    Image.fromarray(noise).save(path)
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 2])
    with pytest.raises(DecodeError):
        load_image(path)


def test_errors_share_a_base():
    for exc in (DecodeError, GeometryError, ImageIOError):
        assert issubclass(exc, AsciiPicError)
    assert issubclass(ImageIOError, OSError)


def _claim_size(path, width, height):
    """Rewrite the IHDR of a PNG so it claims another size, with a valid CRC."""
    data = bytearray(path.read_bytes())
    # signature (8) + length (4) + b"IHDR" (4), then width and height
    data[16:24] = struct.pack(">II", width, height)
    crc = zlib.crc32(bytes(data[12:29])) & 0xFFFFFFFF
    data[29:33] = struct.pack(">I", crc)
    path.write_bytes(bytes(data))


def test_oversized_image_is_decode_error(tmp_path):
    path = tmp_path / "huge.png"
    Image.new("RGB", (4, 4), (9, 9, 9)).save(path)
    _claim_size(path, 30000, 30000)
    with pytest.raises(DecodeError, match="exceeds limit"):
        load_image(path)
