"""Tests for PNG previews."""

import numpy as np
import pytest
from PIL import Image

from tilenoise.core.buffer import ColorBuffer
from tilenoise.io.exporter import TextureExportError
from tilenoise.io.preview import preview_array, save_preview


class TestPreview:
    def test_array_shape_and_dtype(self, ramp_buffer):
        rgb = preview_array(ramp_buffer)
        assert rgb.shape == (4, 4, 3)
        assert rgb.dtype == np.uint8
        assert rgb.min() == 0
        assert rgb.max() == 255

    def test_tiling_repeats_texture(self, ramp_buffer):
        rgb = preview_array(ramp_buffer, tiles=3)
        assert rgb.shape == (12, 12, 3)
        np.testing.assert_array_equal(rgb[:4, :4], rgb[8:, 4:8])

    def test_rejects_zero_tiles(self, ramp_buffer):
        with pytest.raises(ValueError):
            preview_array(ramp_buffer, tiles=0)

    def test_save_png(self, tmp_path, ramp_buffer):
        path = save_preview(ramp_buffer, tmp_path / "p.png", tiles=2)
        with Image.open(path) as img:
            assert img.format == "PNG"
            assert img.size == (8, 8)
            assert img.mode == "RGB"

    def test_save_never_overwrites(self, tmp_path, ramp_buffer):
        first = save_preview(ramp_buffer, tmp_path / "p.png")
        second = save_preview(ramp_buffer, tmp_path / "p.png")
        assert first != second
        assert second.name == "p1.png"

    def test_unwritable(self, tmp_path):
        with pytest.raises(TextureExportError):
            save_preview(ColorBuffer(2, 2), tmp_path / "nope" / "p.png")
