"""Tests for the PPM reader."""

import numpy as np
import pytest

from tilenoise.io.reader import PpmFormatError, read_ppm


class TestReadPpm:
    def test_comments_and_whitespace(self, tmp_path):
        path = tmp_path / "c.ppm"
        path.write_text("P3\n# made by hand\n2 1 # dims\n255\n0 1 2\n  3 4 5\n")
        pixels, max_value = read_ppm(path)
        assert max_value == 255
        np.testing.assert_array_equal(pixels, [[[0, 1, 2], [3, 4, 5]]])

    def test_wrong_magic(self, tmp_path):
        path = tmp_path / "p6.ppm"
        path.write_text("P6\n1 1\n255\n0 0 0\n")
        with pytest.raises(PpmFormatError):
            read_ppm(path)

    def test_sample_count_mismatch(self, tmp_path):
        path = tmp_path / "short.ppm"
        path.write_text("P3\n2 2\n255\n0 0 0\n")
        with pytest.raises(PpmFormatError, match="expected 12"):
            read_ppm(path)

    def test_non_integer_token(self, tmp_path):
        path = tmp_path / "bad.ppm"
        path.write_text("P3\n1 1\n255\n0 x 0\n")
        with pytest.raises(PpmFormatError):
            read_ppm(path)

    def test_sample_above_max(self, tmp_path):
        path = tmp_path / "hot.ppm"
        path.write_text("P3\n1 1\n255\n0 256 0\n")
        with pytest.raises(PpmFormatError):
            read_ppm(path)
