"""
Color buffer data model.

A rectangular grid of floating-point RGB triples that every stage of
the texture pipeline mutates in place. Values are unbounded; only the
exporter maps them into an integer range.
"""

from typing import Tuple

import numpy as np

CHANNELS = 3


class ColorBuffer:
    """
    A ``height`` x ``width`` grid of (r, g, b) float triples.

    The texels live in a single ``(height, width, 3)`` float64 array
    exposed as ``data``. Indexing with ``buffer[row, col]`` reads or
    writes one texel.
    """

    def __init__(self, width: int, height: int):
        """
        Allocate a zero-filled buffer.

        Args:
            width: Number of columns, must be positive.
            height: Number of rows, must be positive.

        Raises:
            ValueError: If either dimension is not a positive integer.
        """
        width = check_dimension("width", width)
        height = check_dimension("height", height)

        self.width = width
        self.height = height
        self.data = np.zeros((height, width, CHANNELS), dtype=np.float64)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "ColorBuffer":
        """Build a buffer from an existing (H, W, 3) array (copied)."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValueError(
                f"Expected an (H, W, {CHANNELS}) array, got shape {array.shape}"
            )
        buf = cls(array.shape[1], array.shape[0])
        buf.data[...] = array
        return buf

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.data.shape

    def __getitem__(self, index: Tuple[int, int]) -> Tuple[float, float, float]:
        row, col = index
        r, g, b = self.data[row, col]
        return (float(r), float(g), float(b))

    def __setitem__(self, index: Tuple[int, int], rgb) -> None:
        row, col = index
        self.data[row, col] = rgb

    def copy(self) -> "ColorBuffer":
        return ColorBuffer.from_array(self.data)

    def channel_range(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Per-channel minimum and maximum over all texels.

        Returns:
            Tuple of (mins, maxs), each a length-3 float array.
        """
        flat = self.data.reshape(-1, CHANNELS)
        return flat.min(axis=0), flat.max(axis=0)

    def __repr__(self) -> str:
        return f"ColorBuffer(width={self.width}, height={self.height})"


def check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return int(value)
