"""
Separable 3-tap box blur with toroidal (wrap-around) boundaries.

Edge texels average with the texels on the opposite edge, so the
blurred buffer tiles without seams.
"""

import numpy as np
from scipy.ndimage import uniform_filter1d

from tilenoise.core.buffer import ColorBuffer

TAPS = 3


def _wrap_mean(values: np.ndarray, axis: int) -> np.ndarray:
    """Mean of each element and its two circular neighbours along ``axis``."""
    return uniform_filter1d(values, size=TAPS, axis=axis, mode="wrap")


class ToroidalBlur:
    """
    3x3 box blur applied as a horizontal pass then a vertical pass.

    The horizontal pass writes into a temporary array owned by the call;
    the vertical pass reads only from that temporary and writes back
    into the buffer.
    """

    def blur(self, buffer: ColorBuffer) -> None:
        """Blur ``buffer`` in place."""
        temp = self.horizontal(buffer.data)
        buffer.data[...] = self.vertical(temp)

    __call__ = blur

    @staticmethod
    def horizontal(values: np.ndarray) -> np.ndarray:
        """
        Horizontal pass.

        Args:
            values: (H, W, 3) array.

        Returns:
            New (H, W, 3) array where ``out[i, j]`` is the mean of
            ``values[i, (j-1) % W]``, ``values[i, j]`` and
            ``values[i, (j+1) % W]``.
        """
        return _wrap_mean(values, axis=1)

    @staticmethod
    def vertical(values: np.ndarray) -> np.ndarray:
        """Vertical pass, the row-wise counterpart of :meth:`horizontal`."""
        return _wrap_mean(values, axis=0)
