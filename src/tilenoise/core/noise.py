"""
Uniform noise injection.

Adds per-channel uniform random noise to every texel of a buffer.
"""

from typing import Protocol

import numpy as np

from tilenoise.core.buffer import ColorBuffer


class UniformSource(Protocol):
    """Anything that draws uniform samples like ``numpy.random.Generator``."""

    def uniform(self, low: float, high: float, size) -> np.ndarray:
        ...


class NoiseInjector:
    """
    Adds uniform noise in ``[0, amplitude)`` to each channel of each texel.

    The random source is injected so tests can substitute a fixed
    sequence. One long-lived generator is used for the whole texture,
    so successive calls draw decorrelated samples.
    """

    def __init__(self, rng: UniformSource | None = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def inject(self, buffer: ColorBuffer, amplitude: float) -> None:
        """
        Add noise to ``buffer`` in place.

        Args:
            buffer: Buffer to mutate.
            amplitude: Upper bound of the noise. Values <= 0 are a no-op.
        """
        if amplitude <= 0:
            return

        noise = self.rng.uniform(0.0, float(amplitude), size=buffer.shape)
        buffer.data += np.asarray(noise, dtype=np.float64).reshape(buffer.shape)
