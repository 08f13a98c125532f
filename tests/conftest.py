"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from tilenoise.core.buffer import ColorBuffer


class SequenceSource:
    """
    Deterministic stand-in for ``numpy.random.Generator``.

    Each ``uniform`` call returns the next ``prod(size)`` values of a
    fixed sequence (cycled), ignoring ``low``/``high``. Every call is
    recorded as (low, high, size).
    """

    def __init__(self, values):
        self.values = np.asarray(values, dtype=np.float64).ravel()
        self.position = 0
        self.calls = []

    def uniform(self, low, high, size):
        self.calls.append((low, high, tuple(size)))
        count = int(np.prod(size))
        idx = (self.position + np.arange(count)) % self.values.size
        self.position += count
        return self.values[idx].reshape(size)


@pytest.fixture
def sequence_source():
    """Factory for fixed-sequence random sources."""
    return SequenceSource


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible statistical checks."""
    return np.random.default_rng(1234)


@pytest.fixture
def ramp_buffer() -> ColorBuffer:
    """
    4x4 buffer whose channels are distinct ramps.

    R = 4*row + col, G = 10 * R, B = 15 - R.
    """
    r = np.arange(16, dtype=np.float64).reshape(4, 4)
    return ColorBuffer.from_array(np.stack([r, r * 10, 15 - r], axis=2))
