"""Core texture buffer and the noise/blur/octave operations on it."""

from tilenoise.core.blur import ToroidalBlur
from tilenoise.core.buffer import ColorBuffer
from tilenoise.core.noise import NoiseInjector
from tilenoise.core.octaves import OctaveScheduler
