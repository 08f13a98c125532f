"""
Tilenoise: seamless color noise textures.

Layers shrinking random noise with wrap-around blurring and exports
the result as a normalized PPM image.
"""

from tilenoise.core.blur import ToroidalBlur
from tilenoise.core.buffer import ColorBuffer
from tilenoise.core.noise import NoiseInjector
from tilenoise.core.octaves import OctaveScheduler
from tilenoise.io.exporter import PpmExporter, TextureExportError
from tilenoise.pipeline import TextureConfig, TexturePipeline

__version__ = "0.1.0"
