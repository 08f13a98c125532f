"""
Texture generation pipeline.

Orchestrates the complete flow from dimensions to a written PPM file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

import numpy as np

from tilenoise.core.blur import ToroidalBlur
from tilenoise.core.buffer import ColorBuffer, check_dimension
from tilenoise.core.noise import NoiseInjector, UniformSource
from tilenoise.core.octaves import OctaveScheduler
from tilenoise.io.exporter import PPM_MAX_VALUE, PpmExporter
from tilenoise.io.preview import save_preview


@dataclass
class TextureConfig:
    """Settings for one generated texture."""
    width: int = 256
    height: int = 256

    # Export
    max_value: int = PPM_MAX_VALUE
    preview_tiles: int = 1

    def __post_init__(self):
        check_dimension("width", self.width)
        check_dimension("height", self.height)
        check_dimension("preview_tiles", self.preview_tiles)


@dataclass
class TextureResult:
    """Output of :meth:`TexturePipeline.process`."""
    buffer: ColorBuffer
    amplitudes: list[int]
    ppm_path: Path
    preview_path: Path | None = None


class TexturePipeline:
    """
    Complete dimensions-to-image pipeline.

    Combines buffer allocation, octave generation and export into a
    single interface. The random source is shared by every injection.
    """

    def __init__(
        self,
        config: TextureConfig | None = None,
        rng: UniformSource | None = None,
    ):
        self.cfg = config or TextureConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.injector = NoiseInjector(self.rng)
        self.blur = ToroidalBlur()
        self.scheduler = OctaveScheduler(self.injector, self.blur)
        self.exporter = PpmExporter(max_value=self.cfg.max_value)

    def generate(
        self,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> tuple[ColorBuffer, list[int]]:
        """
        Build a new texture.

        Returns:
            Tuple of (buffer, amplitudes injected after each blur).
        """
        buffer = ColorBuffer(self.cfg.width, self.cfg.height)
        amplitudes = self.scheduler.generate(buffer, progress_callback=progress_callback)
        return buffer, amplitudes

    def process(
        self,
        output_path: Union[str, Path],
        preview_path: Union[str, Path, None] = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> TextureResult:
        """
        Generate a texture and write it.

        Args:
            output_path: Requested PPM path; a numbered variant is used
                if it already exists.
            preview_path: Optional PNG preview path.
            progress_callback: Optional callback(octave_index, amplitude).

        Raises:
            TextureExportError: If an output file cannot be written.
        """
        buffer, amplitudes = self.generate(progress_callback)
        ppm_path = self.exporter.export(buffer, output_path)

        written_preview = None
        if preview_path is not None:
            written_preview = save_preview(buffer, preview_path, tiles=self.cfg.preview_tiles)

        return TextureResult(
            buffer=buffer,
            amplitudes=amplitudes,
            ppm_path=ppm_path,
            preview_path=written_preview,
        )
