"""
PPM (P3) export.

Normalizes each color channel independently to ``[0, max_value]`` and
writes the texture as an ASCII PPM, never overwriting an existing file.
"""

from pathlib import Path
from typing import Union

import numpy as np

from tilenoise.core.buffer import CHANNELS, ColorBuffer

PPM_MAGIC = "P3"
PPM_MAX_VALUE = 65535


class TextureExportError(RuntimeError):
    """Raised when a texture cannot be written to its destination."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not open {self.path} for writing: {reason}")


def flat_value(max_value: int) -> int:
    """Constant emitted for a channel whose min equals its max."""
    return max_value // 2 + 1


def normalize_channels(buffer: ColorBuffer, max_value: int = PPM_MAX_VALUE) -> np.ndarray:
    """
    Rescale each channel of ``buffer`` to integers in ``[0, max_value]``.

    The minimum of a channel maps to 0 and its maximum to ``max_value``.
    A flat channel (min == max) becomes the constant ``flat_value(max_value)``.

    Args:
        buffer: Source buffer (not modified).
        max_value: Upper end of the integer output range.

    Returns:
        (H, W, 3) int64 array.
    """
    lo, hi = buffer.channel_range()
    span = hi - lo
    flat = span <= 0

    safe_span = np.where(flat, 1.0, span)
    scaled = max_value * (buffer.data - lo) / safe_span
    out = np.clip(np.rint(scaled), 0, max_value).astype(np.int64)

    for channel in np.flatnonzero(flat):
        out[..., channel] = flat_value(max_value)
    return out


def resolve_output_path(path: Union[str, Path]) -> Path:
    """
    First unused path derived from ``path``.

    ``noise.ppm`` is returned as-is when free, otherwise ``noise1.ppm``,
    ``noise2.ppm`` and so on.
    """
    path = Path(path)
    if not path.exists():
        return path

    index = 1
    while True:
        candidate = path.with_name(f"{path.stem}{index}{path.suffix}")
        if not candidate.exists():
            return candidate
        index += 1


class PpmExporter:
    """Writes a ColorBuffer as a normalized ASCII PPM image."""

    def __init__(self, max_value: int = PPM_MAX_VALUE):
        if not 0 < max_value <= PPM_MAX_VALUE:
            raise ValueError(f"max_value must be in [1, {PPM_MAX_VALUE}], got {max_value}")
        self.max_value = max_value

    def header(self, buffer: ColorBuffer) -> str:
        return f"{PPM_MAGIC}\n{buffer.width} {buffer.height}\n{self.max_value}\n"

    def export(self, buffer: ColorBuffer, path: Union[str, Path]) -> Path:
        """
        Write ``buffer`` to ``path`` or the first free variant of it.

        Args:
            buffer: Texture to export.
            path: Requested output path.

        Returns:
            The path actually written.

        Raises:
            TextureExportError: If the file cannot be created.
        """
        output_path = resolve_output_path(path)
        pixels = normalize_channels(buffer, self.max_value)
        rows = pixels.reshape(buffer.height, buffer.width * CHANNELS)

        try:
            # "x" refuses to clobber a file created after resolution
            with open(output_path, "x", encoding="ascii", newline="\n") as f:
                f.write(self.header(buffer))
                np.savetxt(f, rows, fmt="%d", delimiter=" ")
        except OSError as exc:
            raise TextureExportError(output_path, exc.strerror or str(exc)) from exc

        return output_path
