"""
PNG preview of a texture.

Writes an 8-bit RGB image with Pillow, optionally repeated N x N so the
wrap-around seams can be inspected by eye.
"""

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from tilenoise.core.buffer import ColorBuffer
from tilenoise.io.exporter import TextureExportError, normalize_channels, resolve_output_path


def preview_array(buffer: ColorBuffer, tiles: int = 1) -> np.ndarray:
    """
    8-bit rendering of ``buffer``.

    Args:
        buffer: Source texture.
        tiles: Repeat count along each axis.

    Returns:
        (H * tiles, W * tiles, 3) uint8 array.
    """
    if tiles < 1:
        raise ValueError(f"tiles must be >= 1, got {tiles}")

    rgb = normalize_channels(buffer, max_value=255).astype(np.uint8)
    if tiles > 1:
        rgb = np.tile(rgb, (tiles, tiles, 1))
    return rgb


def save_preview(buffer: ColorBuffer, path: Union[str, Path], tiles: int = 1) -> Path:
    """
    Save a PNG preview next to the PPM export.

    Returns:
        The path actually written (never an existing file).

    Raises:
        TextureExportError: If the image cannot be written.
    """
    output_path = resolve_output_path(path)
    img = Image.fromarray(preview_array(buffer, tiles))

    try:
        with open(output_path, "xb") as f:
            img.save(f, format="PNG")
    except OSError as exc:
        raise TextureExportError(output_path, exc.strerror or str(exc)) from exc

    return output_path
