"""
ASCII PPM (P3) decoding.

Reads back the images written by the exporter, mainly to check the
normalized range of an export.
"""

from pathlib import Path
from typing import List, Tuple, Union

import numpy as np


class PpmFormatError(ValueError):
    """Raised for files that are not well-formed P3 images."""


def _tokens(text: str) -> List[str]:
    tokens = []
    for line in text.splitlines():
        line = line.split("#", 1)[0]
        tokens.extend(line.split())
    return tokens


def read_ppm(path: Union[str, Path]) -> Tuple[np.ndarray, int]:
    """
    Decode a P3 image.

    Args:
        path: File to read.

    Returns:
        Tuple of ((H, W, 3) int64 pixel array, max value).

    Raises:
        PpmFormatError: If the header or pixel data is malformed.
    """
    tokens = _tokens(Path(path).read_text(encoding="ascii"))

    if len(tokens) < 4 or tokens[0] != "P3":
        raise PpmFormatError(f"{path}: not a P3 image")

    try:
        width, height, max_value = (int(t) for t in tokens[1:4])
        values = np.array([int(t) for t in tokens[4:]], dtype=np.int64)
    except ValueError as exc:
        raise PpmFormatError(f"{path}: non-integer token ({exc})") from exc

    if width <= 0 or height <= 0 or max_value <= 0:
        raise PpmFormatError(f"{path}: invalid header {width}x{height} max {max_value}")

    expected = width * height * 3
    if values.size != expected:
        raise PpmFormatError(
            f"{path}: expected {expected} samples, found {values.size}"
        )
    if values.size and (values.min() < 0 or values.max() > max_value):
        raise PpmFormatError(f"{path}: sample outside [0, {max_value}]")

    return values.reshape(height, width, 3), max_value
