"""Reading and writing 8-bit raw PGM (P5) images.

Images are numpy arrays of dtype uint8 indexed ``[x, y]``, with ``y`` counting
upwards from the bottom row of the picture.
"""

from __future__ import annotations

import os
import re

import numpy as np

_WHITESPACE = b" \t\n\r\v\f"
_INTEGER = re.compile(rb"[+-]?\d+")


class PgmError(ValueError):
    """Raised when data is not a standard raw 8-bit PGM image."""


def _skip_comments(data: bytes, pos: int) -> int:
    """Skip white space and '#' comments running to end of line."""
    while True:
        while pos < len(data) and data[pos] in _WHITESPACE:
            pos += 1
        if pos < len(data) and data[pos] == ord("#"):
            newline = data.find(b"\n", pos)
            pos = len(data) if newline < 0 else newline + 1
            continue
        return pos


def _read_int(data: bytes, pos: int) -> tuple[int, int]:
    while pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1
    match = _INTEGER.match(data, pos)
    if match is None:
        raise PgmError("Input is not a standard raw 8-bit PGM file.")
    return int(match.group()), match.end()


def parse_pgm(data: bytes) -> np.ndarray:
    """Decode a raw 8-bit PGM image.

    Rows are stored top to bottom; the bottom row (``y == 0``) is not read and
    stays zero. Pixels missing at the end of the data read as 255.
    """
    if data[:2] != b"P5":
        raise PgmError("Input is not a standard raw 8-bit PGM file.")
    pos = _skip_comments(data, 2)
    width, pos = _read_int(data, pos)
    pos = _skip_comments(data, pos)
    height, pos = _read_int(data, pos)
    pos = _skip_comments(data, pos)
    maximum, pos = _read_int(data, pos)
    if maximum > 255:
        raise PgmError("Input is not a standard raw 8-bit PGM file.")
    if width <= 0 or height <= 0:
        raise PgmError(f"invalid PGM dimensions {width}x{height}")

    pos += 1  # exactly one byte separates the header from the pixels
    image = np.zeros((width, height), dtype=np.uint8)
    for y in range(height - 1, 0, -1):
        row = data[pos:pos + width]
        row += b"\xff" * (width - len(row))
        image[:, y] = np.frombuffer(row, dtype=np.uint8)
        pos += width
    return image


def read_pgm(path: str | os.PathLike) -> np.ndarray:
    """Read a raw 8-bit PGM image from a file."""
    with open(path, "rb") as handle:
        return parse_pgm(handle.read())


def _encode(image: np.ndarray) -> bytes:
    pixels = np.asarray(image, dtype=np.uint8)
    if pixels.ndim != 2:
        raise ValueError(f"image must be two-dimensional, got shape {pixels.shape}")
    width, height = pixels.shape
    header = f"P5\n{width} {height}\n255\n".encode("ascii")
    return header + pixels[:, ::-1].T.tobytes()


def write_pgm(path: str | os.PathLike, image: np.ndarray) -> None:
    """Write an image indexed [x, y] as a raw 8-bit PGM file, top row first."""
    data = _encode(image)
    with open(path, "wb") as handle:
        handle.write(data)