"""Reading and printing arrays stored as raw little-endian binary records.

Two- and three-dimensional arrays are numpy arrays whose first index is the
first dimension stored in the record. Rows of points are lists of lists of
:class:`~fingerprint_core.geometry.Point`.
"""

from __future__ import annotations

import os
import struct
from typing import BinaryIO, Callable, TypeVar

import numpy as np

from .geometry import Point

_T = TypeVar("_T")

_PREVIEW = 8


class ArrayFormatError(ValueError):
    """Raised when binary array data is truncated, malformed or followed by extra bytes."""


# -- low-level reading -----------------------------------------------------------


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if data is None or len(data) != count:
        raise ArrayFormatError(
            f"unexpected end of data: wanted {count} bytes, got {len(data or b'')}"
        )
    return data


def _read_ints(stream: BinaryIO, count: int) -> tuple[int, ...]:
    return struct.unpack(f"<{count}i", _read_exact(stream, 4 * count))


def _read_values(stream: BinaryIO, little_endian: str, native, count: int) -> np.ndarray:
    dtype = np.dtype(little_endian)
    raw = _read_exact(stream, dtype.itemsize * count)
    return np.frombuffer(raw, dtype=dtype, count=count).astype(native)


def _positive_dims(kind: str, dims: tuple[int, ...]) -> None:
    if any(dim <= 0 for dim in dims):
        raise ArrayFormatError(f"{kind} dimensions must be positive, got {dims}")


# -- stream readers ----------------------------------------------------------------


def read_int32_array(stream: BinaryIO) -> np.ndarray:
    """Read a length followed by that many 32-bit signed integers."""
    (size,) = _read_ints(stream, 1)
    if size < 0:
        raise ArrayFormatError(f"array length must not be negative, got {size}")
    return _read_values(stream, "<i4", np.int32, size)


def read_uint8_array2d(stream: BinaryIO) -> np.ndarray:
    """Read two dimensions followed by the bytes of a two-dimensional array."""
    dims = _read_ints(stream, 2)
    _positive_dims("array", dims)
    size_x, size_y = dims
    return _read_values(stream, "u1", np.uint8, size_x * size_y).reshape(size_x, size_y)


def read_float_array2d(stream: BinaryIO) -> np.ndarray:
    """Read two dimensions followed by 32-bit floats of a two-dimensional array."""
    dims = _read_ints(stream, 2)
    _positive_dims("array", dims)
    size_x, size_y = dims
    return _read_values(stream, "<f4", np.float32, size_x * size_y).reshape(size_x, size_y)


def read_point_rows(stream: BinaryIO) -> list[list[Point]]:
    """Read a row count, then per row a length and that many (x, y) int32 pairs."""
    (count,) = _read_ints(stream, 1)
    if count <= 0:
        raise ArrayFormatError(f"row count must be positive, got {count}")
    rows: list[list[Point]] = []
    for _ in range(count):
        (length,) = _read_ints(stream, 1)
        if length <= 0:
            raise ArrayFormatError(f"row length must be positive, got {length}")
        coords = _read_ints(stream, 2 * length)
        rows.append([Point(x, y) for x, y in zip(coords[0::2], coords[1::2])])
    return rows


def read_int16_array3d(stream: BinaryIO) -> np.ndarray:
    """Read three dimensions followed by 16-bit signed integers."""
    dims = _read_ints(stream, 3)
    _positive_dims("array", dims)
    size_x, size_y, size_z = dims
    values = _read_values(stream, "<i2", np.int16, size_x * size_y * size_z)
    return values.reshape(size_x, size_y, size_z)


# -- whole-file loaders --------------------------------------------------------------


def _load(path: str | os.PathLike, reader: Callable[[BinaryIO], _T]) -> _T:
    with open(path, "rb") as handle:
        result = reader(handle)
        if handle.read(1):
            raise ArrayFormatError(f"{os.fspath(path)}: trailing data after end of record")
    return result


def load_uint8_array2d(path: str | os.PathLike) -> np.ndarray:
    return _load(path, read_uint8_array2d)


def load_float_array2d(path: str | os.PathLike) -> np.ndarray:
    return _load(path, read_float_array2d)


def load_point_rows(path: str | os.PathLike) -> list[list[Point]]:
    return _load(path, read_point_rows)


def load_int16_array3d(path: str | os.PathLike) -> np.ndarray:
    return _load(path, read_int16_array3d)


def load_histogram(path: str | os.PathLike) -> np.ndarray:
    """Load an orientation histogram stored as a three-dimensional int16 array."""
    return _load(path, read_int16_array3d)


def load_image(path: str | os.PathLike) -> np.ndarray:
    """Load a grey-scale image stored as a two-dimensional uint8 array."""
    return _load(path, read_uint8_array2d)


def load_int32(path: str | os.PathLike) -> int:
    """Load a file holding exactly one 32-bit signed integer."""
    return _load(path, lambda stream: _read_ints(stream, 1)[0])


def load_float(path: str | os.PathLike) -> float:
    """Load a file holding exactly one 32-bit float."""
    return _load(path, lambda stream: struct.unpack("<f", _read_exact(stream, 4))[0])


# -- transformation ------------------------------------------------------------------


def transpose(image: np.ndarray) -> np.ndarray:
    """Return a uint8 copy of a two-dimensional image with its axes swapped."""
    pixels = np.asarray(image, dtype=np.uint8)
    if pixels.ndim != 2:
        raise ValueError(f"image must be two-dimensional, got shape {pixels.shape}")
    return np.ascontiguousarray(pixels.T)


# -- text dumps ------------------------------------------------------------------------


def format_int32_array(array: np.ndarray) -> str:
    """Header with the length, then the first eight values one per line."""
    values = np.asarray(array)
    lines = "".join(f"\n  {int(v):5d}," for v in values[:_PREVIEW])
    return f"\nInt32Array1D ({len(values)}){lines}"


def _format_grid(title: str, array: np.ndarray, cell: Callable[[object], str]) -> str:
    size_x, size_y = array.shape
    parts = [f"\n{title} ({size_x}x{size_y})"]
    for row in array[:_PREVIEW]:
        parts.append("\n" + "".join(cell(v) for v in row[:_PREVIEW]) + " ...")
    return "".join(parts)


def format_uint8_array2d(array: np.ndarray) -> str:
    """Header with both dimensions, then up to eight by eight values."""
    return _format_grid("UInt8Array2D", np.asarray(array), lambda v: f" {int(v):5d},")


def format_float_array2d(array: np.ndarray) -> str:
    """Header with both dimensions, then up to eight by eight values."""
    return _format_grid("FloatArray2D", np.asarray(array), lambda v: f" {float(v):f},")


def format_point_rows(rows: list[list[Point]]) -> str:
    """Row count, then for up to eight rows their length and first eight points."""
    parts = [f"\nPointArray2D ({len(rows)}x)"]
    for row in rows[:_PREVIEW]:
        points = "".join(f" ({p.x}, {p.y})," for p in row[:_PREVIEW])
        parts.append(f"\n ({len(row)}){points} ...")
    return "".join(parts)


def format_int16_array3d(array: np.ndarray) -> str:
    """Dimensions, then every innermost vector for the first eight by eight cells."""
    values = np.asarray(array)
    size_x, size_y, size_z = values.shape
    parts = [f"\nInt16Array3D ({size_x}x{size_y}x{size_z})"]
    for i, plane in enumerate(values[:_PREVIEW]):
        for j, vector in enumerate(plane[:_PREVIEW]):
            cells = "".join(f" {int(v):5d}," for v in vector)
            parts.append(f"\n  i={i}, j={j}: {cells} ...")
    return "".join(parts)


def format_histogram(array: np.ndarray) -> str:
    return "\nHistogram" + format_int16_array3d(array)


def format_image(image: np.ndarray) -> str:
    """Dimensions, then every pixel as two hex digits, one line per row."""
    pixels = np.asarray(image)
    size_x, size_y = pixels.shape
    parts = [f"\nImage\n\twidth {size_x}, height {size_y}"]
    for row in pixels:
        parts.append("\n\t" + "".join(f"{int(v):02x} " for v in row))
    return "".join(parts)