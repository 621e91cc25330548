"""Loading and printing binary maps and block maps stored as raw little-endian data."""

from __future__ import annotations

import os
import struct

import numpy as np

from .binarymap import BinaryMap
from .blockmap import BlockMap, PointGrid, RectangleGrid
from .geometry import Rectangle, Size


class _Cursor:
    """Sequential reader over the bytes of a file."""

    def __init__(self, data: bytes, source: str) -> None:
        self._data = data
        self._pos = 0
        self._source = source

    def _take(self, count: int) -> int:
        start = self._pos
        if count < 0 or start + count > len(self._data):
            raise ValueError(f"{self._source}: unexpected end of data")
        self._pos += count
        return start

    def ints(self, count: int) -> tuple[int, ...]:
        start = self._take(4 * count)
        return struct.unpack_from(f"<{count}i", self._data, start)

    def uint32s(self, count: int) -> np.ndarray:
        start = self._take(4 * count)
        return np.frombuffer(self._data, dtype="<u4", count=count, offset=start).astype(np.uint32)

    def int32_list(self) -> list[int]:
        (size,) = self.ints(1)
        if size < 0:
            raise ValueError(f"{self._source}: negative array size {size}")
        return list(self.ints(size))

    def finish(self) -> None:
        if self._pos != len(self._data):
            raise ValueError(f"{self._source}: trailing data after end of record")


def _open(path: str | os.PathLike) -> _Cursor:
    with open(path, "rb") as handle:
        return _Cursor(handle.read(), os.fspath(path))


def load_binary_map(path: str | os.PathLike) -> BinaryMap:
    """Read word width, width, height and the packed rows of a binary map."""
    cursor = _open(path)
    word_width, width, height = cursor.ints(3)
    if word_width <= 0 or height <= 0:
        raise ValueError(f"invalid binary map layout {word_width} words x {height} rows")
    words = cursor.uint32s(height * word_width).reshape(height, word_width)
    cursor.finish()
    return BinaryMap.from_words(width, height, words)


def format_binary_map(binary_map: BinaryMap) -> str:
    """Text dump of a binary map's layout and its first eight rows of words."""
    parts = [
        "\nBinaryMap",
        f"\n  wordWidth = {binary_map.word_width}"
        f"\n  width = {binary_map.width}"
        f"\n  height = {binary_map.height}"
        f"\n  wordShift = {binary_map.word_shift}"
        f"\n  wordMask = {binary_map.word_mask}"
        f"\n  wordSize = {binary_map.word_size}"
        f"\n  wordBytes = {binary_map.word_bytes}",
        f"\n  map ({binary_map.height}x{binary_map.word_width})",
    ]
    for row in binary_map.words[:8]:
        parts.append("\n    " + "".join(f"{int(word):08X}," for word in row))
    return "".join(parts)


def load_block_map(path: str | os.PathLike) -> BlockMap:
    """Read a block map's counts, bounding rectangles and coordinate grids."""
    cursor = _open(path)
    pixel_count = Size(*cursor.ints(2))
    block_count = Size(*cursor.ints(2))
    corner_count = Size(*cursor.ints(2))
    all_blocks = Rectangle(*cursor.ints(4))
    all_corners = Rectangle(*cursor.ints(4))
    corners = PointGrid(cursor.int32_list(), cursor.int32_list())
    block_areas = RectangleGrid(PointGrid(cursor.int32_list(), cursor.int32_list()))
    block_centers = PointGrid(cursor.int32_list(), cursor.int32_list())
    corner_areas = RectangleGrid(PointGrid(cursor.int32_list(), cursor.int32_list()))
    cursor.finish()
    return BlockMap(
        pixel_count=pixel_count,
        block_count=block_count,
        corner_count=corner_count,
        all_blocks=all_blocks,
        all_corners=all_corners,
        corners=corners,
        block_areas=block_areas,
        block_centers=block_centers,
        corner_areas=corner_areas,
    )


def _values(values: list[int]) -> str:
    return "".join(f" {value}," for value in values)


def format_block_map(block_map: BlockMap) -> str:
    """Text dump of every field of a block map."""
    bm = block_map
    parts = [
        "\nBlockMap",
        f"\n  pixelCount: width={bm.pixel_count.width}, height={bm.pixel_count.height}\n",
        f"\n  blockCount: width={bm.block_count.width}, height={bm.block_count.height}\n",
        f"\n  cornerCount: width={bm.corner_count.width}, height={bm.corner_count.height}\n",
    ]
    for name, rect in (("allBlocks", bm.all_blocks), ("allCorners", bm.all_corners)):
        parts.append(
            f"\n  {name}: x={rect.x}, y={rect.y}, width={rect.width}, height={rect.height}\n"
        )
    grids = (
        ("corners", bm.corners),
        ("blockAreas.corners", bm.block_areas.corners),
        ("blockCenters", bm.block_centers),
        ("cornerAreas.corners", bm.corner_areas.corners),
    )
    for name, grid in grids:
        parts.append(f"\n  {name}.allX ({len(grid.all_x)}x):" + _values(grid.all_x))
        parts.append(f"\n  {name}.allY ({len(grid.all_y)}x):" + _values(grid.all_y))
    return "".join(parts)