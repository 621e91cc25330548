"""Packed two-dimensional bit map stored as rows of 32-bit words."""

from __future__ import annotations

from typing import Callable

import numpy as np

from .geometry import Point, Rectangle, Size

WORD_SHIFT = 5
WORD_MASK = 31
WORD_SIZE = 32
WORD_BYTES = WORD_SIZE // 8

_FULL_WORD = 0xFFFFFFFF

_Combine = Callable[[int, int], int]


class BinaryMap:
    """Bit map of width x height pixels, each row packed into 32-bit words.

    Bit ``x`` of a row lives in word ``x >> 5`` at bit position ``x & 31``.
    """

    word_shift = WORD_SHIFT
    word_mask = WORD_MASK
    word_size = WORD_SIZE
    word_bytes = WORD_BYTES

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"binary map dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.word_width = (width + WORD_MASK) >> WORD_SHIFT
        self.words = np.zeros((height, self.word_width), dtype=np.uint32)

    @classmethod
    def from_size(cls, size: Size) -> BinaryMap:
        return cls(size.width, size.height)

    @classmethod
    def from_words(cls, width: int, height: int, words) -> BinaryMap:
        """Build a map around an existing (height, word_width) array of words."""
        array = np.array(words, dtype=np.uint32)
        if array.ndim != 2 or array.shape[0] != height or array.shape[1] <= 0:
            raise ValueError(
                f"word array of shape {array.shape} does not hold {height} rows"
            )
        if width <= 0 or height <= 0:
            raise ValueError(f"binary map dimensions must be positive, got {width}x{height}")
        result = cls.__new__(cls)
        result.width = width
        result.height = height
        result.word_width = array.shape[1]
        result.words = array
        return result

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def rect(self) -> Rectangle:
        return Rectangle.from_size(self.size)

    # -- single words and bits -------------------------------------------------

    def is_word_nonzero(self, xw: int, y: int) -> bool:
        return int(self.words[y, xw]) != 0

    def get_word(self, xw: int, y: int) -> int:
        return int(self.words[y, xw])

    def get_bit(self, x: int, y: int) -> bool:
        return (int(self.words[y, x >> WORD_SHIFT]) >> (x & WORD_MASK)) & 1 == 1

    def set_bit_one(self, x: int, y: int) -> None:
        xw = x >> WORD_SHIFT
        self.words[y, xw] = int(self.words[y, xw]) | (1 << (x & WORD_MASK))

    def set_bit_zero(self, x: int, y: int) -> None:
        xw = x >> WORD_SHIFT
        self.words[y, xw] = int(self.words[y, xw]) & ~(1 << (x & WORD_MASK)) & _FULL_WORD

    def set_bit(self, x: int, y: int, value: bool) -> None:
        if value:
            self.set_bit_one(x, y)
        else:
            self.set_bit_zero(x, y)

    def get_bit_safe(self, x: int, y: int, default: bool) -> bool:
        """Bit at (x, y), or default when the position lies outside the map."""
        if self.rect.contains(Point(x, y)):
            return self.get_bit(x, y)
        return default

    # -- whole-map operations --------------------------------------------------

    def clear(self) -> None:
        self.words.fill(0)

    def _mask_padding(self) -> None:
        tail = self.width & WORD_MASK
        if tail:
            self.words[:, self.word_width - 1] &= np.uint32(_FULL_WORD >> (WORD_SIZE - tail))

    def invert(self) -> None:
        """Flip every bit inside the map; padding bits stay clear."""
        np.invert(self.words, out=self.words)
        self._mask_padding()

    def inverted(self) -> BinaryMap:
        result = BinaryMap(self.width, self.height)
        result.words[:, :] = np.invert(self.words)
        result._mask_padding()
        return result

    def is_empty(self) -> bool:
        return not self.words.any()

    # -- line-wise combination ---------------------------------------------------

    def _load_line(self, x: int, y: int, length: int) -> int:
        first = x >> WORD_SHIFT
        last = (x + length - 1) >> WORD_SHIFT
        row = self.words[y, first:last + 1]
        return int.from_bytes(row.astype("<u4").tobytes(), "little")

    def _save_line(self, vector: int, x: int, y: int, length: int) -> None:
        last_x = x + length - 1
        first = x >> WORD_SHIFT
        last = last_x >> WORD_SHIFT
        count = last - first + 1

        def word(i: int) -> int:
            return (vector >> (WORD_SIZE * i)) & _FULL_WORD

        if count > 2:
            self.words[y, first + 1:last] = [word(i) for i in range(1, count - 1)]

        begin_mask = (_FULL_WORD << (x & WORD_MASK)) & _FULL_WORD
        current = int(self.words[y, first])
        self.words[y, first] = (current & ~begin_mask & _FULL_WORD) | (word(0) & begin_mask)

        end_mask = _FULL_WORD >> (WORD_MASK - (last_x & WORD_MASK))
        current = int(self.words[y, last])
        self.words[y, last] = (current & ~end_mask & _FULL_WORD) | (word(count - 1) & end_mask)

    def _combine_area(
        self, source: BinaryMap, area: Rectangle, at: Point, combine: _Combine
    ) -> None:
        if area.width <= 0:
            return
        shift = (area.x & WORD_MASK) - (at.x & WORD_MASK)
        vector_mask = (1 << (((area.width >> WORD_SHIFT) + 2) * WORD_SIZE)) - 1
        for dy in range(area.height):
            src = source._load_line(area.x, area.y + dy, area.width)
            if shift >= 0:
                src >>= shift
            else:
                src = (src << -shift) & vector_mask
            dst = self._load_line(at.x, at.y + dy, area.width)
            self._save_line(combine(dst, src), at.x, at.y + dy, area.width)

    def _whole(self, source: BinaryMap, combine: _Combine) -> None:
        self._combine_area(source, source.rect, Point(0, 0), combine)

    def or_(self, source: BinaryMap) -> None:
        self._whole(source, lambda dst, src: dst | src)

    def and_(self, source: BinaryMap) -> None:
        self._whole(source, lambda dst, src: dst & src)

    def and_area(self, source: BinaryMap, area: Rectangle, at: Point) -> None:
        """AND the area of source onto this map with its corner placed at ``at``."""
        self._combine_area(source, area, at, lambda dst, src: dst & src)

    def and_not(self, source: BinaryMap) -> None:
        self._whole(source, lambda dst, src: dst & ~src)

    def and_not_area(self, source: BinaryMap, area: Rectangle, at: Point) -> None:
        """Clear bits set in the area of source, placed with its corner at ``at``."""
        self._combine_area(source, area, at, lambda dst, src: dst & ~src)

    def copy_from(self, source: BinaryMap) -> None:
        """Copy the part of source covering this map's own extent."""
        self.copy_area(source, Rectangle(0, 0, self.width, self.height), Point(0, 0))

    def copy_area(self, source: BinaryMap, area: Rectangle, at: Point) -> None:
        """Copy the area of source into this map with its corner placed at ``at``."""
        self._combine_area(source, area, at, lambda dst, src: src)

    # -- queries ---------------------------------------------------------------

    def neighborhood(self, x: int, y: int) -> int:
        """8-bit mask of the neighbours of (x, y).

        Bits 0-2 are the row above (x-1, x, x+1), bits 3 and 4 the left and
        right neighbours, bits 5-7 the row below (x-1, x, x+1).
        """
        neighbours = (
            (x - 1, y + 1), (x, y + 1), (x + 1, y + 1),
            (x - 1, y), (x + 1, y),
            (x - 1, y - 1), (x, y - 1), (x + 1, y - 1),
        )
        mask = 0
        for bit, (nx, ny) in enumerate(neighbours):
            if self.get_bit(nx, ny):
                mask |= 1 << bit
        return mask

    def to_image(self) -> np.ndarray:
        """Image indexed [x, y]: 255 where a bit is set, 0 elsewhere."""
        xs = np.arange(self.width)
        words = self.words[:, xs >> WORD_SHIFT]
        bits = (words >> (xs & WORD_MASK).astype(np.uint32)) & np.uint32(1)
        return (bits.T.astype(np.uint8)) * np.uint8(255)