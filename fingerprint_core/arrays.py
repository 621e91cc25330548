"""Zero-initialised numeric arrays and rows of points."""

from __future__ import annotations

from enum import Enum

import numpy as np

from .geometry import Point

_DTYPES = {
    "int16": np.dtype(np.int16),
    "int32": np.dtype(np.int32),
    "uint8": np.dtype(np.uint8),
    "uint16": np.dtype(np.uint16),
    "uint32": np.dtype(np.uint32),
    "float": np.dtype(np.float32),
    "bool": np.dtype(np.bool_),
    "point": np.dtype([("x", np.int32), ("y", np.int32)]),
    "pointf": np.dtype([("x", np.float32), ("y", np.float32)]),
}


class ElementType(Enum):
    """Element kinds an array can hold."""

    INT16 = "int16"
    INT32 = "int32"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    FLOAT = "float"
    BOOL = "bool"
    POINT = "point"
    POINTF = "pointf"

    @property
    def dtype(self) -> np.dtype:
        return _DTYPES[self.value]


def make_array(element_type: ElementType, *args: int) -> np.ndarray:
    """Zero-filled array of one to three dimensions.

    A one-dimensional array may be empty; every dimension of a two- or
    three-dimensional array must be positive.
    """
    if not 1 <= len(args) <= 3:
        raise ValueError(f"arrays have one to three dimensions, got {len(args)}")
    if len(args) == 1:
        if args[0] < 0:
            raise ValueError(f"array length must not be negative, got {args[0]}")
    elif any(dim <= 0 for dim in args):
        raise ValueError(f"array dimensions must be positive, got {args}")
    return np.zeros(tuple(args), dtype=element_type.dtype)


def make_point_rows(lengths) -> list[list[Point]]:
    """Rows of origin points, one row per given length; all lengths must be positive."""
    lengths = list(lengths)
    if not lengths:
        raise ValueError("at least one row is required")
    rows = []
    for length in lengths:
        if length <= 0:
            raise ValueError(f"row length must be positive, got {length}")
        rows.append([Point(0, 0) for _ in range(length)])
    return rows