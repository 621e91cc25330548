"""Geometry, packed bit maps, block maps, matcher records and binary array I/O for fingerprint image processing."""

__version__ = "0.1.0"

__all__ = [
    "angle",
    "arrayio",
    "arrays",
    "binarymap",
    "blockmap",
    "calc",
    "geometry",
    "mapio",
    "matcher",
    "pgm",
]