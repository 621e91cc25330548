import io
import struct

import numpy as np
import pytest

from fingerprint_core.arrayio import (
    ArrayFormatError,
    format_float_array2d,
    format_histogram,
    format_image,
    format_int16_array3d,
    format_int32_array,
    format_point_rows,
    format_uint8_array2d,
    load_float,
    load_float_array2d,
    load_histogram,
    load_image,
    load_int16_array3d,
    load_int32,
    load_point_rows,
    load_uint8_array2d,
    read_float_array2d,
    read_int16_array3d,
    read_int32_array,
    read_point_rows,
    read_uint8_array2d,
    transpose,
)
from fingerprint_core.geometry import Point


def _ints(*values):
    return struct.pack(f"<{len(values)}i", *values)


def _uint8_record(array):
    array = np.asarray(array, dtype=np.uint8)
    return _ints(*array.shape) + array.tobytes()


def _int16_record(array):
    array = np.asarray(array, dtype=np.int16)
    return _ints(*array.shape) + array.astype("<i2").tobytes()


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return path


def test_read_int32_array_values():
    result = read_int32_array(io.BytesIO(_ints(3, 5, -7, 123456)))
    assert result.tolist() == [5, -7, 123456]
    assert result.dtype == np.int32


def test_read_int32_array_empty():
    assert read_int32_array(io.BytesIO(_ints(0))).tolist() == []


def test_read_int32_array_negative_length():
    with pytest.raises(ArrayFormatError):
        read_int32_array(io.BytesIO(_ints(-1)))


def test_read_int32_array_truncated():
    with pytest.raises(ArrayFormatError):
        read_int32_array(io.BytesIO(_ints(4, 1, 2)))


def test_read_uint8_array2d_layout():
    source = np.arange(6, dtype=np.uint8).reshape(2, 3)
    result = read_uint8_array2d(io.BytesIO(_uint8_record(source)))
    assert result.shape == (2, 3)
    assert np.array_equal(result, source)


def test_read_uint8_array2d_zero_dimension():
    with pytest.raises(ArrayFormatError):
        read_uint8_array2d(io.BytesIO(_ints(0, 3)))


def test_read_float_array2d_round_trip():
    source = np.array([[1.5, -2.25], [0.0, 8.0]], dtype=np.float32)
    data = _ints(2, 2) + source.astype("<f4").tobytes()
    result = read_float_array2d(io.BytesIO(data))
    assert result.dtype == np.float32
    assert np.array_equal(result, source)


def test_read_point_rows():
    data = _ints(2, 1, 3, 4, 2, -1, 0, 7, 8)
    rows = read_point_rows(io.BytesIO(data))
    assert rows == [[Point(3, 4)], [Point(-1, 0), Point(7, 8)]]


def test_read_point_rows_rejects_empty_row():
    with pytest.raises(ArrayFormatError):
        read_point_rows(io.BytesIO(_ints(1, 0)))


def test_read_point_rows_rejects_no_rows():
    with pytest.raises(ArrayFormatError):
        read_point_rows(io.BytesIO(_ints(0)))


def test_read_int16_array3d_round_trip():
    source = np.arange(-6, 6, dtype=np.int16).reshape(2, 3, 2)
    result = read_int16_array3d(io.BytesIO(_int16_record(source)))
    assert result.shape == (2, 3, 2)
    assert np.array_equal(result, source)


def test_read_int16_array3d_truncated():
    data = _int16_record(np.ones((2, 2, 2)))[:-1]
    with pytest.raises(ArrayFormatError):
        read_int16_array3d(io.BytesIO(data))


def test_load_image_and_uint8_array2d(tmp_path):
    source = np.array([[1, 2, 3], [250, 251, 252]], dtype=np.uint8)
    path = _write(tmp_path, "image.bin", _uint8_record(source))
    assert np.array_equal(load_image(path), source)
    assert np.array_equal(load_uint8_array2d(path), source)


def test_load_rejects_trailing_data(tmp_path):
    path = _write(tmp_path, "image.bin", _uint8_record(np.ones((2, 2))) + b"\x00")
    with pytest.raises(ArrayFormatError):
        load_image(path)


def test_load_float_array2d(tmp_path):
    source = np.array([[0.5, 1.0, -3.0]], dtype=np.float32)
    path = _write(tmp_path, "f.bin", _ints(1, 3) + source.astype("<f4").tobytes())
    assert np.array_equal(load_float_array2d(path), source)


def test_load_point_rows(tmp_path):
    path = _write(tmp_path, "p.bin", _ints(1, 2, 10, 20, 30, 40))
    assert load_point_rows(path) == [[Point(10, 20), Point(30, 40)]]


def test_load_histogram_matches_int16_loader(tmp_path):
    source = np.arange(8, dtype=np.int16).reshape(2, 2, 2)
    path = _write(tmp_path, "h.bin", _int16_record(source))
    assert np.array_equal(load_histogram(path), source)
    assert np.array_equal(load_int16_array3d(path), load_histogram(path))


def test_load_int32(tmp_path):
    path = _write(tmp_path, "i.bin", _ints(-42))
    assert load_int32(path) == -42


def test_load_int32_empty_file(tmp_path):
    path = _write(tmp_path, "i.bin", b"")
    with pytest.raises(ArrayFormatError):
        load_int32(path)


def test_load_float(tmp_path):
    path = _write(tmp_path, "f.bin", struct.pack("<f", 1.5))
    assert load_float(path) == 1.5


def test_load_float_trailing_data(tmp_path):
    path = _write(tmp_path, "f.bin", struct.pack("<f", 1.5) + b"\x01")
    with pytest.raises(ArrayFormatError):
        load_float(path)


def test_transpose_swaps_axes():
    source = np.arange(6, dtype=np.uint8).reshape(2, 3)
    result = transpose(source)
    assert result.shape == (3, 2)
    assert np.array_equal(transpose(result), source)
    assert result[2, 1] == source[1, 2]


def test_transpose_rejects_non_2d():
    with pytest.raises(ValueError):
        transpose(np.zeros(4, dtype=np.uint8))


def test_format_int32_array_pinned():
    assert format_int32_array(np.array([7], dtype=np.int32)) == "\nInt32Array1D (1)\n      7,"


def test_format_int32_array_shows_eight_values():
    text = format_int32_array(np.arange(20, dtype=np.int32))
    assert text.startswith("\nInt32Array1D (20)")
    assert text.count(",") == 8


def test_format_uint8_array2d_truncates():
    text = format_uint8_array2d(np.zeros((10, 12), dtype=np.uint8))
    assert text.startswith("\nUInt8Array2D (10x12)")
    assert text.count(" ...") == 8
    assert text.count(",") == 64


def test_format_float_array2d_values():
    text = format_float_array2d(np.array([[1.5, 2.0]], dtype=np.float32))
    assert text.startswith("\nFloatArray2D (1x2)")
    assert " 1.500000," in text
    assert " 2.000000," in text


def test_format_point_rows_pinned():
    text = format_point_rows([[Point(1, 2)], [Point(3, 4), Point(5, 6)]])
    assert text == "\nPointArray2D (2x)\n (1) (1, 2), ...\n (2) (3, 4), (5, 6), ..."


def test_format_int16_array3d_limits_cells():
    array = np.zeros((10, 1, 2), dtype=np.int16)
    text = format_int16_array3d(array)
    assert text.startswith("\nInt16Array3D (10x1x2)")
    assert text.count("i=") == 8
    assert text.count(",") == 8 * 3


def test_format_histogram_prefix():
    array = np.ones((1, 1, 1), dtype=np.int16)
    text = format_histogram(array)
    assert text == "\nHistogram" + format_int16_array3d(array)


def test_format_image_pinned():
    image = np.array([[0, 255], [16, 1]], dtype=np.uint8)
    assert format_image(image) == "\nImage\n\twidth 2, height 2\n\t00 ff \n\t10 01 "