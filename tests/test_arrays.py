import numpy as np
import pytest

from fingerprint_core.arrays import ElementType, make_array, make_point_rows
from fingerprint_core.geometry import Point


@pytest.mark.parametrize("element_type", list(ElementType))
def test_two_dimensional_arrays_are_zeroed(element_type):
    array = make_array(element_type, 3, 4)
    assert array.shape == (3, 4)
    assert array.dtype == element_type.dtype
    assert not np.any(array.view(np.uint8))


def test_three_dimensional_shape():
    array = make_array(ElementType.INT16, 2, 3, 5)
    assert array.shape == (2, 3, 5)
    assert array.dtype == np.int16


def test_one_dimensional_may_be_empty():
    array = make_array(ElementType.INT32, 0)
    assert array.shape == (0,)


def test_one_dimensional_negative_rejected():
    with pytest.raises(ValueError):
        make_array(ElementType.FLOAT, -1)


@pytest.mark.parametrize("dims", [(0, 3), (3, 0), (1, 1, 0), (-2, 4)])
def test_multi_dimensional_requires_positive(dims):
    with pytest.raises(ValueError):
        make_array(ElementType.UINT8, *dims)


@pytest.mark.parametrize("dims", [(), (1, 1, 1, 1)])
def test_dimension_count_limited(dims):
    with pytest.raises(ValueError):
        make_array(ElementType.UINT32, *dims)


def test_point_array_has_named_fields():
    array = make_array(ElementType.POINT, 4)
    array[2]["x"] = 7
    array[2]["y"] = -3
    assert int(array[2]["x"]) == 7
    assert int(array[2]["y"]) == -3
    assert int(array[0]["x"]) == 0


def test_uint32_wraps_like_word():
    array = make_array(ElementType.UINT32, 1, 1)
    array[0, 0] = np.uint32(0xFFFFFFFF)
    assert int(array[0, 0]) == 0xFFFFFFFF


def test_point_rows_lengths():
    rows = make_point_rows([1, 3, 2])
    assert [len(row) for row in rows] == [1, 3, 2]
    assert all(point == Point(0, 0) for row in rows for point in row)


def test_point_rows_are_independent():
    rows = make_point_rows([2, 2])
    rows[0][0] = Point(5, 6)
    assert rows[1][0] == Point(0, 0)


def test_point_rows_require_rows():
    with pytest.raises(ValueError):
        make_point_rows([])


def test_point_rows_require_positive_lengths():
    with pytest.raises(ValueError):
        make_point_rows([2, 0])