# fingerprint_core

Building blocks for fingerprint image processing: integer and float
geometry, a packed bit map with area operations, a block map that divides
an image into blocks, a score tracker and records for minutia matching,
and readers and text dumps for raw little-endian binary records and
8-bit PGM images.

The package depends on `numpy`; arrays and images are numpy arrays.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `fingerprint_core.geometry`

- `Point(x, y)` – integer point; `point + Size`, `point + Point` and
  `point - Size` give new points.
- `PointF(x, y)` – float point; `PointF.from_point(point)`, addition of a
  `SizeF` or `PointF`, and `factor * pointf`.
- `Size(width, height)` and `SizeF(width, height)`, each with
  `from_point(point)`.
- `Range(begin, end)` – half-open interval with `Range.from_length(n)`,
  the `length` property and `interpolate(index, count)`, which maps
  `index` out of `count` onto the range rounding to nearest.
- `PolarPoint(distance, angle)` – the angle is kept to its low 8 bits.
- `Rectangle(x, y, width, height)` – mutable, origin at the bottom left.
  Built with `from_points`, `from_size` or `from_point_size`. The `left`,
  `right`, `bottom`, `top`, `point` and `size` properties can be read and
  assigned; `range_x`, `range_y`, `center` and `total_area` are read-only.
  `contains(point)` treats right and top as exclusive. `relative`,
  `fraction`, `shift`, `shifted`, `clip`, `include` and `copy` complete it.

### `fingerprint_core.calc`

`div_round_up`, `interpolate_int`, `interpolate` (linear),
`interpolate_rect` (bilinear over four corners at a `PointF` fraction),
`count_bits` (set bits of a 32-bit word), `add_points`, `add_points_f`
and `scale`. Integer divisions round toward zero.

### `fingerprint_core.angle`

Angles in radians. `from_fraction` and `to_fraction` convert to and from
fractions of a full turn; `by_bucket_center(bucket, resolution)` gives the
centre of a bucket; `to_vector` gives a unit `PointF`; `atan(point)` gives
a direction in `[0, 2*pi)`; `to_orientation` doubles a direction modulo
pi; `add` sums two angles, wrapping once past `2*pi`.

### `fingerprint_core.binarymap`

`BinaryMap(width, height)` stores each row as 32-bit words in
`words`, a numpy `uint32` array of shape `(height, word_width)`; bit `x`
is bit `x & 31` of word `x >> 5`. Dimensions must be positive, otherwise
`ValueError` is raised. Also built with `from_size(size)` or
`from_words(width, height, words)`.

- Bits and words: `get_bit`, `set_bit_one`, `set_bit_zero`, `set_bit`,
  `get_bit_safe(x, y, default)` (returns `default` outside the map),
  `get_word`, `is_word_nonzero`.
- Whole map: `clear`, `invert` (padding bits past `width` stay clear),
  `inverted` (a new map), `is_empty`, `size`, `rect`.
- Combining with another map: `or_`, `and_`, `and_not` over the source's
  extent, and `and_area`, `and_not_area`, `copy_area(source, area, at)`,
  which take the `area` rectangle of the source and place its corner at
  `at`, shifting bits as needed. `copy_from(source)` copies this map's own
  extent.
- `neighborhood(x, y)` – an 8-bit mask: bits 0–2 for `(x-1..x+1, y+1)`,
  bits 3 and 4 for `(x-1, y)` and `(x+1, y)`, bits 5–7 for
  `(x-1..x+1, y-1)`.
- `to_image()` – a `uint8` array indexed `[x, y]`, 255 where a bit is set
  and 0 elsewhere.

### `fingerprint_core.blockmap`

`BlockMap.create(pixel_size, max_block_size)` splits an image into
`ceil(size / max_block_size)` blocks per axis and fills `block_count`,
`corner_count`, `all_blocks`, `all_corners`, `corners` (a `PointGrid`),
`block_areas` (a `RectangleGrid`), `block_centers` and `corner_areas`.
Non-positive sizes raise `ValueError`. `PointGrid.point(x, y)` and
`RectangleGrid.rectangle(x, y)` look up single entries.

### `fingerprint_core.pgm`

Raw 8-bit (`P5`) PGM images as `uint8` arrays indexed `[x, y]` with `y`
counting up from the bottom row.

- `parse_pgm(data)` decodes bytes; `read_pgm(path)` reads a file. Header
  comments starting with `#` are skipped. The bottom row (`y == 0`) is not
  read and stays zero, and pixels missing at the end of the data read as
  255. A bad magic number, a maximum above 255, an unreadable number or
  non-positive dimensions raise `PgmError` (a `ValueError`).
- `write_pgm(path, image)` writes a header with maximum 255 and the rows
  top first.

### `fingerprint_core.matcher`

- `BestMatchSkipper(persons, skip)` keeps the best `skip + 1` scores per
  person, starting at -1. `add_score(person, score)` records a score;
  `skip_score(person)` returns the lowest kept positive score, or `0.0`.
- Records: `PersonsSkipScore`, `MinutiaPair`, `PairInfo` (with `copy()`),
  `EdgeShape`, `EdgeLocation`, `IndexedEdge` and `NeighbourEdge`.

### `fingerprint_core.arrays`

`ElementType` names the element kinds (`INT16`, `INT32`, `UINT8`,
`UINT16`, `UINT32`, `FLOAT`, `BOOL`, `POINT`, `POINTF`) and their numpy
`dtype`. `make_array(element_type, *dims)` returns a zero-filled array of
one to three dimensions; a one-dimensional array may be empty, larger
ones need positive dimensions. `make_point_rows(lengths)` returns rows of
`Point(0, 0)`.

### `fingerprint_core.arrayio`

Readers for little-endian records: a count or dimensions as 32-bit
integers, followed by the values.

- From an open binary stream: `read_int32_array`, `read_uint8_array2d`,
  `read_float_array2d`, `read_point_rows` (rows of `(x, y)` int32 pairs)
  and `read_int16_array3d`.
- From a file that must hold exactly one record: `load_uint8_array2d`,
  `load_float_array2d`, `load_point_rows`, `load_int16_array3d`,
  `load_histogram`, `load_image`, and the scalars `load_int32` and
  `load_float`.
- Truncated data, bad dimensions and trailing bytes raise
  `ArrayFormatError` (a `ValueError`).
- `transpose(image)` returns a `uint8` copy with its axes swapped.
- `format_int32_array`, `format_uint8_array2d`, `format_float_array2d`,
  `format_point_rows`, `format_int16_array3d`, `format_histogram` and
  `format_image` return text dumps, mostly limited to the first eight
  entries per dimension.

### `fingerprint_core.mapio`

- `load_binary_map(path)` reads word width, width and height as int32,
  then the words of each row.
- `load_block_map(path)` reads pixel, block and corner counts, the
  `all_blocks` and `all_corners` rectangles, and the eight coordinate
  lists of the grids.
- Truncated files, trailing bytes and bad layouts raise `ValueError`.
- `format_binary_map` and `format_block_map` return text dumps.

## Example

```python
from fingerprint_core.binarymap import BinaryMap
from fingerprint_core.blockmap import BlockMap
from fingerprint_core.geometry import Size

bits = BinaryMap(40, 10)
bits.set_bit_one(3, 4)
assert bits.get_bit(3, 4)
assert not bits.get_bit_safe(100, 4, False)

blocks = BlockMap.create(Size(100, 60), 16)
print(blocks.block_count)
```

## What it does not do

This is a library only: it has no command-line tool and starts no
programs. The text dumps are returned as strings rather than printed.
Images are read and written only as raw 8-bit PGM and as the package's
own binary records; no other image formats are handled.