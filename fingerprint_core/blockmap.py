"""Division of an image into a grid of roughly equal blocks."""

from __future__ import annotations

from dataclasses import dataclass

from .calc import div_round_up
from .geometry import Point, Rectangle, Size


@dataclass
class PointGrid:
    """Grid of points given by separate lists of x and y coordinates."""

    all_x: list[int]
    all_y: list[int]

    def point(self, x: int, y: int) -> Point:
        """Point at column x and row y of the grid."""
        return Point(self.all_x[x], self.all_y[y])

    def copy(self) -> PointGrid:
        return PointGrid(list(self.all_x), list(self.all_y))


@dataclass
class RectangleGrid:
    """Grid of rectangles whose corners are the points of a point grid."""

    corners: PointGrid

    def rectangle(self, x: int, y: int) -> Rectangle:
        """Rectangle spanning from corner (x, y) to corner (x + 1, y + 1)."""
        return Rectangle.from_points(
            self.corners.point(x, y), self.corners.point(x + 1, y + 1)
        )


@dataclass
class BlockMap:
    """Block layout of an image: block corners, areas and centers."""

    pixel_count: Size
    block_count: Size
    corner_count: Size
    all_blocks: Rectangle
    all_corners: Rectangle
    corners: PointGrid
    block_areas: RectangleGrid
    block_centers: PointGrid
    corner_areas: RectangleGrid
    max_block_size: int = 0

    @classmethod
    def create(cls, pixel_size: Size, max_block_size: int) -> BlockMap:
        """Split an image of pixel_size into blocks no larger than max_block_size."""
        if max_block_size <= 0:
            raise ValueError(f"block size must be positive, got {max_block_size}")
        if pixel_size.width <= 0 or pixel_size.height <= 0:
            raise ValueError(
                f"image size must be positive, got {pixel_size.width}x{pixel_size.height}"
            )

        block_count = Size(
            div_round_up(pixel_size.width, max_block_size),
            div_round_up(pixel_size.height, max_block_size),
        )
        corner_count = Size(block_count.width + 1, block_count.height + 1)

        corners = PointGrid(
            [x * pixel_size.width // block_count.width for x in range(corner_count.width)],
            [y * pixel_size.height // block_count.height for y in range(corner_count.height)],
        )
        block_areas = RectangleGrid(corners.copy())

        block_centers = PointGrid(
            [block_areas.rectangle(x, 0).center.x for x in range(block_count.width)],
            [block_areas.rectangle(0, y).center.y for y in range(block_count.height)],
        )

        area_x = [0, *block_centers.all_x, 0]
        area_x[block_count.width] = pixel_size.width
        area_y = [0, *block_centers.all_y, 0]
        area_y[block_count.height] = pixel_size.height
        corner_areas = RectangleGrid(PointGrid(area_x, area_y))

        return cls(
            pixel_count=pixel_size,
            block_count=block_count,
            corner_count=corner_count,
            all_blocks=Rectangle.from_size(block_count),
            all_corners=Rectangle.from_size(corner_count),
            corners=corners,
            block_areas=block_areas,
            block_centers=block_centers,
            corner_areas=corner_areas,
            max_block_size=max_block_size,
        )