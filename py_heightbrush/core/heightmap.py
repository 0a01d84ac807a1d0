"""
Heightmap storage contract and an in-memory NumPy implementation.

The brush core never owns terrain data. It talks to any object satisfying
``HeightmapResource``: a square grid of normalized samples with a known world
origin and size, read and written one rectangle at a time. Regions are 2-D
arrays indexed ``[row, column]`` where rows follow the world ``z`` axis and
columns follow the world ``x`` axis.
"""

from typing import Optional, Protocol, runtime_checkable

import numpy as np

from .coordinates import WorldPosition, validate_world_size
from .exceptions import InvalidTerrainSizeError, RegionShapeError


@runtime_checkable
class HeightmapResource(Protocol):
    """What the brush core needs from a heightmap."""

    @property
    def resolution(self) -> int: ...

    @property
    def world_origin(self) -> WorldPosition: ...

    @property
    def world_size(self) -> WorldPosition: ...

    def get_region(self, x: int, y: int, width: int, height: int) -> np.ndarray: ...

    def set_region(self, x: int, y: int, heights: np.ndarray) -> None: ...

    def get_interpolated_height(self, x: float, y: float) -> float: ...


class ArrayHeightmap:
    """
    Square heightmap held in a NumPy array.

    Heights are stored as float32, matching how terrain engines keep
    normalized samples. Values outside ``[0, 1]`` are stored as given.
    """

    def __init__(
        self,
        resolution: int,
        world_size: WorldPosition,
        world_origin: Optional[WorldPosition] = None,
        heights: Optional[np.ndarray] = None,
        dtype=np.float32,
    ):
        """
        Initialize the heightmap.

        Args:
            resolution: Samples along one side of the grid
            world_size: World-space extents covered by the grid
            world_origin: World-space corner of the grid, defaults to the origin
            heights: Optional initial samples of shape (resolution, resolution)
            dtype: Storage dtype for samples
        """
        if resolution <= 0:
            raise InvalidTerrainSizeError(
                f"Heightmap resolution must be positive, got {resolution}"
            )
        validate_world_size(world_size)

        self._resolution = int(resolution)
        self._world_size = world_size
        self._world_origin = world_origin or WorldPosition(0.0, 0.0, 0.0)

        if heights is None:
            self.heights = np.zeros((resolution, resolution), dtype=dtype)
        else:
            heights = np.asarray(heights, dtype=dtype)
            if heights.shape != (resolution, resolution):
                raise RegionShapeError(
                    f"Initial heights must have shape {(resolution, resolution)}, got {heights.shape}"
                )
            self.heights = heights.copy()

    @property
    def resolution(self) -> int:
        return self._resolution

    @property
    def world_origin(self) -> WorldPosition:
        return self._world_origin

    @property
    def world_size(self) -> WorldPosition:
        return self._world_size

    def get_region(self, x: int, y: int, width: int, height: int) -> np.ndarray:
        """Return a copy of the ``height`` x ``width`` block starting at column x, row y."""
        self._check_bounds(x, y, width, height)
        return self.heights[y : y + height, x : x + width].copy()

    def set_region(self, x: int, y: int, heights: np.ndarray) -> None:
        """Write a block of samples back with its corner at column x, row y."""
        heights = np.asarray(heights)
        if heights.ndim != 2:
            raise RegionShapeError(f"Region must be 2-D, got {heights.ndim}-D")
        rows, cols = heights.shape
        self._check_bounds(x, y, cols, rows)
        self.heights[y : y + rows, x : x + cols] = heights

    def get_interpolated_height(self, x: float, y: float) -> float:
        """
        Bilinearly interpolate a height at a grid coordinate.

        Coordinates are clamped to the grid, so hits beyond the terrain edge
        read the nearest edge sample.
        """
        last = self._resolution - 1
        x = min(max(float(x), 0.0), float(last))
        y = min(max(float(y), 0.0), float(last))

        x0, y0 = int(x), int(y)
        x1, y1 = min(x0 + 1, last), min(y0 + 1, last)
        fx, fy = x - x0, y - y0

        h = self.heights
        top = h[y0, x0] * (1.0 - fx) + h[y0, x1] * fx
        bottom = h[y1, x0] * (1.0 - fx) + h[y1, x1] * fx
        return float(top * (1.0 - fy) + bottom * fy)

    def _check_bounds(self, x: int, y: int, width: int, height: int) -> None:
        if x < 0 or y < 0 or width < 0 or height < 0:
            raise RegionShapeError(
                f"Region ({x}, {y}, {width}x{height}) has a negative origin or size"
            )
        if x + width > self._resolution or y + height > self._resolution:
            raise RegionShapeError(
                f"Region ({x}, {y}, {width}x{height}) exceeds resolution {self._resolution}"
            )
