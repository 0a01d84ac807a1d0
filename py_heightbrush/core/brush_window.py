"""
Brush window resolution and clamping.

A brush window is the rectangle of heightmap samples one operation reads and
writes. Windows are clamped by shrinking their size, never by moving their
origin, so a brush dragged past the far edge of the terrain loses its outer
rows and columns.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .coordinates import WorldPosition, brush_origin, world_to_grid


@dataclass(frozen=True)
class BrushWindow:
    """Origin and size of a rectangular region of the heightmap."""

    x: int
    y: int
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def size(self) -> int:
        """Number of samples covered by the window."""
        if self.is_empty:
            return 0
        return self.width * self.height


def safe_brush_size(
    origin_x: int, origin_y: int, width: int, height: int, resolution: int
) -> Tuple[int, int]:
    """
    Shrink a brush size so the window stays inside the grid.

    Args:
        origin_x: Window origin column
        origin_y: Window origin row
        width: Requested window width in samples
        height: Requested window height in samples
        resolution: Number of samples along one side of the grid

    Returns:
        Tuple of (width, height), each reduced until
        ``origin + size <= resolution`` and never below zero
    """
    while width > 0 and resolution - (origin_x + width) < 0:
        width -= 1

    while height > 0 and resolution - (origin_y + height) < 0:
        height -= 1

    return max(width, 0), max(height, 0)


def resolve_brush_window(
    world_position: WorldPosition,
    terrain_origin: WorldPosition,
    world_size: WorldPosition,
    resolution: int,
    brush_width: int,
    brush_height: int,
) -> BrushWindow:
    """
    Centre a brush on a world position and clamp it to the grid.

    A hit that does not map to a finite grid coordinate gives an empty window.
    """
    grid = world_to_grid(world_position, terrain_origin, world_size, resolution)
    if not (math.isfinite(grid.x) and math.isfinite(grid.y)):
        return BrushWindow(0, 0, 0, 0)

    origin = brush_origin(
        world_position, terrain_origin, world_size, resolution, brush_width, brush_height
    )
    width, height = safe_brush_size(
        origin.x, origin.y, brush_width, brush_height, resolution
    )
    return BrushWindow(origin.x, origin.y, width, height)
