"""
World-space to heightmap-space coordinate mapping.

The heightmap is addressed on the horizontal plane only: world ``x`` maps to
grid ``x`` (columns) and world ``z`` maps to grid ``y`` (rows). The vertical
world axis never takes part in addressing.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Union

from .exceptions import InvalidTerrainSizeError

Number = Union[int, float]


@dataclass(frozen=True)
class WorldPosition:
    """A point in world space."""

    x: float
    y: float
    z: float

    @classmethod
    def from_sequence(cls, values: Sequence[Number]) -> "WorldPosition":
        x, y, z = values
        return cls(float(x), float(y), float(z))


@dataclass(frozen=True)
class GridPosition:
    """A fractional or integer coordinate in heightmap sample space."""

    x: Number
    y: Number


def validate_world_size(world_size: WorldPosition) -> None:
    """
    Reject a terrain size that cannot be normalized against.

    Only the horizontal extents matter; a flat (zero height) terrain is fine.

    Raises:
        InvalidTerrainSizeError: if the x or z extent is zero or not finite
    """
    for axis in ("x", "z"):
        extent = getattr(world_size, axis)
        if extent == 0 or not math.isfinite(extent):
            raise InvalidTerrainSizeError(
                f"Terrain world size along {axis} must be finite and non-zero, got {extent}"
            )


def world_to_grid(
    world_position: WorldPosition,
    terrain_origin: WorldPosition,
    world_size: WorldPosition,
    resolution: int,
) -> GridPosition:
    """
    Translate a world position into fractional heightmap coordinates.

    Hits outside the terrain are not rejected; they produce coordinates
    outside ``[0, resolution)`` which callers clamp as needed.

    Args:
        world_position: Hit point in world space
        terrain_origin: World-space position of the heightmap's corner
        world_size: World-space extents of the heightmap
        resolution: Number of samples along one side of the grid

    Returns:
        Fractional grid position
    """
    validate_world_size(world_size)

    # Normalize local offset into [0, 1] per axis
    u = (world_position.x - terrain_origin.x) / world_size.x
    v = (world_position.z - terrain_origin.z) / world_size.z

    return GridPosition(u * resolution, v * resolution)


def brush_origin(
    world_position: WorldPosition,
    terrain_origin: WorldPosition,
    world_size: WorldPosition,
    resolution: int,
    brush_width: int,
    brush_height: int,
) -> GridPosition:
    """
    Get the lower-left grid corner of a brush centred on a world position.

    Each axis is clamped to ``[0, resolution]`` before truncation, so the
    result is always a valid integer origin (possibly on the far edge, which
    yields an empty window once the size is clamped).
    """
    grid = world_to_grid(world_position, terrain_origin, world_size, resolution)

    x = _clamp(grid.x - brush_width / 2.0, 0.0, float(resolution))
    y = _clamp(grid.y - brush_height / 2.0, 0.0, float(resolution))

    return GridPosition(int(x), int(y))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))
