"""
Brush editing operations on a heightmap.

This module implements the editing side of the brush tool: flattening a
window or the whole terrain, sampling a single height or a window average,
and painting a circular brush whose strength follows an easing curve from
the brush centre outwards.

Every operation is a single synchronous read-modify-write pass over one
window of the heightmap. The editor keeps no state between calls; hosts
thread values such as the last sampled height through explicitly.
"""

import math
from typing import Optional, Tuple

import numpy as np

from ..config.brush_settings import BrushSettings
from ..utils.logging_config import get_logger
from .brush_window import BrushWindow, resolve_brush_window
from .coordinates import WorldPosition, validate_world_size, world_to_grid
from .easing import get_easing
from .exceptions import InvalidTerrainSizeError
from .heightmap import HeightmapResource

logger = get_logger(__name__)


class HeightmapEditor:
    """
    Applies brush operations to a heightmap resource.

    The heightmap is validated once here so per-call coordinate mapping
    cannot divide by a zero terrain extent.
    """

    def __init__(self, heightmap: HeightmapResource, settings: Optional[BrushSettings] = None):
        """
        Initialize the editor.

        Args:
            heightmap: Terrain samples to edit
            settings: Brush settings, defaults to ``BrushSettings()``

        Raises:
            InvalidTerrainSizeError: if the heightmap has a non-positive
                resolution or a zero horizontal extent
            UnknownEasingError: if the configured falloff is not registered
        """
        if heightmap.resolution <= 0:
            raise InvalidTerrainSizeError(
                f"Heightmap resolution must be positive, got {heightmap.resolution}"
            )
        validate_world_size(heightmap.world_size)

        self.heightmap = heightmap
        self.settings = settings or BrushSettings()
        self.easing = get_easing(self.settings.falloff)

    @property
    def resolution(self) -> int:
        return self.heightmap.resolution

    def brush_window(
        self, world_position: WorldPosition, brush_width: int, brush_height: int
    ) -> BrushWindow:
        """Get the clamped window a brush centred on ``world_position`` covers."""
        return resolve_brush_window(
            world_position,
            self.heightmap.world_origin,
            self.heightmap.world_size,
            self.resolution,
            brush_width,
            brush_height,
        )

    def flatten_region(
        self,
        world_position: WorldPosition,
        height: float,
        brush_width: int,
        brush_height: int,
    ) -> BrushWindow:
        """
        Set every sample under the brush to ``height``.

        Heights are assigned as given, without blending or range checks.

        Returns:
            The window that was written, possibly empty
        """
        window = self.brush_window(world_position, brush_width, brush_height)
        if window.is_empty:
            logger.warning("Flatten skipped, brush window is empty", window=window)
            return window

        heights = self.heightmap.get_region(window.x, window.y, window.width, window.height)
        heights[:, :] = height
        self.heightmap.set_region(window.x, window.y, heights)

        logger.debug("Flattened region", window=window, height=height)
        return window

    def flatten_all(self, height: float) -> BrushWindow:
        """Set every sample of the heightmap to ``height``."""
        size = self.resolution
        window = BrushWindow(0, 0, size, size)

        heights = self.heightmap.get_region(0, 0, size, size)
        heights[:, :] = height
        self.heightmap.set_region(0, 0, heights)

        logger.info("Flattened terrain", height=height, resolution=size)
        return window

    def sample_point(self, world_position: WorldPosition) -> Optional[float]:
        """
        Read the terrain height under a world position.

        The grid coordinate is truncated to whole samples before reading.
        Returns None for a non-finite position.
        """
        grid = world_to_grid(
            world_position,
            self.heightmap.world_origin,
            self.heightmap.world_size,
            self.resolution,
        )
        if not (math.isfinite(grid.x) and math.isfinite(grid.y)):
            logger.warning("Sample skipped, hit point is not finite", position=world_position)
            return None

        height = self.heightmap.get_interpolated_height(int(grid.x), int(grid.y))
        logger.debug("Sampled height", grid_x=int(grid.x), grid_y=int(grid.y), height=height)
        return height

    def sample_area_average(
        self, world_position: WorldPosition, brush_width: int, brush_height: int
    ) -> Optional[float]:
        """
        Average the samples under the brush.

        Returns:
            Arithmetic mean of the window, or None if the window is empty
        """
        window = self.brush_window(world_position, brush_width, brush_height)
        if window.is_empty:
            logger.warning("Average sample skipped, brush window is empty", window=window)
            return None

        heights = self.heightmap.get_region(window.x, window.y, window.width, window.height)
        average = float(np.mean(heights, dtype=np.float64))

        logger.debug("Sampled average height", window=window, height=average)
        return average

    def apply_circular_brush(
        self,
        world_position: WorldPosition,
        brush_width: int,
        brush_height: int,
        pointer_delta: Tuple[float, float] = (0.0, 0.0),
        falloff: Optional[str] = None,
    ) -> Optional[BrushWindow]:
        """
        Raise terrain inside a circle towards an eased radial profile.

        The circle's radius is half the clamped window width. For each lattice
        point of one quarter-disk the strength is the easing curve applied to
        its distance from the centre over the window width; a strength of
        exactly zero (the centre) is replaced by the strength at distance
        ``sqrt(2)``. The strength is mirrored into all four quadrants and a
        sample only takes it when the sample is not already at least as high.

        Args:
            world_position: Brush centre in world space
            brush_width: Requested brush width in samples
            brush_height: Requested brush height in samples
            pointer_delta: Pointer movement since the last event; a still
                pointer paints nothing
            falloff: Name of the easing curve to use instead of the
                editor's configured one

        Returns:
            The window written back, or None when nothing was painted
        """
        if not any(pointer_delta):
            return None

        window = self.brush_window(world_position, brush_width, brush_height)
        if window.is_empty:
            logger.warning("Circular brush skipped, brush window is empty", window=window)
            return None

        heights = self.heightmap.get_region(window.x, window.y, window.width, window.height)

        easing = get_easing(falloff) if falloff else self.easing
        rows, cols, strengths = self._quarter_disk_strengths(window.width, easing)
        if strengths.size:
            # A window clipped at the grid edge can be shorter than the circle
            inside = (rows < heights.shape[0]) & (cols < heights.shape[1])
            np.fmax.at(
                heights,
                (rows[inside], cols[inside]),
                strengths[inside].astype(heights.dtype),
            )

        self.heightmap.set_region(window.x, window.y, heights)

        logger.debug("Applied circular brush", window=window, radius=window.width // 2)
        return window

    def _quarter_disk_strengths(self, width: int, easing) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Build window indices and strengths for all four mirrored quadrants.

        Returns:
            Tuple of (rows, cols, strengths) flat arrays, one entry per
            mirrored sample
        """
        r = width // 2
        rr = r * r

        y, x = np.mgrid[0:r, 0:r]
        in_circle = (x * x + y * y) <= rr
        x = x[in_circle]
        y = y[in_circle]

        distance = np.sqrt(x * x + y * y)
        strength = np.asarray(easing(distance / width), dtype=np.float64)

        # The easing curve is zero at the centre; use the diagonal neighbour's strength
        baseline = float(easing(math.sqrt(2.0) / width))
        strength = np.where(strength == 0, baseline, strength)

        rows = np.concatenate([r + y, r + y, r - y, r - y])
        cols = np.concatenate([r + x, r - x, r - x, r + x])
        strengths = np.tile(strength, 4)

        return rows, cols, strengths
