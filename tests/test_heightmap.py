"""
Tests for the in-memory heightmap resource.
"""

import numpy as np
import pytest
from py_heightbrush.core.coordinates import WorldPosition
from py_heightbrush.core.exceptions import InvalidTerrainSizeError, RegionShapeError
from py_heightbrush.core.heightmap import ArrayHeightmap, HeightmapResource


class TestArrayHeightmap:
    """Test region access and interpolation."""

    @pytest.fixture
    def heightmap(self):
        """Create an 8x8 heightmap with distinct samples."""
        heights = np.arange(64, dtype=np.float32).reshape(8, 8) / 64.0
        return ArrayHeightmap(8, WorldPosition(8.0, 1.0, 8.0), heights=heights)

    def test_satisfies_protocol(self, heightmap):
        assert isinstance(heightmap, HeightmapResource)
        assert heightmap.resolution == 8
        assert heightmap.world_origin == WorldPosition(0.0, 0.0, 0.0)

    def test_initial_heights_zero(self):
        heightmap = ArrayHeightmap(4, WorldPosition(4.0, 1.0, 4.0))

        assert heightmap.heights.shape == (4, 4)
        assert heightmap.heights.dtype == np.float32
        assert np.all(heightmap.heights == 0)

    def test_get_region_row_major(self, heightmap):
        """Regions are indexed [row, column] with rows along y."""
        region = heightmap.get_region(2, 5, 3, 2)

        assert region.shape == (2, 3)
        assert region[0, 0] == heightmap.heights[5, 2]
        assert region[1, 2] == heightmap.heights[6, 4]

    def test_get_region_is_copy(self, heightmap):
        """Edits to a region only land once written back."""
        region = heightmap.get_region(0, 0, 2, 2)
        region[:, :] = 9.0

        assert not np.any(heightmap.heights == 9.0)

        heightmap.set_region(0, 0, region)
        assert np.all(heightmap.heights[0:2, 0:2] == 9.0)

    def test_empty_region(self, heightmap):
        region = heightmap.get_region(8, 0, 0, 4)

        assert region.shape == (4, 0)
        heightmap.set_region(8, 0, region)

    def test_region_out_of_bounds(self, heightmap):
        with pytest.raises(RegionShapeError):
            heightmap.get_region(6, 0, 3, 1)
        with pytest.raises(RegionShapeError):
            heightmap.set_region(0, 7, np.zeros((2, 2)))
        with pytest.raises(RegionShapeError):
            heightmap.get_region(-1, 0, 1, 1)
        with pytest.raises(RegionShapeError):
            heightmap.set_region(0, 0, np.zeros(4))

    def test_interpolated_height_on_samples(self, heightmap):
        """Integer coordinates read the sample itself."""
        assert heightmap.get_interpolated_height(3, 2) == pytest.approx(heightmap.heights[2, 3])
        assert heightmap.get_interpolated_height(7, 7) == pytest.approx(heightmap.heights[7, 7])

    def test_interpolated_height_between_samples(self, heightmap):
        expected = (heightmap.heights[1, 1] + heightmap.heights[1, 2]) / 2

        assert heightmap.get_interpolated_height(1.5, 1) == pytest.approx(expected)

    def test_interpolated_height_clamped(self, heightmap):
        """Reads beyond the grid use the nearest edge sample."""
        assert heightmap.get_interpolated_height(-4, 20) == pytest.approx(heightmap.heights[7, 0])

    def test_invalid_construction(self):
        with pytest.raises(InvalidTerrainSizeError):
            ArrayHeightmap(0, WorldPosition(1.0, 1.0, 1.0))
        with pytest.raises(InvalidTerrainSizeError):
            ArrayHeightmap(4, WorldPosition(0.0, 1.0, 1.0))
        with pytest.raises(RegionShapeError):
            ArrayHeightmap(4, WorldPosition(4.0, 1.0, 4.0), heights=np.zeros((3, 4)))
