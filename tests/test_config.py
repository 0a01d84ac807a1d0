"""
Tests for brush and application settings.
"""

import pytest
from pydantic import ValidationError
from py_heightbrush.config import (
    BrushAction, BrushSettings, Settings, get_brush_settings, initial_terrain_height
)


class TestInitialTerrainHeight:
    """Test deriving the session start height from the brush size."""

    @pytest.mark.parametrize("brush_size,expected", [
        (5, 0.0),
        (10, 0.01),
        (25, 0.02),
        (100, 0.1),
    ])
    def test_whole_tenths(self, brush_size, expected):
        assert initial_terrain_height(brush_size) == pytest.approx(expected)


class TestBrushSettings:
    """Test brush settings defaults and overrides."""

    def test_defaults(self):
        settings = BrushSettings()

        assert settings.width == 10
        assert settings.height == 10
        assert settings.base_height == pytest.approx(0.01)
        assert settings.falloff == "in_out_cubic"
        assert settings.default_action is BrushAction.CIRCULAR_BRUSH

    def test_size_overrides(self):
        settings = BrushSettings(brush_size=8, brush_width=12)

        assert settings.width == 12
        assert settings.height == 8

    def test_initial_height_override(self):
        """An explicit start height wins over the derived one."""
        assert BrushSettings(brush_size=50, initial_height=0.4).base_height == 0.4
        assert BrushSettings(brush_size=50, initial_height=0.0).base_height == 0.0

    def test_invalid_size(self):
        with pytest.raises(ValidationError):
            BrushSettings(brush_size=0)
        with pytest.raises(ValidationError):
            BrushSettings(brush_width=-3)

    def test_action_from_name(self):
        assert BrushSettings(default_action="flatten").default_action is BrushAction.FLATTEN


class TestSettings:
    """Test environment driven application settings."""

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("HEIGHTBRUSH_BRUSH_SIZE", "40")
        monkeypatch.setenv("HEIGHTBRUSH_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.brush_size == 40
        assert settings.log_level == "DEBUG"

    def test_get_brush_settings(self):
        brush = get_brush_settings(Settings(brush_size=30, falloff="in_out_back"))

        assert brush.brush_size == 30
        assert brush.base_height == pytest.approx(0.03)
        assert brush.falloff == "in_out_back"
