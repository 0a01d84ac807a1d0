"""
Core heightmap brush functionality.
"""

from .coordinates import WorldPosition, GridPosition, world_to_grid, brush_origin
from .brush_window import BrushWindow, safe_brush_size, resolve_brush_window
from .easing import ease_in_out_cubic, get_easing
from .heightmap import HeightmapResource, ArrayHeightmap
from .editor import HeightmapEditor
from .commands import BrushInput, BrushState, BrushSession, dispatch, command_for
from .exceptions import (
    HeightbrushError, InvalidTerrainSizeError, RegionShapeError, UnknownEasingError
)

__all__ = ['WorldPosition', 'GridPosition', 'world_to_grid', 'brush_origin',
           'BrushWindow', 'safe_brush_size', 'resolve_brush_window',
           'ease_in_out_cubic', 'get_easing',
           'HeightmapResource', 'ArrayHeightmap', 'HeightmapEditor',
           'BrushInput', 'BrushState', 'BrushSession', 'dispatch', 'command_for',
           'HeightbrushError', 'InvalidTerrainSizeError', 'RegionShapeError',
           'UnknownEasingError']
