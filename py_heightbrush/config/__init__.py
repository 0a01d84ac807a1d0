"""
Configuration for brush sessions and the application environment.
"""

from .brush_settings import BrushAction, BrushSettings, initial_terrain_height
from .config import Settings, get_brush_settings, settings

__all__ = [
    'BrushAction', 'BrushSettings', 'initial_terrain_height',
    'Settings', 'get_brush_settings', 'settings',
]
