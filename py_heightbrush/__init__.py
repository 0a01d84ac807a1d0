"""
py-heightbrush - pointer-driven brush editing for regular-grid heightmaps.
"""

from .config import BrushAction, BrushSettings
from .core import (
    ArrayHeightmap, BrushInput, BrushSession, BrushState, HeightmapEditor,
    WorldPosition, dispatch,
)

__version__ = '0.1.0'
__all__ = [
    'BrushAction', 'BrushSettings',
    'ArrayHeightmap', 'BrushInput', 'BrushSession', 'BrushState',
    'HeightmapEditor', 'WorldPosition', 'dispatch',
]
