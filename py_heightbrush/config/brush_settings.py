"""
Brush configuration.

This module defines the per-session brush parameters a host passes to the
editing core: brush footprint, the falloff curve used by circular brushes and
the base height the terrain is flattened to when a session starts.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BrushAction(str, Enum):
    """Editing modes a host can select per invocation."""

    FLATTEN = "flatten"
    FLATTEN_ALL = "flatten_all"
    SAMPLE = "sample"
    SAMPLE_AVERAGE = "sample_average"
    CIRCULAR_BRUSH = "circular_brush"


def initial_terrain_height(brush_size: int) -> float:
    """
    Derive the session's starting terrain height from the brush size.

    Uses whole tenths of the brush size as a percentage of the height range,
    so a brush of 25 gives 0.02 and anything under 10 gives 0.0.
    """
    return (brush_size // 10) / 100


class BrushSettings(BaseModel):
    """Settings for one brush editing session."""

    # Footprint
    brush_size: int = Field(default=10, gt=0, description="Brush size in heightmap samples")
    brush_width: Optional[int] = Field(
        default=None, gt=0, description="Brush width override, defaults to brush_size"
    )
    brush_height: Optional[int] = Field(
        default=None, gt=0, description="Brush height override, defaults to brush_size"
    )

    # Heights
    initial_height: Optional[float] = Field(
        default=None,
        description="Height used by flatten-all; derived from brush_size when unset",
    )

    # Behaviour
    falloff: str = Field(default="in_out_cubic", description="Easing curve for circular brushes")
    default_action: BrushAction = Field(
        default=BrushAction.CIRCULAR_BRUSH, description="Action used when the host selects none"
    )

    @property
    def width(self) -> int:
        return self.brush_width if self.brush_width is not None else self.brush_size

    @property
    def height(self) -> int:
        return self.brush_height if self.brush_height is not None else self.brush_size

    @property
    def base_height(self) -> float:
        """Height the whole terrain is flattened to at session start."""
        if self.initial_height is not None:
            return self.initial_height
        return initial_terrain_height(self.brush_size)
