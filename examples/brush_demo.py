#!/usr/bin/env python3
"""
Simple demo script showing brush editing on an in-memory heightmap.
"""

import numpy as np
from py_heightbrush import (
    ArrayHeightmap, BrushAction, BrushInput, BrushSession, HeightmapEditor, WorldPosition
)
from py_heightbrush.config import get_brush_settings, settings
from py_heightbrush.utils import configure_logging


def describe(heights, label):
    """Print summary statistics for a heightmap."""
    print(f"\n{label}:")
    print(f"  Height range: {heights.min():.3f}-{heights.max():.3f}")
    print(f"  Average height: {heights.mean():.4f}")
    print(f"  Raised samples: {np.sum(heights > heights.min())}")


def main():
    """Demonstrate a short brush session."""
    configure_logging(settings.log_level, settings.log_format)

    print("Py-Heightbrush Demo")
    print("=" * 40)

    # 1 km square terrain sampled at 129x129
    heightmap = ArrayHeightmap(
        129,
        world_size=WorldPosition(1000.0, 300.0, 1000.0),
        world_origin=WorldPosition(-500.0, 0.0, -500.0),
    )
    brush = get_brush_settings().model_copy(update={"brush_size": 24})
    session = BrushSession(HeightmapEditor(heightmap, brush))
    session.start()
    describe(heightmap.heights, f"Flattened to base height {brush.base_height}")

    # Drag the circular brush along a line
    for step in range(12):
        x = -300.0 + step * 50.0
        session.handle(
            BrushInput(WorldPosition(x, 0.0, 0.0), pointer_delta=(1.0, 0.0)),
            BrushAction.CIRCULAR_BRUSH,
        )
    describe(heightmap.heights, "After circular brush stroke")

    # Pick up a height and stamp a plateau with it
    session.handle(BrushInput(WorldPosition(0.0, 0.0, 0.0)), BrushAction.SAMPLE_AVERAGE)
    print(f"\nSampled average height: {session.state.sampled_height:.4f}")
    session.handle(BrushInput(WorldPosition(250.0, 0.0, 250.0)), BrushAction.FLATTEN)
    describe(heightmap.heights, "After flattening a plateau")


if __name__ == "__main__":
    main()
