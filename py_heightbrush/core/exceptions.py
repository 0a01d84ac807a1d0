"""
Exception types raised by the heightmap brush core.

Per-invocation hazards (an empty brush window, a missing hit point, a still
pointer) are not errors and never raise; only misconfigured terrain and misuse
of the heightmap contract do.
"""


class HeightbrushError(Exception):
    """Base class for all heightbrush errors."""


class InvalidTerrainSizeError(HeightbrushError, ValueError):
    """Terrain world size or resolution cannot be mapped to grid space."""


class RegionShapeError(HeightbrushError, ValueError):
    """A region written back does not fit inside the heightmap."""


class UnknownEasingError(HeightbrushError, KeyError):
    """Requested falloff curve is not registered."""
