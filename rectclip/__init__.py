"""Rectclip - Exact integer polygon clipping to axis-aligned rectangles.

This library clips convex polygons of either winding to a rectangular window
with integer arithmetic, so that polygons sharing an edge are clipped to
identical boundary vertices. Adapters accept vertex lists, numpy arrays and
Shapely polygons.
"""


# Clipping functions
from .clip import (
    clip,
    clip_axis,
    clip_polygon,
    clip_array,
    clip_geometry,
)

# Tiling functions
from .tile import tile_polygon, tile_rectangles

# Metrics
from .metrics import measure_clip, total_clipped_area, coverage_gap

# Core types and configuration
from .core import (
    Vertex,
    ClipAxis,
    ClipRectangle,
    ClipConfig,
    DEFAULT_CONFIG,
)

# Core exceptions
from .core import (
    RectClipError,
    ValidationError,
    BufferCapacityError,
    ConfigurationError,
    ClipWarning,
)

__all__ = [

    # Clipping
    'clip',
    'clip_axis',
    'clip_polygon',
    'clip_array',
    'clip_geometry',

    # Tiling
    'tile_polygon',
    'tile_rectangles',

    # Metrics
    'measure_clip',
    'total_clipped_area',
    'coverage_gap',

    # Core types
    'Vertex',
    'ClipAxis',
    'ClipRectangle',
    'ClipConfig',
    'DEFAULT_CONFIG',

    # Core exceptions
    'RectClipError',
    'ValidationError',
    'BufferCapacityError',
    'ConfigurationError',
    'ClipWarning',
]
