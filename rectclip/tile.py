"""Tiled clipping: cut one polygon against a grid of shared-edge windows."""

import warnings
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple, Union

from shapely.geometry import Polygon

from .clip import clip_polygon
from .core.config import ClipConfig, DEFAULT_CONFIG
from .core.errors import ClipWarning
from .core.geometry_utils import from_shapely, to_shapely
from .core.types import ClipRectangle
from .core.validation_utils import is_convex


def tile_polygon(polygon: Polygon, tile_count: Optional[Union[Tuple[int, int], int]] = None,
                 tile_size: Optional[Union[Tuple[int, int], int]] = None,
                 config: Optional[ClipConfig] = None) -> List[Polygon]:
    """Clip ``polygon`` against every tile of an integer grid over its bounds.

    Neighbouring tiles share their boundary. Tiles are always clipped with
    ``canonical_crossings`` on, so crossing vertices on a shared boundary are
    computed identically for both tiles and the pieces meet without gaps.
    Tiles the polygon does not reach are omitted.
    """
    config = replace(config or DEFAULT_CONFIG, canonical_crossings=True).validated()
    vertices = from_shapely(polygon)
    if not vertices:
        return []

    if config.warn_non_convex and not is_convex(vertices):
        warnings.warn(
            "polygon is not convex; tiled result may be incorrect",
            ClipWarning,
            stacklevel=2,
        )

    xs = [v.x for v in vertices]
    ys = [v.y for v in vertices]
    tiles = tile_rectangles((min(xs), min(ys), max(xs), max(ys)),
                            tile_count=tile_count, tile_size=tile_size)

    pieces = []
    for tile in tiles:
        clipped = clip_polygon(vertices, tile, config)
        if clipped:
            pieces.append(to_shapely(clipped))
    return pieces


def tile_rectangles(bounds: Sequence[int], tile_count: Optional[Union[Tuple[int, int], int]] = None,
                    tile_size: Optional[Union[Tuple[int, int], int]] = None) -> List[ClipRectangle]:
    """Split ``(minx, miny, maxx, maxy)`` into a column-major grid of rectangles.

    Tile sizes are rounded up to whole units; the last column and row are cut
    back to the bounds.
    """
    minx, miny, maxx, maxy = (int(b) for b in bounds)
    width = maxx - minx
    height = maxy - miny

    if tile_count is not None:
        if isinstance(tile_count, int):
            cols = rows = tile_count
        else:
            cols, rows = tile_count
        if cols < 1 or rows < 1:
            raise ValueError(f"tile_count must be positive, got {tile_count}")
        tile_width = max(1, -(-width // cols))
        tile_height = max(1, -(-height // rows))
    elif tile_size is not None:
        if isinstance(tile_size, int):
            tile_width = tile_height = tile_size
        else:
            tile_width, tile_height = tile_size
        if tile_width < 1 or tile_height < 1:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
    else:
        raise ValueError("Either tile_count or tile_size must be provided.")

    cols = max(1, -(-width // tile_width))
    rows = max(1, -(-height // tile_height))

    tiles = []
    for i in range(cols):
        for j in range(rows):
            tile_minx = minx + i * tile_width
            tile_miny = miny + j * tile_height
            tile_maxx = min(tile_minx + tile_width, maxx)
            tile_maxy = min(tile_miny + tile_height, maxy)
            tiles.append(ClipRectangle.from_bounds(tile_minx, tile_miny, tile_maxx, tile_maxy))

    return tiles


__all__ = [
    'tile_polygon',
    'tile_rectangles',
]
