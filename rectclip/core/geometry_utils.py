"""Geometry helpers shared by the clipping adapters and metrics.

Vertices are exchanged with shapely as exterior rings without the closing
coordinate, since the clipper treats every polygon as implicitly closed.
"""

from typing import List, Sequence

import numpy as np
from shapely.geometry import Polygon

from .errors import ValidationError
from .types import Vertex


def signed_area(vertices: Sequence) -> float:
    """Return the shoelace signed area of a closed vertex ring.

    Positive for anticlockwise rings in a y-up frame (clockwise on a y-down
    screen), negative for the opposite winding, 0 for fewer than 3 vertices.

    Examples:
        >>> signed_area([(0, 0), (10, 0), (10, 10), (0, 10)])
        100.0
        >>> signed_area([(0, 10), (10, 10), (10, 0), (0, 0)])
        -100.0
    """
    if len(vertices) < 3:
        return 0.0

    coords = np.asarray(vertices, dtype=np.int64).reshape(-1, 2)
    x = coords[:, 0]
    y = coords[:, 1]
    twice_area = np.sum(x * np.roll(y, -1)) - np.sum(np.roll(x, -1) * y)
    return float(twice_area) / 2.0


def winding(vertices: Sequence) -> int:
    """Return the sign of ``signed_area``: 1, -1, or 0 for degenerate rings."""
    area = signed_area(vertices)
    if area > 0:
        return 1
    if area < 0:
        return -1
    return 0


def as_vertices(vertices: Sequence) -> List[Vertex]:
    """Convert any ``(x, y)`` sequence, including numpy rows, to Vertex list."""
    return [Vertex(int(v[0]), int(v[1])) for v in vertices]


def from_shapely(polygon: Polygon) -> List[Vertex]:
    """Extract the exterior ring of ``polygon`` as integer vertices.

    The closing coordinate is dropped and vertex order is kept, so the ring's
    winding is preserved. Z values are ignored.

    Raises:
        ValidationError: If the polygon has holes or non-integral coordinates

    Examples:
        >>> from_shapely(Polygon([(0, 0), (4, 0), (4, 4)]))
        [Vertex(x=0, y=0), Vertex(x=4, y=0), Vertex(x=4, y=4)]
    """
    if polygon.is_empty:
        return []
    if polygon.interiors:
        raise ValidationError("polygons with holes cannot be clipped as convex polygons")

    coords = np.asarray(polygon.exterior.coords)[:-1, :2]
    if not np.all(np.equal(coords, np.trunc(coords))):
        raise ValidationError("polygon coordinates must be integral")

    return [Vertex(int(x), int(y)) for x, y in coords]


def to_shapely(vertices: Sequence) -> Polygon:
    """Build a shapely polygon from a vertex ring; empty for fewer than 3 vertices."""
    if len(vertices) < 3:
        return Polygon()
    return Polygon([(int(v[0]), int(v[1])) for v in vertices])


__all__ = [
    'signed_area',
    'winding',
    'as_vertices',
    'from_shapely',
    'to_shapely',
]
