"""Two-pass, two-axis polygon clipping.

This module clips convex polygons, wound in either direction, to an
axis-aligned rectangle using integer arithmetic. The polygon is clipped to the
left/right bounds into a scratch buffer, then to the top/bottom bounds into the
output buffer. Each pass walks the edges once and classifies every edge by its
direction along the clipped axis, so the bound crossed first is always tested
first. A crossing is interpolated from the edge endpoint lying beyond the
bound, so an edge crossing a single bound yields the same vertex for two
polygons sharing it whatever their windings. With
``ClipConfig.canonical_crossings`` every crossing is interpolated from the
endpoint lower on the clipped axis instead, which also makes windows sharing
a bound agree.

The low-level entry points (``clip_axis`` and ``clip``) write into
caller-supplied buffers and never allocate. The adapters at the bottom of the
module (``clip_polygon``, ``clip_array``, ``clip_geometry``) allocate their own
buffers and accept plain vertex lists, numpy arrays and shapely polygons.
"""

import warnings
from typing import List, Optional, Sequence

import numpy as np
from shapely.geometry import Polygon

from .core.config import ClipConfig, DEFAULT_CONFIG
from .core.errors import BufferCapacityError, ClipWarning, ValidationError
from .core.geometry_utils import from_shapely, to_shapely
from .core.types import ClipAxis, ClipRectangle, Vertex
from .core.validation_utils import (
    check_capacity,
    check_coordinate_range,
    check_count,
    check_rectangle,
    is_convex,
)


# ============================================================================
# Private helpers
# ============================================================================

def _vertex(source: Sequence, index: int) -> Vertex:
    # int() widens numpy fixed-width scalars before any arithmetic
    item = source[index]
    return Vertex(int(item[0]), int(item[1]))


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, as fixed-point hardware does."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def _crossing(outside: Vertex, toward: Vertex, bound: int, axis: ClipAxis) -> Vertex:
    """Internal function: Vertex where edge ``outside -> toward`` meets ``bound``.

    The axis coordinate is set to ``bound`` exactly; the other coordinate is
    ``o1 + (o2 - o1) * (bound - c1) / (c2 - c1)`` starting from ``outside``,
    with truncating division.

    Args:
        outside: Edge endpoint lying beyond ``bound``
        toward: Other end of the edge, differing from ``outside`` on the axis
        bound: Bound value on the clipped axis
        axis: Clipped axis

    Returns:
        Crossing vertex
    """
    a = axis.index
    o = axis.other
    other = outside[o] + _trunc_div(
        (toward[o] - outside[o]) * (bound - outside[a]),
        toward[a] - outside[a],
    )
    if axis is ClipAxis.X:
        return Vertex(bound, other)
    return Vertex(other, bound)


def _canonical_crossing(p: Vertex, q: Vertex, bound: int, axis: ClipAxis) -> Vertex:
    # Anchored at the endpoint lower on the axis: depends only on edge and bound
    if p[axis.index] > q[axis.index]:
        p, q = q, p
    return _crossing(p, q, bound, axis)


# ============================================================================
# Buffer-level clipping
# ============================================================================

def clip_axis(
    source: Sequence,
    count: int,
    low: int,
    high: int,
    output,
    axis: ClipAxis = ClipAxis.X,
    canonical: bool = False,
) -> int:
    """Clip a polygon to the slab ``low <= c <= high`` of one axis.

    Edges are walked in order, ``source[0] -> source[1]`` through
    ``source[count - 1] -> source[0]``. For each edge:

    - an edge lying entirely beyond one bound emits nothing;
    - its start vertex is emitted unchanged if inside, otherwise the crossing
      with the near bound, interpolated from the start vertex, is emitted in
      its place;
    - if its end vertex lies beyond the far bound, the crossing with that
      bound is emitted as well, interpolated from the end vertex toward the
      (possibly clipped) start.

    With ``canonical`` set, both crossings are instead interpolated from the
    edge endpoint lower on ``axis`` using the unclipped endpoints, so a
    crossing depends only on the edge and the bound.

    A vertex equal to the previously emitted one is not written again, and
    the closing vertex is dropped when it equals the first, so vertices lying
    exactly on a bound appear once.

    Args:
        source: Vertices to clip, as Vertex, ``(x, y)`` tuples or numpy rows
        count: Number of vertices of ``source`` forming the polygon (>= 1)
        low: Lower bound on ``axis``
        high: Upper bound on ``axis`` (``low <= high``)
        output: Mutable buffer receiving the clipped vertices; never resized
        axis: Axis to clip on
        canonical: Anchor crossings at the lower endpoint of the edge

    Returns:
        Number of vertices written to ``output``

    Raises:
        BufferCapacityError: If ``output`` fills up before the pass ends

    Examples:
        >>> buffer = [None] * 8
        >>> clip_axis([(0, 0), (10, 0), (10, 10), (0, 10)], 4, 5, 15, buffer)
        4
        >>> buffer[:4]
        [Vertex(x=5, y=0), Vertex(x=10, y=0), Vertex(x=10, y=10), Vertex(x=5, y=10)]
    """
    a = axis.index
    cross = _canonical_crossing if canonical else _crossing
    capacity = len(output)
    emitted = 0
    first = None
    last = None

    previous = _vertex(source, 0)
    for i in range(1, count + 1):
        p1 = previous
        p2 = _vertex(source, i % count)
        previous = p2
        c1 = p1[a]
        c2 = p2[a]

        if c1 > c2:
            # Descending: high is met first
            if c1 < low or c2 > high:
                continue
            start = cross(p1, p2, high, axis) if c1 > high else p1
            end = cross(p2, p1 if canonical else start, low, axis) if c2 < low else None
        else:
            if c2 < low or c1 > high:
                continue
            start = cross(p1, p2, low, axis) if c1 < low else p1
            end = cross(p2, p1 if canonical else start, high, axis) if c2 > high else None

        for vertex in (start, end):
            if vertex is None or vertex == last:
                continue
            if emitted >= capacity:
                raise BufferCapacityError(
                    f"{axis.value}-axis pass needs more than {capacity} output vertices",
                    capacity=capacity,
                    required=emitted + 1,
                )
            output[emitted] = vertex
            emitted += 1
            last = vertex
            if first is None:
                first = vertex

    if emitted > 1 and last == first:
        emitted -= 1

    return emitted


def clip(
    source: Sequence,
    count: int,
    rect: ClipRectangle,
    scratch,
    output,
    config: Optional[ClipConfig] = None,
) -> int:
    """Clip a convex polygon to ``rect`` using caller-supplied buffers.

    The x-axis pass writes into ``scratch``; unless fewer than 3 vertices
    survive it, the y-axis pass then clips ``scratch`` into ``output``.

    Args:
        source: Polygon vertices, either winding
        count: Number of vertices of ``source`` to use
        rect: Clip rectangle
        scratch: Intermediate buffer, capacity >= ``2 * count``
        output: Result buffer, capacity >= ``2 * count``
        config: Precondition settings (default: ``DEFAULT_CONFIG``)

    Returns:
        Number of vertices in ``output``. Below 3 the polygon is not visible
        and ``output`` holds nothing usable.

    Raises:
        ValidationError: If count, rectangle or coordinates are invalid
        BufferCapacityError: If a buffer is too small

    Examples:
        >>> square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        >>> scratch, output = [None] * 8, [None] * 8
        >>> n = clip(square, 4, ClipRectangle(left=5, right=15, top=-5, bottom=5), scratch, output)
        >>> output[:n]
        [Vertex(x=5, y=0), Vertex(x=10, y=0), Vertex(x=10, y=5), Vertex(x=5, y=5)]
    """
    config = (config or DEFAULT_CONFIG).validated()

    if config.validate:
        check_count(source, count)
        check_rectangle(rect)
        check_capacity(scratch, count, "scratch")
        check_capacity(output, count, "output")
        check_coordinate_range(source, count, rect, config.coordinate_range)

    canonical = config.canonical_crossings
    low, high = rect.axis_bounds(ClipAxis.X)
    count = clip_axis(source, count, low, high, scratch, ClipAxis.X, canonical)
    if count < 3:
        return count

    low, high = rect.axis_bounds(ClipAxis.Y)
    return clip_axis(scratch, count, low, high, output, ClipAxis.Y, canonical)


# ============================================================================
# Allocating adapters
# ============================================================================

def _buffer_size(count: int) -> int:
    # A triangle can gain four vertices, one per rectangle corner
    return max(2 * count, count + 4)


def clip_polygon(
    vertices: Sequence,
    rect: ClipRectangle,
    config: Optional[ClipConfig] = None,
) -> List[Vertex]:
    """Clip a vertex list to ``rect``.

    Args:
        vertices: Convex polygon as ``(x, y)`` integer pairs, either winding
        rect: Clip rectangle
        config: Precondition settings

    Returns:
        Visible polygon in the input's winding order, or ``[]`` if not visible

    Examples:
        >>> clip_polygon([(0, 0), (20, 0), (10, 20)], ClipRectangle(-10, -1, 0, 20))
        []
    """
    size = _buffer_size(len(vertices))
    scratch: List[Vertex] = [Vertex(0, 0)] * size
    output: List[Vertex] = [Vertex(0, 0)] * size

    count = clip(vertices, len(vertices), rect, scratch, output, config)
    if count < 3:
        return []
    return output[:count]


def clip_array(
    coords: np.ndarray,
    rect: ClipRectangle,
    config: Optional[ClipConfig] = None,
) -> np.ndarray:
    """Clip an ``(N, 2)`` integer coordinate array to ``rect``.

    Args:
        coords: Integer array of polygon vertices (Nx2)
        rect: Clip rectangle
        config: Precondition settings

    Returns:
        ``int64`` array of the visible polygon (Mx2), or an empty (0x2) array

    Raises:
        ValidationError: If ``coords`` is not a two-column integer array
    """
    coords = np.asarray(coords)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValidationError(f"expected an (N, 2) coordinate array, got shape {coords.shape}")
    if not np.issubdtype(coords.dtype, np.integer):
        raise ValidationError(f"expected integer coordinates, got dtype {coords.dtype}")

    size = _buffer_size(len(coords))
    scratch = np.zeros((size, 2), dtype=np.int64)
    output = np.zeros((size, 2), dtype=np.int64)

    count = clip(coords, len(coords), rect, scratch, output, config)
    if count < 3:
        return np.empty((0, 2), dtype=np.int64)
    return output[:count].copy()


def clip_geometry(
    polygon: Polygon,
    rect: ClipRectangle,
    config: Optional[ClipConfig] = None,
) -> Polygon:
    """Clip a shapely polygon with integral coordinates to ``rect``.

    The exterior ring keeps its orientation. Non-convex polygons are clipped
    anyway, but a ``ClipWarning`` is issued since the result is not
    guaranteed to be correct.

    Args:
        polygon: Convex shapely Polygon without holes
        rect: Clip rectangle
        config: Precondition settings

    Returns:
        Clipped polygon, or an empty Polygon if nothing is visible

    Raises:
        ValidationError: If the polygon has holes or non-integral coordinates

    Examples:
        >>> poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        >>> clip_geometry(poly, ClipRectangle(left=5, right=15, top=-5, bottom=5)).area
        25.0
    """
    config = (config or DEFAULT_CONFIG).validated()

    vertices = from_shapely(polygon)
    if not vertices:
        return Polygon()

    if config.warn_non_convex and not is_convex(vertices):
        warnings.warn(
            "polygon is not convex; clipped result may be incorrect",
            ClipWarning,
            stacklevel=2,
        )

    return to_shapely(clip_polygon(vertices, rect, config))


__all__ = [
    'clip_axis',
    'clip',
    'clip_polygon',
    'clip_array',
    'clip_geometry',
]
