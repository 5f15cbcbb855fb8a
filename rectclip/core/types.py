"""Type definitions for rectclip operations.

This module defines the value types shared by the clipping routines: the
integer vertex, the axis-aligned clip rectangle and the axis enum used to
instantiate the per-axis pass.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Sequence, Tuple

from shapely.geometry import Polygon, box


class Vertex(NamedTuple):
    """A 2D point with integer coordinates.

    Two vertices with equal coordinates are indistinguishable.

    Examples:
        >>> Vertex(3, 4)
        Vertex(x=3, y=4)
        >>> Vertex(3, 4) == (3, 4)
        True
    """
    x: int
    y: int


class ClipAxis(Enum):
    """Axis clipped by a single pass.

    Attributes:
        X: First axis, clipped against left/right
        Y: Second axis, clipped against top/bottom

    Examples:
        >>> from rectclip import clip_axis, ClipAxis
        >>> square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        >>> buffer = [None] * 8
        >>> clip_axis(square, 4, 5, 15, buffer, axis=ClipAxis.X)
        4
    """
    X = 'x'
    Y = 'y'

    @property
    def index(self) -> int:
        """Coordinate index of the clipped axis within a vertex."""
        return 0 if self is ClipAxis.X else 1

    @property
    def other(self) -> int:
        """Coordinate index of the axis carried through unchanged."""
        return 1 - self.index


@dataclass(frozen=True)
class ClipRectangle:
    """Axis-aligned clip window.

    ``top`` is the minimum of the second axis and ``bottom`` its maximum
    (screen convention). Bounds are inclusive: a vertex lying exactly on a
    bound is inside.

    Attributes:
        left: Minimum x
        right: Maximum x
        top: Minimum y
        bottom: Maximum y

    Examples:
        >>> rect = ClipRectangle(left=0, right=10, top=0, bottom=5)
        >>> rect.contains((10, 5))
        True
        >>> rect.bounds
        (0, 0, 10, 5)
    """
    left: int
    right: int
    top: int
    bottom: int

    @classmethod
    def from_bounds(cls, minx: int, miny: int, maxx: int, maxy: int) -> "ClipRectangle":
        """Build a rectangle from shapely-ordered ``(minx, miny, maxx, maxy)``."""
        return cls(left=minx, right=maxx, top=miny, bottom=maxy)

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def axis_bounds(self, axis: ClipAxis) -> Tuple[int, int]:
        """Return the ``(low, high)`` pair clipped against on ``axis``."""
        if axis is ClipAxis.X:
            return self.left, self.right
        return self.top, self.bottom

    def contains(self, vertex: Sequence[int]) -> bool:
        x, y = vertex[0], vertex[1]
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def to_polygon(self) -> Polygon:
        """Return the rectangle as a shapely box."""
        return box(self.left, self.top, self.right, self.bottom)


__all__ = [
    'Vertex',
    'ClipAxis',
    'ClipRectangle',
]
