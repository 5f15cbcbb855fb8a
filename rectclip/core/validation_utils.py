"""Precondition checks for the clipping routines.

Each ``check_*`` helper is O(1) except ``check_coordinate_range``, which
walks the polygon once and only runs when a fixed coordinate width is
configured.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import BufferCapacityError, ValidationError
from .types import ClipRectangle


def check_count(source: Sequence, count: int) -> None:
    """Check that ``count`` names at least one vertex held by ``source``.

    Raises:
        ValidationError: If ``count`` is not positive or exceeds ``len(source)``

    Examples:
        >>> check_count([(0, 0), (1, 0), (1, 1)], 3)
        >>> check_count([(0, 0)], 0)
        Traceback (most recent call last):
        ...
        rectclip.core.errors.ValidationError: vertex count must be at least 1, got 0
    """
    if count < 1:
        raise ValidationError(f"vertex count must be at least 1, got {count}")
    if count > len(source):
        raise ValidationError(
            f"vertex count {count} exceeds source length {len(source)}"
        )


def check_rectangle(rect: ClipRectangle) -> None:
    """Check that the rectangle bounds are ordered on both axes."""
    if rect.left > rect.right:
        raise ValidationError(
            f"clip rectangle left ({rect.left}) is greater than right ({rect.right})"
        )
    if rect.top > rect.bottom:
        raise ValidationError(
            f"clip rectangle top ({rect.top}) is greater than bottom ({rect.bottom})"
        )


def check_capacity(buffer: Sequence, count: int, name: str = "buffer") -> None:
    """Check that ``buffer`` can hold the ``2 * count`` vertices a pass may emit."""
    required = 2 * count
    if len(buffer) < required:
        raise BufferCapacityError(
            f"{name} holds {len(buffer)} vertices, at least {required} required",
            capacity=len(buffer),
            required=required,
        )


def check_coordinate_range(
    source: Sequence,
    count: int,
    rect: ClipRectangle,
    coordinate_range: Optional[Tuple[int, int]],
) -> None:
    """Check that source coordinates and rectangle bounds fit ``coordinate_range``.

    Args:
        source: Vertex sequence
        count: Number of vertices of ``source`` to check
        rect: Clip rectangle
        coordinate_range: Inclusive ``(min, max)``; ``None`` disables the check

    Raises:
        ValidationError: If any value lies outside the range
    """
    if coordinate_range is None:
        return
    lo, hi = coordinate_range

    for name, value in zip(("left", "right", "top", "bottom"),
                           (rect.left, rect.right, rect.top, rect.bottom)):
        if not lo <= value <= hi:
            raise ValidationError(
                f"clip rectangle {name} ({value}) outside coordinate range [{lo}, {hi}]"
            )

    for i in range(count):
        x, y = int(source[i][0]), int(source[i][1])
        if not (lo <= x <= hi and lo <= y <= hi):
            raise ValidationError(
                f"vertex {i} ({x}, {y}) outside coordinate range [{lo}, {hi}]"
            )


def has_duplicate_vertices(vertices: Sequence) -> bool:
    """Check for consecutive coordinate-identical vertices.

    The polygon is treated as closed, so the last vertex is compared with the
    first.

    Examples:
        >>> has_duplicate_vertices([(0, 0), (1, 0), (1, 1), (0, 0)])
        True
        >>> has_duplicate_vertices([(0, 0), (1, 0), (1, 1)])
        False
    """
    n = len(vertices)
    if n < 2:
        return False

    for i in range(n):
        a = vertices[i]
        b = vertices[(i + 1) % n]
        if a[0] == b[0] and a[1] == b[1]:
            return True

    return False


def is_convex(vertices: Sequence) -> bool:
    """Check that a closed vertex ring turns consistently in one direction.

    Collinear vertices are accepted. Self-intersecting rings that happen to
    turn consistently (e.g. a pentagram) are not detected.

    Examples:
        >>> is_convex([(0, 0), (4, 0), (4, 4), (0, 4)])
        True
        >>> is_convex([(0, 0), (4, 0), (1, 1), (0, 4)])
        False
    """
    coords = np.asarray(vertices, dtype=np.int64).reshape(-1, 2)
    if len(coords) < 4:
        return True

    edges = np.roll(coords, -1, axis=0) - coords
    following = np.roll(edges, -1, axis=0)
    cross = edges[:, 0] * following[:, 1] - edges[:, 1] * following[:, 0]

    return not (np.any(cross > 0) and np.any(cross < 0))


__all__ = [
    'check_count',
    'check_rectangle',
    'check_capacity',
    'check_coordinate_range',
    'has_duplicate_vertices',
    'is_convex',
]
