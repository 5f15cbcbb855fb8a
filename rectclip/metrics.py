"""Shared measurement helpers for clipped polygons.

These metrics describe what a clip did to a polygon: how many vertices it
kept, how much area survived, and whether winding and vertex uniqueness were
preserved. Tiled clips are checked for gaps and overlaps through shapely.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Union

from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from .core.geometry_utils import signed_area
from .core.validation_utils import has_duplicate_vertices


def measure_clip(
    source: Sequence,
    clipped: Sequence,
) -> Dict[str, Optional[Union[int, float, bool]]]:
    """Return core metrics comparing ``clipped`` with its ``source`` polygon."""
    source_area = signed_area(source)
    clipped_area = signed_area(clipped)
    visible = len(clipped) >= 3

    area_ratio: Optional[float] = None
    if source_area != 0:
        area_ratio = abs(clipped_area) / abs(source_area)

    winding_preserved: Optional[bool] = None
    if visible and source_area != 0 and clipped_area != 0:
        winding_preserved = (source_area > 0) == (clipped_area > 0)

    return {
        "source_vertices": len(source),
        "clipped_vertices": len(clipped),
        "visible": visible,
        "area": abs(clipped_area),
        "area_ratio": area_ratio,
        "winding_preserved": winding_preserved,
        "has_duplicates": has_duplicate_vertices(clipped),
    }


def total_clipped_area(pieces: Iterable[BaseGeometry]) -> float:
    """Sum the area of ``pieces``, ignoring empty geometries."""
    return sum(piece.area for piece in pieces if piece is not None and not piece.is_empty)


def coverage_gap(original: BaseGeometry, pieces: Iterable[BaseGeometry]) -> float:
    """Area of ``original`` not covered by the union of ``pieces``.

    Zero for a tiling whose pieces meet exactly along their shared edges.
    """
    pieces = [piece for piece in pieces if piece is not None and not piece.is_empty]
    if not pieces:
        return original.area
    return original.difference(unary_union(pieces)).area


__all__ = [
    "measure_clip",
    "total_clipped_area",
    "coverage_gap",
]
