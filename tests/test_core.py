"""Tests for core types, configuration and helper utilities."""

import numpy as np
import pytest
from shapely.geometry import Polygon

from rectclip.core import ClipAxis, ClipConfig, ClipRectangle, ConfigurationError, ValidationError, Vertex
from rectclip.core.geometry_utils import as_vertices, from_shapely, signed_area, to_shapely, winding
from rectclip.core.validation_utils import (
    check_capacity,
    check_count,
    check_rectangle,
    has_duplicate_vertices,
    is_convex,
)
from rectclip.core.errors import BufferCapacityError


class TestClipRectangle:
    """Test ClipRectangle dataclass."""

    def test_from_bounds(self):
        rect = ClipRectangle.from_bounds(1, 2, 3, 4)

        assert rect == ClipRectangle(left=1, right=3, top=2, bottom=4)
        assert rect.bounds == (1, 2, 3, 4)

    def test_size(self):
        rect = ClipRectangle(left=-5, right=5, top=0, bottom=3)

        assert rect.width == 10
        assert rect.height == 3

    def test_contains_is_inclusive(self):
        rect = ClipRectangle(left=0, right=10, top=0, bottom=10)

        assert rect.contains((0, 0))
        assert rect.contains((10, 10))
        assert not rect.contains((11, 5))

    def test_axis_bounds(self):
        rect = ClipRectangle(left=1, right=2, top=3, bottom=4)

        assert rect.axis_bounds(ClipAxis.X) == (1, 2)
        assert rect.axis_bounds(ClipAxis.Y) == (3, 4)

    def test_to_polygon(self):
        assert ClipRectangle(left=0, right=4, top=0, bottom=5).to_polygon().area == 20.0

    def test_frozen(self):
        rect = ClipRectangle(0, 1, 0, 1)
        with pytest.raises(AttributeError):
            rect.left = 5


class TestClipAxis:
    """Test ClipAxis enum."""

    def test_indices(self):
        assert ClipAxis.X.index == 0
        assert ClipAxis.X.other == 1
        assert ClipAxis.Y.index == 1
        assert ClipAxis.Y.other == 0


class TestClipConfig:
    """Test ClipConfig dataclass."""

    def test_default_values(self):
        cfg = ClipConfig()

        assert cfg.validate is True
        assert cfg.coordinate_bits is None
        assert cfg.warn_non_convex is True
        assert cfg.canonical_crossings is False
        assert cfg.coordinate_range is None

    def test_sixteen_bit_range(self):
        assert ClipConfig(coordinate_bits=16).coordinate_range == (-32768, 32767)

    def test_invalid_bits(self):
        with pytest.raises(ConfigurationError):
            ClipConfig(coordinate_bits=0).validated()


class TestGeometryUtils:
    """Tests for geometry helper functions."""

    def test_signed_area(self):
        square = [(0, 0), (10, 0), (10, 10), (0, 10)]

        assert signed_area(square) == 100.0
        assert signed_area(square[::-1]) == -100.0

    def test_signed_area_degenerate(self):
        assert signed_area([(0, 0), (1, 1)]) == 0.0

    def test_winding(self):
        assert winding([(0, 0), (4, 0), (0, 4)]) == 1
        assert winding([(0, 0), (0, 4), (4, 0)]) == -1
        assert winding([(0, 0), (1, 1), (2, 2)]) == 0

    def test_as_vertices_from_numpy(self):
        result = as_vertices(np.array([[1, 2], [3, 4]], dtype=np.int16))

        assert result == [Vertex(1, 2), Vertex(3, 4)]
        assert all(type(v.x) is int for v in result)

    def test_shapely_round_trip_keeps_order(self):
        """Test that conversion keeps vertex order and drops the closing point."""
        ring = [(0, 0), (0, 4), (4, 4), (4, 0)]
        vertices = from_shapely(to_shapely(ring))

        assert vertices == ring

    def test_to_shapely_degenerate(self):
        assert to_shapely([(0, 0), (1, 1)]).is_empty

    def test_from_shapely_rejects_holes(self):
        poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)],
                       holes=[[(2, 2), (4, 2), (4, 4), (2, 4)]])
        with pytest.raises(ValidationError):
            from_shapely(poly)


class TestValidationUtils:
    """Tests for validation helper functions."""

    def test_has_duplicate_vertices(self):
        assert has_duplicate_vertices([(0, 0), (0, 0), (1, 1)])
        assert not has_duplicate_vertices([(0, 0), (1, 0), (1, 1)])

    def test_has_duplicate_vertices_wraps(self):
        """Test that last and first vertices are compared."""
        assert has_duplicate_vertices([(0, 0), (1, 0), (1, 1), (0, 0)])

    def test_has_duplicate_vertices_short(self):
        assert not has_duplicate_vertices([(0, 0)])

    def test_is_convex(self):
        assert is_convex([(0, 0), (4, 0), (4, 4), (0, 4)])
        assert is_convex([(0, 0), (0, 4), (4, 4), (4, 0)])
        assert not is_convex([(0, 0), (4, 0), (1, 1), (0, 4)])

    def test_is_convex_collinear(self):
        assert is_convex([(0, 0), (2, 0), (4, 0), (4, 4), (0, 4)])

    def test_check_count(self):
        check_count([(0, 0)], 1)
        with pytest.raises(ValidationError):
            check_count([(0, 0)], 0)

    def test_check_rectangle(self):
        check_rectangle(ClipRectangle(0, 0, 0, 0))
        with pytest.raises(ValidationError):
            check_rectangle(ClipRectangle(1, 0, 0, 0))

    def test_check_capacity(self):
        check_capacity([None] * 6, 3)
        with pytest.raises(BufferCapacityError):
            check_capacity([None] * 5, 3, "scratch")
