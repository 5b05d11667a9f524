"""
Unit tests for ps_core/types.py.

Covers:
- Arithmetic (add, subtract, scalar multiply) for each point type
- Lexicographic ordering, equality and hashing
- component() / dimensionality / is_zero()
- Point2DRounded: comparison on rounded onset, arithmetic on raw onset
- Point2DInt: scalar truncation
- Point is abstract
"""

import numpy as np
import pytest

from ps_core.types import (
    Point,
    Point2D,
    Point2DInt,
    Point2DRounded,
    point_type_from_name,
    points_to_array,
)


# =============================================================================
# Point2D
# =============================================================================


class TestPoint2D:
    """Float point arithmetic and ordering."""

    def test_add_and_subtract(self):
        a = Point2D(1.0, 2.0)
        b = Point2D(0.5, -1.0)

        assert a + b == Point2D(1.5, 1.0)
        assert a - b == Point2D(0.5, 3.0)

    def test_scalar_multiply(self):
        assert Point2D(1.5, -2.0) * -1 == Point2D(-1.5, 2.0)
        assert 2 * Point2D(1.0, 3.0) == Point2D(2.0, 6.0)

    def test_lexicographic_order(self):
        """x decides first, y breaks ties."""
        points = [Point2D(2, 1), Point2D(1, 5), Point2D(1, 2)]
        assert sorted(points) == [Point2D(1, 2), Point2D(1, 5), Point2D(2, 1)]

    def test_int_arguments_coerced_to_float(self):
        p = Point2D(1, 2)
        assert isinstance(p.x, float)
        assert p == Point2D(1.0, 2.0)
        assert hash(p) == hash(Point2D(1.0, 2.0))

    def test_component_access(self):
        p = Point2D(3.0, 60.0)
        assert p.component(0) == 3.0
        assert p.component(1) == 60.0
        assert p.component(2) is None
        assert p.component(-1) is None
        assert p.dimensionality == 2

    def test_is_zero(self):
        assert Point2D(0, 0).is_zero()
        assert not Point2D(0, 1).is_zero()
        assert (Point2D(4, 5) - Point2D(4, 5)).is_zero()

    def test_tuple_unpacking(self):
        x, y = Point2D(1.25, 64)
        assert (x, y) == (1.25, 64.0)


# =============================================================================
# Point2DRounded
# =============================================================================


class TestPoint2DRounded:
    """Onset compared after rounding to 5 decimals."""

    def test_tuplet_onsets_compare_equal(self):
        """1/3 + 1/3 + 1/3 lands on 1.0 after rounding."""
        third = Point2DRounded(1 / 3, 0)
        total = third + third + third
        assert total == Point2DRounded(1.0, 0)
        assert hash(total) == hash(Point2DRounded(1.0, 0))

    def test_raw_value_used_for_arithmetic(self):
        p = Point2DRounded(0.123456, 1)
        assert p.x == 0.12346
        assert p.raw_x == 0.123456
        assert (p * 10).x == 1.23456

    def test_component_zero_is_rounded(self):
        assert Point2DRounded(2.000004, 60).component(0) == 2.0

    def test_negative_onsets_round_symmetrically(self):
        assert Point2DRounded(1.234567, 0).x == 1.23457
        assert Point2DRounded(-1.234567, 0).x == -1.23457

    def test_order_uses_rounded_onset(self):
        a = Point2DRounded(1.000001, 70)
        b = Point2DRounded(1.0, 60)
        assert b < a  # same rounded onset, lower pitch first

    def test_is_zero_after_rounding(self):
        assert Point2DRounded(0.000001, 0).is_zero()


# =============================================================================
# Point2DInt
# =============================================================================


class TestPoint2DInt:
    """Integer points; scalars truncate toward zero."""

    def test_arithmetic(self):
        assert Point2DInt(3, 4) - Point2DInt(1, 1) == Point2DInt(2, 3)
        assert Point2DInt(3, 4) + Point2DInt(-3, -4) == Point2DInt(0, 0)

    def test_scalar_truncated(self):
        assert Point2DInt(3, -2) * 2.9 == Point2DInt(6, -4)
        assert Point2DInt(3, -2) * -1.5 == Point2DInt(-3, 2)

    def test_component_returns_float(self):
        assert Point2DInt(2, 7).component(1) == 7.0
        assert Point2DInt(2, 7).component(5) is None


# =============================================================================
# Helpers
# =============================================================================


class TestHelpers:
    def test_point_type_lookup(self):
        assert point_type_from_name("float") is Point2D
        assert point_type_from_name("rounded") is Point2DRounded
        assert point_type_from_name("int") is Point2DInt

    def test_unknown_point_type_rejected(self):
        with pytest.raises(ValueError, match="Invalid point type"):
            point_type_from_name("complex")

    def test_points_to_array(self):
        array = points_to_array([Point2D(1, 2), Point2DInt(3, 4)])
        assert array.shape == (2, 2)
        np.testing.assert_array_equal(array, [[1.0, 2.0], [3.0, 4.0]])

    def test_points_to_array_empty(self):
        assert points_to_array([]).shape == (0, 0)

    def test_point_base_is_abstract(self):
        with pytest.raises(TypeError):
            Point()

    def test_subclass_missing_is_zero_is_abstract(self):
        class NoZeroTest(Point):
            def component(self, index):
                return None

            @property
            def dimensionality(self):
                return 0

        with pytest.raises(TypeError):
            NoZeroTest()
