"""Tests for geometric primitives."""

import math

from voxel_shapes.models.geometry import Axis, Point3


class TestPoint3:
    def test_create(self):
        p = Point3(1.0, 2.0, 3.0)
        assert p.a == 1.0
        assert p.c == 3.0

    def test_equals_plain_tuple(self):
        assert Point3(1.0, 0.0, -2.0) == (1, 0, -2)

    def test_distance(self):
        p1 = Point3(0.0, 0.0, 0.0)
        p2 = Point3(1.0, 2.0, 2.0)
        assert math.isclose(p1.distance_to(p2), 3.0)

    def test_distance_to_tuple(self):
        assert math.isclose(Point3(0, 0, 0).distance_to((0, 3, 4)), 5.0)


class TestAxis:
    def test_parse_tokens(self):
        assert Axis.parse("x") is Axis.X
        assert Axis.parse("y") is Axis.Y
        assert Axis.parse("z") is Axis.Z

    def test_parse_enum(self):
        assert Axis.parse(Axis.Z) is Axis.Z

    def test_parse_unknown(self):
        assert Axis.parse("w") is None
        assert Axis.parse("X") is None
        assert Axis.parse(1) is None
        assert Axis.parse(None) is None
