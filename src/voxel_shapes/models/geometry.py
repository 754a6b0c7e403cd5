"""Geometric primitives for voxel generation."""

from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple


class Point3(NamedTuple):
    """A lattice point. Coordinate order depends on the facing of its shape."""

    a: float
    b: float
    c: float

    def distance_to(self, other: Point3) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(
            (self.a - other[0]) ** 2
            + (self.b - other[1]) ** 2
            + (self.c - other[2]) ** 2
        )


PointSequence = list[Point3]


class Axis(str, Enum):
    """Facing of a shape's primary axis (height or ring axis).

    X, Y, Z: the physical axis the primary axis maps onto. The facing
    also decides the order offsets are packed into each Point3.
    """

    X = "x"
    Y = "y"
    Z = "z"

    @classmethod
    def parse(cls, token: object) -> Axis | None:
        """Resolve a facing token, or None when it is not recognized."""
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            try:
                return cls(token)
            except ValueError:
                return None
        return None
