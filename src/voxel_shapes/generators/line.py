"""Parametric line sampler."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from voxel_shapes.models.errors import DegenerateSegment, InvalidOperands
from voxel_shapes.models.geometry import Point3, PointSequence
from voxel_shapes.models.params import coerce_floats

logger = logging.getLogger(__name__)


def _as_point(value: object, name: str) -> Point3:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 3:
        raise InvalidOperands(f"line: {name} must be a point of three numbers")
    return Point3(*coerce_floats(value))


def sample_line(begin: Sequence[object], end: Sequence[object]) -> PointSequence:
    """Roughly unit-spaced points from begin toward end.

    The parameter t starts at 0 and advances by 1/length until it passes 1,
    giving about length + 1 points. The first point is always begin; the
    last is not guaranteed to land exactly on end.

    Raises:
        InvalidOperands: an endpoint is not a triple.
        InvalidParameterType: an endpoint coordinate is not numeric.
        DegenerateSegment: begin and end coincide.
    """
    start = _as_point(begin, "begin")
    stop = _as_point(end, "end")
    length = start.distance_to(stop)
    if length == 0:
        raise DegenerateSegment(f"line: begin and end are both {tuple(start)}")

    dx, dy, dz = stop.a - start.a, stop.b - start.b, stop.c - start.c
    step = 1 / length
    points: PointSequence = []
    t = 0.0
    while 0 <= t <= 1:
        points.append(Point3(start.a + t * dx, start.b + t * dy, start.c + t * dz))
        t += step

    logger.debug("line %s -> %s: %d points", start, stop, len(points))
    return points
