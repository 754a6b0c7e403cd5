"""Disk and cylinder rasterizer.

Enumerates lattice points inside an annulus extruded along one axis.
The annulus keeps points with (radius - inner_radius)^2 <= d^2 < radius^2,
so inner_radius == radius gives a filled disk.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from voxel_shapes.generators.lattice import unit_steps
from voxel_shapes.models.errors import InvalidAxis
from voxel_shapes.models.geometry import Axis, Point3, PointSequence
from voxel_shapes.models.params import DiskParams

logger = logging.getLogger(__name__)


def rasterize_disk(params: Sequence[object], axis: object) -> PointSequence:
    """Lattice points of a hollow cylinder.

    Args:
        params: [radius, inner_radius, height] as ints or floats.
        axis: Facing token, "x", "y" or "z".

    Returns:
        Points packed as (h, x, y) for "x" and "z", (x, h, y) for "y".

    Raises:
        InvalidParameterType: a parameter is not numeric.
        InvalidAxis: the facing token is not recognized.
    """
    p = DiskParams.from_values(params)
    facing = Axis.parse(axis)
    if facing is None:
        raise InvalidAxis(f"circle: unknown facing {axis!r}, expected x, y or z")

    radius = p.radius
    outer_sq = radius * radius
    hollow_sq = (radius - p.inner_radius) * (radius - p.inner_radius)
    # the x facing sweeps y over a half-open range
    y_inclusive = facing is not Axis.X

    points: PointSequence = []
    for h in unit_steps(0.0, p.height, inclusive=True):
        for x in unit_steps(-radius, radius, inclusive=True):
            for y in unit_steps(-radius, radius, inclusive=y_inclusive):
                d_sq = x * x + y * y
                if outer_sq > d_sq and d_sq >= hollow_sq:
                    if facing is Axis.Y:
                        points.append(Point3(x, h, y))
                    else:
                        points.append(Point3(h, x, y))

    logger.debug("circle %s facing %s: %d points", p, facing.value, len(points))
    return points
