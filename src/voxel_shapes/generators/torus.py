"""Torus rasterizer.

For every planar lattice location (x, y) the nearest point on the ring of
radius R is found by projecting (x, y) outward from the center. A point
belongs to the torus when its squared deviation from that ring point plus
z^2 is within r^2. The column x = y = 0 has no defined ring direction and
is skipped.

The facing re-orients the same field by permuting coordinates:
"x" -> (y, x, z), "y" -> (x, y, z), "z" -> (x, z, y).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from voxel_shapes.generators.lattice import unit_steps
from voxel_shapes.models.geometry import Axis, Point3, PointSequence
from voxel_shapes.models.params import TorusParams

logger = logging.getLogger(__name__)


def _pack(facing: Axis, x: float, y: float, z: float) -> Point3:
    if facing is Axis.X:
        return Point3(y, x, z)
    if facing is Axis.Y:
        return Point3(x, y, z)
    return Point3(x, z, y)


def rasterize_torus(params: Sequence[object], axis: object) -> PointSequence:
    """Lattice points of a solid torus.

    Args:
        params: [major_radius, minor_radius] as ints or floats.
        axis: Facing token. Unrecognized tokens yield no points.

    Raises:
        InvalidParameterType: a parameter is not numeric.
    """
    p = TorusParams.from_values(params)
    facing = Axis.parse(axis)
    if facing is None:
        logger.debug("torus: unknown facing %r, no points", axis)
        return []

    big_r, small_r = p.major_radius, p.minor_radius
    extent = big_r + small_r

    points: PointSequence = []
    for x in unit_steps(-extent, extent):
        for y in unit_steps(-extent, extent):
            xy_dist = math.sqrt(x * x + y * y)
            if not xy_dist > 0:
                continue
            ring_x = x / xy_dist * big_r
            ring_y = y / xy_dist * big_r
            deviation = (x - ring_x) * (x - ring_x) + (y - ring_y) * (y - ring_y)
            for z in unit_steps(-extent, extent):
                if deviation + z * z <= small_r * small_r:
                    points.append(_pack(facing, x, y, z))

    logger.debug("torus %s facing %s: %d points", p, facing.value, len(points))
    return points
