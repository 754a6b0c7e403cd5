"""Elliptical cylinder rasterizer.

Keeps strictly interior points: i^2/l^2 + j^2/w^2 < 1, boundary excluded.
An unrecognized facing yields no points rather than an error.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from voxel_shapes.generators.lattice import unit_steps
from voxel_shapes.models.geometry import Axis, Point3, PointSequence
from voxel_shapes.models.params import EllipseParams

logger = logging.getLogger(__name__)


def rasterize_ellipse(params: Sequence[object], axis: object) -> PointSequence:
    """Lattice points of an ellipse extruded along the facing axis.

    Args:
        params: [half_width, half_length, height] as ints or floats.
        axis: Facing token. "x" packs (h, i, j), "y" packs (i, j, h),
            "z" packs (i, h, j), where i runs along the length.

    Raises:
        InvalidParameterType: a parameter is not numeric.
    """
    p = EllipseParams.from_values(params)
    facing = Axis.parse(axis)
    if facing is None:
        logger.debug("ellipse: unknown facing %r, no points", axis)
        return []
    width, length = p.half_width, p.half_length
    if width == 0 or length == 0:
        # a zero semi-axis leaves no strictly interior points
        return []

    points: PointSequence = []
    for h in unit_steps(0.0, p.height, inclusive=True):
        for i in unit_steps(-length, length, inclusive=True):
            for j in unit_steps(-width, width, inclusive=True):
                if (i * i) / (length * length) + (j * j) / (width * width) < 1:
                    if facing is Axis.X:
                        points.append(Point3(h, i, j))
                    elif facing is Axis.Y:
                        points.append(Point3(i, j, h))
                    else:
                        points.append(Point3(i, h, j))

    logger.debug("ellipse %s facing %s: %d points", p, facing.value, len(points))
    return points
