"""Spherical shell rasterizer."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from voxel_shapes.generators.lattice import unit_steps
from voxel_shapes.models.errors import InvalidGeometry
from voxel_shapes.models.geometry import Point3, PointSequence
from voxel_shapes.models.params import SphereParams

logger = logging.getLogger(__name__)


def rasterize_sphere(params: Sequence[object]) -> PointSequence:
    """Lattice points with inner_radius^2 <= x^2 + y^2 + z^2 <= radius^2.

    Each coordinate sweeps the half-open range [-radius, radius).

    Args:
        params: [radius, inner_radius] as ints or floats.

    Raises:
        InvalidParameterType: a parameter is not numeric.
        InvalidGeometry: inner_radius is larger than radius.
    """
    p = SphereParams.from_values(params)
    r, ir = p.radius, p.inner_radius
    if r < ir:
        raise InvalidGeometry(
            f"sphere: Inner radius ({ir}) is larger than radius ({r})"
        )

    points: PointSequence = []
    for x in unit_steps(-r, r):
        for y in unit_steps(-r, r):
            for z in unit_steps(-r, r):
                d_sq = x * x + y * y + z * z
                if r * r >= d_sq and d_sq >= ir * ir:
                    points.append(Point3(x, y, z))

    logger.debug("sphere %s: %d points", p, len(points))
    return points
