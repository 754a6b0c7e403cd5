"""Voxel generation tools.

Pure functions that enumerate lattice points:
- Disk/cylinder: annulus extruded along a facing axis
- Sphere: spherical shell
- Ellipse: elliptical cylinder, strict interior
- Torus: ring of radius R with tube radius r
- Line: unit-spaced samples along a segment
- Composition: map a point transform over a sequence
"""

from voxel_shapes.generators.disk import rasterize_disk
from voxel_shapes.generators.sphere import rasterize_sphere
from voxel_shapes.generators.ellipse import rasterize_ellipse
from voxel_shapes.generators.torus import rasterize_torus
from voxel_shapes.generators.line import sample_line
from voxel_shapes.generators.compose import compose

__all__ = [
    "rasterize_disk",
    "rasterize_sphere",
    "rasterize_ellipse",
    "rasterize_torus",
    "sample_line",
    "compose",
]
