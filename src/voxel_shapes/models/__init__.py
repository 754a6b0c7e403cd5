"""Voxel data models."""

from voxel_shapes.models.geometry import Axis, Point3, PointSequence
from voxel_shapes.models.errors import (
    DegenerateSegment,
    Failure,
    FailureKind,
    InvalidAxis,
    InvalidGeometry,
    InvalidOperands,
    InvalidParameterType,
    ShapeError,
)
from voxel_shapes.models.params import (
    DiskParams,
    EllipseParams,
    SphereParams,
    TorusParams,
    coerce_floats,
)

__all__ = [
    "Axis",
    "Point3",
    "PointSequence",
    "DegenerateSegment",
    "Failure",
    "FailureKind",
    "InvalidAxis",
    "InvalidGeometry",
    "InvalidOperands",
    "InvalidParameterType",
    "ShapeError",
    "DiskParams",
    "EllipseParams",
    "SphereParams",
    "TorusParams",
    "coerce_floats",
]
