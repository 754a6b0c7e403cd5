"""Shape parameters and the numeric coercion shared by all generators.

Parameters are range- and sign-unchecked. The only semantic check lives
in the sphere generator (inner radius must not exceed the radius).
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from voxel_shapes.models.errors import InvalidOperands, InvalidParameterType

P = TypeVar("P", bound="ShapeParams")


def coerce_floats(values: Iterable[object]) -> list[float]:
    """Convert a list of ints and floats into floats, preserving order.

    Raises:
        InvalidOperands: values is not a list of values.
        InvalidParameterType: an element is neither integral nor real.
            The error carries the zero-based index and the element's type.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidOperands(
            f"expected a list of numbers, got {type(values).__name__}"
        )
    result: list[float] = []
    for index, value in enumerate(values):
        # bool is an Integral subclass but never a shape parameter
        if isinstance(value, bool) or not isinstance(
            value, (numbers.Integral, numbers.Real)
        ):
            raise InvalidParameterType(index, type(value).__name__)
        result.append(float(value))
    return result


class ShapeParams(BaseModel):
    """Base for fixed-arity parameter lists."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_values(cls: type[P], values: Iterable[object]) -> P:
        """Coerce a positional parameter list into this model.

        Extra trailing values must still be numeric but are ignored.
        """
        floats = coerce_floats(values)
        names = list(cls.model_fields)
        if len(floats) < len(names):
            raise InvalidParameterType(len(floats), "missing")
        return cls(**dict(zip(names, floats)))


class DiskParams(ShapeParams):
    radius: float = Field(description="Outer radius")
    inner_radius: float = Field(description="Ring thickness measured inward from the radius")
    height: float = Field(description="Extrusion length along the facing axis")


class SphereParams(ShapeParams):
    radius: float
    inner_radius: float


class EllipseParams(ShapeParams):
    half_width: float = Field(description="Semi-axis on the width sweep")
    half_length: float = Field(description="Semi-axis on the length sweep")
    height: float = Field(description="Extrusion length along the facing axis")


class TorusParams(ShapeParams):
    major_radius: float = Field(description="Distance from the torus center to the tube center")
    minor_radius: float = Field(description="Tube radius")
