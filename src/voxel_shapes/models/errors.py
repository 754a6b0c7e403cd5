"""Failure kinds raised by the generators and returned to hosts.

Generators raise ShapeError subclasses. The host function table
(voxel_shapes.host) turns them into Failure values so a host can
inspect and translate them into its own error reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Category of a failed call."""

    INVALID_PARAMETER_TYPE = "InvalidParameterType"
    INVALID_AXIS = "InvalidAxis"
    INVALID_GEOMETRY = "InvalidGeometry"
    DEGENERATE_SEGMENT = "DegenerateSegment"
    INVALID_OPERANDS = "InvalidOperands"


class ShapeError(Exception):
    """Base class for every failure a generator can signal."""

    kind: FailureKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidParameterType(ShapeError, TypeError):
    """A value where a number was required is not an integer or a real."""

    kind = FailureKind.INVALID_PARAMETER_TYPE

    def __init__(self, index: int, actual_type: str) -> None:
        super().__init__(
            f"expected an int or float, got {actual_type} at {index}"
        )
        self.index = index
        self.actual_type = actual_type


class InvalidAxis(ShapeError, ValueError):
    kind = FailureKind.INVALID_AXIS


class InvalidGeometry(ShapeError, ValueError):
    kind = FailureKind.INVALID_GEOMETRY


class DegenerateSegment(ShapeError, ValueError):
    kind = FailureKind.DEGENERATE_SEGMENT


class InvalidOperands(ShapeError, TypeError):
    kind = FailureKind.INVALID_OPERANDS


@dataclass(frozen=True)
class Failure:
    """A failed call, returned as a value instead of raised."""

    kind: FailureKind
    message: str
    index: int | None = None
    actual_type: str | None = None

    @classmethod
    def from_error(cls, error: ShapeError) -> Failure:
        return cls(
            kind=error.kind,
            message=error.message,
            index=getattr(error, "index", None),
            actual_type=getattr(error, "actual_type", None),
        )

    def to_dict(self) -> dict:
        """JSON-ready form, omitting empty fields."""
        data: dict = {"kind": self.kind.value, "error": self.message}
        if self.index is not None:
            data["index"] = self.index
        if self.actual_type is not None:
            data["actual_type"] = self.actual_type
        return data
