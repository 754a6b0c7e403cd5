"""JSON request documents for batch and render commands."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class TransformSpec(BaseModel):
    """A named point transform, e.g. {"name": "translate", "argument": [1, 0, 0]}."""

    name: str
    argument: Any = None


class ShapeRequest(BaseModel):
    """One call into the function table.

    Parameter values are kept untyped so numeric coercion (and its
    index-carrying failure) happens in the generators, not here.
    """

    op: str = Field(description="Function table name: circle, sphere, ellipse, torus, line, comp")
    params: list[Any] = Field(default_factory=list)
    axis: str | None = None
    begin: list[Any] | None = None
    end: list[Any] | None = None
    transform: TransformSpec | None = None
    points: list[Any] | None = Field(
        default=None, description="Literal points for comp"
    )
    source: ShapeRequest | None = Field(
        default=None, description="Nested request producing the points for comp"
    )
