"""Composition: apply a point transform across a point sequence."""

from __future__ import annotations

import numbers
from collections.abc import Callable, Sequence

from voxel_shapes.models.errors import InvalidOperands


def _is_point(value: object) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) == 3
        and all(
            isinstance(c, numbers.Real) and not isinstance(c, bool) for c in value
        )
    )


def compose(transform: Callable, points: Sequence) -> list:
    """Return [transform(p) for p in points], same order and length.

    Raises:
        InvalidOperands: transform is not callable, or points is not a
            sequence of numeric triples.
    """
    if not callable(transform):
        raise InvalidOperands(
            f"comp: expected a function, got {type(transform).__name__}"
        )
    if isinstance(points, (str, bytes)) or not isinstance(points, Sequence):
        raise InvalidOperands(
            f"comp: expected a sequence of points, got {type(points).__name__}"
        )
    for index, point in enumerate(points):
        if not _is_point(point):
            raise InvalidOperands(f"comp: element {index} is not a point")
    return [transform(p) for p in points]
