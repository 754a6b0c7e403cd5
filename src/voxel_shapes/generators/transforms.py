"""Named point transforms for use with compose().

Each factory returns a Point3 -> Point3 function, so hosts without their
own function values (the CLI, JSON batches) can still drive composition.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from voxel_shapes.models.errors import InvalidOperands
from voxel_shapes.models.geometry import Point3
from voxel_shapes.models.params import coerce_floats

PointTransform = Callable[[Sequence[float]], Point3]


def translate(offset: Sequence[object]) -> PointTransform:
    """Shift every point by a fixed (da, db, dc) offset."""
    da, db, dc = _triple(offset, "translate")

    def apply(p: Sequence[float]) -> Point3:
        return Point3(p[0] + da, p[1] + db, p[2] + dc)

    return apply


def scale(factor: object) -> PointTransform:
    """Multiply every coordinate by factor."""
    (k,) = coerce_floats([factor])

    def apply(p: Sequence[float]) -> Point3:
        return Point3(p[0] * k, p[1] * k, p[2] * k)

    return apply


def permute(order: Sequence[int]) -> PointTransform:
    """Reorder coordinates, e.g. (2, 0, 1) maps (a, b, c) to (c, a, b)."""
    if (
        isinstance(order, (str, bytes))
        or not isinstance(order, Sequence)
        or len(order) != 3
        or not all(type(n) is int for n in order)
        or sorted(order) != [0, 1, 2]
    ):
        raise InvalidOperands(f"permute: {order!r} is not a permutation of 0, 1, 2")
    i, j, k = order

    def apply(p: Sequence[float]) -> Point3:
        return Point3(p[i], p[j], p[k])

    return apply


TRANSFORMS: dict[str, Callable[..., PointTransform]] = {
    "translate": translate,
    "scale": scale,
    "permute": permute,
}


def build_transform(name: str, argument: object) -> PointTransform:
    """Look up a transform factory by name and build it."""
    factory = TRANSFORMS.get(name)
    if factory is None:
        raise InvalidOperands(
            f"Unknown transform: {name}. Available: {', '.join(TRANSFORMS)}"
        )
    return factory(argument)


def _triple(values: Sequence[object], name: str) -> tuple[float, float, float]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidOperands(f"{name}: expected three values, got {type(values).__name__}")
    floats = coerce_floats(values)
    if len(floats) != 3:
        raise InvalidOperands(f"{name}: expected three values, got {len(floats)}")
    return floats[0], floats[1], floats[2]
