"""Function table for binding the generators into a host.

Every entry returns either a point sequence or a Failure value; a
ShapeError never escapes. Hosts copy the entries they want into their
own dispatch table with register() or look them up in FUNCTIONS.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, MutableMapping
from types import MappingProxyType

from voxel_shapes.generators.compose import compose
from voxel_shapes.generators.disk import rasterize_disk
from voxel_shapes.generators.ellipse import rasterize_ellipse
from voxel_shapes.generators.line import sample_line
from voxel_shapes.generators.sphere import rasterize_sphere
from voxel_shapes.generators.torus import rasterize_torus
from voxel_shapes.generators.transforms import build_transform
from voxel_shapes.models.errors import Failure, InvalidOperands, ShapeError
from voxel_shapes.models.requests import ShapeRequest

logger = logging.getLogger(__name__)


def _returning_failure(name: str, fn: Callable) -> Callable:
    """Wrap fn so ShapeErrors come back as Failure values."""

    @functools.wraps(fn)
    def wrapper(*args):
        try:
            return fn(*args)
        except ShapeError as e:
            logger.info("%s failed: %s", name, e.message)
            return Failure.from_error(e)

    return wrapper


FUNCTIONS = MappingProxyType({
    "circle": _returning_failure("circle", rasterize_disk),
    "sphere": _returning_failure("sphere", rasterize_sphere),
    "ellipse": _returning_failure("ellipse", rasterize_ellipse),
    "torus": _returning_failure("torus", rasterize_torus),
    "line": _returning_failure("line", sample_line),
    "comp": _returning_failure("comp", compose),
})


def function_table() -> dict[str, Callable]:
    """A fresh, caller-owned copy of the function table."""
    return dict(FUNCTIONS)


def register(table: MutableMapping[str, Callable], prefix: str = "") -> None:
    """Bind every entry into a host's own table, optionally name-prefixed."""
    for name, fn in FUNCTIONS.items():
        table[f"{prefix}{name}"] = fn


def dispatch(name: str, *args):
    """Call a table entry by name. Unknown names yield an InvalidOperands failure."""
    fn = FUNCTIONS.get(name)
    if fn is None:
        return Failure.from_error(InvalidOperands(
            f"Unknown operation: {name}. Available: {', '.join(FUNCTIONS)}"
        ))
    return fn(*args)


def run_request(request: ShapeRequest):
    """Evaluate a request document through the function table."""
    op = request.op
    if op == "sphere":
        return dispatch(op, request.params)
    if op in ("circle", "ellipse", "torus"):
        return dispatch(op, request.params, request.axis)
    if op == "line":
        return dispatch(op, request.begin, request.end)
    if op == "comp":
        if request.transform is None:
            return Failure.from_error(InvalidOperands("comp: missing transform"))
        try:
            transform = build_transform(request.transform.name, request.transform.argument)
        except ShapeError as e:
            return Failure.from_error(e)
        if request.source is not None:
            points = run_request(request.source)
            if isinstance(points, Failure):
                return points
        else:
            points = request.points
        return dispatch(op, transform, points)
    return dispatch(op)
