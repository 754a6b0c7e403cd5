"""Voxel Shapes CLI.

Usage:
    python -m voxel_shapes <command> [args] [options]

Every command prints one JSON document on stdout. Failures print
{"ok": false, ...} and exit with status 1.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import typer
from pydantic import ValidationError

from voxel_shapes import __version__
from voxel_shapes.export.render import render_points
from voxel_shapes.host import dispatch, run_request
from voxel_shapes.logging_config import setup_logging
from voxel_shapes.models.errors import Failure
from voxel_shapes.models.requests import ShapeRequest

app = typer.Typer(
    name="voxel-shapes",
    help="Voxel Shapes: lattice points inside disks, spheres, ellipses and tori.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(failure: Failure) -> None:
    _output({"ok": False, **failure.to_dict()})
    raise typer.Exit(1)


def _emit_points(shape: str, result) -> None:
    """Print a generator result, or fail with its Failure."""
    if isinstance(result, Failure):
        _fail(result)
    _output({
        "ok": True,
        "shape": shape,
        "count": len(result),
        "points": [list(p) for p in result],
    })


def _read_json(raw_arg: Optional[str], file: Optional[str], stdin: bool):
    if stdin:
        raw = sys.stdin.read()
    elif file:
        raw = Path(file).read_text()
    elif raw_arg:
        raw = raw_arg
    else:
        _output({"ok": False, "error": "Provide a request as argument, --file, or --stdin"})
        raise typer.Exit(1)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        _output({"ok": False, "error": f"Invalid JSON: {e}"})
        raise typer.Exit(1)


def _parse_request(data) -> ShapeRequest:
    try:
        return ShapeRequest.model_validate(data)
    except ValidationError as e:
        _output({"ok": False, "error": f"Invalid request: {e.errors()[0]['msg']}"})
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to a file"),
):
    """Voxel Shapes CLI."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)


# ---------------------------------------------------------------------------
# Shape commands
# ---------------------------------------------------------------------------

@app.command()
def circle(
    radius: float = typer.Argument(..., help="Outer radius"),
    inner: float = typer.Argument(..., help="Ring thickness (equal to radius for a filled disk)"),
    height: float = typer.Argument(0.0, help="Extrusion length"),
    axis: str = typer.Option("y", "--axis", "-a", help="Facing: x, y or z"),
):
    """Disk or hollow cylinder."""
    _emit_points("circle", dispatch("circle", [radius, inner, height], axis))


@app.command()
def sphere(
    radius: float = typer.Argument(..., help="Outer radius"),
    inner: float = typer.Argument(0.0, help="Inner radius of the shell"),
):
    """Solid sphere or spherical shell."""
    _emit_points("sphere", dispatch("sphere", [radius, inner]))


@app.command()
def ellipse(
    width: float = typer.Argument(..., help="Half-width"),
    length: float = typer.Argument(..., help="Half-length"),
    height: float = typer.Argument(0.0, help="Extrusion length"),
    axis: str = typer.Option("y", "--axis", "-a", help="Facing: x, y or z"),
):
    """Elliptical cylinder."""
    _emit_points("ellipse", dispatch("ellipse", [width, length, height], axis))


@app.command()
def torus(
    major: float = typer.Argument(..., help="Ring radius R"),
    minor: float = typer.Argument(..., help="Tube radius r"),
    axis: str = typer.Option("y", "--axis", "-a", help="Facing: x, y or z"),
):
    """Solid torus."""
    _emit_points("torus", dispatch("torus", [major, minor], axis))


@app.command()
def line(
    begin: Tuple[float, float, float] = typer.Option(..., "--begin", "-b", help="Start point X Y Z"),
    end: Tuple[float, float, float] = typer.Option(..., "--end", "-e", help="End point X Y Z"),
):
    """Unit-spaced samples along a segment."""
    _emit_points("line", dispatch("line", list(begin), list(end)))


# ---------------------------------------------------------------------------
# Request documents
# ---------------------------------------------------------------------------

@app.command()
def batch(
    requests_json: Optional[str] = typer.Argument(None, help="JSON array of requests"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Read requests from JSON file"),
    stdin: bool = typer.Option(False, "--stdin", help="Read requests from stdin"),
):
    """Evaluate a list of JSON requests through the function table."""
    data = _read_json(requests_json, file, stdin)
    if not isinstance(data, list):
        data = [data]  # allow a single request without wrapping in array

    results = []
    for i, raw in enumerate(data):
        request = _parse_request(raw)
        result = run_request(request)
        if isinstance(result, Failure):
            # Stop on first failure
            _output({
                "ok": False,
                "error": f"Request {i} ({request.op}) failed: {result.message}",
                "kind": result.kind.value,
                "applied": i,
                "results": results,
            })
            raise typer.Exit(1)
        results.append({
            "op": request.op,
            "count": len(result),
            "points": [list(p) for p in result],
        })

    _output({"ok": True, "requests_applied": len(results), "results": results})


@app.command()
def render(
    request_json: Optional[str] = typer.Argument(None, help="JSON request"),
    output: str = typer.Option("voxels.png", "--output", "-o", help="Output image path"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Read request from JSON file"),
    dpi: int = typer.Option(100, "--dpi", help="Image resolution"),
):
    """Render one request's points to an image."""
    request = _parse_request(_read_json(request_json, file, False))
    result = run_request(request)
    if isinstance(result, Failure):
        _fail(result)
    path = render_points(result, output, title=request.op, dpi=dpi)
    _output({"ok": True, "rendered": str(path), "count": len(result)})


@app.command()
def version() -> None:
    """Show version."""
    typer.echo(f"voxel-shapes v{__version__}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
