"""Voxel point cloud rendering using matplotlib.

Draws a point sequence as a 3-D scatter, one marker per voxel,
for quick visual checks of generator output.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt
import numpy as np


def render_points(
    points: Sequence[Sequence[float]],
    output_path: str | Path,
    title: str = "",
    dpi: int = 100,
    marker_size: float = 20.0,
    color: str = "#1E88E5",
) -> Path:
    """Render points to an image file.

    Args:
        points: Point triples, plotted as (a, b, c) on the x, y, z axes.
        output_path: Output image path (format from suffix).
        title: Optional title above the plot.
        dpi: Image resolution.
        marker_size: Scatter marker area.
        color: Marker color.

    Returns:
        Path to the output image.
    """
    output_path = Path(output_path)
    coords = np.asarray(points, dtype=float).reshape(-1, 3)

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(projection="3d")
    if len(coords):
        ax.scatter(coords[:, 0], coords[:, 1], coords[:, 2],
                   s=marker_size, c=color, marker="s", depthshade=True)
        # Equal scaling so spheres look like spheres
        lo, hi = coords.min(axis=0), coords.max(axis=0)
        ax.set_box_aspect(np.maximum(hi - lo, 1.0))
    ax.set_xlabel("a")
    ax.set_ylabel("b")
    ax.set_zlabel("c")
    if title:
        ax.set_title(f"{title} ({len(coords)} voxels)")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return output_path
