"""Example: a hollow tower with a torus crown, built through the function table.

Run:  python examples/hollow_tower.py
Writes output/hollow_tower.png and prints the voxel count.
"""

from pathlib import Path

from voxel_shapes.export.render import render_points
from voxel_shapes.generators.transforms import translate
from voxel_shapes.host import function_table
from voxel_shapes.models.errors import Failure

OUTPUT_DIR = Path(__file__).parent.parent / "output"


def main():
    table = function_table()

    # Hollow cylinder: radius 6, wall 2 voxels thick, 10 voxels tall, upright
    walls = table["circle"]([6, 2, 10], "z")
    if isinstance(walls, Failure):
        raise SystemExit(walls.message)

    # Torus crown lifted to the top of the tower (z facing packs height second)
    crown = table["torus"]([6, 1.5], "z")
    crown = table["comp"](translate([0, 10, 0]), crown)
    if isinstance(crown, Failure):
        raise SystemExit(crown.message)

    # Permute the tower so height is on the same coordinate as the crown's
    walls = table["comp"](lambda p: (p[1], p[0], p[2]), walls)

    points = walls + crown
    path = render_points(points, OUTPUT_DIR / "hollow_tower.png", title="hollow tower")
    print(f"{len(points)} voxels -> {path}")


if __name__ == "__main__":
    main()
