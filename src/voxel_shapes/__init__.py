"""Voxel shape generators: lattice points inside disks, spheres, ellipses and tori."""

__version__ = "0.1.0"
