"""Rendering of point sequences."""
