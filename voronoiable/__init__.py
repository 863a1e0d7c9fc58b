"""Approximate Voronoi subdivisions of the [-1, 1] square as colored triangles."""

__version__ = "0.1.0"
