"""
Flattening of render output into interleaved vertex arrays.

Each row is ``(x, y, r, g, b)`` as float32. Triangles are not indexed: every
triangle contributes its three vertices, each carrying the triangle's color.
"""

from typing import Sequence

import numpy as np

from .geometry import RenderTriangle, Site

VERTEX_SIZE = 5  # 2 position floats + 3 color floats


def triangles_to_vertices(triangles: Sequence[RenderTriangle]) -> np.ndarray:
    """Vertex array of shape ``(3 * len(triangles), 5)``."""
    vertices = np.empty((3 * len(triangles), VERTEX_SIZE), dtype=np.float32)
    for i, render in enumerate(triangles):
        color = tuple(render.color)
        for j, p in enumerate(render.vertices):
            vertices[3 * i + j] = (p.x, p.y) + color
    return vertices


def sites_to_vertices(sites: Sequence[Site]) -> np.ndarray:
    """Point-overlay vertex array of shape ``(len(sites), 5)``."""
    vertices = np.empty((len(sites), VERTEX_SIZE), dtype=np.float32)
    for i, site in enumerate(sites):
        vertices[i] = (site.x, site.y) + tuple(site.color)
    return vertices
