"""
Core geometry and generation functionality.
"""

from .geometry import Point, Color, Site, Line, Triangle, RenderTriangle
from .fan_triangulator import triangulate, TriangleAccumulator
from .subdivision import (subdivide_centroid, subdivide_circumcenter, SubdivisionResult,
                          SkipReason, SkippedTriangle)
from .bisector_builder import build_bisector_triangles
from .coloring import assign_colors, nearest_site
from .pipeline import build_render_triangles, PipelineResult, STRATEGIES
from .scenes import make_sites, load_scene
from .vertex_stream import triangles_to_vertices, sites_to_vertices
from .coverage import analyze_coverage, CoverageReport

__all__ = ['Point', 'Color', 'Site', 'Line', 'Triangle', 'RenderTriangle',
           'triangulate', 'TriangleAccumulator',
           'subdivide_centroid', 'subdivide_circumcenter', 'SubdivisionResult',
           'SkipReason', 'SkippedTriangle',
           'build_bisector_triangles', 'assign_colors', 'nearest_site',
           'build_render_triangles', 'PipelineResult', 'STRATEGIES',
           'make_sites', 'load_scene', 'triangles_to_vertices', 'sites_to_vertices',
           'analyze_coverage', 'CoverageReport']
