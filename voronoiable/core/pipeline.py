"""
End-to-end generation of render triangles.

Strategies:
    - "centroid": fan triangulation, then centroid fans
    - "circumcenter": fan triangulation, then circumcenter fans
    - "bisector": Voronoi-edge candidates, no subdivision
    - "fan": fan triangulation output as is
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import structlog

from ..config import settings
from .bisector_builder import build_bisector_triangles
from .coloring import assign_colors
from .fan_triangulator import triangulate
from .geometry import RenderTriangle, Site
from .subdivision import SUBDIVIDERS, SkippedTriangle

logger = structlog.get_logger()

STRATEGIES = ("centroid", "circumcenter", "bisector", "fan")


@dataclass
class PipelineResult:
    strategy: str
    triangles: List[RenderTriangle] = field(default_factory=list)
    skipped: List[SkippedTriangle] = field(default_factory=list)
    base_triangle_count: int = 0  # triangles before subdivision


def build_render_triangles(
    sites: Sequence[Site], strategy: Optional[str] = None
) -> PipelineResult:
    """
    Compute the colored triangles for a site list.

    Args:
        sites: Input sites
        strategy: One of STRATEGIES, ``settings.default_strategy`` when omitted

    Returns:
        PipelineResult with render triangles and the triangles that could not
        be subdivided
    """
    strategy = strategy or settings.default_strategy
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{strategy}'. Available: {', '.join(STRATEGIES)}")

    logger.info("Building render triangles", strategy=strategy, sites=len(sites))

    if strategy == "bisector":
        base = build_bisector_triangles(sites)
        geometry, skipped = base, []
    else:
        base = triangulate(sites)
        if strategy == "fan":
            geometry, skipped = base, []
        else:
            subdivision = SUBDIVIDERS[strategy](base)
            geometry, skipped = subdivision.triangles, subdivision.skipped

    result = PipelineResult(
        strategy=strategy,
        triangles=assign_colors(geometry, sites) if sites else [],
        skipped=skipped,
        base_triangle_count=len(base),
    )
    logger.info(
        "Render triangles ready",
        strategy=strategy,
        base_triangles=result.base_triangle_count,
        triangles=len(result.triangles),
        skipped=len(result.skipped),
    )
    return result
