"""
Quality diagnostics for an approximated Voronoi subdivision.

Measures how much of the domain the render triangles cover and how often the
color of a triangle agrees with the exact nearest site of its centroid,
computed with a k-d tree.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import structlog
from scipy.spatial import cKDTree

from ..config import settings
from .coloring import nearest_site
from .geometry import Point, RenderTriangle, Site

logger = structlog.get_logger()


@dataclass(frozen=True)
class CoverageReport:
    triangle_count: int
    covered_area: float
    domain_area: float
    color_agreement: float  # fraction of triangles colored like their exact nearest site

    @property
    def covered_fraction(self) -> float:
        return self.covered_area / self.domain_area


def analyze_coverage(triangles: Sequence[RenderTriangle], sites: Sequence[Site]) -> CoverageReport:
    """
    Summarize a render triangle list.

    Covered area is the plain sum of triangle areas, which is exact only for
    non-overlapping output. Color agreement is 1.0 for an empty list. The
    k-d tree only narrows the search; equidistant sites are resolved with
    ``nearest_site`` so ties go to the first site, as in color assignment.
    """
    if not sites:
        raise ValueError("coverage analysis needs at least one site")

    span = settings.domain_max - settings.domain_min
    domain_area = span * span
    covered_area = float(sum(t.triangle.area for t in triangles))

    agreement = 1.0
    if triangles:
        tree = cKDTree(np.array([(s.x, s.y) for s in sites]))
        centroids = np.array([tuple(t.triangle.centroid) for t in triangles])
        distances, nearest = tree.query(centroids)
        matches = 0
        for t, center, d, idx in zip(triangles, centroids, distances, nearest):
            # near ties are settled by nearest_site so the first site wins
            close = sorted(set(tree.query_ball_point(center, r=d + settings.epsilon)) | {int(idx)})
            point = Point(float(center[0]), float(center[1]))
            expected = nearest_site(point, [sites[i] for i in close])
            if t.color == expected.color:
                matches += 1
        agreement = matches / len(triangles)

    report = CoverageReport(
        triangle_count=len(triangles),
        covered_area=covered_area,
        domain_area=domain_area,
        color_agreement=agreement,
    )
    logger.info(
        "Coverage analyzed",
        triangles=report.triangle_count,
        covered_fraction=round(report.covered_fraction, 4),
        color_agreement=round(report.color_agreement, 4),
    )
    return report
