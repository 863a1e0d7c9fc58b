"""
Greedy fan triangulation.

Every site is treated in input order as the anchor of a fan. The anchor is
joined with each cyclically consecutive pair of the remaining sites, and the
smallest candidate triangle that does not overlap anything accepted so far is
accepted. The scan repeats until no candidate qualifies, then moves on to the
next site.

This is best-effort: triangles are never allowed to overlap and smaller ones
always win, but the domain is not guaranteed to be covered. Sparse layouts
leave gaps, fewer than three sites give no triangles, and fully collinear
sites give none either.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

import structlog

from ..config import settings
from .geometry import (
    Point,
    PointLike,
    Triangle,
    is_degenerate,
    to_points,
    triangles_equal,
    triangles_intersect,
)

logger = structlog.get_logger()


@dataclass
class TriangleAccumulator:
    """Triangles accepted during one pass, shared by all anchors of the pass."""

    threshold: int = field(default_factory=lambda: settings.edge_intersection_threshold)
    eps: Optional[float] = None
    triangles: List[Triangle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self.triangles)

    def contains(self, candidate: Triangle) -> bool:
        return any(triangles_equal(candidate, t, self.eps) for t in self.triangles)

    def overlaps(self, candidate: Triangle) -> bool:
        """Check the candidate against every accepted triangle."""
        return any(
            triangles_intersect(candidate, t, self.threshold, self.eps)
            for t in self.triangles
        )

    def accept(self, triangle: Triangle) -> None:
        self.triangles.append(triangle)


def find_smallest_candidate(
    anchor: Point,
    others: Sequence[Point],
    accumulator: TriangleAccumulator,
    max_area: Optional[float] = None,
) -> Optional[Triangle]:
    """
    Smallest qualifying fan triangle for ``anchor``.

    Candidates are ``(anchor, others[i], others[i + 1])`` with wrap-around.
    A candidate qualifies when it is not degenerate, its area is below
    ``max_area``, it was not accepted before and it does not overlap an
    accepted triangle.
    Ties keep the first candidate in scan order.

    Returns:
        The winning triangle, or None if no candidate qualifies
    """
    if len(others) < 2:
        return None

    best: Optional[Triangle] = None
    best_area = settings.max_candidate_area if max_area is None else max_area

    for i in range(len(others)):
        candidate = Triangle(anchor, others[i], others[(i + 1) % len(others)])
        area = candidate.area
        if area >= best_area or is_degenerate(candidate, accumulator.eps):
            continue
        if accumulator.contains(candidate) or accumulator.overlaps(candidate):
            continue
        best, best_area = candidate, area

    return best


def triangulate_site(
    points: Sequence[Point],
    anchor_index: int,
    accumulator: TriangleAccumulator,
    max_area: Optional[float] = None,
) -> int:
    """
    Grow the fan of one site into ``accumulator``.

    Returns:
        Number of triangles accepted for this site
    """
    anchor = points[anchor_index]
    others = list(points[:anchor_index]) + list(points[anchor_index + 1:])

    accepted = 0
    while True:
        best = find_smallest_candidate(anchor, others, accumulator, max_area)
        if best is None:
            break
        accumulator.accept(best)
        accepted += 1

    logger.debug("No valid candidate left", anchor=anchor_index, accepted=accepted)
    return accepted


def triangulate(
    sites: Sequence[PointLike],
    threshold: Optional[int] = None,
    max_area: Optional[float] = None,
    eps: Optional[float] = None,
) -> List[Triangle]:
    """
    Run the greedy fan triangulation over all sites.

    Args:
        sites: Sites or bare points, processed in order
        threshold: Edge-intersection threshold of the overlap test
        max_area: Initial best-area sentinel
        eps: Comparison tolerance

    Returns:
        Accepted triangles in acceptance order
    """
    points = to_points(sites)
    accumulator = TriangleAccumulator(eps=eps)
    if threshold is not None:
        accumulator.threshold = threshold

    for index in range(len(points)):
        triangulate_site(points, index, accumulator, max_area)

    logger.info("Fan triangulation complete", sites=len(points), triangles=len(accumulator))
    return list(accumulator)
