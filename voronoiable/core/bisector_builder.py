"""
Voronoi-edge candidate builder.

Alternative to triangulating and subdividing: Voronoi vertices lie where
perpendicular bisectors of site pairs cross, and Voronoi edges cross the
segment between two sites at its midpoint. Triangles
``(site, bisector crossing, midpoint)`` are enumerated and accepted in order
when they contain no other site or crossing and overlap nothing accepted.

There is no ranking among candidates; enumeration order decides.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import structlog

from .fan_triangulator import TriangleAccumulator
from .geometry import (
    Line,
    Point,
    PointLike,
    Triangle,
    contains_foreign_point,
    in_domain,
    intersect,
    is_degenerate,
    midpoint,
    perpendicular_bisector,
    points_equal,
    to_points,
)

logger = structlog.get_logger()


@dataclass
class BisectorCandidates:
    """Intermediate products of the candidate builder."""
    bisectors: List[Line] = field(default_factory=list)
    intersections: List[Point] = field(default_factory=list)  # unfiltered
    vertices: List[Point] = field(default_factory=list)       # filtered intersections
    midpoints: List[Point] = field(default_factory=list)


def site_bisectors(points: Sequence[Point], eps: Optional[float] = None) -> List[Line]:
    """Bisectors of all unordered site pairs; pairs with a vertical bisector are dropped."""
    bisectors = []
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            line = perpendicular_bisector(points[i], points[j], eps)
            if line is not None:
                bisectors.append(line)
    return bisectors


def bisector_intersections(bisectors: Sequence[Line], eps: Optional[float] = None) -> List[Point]:
    """Crossings of every pair of bisectors; parallel pairs are dropped."""
    crossings = []
    for i in range(len(bisectors)):
        for j in range(i + 1, len(bisectors)):
            crossing = intersect(bisectors[i], bisectors[j], eps)
            if crossing is not None:
                crossings.append(crossing)
    return crossings


def pair_midpoints(points: Sequence[Point]) -> List[Point]:
    """Midpoints of every ordered pair of distinct sites."""
    return [
        midpoint(points[i], points[j])
        for i in range(len(points))
        for j in range(len(points))
        if i != j
    ]


def unique_points(points: Sequence[Point], eps: Optional[float] = None) -> List[Point]:
    """Drop tolerant duplicates, keeping the first occurrence."""
    unique: List[Point] = []
    for p in points:
        if not any(points_equal(p, q, eps) for q in unique):
            unique.append(p)
    return unique


def filter_vertices(
    intersections: Sequence[Point], sites: Sequence[Point], eps: Optional[float] = None
) -> List[Point]:
    """Candidate Voronoi vertices: deduplicated, not on a site, inside the domain."""
    return [
        p for p in unique_points(intersections, eps)
        if in_domain(p, eps) and not any(points_equal(p, s, eps) for s in sites)
    ]


def collect_candidates(points: Sequence[Point], eps: Optional[float] = None) -> BisectorCandidates:
    bisectors = site_bisectors(points, eps)
    intersections = bisector_intersections(bisectors, eps)
    return BisectorCandidates(
        bisectors=bisectors,
        intersections=intersections,
        vertices=filter_vertices(intersections, points, eps),
        midpoints=pair_midpoints(points),
    )


def build_bisector_triangles(
    sites: Sequence[PointLike],
    threshold: Optional[int] = None,
    eps: Optional[float] = None,
) -> List[Triangle]:
    """
    Accept ``(site, vertex, midpoint)`` triangles in enumeration order.

    A triangle is accepted when it is not degenerate, no site and no bisector
    crossing other than its own vertices lies inside or on it, and it does not
    overlap an already accepted triangle.

    Returns:
        Accepted triangles in acceptance order
    """
    points = to_points(sites)
    candidates = collect_candidates(points, eps)
    # Duplicates do not change the containment test, only its cost
    blockers = unique_points(candidates.intersections, eps)

    accumulator = TriangleAccumulator(eps=eps)
    if threshold is not None:
        accumulator.threshold = threshold

    for site in points:
        for vertex in candidates.vertices:
            for mid in candidates.midpoints:
                triangle = Triangle(site, vertex, mid)
                if is_degenerate(triangle, eps):
                    continue
                if accumulator.contains(triangle):
                    continue
                if contains_foreign_point(triangle, points, eps):
                    continue
                if contains_foreign_point(triangle, blockers, eps):
                    continue
                if accumulator.overlaps(triangle):
                    continue
                accumulator.accept(triangle)

    logger.info(
        "Bisector candidates processed",
        sites=len(points),
        bisectors=len(candidates.bisectors),
        intersections=len(candidates.intersections),
        vertices=len(candidates.vertices),
        triangles=len(accumulator),
    )
    return list(accumulator)
