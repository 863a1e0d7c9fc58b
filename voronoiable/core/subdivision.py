"""
Cell subdivision of triangulated sites.

Two interchangeable strategies split every input triangle into a six-triangle
fan around an interior point:

- centroid fan: around the triangle's center of gravity
- circumcenter fan: around the circumcenter, where the wedges follow the
  perpendicular bisectors of the edges like the boundary of a Voronoi cell

The circumcenter is only inside acute triangles. Right, obtuse and degenerate
triangles produce no sub-triangles; they are reported in
``SubdivisionResult.skipped`` with the reason.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import structlog

from .geometry import (
    Point,
    Triangle,
    intersect,
    is_degenerate,
    midpoint,
    perpendicular_bisector,
    point_in_triangle,
)

logger = structlog.get_logger()


class SkipReason(str, Enum):
    """Why a triangle produced no sub-triangles."""
    RIGHT_TRIANGLE = "right_triangle"        # circumcenter on an edge
    OBTUSE_TRIANGLE = "obtuse_triangle"      # circumcenter outside
    DEGENERATE_TRIANGLE = "degenerate_triangle"  # collapsed to a segment or no circumcenter


@dataclass(frozen=True)
class SkippedTriangle:
    triangle: Triangle
    reason: SkipReason


@dataclass
class SubdivisionResult:
    """Sub-triangles of a subdivision pass and the inputs it could not split."""
    triangles: List[Triangle] = field(default_factory=list)
    skipped: List[SkippedTriangle] = field(default_factory=list)

    def extend(self, other: "SubdivisionResult") -> None:
        self.triangles.extend(other.triangles)
        self.skipped.extend(other.skipped)


def fan_around(triangle: Triangle, center: Point) -> List[Triangle]:
    """
    Six triangles joining ``center`` with the vertices and edge midpoints.

    For ``(A, B, C)`` the order is ``(A, mAB), (mAB, B), (B, mBC), (mBC, C),
    (C, mCA), (mCA, A)``, each closed by ``center``.
    """
    a, b, c = triangle.vertices
    m_ab, m_bc, m_ca = midpoint(a, b), midpoint(b, c), midpoint(c, a)
    return [
        Triangle(a, m_ab, center),
        Triangle(m_ab, b, center),
        Triangle(b, m_bc, center),
        Triangle(m_bc, c, center),
        Triangle(c, m_ca, center),
        Triangle(m_ca, a, center),
    ]


def centroid_fan(triangle: Triangle, eps: Optional[float] = None) -> SubdivisionResult:
    if is_degenerate(triangle, eps):
        return SubdivisionResult(skipped=[SkippedTriangle(triangle, SkipReason.DEGENERATE_TRIANGLE)])
    return SubdivisionResult(triangles=fan_around(triangle, triangle.centroid))


def circumcenter(triangle: Triangle, eps: Optional[float] = None) -> Optional[Point]:
    """
    Circumcenter from the crossing of two perpendicular bisectors.

    Edge pairs are tried in the order AB/BC, BC/CA, CA/AB and the first pair
    whose bisectors exist and are not parallel decides the result; the third
    bisector is not checked against it.

    Returns:
        The circumcenter, or None for a degenerate triangle
    """
    bisectors = [perpendicular_bisector(p, q, eps) for p, q in triangle.edges]
    for i in range(3):
        first, second = bisectors[i], bisectors[(i + 1) % 3]
        if first is None or second is None:
            continue
        center = intersect(first, second, eps)
        if center is not None:
            return center
    return None


def classify_circumcenter(
    triangle: Triangle, eps: Optional[float] = None
) -> Tuple[Optional[Point], Optional[SkipReason]]:
    """
    Locate the circumcenter relative to the triangle.

    Returns:
        ``(center, None)`` when the center is strictly inside (acute
        triangle), otherwise ``(center or None, reason)``
    """
    if is_degenerate(triangle, eps):
        return None, SkipReason.DEGENERATE_TRIANGLE

    center = circumcenter(triangle, eps)
    if center is None:
        return None, SkipReason.DEGENERATE_TRIANGLE
    if point_in_triangle(triangle, center, inclusive=False, eps=eps):
        return center, None
    if point_in_triangle(triangle, center, inclusive=True, eps=eps):
        return center, SkipReason.RIGHT_TRIANGLE
    return center, SkipReason.OBTUSE_TRIANGLE


def circumcenter_fan(triangle: Triangle, eps: Optional[float] = None) -> SubdivisionResult:
    center, reason = classify_circumcenter(triangle, eps)
    if reason is not None:
        return SubdivisionResult(skipped=[SkippedTriangle(triangle, reason)])
    return SubdivisionResult(triangles=fan_around(triangle, center))


def _subdivide(
    triangles: Iterable[Triangle],
    split: Callable[[Triangle, Optional[float]], SubdivisionResult],
    eps: Optional[float],
) -> SubdivisionResult:
    result = SubdivisionResult()
    for triangle in triangles:
        result.extend(split(triangle, eps))
    return result


def subdivide_centroid(triangles: Iterable[Triangle], eps: Optional[float] = None) -> SubdivisionResult:
    """Centroid fan of every triangle."""
    result = _subdivide(triangles, centroid_fan, eps)
    logger.info("Centroid subdivision complete", triangles=len(result.triangles),
                skipped=len(result.skipped))
    return result


def subdivide_circumcenter(triangles: Iterable[Triangle], eps: Optional[float] = None) -> SubdivisionResult:
    """Circumcenter fan of every triangle; non-acute inputs are skipped."""
    result = _subdivide(triangles, circumcenter_fan, eps)
    for skipped in result.skipped:
        logger.debug("Triangle not subdivided", reason=skipped.reason.value)
    logger.info("Circumcenter subdivision complete", triangles=len(result.triangles),
                skipped=len(result.skipped))
    return result


SUBDIVIDERS: Dict[str, Callable[..., SubdivisionResult]] = {
    "centroid": subdivide_centroid,
    "circumcenter": subdivide_circumcenter,
}
