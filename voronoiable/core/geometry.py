"""
Geometric kernel for the Voronoi approximation.

Primitive types (points, slope-intercept lines, triangles) and the
floating-point predicates every strategy is built on.

Degenerate inputs never raise. Constructions that have no answer (a vertical
line, the crossing of parallel lines) return ``None`` and callers branch on it.

All tolerant comparisons use ``settings.epsilon`` scaled by the magnitude of
the compared values, so the default ``1e-5`` acts as an absolute tolerance for
coordinates inside the ``[-1, 1]`` domain. Area-based predicates convert areas
to heights over an edge before comparing, so the tolerance is always a length.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..config import settings


@dataclass(frozen=True)
class Point:
    """2D point."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Color:
    """RGB color with components in [0, 1]."""
    r: float
    g: float
    b: float

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b


@dataclass(frozen=True)
class Site:
    """Input point with the color of the cell it generates."""
    point: Point
    color: Color

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y


@dataclass(frozen=True)
class Line:
    """Non-vertical line ``y = a * x + b``."""
    a: float  # slope
    b: float  # intercept

    def at(self, x: float) -> float:
        return self.a * x + self.b


@dataclass(frozen=True)
class Triangle:
    """Three points with no defined winding."""
    p1: Point
    p2: Point
    p3: Point

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.p1, self.p2, self.p3)

    @property
    def edges(self) -> Tuple[Tuple[Point, Point], ...]:
        return ((self.p1, self.p2), (self.p2, self.p3), (self.p3, self.p1))

    @property
    def area(self) -> float:
        return triangle_area(self.p1, self.p2, self.p3)

    @property
    def centroid(self) -> Point:
        return centroid(self.vertices)


@dataclass(frozen=True)
class RenderTriangle:
    """Triangle with the color it is drawn with."""
    triangle: Triangle
    color: Color

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return self.triangle.vertices


PointLike = Union[Point, Site]


# ----------------------------------------------------------------------
#  TOLERANT COMPARISONS
# ----------------------------------------------------------------------

def _tolerance(eps: Optional[float]) -> float:
    return settings.epsilon if eps is None else eps


def nearly_equal(a: float, b: float, eps: Optional[float] = None) -> bool:
    """True when ``a`` and ``b`` differ by at most ``eps`` times their magnitude (at least 1)."""
    return abs(a - b) <= _tolerance(eps) * max(1.0, abs(a), abs(b))


def nearly_zero(value: float, eps: Optional[float] = None) -> bool:
    return nearly_equal(value, 0.0, eps)


def less_or_close(a: float, b: float, eps: Optional[float] = None) -> bool:
    """Tolerant ``a <= b``."""
    return a <= b or nearly_equal(a, b, eps)


def points_equal(p: Point, q: Point, eps: Optional[float] = None) -> bool:
    return nearly_equal(p.x, q.x, eps) and nearly_equal(p.y, q.y, eps)


def triangles_equal(t1: Triangle, t2: Triangle, eps: Optional[float] = None) -> bool:
    """True when both triangles have the same vertex set, in any order."""
    return (
        all(any(points_equal(v, w, eps) for w in t2.vertices) for v in t1.vertices)
        and all(any(points_equal(v, w, eps) for w in t1.vertices) for v in t2.vertices)
    )


def in_domain(p: Point, eps: Optional[float] = None) -> bool:
    """Check that ``p`` lies inside the configured square domain (bounds included)."""
    lo, hi = settings.domain_min, settings.domain_max
    return (
        less_or_close(lo, p.x, eps) and less_or_close(p.x, hi, eps)
        and less_or_close(lo, p.y, eps) and less_or_close(p.y, hi, eps)
    )


# ----------------------------------------------------------------------
#  BASIC CONSTRUCTIONS
# ----------------------------------------------------------------------

def to_points(items: Iterable[PointLike]) -> List[Point]:
    """Positions of a mixed sequence of points and sites."""
    return [item.point if isinstance(item, Site) else item for item in items]


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def midpoint(p1: Point, p2: Point) -> Point:
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def centroid(points: Iterable[Point]) -> Point:
    """Center of gravity of a non-empty set of points."""
    sum_x = sum_y = 0.0
    n = 0
    for p in points:
        sum_x += p.x
        sum_y += p.y
        n += 1
    if n == 0:
        raise ValueError("centroid of an empty point set")
    return Point(sum_x / n, sum_y / n)


def line_through(p1: Point, p2: Point, eps: Optional[float] = None) -> Optional[Line]:
    """
    Line through two points.

    Returns:
        The line, or None when the points share an x coordinate (vertical line)
    """
    if nearly_equal(p1.x, p2.x, eps):
        return None
    a = (p1.y - p2.y) / (p1.x - p2.x)
    return Line(a, p1.y - a * p1.x)


def intersect(l1: Line, l2: Line, eps: Optional[float] = None) -> Optional[Point]:
    """
    Crossing point of two lines.

    Returns:
        The point, or None if the lines are parallel (equal slopes)
    """
    if nearly_equal(l1.a, l2.a, eps):
        return None
    x = (l2.b - l1.b) / (l1.a - l2.a)
    return Point(x, l1.at(x))


def perpendicular_bisector(p1: Point, p2: Point, eps: Optional[float] = None) -> Optional[Line]:
    """
    Perpendicular bisector of the segment ``p1 p2``.

    A vertical segment has a horizontal bisector. Returns None when the
    bisector would be vertical (horizontal segment) or the points coincide.
    """
    mid = midpoint(p1, p2)
    line = line_through(p1, p2, eps)
    if line is None:
        if nearly_equal(p1.y, p2.y, eps):
            return None
        return Line(0.0, mid.y)
    if nearly_zero(line.a, eps):
        return None
    slope = -1.0 / line.a
    return Line(slope, mid.y - slope * mid.x)


def triangle_area(p1: Point, p2: Point, p3: Point) -> float:
    """
    Unsigned triangle area.

    Uses the shoelace determinant, so edges of any direction are supported.
    The result is exactly ``0.5 * base * height`` for every non-degenerate
    triangle and close to zero for collinear vertices.
    """
    cross = (p2.x - p1.x) * (p3.y - p1.y) - (p3.x - p1.x) * (p2.y - p1.y)
    return abs(cross) / 2.0


def height_over(area: float, base: float) -> float:
    """Height of a triangle with the given area over an edge of length ``base``."""
    return 2.0 * area / base


def is_degenerate(triangle: Triangle, eps: Optional[float] = None) -> bool:
    """
    True when the triangle has no interior worth keeping.

    The height over the longest edge is compared with ``eps``, so small but
    well-shaped triangles are kept while slivers and collinear vertices are
    rejected at every scale.
    """
    longest = max(distance(p, q) for p, q in triangle.edges)
    if nearly_zero(longest, eps):
        return True
    return nearly_zero(height_over(triangle.area, longest), eps)


# ----------------------------------------------------------------------
#  PREDICATES
# ----------------------------------------------------------------------

def point_in_triangle(
    triangle: Triangle, p: Point, inclusive: bool = True, eps: Optional[float] = None
) -> bool:
    """
    Area-sum containment test.

    ``p`` is inside when the three triangles obtained by replacing one vertex
    with ``p`` add up to the area of ``triangle``. The excess of the sum is
    allowed up to a strip ``eps`` wide along the shortest edge. With
    ``inclusive=False``, points whose distance to some edge (the height of
    that sub-triangle) is within ``eps`` are rejected as on an edge or vertex.
    """
    a, b, c = triangle.vertices
    sub_areas = (
        triangle_area(p, b, c),
        triangle_area(a, p, c),
        triangle_area(a, b, p),
    )
    lengths = (distance(b, c), distance(a, c), distance(a, b))

    slack = _tolerance(eps) * min(lengths)
    if sum(sub_areas) - triangle.area > slack:
        return False
    if inclusive:
        return True

    for sub_area, length, q in zip(sub_areas, lengths, (b, a, a)):
        if length == 0.0:
            # coincident vertices, the edge is a point
            gap = distance(p, q)
        else:
            gap = height_over(sub_area, length)
        if nearly_zero(gap, eps):
            return False
    return True


def _within_bounds(p: Point, s1: Point, s2: Point, eps: Optional[float]) -> bool:
    return (
        less_or_close(min(s1.x, s2.x), p.x, eps)
        and less_or_close(p.x, max(s1.x, s2.x), eps)
        and less_or_close(min(s1.y, s2.y), p.y, eps)
        and less_or_close(p.y, max(s1.y, s2.y), eps)
    )


def segments_intersect(
    a1: Point, a2: Point, b1: Point, b2: Point, eps: Optional[float] = None
) -> bool:
    """
    Check whether segment ``a1 a2`` crosses segment ``b1 b2``.

    The crossing of the supporting lines must fall within both segments and
    must not be one of the four endpoints, so segments that only share an
    endpoint do not intersect.

    Collinear segments are always reported as intersecting, whether or not
    they overlap. Parallel segments on distinct lines never intersect.
    """
    line_a = line_through(a1, a2, eps)
    line_b = line_through(b1, b2, eps)

    if line_a is None and line_b is None:
        return nearly_equal(a1.x, b1.x, eps)
    if line_a is None:
        crossing = Point(a1.x, line_b.at(a1.x))
    elif line_b is None:
        crossing = Point(b1.x, line_a.at(b1.x))
    else:
        crossing = intersect(line_a, line_b, eps)
        if crossing is None:
            return nearly_equal(line_a.b, line_b.b, eps)

    if not (_within_bounds(crossing, a1, a2, eps) and _within_bounds(crossing, b1, b2, eps)):
        return False
    return not any(points_equal(crossing, end, eps) for end in (a1, a2, b1, b2))


def count_edge_intersections(t1: Triangle, t2: Triangle, eps: Optional[float] = None) -> int:
    """Number of the 9 edge pairs of two triangles that intersect."""
    return sum(
        1
        for a1, a2 in t1.edges
        for b1, b2 in t2.edges
        if segments_intersect(a1, a2, b1, b2, eps)
    )


def triangles_intersect(
    t1: Triangle,
    t2: Triangle,
    threshold: Optional[int] = None,
    eps: Optional[float] = None,
) -> bool:
    """
    Approximate overlap test for two triangles.

    Overlap is reported when a vertex of one triangle lies strictly inside the
    other, or when at least ``threshold`` of the 9 edge pairs intersect
    (``settings.edge_intersection_threshold``, 2 by default). This is a cheap
    stand-in for polygon clipping, not an exact test: a single shared edge
    counts as one intersecting pair and does not make neighbours overlap.
    """
    if threshold is None:
        threshold = settings.edge_intersection_threshold

    if any(point_in_triangle(t2, v, inclusive=False, eps=eps) for v in t1.vertices):
        return True
    if any(point_in_triangle(t1, v, inclusive=False, eps=eps) for v in t2.vertices):
        return True
    return count_edge_intersections(t1, t2, eps) >= threshold


def contains_foreign_point(
    triangle: Triangle, points: Sequence[Point], eps: Optional[float] = None
) -> bool:
    """True if a point other than the triangle's own vertices lies inside or on it."""
    for p in points:
        if any(points_equal(p, v, eps) for v in triangle.vertices):
            continue
        if point_in_triangle(triangle, p, inclusive=True, eps=eps):
            return True
    return False
