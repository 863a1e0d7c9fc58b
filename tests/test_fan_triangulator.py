"""Tests for greedy fan triangulation."""

import pytest
from voronoiable.core.fan_triangulator import (
    TriangleAccumulator, find_smallest_candidate, triangulate, triangulate_site
)
from voronoiable.core.geometry import Point, Triangle, triangles_equal, triangles_intersect
from voronoiable.core.scenes import GRID_LAYOUT, MINIMAL_LAYOUT, SKEWED_LAYOUT, make_sites


# corners of a small right triangle and two points just inside its hypotenuse
SMALL_CLUSTER = [(0.0, 0.0), (0.008, 0.0), (0.0, 0.008), (0.006, 0.001), (0.001, 0.006)]


def as_points(coordinates):
    return [Point(x, y) for x, y in coordinates]


def assert_no_overlaps(triangles):
    """Every triangle is checked against the ones accepted before it."""
    for j, later in enumerate(triangles):
        for earlier in triangles[:j]:
            assert not triangles_intersect(later, earlier), \
                f"Triangle {later} overlaps {earlier}"


class TestTriangleAccumulator:
    """Test the accepted-triangle accumulator."""

    def test_starts_empty(self):
        """Test that a new accumulator holds no triangles."""
        accumulator = TriangleAccumulator()
        assert len(accumulator) == 0
        assert not accumulator.overlaps(Triangle(Point(0, 0), Point(1, 0), Point(0, 1)))

    def test_contains_in_any_vertex_order(self):
        """Test that membership ignores vertex order."""
        accumulator = TriangleAccumulator()
        accumulator.accept(Triangle(Point(0, 0), Point(1, 0), Point(0, 1)))
        assert accumulator.contains(Triangle(Point(0, 1), Point(0, 0), Point(1, 0)))

    def test_overlaps(self):
        """Test overlap checks against accepted triangles."""
        accumulator = TriangleAccumulator()
        accumulator.accept(Triangle(Point(0, 0), Point(1, 0), Point(0, 1)))
        assert accumulator.overlaps(Triangle(Point(0.2, 0.2), Point(2, 0.2), Point(0.2, 2)))
        assert not accumulator.overlaps(Triangle(Point(1, 0), Point(0, 1), Point(1, 1)))


class TestCandidateSelection:
    """Test smallest-candidate selection for one anchor."""

    def test_picks_smallest_area(self):
        """Test that the smallest candidate wins."""
        points = as_points(SKEWED_LAYOUT)
        best = find_smallest_candidate(points[0], points[1:], TriangleAccumulator())
        assert triangles_equal(best, Triangle(points[0], points[1], points[2]))
        assert best.area == pytest.approx(0.01)

    def test_needs_two_other_sites(self):
        """Test that an anchor needs at least two other sites."""
        assert find_smallest_candidate(Point(0, 0), [Point(1, 1)], TriangleAccumulator()) is None

    def test_area_sentinel(self):
        """Test that candidates above the area sentinel are ignored."""
        points = as_points(SKEWED_LAYOUT)
        assert find_smallest_candidate(points[0], points[1:], TriangleAccumulator(),
                                       max_area=0.005) is None

    def test_skips_overlapping_candidates(self):
        """Test that an already accepted triangle is not picked again."""
        points = as_points(SKEWED_LAYOUT)
        accumulator = TriangleAccumulator()
        accumulator.accept(Triangle(points[0], points[1], points[2]))
        best = find_smallest_candidate(points[0], points[1:], accumulator)
        assert best is not None
        assert not triangles_equal(best, Triangle(points[0], points[1], points[2]))

    def test_triangulate_site_grows_fan(self):
        """Test that every accepted triangle is anchored at the site."""
        points = as_points(SKEWED_LAYOUT)
        accumulator = TriangleAccumulator()
        accepted = triangulate_site(points, 0, accumulator)
        assert accepted == len(accumulator)
        assert accepted >= 1
        assert all(points[0] in t.vertices for t in accumulator)


class TestTriangulate:
    """Test full triangulation runs."""

    def test_minimal_scene_gives_single_triangle(self):
        """Three sites admit exactly one triangle."""
        sites = make_sites(MINIMAL_LAYOUT, seed=1)
        triangles = triangulate(sites)

        assert len(triangles) == 1
        expected = Triangle(*(s.point for s in sites))
        assert triangles_equal(triangles[0], expected)

    def test_skewed_scene(self):
        """Test the skewed scene yields disjoint triangles."""
        triangles = triangulate(as_points(SKEWED_LAYOUT))

        assert len(triangles) >= 1
        assert all(t.area > 0 for t in triangles)
        assert_no_overlaps(triangles)

    def test_grid_scene(self):
        """Test the grid scene yields disjoint triangles."""
        triangles = triangulate(as_points(GRID_LAYOUT))

        assert len(triangles) >= 1
        assert all(t.area > 1e-5 for t in triangles)
        assert_no_overlaps(triangles)

    def test_accepts_sites_and_points(self):
        """Test that sites and bare points triangulate identically."""
        sites = make_sites(SKEWED_LAYOUT, seed=3)
        assert triangulate(sites) == triangulate([s.point for s in sites])

    @pytest.mark.parametrize("coordinates", [
        [],
        [(0.0, 0.0)],
        [(0.0, 0.0), (0.5, 0.5)],
    ])
    def test_too_few_sites(self, coordinates):
        """Test that fewer than three sites give no triangles."""
        assert triangulate(as_points(coordinates)) == []

    def test_collinear_sites(self):
        """Test that collinear sites give no triangles."""
        points = as_points([(-0.5, -0.5), (0.0, 0.0), (0.5, 0.5), (0.8, 0.8)])
        assert triangulate(points) == []

    def test_small_sites_form_a_triangle(self):
        """Test that three sites 0.004 apart still give their triangle."""
        triangles = triangulate(as_points([(0.1, 0.1), (0.104, 0.1), (0.1, 0.104)]))
        assert len(triangles) == 1

    def test_small_cluster_tiles_without_overlap(self):
        """Test that sites a few thousandths apart tile their hull without overlaps."""
        points = as_points(SMALL_CLUSTER)
        triangles = triangulate(points)

        assert len(triangles) == 5
        assert sum(t.area for t in triangles) == pytest.approx(
            Triangle(points[0], points[1], points[2]).area)
        assert_no_overlaps(triangles)

        scaled = [Triangle(*(Point(p.x * 100, p.y * 100) for p in t.vertices)) for t in triangles]
        assert_no_overlaps(scaled)

    def test_deterministic(self):
        """Test that repeated runs give the same triangles."""
        points = as_points(GRID_LAYOUT)
        assert triangulate(points) == triangulate(points)
