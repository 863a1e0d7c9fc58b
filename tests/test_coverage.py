"""Tests for coverage analysis."""

import pytest
from voronoiable.core.coloring import assign_colors
from voronoiable.core.coverage import analyze_coverage
from voronoiable.core.geometry import Color, Point, RenderTriangle, Site, Triangle
from voronoiable.core.pipeline import build_render_triangles
from voronoiable.core.scenes import load_scene


class TestCoverage:
    """Test coverage reports."""

    @pytest.fixture
    def sites(self):
        return [Site(Point(-0.5, -0.5), Color(1, 0, 0)), Site(Point(0.5, 0.5), Color(0, 0, 1))]

    def test_area_and_fraction(self, sites):
        """Test covered area and fraction of the domain."""
        triangles = assign_colors([Triangle(Point(-1, -1), Point(1, -1), Point(-1, 1))], sites)
        report = analyze_coverage(triangles, sites)

        assert report.triangle_count == 1
        assert report.domain_area == pytest.approx(4.0)
        assert report.covered_area == pytest.approx(2.0)
        assert report.covered_fraction == pytest.approx(0.5)

    def test_color_agreement(self, sites):
        """Test that wrongly colored triangles lower the agreement."""
        near_first = Triangle(Point(-0.6, -0.6), Point(-0.4, -0.6), Point(-0.5, -0.4))
        near_second = Triangle(Point(0.4, 0.4), Point(0.6, 0.4), Point(0.5, 0.6))
        triangles = [
            RenderTriangle(near_first, sites[0].color),
            RenderTriangle(near_second, sites[0].color),  # wrong color
        ]
        assert analyze_coverage(triangles, sites).color_agreement == pytest.approx(0.5)

    def test_tie_goes_to_first_site(self):
        """Test that an equidistant centroid agrees with the first site's color."""
        left = Site(Point(-0.5, 0.0), Color(1, 0, 0))
        right = Site(Point(0.5, 0.0), Color(0, 0, 1))
        middle = Triangle(Point(-0.1, 0.0), Point(0.1, 0.0), Point(0.0, 0.9))

        for sites in ([left, right], [right, left]):
            triangles = assign_colors([middle], sites)
            assert triangles[0].color == sites[0].color
            assert analyze_coverage(triangles, sites).color_agreement == pytest.approx(1.0)

    def test_pipeline_output_agrees(self):
        """Test that pipeline output is colored by the nearest site."""
        sites = load_scene("skewed", seed=11)
        result = build_render_triangles(sites, "centroid")
        report = analyze_coverage(result.triangles, sites)

        assert report.color_agreement == pytest.approx(1.0)
        assert 0.0 < report.covered_fraction <= 1.0

    def test_empty_triangles(self, sites):
        """Test the report for an empty triangle list."""
        report = analyze_coverage([], sites)
        assert report.covered_area == 0.0
        assert report.color_agreement == 1.0

    def test_no_sites(self):
        """Test that analysis without sites is rejected."""
        with pytest.raises(ValueError):
            analyze_coverage([], [])
