"""Color assignment by nearest site."""

from typing import Iterable, List, Sequence

from .geometry import Point, RenderTriangle, Site, Triangle, distance


def nearest_site(point: Point, sites: Sequence[Site]) -> Site:
    """
    Site closest to ``point``.

    Ties go to the site that comes first in ``sites``.
    """
    if not sites:
        raise ValueError("cannot pick the nearest site of an empty site list")

    best = sites[0]
    best_distance = distance(best.point, point)
    for site in sites[1:]:
        d = distance(site.point, point)
        if d < best_distance:
            best, best_distance = site, d
    return best


def assign_color(triangle: Triangle, sites: Sequence[Site]) -> RenderTriangle:
    return RenderTriangle(triangle, nearest_site(triangle.centroid, sites).color)


def assign_colors(triangles: Iterable[Triangle], sites: Sequence[Site]) -> List[RenderTriangle]:
    """Color every triangle with the site nearest to its centroid."""
    return [assign_color(t, sites) for t in triangles]
