"""
Site layouts.

Sites are literal coordinate lists colored at random. Colors come from a
seeded NumPy generator so the same seed always yields the same picture.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..config import settings
from .geometry import Color, Point, Site

Coordinates = Sequence[Tuple[float, float]]

# 3x3 lattice in the lower-left corner of the domain
GRID_LAYOUT: Coordinates = (
    (-0.9, -0.9),
    (-0.7, -0.9),
    (-0.9, -0.7),
    (-0.7, -0.7),
    (-0.5, -0.7),
    (-0.7, -0.5),
    (-0.5, -0.5),
    (-0.9, -0.5),
    (-0.5, -0.9),
)

SKEWED_LAYOUT: Coordinates = (
    (-0.9, -0.9),
    (-0.7, -0.7),
    (-0.6, -0.5),
    (-0.5, -0.8),
)

MINIMAL_LAYOUT: Coordinates = (
    (0.1, 0.5),
    (0.4, 0.2),
    (0.3, 0.0),
)

SCENES: Dict[str, Coordinates] = {
    "grid": GRID_LAYOUT,
    "skewed": SKEWED_LAYOUT,
    "minimal": MINIMAL_LAYOUT,
}


def random_color(rng: np.random.Generator) -> Color:
    r, g, b = rng.uniform(0.0, 1.0, size=3)
    return Color(float(r), float(g), float(b))


def make_sites(coordinates: Coordinates, seed: Optional[int] = None) -> List[Site]:
    """
    Build sites from coordinates, each with a random color.

    Args:
        coordinates: (x, y) pairs in input order
        seed: Color seed, ``settings.color_seed`` when omitted

    Returns:
        List of sites
    """
    rng = np.random.default_rng(settings.color_seed if seed is None else seed)
    return [Site(Point(float(x), float(y)), random_color(rng)) for x, y in coordinates]


def list_scenes() -> List[str]:
    return sorted(SCENES)


def load_scene(name: str, seed: Optional[int] = None) -> List[Site]:
    """Sites of a named layout."""
    if name not in SCENES:
        raise ValueError(f"Unknown scene '{name}'. Available: {', '.join(list_scenes())}")
    return make_sites(SCENES[name], seed)
