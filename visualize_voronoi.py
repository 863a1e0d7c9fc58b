#!/usr/bin/env python3
"""
Render the approximated Voronoi subdivision of a scene to a PNG.

Usage:
    python visualize_voronoi.py --scene grid --strategy circumcenter --output grid.png
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from voronoiable.config import settings
from voronoiable.core.coverage import analyze_coverage
from voronoiable.core.pipeline import STRATEGIES, build_render_triangles
from voronoiable.core.scenes import list_scenes, load_scene
from voronoiable.utils import configure_logging

BACKGROUND = (1.00, 0.49, 0.04)


def visualize(scene="grid", strategy=None, seed=None, output="voronoi.png", show_edges=False):
    """Run one strategy on a scene and save the picture."""
    sites = load_scene(scene, seed)
    result = build_render_triangles(sites, strategy)
    report = analyze_coverage(result.triangles, sites)

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_facecolor(BACKGROUND)
    ax.set_xlim(settings.domain_min, settings.domain_max)
    ax.set_ylim(settings.domain_min, settings.domain_max)
    ax.set_aspect("equal")

    for render in result.triangles:
        ax.add_patch(Polygon(
            [tuple(p) for p in render.vertices],
            closed=True,
            facecolor=tuple(render.color),
            edgecolor="black" if show_edges else tuple(render.color),
            linewidth=0.3,
        ))

    ax.scatter([s.x for s in sites], [s.y for s in sites],
               c=[tuple(s.color) for s in sites], edgecolors="black", s=40, zorder=3)

    ax.set_title(
        f"{scene} / {result.strategy}: {len(result.triangles)} triangles, "
        f"{len(result.skipped)} skipped, {report.covered_fraction:.1%} covered"
    )
    plt.savefig(output, dpi=150, bbox_inches="tight")
    plt.close(fig)

    print(f"Saved {output}")
    print(f"  Base triangles: {result.base_triangle_count}")
    print(f"  Render triangles: {len(result.triangles)}")
    print(f"  Skipped: {len(result.skipped)}")
    print(f"  Color agreement: {report.color_agreement:.1%}")


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Visualize an approximated Voronoi subdivision")
    parser.add_argument("--scene", default="grid", choices=list_scenes(), help="Site layout")
    parser.add_argument("--strategy", choices=STRATEGIES, help="Generation strategy")
    parser.add_argument("--seed", type=int, help="Site color seed")
    parser.add_argument("--output", default="voronoi.png", help="Output PNG path")
    parser.add_argument("--edges", action="store_true", help="Outline triangles")

    args = parser.parse_args()

    configure_logging()
    visualize(args.scene, args.strategy, args.seed, args.output, args.edges)


if __name__ == "__main__":
    main()
