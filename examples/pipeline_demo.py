#!/usr/bin/env python3
"""
Run every strategy on every scene and print what each one produces.
"""

from voronoiable.core import STRATEGIES, analyze_coverage, build_render_triangles, load_scene
from voronoiable.core.scenes import list_scenes
from voronoiable.core.vertex_stream import triangles_to_vertices
from voronoiable.utils import configure_logging


def main():
    configure_logging(level="WARNING")

    print("=== Voronoi Approximation Demo ===\n")

    for scene in list_scenes():
        sites = load_scene(scene, seed=42)
        print(f"Scene '{scene}' ({len(sites)} sites)")

        for strategy in STRATEGIES:
            result = build_render_triangles(sites, strategy)
            report = analyze_coverage(result.triangles, sites)
            vertices = triangles_to_vertices(result.triangles)

            print(f"  {strategy:>12}: {result.base_triangle_count:3d} base -> "
                  f"{len(result.triangles):3d} triangles, {len(result.skipped)} skipped, "
                  f"{report.covered_fraction:6.1%} covered, "
                  f"{report.color_agreement:6.1%} colors agree, "
                  f"vertex buffer {vertices.shape}")

            reasons = sorted({s.reason.value for s in result.skipped})
            if reasons:
                print(f"{'':16}skip reasons: {', '.join(reasons)}")
        print()


if __name__ == "__main__":
    main()
