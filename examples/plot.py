# examples/plot.py
from __future__ import annotations

import random
import sys

import matplotlib
matplotlib.use("Agg")
from matplotlib.figure import Figure

from cg2d.delaunay import triangulate
from cg2d.hull import ConvexHull2D


def generate_random_points(n: int, seed: int = 0):
    """n випадкових точок в одиничному квадраті + його кути."""
    rnd = random.Random(seed)
    pts = [(0, 0), (1, 0), (1, 1), (0, 1)]
    for _ in range(n):
        pts.append((rnd.random(), rnd.random()))
    return pts


def draw(points, path: str) -> None:
    """Трикутники, ребра оболонки і вершини в один PNG."""
    tri = triangulate(points)
    hull = ConvexHull2D(points)

    fig = Figure(figsize=(6, 6))
    ax = fig.add_subplot(111)

    for a, b, c in tri.triangles():
        ax.fill([a.x, b.x, c.x], [a.y, b.y, c.y], color="khaki", linewidth=0)
    for p, q in tri.edges():
        ax.plot([p.x, q.x], [p.y, q.y], color="black", linewidth=0.4)

    bounds = hull.boundary_points()
    if bounds:
        xs = [p.x for p in bounds] + [bounds[0].x]
        ys = [p.y for p in bounds] + [bounds[0].y]
        ax.plot(xs, ys, color="tab:blue", linewidth=1.2)

    vs = tri.vertices()
    ax.scatter([p.x for p in vs], [p.y for p in vs], s=4, color="red", zorder=3)

    area = tri.bounding_rectangle()
    pad = 0.02 * max(area.width, area.height, 1e-9)
    ax.set_xlim(area.min_x - pad, area.max_x + pad)
    ax.set_ylim(area.min_y - pad, area.max_y + pad)
    ax.set_aspect("equal")
    ax.set_title(f"Delaunay: {tri.triangle_count()} triangles")
    fig.savefig(path, dpi=150)


if __name__ == "__main__":
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 200
    draw(generate_random_points(n), "delaunay.png")
    print("delaunay.png записано.")
