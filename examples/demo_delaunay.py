# examples/demo_delaunay.py
import logging

from cg2d.delaunay import Delaunay2D

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    raw = [
        (10, 70), (20, 80), (70, 90), (30, 60), (40, 50),
        (60, 40), (50, 10), (80, 30), (90, 20),
    ]
    d2 = Delaunay2D(raw).build()
    print("engine:", d2.validate())

    tri = d2.result()
    print("triangles:", tri.triangle_count())
    print("edges:", len(list(tri.edges())))
    print("hull:", tri.hull_points())
    print("VALIDATION:", tri.validate())
