# examples/demo_hull.py
import logging

from cg2d.hull import ConvexHull2D

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    left = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 1), (0.5, 1.5)]
    right = [(3, 1), (5, 0), (5, 3), (4, 1)]

    hull = ConvexHull2D(left, strategy="ordered")
    print("bounds:", hull.boundary_points())
    print("inners:", hull.interior_points())

    hull += ConvexHull2D(right)
    print("after merge:", hull.boundary_points())
    print("inners:", hull.interior_points())

    report = hull.validate()
    print("VALIDATION:", report)

    hull.clear()
    print("after clear:", hull)
