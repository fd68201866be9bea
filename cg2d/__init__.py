"""
cg2d — мінімальна бібліотека для 2D комп'ютерної геометрії.
Опуклі оболонки (Graham scan зі злиттям, Quickhull) та інкрементальна тріангуляція Делоне.
"""
import logging

__version__ = "0.1.0"

from cg2d.geom import Pt, Rect, Circle, EPS, to_points, unique_points
from cg2d.predicates import orient, cross_dot, signed_distance_to_line, nearly_equal, in_circle
from cg2d.hull import ConvexHull2D, graham_scan
from cg2d.quickhull import quickhull
from cg2d.mesh import Triangulation
from cg2d.delaunay import Delaunay2D, EMPTY, triangulate
from cg2d.pipeline import triangulate_points

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Pt", "Rect", "Circle", "EPS", "to_points", "unique_points",
    "orient", "cross_dot", "signed_distance_to_line", "nearly_equal", "in_circle",
    "ConvexHull2D", "graham_scan", "quickhull",
    "Triangulation", "Delaunay2D", "EMPTY", "triangulate",
    "triangulate_points", "__version__",
]
