from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from .geom import Pt, PointLike, unique_points
from .hull import ConvexHull2D
from .delaunay import triangulate
from .predicates import orient

log = logging.getLogger(__name__)


def triangulate_points(
    points: Iterable[PointLike],
    backend: str = "internal",
) -> Tuple[List[Pt], List[int], List[Tuple[int, int, int]]]:
    """
    Повний пайплайн:
      - прибирає дублікати точок;
      - будує опуклу оболонку (ConvexHull2D, Graham scan) -> індекси граничних точок;
      - тріангулює: backend="internal" — наш Delaunay2D, "scipy" — scipy.spatial.Delaunay.

    Повертає:
      pts       — список Pt у фінальному порядку;
      hull      — індекси вершин оболонки (CCW, вісь y догори);
      triangles — трійки індексів у pts, orient < 0 для кожної.
    """
    pts: List[Pt] = unique_points(points)

    # 1) Опукла оболонка
    index = {p: i for i, p in enumerate(pts)}
    hull = [index[p] for p in ConvexHull2D(pts).boundary_points()]

    name = backend.lower()
    if name == "internal":
        tri = triangulate(pts)
        return pts, hull, list(tri.triangle_indices())

    if name == "scipy":
        try:
            import numpy as np
            from scipy.spatial import Delaunay, QhullError
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='internal'."
            ) from e

        if len(pts) < 3:
            return pts, hull, []
        arr = np.array([(p.x, p.y) for p in pts], dtype=float)
        try:
            dela = Delaunay(arr)
        except QhullError as e:
            # колінеарний/вироджений вхід: трикутників немає
            log.warning("Qhull failed on %d points: %s", len(pts), e)
            return pts, hull, []

        triangles: List[Tuple[int, int, int]] = []
        for simplex in dela.simplices:
            a, b, c = (int(i) for i in simplex)
            if orient(pts[a], pts[b], pts[c]) > 0:
                b, c = c, b
            triangles.append((a, b, c))
        return pts, hull, triangles

    raise ValueError(f"Невідомий backend: {backend}")
