# cg2d/quickhull.py
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple, Union

from .geom import Pt, PointLike, to_points
from .predicates import cross_dot, signed_distance_to_line

# елемент робочого стеку: ("set", a, b, точки) або ("emit", p)
_Work = Union[Tuple[str, Pt, Pt, List[Pt]], Tuple[str, Pt]]


def quickhull(points: Iterable[PointLike], tolerance: float = 0.0) -> Optional[List[Pt]]:
    """
    Опукла оболонка «розділяй і володарюй» (Quickhull).

    Повертає вершини CCW (вісь y догори) або None, якщо оболонки немає:
      0-2 точки, або всі точки збігаються.
    Для рівно 3 точок: якщо |площа*2| <= tolerance — трійка вважається колінеарною
    і повертається як є, інакше — трикутник у порядку CCW.
    """
    if tolerance < 0:
        raise ValueError("tolerance має бути невід'ємним")
    pts = to_points(points)
    n = len(pts)
    if n < 3:
        return None
    if n == 3:
        a, b, c = pts
        area2 = cross_dot(a, b, c)
        if abs(area2) <= tolerance:
            return [a, b, c]
        return [a, b, c] if area2 > 0 else [a, c, b]

    # лексикографічні мінімум і максимум: діагональ розбиття
    imin = min(range(n), key=lambda i: (pts[i].x, pts[i].y))
    imax = max(range(n), key=lambda i: (pts[i].x, pts[i].y))
    lo, hi = pts[imin], pts[imax]
    if lo == hi:
        return None
    rest = [p for i, p in enumerate(pts) if i != imin and i != imax]

    hull: List[Pt] = []
    _hull_set(hi, lo, [p for p in rest if cross_dot(hi, lo, p) > 0], hull)
    hull.append(hi)
    _hull_set(lo, hi, [p for p in rest if cross_dot(lo, hi, p) > 0], hull)
    hull.append(lo)
    return hull


def _hull_set(a: Pt, b: Pt, candidates: List[Pt], hull: List[Pt]) -> None:
    """
    Вершини оболонки строго ліворуч від a -> b, у порядку від b до a.
    Рекурсія hull(f, b), f, hull(a, f) розгорнута в явний стек.
    """
    stack: List[_Work] = [("set", a, b, candidates)]
    while stack:
        item = stack.pop()
        if item[0] == "emit":
            hull.append(item[1])
            continue
        _, a, b, subset = item
        if not subset:
            continue
        if len(subset) == 1:
            hull.append(subset[0])
            continue
        far = max(subset, key=lambda p: signed_distance_to_line(a, b, p))
        left_of_far_b = [p for p in subset if p is not far and cross_dot(far, b, p) > 0]
        left_of_a_far = [p for p in subset if p is not far and cross_dot(a, far, p) > 0]
        # LIFO: спершу обробиться (far, b), потім far, потім (a, far)
        stack.append(("set", a, far, left_of_a_far))
        stack.append(("emit", far))
        stack.append(("set", far, b, left_of_far_b))
