# cg2d/predicates.py
from __future__ import annotations

from .geom import Pt, Circle, sub, cross, norm, EPS


def orient(a: Pt, b: Pt, c: Pt) -> float:
    """
    Знак повороту a -> b -> c, тобто (b-a) x (c-b).
      <0  проти годинникової стрілки (конвенція тріангуляції, вісь y донизу),
      >0  за годинниковою,
       0  колінеарні.
    """
    return (b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x)

def cross_dot(a: Pt, b: Pt, c: Pt) -> float:
    """(b-a) x (c-a): >0 якщо c ліворуч від напрямленої прямої a -> b."""
    return cross(sub(b, a), sub(c, a))

def signed_distance_to_line(a: Pt, b: Pt, p: Pt) -> float:
    ab = norm(sub(b, a))
    if ab == 0.0:
        return 0.0
    return cross_dot(a, b, p) / ab

def nearly_equal(a: Pt, b: Pt, eps: float = EPS) -> bool:
    # тільки для злиття дублікатів, не для орієнтації чи кола
    return abs(a.x - b.x) <= eps and abs(a.y - b.y) <= eps

def in_circle(a: Pt, b: Pt, c: Pt, p: Pt) -> bool:
    """Чи лежить p строго всередині описаного кола (a, b, c)."""
    return Circle.from_3_points(a, b, c).contains(p)
