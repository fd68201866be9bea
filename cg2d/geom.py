from __future__ import annotations
import sys
from dataclasses import dataclass
from math import inf, isfinite, sqrt
from typing import Iterable, List, Sequence, Tuple, Union

EPS = sys.float_info.epsilon * 2.0  # поріг «та сама точка» для дублікатів


@dataclass(frozen=True, order=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y


PointLike = Union[Pt, Tuple[float, float]]


def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def cross(a: Pt, b: Pt) -> float:
    """z-компонента векторного добутку 2D-векторів."""
    return a.x*b.y - a.y*b.x

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def dist2(a: Pt, b: Pt) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx*dx + dy*dy


def to_points(points: Iterable[PointLike]) -> List[Pt]:
    """Привести вхід (Pt або пари (x, y)) до списку Pt, зберігаючи порядок."""
    out: List[Pt] = []
    for p in points:
        if isinstance(p, Pt):
            out.append(p)
        else:
            x, y = p
            out.append(Pt(float(x), float(y)))
    return out


def unique_points(points: Iterable[PointLike], scale: float = 1e9) -> List[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    Порядок першої появи зберігається.
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for p in to_points(points):
        key = (int(round(p.x*scale)), int(round(p.y*scale)))
        if key not in seen:
            seen[key] = p
    return list(seen.values())


@dataclass(frozen=True)
class Rect:
    """Вісь-орієнтований прямокутник [min_x, max_x] x [min_y, max_y]."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Pt:
        return Pt((self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5)

    @classmethod
    def bound_box(cls, points: Sequence[Pt]) -> "Rect":
        # порожня множина -> нульовий прямокутник
        if not points:
            return cls(0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class Circle:
    center: Pt
    radius: float

    @classmethod
    def from_3_points(cls, a: Pt, b: Pt, c: Pt) -> "Circle":
        """
        Описане коло трикутника (a, b, c).
        Для колінеарних або збіжних точок повертає «нескінченне» коло (radius == inf).
        """
        dx = b.x - a.x
        dy = b.y - a.y
        ex = c.x - a.x
        ey = c.y - a.y
        bl = dx*dx + dy*dy
        cl = ex*ex + ey*ey
        det = dx*ey - dy*ex
        if det == 0.0:
            return cls(Pt(inf, inf), inf)
        ox = (ey*bl - dy*cl) / (2.0*det)
        oy = (dx*cl - ex*bl) / (2.0*det)
        return cls(Pt(a.x + ox, a.y + oy), sqrt(ox*ox + oy*oy))

    def contains(self, p: Pt) -> bool:
        """Строго всередині кола (межа не рахується)."""
        if not isfinite(self.radius):
            return False
        return dist2(self.center, p) < self.radius * self.radius
