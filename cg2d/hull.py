from __future__ import annotations
import logging
from math import atan2, hypot
from typing import Iterable, List, Sequence, Tuple, Union

from sortedcontainers import SortedSet

from .geom import Pt, PointLike, to_points
from .predicates import cross_dot

log = logging.getLogger(__name__)

STRATEGIES = ("fast", "ordered")


def _sort_by_min_angle(points: Sequence[Pt], pivot: Pt) -> List[Pt]:
    """Полярний кут навколо pivot, при рівності — ближчі першими."""
    return sorted(
        points,
        key=lambda p: (atan2(p.y - pivot.y, p.x - pivot.x), hypot(p.x - pivot.x, p.y - pivot.y)),
    )


def graham_scan(points: Sequence[Pt]) -> Tuple[List[Pt], List[Pt]]:
    """
    Graham scan.
    Повертає (bounds, inners): bounds — вершини оболонки CCW (вісь y догори),
    inners — точки, що випали зі стеку (внутрішні та колінеарні).
    """
    if not points:
        return [], []

    pivot = min(points, key=lambda p: (p.y, p.x))
    ordered = _sort_by_min_angle(points, pivot)
    if len(ordered) < 3:
        return ordered, []

    stack: List[Pt] = []
    inners: List[Pt] = []
    for p in ordered:
        # знімаємо все, що не дає строгого лівого повороту
        while len(stack) > 1 and cross_dot(stack[-2], stack[-1], p) <= 0:
            inners.append(stack.pop())
        stack.append(p)
    return stack, inners


class ConvexHull2D:
    """
    Опукла оболонка, яку можна дозливати новими точками або іншою оболонкою.

    bounds: вершини оболонки в порядку CCW.
    inners: точки, які точно лежать всередині bounds. Контейнер залежить від strategy:
      "fast"    — список лише на додавання (без видалення, дублікати можливі);
      "ordered" — SortedSet унікальних точок (лексикографічний порядок),
                  підтримує remove_interior().
    Злиття щоразу перезапускає Graham scan на bounds ∪ нові точки.
    Точка, що вже є вершиною bounds, в inners не потрапляє.
    """

    def __init__(self, points: Iterable[PointLike] = (), strategy: str = "fast"):
        if strategy not in STRATEGIES:
            raise ValueError(f"Невідома стратегія: {strategy!r}")
        self.strategy = strategy
        bounds, inners = graham_scan(to_points(points))
        self.bounds: List[Pt] = bounds
        self.inners: Union[List[Pt], SortedSet] = [] if strategy == "fast" else SortedSet()
        self._add_inners(inners)

    # ---------------- Публічний API ----------------
    def merge(self, other: Union["ConvexHull2D", Iterable[PointLike]]) -> "ConvexHull2D":
        """Дозлити точки або іншу оболонку (in place). Повертає self."""
        if isinstance(other, ConvexHull2D):
            self._merge_points(other.bounds)
            self._add_inners(other.inners)
        else:
            self._merge_points(to_points(other))
        return self

    def __iadd__(self, other: Union["ConvexHull2D", Iterable[PointLike]]) -> "ConvexHull2D":
        return self.merge(other)

    def clear(self) -> None:
        """Забути внутрішні точки; bounds не чіпаємо."""
        self.inners.clear()

    def remove_interior(self, p: PointLike) -> None:
        if self.strategy != "ordered":
            raise ValueError("Видалення внутрішніх точок лише для strategy='ordered'")
        pt = to_points([p])[0]
        if pt not in self.inners:
            raise ValueError(f"{pt} не є внутрішньою точкою")
        self.inners.remove(pt)

    def boundary_points(self) -> List[Pt]:
        return self.bounds[:]

    def interior_points(self) -> List[Pt]:
        return list(self.inners)

    def as_polygon(self) -> List[Pt]:
        return self.bounds[:]

    def __len__(self) -> int:
        return len(self.bounds) + len(self.inners)

    def __repr__(self) -> str:
        return (f"ConvexHull2D(strategy={self.strategy!r}, "
                f"bounds={len(self.bounds)}, inners={len(self.inners)})")

    # ---------------- Внутрішні методи ----------------
    def _merge_points(self, points: Sequence[Pt]) -> None:
        bounds, inners = graham_scan(self.bounds + list(points))
        log.debug("hull merge: %d boundary -> %d, %d new interior",
                  len(self.bounds), len(bounds), len(inners))
        self.bounds = bounds
        self._add_inners(inners)

    def _add_inners(self, points: Iterable[Pt]) -> None:
        # дублікат вершини вилітає зі стеку, але сама вершина лишається в bounds
        on_hull = set(self.bounds)
        fresh = [p for p in points if p not in on_hull]
        if self.strategy == "fast":
            self.inners.extend(fresh)
        else:
            self.inners.update(fresh)

    # ---------------- Діагностика ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - кожна трійка послідовних вершин bounds дає строгий лівий поворот;
          - кожна внутрішня точка не лежить праворуч від жодного ребра.
        Порожні списки = все ок.
        """
        m = len(self.bounds)
        bad_turns: List[int] = []
        if m >= 3:
            for i in range(m):
                a, b, c = self.bounds[i], self.bounds[(i + 1) % m], self.bounds[(i + 2) % m]
                if cross_dot(a, b, c) <= 0:
                    bad_turns.append(i)

        outside: List[Pt] = []
        if m >= 3:
            for p in self.inners:
                for i in range(m):
                    if cross_dot(self.bounds[i], self.bounds[(i + 1) % m], p) < 0:
                        outside.append(p)
                        break

        return {
            "bounds": m,
            "inners": len(self.inners),
            "bad_turns": bad_turns,
            "outside_inners": outside,
        }
