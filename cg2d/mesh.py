# cg2d/mesh.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Set, Tuple

from .geom import Pt, Rect
from .predicates import orient, in_circle

TriIdx = Tuple[int, int, int]
UEdge = Tuple[int, int]  # неорієнтоване ребро (min(u,v), max(u,v))


@dataclass(frozen=True)
class Triangulation:
    """
    Незмінний результат тріангуляції.
      area    — bbox усіх вхідних точок;
      points  — вхідні точки (індексація як на вході);
      indices — плаский масив індексів, кожна трійка — трикутник (orient < 0);
      hull    — індекси граничних точок у порядку обходу фронту.
    Похідні представлення (трикутники, ребра) рахуються ліниво, в порядку створення трикутників.
    """
    area: Rect
    points: Tuple[Pt, ...]
    indices: Tuple[int, ...]
    hull: Tuple[int, ...] = ()

    # ---------------- Публічний API ----------------
    def bounding_rectangle(self) -> Rect:
        return self.area

    def point_count(self) -> int:
        return len(self.points)

    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangle_indices(self) -> Iterator[TriIdx]:
        idx = self.indices
        for t in range(0, len(idx) - len(idx) % 3, 3):
            yield idx[t], idx[t + 1], idx[t + 2]

    def triangles(self) -> Iterator[Tuple[Pt, Pt, Pt]]:
        P = self.points
        for a, b, c in self.triangle_indices():
            yield P[a], P[b], P[c]

    def edge_indices(self) -> Iterator[UEdge]:
        """Ребра без повторів; кожне ребро — при першій появі."""
        seen: Set[UEdge] = set()
        for a, b, c in self.triangle_indices():
            for u, v in ((a, b), (b, c), (c, a)):
                key = (min(u, v), max(u, v))
                if key not in seen:
                    seen.add(key)
                    yield key

    def edges(self) -> Iterator[Tuple[Pt, Pt]]:
        P = self.points
        for u, v in self.edge_indices():
            yield P[u], P[v]

    def vertices(self) -> List[Pt]:
        return list(self.points)

    def hull_points(self) -> List[Pt]:
        return [self.points[i] for i in self.hull]

    # ---------------- Діагностика ----------------
    def validate(self, check_delaunay: bool = True) -> dict:
        """
        Перевірка результату:
          - довжина indices кратна 3, всі індекси в межах points;
          - кожен трикутник має orient < 0;
          - (check_delaunay) жодна точка не лежить строго всередині описаного кола трикутника.
        Перевірка Делоне — перебором, O(трикутники * точки).
        """
        n = len(self.points)
        bad_length = len(self.indices) % 3 != 0
        bad_indices = [i for i in self.indices if not (0 <= i < n)]

        bad_orientation: List[int] = []
        bad_delaunay: List[Tuple[int, int]] = []
        if not bad_indices:
            P = self.points
            for t, (a, b, c) in enumerate(self.triangle_indices()):
                if orient(P[a], P[b], P[c]) >= 0:
                    bad_orientation.append(t)
                if check_delaunay:
                    for j, p in enumerate(P):
                        if j in (a, b, c):
                            continue
                        if in_circle(P[a], P[b], P[c], p):
                            bad_delaunay.append((t, j))

        return {
            "triangles": self.triangle_count(),
            "bad_length": bad_length,
            "bad_indices": bad_indices,
            "bad_orientation": bad_orientation,   # номери трикутників
            "bad_delaunay": bad_delaunay,         # [(трикутник, точка всередині кола), ...]
        }
