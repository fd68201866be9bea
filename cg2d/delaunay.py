# cg2d/delaunay.py
from __future__ import annotations
import logging
import sys
from math import floor, inf, sqrt
from typing import Iterable, List, Optional, Sequence, Tuple

from .geom import Pt, PointLike, Circle, Rect, EPS, dist2, to_points
from .predicates import orient, nearly_equal
from .mesh import Triangulation

log = logging.getLogger(__name__)

EMPTY = sys.maxsize  # «немає сусіднього напівребра» / «вузол видалено з оболонки»


def next_half_edge(e: int) -> int:
    """Наступне напівребро в тому ж трикутнику."""
    return e - 2 if e % 3 == 2 else e + 1

def prev_half_edge(e: int) -> int:
    return e + 2 if e % 3 == 0 else e - 1


class _AdvancingHull:
    """
    Фронт тріангуляції: кільцевий двозв'язний список по індексах точок.
      prev[i], next[i] — сусіди вершини i на оболонці (next[i] == EMPTY: вузол видалено);
      tri[i]           — граничне напівребро, що виходить з i;
      hash             — кутовий хеш (floor(sqrt(n)) кошиків) навколо центру seed-трикутника.
    Хеш — лише евристика: при порожньому/застарілому кошику пошук іде від start.
    """

    def __init__(self, n: int, center: Pt, i0: int, i1: int, i2: int, points: Sequence[Pt]):
        self.prev: List[int] = [EMPTY] * n
        self.next: List[int] = [EMPTY] * n
        self.tri: List[int] = [0] * n
        self.hash: List[int] = [EMPTY] * max(1, int(sqrt(n)))
        self.start = i0
        self.center = center

        self.next[i0] = i1; self.prev[i1] = i0
        self.next[i1] = i2; self.prev[i2] = i1
        self.next[i2] = i0; self.prev[i0] = i2

        self.tri[i0] = 0
        self.tri[i1] = 1
        self.tri[i2] = 2

        for i in (i0, i1, i2):
            self.hash_edge(points[i], i)

    def hash_key(self, p: Pt) -> int:
        # псевдокут у [0, 1) без atan2
        dx = p.x - self.center.x
        dy = p.y - self.center.y
        s = abs(dx) + abs(dy)
        if s == 0.0:
            # точка в самому центрі: кут не визначений, кошик 0
            return 0
        q = dx / s
        a = (3.0 - q if dy > 0.0 else 1.0 + q) / 4.0
        size = len(self.hash)
        return int(floor(size * a)) % size

    def hash_edge(self, p: Pt, i: int) -> None:
        self.hash[self.hash_key(p)] = i

    def find_visible_edge(self, p: Pt, points: Sequence[Pt]) -> Tuple[int, bool]:
        """
        Знайти ребро оболонки (e, next[e]), видиме з p.
        Повертає (e, walk_back); e == EMPTY — видимого ребра немає (точку пропускаємо).
        walk_back: пошук обійшов оболонку від самого старту, треба добудовувати і назад.
        """
        start = EMPTY
        key = self.hash_key(p)
        size = len(self.hash)
        for j in range(size):
            cand = self.hash[(key + j) % size]
            if cand != EMPTY and self.next[cand] != EMPTY:
                start = cand
                break
        if start == EMPTY:
            start = self.start
        start = self.prev[start]

        e = start
        while orient(p, points[e], points[self.next[e]]) <= 0.0:
            e = self.next[e]
            if e == start:
                return EMPTY, False
        return e, e == start


class Delaunay2D:
    """
    Інкрементальна 2D тріангуляція Делоне з фронтом-оболонкою (sweep-hull).

    triangles — плаский список індексів точок, кожна трійка — трикутник з orient < 0;
    halfedges — halfedges[e] — протилежне напівребро у сусідньому трикутнику або EMPTY.
    Напівребро e йде від triangles[e] до triangles[next_half_edge(e)].
    hull      — індекси граничних точок після build().

    Обмеження: orient і перевірка описаного кола рахуються у звичайних float без
    точної арифметики. Для точок у загальному положенні результат — тріангуляція
    Делоне. На вході з великою кількістю колінеарних чи коциклічних точок (напр.
    координати, округлені до сітки) можливі трикутники, що порушують умову Делоне,
    мають нульову площу або неправильну орієнтацію. Це не вважається помилкою;
    Triangulation.validate() покаже такі трикутники. Дрібний шум (jitter) на вході
    зазвичай усуває проблему.
    """

    def __init__(self, points: Iterable[PointLike], eps: float = EPS):
        self.points: List[Pt] = to_points(points)
        self.eps = eps
        self.triangles: List[int] = []
        self.halfedges: List[int] = []
        self.hull: List[int] = []
        self._front: Optional[_AdvancingHull] = None
        self._built = False

    # ---------------- Публічний API ----------------
    def build(self) -> "Delaunay2D":
        if self._built:
            return self
        self._built = True
        pts = self.points
        n = len(pts)

        seed = self._find_seed_triangle()
        if seed is None:
            log.debug("degenerate input (%d points): collinear result", n)
            self._handle_collinear()
            return self
        i0, i1, i2 = seed
        center = Circle.from_3_points(pts[i0], pts[i1], pts[i2]).center

        self._add_triangle(i0, i1, i2, EMPTY, EMPTY, EMPTY)
        front = self._front = _AdvancingHull(n, center, i0, i1, i2, pts)

        # вставляємо від центру назовні
        order = sorted(range(n), key=lambda i: dist2(center, pts[i]))

        for k, i in enumerate(order):
            p = pts[i]
            if k > 0 and nearly_equal(p, pts[order[k - 1]], self.eps):
                log.debug("skip near-duplicate point %d", i)
                continue
            if i == i0 or i == i1 or i == i2:
                continue

            e, walk_back = front.find_visible_edge(p, pts)
            if e == EMPTY:
                log.debug("skip point %d: no visible hull edge", i)
                continue

            # перший трикутник від точки до видимого ребра
            t = self._add_triangle(e, i, front.next[e], EMPTY, EMPTY, front.tri[e])
            front.tri[i] = self._legalize(t + 2)
            front.tri[e] = t

            # віяло вперед по оболонці
            nxt = front.next[e]
            while True:
                q = front.next[nxt]
                if orient(p, pts[nxt], pts[q]) <= 0.0:
                    break
                t = self._add_triangle(nxt, i, q, front.tri[i], EMPTY, front.tri[nxt])
                front.tri[i] = self._legalize(t + 2)
                front.next[nxt] = EMPTY
                nxt = q

            # віяло назад, якщо пошук стартував з видимого ребра
            if walk_back:
                while True:
                    q = front.prev[e]
                    if orient(p, pts[q], pts[e]) <= 0.0:
                        break
                    t = self._add_triangle(q, i, e, EMPTY, front.tri[e], front.tri[q])
                    self._legalize(t + 2)
                    front.tri[q] = t
                    front.next[e] = EMPTY
                    e = q

            # вшити точку в оболонку
            front.prev[i] = e
            front.next[i] = nxt
            front.prev[nxt] = i
            front.next[e] = i
            front.start = e

            front.hash_edge(p, i)
            front.hash_edge(pts[e], e)

        # оболонка як список індексів
        e = front.start
        while True:
            self.hull.append(e)
            assert len(self.hull) <= n, "advancing hull does not close"
            e = front.next[e]
            if e == front.start:
                break

        self._front = None
        return self

    def result(self) -> Triangulation:
        self.build()
        return Triangulation(
            area=Rect.bound_box(self.points),
            points=tuple(self.points),
            indices=tuple(self.triangles),
            hull=tuple(self.hull),
        )

    # ---------------- Внутрішні методи ----------------
    def _add_triangle(self, i0: int, i1: int, i2: int, a: int, b: int, c: int) -> int:
        """Додати трикутник (i0, i1, i2) і зв'язати його ребра з a, b, c. Повертає перше напівребро."""
        t = len(self.triangles)
        self.triangles.extend((i0, i1, i2))
        self.halfedges.extend((EMPTY, EMPTY, EMPTY))
        self._link(t, a)
        self._link(t + 1, b)
        self._link(t + 2, c)
        return t

    def _link(self, a: int, b: int) -> None:
        """Зробити a і b протилежними напівребрами (b може бути EMPTY)."""
        half = self.halfedges
        half[a] = b
        if b != EMPTY:
            assert 0 <= b < len(half), f"half-edge {b} out of range"
            tri = self.triangles
            assert tri[a] == tri[next_half_edge(b)] and tri[b] == tri[next_half_edge(a)], \
                f"half-edges {a} and {b} do not share an edge"
            half[b] = a

    def _legalize(self, a: int) -> int:
        """
        Відновити умову Делоне через фліп ребер, починаючи з напівребра a.

        Пара трикутників навколо ребра a/b:
            трикутник a: (p0, pr, pl), ar = prev(a), al = next(a);
            трикутник b: (pl, pr, p1), bl = prev(b), br = next(b).
        Якщо p1 строго всередині кола (p0, pr, pl) — міняємо діагональ pr-pl на p0-p1
        і перевіряємо далі обидва нові зовнішні ребра (a та br).
        Рекурсія замінена стеком; порядок обходу той самий.
        Повертає ar останнього перевіреного ребра.
        """
        tri = self.triangles
        half = self.halfedges
        pts = self.points
        stack: List[int] = []
        while True:
            b = half[a]
            ar = prev_half_edge(a)

            if b == EMPTY:
                if not stack:
                    break
                a = stack.pop()
                continue

            al = next_half_edge(a)
            bl = prev_half_edge(b)

            p0 = tri[ar]
            pr = tri[a]
            pl = tri[al]
            p1 = tri[bl]

            if not Circle.from_3_points(pts[p0], pts[pr], pts[pl]).contains(pts[p1]):
                if not stack:
                    break
                a = stack.pop()
                continue

            tri[a] = p1
            tri[b] = p0

            hbl = half[bl]
            har = half[ar]

            # зовнішнє ребро bl лежало на оболонці: поправити посилання фронту
            if hbl == EMPTY and self._front is not None:
                front = self._front
                e = front.start
                while True:
                    if front.tri[e] == bl:
                        front.tri[e] = a
                        break
                    e = front.prev[e]
                    if e == front.start:
                        break

            self._link(a, hbl)
            self._link(b, har)
            self._link(ar, bl)

            stack.append(next_half_edge(b))
        return ar

    def _find_seed_triangle(self) -> Optional[Tuple[int, int, int]]:
        pts = self.points
        if not pts:
            return None

        # точка, найближча до центру bbox
        i0 = _closest_point(pts, Rect.bound_box(pts).center)
        if i0 is None:
            return None
        p0 = pts[i0]

        i1 = _closest_point(pts, p0)
        if i1 is None:
            return None
        p1 = pts[i1]

        # третя: з найменшим описаним колом
        min_radius = inf
        i2 = -1
        for i, p in enumerate(pts):
            if i == i0 or i == i1:
                continue
            r = Circle.from_3_points(p0, p1, p).radius
            if r < min_radius:
                i2 = i
                min_radius = r
        if min_radius == inf:
            return None

        if orient(p0, p1, pts[i2]) > 0.0:
            return i0, i2, i1
        return i0, i1, i2

    def _handle_collinear(self) -> None:
        """Усі точки на прямій (або збігаються): без трикутників, оболонка — точки вздовж прямої."""
        pts = self.points
        if not pts:
            return
        x0, y0 = pts[0]
        dist: List[float] = []
        for p in pts:
            d = p.x - x0
            if d == 0.0:
                d = p.y - y0
            dist.append(d)
        d0 = -inf
        for i in sorted(range(len(pts)), key=lambda i: dist[i]):
            if dist[i] > d0:
                self.hull.append(i)
                d0 = dist[i]

    # ---------------- Діагностика ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - len(triangles) == len(halfedges), кратне 3;
          - симетрія halfedges і збіг кінців спільного ребра;
          - кількість граничних напівребер дорівнює довжині hull (якщо є трикутники).
        """
        tri = self.triangles
        half = self.halfedges
        bad_lengths = len(tri) != len(half) or len(tri) % 3 != 0

        bad_links: List[Tuple[int, str]] = []
        boundary = 0
        for e, opp in enumerate(half):
            if opp == EMPTY:
                boundary += 1
                continue
            if not (0 <= opp < len(half)):
                bad_links.append((e, "out_of_range"))
                continue
            if half[opp] != e:
                bad_links.append((e, f"no_backlink_from_{opp}"))
                continue
            if tri[e] != tri[next_half_edge(opp)] or tri[opp] != tri[next_half_edge(e)]:
                bad_links.append((e, f"endpoint_mismatch_{opp}"))

        bad_hull = bool(tri) and boundary != len(self.hull)
        return {
            "triangles": len(tri) // 3,
            "hull": len(self.hull),
            "bad_lengths": bad_lengths,
            "bad_links": bad_links,
            "bad_hull": bad_hull,
        }


def _closest_point(points: Sequence[Pt], p0: Pt) -> Optional[int]:
    """Найближча до p0 точка, відмінна від неї (відстань > 0)."""
    min_dist = inf
    k: Optional[int] = None
    for i, p in enumerate(points):
        d = dist2(p0, p)
        if 0.0 < d < min_dist:
            k = i
            min_dist = d
    return k


def triangulate(points: Iterable[PointLike]) -> Triangulation:
    """
    Тріангуляція Делоне набору точок. Вироджений вхід — нуль трикутників, точки в hull.
    Предикати float без точної арифметики, див. обмеження в Delaunay2D.
    """
    return Delaunay2D(points).result()
