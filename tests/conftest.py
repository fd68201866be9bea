import random

import pytest

from cg2d.geom import Pt


# codegolf «convex hull» набір із 16 точок
HULL_16 = [
    (4.4, 14.0), (6.7, 15.25), (6.9, 12.8), (2.1, 11.1),
    (9.5, 14.9), (13.2, 11.9), (10.3, 12.3), (6.8, 9.5),
    (3.3, 7.7), (0.6, 5.1), (5.3, 2.4), (8.45, 4.7),
    (11.5, 9.6), (13.8, 7.3), (12.9, 3.1), (11.0, 1.1),
]

HULL_16_BOUNDS = [
    (11.0, 1.1), (12.9, 3.1), (13.8, 7.3), (13.2, 11.9), (9.5, 14.9),
    (6.7, 15.25), (4.4, 14.0), (2.1, 11.1), (0.6, 5.1), (5.3, 2.4),
]

DELAUNAY_9 = [
    (10, 70), (20, 80), (70, 90), (30, 60), (40, 50),
    (60, 40), (50, 10), (80, 30), (90, 20),
]

DELAUNAY_9_INDICES = (
    4, 3, 2, 3, 1, 2, 2, 5, 4, 6, 0, 3, 3, 0, 1, 2, 7, 5,
    5, 6, 4, 4, 6, 3, 7, 6, 5, 2, 8, 7, 7, 8, 6,
)


def random_points(n, seed=0, box=(0.0, 0.0, 1.0, 1.0)):
    rnd = random.Random(seed)
    x0, y0, x1, y1 = box
    return [Pt(rnd.uniform(x0, x1), rnd.uniform(y0, y1)) for _ in range(n)]


@pytest.fixture
def hull16():
    return [Pt(x, y) for x, y in HULL_16]


@pytest.fixture
def delaunay9():
    return [Pt(float(x), float(y)) for x, y in DELAUNAY_9]
