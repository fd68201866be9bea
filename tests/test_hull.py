import pytest
from sortedcontainers import SortedSet

from cg2d.geom import Pt, to_points
from cg2d.hull import ConvexHull2D, graham_scan
from cg2d.predicates import cross_dot

from conftest import HULL_16_BOUNDS, random_points

SQUARE = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 1)]


def assert_convex_ccw(bounds):
    m = len(bounds)
    for i in range(m):
        assert cross_dot(bounds[i], bounds[(i + 1) % m], bounds[(i + 2) % m]) > 0


def test_graham_scan_codegolf_points(hull16):
    bounds, inners = graham_scan(hull16)
    assert bounds == to_points(HULL_16_BOUNDS)
    assert set(bounds) | set(inners) == set(hull16)
    assert len(bounds) + len(inners) == len(hull16)


def test_build_square():
    hull = ConvexHull2D(SQUARE)
    assert hull.boundary_points() == [Pt(0, 0), Pt(2, 0), Pt(2, 2), Pt(0, 2)]
    assert hull.interior_points() == [Pt(1, 1)]
    assert len(hull) == 5


def test_fewer_than_three_points():
    assert graham_scan([]) == ([], [])
    hull = ConvexHull2D([(1, 1), (0, 0)])
    assert hull.boundary_points() == [Pt(0, 0), Pt(1, 1)]
    assert hull.interior_points() == []


def test_collinear_run_goes_inside():
    bounds, inners = graham_scan(to_points([(0, 0), (1, 0), (2, 0), (1, 1)]))
    assert bounds == [Pt(0, 0), Pt(2, 0), Pt(1, 1)]
    assert inners == [Pt(1, 0)]


def test_validate_reports_nothing_for_real_hull(hull16):
    report = ConvexHull2D(hull16).validate()
    assert report["bounds"] == len(HULL_16_BOUNDS)
    assert report["bad_turns"] == []
    assert report["outside_inners"] == []


def test_merge_points_drops_swallowed_vertices():
    hull = ConvexHull2D(SQUARE)
    hull.merge([(3, -1), (3, 3)])
    assert set(hull.boundary_points()) == {Pt(0, 0), Pt(3, -1), Pt(3, 3), Pt(0, 2)}
    assert set(hull.interior_points()) == {Pt(1, 1), Pt(2, 0), Pt(2, 2)}
    assert_convex_ccw(hull.boundary_points())


def test_merge_hull_takes_other_interior():
    left = ConvexHull2D(SQUARE)
    right = ConvexHull2D([(5, 0), (7, 0), (7, 2), (5, 2), (6, 1)])
    left += right
    assert set(left.boundary_points()) == {Pt(0, 0), Pt(7, 0), Pt(7, 2), Pt(0, 2)}
    assert set(left.interior_points()) == {Pt(1, 1), Pt(6, 1), Pt(2, 0), Pt(5, 0), Pt(5, 2), Pt(2, 2)}
    assert len(left) == 10


def test_merge_matches_hull_of_union():
    a = random_points(60, seed=1)
    b = random_points(60, seed=2, box=(2.0, 0.0, 3.0, 1.0))
    merged = ConvexHull2D(a).merge(b)
    expected, _ = graham_scan(a + b)
    assert set(merged.boundary_points()) == set(expected)
    assert set(merged.boundary_points()) | set(merged.interior_points()) == set(a) | set(b)
    report = merged.validate()
    assert report["bad_turns"] == [] and report["outside_inners"] == []


def test_clear_keeps_bounds():
    hull = ConvexHull2D(SQUARE)
    hull.clear()
    assert hull.interior_points() == []
    assert len(hull.boundary_points()) == 4


def test_ordered_strategy_sorted_and_unique():
    hull = ConvexHull2D(SQUARE + [(1.5, 0.5), (0.5, 1.5)], strategy="ordered")
    assert isinstance(hull.inners, SortedSet)
    assert hull.interior_points() == [Pt(0.5, 1.5), Pt(1, 1), Pt(1.5, 0.5)]
    hull.merge([(1, 1)])
    assert hull.interior_points().count(Pt(1, 1)) == 1


def test_fast_strategy_keeps_repeated_interior():
    hull = ConvexHull2D(SQUARE)
    hull.merge([(1, 1)])
    assert hull.interior_points() == [Pt(1, 1), Pt(1, 1)]


def test_remove_interior():
    hull = ConvexHull2D(SQUARE, strategy="ordered")
    hull.remove_interior((1, 1))
    assert hull.interior_points() == []
    with pytest.raises(ValueError):
        hull.remove_interior((1, 1))


def test_remove_interior_needs_ordered_strategy():
    with pytest.raises(ValueError):
        ConvexHull2D(SQUARE).remove_interior((1, 1))


def test_unknown_strategy():
    with pytest.raises(ValueError):
        ConvexHull2D(SQUARE, strategy="btree")


def test_as_polygon_is_a_copy():
    hull = ConvexHull2D(SQUARE)
    poly = hull.as_polygon()
    poly.pop()
    assert len(hull.boundary_points()) == 4


@pytest.mark.parametrize("strategy", ["fast", "ordered"])
def test_merged_copy_of_vertex_stays_on_boundary(strategy):
    hull = ConvexHull2D(SQUARE, strategy=strategy).merge([(2, 2)])
    assert hull.boundary_points() == [Pt(0, 0), Pt(2, 0), Pt(2, 2), Pt(0, 2)]
    assert hull.interior_points() == [Pt(1, 1)]
    assert len(hull) == 5


def test_repeated_pivot_is_not_interior():
    hull = ConvexHull2D(SQUARE + [(0, 0)], strategy="ordered")
    assert Pt(0, 0) in hull.boundary_points()
    assert hull.interior_points() == [Pt(1, 1)]


def test_validate_flags_clockwise_bounds():
    hull = ConvexHull2D(SQUARE)
    hull.bounds.reverse()
    assert hull.validate()["bad_turns"] == [0, 1, 2, 3]


def test_validate_flags_interior_point_outside():
    hull = ConvexHull2D(SQUARE)
    hull.inners.append(Pt(5, 5))
    report = hull.validate()
    assert report["bad_turns"] == []
    assert report["outside_inners"] == [Pt(5, 5)]
