import pytest
import numpy as np

from convex_hull import GiftWrappingHull, convex_hull, rightmost_lowest
from convex_hull_naive import MonotoneChainHull
from geometry import Hull, InvalidInput, Point, cross


SQUARE = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]


def check_hulls_equal(points: list[Point]):
    hull_naive = MonotoneChainHull().solve(points)
    hull_wrap = GiftWrappingHull().solve(points)

    assert sorted(hull_wrap) == sorted(hull_naive), (
        f"Hulls differ: {sorted(hull_wrap)} != {sorted(hull_naive)}\n"
        f"{points}"
    )

    # every edge keeps all points on its right side
    if len(hull_wrap) > 2:
        polygon = hull_wrap.closed()
        for i in range(len(polygon) - 2):
            assert cross(polygon[i], polygon[i + 1], polygon[i + 2]) < 0


@pytest.mark.parametrize("n_points", [3, 10, 30, 100])
@pytest.mark.parametrize("distribution_type", ["uniform_int", "uniform", "normal"])
@pytest.mark.parametrize("limits", [(0, 10), (0, 100), (-100, 100)])
def test_gift_wrapping_against_monotone_chain(n_points, distribution_type, limits, distribution_gen_func):
    np.random.seed(42)

    seeds = np.random.randint(0, 100_000, size=50)
    for seed in seeds:
        np.random.seed(seed)

        gen_func = distribution_gen_func[distribution_type]
        low, high = limits
        xs = gen_func(low, high, n_points).astype(float)
        ys = gen_func(low, high, n_points).astype(float)
        points = [Point(xs[i], ys[i]) for i in range(n_points)]

        check_hulls_equal(points)


def test_square_starts_at_rightmost_lowest_corner():
    hull = convex_hull(SQUARE)
    assert hull.vertices == (Point(2, 0), Point(0, 0), Point(0, 2), Point(2, 2))
    assert hull.anchor == Point(2, 0)
    assert hull.closed()[-1] == Point(2, 0)


def test_interior_point_excluded():
    hull = convex_hull(SQUARE + [Point(1, 1)])
    assert len(hull) == 4
    assert Point(1, 1) not in hull


def test_collinear_points_keep_extremes():
    hull = convex_hull([Point(0, 0), Point(1, 0), Point(2, 0)])
    assert hull.vertices == (Point(2, 0), Point(0, 0))


def test_points_inside_edges_excluded():
    points = SQUARE + [Point(1, 0), Point(0, 1), Point(2, 1), Point(1, 2)]
    hull = convex_hull(points)
    assert hull.vertices == (Point(2, 0), Point(0, 0), Point(0, 2), Point(2, 2))


def test_equal_points_form_single_vertex():
    hull = convex_hull([Point(3, 3), Point(3, 3)])
    assert hull.vertices == (Point(3, 3),)
    assert hull.edges() == [(Point(3, 3), Point(3, 3))]


def test_hull_edges_close_the_polygon():
    hull = convex_hull(SQUARE)
    edges = hull.edges()
    assert len(edges) == 4
    assert edges[0] == (Point(2, 0), Point(0, 0))
    assert edges[-1] == (Point(2, 2), Point(2, 0))


@pytest.mark.parametrize(
    "points, expected",
    [
        ([Point(0, 0), Point(3, 0), Point(1, 5)], Point(3, 0)),
        ([Point(5, 1), Point(-2, -1), Point(7, 0)], Point(-2, -1)),
        ([Point(1, 1), Point(1, 1)], Point(1, 1)),
    ],
)
def test_rightmost_lowest(points, expected):
    assert rightmost_lowest(points) == expected


@pytest.mark.parametrize("n_points", [0, 1])
def test_too_few_points(n_points):
    with pytest.raises(InvalidInput):
        convex_hull([Point(i, i) for i in range(n_points)])


def test_rightmost_lowest_of_nothing():
    with pytest.raises(InvalidInput):
        rightmost_lowest([])


def test_idempotent_and_input_untouched():
    np.random.seed(5)
    points = tuple(Point(x, y) for x, y in np.random.rand(40, 2))
    copy = list(points)
    hull = convex_hull(points)
    assert isinstance(hull, Hull)
    assert convex_hull(points) == hull
    assert list(points) == copy
    assert all(p in points for p in hull)


def test_nearly_collinear_points_close_the_hull():
    # orientation signs are rounding noise on this line
    np.random.seed(11)
    for _ in range(3000):
        xs = np.random.rand(30)
        points = [Point(float(x), 0.1 * float(x) + 0.3) for x in xs]

        hull = convex_hull(points)
        assert all(p in points for p in hull)
        assert len(set(hull)) == len(hull)
        assert hull.anchor == rightmost_lowest(points)
        assert hull.anchor == MonotoneChainHull().solve(points)[0]


def test_exactly_collinear_floats_keep_extremes():
    np.random.seed(11)
    for _ in range(100):
        points = [Point(float(x), float(x)) for x in np.random.rand(30)]

        hull = convex_hull(points)
        assert sorted(hull) == sorted(MonotoneChainHull().solve(points))
        assert hull.vertices == (min(points), max(points))
