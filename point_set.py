import math

import numpy as np

from closest_pair import closest_pair
from convex_hull import convex_hull
from geometry import Hull, InvalidInput, Pair, Point


DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


class PointSet:
    """
    Ordered collection of distinct points edited by the user.

    Solvers never see the live list: `snapshot()` hands out an immutable
    copy, so the set may keep changing (e.g. while a point is dragged)
    without affecting a solve in progress.
    """

    def __init__(self, points=()):
        self._points: list[Point] = []
        for p in points:
            self.add_point(Point(*p))

    @classmethod
    def from_array(cls, arr) -> "PointSet":
        arr = np.asarray(arr, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise InvalidInput(f"expected an array of shape (n, 2), got {arr.shape}")
        if not np.isfinite(arr).all():
            raise InvalidInput("array holds non-finite coordinates")
        return cls(Point(float(x), float(y)) for x, y in arr)

    def to_array(self) -> np.ndarray:
        return np.array([[p.x, p.y] for p in self._points], dtype=float).reshape(-1, 2)

    def add(self, x: float, y: float) -> bool:
        return self.add_point(Point(x, y))

    def add_point(self, p: Point) -> bool:
        """
        Append a point. A point equal to an existing one is ignored.
        """
        if p in self._points:
            return False
        self._points.append(p)
        return True

    def remove(self, index: int) -> Point:
        return self._points.pop(index)

    def remove_point(self, p: Point) -> bool:
        if p not in self._points:
            return False
        self._points.remove(p)
        return True

    def move(self, index: int, x: float, y: float) -> Point:
        moved = Point(x, y)
        if moved != self._points[index] and moved in self._points:
            raise InvalidInput(f"point {moved} is already in the set")
        self._points[index] = moved
        return moved

    def clear(self):
        self._points.clear()

    def index(self, p: Point) -> int:
        return self._points.index(p)

    def snapshot(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def closest_pair(self) -> Pair:
        return closest_pair(self.snapshot())

    def convex_hull(self) -> Hull:
        return convex_hull(self.snapshot())

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __contains__(self, p: Point) -> bool:
        return p in self._points

    def __str__(self):
        return "[" + ", ".join(str(p) for p in self._points) + "]"


def load_points(filename: str) -> PointSet:
    """
    Read points from a text file: the number of points on the first line,
    then one `x y` pair per line.
    """
    with open(filename, 'r', encoding='utf-8') as f:
        lines = [line.strip() for line in f]
    lines = [line for line in lines if line]
    if not lines:
        raise InvalidInput(f"{filename} is empty")

    try:
        n = int(lines[0])
        coords = [tuple(map(float, line.split())) for line in lines[1:n + 1]]
    except ValueError as e:
        raise InvalidInput(f"malformed point file {filename}: {e}") from e

    if len(coords) != n:
        raise InvalidInput(f"{filename} declares {n} points but has {len(coords)}")
    for xy in coords:
        if len(xy) != 2:
            raise InvalidInput(f"malformed point line in {filename}: {xy}")
        if not all(math.isfinite(c) for c in xy):
            raise InvalidInput(f"non-finite coordinates in {filename}: {xy}")

    return PointSet(coords)


def save_points(filename: str, points):
    points = list(points)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f"{len(points)}\n")
        for p in points:
            f.write(f"{float(p.x)!r} {float(p.y)!r}\n")


def generate_random_points(n: int, distribution: str = "uniform", seed: int | None = 42) -> PointSet:
    """
    Sample n points around (500, 500).
    Duplicates are dropped, so the set may hold slightly fewer points.
    """
    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        xy = rng.uniform(0, 1000, size=(n, 2))
    elif distribution == "circle":
        angle = rng.uniform(0, 2 * np.pi, size=n)
        r = 500 * rng.uniform(0, 1, size=n) ** 0.5
        xy = np.column_stack((500 + r * np.cos(angle), 500 + r * np.sin(angle)))
    elif distribution == "gaussian":
        xy = rng.normal(500, 150, size=(n, 2))
    elif distribution == "clusters":
        n_clusters = 5
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        labels = np.arange(n) % n_clusters
        xy = centers[labels] + rng.normal(0, 50, size=(n, 2))
    else:
        raise InvalidInput(f"unknown distribution {distribution!r}, expected one of {DISTRIBUTIONS}")

    return PointSet.from_array(xy)
