import math

from dataclasses import dataclass
from typing import Iterator


class InvalidInput(ValueError):
    """
    Raised when a point sequence cannot be solved, e.g. it has too few points.
    """


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self):
        return f"({self.x:.0f}, {self.y:.0f})"

    def distance(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)


def y_order(p: Point) -> float:
    """
    Sort key for y-major order. Ties keep their input order, as sorting is stable.
    """
    return p.y


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def require_points(points, minimum: int = 2):
    if len(points) < minimum:
        raise InvalidInput(f"at least {minimum} points are required, got {len(points)}")


@dataclass(frozen=True)
class Pair:
    p1: Point
    p2: Point

    @property
    def distance(self) -> float:
        return self.p1.distance(self.p2)

    def contains(self, p: Point) -> bool:
        return self.p1 == p or self.p2 == p

    def __iter__(self) -> Iterator[Point]:
        yield self.p1
        yield self.p2

    def __str__(self):
        return f"{self.p1} -> {self.p2}"


@dataclass(frozen=True)
class Hull:
    """
    Hull boundary in wrap order, starting at the anchor.
    The anchor is not repeated at the end; use `closed()` to get the polygon.
    """
    vertices: tuple[Point, ...]

    @property
    def anchor(self) -> Point:
        return self.vertices[0]

    def closed(self) -> list[Point]:
        return list(self.vertices) + [self.vertices[0]]

    def edges(self) -> list[tuple[Point, Point]]:
        polygon = self.closed()
        return [(polygon[i], polygon[i + 1]) for i in range(len(polygon) - 1)]

    def __len__(self):
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __contains__(self, p: Point) -> bool:
        return p in self.vertices

    def __str__(self):
        return " -> ".join(str(p) for p in self.closed())
