from geometry import Pair, Point, require_points, y_order


class ClosestPairSolver:
    @staticmethod
    def closest_of_three(a: Point, b: Point, c: Point) -> Pair:
        """
        Exhaustive check of pairs ab, bc and ac in this order.
        A later pair wins only if it is strictly closer, so the first minimum found is kept.
        """
        closest = Pair(a, b)
        for candidate in (Pair(b, c), Pair(a, c)):
            if candidate.distance < closest.distance:
                closest = candidate
        return closest

    @staticmethod
    def split(points_sorted: list[Point]) -> tuple[Point, list[Point], list[Point]]:
        """
        Split x-sorted points by index: the left half takes the extra point when n is odd.
        Returns the dividing point (last point of the left half) and both halves.
        """
        n = len(points_sorted)
        mid = points_sorted[(n - 1) // 2]
        return mid, points_sorted[:(n + 1) // 2], points_sorted[(n + 1) // 2:]

    @staticmethod
    def strips(
        mid: Point,
        left: list[Point],
        right: list[Point],
        d: float,
    ) -> tuple[list[Point], list[Point]]:
        """
        Points within horizontal distance d of the dividing line, in y order,
        separated by the half they belong to.

        Halves are taken by position, not by value, so two equal points
        on both sides of the split still meet in the merge.
        """
        strip_left = sorted((p for p in left if mid.x - p.x <= d), key=y_order)
        strip_right = sorted((p for p in right if p.x - mid.x <= d), key=y_order)
        return strip_left, strip_right

    @staticmethod
    def merge(strip_left: list[Point], strip_right: list[Point], closest: Pair) -> Pair:
        """
        Look for a pair closer than `closest` with one point in each strip.

        Both strips are sorted by y. For every left point, the right points
        at or below p.y - d are skipped for good, and only the right points
        within d vertically are compared. Those lie in a d x 2d rectangle,
        so each left point is compared to a constant number of right points.
        """
        d = closest.distance
        r = 0
        for p in strip_left:
            while r < len(strip_right) and strip_right[r].y <= p.y - d:
                r += 1

            r1 = r
            while r1 < len(strip_right) and abs(strip_right[r1].y - p.y) <= d:
                candidate = Pair(p, strip_right[r1])
                if candidate.distance < d:
                    d = candidate.distance
                    closest = candidate
                r1 += 1
        return closest

    def find_closest(self, points: list[Point]) -> Pair:
        if len(points) == 2:
            return Pair(points[0], points[1])
        if len(points) == 3:
            return self.closest_of_three(*points)

        mid, left, right = self.split(sorted(points))

        left_pair = self.find_closest(left)
        right_pair = self.find_closest(right)
        # left half wins ties
        if right_pair.distance < left_pair.distance:
            closest = right_pair
        else:
            closest = left_pair

        strip_left, strip_right = self.strips(mid, left, right, closest.distance)
        return self.merge(strip_left, strip_right, closest)

    def solve(self, points) -> Pair:
        """
        Find the closest pair of points with divide and conquer.
        Input is not modified; duplicate points form a pair at distance 0.

        Time complexity: O(n*log(n)^2), the halves are re-sorted on each level.
        """
        require_points(points)
        return self.find_closest(list(points))


def closest_pair(points) -> Pair:
    return ClosestPairSolver().solve(points)
