from geometry import Point, cross, require_points


class MonotoneChainHull:
    def solve(self, points) -> list[Point]:
        """
        Andrew's monotone chain algorithm for convex hull.
        Collinear points on hull edges are dropped, only strict vertices are kept.
        Time complexity: O(n*log(n)).
        """
        require_points(points)
        points = sorted(set(points))
        if len(points) <= 2:
            return points

        lower = []  # lower hull
        for p in points:
            while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
                lower.pop()
            lower.append(p)

        upper = []  # upper hull
        for p in reversed(points):
            while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
                upper.pop()
            upper.append(p)

        # remove duplicate points
        return list(dict.fromkeys(lower[:-1] + upper[:-1]))
