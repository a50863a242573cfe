from geometry import Pair, Point, require_points


class NaiveClosestPair:
    def solve(self, points) -> Pair:
        """
        Compare every pair of points. First minimum found wins.
        Time complexity: O(n^2).
        """
        require_points(points)
        points = list(points)

        closest = Pair(points[0], points[1])
        for i in range(len(points)):
            for j in range(i + 1, len(points)):
                candidate = Pair(points[i], points[j])
                if candidate.distance < closest.distance:
                    closest = candidate
        return closest
