from geometry import Hull, InvalidInput, Point, cross, require_points


def rightmost_lowest(points) -> Point:
    """
    Lowest point by y, the rightmost one among several lowest.
    It is always a hull vertex.
    """
    if len(points) == 0:
        raise InvalidInput("empty point sequence")

    anchor = points[0]
    for p in points:
        if p.y < anchor.y or p.y == anchor.y and p.x > anchor.x:
            anchor = p
    return anchor


class GiftWrappingHull:
    @staticmethod
    def next_vertex(points, current: Point, anchor: Point) -> Point:
        """
        Find the hull vertex following `current`.

        A point on the left of current -> candidate becomes the new candidate.
        On a collinear tie the point farther from current wins, so
        points lying inside a hull edge are never chosen.
        """
        candidate = anchor
        for p in points:
            # >0 left, =0 on the line, <0 right
            direction = cross(current, candidate, p)
            if direction > 0 or (
                direction == 0 and current.distance(p) > current.distance(candidate)
            ):
                candidate = p
        return candidate

    def solve(self, points) -> Hull:
        """
        Jarvis march: start at the rightmost lowest point and keep wrapping
        until the anchor is reached again. With y axis pointing up the walk
        is clockwise, i.e. counter-clockwise on a screen with y pointing down.

        Rounding in the orientation test on nearly collinear points can lead
        the walk back to a vertex other than the anchor. The walk stops there
        and the hull is closed through the anchor, so each vertex appears once.

        Time complexity: O(n*h), where h is the number of hull vertices.
        """
        require_points(points)
        points = list(points)

        anchor = rightmost_lowest(points)
        vertices = [anchor]
        current = anchor
        while True:
            current = self.next_vertex(points, current, anchor)
            if current in vertices:
                return Hull(tuple(vertices))
            vertices.append(current)


def convex_hull(points) -> Hull:
    return GiftWrappingHull().solve(points)
