import math

from spiralpack.geometry import Point, Rectangle


def squared_radius_for(rectangle: Rectangle, center: Point) -> int:
    """Squared radius of the smallest circle around `center` which contains `rectangle`.

    Parameters
    ----------
        rectangle: The rectangle to enclose, in practice the most recently placed one.
        center: Center of the circle.

    Returns
    -------
        squared_radius: The maximum squared euclidean distance from center to one of the four
        corners of the rectangle.
    """
    return max(
        (corner.x - center.x) ** 2 + (corner.y - center.y) ** 2
        for corner in rectangle.corners()
    )


def circle_area(rectangle: Rectangle, center: Point) -> float:
    return math.pi * squared_radius_for(rectangle, center)


class CircumscribedCircle:
    """Circle finder bound to the center of a layout."""

    def __init__(self, center: Point):
        self.center = Point(*center)

    def squared_radius(self, rectangle: Rectangle) -> int:
        return squared_radius_for(rectangle, self.center)

    def area(self, rectangle: Rectangle) -> float:
        return circle_area(rectangle, self.center)
