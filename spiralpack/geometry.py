from typing import NamedTuple, Tuple


class Point(NamedTuple):
    x: int
    y: int


class Size(NamedTuple):
    width: int
    height: int


class Rectangle(NamedTuple):
    """Axis-aligned rectangle in pixel coordinates, with (x, y) the top-left corner."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def center(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Top-left, top-right, bottom-left and bottom-right corners."""
        return (
            Point(self.left, self.top),
            Point(self.right, self.top),
            Point(self.left, self.bottom),
            Point(self.right, self.bottom),
        )

    def intersects_with(self, other: "Rectangle") -> bool:
        # Strict inequalities: rectangles sharing only an edge do not intersect.
        return (
            other.left < self.right
            and self.left < other.right
            and other.top < self.bottom
            and self.top < other.bottom
        )

    @classmethod
    def centered_at(cls, point: Point, size: Size) -> "Rectangle":
        return cls(
            point.x - size.width // 2,
            point.y - size.height // 2,
            size.width,
            size.height,
        )
