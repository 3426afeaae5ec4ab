import unittest

from spiralpack import Point, Rectangle, Size


class TestRectangle(unittest.TestCase):
    def test_edges_and_area(self):
        rect = Rectangle(10, 20, 30, 40)

        self.assertEqual((rect.left, rect.top, rect.right, rect.bottom), (10, 20, 40, 60))
        self.assertEqual(rect.area, 1200)
        self.assertEqual(rect.size, Size(30, 40))

    def test_center_uses_floor_division(self):
        self.assertEqual(Rectangle(0, 0, 100, 200).center(), Point(50, 100))
        self.assertEqual(Rectangle(0, 0, 5, 7).center(), Point(2, 3))

    def test_corners(self):
        self.assertEqual(
            Rectangle(1, 2, 3, 4).corners(),
            (Point(1, 2), Point(4, 2), Point(1, 6), Point(4, 6)),
        )

    def test_centered_at_round_trips_center(self):
        for size in [Size(100, 200), Size(5, 7), Size(1, 1)]:
            rect = Rectangle.centered_at(Point(500, 500), size)
            self.assertEqual(rect.center(), Point(500, 500))
            self.assertEqual(rect.size, size)

    def test_overlapping_rectangles_intersect(self):
        a = Rectangle(0, 0, 10, 10)
        b = Rectangle(5, 5, 10, 10)

        self.assertTrue(a.intersects_with(b))
        self.assertTrue(b.intersects_with(a))

    def test_contained_rectangle_intersects(self):
        self.assertTrue(Rectangle(0, 0, 10, 10).intersects_with(Rectangle(2, 2, 1, 1)))

    def test_touching_edges_do_not_intersect(self):
        a = Rectangle(0, 0, 10, 10)

        self.assertFalse(a.intersects_with(Rectangle(10, 0, 10, 10)))
        self.assertFalse(a.intersects_with(Rectangle(0, 10, 10, 10)))
        self.assertFalse(a.intersects_with(Rectangle(10, 10, 5, 5)))

    def test_separated_on_one_axis_do_not_intersect(self):
        a = Rectangle(0, 0, 10, 10)

        self.assertFalse(a.intersects_with(Rectangle(5, 20, 10, 10)))
        self.assertFalse(a.intersects_with(Rectangle(-30, 5, 10, 10)))
