import unittest

from vectors2d.math.transforms import box_corners, rotate_point, rotate_point_rd
from vectors2d.math.vec2 import Vector2D


class TransformTests(unittest.TestCase):
    def test_rotate_point_about_origin(self) -> None:
        point = Vector2D(2.0, 1.0)
        origin = Vector2D(1.0, 1.0)
        rotated = rotate_point(point, origin, 90.0)
        self.assertAlmostEqual(rotated.x, 1.0)
        self.assertAlmostEqual(rotated.y, 2.0)
        self.assertEqual(point.to_tuple(), (2.0, 1.0))
        self.assertEqual(origin.to_tuple(), (1.0, 1.0))

    def test_rotate_point_rd_accepts_pairs(self) -> None:
        rotated = rotate_point_rd((3.0, 0.0), (0.0, 0.0), 3.141592653589793)
        self.assertAlmostEqual(rotated.x, -3.0)
        self.assertAlmostEqual(rotated.y, 0.0)

    def test_rotate_point_keeps_precision(self) -> None:
        rotated = rotate_point(Vector2D(1, 0, precision=4), (0, 0), 90.0)
        self.assertEqual(rotated.precision, 4)
        self.assertEqual(rotated.to_tuple(), (0.0, 1.0))

    def test_box_corners_unrotated(self) -> None:
        corners = box_corners(Vector2D(10.0, 5.0), (4.0, 2.0), 0.0)
        expected = ((8.0, 4.0), (12.0, 4.0), (12.0, 6.0), (8.0, 6.0))
        self.assertEqual(len(corners), 4)
        for corner, (ex, ey) in zip(corners, expected, strict=True):
            self.assertAlmostEqual(corner.x, ex)
            self.assertAlmostEqual(corner.y, ey)

    def test_box_corners_quarter_turn(self) -> None:
        corners = box_corners((0.0, 0.0), (4.0, 2.0), 90.0)
        expected = ((1.0, -2.0), (1.0, 2.0), (-1.0, 2.0), (-1.0, -2.0))
        for corner, (ex, ey) in zip(corners, expected, strict=True):
            self.assertAlmostEqual(corner.x, ex)
            self.assertAlmostEqual(corner.y, ey)


if __name__ == "__main__":
    unittest.main()
