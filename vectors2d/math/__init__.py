"""Vector math for vectors2d."""

from .transforms import box_corners, rotate_point, rotate_point_rd
from .vec2 import InvalidArgument, Vector2D

__all__ = [
    "InvalidArgument",
    "Vector2D",
    "box_corners",
    "rotate_point",
    "rotate_point_rd",
]
