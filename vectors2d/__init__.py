"""Mutable 2D vector math."""

from .math import InvalidArgument, Vector2D, box_corners, rotate_point, rotate_point_rd

__version__ = "0.1.0"

__all__ = [
    "InvalidArgument",
    "Vector2D",
    "box_corners",
    "rotate_point",
    "rotate_point_rd",
]
