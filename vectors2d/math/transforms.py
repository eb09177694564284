"""Geometry helpers built on Vector2D that leave their inputs untouched."""

from __future__ import annotations

from typing import Any

from .vec2 import Vector2D


def _as_vector(value: Any) -> Vector2D:
    if isinstance(value, Vector2D):
        return value.clone()
    return Vector2D(value)


def rotate_point(point: Any, origin: Any, angle_deg: float) -> Vector2D:
    """Rotate a point around an origin by angle_deg (degrees)."""
    return _as_vector(point).subtract(origin).rotate(angle_deg).add(origin)


def rotate_point_rd(point: Any, origin: Any, angle_rad: float) -> Vector2D:
    """Rotate a point around an origin by angle_rad (radians)."""
    return _as_vector(point).subtract(origin).rotate_rd(angle_rad).add(origin)


def box_corners(center: Any, size: Any, angle_deg: float) -> tuple[Vector2D, Vector2D, Vector2D, Vector2D]:
    """Return the four corners of a box after rotation about its center.

    Args:
        center: Box center.
        size: Box size (width, height).
        angle_deg: Rotation in degrees.

    Corners are ordered counter-clockwise starting from bottom-left.
    """
    half = _as_vector(size).multiply(0.5)
    local_corners = (
        (-half.x, -half.y),
        (half.x, -half.y),
        (half.x, half.y),
        (-half.x, half.y),
    )
    return tuple(
        Vector2D(corner, precision=half.precision).rotate(angle_deg).add(center) for corner in local_corners
    )
