"""Mutable 2D vector with chainable in-place operations.

Every mutator changes the vector in place and returns the same instance::

    Vector2D(3, 4).multiply(2).rotate(90).length  # 10.0

Rounding to ``precision`` digits is applied by the length and angle
producing operations only. ``add``, ``subtract``, ``multiply`` and ``divide``
keep the raw floating-point result.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from math import atan2, copysign, cos, degrees, hypot, inf, isnan, nan, radians, sin
from numbers import Integral, Real
from typing import Any, Iterator

from .. import config

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when a value cannot be read as a vector or a scalar operand."""


def _is_number(value: Any) -> bool:
    return isinstance(value, Real)


def _pair(value: Any) -> tuple[float, float] | None:
    """Return ``(x, y)`` for a 2-sequence or an object with numeric x/y."""
    if isinstance(value, Sequence):
        if isinstance(value, (str, bytes)) or len(value) != 2:
            return None
        x, y = value
    else:
        x = getattr(value, "x", None)
        y = getattr(value, "y", None)
    if _is_number(x) and _is_number(y):
        return float(x), float(y)
    return None


def _coords(x: Any, y: Any = None) -> tuple[float, float]:
    if y is not None:
        if _is_number(x) and _is_number(y):
            return float(x), float(y)
        raise InvalidArgument(f"Expected two numbers, got {x!r} and {y!r}.")
    pair = _pair(x)
    if pair is None:
        raise InvalidArgument(f"Expected an (x, y) pair or an object with numeric x/y, got {x!r}.")
    return pair


def _accepts(value: Any) -> bool:
    return _is_number(value) or _pair(value) is not None


def _operand(value: Any) -> tuple[float, float]:
    if _is_number(value):
        return float(value), float(value)
    pair = _pair(value)
    if pair is None:
        raise InvalidArgument(f"Expected a number or a vector-like operand, got {value!r}.")
    return pair


def _divide(a: float, b: float) -> float:
    """Divide with IEEE-754 results instead of ZeroDivisionError."""
    if b != 0:
        return a / b
    logger.debug("Division by zero: %r / %r", a, b)
    if a == 0 or isnan(a):
        return nan
    return copysign(inf, a) * copysign(1.0, b)


class Vector2D:
    """2D vector built from ``(x, y)``, ``[x, y]`` or any object with x/y."""

    __slots__ = ("x", "y", "_precision")

    def __init__(self, x: Any, y: Any = None, *, precision: int = config.DEFAULT_PRECISION) -> None:
        self.precision = precision
        self.x, self.y = _coords(x, y)

    @classmethod
    def from_polar(
        cls,
        length: float,
        angle_deg: float,
        precision: int = config.DEFAULT_PRECISION,
    ) -> "Vector2D":
        vec = cls(0.0, 0.0, precision=precision)
        rad = radians(angle_deg)
        return vec.reset(vec.precise(cos(rad) * length), vec.precise(sin(rad) * length))

    @property
    def precision(self) -> int:
        return self._precision

    @precision.setter
    def precision(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidArgument(f"Precision must be an integer, got {value!r}.")
        if not config.MIN_PRECISION <= value <= config.MAX_PRECISION:
            raise InvalidArgument(
                f"Precision must be between {config.MIN_PRECISION} and {config.MAX_PRECISION}, got {value}."
            )
        self._precision = int(value)

    def reset(self, x: Any, y: Any = None) -> "Vector2D":
        """Overwrite the coordinates from two numbers or one vector-like."""
        self.x, self.y = _coords(x, y)
        return self

    def clone(self) -> "Vector2D":
        return Vector2D(self.x, self.y, precision=self.precision)

    def precise(self, value: float) -> float:
        """Round value to ``precision`` decimal digits."""
        return float(round(value, self.precision))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    # + - * /

    def add(self, other: Any) -> "Vector2D":
        ox, oy = _operand(other)
        self.x += ox
        self.y += oy
        return self

    def subtract(self, other: Any) -> "Vector2D":
        ox, oy = _operand(other)
        self.x -= ox
        self.y -= oy
        return self

    def multiply(self, other: Any) -> "Vector2D":
        ox, oy = _operand(other)
        self.x *= ox
        self.y *= oy
        return self

    def divide(self, other: Any) -> "Vector2D":
        ox, oy = _operand(other)
        self.x = _divide(self.x, ox)
        self.y = _divide(self.y, oy)
        return self

    def dot(self, other: Any) -> float:
        ox, oy = _coords(other)
        return self.x * ox + self.y * oy

    def cross(self, other: Any) -> float:
        """2D cross product returning a scalar (z-component)."""
        ox, oy = _coords(other)
        return self.x * oy - self.y * ox

    # size

    @property
    def length(self) -> float:
        return self.precise(hypot(self.x, self.y))

    def resize(self, size: float) -> "Vector2D":
        """Scale the vector so its length becomes ``size``.

        A zero-length vector has no direction to scale along, so it is
        reset to (0, 0) instead.
        """
        length = self.length
        if length == 0 or isnan(length):
            logger.debug("Resize of zero-length vector to %r; resetting to origin", size)
            return self.reset(0.0, 0.0)
        return self.multiply(size / length)

    def normalize(self) -> "Vector2D":
        return self.resize(1.0)

    @property
    def normalized(self) -> "Vector2D":
        return self.clone().normalize()

    def limit(self, min_length: float, max_length: float) -> "Vector2D":
        length = self.length
        if length > max_length:
            self.resize(max_length)
        elif length < min_length:
            self.resize(min_length)
        return self

    def add_size(self, size: float) -> "Vector2D":
        return self.resize(self.length + size)

    def subtract_size(self, size: float) -> "Vector2D":
        return self.resize(self.length - size)

    def multiply_size(self, size: float) -> "Vector2D":
        return self.resize(self.length * size)

    def divide_size(self, size: float) -> "Vector2D":
        return self.resize(_divide(self.length, size))

    def distance_to(self, other: Any) -> float:
        return self.clone().subtract(other).length

    # angle & direction

    def reverse(self) -> "Vector2D":
        """Negate both components (rotate 180 degrees)."""
        self.x *= -1
        self.y *= -1
        return self

    @property
    def angle(self) -> float:
        """Direction in degrees, CCW from +X axis, in (-180, 180]."""
        return self.precise(degrees(atan2(self.y, self.x)))

    @property
    def angle_rd(self) -> float:
        """Direction in radians, CCW from +X axis."""
        return self.precise(atan2(self.y, self.x))

    @property
    def incline(self) -> float:
        """Slope y / x; infinite or nan when x is zero."""
        return _divide(self.y, self.x)

    def rotate_to(self, angle_deg: float) -> "Vector2D":
        """Point the vector at ``angle_deg`` keeping its length."""
        return self.rotate_to_rd(radians(angle_deg))

    def rotate(self, delta_deg: float) -> "Vector2D":
        return self.rotate_to(self.angle + delta_deg)

    def rotate_to_rd(self, angle_rad: float) -> "Vector2D":
        length = self.length
        self.x = self.precise(cos(angle_rad) * length)
        self.y = self.precise(sin(angle_rad) * length)
        return self

    def rotate_rd(self, delta_rad: float) -> "Vector2D":
        return self.rotate_to_rd(self.angle_rd + delta_rad)

    # operators

    def __iadd__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.subtract(other)

    def __imul__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.multiply(other)

    def __itruediv__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.divide(other)

    def __add__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.clone().add(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.clone().subtract(other)

    def __rsub__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.clone().reverse().add(other)

    def __mul__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.clone().multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Vector2D":
        if not _accepts(other):
            return NotImplemented
        return self.clone().divide(other)

    def __neg__(self) -> "Vector2D":
        return self.clone().reverse()

    def __abs__(self) -> float:
        return self.length

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return (self.x, self.y) == pair

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vector2D(x={self.x!r}, y={self.y!r}, precision={self.precision})"
