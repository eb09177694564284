"""Default configuration values for vectors2d."""

from __future__ import annotations

DEFAULT_PRECISION = 20
MIN_PRECISION = 0
MAX_PRECISION = 20
