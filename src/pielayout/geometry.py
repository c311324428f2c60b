"""Angle and vector helpers used across the package.

All angles are in degrees. 0° points up, 90° right, 180° down and 270°
left, in screen coordinates where *y* grows downwards.
"""

from __future__ import annotations

import math
from typing import Tuple

from .models import LayoutInputError

Vec2 = Tuple[float, float]


def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def get_length(vec: Vec2) -> float:
    return math.hypot(vec[0], vec[1])


def get_distance(a: Vec2, b: Vec2) -> float:
    return get_length(subtract(a, b))


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def subtract(a: Vec2, b: Vec2) -> Vec2:
    """Return ``a - b``."""
    return (a[0] - b[0], a[1] - b[1])


def normalize_angle(angle: float) -> float:
    """Wrap *angle* into ``[0, 360)``.

    Tiny negative inputs make ``angle % 360`` round up to exactly 360,
    which is mapped back to 0.
    """
    wrapped = angle % 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def get_angle(vec: Vec2) -> float:
    """Angle of *vec* in degrees; the vector does not need to be normalised."""
    return normalize_angle(to_degrees(math.atan2(vec[1], vec[0])) + 90.0)


def get_direction(angle: float, length: float) -> Vec2:
    """Offset vector of *length* pointing in the direction of *angle*."""
    radians = to_radians(angle - 90.0)
    return (math.cos(radians) * length, math.sin(radians) * length)


def is_angle_between(angle: float, start: float, end: float) -> bool:
    """True if *angle* lies in ``(start, end]``, modulo one full turn.

    *start* should be smaller than *end*; both may be negative or larger
    than 360°.
    """
    return (
        start < angle <= end
        or start < angle - 360.0 <= end
        or start < angle + 360.0 <= end
    )


def check_angle(value: float, name: str = "angle") -> float:
    """Return *value* as float, raising :class:`LayoutInputError` if not finite."""
    if isinstance(value, bool):
        raise LayoutInputError(f"{name} must be a number, got {value!r}")
    try:
        angle = float(value)
    except (TypeError, ValueError) as exc:
        raise LayoutInputError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(angle):
        raise LayoutInputError(f"{name} must be finite, got {value!r}")
    return angle
