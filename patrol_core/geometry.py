from __future__ import annotations

import math
from typing import Any, Tuple

from .host import TankHost


def to_xy(value: Any) -> Tuple[float, float]:
    if isinstance(value, dict):
        return float(value.get("x", 0.0) or 0.0), float(value.get("y", 0.0) or 0.0)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return float(value[0]), float(value[1])
    return float(getattr(value, "x", 0.0)), float(getattr(value, "y", 0.0))


def bearing_between(from_x: float, from_y: float, to_x: float, to_y: float) -> float:
    return math.atan2(to_y - from_y, to_x - from_x)


def distance_between(from_x: float, from_y: float, to_x: float, to_y: float) -> float:
    return math.hypot(to_x - from_x, to_y - from_y)


def course_to(host: TankHost, target_x: float, target_y: float) -> float:
    """Bearing in radians from the host's live position to the target."""
    x, y = host.position()
    return bearing_between(x, y, target_x, target_y)


def distance_to(host: TankHost, target_x: float, target_y: float) -> float:
    x, y = host.position()
    return distance_between(x, y, target_x, target_y)
