"""Trasa patrolu: stała lista punktów czytana cyklicznie."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .host import TankHost

Point = Tuple[float, float]

# Kwadrat 100x100 z narożnikiem w początku układu, objeżdżany przeciwnie do wskazówek zegara.
SQUARE_ROUTE: List[Point] = [
    (100.0, 0.0),
    (100.0, 100.0),
    (0.0, 100.0),
    (0.0, 0.0),
]


class WaypointRoute:
    def __init__(self, points: Sequence[Point] = SQUARE_ROUTE):
        if not points:
            raise ValueError("route needs at least one waypoint")
        self.points: List[Point] = [(float(x), float(y)) for x, y in points]
        self.index: int = 0

    def __len__(self) -> int:
        return len(self.points)

    def current_target(self) -> Point:
        return self.points[self.index]

    def advance(self) -> Point:
        """Przechodzi do następnego punktu (po ostatnim wraca do pierwszego)."""
        self.index = (self.index + 1) % len(self.points)
        return self.current_target()

    def announce(self, host: TankHost) -> None:
        x, y = self.current_target()
        host.post(f"navigating to (x, y): {x} {y}")


def parse_route(text: str) -> List[Point]:
    """
    Parsuje trasę z linii poleceń.

    Format: "x,y;x,y;..." np. "100,0;100,100;0,100;0,0".
    """
    points: List[Point] = []
    for chunk in text.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split(",")
        if len(parts) != 2:
            raise ValueError(f"bad waypoint {chunk!r}, expected 'x,y'")
        try:
            points.append((float(parts[0]), float(parts[1])))
        except ValueError:
            raise ValueError(f"bad waypoint {chunk!r}, coordinates must be numbers") from None
    if not points:
        raise ValueError("route is empty")
    return points


def parse_point(text: str) -> Point:
    route = parse_route(text)
    if len(route) != 1:
        raise ValueError(f"expected a single 'x,y' point, got {text!r}")
    return route[0]
