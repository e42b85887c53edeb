from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .geometry import to_xy
from .host import TankHost

# Domyślne stałe silnika, gdy payload ich nie podaje.
DEFAULT_DEATH_HEAT = 300.0
DEFAULT_SHOOT_HEAT = 26.0
DEFAULT_VELOCITY = 1.0


class ActionCommand(BaseModel):
    heading_angle: Optional[float] = None
    barrel_angle: Optional[float] = None
    move_speed: float = 0.0
    should_fire: bool = False
    yielded: bool = False
    diagnostics: List[str] = Field(default_factory=list)


class PayloadHost(TankHost):
    """Host zbudowany z jednego ticka wysłanego przez silnik; zbiera komendy do ActionCommand."""

    def __init__(self, my_tank_status: Dict[str, Any]):
        self.status = my_tank_status
        self.command = ActionCommand()

    def _constant(self, key: str, default: float) -> float:
        return float(self.status.get(key, default) or default)

    def position(self) -> Tuple[float, float]:
        return to_xy(self.status.get("position", {}))

    def heat(self) -> float:
        return float(self.status.get("heat", 0.0) or 0.0)

    def death_heat(self) -> float:
        return self._constant("_death_heat", DEFAULT_DEATH_HEAT)

    def shoot_heat(self) -> float:
        return self._constant("_shoot_heat", DEFAULT_SHOOT_HEAT)

    def velocity(self) -> float:
        return self._constant("_velocity", DEFAULT_VELOCITY)

    def turn(self, bearing: float) -> None:
        self.command.heading_angle = bearing

    def forward(self) -> None:
        self.command.move_speed = self.velocity()

    def aim(self, bearing: float) -> None:
        self.command.barrel_angle = bearing

    def fire(self) -> None:
        self.command.should_fire = True

    def yield_control(self) -> None:
        self.command.yielded = True

    def post(self, message: str) -> None:
        self.command.diagnostics.append(message)
