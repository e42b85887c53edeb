from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .host import TankHost


@dataclass(frozen=True)
class HeatBudget:
    death_heat: float
    shoot_heat: float

    @property
    def max_fire_heat(self) -> float:
        return self.death_heat - self.shoot_heat

    @classmethod
    def from_host(cls, host: TankHost) -> "HeatBudget":
        return cls(death_heat=host.death_heat(), shoot_heat=host.shoot_heat())

    def allows_fire(self, heat: float) -> bool:
        # Strict: a shot at exactly max_fire_heat would land on death_heat.
        return heat < self.max_fire_heat


class EngagementPolicy:
    def __init__(self, budget: HeatBudget, aim_point: Tuple[float, float] = (0.0, 0.0)):
        self.budget = budget
        self.aim_point = aim_point
        self.shots_fired = 0

    def aim_bearing(self, my_x: float, my_y: float) -> float:
        # atan2(-y, -x) for the origin, signed zeros included.
        return math.atan2(-(my_y - self.aim_point[1]), -(my_x - self.aim_point[0]))

    def engage(self, host: TankHost) -> bool:
        if not self.budget.allows_fire(host.heat()):
            return False

        my_x, my_y = host.position()
        host.aim(self.aim_bearing(my_x, my_y))
        host.fire()
        self.shots_fired += 1
        return True
