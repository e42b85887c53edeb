"""
Simulated host
Deterministyczny, jednoczołgowy świat do testów i lokalnego przejazdu trasy.

Stałe domyślne odpowiadają konfiguracji oryginalnego silnika gry. Ciepło jest
tutaj tylko modelem zastępczym: rośnie o shoot_heat przy strzale, co tick
zmienia się o idle_heat (nie spada poniżej zera).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel

from .host import TankHost


@dataclass
class SimulationConfig:
    shoot_heat: float = 26.0
    idle_heat: float = -2.0
    death_heat: float = 300.0
    tank_velocity: float = 1.0
    start: Tuple[float, float] = (0.0, 0.0)


@dataclass
class Shot:
    tick: int
    x: float
    y: float
    bearing: float


class TankSnapshot(BaseModel):
    tick: int
    x: float
    y: float
    heading: float
    aim: float
    heat: float
    dead: bool
    shots: int


@dataclass
class SimulatedHost(TankHost):
    config: SimulationConfig = field(default_factory=SimulationConfig)
    name: str = "SimTank"
    echo: bool = False

    def __post_init__(self) -> None:
        self.x, self.y = (float(self.config.start[0]), float(self.config.start[1]))
        self.heading = 0.0
        self.turret = 0.0
        self.current_heat = 0.0
        self.dead = False
        self.tick = 0
        self.shots: List[Shot] = []
        self.turns: List[float] = []
        self.forward_calls = 0
        self.yields = 0
        self.diagnostics: List[str] = []

    def _apply_heat(self, heat: float) -> None:
        self.current_heat = max(0.0, self.current_heat + heat)
        if self.current_heat >= self.config.death_heat:
            self.dead = True

    def begin_tick(self) -> None:
        self.tick += 1
        self._apply_heat(self.config.idle_heat)

    # Sensors

    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def heat(self) -> float:
        return self.current_heat

    def death_heat(self) -> float:
        return self.config.death_heat

    def shoot_heat(self) -> float:
        return self.config.shoot_heat

    def velocity(self) -> float:
        return self.config.tank_velocity

    # Actuators

    def turn(self, bearing: float) -> None:
        self.heading = bearing
        self.turns.append(bearing)

    def forward(self) -> None:
        self.forward_calls += 1
        self.x += math.cos(self.heading) * self.config.tank_velocity
        self.y += math.sin(self.heading) * self.config.tank_velocity

    def aim(self, bearing: float) -> None:
        self.turret = bearing

    def fire(self) -> None:
        self.shots.append(Shot(self.tick, self.x, self.y, self.turret))
        self._apply_heat(self.config.shoot_heat)

    def yield_control(self) -> None:
        self.yields += 1

    def post(self, message: str) -> None:
        self.diagnostics.append(message)
        if self.echo:
            print(f"[{self.name}] {message}")

    def snapshot(self) -> TankSnapshot:
        return TankSnapshot(
            tick=self.tick,
            x=self.x,
            y=self.y,
            heading=self.heading,
            aim=self.turret,
            heat=self.current_heat,
            dead=self.dead,
            shots=len(self.shots),
        )


def run_ticks(controller, host: SimulatedHost, ticks: int, on_tick: Optional[Callable[[SimulatedHost], None]] = None) -> int:
    """
    Prosty scheduler: jeden step() kontrolera na tick, dopóki czołg żyje.

    Returns:
        Liczba wykonanych ticków.
    """
    done = 0
    for _ in range(ticks):
        if host.dead:
            break
        host.begin_tick()
        if host.dead:
            break
        controller.step(host)
        done += 1
        if on_tick is not None:
            on_tick(host)
    return done
