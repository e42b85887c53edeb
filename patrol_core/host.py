"""
Host interface
Sensor and actuator calls the simulation exposes to one tank.

The host owns the tank state (position, heading, heat, destruction). The patrol
logic only reads it through the queries below and changes it through the
actuators; nothing here is cached between ticks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple


class TankHost(ABC):
    # Sensors

    @abstractmethod
    def position(self) -> Tuple[float, float]:
        """Current (x, y) of the tank."""

    @abstractmethod
    def heat(self) -> float:
        """Current heat level."""

    # Constants

    @abstractmethod
    def death_heat(self) -> float:
        """Heat level at which the tank is destroyed."""

    @abstractmethod
    def shoot_heat(self) -> float:
        """Heat charged per fire() call."""

    @abstractmethod
    def velocity(self) -> float:
        """Distance covered by one forward() call."""

    # Actuators

    @abstractmethod
    def turn(self, bearing: float) -> None:
        """Set the hull heading to an absolute bearing in radians."""

    @abstractmethod
    def forward(self) -> None:
        """Advance one velocity unit along the current heading."""

    @abstractmethod
    def aim(self, bearing: float) -> None:
        """Set the turret bearing, independent of the hull heading."""

    @abstractmethod
    def fire(self) -> None:
        """Discharge one shot along the turret bearing."""

    @abstractmethod
    def yield_control(self) -> None:
        """Hand control back to the host scheduler."""

    @abstractmethod
    def post(self, message: str) -> None:
        """Best-effort diagnostic output."""
