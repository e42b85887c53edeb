"""
Patrol state machine
Steruje jazdą po trasie i co tick oddaje kontrolę hostowi.

Jedno wywołanie step() == jeden tick hosta. Tick kończy się albo na
yield_control() (po wyborze punktu), albo na forward() + decyzji o strzale.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Tuple

from .engagement import EngagementPolicy, HeatBudget
from .geometry import course_to, distance_to
from .host import TankHost
from .waypoints import SQUARE_ROUTE, Point, WaypointRoute


class PatrolState(Enum):
    SELECT_WAYPOINT = 1
    TURN = 2
    APPROACH = 3


class PatrolController:
    def __init__(
        self,
        route: Optional[WaypointRoute] = None,
        aim_point: Tuple[float, float] = (0.0, 0.0),
        name: str = "Patrol",
        log_transitions: bool = False,
    ):
        self.name = name
        self.route = route if route is not None else WaypointRoute(SQUARE_ROUTE)
        self.aim_point = aim_point
        self.log_transitions = log_transitions

        self.state = PatrolState.SELECT_WAYPOINT
        self.target: Optional[Point] = None
        self.engagement: Optional[EngagementPolicy] = None  # Lazy init on first tick

        self.ticks = 0
        self.legs_completed = 0

    @classmethod
    def with_points(cls, points: Sequence[Point], **kwargs) -> "PatrolController":
        return cls(route=WaypointRoute(points), **kwargs)

    @property
    def shots_fired(self) -> int:
        return self.engagement.shots_fired if self.engagement else 0

    def _change_state(self, new_state: PatrolState) -> None:
        if self.log_transitions:
            print(f"[{self.name}] {self.state.name} -> {new_state.name}")
        self.state = new_state

    def _select_waypoint(self, host: TankHost) -> None:
        self.target = self.route.current_target()
        self.route.announce(host)
        self._change_state(PatrolState.TURN)
        host.yield_control()

    def _turn(self, host: TankHost) -> None:
        assert self.target is not None
        # Kurs liczony raz na odcinek, bez korekt w trakcie jazdy.
        host.turn(course_to(host, *self.target))
        self._change_state(PatrolState.APPROACH)

    def step(self, host: TankHost) -> PatrolState:
        """Wykonuje jeden tick i zwraca stan, w którym agent czeka na następny."""
        self.ticks += 1

        if self.engagement is None:
            self.engagement = EngagementPolicy(HeatBudget.from_host(host), aim_point=self.aim_point)

        if self.state == PatrolState.SELECT_WAYPOINT:
            self._select_waypoint(host)
            return self.state

        if self.state == PatrolState.TURN:
            self._turn(host)

        assert self.target is not None
        if distance_to(host, *self.target) <= host.velocity():
            self.route.advance()
            self.legs_completed += 1
            self._change_state(PatrolState.SELECT_WAYPOINT)
            self._select_waypoint(host)
            return self.state

        host.forward()
        self.engagement.engage(host)
        return self.state

    def remaining_distance(self, host: TankHost) -> Optional[float]:
        if self.target is None:
            return None
        return distance_to(host, *self.target)
