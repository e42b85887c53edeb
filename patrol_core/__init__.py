"""
Patrol Core Package
Logika czołgu patrolującego trasę i strzelającego w stronę początku układu.
"""

from .controller import PatrolController, PatrolState
from .engagement import EngagementPolicy, HeatBudget
from .geometry import course_to, distance_to
from .host import TankHost
from .payload_host import ActionCommand, PayloadHost
from .sim_host import SimulatedHost, SimulationConfig, run_ticks
from .waypoints import SQUARE_ROUTE, WaypointRoute, parse_route

__all__ = [
    'PatrolController',
    'PatrolState',
    'EngagementPolicy',
    'HeatBudget',
    'course_to',
    'distance_to',
    'TankHost',
    'ActionCommand',
    'PayloadHost',
    'SimulatedHost',
    'SimulationConfig',
    'run_ticks',
    'SQUARE_ROUTE',
    'WaypointRoute',
    'parse_route',
]
