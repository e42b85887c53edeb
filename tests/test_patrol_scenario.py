"""
Scenariusze end-to-end na symulowanym hoście.

- pełne okrążenie kwadratu ze strzałem w każdej iteracji jazdy,
- samoograniczenie ciepła przy domyślnych stałych silnika,
- scheduler przestaje wołać agenta po zniszczeniu czołgu.
"""

import math
import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
AGENT_DIR = os.path.dirname(THIS_DIR)
if AGENT_DIR not in sys.path:
    sys.path.insert(0, AGENT_DIR)

from patrol_core.controller import PatrolController, PatrolState  # noqa: E402
from patrol_core.sim_host import SimulatedHost, SimulationConfig, run_ticks  # noqa: E402


def _square_host() -> SimulatedHost:
    # idle_heat == -shoot_heat: ciepło przy każdej decyzji wynosi 0.
    return SimulatedHost(SimulationConfig(
        shoot_heat=2.0,
        idle_heat=-2.0,
        death_heat=10.0,
        tank_velocity=5.0,
        start=(0.0, 0.0),
    ))


def _drive_until_legs(controller: PatrolController, host: SimulatedHost, legs: int, limit: int = 1000) -> list:
    indices = [controller.route.index]
    for _ in range(limit):
        if controller.legs_completed >= legs:
            break
        host.begin_tick()
        heat_at_decision = host.heat()
        assert heat_at_decision == 0.0
        before = controller.route.index
        controller.step(host)
        if controller.route.index != before:
            indices.append(controller.route.index)
    return indices


def test_full_square_patrol_fires_every_iteration():
    host = _square_host()
    controller = PatrolController()

    indices = _drive_until_legs(controller, host, legs=4)

    assert indices == [0, 1, 2, 3, 0]
    assert controller.legs_completed == 4
    assert host.forward_calls > 0
    assert len(host.shots) == host.forward_calls
    assert controller.shots_fired == host.forward_calls
    assert len(host.turns) == 4
    assert host.yields == 5
    assert not host.dead
    assert host.diagnostics == [
        "navigating to (x, y): 100.0 0.0",
        "navigating to (x, y): 100.0 100.0",
        "navigating to (x, y): 0.0 100.0",
        "navigating to (x, y): 0.0 0.0",
        "navigating to (x, y): 100.0 0.0",
    ]


def test_first_leg_stops_within_one_step_of_corner():
    host = _square_host()
    controller = PatrolController()

    _drive_until_legs(controller, host, legs=1)

    # 19 kroków po 5 jednostek: (95, 0) jest już w zasięgu dojazdu.
    assert host.forward_calls == 19
    assert math.isclose(host.x, 95.0)
    assert math.isclose(host.y, 0.0)
    assert controller.state == PatrolState.TURN


def test_shots_always_aim_at_origin():
    host = _square_host()
    controller = PatrolController()

    _drive_until_legs(controller, host, legs=4)

    for shot in host.shots:
        assert math.isclose(shot.bearing, math.atan2(-shot.y, -shot.x), abs_tol=1e-12)


def test_default_engine_constants_never_overheat():
    host = SimulatedHost()
    controller = PatrolController()

    done = run_ticks(controller, host, 3000)

    assert done == 3000
    assert not host.dead
    assert host.current_heat < host.config.death_heat
    # Po nagrzaniu agent przepuszcza część iteracji bez strzału.
    assert 0 < len(host.shots) < host.forward_calls
    assert controller.legs_completed >= 4


def test_scheduler_stops_after_destruction():
    host = SimulatedHost(SimulationConfig(idle_heat=3.0, death_heat=10.0, shoot_heat=1.0))
    controller = PatrolController()

    done = run_ticks(controller, host, 50)

    assert host.dead
    assert done < 50
    assert controller.ticks == done


def test_snapshot_serializes():
    host = _square_host()
    controller = PatrolController()
    run_ticks(controller, host, 3)

    snap = host.snapshot()
    assert snap.tick == 3
    assert snap.shots == 2
    assert '"dead":false' in snap.model_dump_json()
