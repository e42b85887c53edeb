"""
Lokalny przejazd trasy patrolu na symulowanym hoście.
Wypisuje stan czołgu co tick (opcjonalnie jako JSON) i podsumowanie na końcu.

Usage:
    python run_patrol.py --ticks 500
    python run_patrol.py --ticks 200 --velocity 5 --shoot-heat 2 --death-heat 10 --json
"""

import argparse

from patrol_core.controller import PatrolController
from patrol_core.sim_host import SimulatedHost, SimulationConfig, run_ticks
from patrol_core.waypoints import SQUARE_ROUTE, WaypointRoute, parse_point, parse_route


def main() -> int:
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(description="Drive the patrol agent against a simulated host")
    parser.add_argument("--ticks", type=int, default=1000)
    parser.add_argument("--velocity", type=float, default=defaults.tank_velocity)
    parser.add_argument("--shoot-heat", type=float, default=defaults.shoot_heat)
    parser.add_argument("--death-heat", type=float, default=defaults.death_heat)
    parser.add_argument("--idle-heat", type=float, default=defaults.idle_heat)
    parser.add_argument("--start", type=parse_point, default=defaults.start, help="Start position 'x,y'")
    parser.add_argument("--route", type=parse_route, default=None, help="Waypoints 'x,y;x,y;...'")
    parser.add_argument("--json", action="store_true", help="Print a JSON snapshot every tick")
    parser.add_argument("--verbose", action="store_true", help="Echo host diagnostics and state changes")
    args = parser.parse_args()

    config = SimulationConfig(
        shoot_heat=args.shoot_heat,
        idle_heat=args.idle_heat,
        death_heat=args.death_heat,
        tank_velocity=args.velocity,
        start=args.start,
    )
    host = SimulatedHost(config=config, echo=args.verbose)
    controller = PatrolController(
        route=WaypointRoute(args.route if args.route else SQUARE_ROUTE),
        name=host.name,
        log_transitions=args.verbose,
    )

    def print_snapshot(sim: SimulatedHost) -> None:
        print(f"Step: {sim.tick}")
        print(f"json: {sim.snapshot().model_dump_json()}")

    print("=" * 70)
    print(f"PATROL RUN ticks={args.ticks} velocity={config.tank_velocity} "
          f"shoot_heat={config.shoot_heat} death_heat={config.death_heat} idle_heat={config.idle_heat}")
    print("=" * 70)

    done = run_ticks(controller, host, args.ticks, on_tick=print_snapshot if args.json else None)

    print()
    print(f"[*] ticks={done} legs={controller.legs_completed} shots={controller.shots_fired} "
          f"position=({host.x:.1f}, {host.y:.1f}) heat={host.current_heat:.1f}")
    if host.dead:
        print(f"[!] {host.name} destroyed at tick {host.tick}")
        return 1
    print("[✓] Gotowe!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
