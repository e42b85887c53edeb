from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Body, FastAPI
import uvicorn

from patrol_core.controller import PatrolController
from patrol_core.payload_host import ActionCommand, PayloadHost
from patrol_core.waypoints import SQUARE_ROUTE, Point, WaypointRoute, parse_point, parse_route

STATUS_LOG_EVERY = 60


class PatrolAgent:
    def __init__(
        self,
        name: str = "PatrolAgent",
        route: Optional[List[Point]] = None,
        aim_point: Tuple[float, float] = (0.0, 0.0),
    ):
        self.name = name
        self.is_destroyed = False
        self.controller = PatrolController(
            route=WaypointRoute(route if route is not None else SQUARE_ROUTE),
            aim_point=aim_point,
            name=name,
        )
        print(f"[{self.name}] online route={len(self.controller.route)} points aim={aim_point}")

    def get_action(self, current_tick: int, my_tank_status: Dict[str, Any]) -> ActionCommand:
        host = PayloadHost(my_tank_status)
        state = self.controller.step(host)

        if current_tick % STATUS_LOG_EVERY == 0:
            dist = self.controller.remaining_distance(host)
            dist_txt = f"{dist:.1f}" if dist is not None else "-"
            print(
                f"[{self.name}] tick={current_tick} state={state.name} "
                f"wp={self.controller.route.index + 1}/{len(self.controller.route)} dist={dist_txt} "
                f"heat={host.heat():.1f} legs={self.controller.legs_completed} shots={self.controller.shots_fired}"
            )

        return host.command

    def status(self) -> Dict[str, Any]:
        target_x, target_y = self.controller.route.current_target()
        return {
            "message": f"Agent {self.name} is running",
            "destroyed": self.is_destroyed,
            "state": self.controller.state.name,
            "waypoint_index": self.controller.route.index,
            "target": {"x": target_x, "y": target_y},
        }

    def destroy(self):
        self.is_destroyed = True
        print(f"[{self.name}] destroyed")

    def end(self, damage_dealt: float, tanks_killed: int):
        print(
            f"[{self.name}] end damage={damage_dealt} kills={tanks_killed} "
            f"legs={self.controller.legs_completed} shots={self.controller.shots_fired}"
        )


app = FastAPI(title="Square Patrol Agent", version="1.0.0")
agent = PatrolAgent()


@app.get("/")
async def root():
    return agent.status()


@app.post("/agent/action", response_model=ActionCommand)
async def get_action(payload: Dict[str, Any] = Body(...)):
    return agent.get_action(
        current_tick=payload.get("current_tick", 0),
        my_tank_status=payload.get("my_tank_status", {}),
    )


@app.post("/agent/destroy", status_code=204)
async def destroy():
    agent.destroy()


@app.post("/agent/end", status_code=204)
async def end(payload: Dict[str, Any] = Body(...)):
    agent.end(
        damage_dealt=payload.get("damage_dealt", 0.0),
        tanks_killed=payload.get("tanks_killed", 0),
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run square patrol tank agent")
    parser.add_argument("--host", type=str, default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8001)
    parser.add_argument("--name", type=str, default=None)
    parser.add_argument(
        "--route",
        type=parse_route,
        default=None,
        help="Patrol waypoints as 'x,y;x,y;...' (default: 100x100 square)",
    )
    parser.add_argument(
        "--aim",
        type=parse_point,
        default=(0.0, 0.0),
        help="Fixed point the turret threatens, 'x,y'",
    )
    args = parser.parse_args()

    name = args.name if args.name else f"Patrol_{args.port}"
    agent = PatrolAgent(name=name, route=args.route, aim_point=args.aim)

    print(f"Starting {agent.name} on {args.host}:{args.port}")
    uvicorn.run(
        app, host=args.host, port=args.port, log_level="warning", access_log=False
    )
