"""Precomputed route files: planned missions dumped to and read back from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

from ..mission import Mission


@dataclass
class RouteStep:
    name: str
    position: Sequence[float]
    yaw_deg: float = 0.0
    pitch_deg: float = 0.0
    rotation: Sequence[float] = (1.0, 0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        if len(self.position) != 3:
            raise ValueError(f"Route step '{self.name}' position must have 3 values")
        if len(self.rotation) != 4:
            raise ValueError(f"Route step '{self.name}' rotation must be a [w, x, y, z] quaternion")


@dataclass
class Route:
    name: str
    mission_type: str
    steps: List[RouteStep] = field(default_factory=list)


class RouteFormatError(RuntimeError):
    """Raised when the route YAML is invalid."""


def mission_to_route(mission: Mission, name: str = "survey") -> Route:
    steps: List[RouteStep] = []
    for grid_pass in mission.passes:
        for idx, step in enumerate(grid_pass.steps):
            steps.append(
                RouteStep(
                    name=f"{grid_pass.name}_{idx}",
                    position=list(step.position.as_tuple()),
                    yaw_deg=step.yaw_deg,
                    pitch_deg=step.pitch_deg,
                    rotation=list(step.rotation.as_tuple()),
                )
            )
    return Route(name=name, mission_type=mission.mission_type.value, steps=steps)


def route_to_dict(route: Route) -> Dict[str, Any]:
    return {
        "route": {
            "name": route.name,
            "mission_type": route.mission_type,
            "steps": [
                {
                    "name": step.name,
                    "position": [round(float(v), 4) for v in step.position],
                    "yaw_deg": round(float(step.yaw_deg), 3),
                    "pitch_deg": round(float(step.pitch_deg), 3),
                    "rotation": [round(float(v), 6) for v in step.rotation],
                }
                for step in route.steps
            ],
        }
    }


def dump_route(route: Route) -> str:
    return yaml.safe_dump(route_to_dict(route), sort_keys=False)


def load_route(path: Path) -> Route:
    data = yaml.safe_load(path.read_text())
    if not isinstance(data, dict) or "route" not in data:
        raise RouteFormatError("Route file must contain a top-level 'route' mapping")

    route_raw = data["route"]
    if not isinstance(route_raw, dict):
        raise RouteFormatError("'route' must be a mapping")

    name = str(route_raw.get("name", path.stem))
    mission_type = str(route_raw.get("mission_type", "double_grid"))

    steps_raw = route_raw.get("steps")
    if not isinstance(steps_raw, list) or not steps_raw:
        raise RouteFormatError("Route must define a non-empty 'steps' list")

    steps: List[RouteStep] = []
    for idx, step_raw in enumerate(steps_raw):
        if not isinstance(step_raw, dict):
            raise RouteFormatError(f"Route step #{idx} must be a mapping")
        step_name = str(step_raw.get("name", f"step_{idx}"))
        position = step_raw.get("position")
        if not isinstance(position, (list, tuple)):
            raise RouteFormatError(f"Route step '{step_name}' missing 'position'")
        rotation = step_raw.get("rotation", [1.0, 0.0, 0.0, 0.0])
        try:
            position = [float(v) for v in position]
            rotation = [float(v) for v in rotation]
            yaw_deg = float(step_raw.get("yaw_deg", 0.0))
            pitch_deg = float(step_raw.get("pitch_deg", 0.0))
            steps.append(RouteStep(step_name, position, yaw_deg, pitch_deg, rotation))
        except (TypeError, ValueError) as exc:
            raise RouteFormatError(f"Route step '{step_name}' has invalid values: {exc}") from exc

    return Route(name=name, mission_type=mission_type, steps=steps)


__all__ = [
    "Route",
    "RouteStep",
    "RouteFormatError",
    "mission_to_route",
    "route_to_dict",
    "dump_route",
    "load_route",
]
