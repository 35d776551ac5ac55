"""Mission file parser for the v1 declarative survey mission language."""

from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass
from typing import Dict, List, Sequence

import yaml

from .bounds import SurveyBounds
from .errors import InvalidConfiguration
from .geometry import Vector3
from .mission import Mission, MissionType, plan_double_grid, plan_grid
from .survey import CameraDefinition, GridPassConfig, SurveyArea

logger = logging.getLogger(__name__)


class MissionConfigError(InvalidConfiguration):
    """Raised when the mission file is invalid."""


@dataclass
class MissionConfig:
    mission_type: MissionType
    survey_area: SurveyArea
    camera: CameraDefinition
    passes: List[GridPassConfig]
    name: str = "survey"


def load_mission_config(path: pathlib.Path) -> MissionConfig:
    path = pathlib.Path(path)
    if not path.exists():
        raise MissionConfigError(f"Mission file not found: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MissionConfigError(f"Cannot read mission file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise MissionConfigError(f"Mission file {path} is not valid YAML: {exc}") from exc
    config = parse_mission_config(data, default_name=path.stem)
    logger.debug("Loaded %s mission '%s' from %s", config.mission_type.value, config.name, path)
    return config


def parse_mission_config(data: object, default_name: str = "survey") -> MissionConfig:
    if not isinstance(data, dict):
        raise MissionConfigError("Mission file must contain a mapping")
    version = data.get("api_version")
    if version != 1:
        raise MissionConfigError("Mission 'api_version' must be 1")

    mission_raw = data.get("mission")
    if not isinstance(mission_raw, dict):
        raise MissionConfigError("Mission must define a 'mission' mapping")

    type_raw = mission_raw.get("type", MissionType.DOUBLE_GRID.value)
    try:
        mission_type = MissionType(str(type_raw).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(t.value for t in MissionType)
        raise MissionConfigError(f"Unknown mission type '{type_raw}' (expected one of: {allowed})") from exc

    area = _parse_survey_area(mission_raw.get("survey_area"))
    camera = _parse_camera(mission_raw.get("camera"))
    passes = _parse_passes(mission_raw.get("passes"))

    expected = 1 if mission_type is MissionType.GRID else 2
    if len(passes) != expected:
        raise MissionConfigError(
            f"Mission type '{mission_type.value}' requires {expected} pass(es), got {len(passes)}"
        )

    return MissionConfig(
        mission_type=mission_type,
        survey_area=area,
        camera=camera,
        passes=passes,
        name=str(mission_raw.get("name", default_name)),
    )


def build_mission(config: MissionConfig) -> Mission:
    if config.mission_type is MissionType.GRID:
        return plan_grid(config.survey_area, config.camera, config.passes[0])
    return plan_double_grid(config.survey_area, config.camera, config.passes[0], config.passes[1])


def _parse_survey_area(value: object) -> SurveyArea:
    if not isinstance(value, dict):
        raise MissionConfigError("Mission 'survey_area' must be a mapping")
    center = _coerce_vector(value, "center")
    extents = _coerce_vector(value, "extents")
    frontal = _coerce_float(value, "frontal_overlap")
    side = _coerce_float(value, "side_overlap")
    try:
        return SurveyArea(center, extents, frontal, side)
    except InvalidConfiguration as exc:
        raise MissionConfigError(f"Invalid 'survey_area': {exc}") from exc


def _parse_camera(value: object) -> CameraDefinition:
    if not isinstance(value, dict):
        raise MissionConfigError("Mission 'camera' must be a mapping")
    try:
        return CameraDefinition(
            sensor_size_x=_coerce_float(value, "sensor_size_x"),
            sensor_size_y=_coerce_float(value, "sensor_size_y"),
            focal_length=_coerce_float(value, "focal_length"),
        )
    except MissionConfigError:
        raise
    except InvalidConfiguration as exc:
        raise MissionConfigError(f"Invalid 'camera': {exc}") from exc


def _parse_passes(value: object) -> List[GridPassConfig]:
    if not isinstance(value, list) or not value:
        raise MissionConfigError("Mission must define a non-empty 'passes' list")
    passes: List[GridPassConfig] = []
    for idx, raw in enumerate(value):
        if not isinstance(raw, dict):
            raise MissionConfigError(f"Pass #{idx} must be a mapping")
        if "relative_altitude" not in raw:
            raise MissionConfigError(f"Pass #{idx} missing 'relative_altitude'")
        altitude = _coerce_float(raw, "relative_altitude", context=f"pass #{idx}")
        angle = _coerce_float(raw, "camera_angle", 0.0, context=f"pass #{idx}")
        try:
            passes.append(GridPassConfig(altitude, angle))
        except InvalidConfiguration as exc:
            raise MissionConfigError(f"Invalid pass #{idx}: {exc}") from exc
    return passes


def _coerce_float(
    container: Dict[str, object],
    key: str,
    default: float | None = None,
    *,
    context: str = "mission",
) -> float:
    if key not in container and default is None:
        raise MissionConfigError(f"Missing '{key}' in {context}")
    value = container.get(key, default)
    if isinstance(value, bool):
        raise MissionConfigError(f"Mission parameter '{key}' must be a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MissionConfigError(f"Mission parameter '{key}' must be a number") from exc


def _coerce_vector(container: Dict[str, object], key: str) -> Vector3:
    value = container.get(key)
    if isinstance(value, dict):
        value = [value.get(axis) for axis in ("x", "y", "z")]
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != 3:
        raise MissionConfigError(f"Mission parameter '{key}' must be a [x, y, z] list")
    try:
        return Vector3.from_sequence(value)
    except (TypeError, ValueError) as exc:
        raise MissionConfigError(f"Mission parameter '{key}' has invalid values") from exc


def validate_steps_in_bounds(mission: Mission, bounds: SurveyBounds) -> None:
    """Ensure every flight step stays within the provided bounds."""

    for idx, step in enumerate(mission.steps):
        x, y, z = step.position.as_tuple()
        if not bounds.x.contains(x):
            raise MissionConfigError(
                f"Flight step #{idx} x={x:.2f} exceeds bounds [{bounds.x.minimum}, {bounds.x.maximum}]"
            )
        if not bounds.y.contains(y):
            raise MissionConfigError(
                f"Flight step #{idx} y={y:.2f} exceeds bounds [{bounds.y.minimum}, {bounds.y.maximum}]"
            )
        if not bounds.z.contains(z):
            raise MissionConfigError(
                f"Flight step #{idx} z={z:.2f} exceeds bounds [{bounds.z.minimum}, {bounds.z.maximum}]"
            )


__all__ = [
    "MissionConfig",
    "MissionConfigError",
    "load_mission_config",
    "parse_mission_config",
    "build_mission",
    "validate_steps_in_bounds",
]
