"""Core survey planning logic (engine-agnostic)."""

from .bounds import AxisBounds, PlanarBounds, SurveyBounds
from .errors import DegenerateArea, InvalidConfiguration
from .geometry import Quaternion, Vector3, approximately
from .mission import DoubleGridMission, Mission, MissionType, plan_double_grid, plan_grid
from .plan import (
    MissionConfig,
    MissionConfigError,
    build_mission,
    load_mission_config,
    validate_steps_in_bounds,
)
from .steps import FlightStep
from .survey import CameraDefinition, GridPassConfig, ImageFootprint, SurveyArea

__all__ = [
    "AxisBounds",
    "PlanarBounds",
    "SurveyBounds",
    "DegenerateArea",
    "InvalidConfiguration",
    "Quaternion",
    "Vector3",
    "approximately",
    "DoubleGridMission",
    "Mission",
    "MissionType",
    "plan_double_grid",
    "plan_grid",
    "MissionConfig",
    "MissionConfigError",
    "build_mission",
    "load_mission_config",
    "validate_steps_in_bounds",
    "FlightStep",
    "CameraDefinition",
    "GridPassConfig",
    "ImageFootprint",
    "SurveyArea",
]
