"""Planning utilities for survey flight paths."""

from .coverage_planner import (
    FIRST_GRID,
    SECOND_GRID,
    GridPass,
    ScanPattern,
    plan_grid_pass,
    serpentine_scan,
    waypoints_to_flight_steps,
)

__all__ = [
    "FIRST_GRID",
    "SECOND_GRID",
    "GridPass",
    "ScanPattern",
    "plan_grid_pass",
    "serpentine_scan",
    "waypoints_to_flight_steps",
]
