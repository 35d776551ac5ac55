import logging

import pytest

from survey_planner.core.bounds import AxisBounds, PlanarBounds
from survey_planner.core.errors import DegenerateArea, InvalidConfiguration
from survey_planner.core.geometry import Quaternion, Vector3
from survey_planner.core.planning.coverage_planner import (
    AXIS_X,
    AXIS_Z,
    FIRST_GRID,
    SECOND_GRID,
    plan_grid_pass,
    serpentine_scan,
    waypoints_to_flight_steps,
)
from survey_planner.core.survey import GridPassConfig, SurveyArea


def _bounds(x_min, x_max, z_min, z_max) -> PlanarBounds:
    return PlanarBounds(AxisBounds(x_min, x_max), AxisBounds(z_min, z_max))


def test_serpentine_scan_reverses_each_line():
    lines = serpentine_scan(_bounds(0, 2, 0, 2), (0.0, 0.0), AXIS_Z, 1.0, 1.0)
    assert lines == [
        [(0.0, 0.0), (0.0, 1.0), (0.0, 2.0)],
        [(1.0, 2.0), (1.0, 1.0), (1.0, 0.0)],
        [(2.0, 0.0), (2.0, 1.0), (2.0, 2.0)],
    ]


def test_serpentine_scan_along_x_from_top_right():
    lines = serpentine_scan(_bounds(0, 2, 0, 1), (2.0, 1.0), AXIS_X, 1.0, 1.0, -1, -1)
    assert lines == [
        [(2.0, 1.0), (1.0, 1.0), (0.0, 1.0)],
        [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)],
    ]


def test_serpentine_scan_keeps_boundary_point_despite_float_drift():
    lines = serpentine_scan(_bounds(0, 0, 0, 1), (0.0, 0.0), AXIS_Z, 0.1, 1.0)
    assert len(lines) == 1
    assert len(lines[0]) == 11
    assert lines[0][-1][1] == pytest.approx(1.0)


def test_serpentine_scan_rejects_non_positive_steps():
    with pytest.raises(ValueError):
        serpentine_scan(_bounds(0, 1, 0, 1), (0.0, 0.0), AXIS_Z, 0.0, 1.0)


def test_first_pass_reference_scenario(area, camera, first_pass):
    grid = plan_grid_pass("first_grid", area, camera, first_pass, FIRST_GRID)

    assert grid.altitude == pytest.approx(50.0)
    assert grid.frontal_step == pytest.approx(7.2)
    assert grid.side_step == pytest.approx(14.4)
    assert grid.waypoints[0] == Vector3(-50.0, 50.0, -30.0)
    assert grid.line_count == 7
    assert len(grid.waypoints) == 7 * 9

    xs = sorted({round(w.x, 6) for w in grid.waypoints})
    assert len(xs) == 7
    assert xs[1] - xs[0] == pytest.approx(14.4)


def test_first_pass_lines_alternate_direction(area, camera, first_pass):
    grid = plan_grid_pass("first_grid", area, camera, first_pass, FIRST_GRID)
    lines = [grid.waypoints[i : i + 9] for i in range(0, len(grid.waypoints), 9)]
    for idx, line in enumerate(lines):
        assert len({round(w.x, 6) for w in line}) == 1
        delta = line[1].z - line[0].z
        expected_sign = 1 if idx % 2 == 0 else -1
        assert delta == pytest.approx(7.2 * expected_sign)


def test_second_pass_runs_along_x_from_top_right(area, camera, second_pass):
    grid = plan_grid_pass("second_grid", area, camera, second_pass, SECOND_GRID)
    assert grid.waypoints[0] == Vector3(50.0, 50.0, 30.0)
    assert grid.waypoints[1].x == pytest.approx(50.0 - 7.2)
    assert grid.waypoints[1].z == pytest.approx(30.0)
    # 14 points per line along X (100 / 7.2), 5 lines stepped 14.4 along Z (60 / 14.4)
    assert grid.line_count == 5
    assert len(grid.waypoints) == 5 * 14


@pytest.mark.parametrize("pattern", [FIRST_GRID, SECOND_GRID])
@pytest.mark.parametrize(
    "center",
    [Vector3(0.0, 0.0, 0.0), Vector3(1234.5, 10.0, -987.25), Vector3(-3.2e5, 0.0, 5e6)],
)
def test_every_waypoint_inside_area_at_altitude(camera, first_pass, pattern, center):
    area = SurveyArea(center, Vector3(50.0, 0.0, 30.0), 70.0, 60.0)
    grid = plan_grid_pass("pass", area, camera, first_pass, pattern)
    (x_min, z_min), (x_max, z_max) = area.bottom_left, area.top_right
    slack = 1e-6
    assert grid.steps
    for step in grid.steps:
        assert x_min - slack <= step.position.x <= x_max + slack
        assert z_min - slack <= step.position.z <= z_max + slack
        assert step.position.y == pytest.approx(center.y + 50.0)


def test_far_from_origin_keeps_reference_line_length(camera, first_pass):
    area = SurveyArea(Vector3(0.0, 0.0, 5e6), Vector3(50.0, 0.0, 30.0), 70.0, 60.0)
    grid = plan_grid_pass("first_grid", area, camera, first_pass, FIRST_GRID)
    assert grid.line_count == 7
    assert len(grid.waypoints) == 7 * 9


def test_step_below_coordinate_resolution_is_rejected(camera, first_pass):
    area = SurveyArea(Vector3(0.0, 0.0, 1e17), Vector3(50.0, 0.0, 30.0), 70.0, 60.0)
    with pytest.raises(InvalidConfiguration, match="resolution"):
        plan_grid_pass("first_grid", area, camera, first_pass, FIRST_GRID)


def test_serpentine_scan_rejects_step_that_cannot_advance():
    with pytest.raises(ValueError, match="does not advance"):
        serpentine_scan(_bounds(0, 1, 1e17, 1e17 + 64), (0.0, 1e17), AXIS_Z, 7.2, 1.0)


def test_last_step_keeps_previous_orientation(area, camera, second_pass):
    grid = plan_grid_pass("second_grid", area, camera, second_pass, SECOND_GRID)
    assert grid.steps[-1].rotation == grid.steps[-2].rotation
    assert grid.steps[-1].position == grid.waypoints[-1]


def test_steps_look_toward_next_waypoint(area, camera, first_pass):
    grid = plan_grid_pass("first_grid", area, camera, first_pass, FIRST_GRID)
    assert grid.steps[0].yaw_deg == pytest.approx(0.0, abs=1e-9)
    # end of first line: turn toward +X to reach the next line
    assert grid.steps[8].yaw_deg == pytest.approx(90.0)
    # second line flies back toward -Z
    assert abs(grid.steps[9].yaw_deg) == pytest.approx(180.0)


def test_waypoints_to_flight_steps_handles_single_waypoint():
    steps = waypoints_to_flight_steps([Vector3(1.0, 2.0, 3.0)], 30.0)
    assert len(steps) == 1
    assert steps[0].pitch_deg == pytest.approx(30.0)


def test_waypoints_to_flight_steps_empty():
    assert waypoints_to_flight_steps([], 10.0) == []


def test_two_waypoints_share_orientation():
    steps = waypoints_to_flight_steps([Vector3(0, 5, 0), Vector3(0, 5, 10)], 0.0)
    assert steps[0].rotation == steps[1].rotation == Quaternion.identity()


def test_degenerate_area_collapses_to_single_point(camera, first_pass, caplog):
    point_area = SurveyArea(Vector3(5.0, 0.0, 5.0), Vector3(0.0, 0.0, 0.0), 70.0, 60.0)
    with caplog.at_level(logging.WARNING):
        grid = plan_grid_pass("first_grid", point_area, camera, first_pass, FIRST_GRID)
    assert grid.waypoints == (Vector3(5.0, 50.0, 5.0),)
    assert len(grid.steps) == 1
    assert set(grid.notices) == {DegenerateArea("first_grid", "x"), DegenerateArea("first_grid", "z")}
    assert "zero extent" in caplog.text


def test_degenerate_minor_axis_gives_single_line(camera, first_pass):
    line_area = SurveyArea(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 30.0), 70.0, 60.0)
    grid = plan_grid_pass("first_grid", line_area, camera, first_pass, FIRST_GRID)
    assert grid.line_count == 1
    assert len(grid.waypoints) == 9
    assert grid.notices == (DegenerateArea("first_grid", "x"),)


def test_altitude_is_relative_to_area_floor(camera):
    raised = SurveyArea(Vector3(0.0, 20.0, 0.0), Vector3(10.0, 5.0, 10.0), 50.0, 50.0)
    grid = plan_grid_pass("first_grid", raised, camera, GridPassConfig(10.0), FIRST_GRID)
    assert grid.altitude == pytest.approx(25.0)
    assert all(w.y == pytest.approx(25.0) for w in grid.waypoints)
