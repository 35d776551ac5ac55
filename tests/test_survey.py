import math

import pytest

from survey_planner.core.errors import InvalidConfiguration
from survey_planner.core.geometry import Vector3
from survey_planner.core.survey import CameraDefinition, GridPassConfig, SurveyArea, step_pitch


def test_footprint_and_step_pitch(area, camera):
    footprint = camera.footprint(50.0)
    assert footprint.width == pytest.approx(36.0)
    assert footprint.height == pytest.approx(24.0)

    pitch = step_pitch(area, camera, 50.0)
    assert pitch.frontal == pytest.approx(7.2)
    assert pitch.side == pytest.approx(14.4)


def test_area_corners_and_floor():
    area = SurveyArea(Vector3(10.0, 4.0, -2.0), Vector3(5.0, 1.0, 3.0), 0.0, 0.0)
    assert area.bottom_left == (5.0, -5.0)
    assert area.top_right == (15.0, 1.0)
    assert area.floor == 3.0


def test_bounds_ceiling_includes_flight_altitude(area):
    bounds = area.bounds(ceiling=50.0)
    assert bounds.y.minimum == 0.0
    assert bounds.y.maximum == 50.0
    assert bounds.contains(Vector3(-50.0, 50.0, 30.0))
    assert not bounds.contains(Vector3(-50.1, 50.0, 30.0))


@pytest.mark.parametrize("overlap", [100.0, 120.0, -1.0, math.nan])
def test_overlap_outside_range_is_rejected(overlap):
    with pytest.raises(InvalidConfiguration):
        SurveyArea(Vector3(), Vector3(1.0, 0.0, 1.0), overlap, 50.0)
    with pytest.raises(InvalidConfiguration):
        SurveyArea(Vector3(), Vector3(1.0, 0.0, 1.0), 50.0, overlap)


def test_negative_extent_is_rejected():
    with pytest.raises(InvalidConfiguration, match="Z"):
        SurveyArea(Vector3(), Vector3(1.0, 0.0, -1.0), 50.0, 50.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"sensor_size_x": 0.0, "sensor_size_y": 24.0, "focal_length": 50.0},
        {"sensor_size_x": 36.0, "sensor_size_y": -24.0, "focal_length": 50.0},
        {"sensor_size_x": 36.0, "sensor_size_y": 24.0, "focal_length": 0.0},
        {"sensor_size_x": math.inf, "sensor_size_y": 24.0, "focal_length": 50.0},
    ],
)
def test_camera_requires_positive_intrinsics(kwargs):
    with pytest.raises(InvalidConfiguration):
        CameraDefinition(**kwargs)


def test_non_positive_altitude_fails_before_planning(area, camera):
    with pytest.raises(InvalidConfiguration, match="footprint"):
        step_pitch(area, camera, 0.0)
    with pytest.raises(InvalidConfiguration):
        step_pitch(area, camera, -10.0)


def test_pass_config_requires_finite_values():
    with pytest.raises(InvalidConfiguration):
        GridPassConfig(math.nan, 0.0)
    assert GridPassConfig(10.0).camera_angle == 0.0
