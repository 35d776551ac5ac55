import pytest

from survey_planner.core.geometry import Vector3
from survey_planner.core.survey import CameraDefinition, GridPassConfig, SurveyArea


@pytest.fixture
def area() -> SurveyArea:
    return SurveyArea(
        center=Vector3(0.0, 0.0, 0.0),
        extents=Vector3(50.0, 0.0, 30.0),
        frontal_overlap=70.0,
        side_overlap=60.0,
    )


@pytest.fixture
def camera() -> CameraDefinition:
    return CameraDefinition(sensor_size_x=36.0, sensor_size_y=24.0, focal_length=50.0)


@pytest.fixture
def first_pass() -> GridPassConfig:
    return GridPassConfig(relative_altitude=50.0, camera_angle=0.0)


@pytest.fixture
def second_pass() -> GridPassConfig:
    return GridPassConfig(relative_altitude=50.0, camera_angle=30.0)


MISSION_YAML = """\
api_version: 1
mission:
  name: field_north
  type: double_grid
  survey_area:
    center: [0, 0, 0]
    extents: [50, 0, 30]
    frontal_overlap: 70
    side_overlap: 60
  camera:
    sensor_size_x: 36
    sensor_size_y: 24
    focal_length: 50
  passes:
    - relative_altitude: 50
      camera_angle: 0
    - relative_altitude: 50
      camera_angle: 30
"""


@pytest.fixture
def mission_file(tmp_path):
    path = tmp_path / "mission.yaml"
    path.write_text(MISSION_YAML)
    return path
