import csv
import io
import json

import yaml

from survey_planner.cli import EXIT_INVALID, EXIT_OK, main


def test_plan_json(mission_file, capsys):
    assert main(["--file", str(mission_file), "plan"]) == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["mission_type"] == "double_grid"
    assert [p["lines"] for p in payload["passes"]] == [7, 5]
    assert payload["passes"][0]["steps"][0]["position"] == [-50.0, 50.0, -30.0]


def test_plan_csv_to_file(mission_file, tmp_path):
    output = tmp_path / "steps.csv"
    assert main(["--file", str(mission_file), "plan", "--format", "csv", "--output", str(output)]) == EXIT_OK
    rows = list(csv.DictReader(io.StringIO(output.read_text())))
    assert len(rows) == 133


def test_plan_yaml_route(mission_file, capsys):
    assert main(["--file", str(mission_file), "plan", "--format", "yaml", "--check-bounds"]) == EXIT_OK
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["route"]["name"] == "field_north"
    assert len(data["route"]["steps"]) == 133


def test_stats_json_and_csv_export(mission_file, tmp_path, capsys):
    assert main(["--file", str(mission_file), "stats", "--format", "json", "--csv-dir", str(tmp_path)]) == EXIT_OK
    stats = json.loads(capsys.readouterr().out)
    assert stats["steps_total"] == 133
    assert list(tmp_path.glob("field_north_*.csv"))


def test_invalid_mission_returns_error_code(tmp_path, caplog):
    path = tmp_path / "bad.yaml"
    path.write_text(
        "api_version: 1\n"
        "mission:\n"
        "  survey_area: {center: [0, 0, 0], extents: [1, 0, 1], frontal_overlap: 100, side_overlap: 0}\n"
        "  camera: {sensor_size_x: 36, sensor_size_y: 24, focal_length: 50}\n"
        "  passes: [{relative_altitude: 10}, {relative_altitude: 10}]\n"
    )
    assert main(["--file", str(path), "stats"]) == EXIT_INVALID
    assert "frontal_overlap" in caplog.text


def test_unreadable_mission_returns_error_code(tmp_path, caplog):
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"\xff\xfe\x00")
    assert main(["--file", str(path), "plan"]) == EXIT_INVALID
    assert main(["--file", str(tmp_path), "stats"]) == EXIT_INVALID
    assert "Cannot read" in caplog.text
