"""Small helpers to summarise and export planned missions."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from .mission import Mission
from .steps import FlightStep


@dataclass(frozen=True)
class PassStats:
    name: str
    altitude: float
    steps: int
    lines: int
    frontal_step: float
    side_step: float
    footprint_area: float


@dataclass(frozen=True)
class MissionStats:
    mission_type: str
    steps_total: int
    path_length_m: float
    passes: tuple[PassStats, ...]

    def rows(self) -> list[tuple[str, object]]:
        rows: list[tuple[str, object]] = [
            ("mission_type", self.mission_type),
            ("steps_total", self.steps_total),
            ("path_length_m", f"{self.path_length_m:.2f}"),
        ]
        for stats in self.passes:
            rows.extend(
                [
                    (f"{stats.name}.altitude", f"{stats.altitude:.2f}"),
                    (f"{stats.name}.steps", stats.steps),
                    (f"{stats.name}.lines", stats.lines),
                    (f"{stats.name}.frontal_step", f"{stats.frontal_step:.3f}"),
                    (f"{stats.name}.side_step", f"{stats.side_step:.3f}"),
                    (f"{stats.name}.footprint_area", f"{stats.footprint_area:.2f}"),
                ]
            )
        return rows


def path_length(steps: Sequence[FlightStep]) -> float:
    """Total distance (m) flown visiting ``steps`` in order."""

    return sum((b.position - a.position).length() for a, b in zip(steps, steps[1:]))


def mission_stats(mission: Mission) -> MissionStats:
    passes = tuple(
        PassStats(
            name=grid_pass.name,
            altitude=grid_pass.altitude,
            steps=len(grid_pass.steps),
            lines=grid_pass.line_count,
            frontal_step=grid_pass.frontal_step,
            side_step=grid_pass.side_step,
            footprint_area=mission.camera.footprint(grid_pass.altitude).area,
        )
        for grid_pass in mission.passes
    )
    return MissionStats(
        mission_type=mission.mission_type.value,
        steps_total=len(mission),
        path_length_m=path_length(mission.steps),
        passes=passes,
    )


def _timestamped(directory: Path, stem: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return directory / f"{stem}_{timestamp}.csv"


def export_csv(rows: list[tuple[str, object]], directory: Path, stem: str) -> Path:
    output = _timestamped(directory, stem)
    with output.open("w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(["metric", "value"])
        for key, value in rows:
            writer.writerow([key, value])
    return output


def write_flight_steps(mission: Mission, stream) -> None:
    writer = csv.writer(stream)
    writer.writerow(["index", "pass", "x", "y", "z", "qw", "qx", "qy", "qz", "yaw_deg", "pitch_deg"])
    idx = 0
    for grid_pass in mission.passes:
        for step in grid_pass.steps:
            writer.writerow(
                [
                    idx,
                    grid_pass.name,
                    *(f"{v:.4f}" for v in step.position.as_tuple()),
                    *(f"{v:.6f}" for v in step.rotation.as_tuple()),
                    f"{step.yaw_deg:.2f}",
                    f"{step.pitch_deg:.2f}",
                ]
            )
            idx += 1


def export_flight_steps_csv(mission: Mission, directory: Path, stem: str) -> Path | None:
    if len(mission) == 0:
        return None
    output = _timestamped(directory, stem)
    with output.open("w", newline="") as csvfile:
        write_flight_steps(mission, csvfile)
    return output


__all__ = [
    "PassStats",
    "MissionStats",
    "path_length",
    "mission_stats",
    "export_csv",
    "write_flight_steps",
    "export_flight_steps_csv",
]
