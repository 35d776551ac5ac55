"""Command line entry point to plan survey missions from YAML files.

Reads a v1 mission file, runs the grid planner and emits the resulting flight
steps (JSON, CSV or a precomputed route YAML) or a summary of the plan, so
shell scripts and the simulation host can consume missions without importing
the planner.
"""
from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .core.errors import InvalidConfiguration
from .core.kpi import export_csv, mission_stats, write_flight_steps
from .core.mission import Mission
from .core.plan import build_mission, load_mission_config, validate_steps_in_bounds
from .core.planning.precomputed_routes import dump_route, mission_to_route

logger = logging.getLogger("survey_planner")

EXIT_OK = 0
EXIT_INVALID = 2


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------

def mission_to_dict(mission: Mission) -> Dict[str, Any]:
    return {
        "mission_type": mission.mission_type.value,
        "notices": [str(notice) for notice in mission.notices],
        "passes": [
            {
                "name": grid_pass.name,
                "altitude": grid_pass.altitude,
                "camera_angle": grid_pass.camera_angle,
                "frontal_step": grid_pass.frontal_step,
                "side_step": grid_pass.side_step,
                "lines": grid_pass.line_count,
                "steps": [
                    {
                        "position": list(step.position.as_tuple()),
                        "rotation": list(step.rotation.as_tuple()),
                    }
                    for step in grid_pass.steps
                ],
            }
            for grid_pass in mission.passes
        ],
    }


def render_plan(mission: Mission, fmt: str, name: str) -> str:
    if fmt == "json":
        return json.dumps(mission_to_dict(mission), indent=2)
    if fmt == "csv":
        buffer = io.StringIO()
        write_flight_steps(mission, buffer)
        return buffer.getvalue()
    if fmt == "yaml":
        return dump_route(mission_to_route(mission, name=name))
    raise ValueError(f"Unsupported format: {fmt}")


def render_stats(mission: Mission, fmt: str) -> str:
    rows = mission_stats(mission).rows()
    if fmt == "json":
        return json.dumps(dict(rows), indent=2)
    return "\n".join(f"{key}: {value}" for key, value in rows)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plan grid survey missions from a mission YAML")
    parser.add_argument("--file", required=True, help="Path to mission YAML")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan = subparsers.add_parser("plan", help="Emit the planned flight steps")
    plan.add_argument("--format", choices=["json", "csv", "yaml"], default="json")
    plan.add_argument("--output", help="Write to this file instead of stdout")
    plan.add_argument(
        "--check-bounds",
        action="store_true",
        help="Fail if a flight step leaves the survey area footprint",
    )

    stats = subparsers.add_parser("stats", help="Summarise the planned mission")
    stats.add_argument("--format", choices=["text", "json"], default="text")
    stats.add_argument("--csv-dir", help="Also export the summary as a timestamped CSV in this directory")

    return parser


def main(argv: List[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    path = Path(args.file)

    try:
        config = load_mission_config(path)
        mission = build_mission(config)
        if args.command == "plan" and args.check_bounds:
            ceiling = max(grid_pass.altitude for grid_pass in mission.passes)
            validate_steps_in_bounds(mission, config.survey_area.bounds(ceiling=ceiling))
    except InvalidConfiguration as exc:
        logger.error("Mission plan error: %s", exc)
        return EXIT_INVALID

    if args.command == "plan":
        text = render_plan(mission, args.format, config.name)
        if args.output:
            Path(args.output).write_text(text)
            logger.info("Wrote %d flight steps to %s", len(mission), args.output)
        else:
            print(text)
        return EXIT_OK

    if args.command == "stats":
        print(render_stats(mission, args.format))
        if args.csv_dir:
            output = export_csv(mission_stats(mission).rows(), Path(args.csv_dir), config.name)
            logger.info("Exported mission stats to %s", output)
        return EXIT_OK

    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
