"""Oriented flight steps produced by the planners."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Quaternion, Vector3


@dataclass(frozen=True)
class FlightStep:
    position: Vector3
    rotation: Quaternion

    @property
    def yaw_deg(self) -> float:
        return self.rotation.yaw_deg()

    @property
    def pitch_deg(self) -> float:
        return self.rotation.pitch_deg()


__all__ = ["FlightStep"]
