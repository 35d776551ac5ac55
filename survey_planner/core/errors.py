"""Errors and notices raised while planning survey missions."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidConfiguration(ValueError):
    """Raised when survey, camera or pass parameters cannot produce a finite plan."""


@dataclass(frozen=True)
class DegenerateArea:
    """Non-fatal notice: the survey area has no extent along a scanned axis."""

    pass_name: str
    axis: str

    def __str__(self) -> str:
        return f"{self.pass_name}: survey area has zero extent along {self.axis.upper()}"


__all__ = ["InvalidConfiguration", "DegenerateArea"]
