from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class DeflectionPoint:
    position: float    # x/L en [0, 1]
    deflection: float  # + hacia abajo (m o in)


@dataclass(frozen=True)
class CalculationResult:
    units: str
    is_valid: bool

    bending_moment: float = 0.0      # N·m o lb·ft
    bending_stress: float = 0.0      # Pa o psi
    max_bending_stress: float = 0.0

    max_deflection: float = 0.0      # m o in
    deflection_points: Tuple[DeflectionPoint, ...] = ()

    # propiedades usadas (para mostrar / memoria)
    moment_of_inertia: float = 0.0
    c: float = 0.0

    error: Optional[str] = None

    @classmethod
    def invalid(cls, units: str, error: str) -> "CalculationResult":
        return cls(units=units, is_valid=False, error=error)
