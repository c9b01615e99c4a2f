from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


def moment_of_inertia_rectangular(width: float, height: float) -> float:
    """Ix de un rectángulo b (ancho) x h (alto), respecto a su centroide: b*h^3/12."""
    return (float(width) * float(height) ** 3) / 12.0


def outer_fiber_distance(height: float) -> float:
    """c = h/2 (fibra extrema de una sección simétrica)."""
    return float(height) / 2.0


@dataclass(frozen=True)
class RectSection:
    """
    Sección rectangular maciza b x h.
    Si `I_override` es > 0 se usa en lugar de b*h^3/12 (c sigue siendo h/2).
    """
    width: float
    height: float
    I_override: Optional[float] = None

    @property
    def I(self) -> float:
        if self.I_override and self.I_override > 0:
            return float(self.I_override)
        return moment_of_inertia_rectangular(self.width, self.height)

    @property
    def c(self) -> float:
        return outer_fiber_distance(self.height)

    def props(self) -> Dict[str, float]:
        I = self.I
        c = self.c
        return {
            "I": I,
            "c": c,
            "S": I / c if c > 0 else 0.0,
        }
