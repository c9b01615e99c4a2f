from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from fixed_beam.domain.inputs import BeamInput, default_input
from fixed_beam.domain.results import CalculationResult
from fixed_beam.engine.stress import compute
from fixed_beam.engine.units import convert_input

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """
    Único estado mutable de la app: el input actual.
    Cada edición reemplaza el BeamInput completo y recalcula en el momento.
    """
    input: BeamInput = field(default_factory=default_input)
    result: Optional[CalculationResult] = None

    def __post_init__(self):
        self.recompute()

    def recompute(self) -> Optional[CalculationResult]:
        # Sin carga o sin vano no se muestra nada (ni siquiera el error)
        if self.input.load > 0 and self.input.span_length > 0:
            self.result = compute(self.input)
        else:
            self.result = None
        return self.result

    def update(self, **changes: Any) -> Optional[CalculationResult]:
        if "units" in changes:
            raise ValueError("Use set_units() to change the unit system")
        self.input = replace(self.input, **changes)
        return self.recompute()

    def set_units(self, units: str) -> Optional[CalculationResult]:
        if units != self.input.units:
            logger.info("Cambio de unidades: %s -> %s", self.input.units, units)
            self.input = convert_input(self.input, units)
        return self.recompute()
