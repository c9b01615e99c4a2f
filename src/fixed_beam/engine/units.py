from __future__ import annotations

from dataclasses import replace
from typing import Optional

from fixed_beam.domain.inputs import BeamInput, IMPERIAL, METRIC, UNIT_SYSTEMS

M_TO_FT = 3.28084        # 1 m = 3.28084 ft
N_TO_LB = 0.224809       # 1 N = 0.224809 lb
PA_TO_PSI = 0.000145038  # 1 Pa = 0.000145038 psi


def _scale(v: Optional[float], factor: float, to_imperial: bool) -> Optional[float]:
    if v is None:
        return None
    return float(v) * factor if to_imperial else float(v) / factor


def convert_input(inp: BeamInput, new_units: str) -> BeamInput:
    """
    Reescala todos los campos al cambiar de sistema de unidades (toggle de la UI).

    Se multiplica al ir a imperial y se divide al volver, así la ida y vuelta
    recupera el valor original. El nombre del perfil estándar se conserva
    (ambas tablas tienen los mismos nombres).
    """
    if new_units not in UNIT_SYSTEMS:
        raise ValueError(f"Unknown unit system: {new_units!r}")
    if new_units == inp.units:
        return inp

    to_imp = new_units == IMPERIAL
    return replace(
        inp,
        units=new_units,
        load=_scale(inp.load, N_TO_LB, to_imp),
        span_length=_scale(inp.span_length, M_TO_FT, to_imp),
        width=_scale(inp.width, M_TO_FT, to_imp),
        height=_scale(inp.height, M_TO_FT, to_imp),
        moment_of_inertia=_scale(inp.moment_of_inertia, M_TO_FT ** 4, to_imp),
        modulus_of_elasticity=_scale(inp.modulus_of_elasticity, PA_TO_PSI, to_imp),
    )


def to_metric(inp: BeamInput) -> BeamInput:
    return convert_input(inp, METRIC)


def to_imperial(inp: BeamInput) -> BeamInput:
    return convert_input(inp, IMPERIAL)
