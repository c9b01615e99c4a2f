from __future__ import annotations

import logging
from typing import Optional, Tuple

from fixed_beam.domain.inputs import BeamInput, STANDARD
from fixed_beam.domain.results import CalculationResult
from fixed_beam.engine.deflection import base_span, deflection_profile, max_deflection
from fixed_beam.sections.rect_section import RectSection
from fixed_beam.sections.section_db import SectionDB, default_section_db

logger = logging.getLogger(__name__)

ERR_LOAD_SPAN = "Load and span length must be greater than zero"
ERR_MODULUS = "Modulus of elasticity must be greater than zero"
ERR_SECTION_NOT_SELECTED = "Standard section must be selected"
ERR_SECTION_NOT_FOUND = "Standard section not found"
ERR_DIMS_REQUIRED = "Width and height are required for custom beams"
ERR_DIMS_POSITIVE = "Width and height must be greater than zero"


def bending_moment(load: float, span_length: float) -> float:
    """M = P*L/8 (biempotrada, carga puntual al centro)."""
    return float(load) * float(span_length) / 8.0


def bending_stress(moment: float, c: float, moment_of_inertia: float) -> float:
    """σ = M*c/I. Con I == 0 devuelve 0."""
    if moment_of_inertia == 0:
        return 0.0
    return float(moment) * float(c) / float(moment_of_inertia)


def _is_positive(v: Optional[float]) -> bool:
    return v is not None and v > 0


def resolve_section(inp: BeamInput, db: SectionDB) -> Tuple[Optional[Tuple[float, float]], Optional[str]]:
    """
    Devuelve ((I, c), None) o (None, mensaje_error).

    - standard: I y c de la tabla del sistema de unidades
    - custom: I explícita (>0) o b*h^3/12; c = h/2
    """
    if inp.beam_type == STANDARD:
        if not inp.standard_section:
            return None, ERR_SECTION_NOT_SELECTED
        sec = db.get(inp.standard_section, inp.units)
        if sec is None:
            return None, ERR_SECTION_NOT_FOUND
        return (float(sec.moment_of_inertia), float(sec.c)), None

    # custom: None o 0 => "requeridos"
    if not inp.width or not inp.height:
        return None, ERR_DIMS_REQUIRED
    if not (inp.width > 0 and inp.height > 0):
        return None, ERR_DIMS_POSITIVE

    rect = RectSection(width=inp.width, height=inp.height, I_override=inp.moment_of_inertia)
    return (rect.I, rect.c), None


def compute(inp: BeamInput, *, db: Optional[SectionDB] = None) -> CalculationResult:
    """
    Cálculo completo para viga biempotrada con carga puntual al centro.

    Nunca lanza excepción por datos del usuario: si algo falla la validación
    devuelve is_valid=False con el mensaje en `error` y todo en cero.
    El orden de validación importa (gana el primer error):
      1) carga y vano > 0
      2) E > 0
      3) sección (perfil estándar o dimensiones custom)
    """
    if not (_is_positive(inp.load) and _is_positive(inp.span_length)):
        logger.debug("Entrada inválida: %s", ERR_LOAD_SPAN)
        return CalculationResult.invalid(inp.units, ERR_LOAD_SPAN)

    if not _is_positive(inp.modulus_of_elasticity):
        logger.debug("Entrada inválida: %s", ERR_MODULUS)
        return CalculationResult.invalid(inp.units, ERR_MODULUS)

    props, err = resolve_section(inp, db if db is not None else default_section_db())
    if err is not None:
        logger.debug("Entrada inválida: %s", err)
        return CalculationResult.invalid(inp.units, err)
    I, c = props

    M = bending_moment(inp.load, inp.span_length)
    sigma = bending_stress(M, c, I)

    L = base_span(inp.span_length, inp.units)
    E = float(inp.modulus_of_elasticity)

    return CalculationResult(
        units=inp.units,
        is_valid=True,
        bending_moment=M,
        bending_stress=sigma,
        max_bending_stress=abs(sigma),
        max_deflection=max_deflection(inp.load, L, E, I),
        deflection_points=deflection_profile(inp.load, L, E, I),
        moment_of_inertia=I,
        c=c,
    )
