from __future__ import annotations

from typing import Tuple

import numpy as np

from fixed_beam.domain.inputs import IMPERIAL
from fixed_beam.domain.results import DeflectionPoint

SEGMENT_COUNT = 40
FT_TO_IN = 12.0


def _all_positive(*values: float) -> bool:
    # NaN también cae acá (NaN > 0 es False)
    return all(v is not None and v > 0 for v in values)


def base_span(span_length: float, units: str) -> float:
    """
    Longitud de cálculo para la elástica:
      - imperial: el vano viene en ft, pero E [psi] e I [in^4] piden in => x12
      - metric: ya está en m
    """
    if units == IMPERIAL:
        return float(span_length) * FT_TO_IN
    return float(span_length)


def max_deflection(load: float, span: float, E: float, I: float) -> float:
    """Flecha máxima (centro del vano) de viga biempotrada con P al centro: P*L^3 / (192*E*I)."""
    if not _all_positive(load, span, E, I):
        return 0.0
    return float(load) * float(span) ** 3 / (192.0 * float(E) * float(I))


def sample_deflection(
    load: float,
    span: float,
    E: float,
    I: float,
    *,
    n_segments: int = SEGMENT_COUNT,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Devuelve (posiciones x/L, deflexiones) en n_segments+1 puntos equiespaciados.

    Forma simétrica respecto del centro:
      x_loc = x        si x <= L/2
      x_loc = L - x    si x >  L/2
      δ(x)  = P * x_loc * (3L²/4 - x_loc²) / (48*E*I)

    Datos degenerados (P, L, E o I <= 0) => perfil nulo.
    """
    pos = np.arange(n_segments + 1, dtype=float) / float(n_segments)

    if not _all_positive(load, span, E, I):
        return pos, np.zeros_like(pos)

    L = float(span)
    x = pos * L
    x_loc = np.where(x <= 0.5 * L, x, L - x)
    d = float(load) * x_loc * (0.75 * L * L - x_loc * x_loc) / (48.0 * float(E) * float(I))
    return pos, d


def deflection_profile(
    load: float,
    span: float,
    E: float,
    I: float,
    *,
    n_segments: int = SEGMENT_COUNT,
) -> Tuple[DeflectionPoint, ...]:
    pos, d = sample_deflection(load, span, E, I, n_segments=n_segments)
    return tuple(
        DeflectionPoint(position=float(p), deflection=float(v))
        for p, v in zip(pos.tolist(), d.tolist())
    )
