from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

METRIC = "metric"
IMPERIAL = "imperial"
UNIT_SYSTEMS = (METRIC, IMPERIAL)

CUSTOM = "custom"
STANDARD = "standard"
BEAM_TYPES = (CUSTOM, STANDARD)

# 200 GPa (acero)
DEFAULT_MODULUS_METRIC = 200_000_000_000.0


@dataclass(frozen=True)
class BeamInput:
    """
    Datos de una viga biempotrada con carga puntual al centro.

    Unidades según `units`:
      - metric:   load [N], span_length [m], width/height [m], I [m^4], E [Pa]
      - imperial: load [lb], span_length [ft], width/height [in], I [in^4], E [psi]

    No se convierte nada acá: los valores ya están en el sistema indicado.
    """
    load: float
    span_length: float
    modulus_of_elasticity: float
    beam_type: str = CUSTOM            # "custom" | "standard"
    units: str = METRIC                # "metric" | "imperial"

    # Viga custom (sección rectangular)
    width: Optional[float] = None
    height: Optional[float] = None
    moment_of_inertia: Optional[float] = None  # si >0, reemplaza b*h^3/12

    # Perfil estándar
    standard_section: str = ""

    @property
    def is_standard(self) -> bool:
        return self.beam_type == STANDARD


def default_input() -> BeamInput:
    """Estado inicial del formulario: todo en cero, acero, métrico."""
    return BeamInput(
        load=0.0,
        span_length=0.0,
        modulus_of_elasticity=DEFAULT_MODULUS_METRIC,
        beam_type=CUSTOM,
        units=METRIC,
        width=0.0,
        height=0.0,
        standard_section="",
    )
