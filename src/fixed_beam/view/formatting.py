from __future__ import annotations

from fixed_beam.domain.inputs import METRIC


def format_stress(stress: float, units: str) -> str:
    """Pa/kPa/MPa (métrico) o psi/ksi/Mpsi (imperial), cortes en 1e3 y 1e6."""
    base, kilo, mega = ("Pa", "kPa", "MPa") if units == METRIC else ("psi", "ksi", "Mpsi")
    s = float(stress)
    if abs(s) >= 1e6:
        return f"{s / 1e6:.2f} {mega}"
    if abs(s) >= 1e3:
        return f"{s / 1e3:.2f} {kilo}"
    return f"{s:.2f} {base}"


def format_moment(moment: float, units: str) -> str:
    unit = "N·m" if units == METRIC else "lb·ft"
    return f"{float(moment):.2f} {unit}"


def format_deflection(deflection: float, units: str) -> str:
    """
    Métrico: m (>=1), mm (>=1e-3), si no µm.
    Imperial: in (>=0.01), si no mils (milésimas de pulgada).
    """
    d = float(deflection)
    a = abs(d)
    if units == METRIC:
        if a >= 1.0:
            return f"{d:.3f} m"
        if a >= 1e-3:
            return f"{d * 1e3:.2f} mm"
        return f"{d * 1e6:.2f} µm"

    if a >= 0.01:
        return f"{d:.3f} in"
    return f"{d * 1e3:.2f} mils"


# -------------------------
# Etiquetas de unidades
# -------------------------
def length_unit(units: str) -> str:
    """Unidad del vano."""
    return "m" if units == METRIC else "ft"


def section_length_unit(units: str) -> str:
    """Unidad de dimensiones de sección (b, h, c)."""
    return "m" if units == METRIC else "in"


def inertia_unit(units: str) -> str:
    return "m⁴" if units == METRIC else "in⁴"


def load_unit(units: str) -> str:
    return "N" if units == METRIC else "lb"


def modulus_unit(units: str) -> str:
    return "Pa" if units == METRIC else "psi"


def span_label(span_length: float, units: str) -> str:
    if span_length > 0:
        return f"{float(span_length):.2f} {length_unit(units)}"
    return "—"


def load_label(load: float, units: str) -> str:
    if load > 0:
        return f"{float(load):.2f} {load_unit(units)}"
    return "No load applied"
