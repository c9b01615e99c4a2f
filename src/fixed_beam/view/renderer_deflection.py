from __future__ import annotations

from typing import Optional

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from fixed_beam.domain.inputs import METRIC
from fixed_beam.domain.results import CalculationResult
from fixed_beam.view.formatting import format_deflection, length_unit
from fixed_beam.view.style import RenderStyle


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def result_arrays(result: CalculationResult):
    """(posiciones x/L, deflexiones) como arrays numpy."""
    pos = np.asarray([p.position for p in result.deflection_points], dtype=float)
    d = np.asarray([p.deflection for p in result.deflection_points], dtype=float)
    return pos, d


def render_deflection(
    ax,
    result: Optional[CalculationResult],
    *,
    span_length: Optional[float] = None,
    style: Optional[RenderStyle] = None,
    y_zoom: float = 1.0,
):
    """
    Elástica δ(x) sobre un Axes de matplotlib.
    δ+ (hacia abajo) se dibuja hacia abajo, como se ve la viga.
    Si se pasa span_length, el eje x va en unidades de longitud; si no, en x/L.
    """
    style = style or RenderStyle()
    ax.clear()

    if result is None or not result.is_valid or not result.deflection_points:
        ax.axhline(0.0, linewidth=1.0)
        msg = result.error if (result is not None and result.error) else "Awaiting valid inputs"
        ax.text(0.5, 0.5, msg, ha="center", va="center", transform=ax.transAxes, fontsize=style.font_size)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title("Beam Deflection")
        return

    pos, d = result_arrays(result)
    if span_length is not None and span_length > 0:
        x = pos * float(span_length)
        ax.set_xlabel(f"x [{length_unit(result.units)}]")
    else:
        x = pos
        ax.set_xlabel("x / L")

    y = -d
    ax.plot(x, y, linewidth=style.plot_lw, color=style.curve_color)
    ax.fill_between(x, y, 0.0, alpha=0.2, color=style.fill_bottom)
    ax.axhline(0.0, linewidth=1.0, color=style.baseline_color)
    ax.set_xlim(float(x[0]), float(x[-1]))

    dmax = float(np.max(np.abs(d))) if d.size else 0.0
    if dmax <= 0:
        dmax = 1.0
    pad = 1.25
    ax.set_ylim(-dmax * y_zoom * pad, dmax * y_zoom * pad * 0.25)

    # máximo (centro del vano)
    i_max = int(np.argmax(d))
    xm, ym = float(x[i_max]), float(y[i_max])
    ax.scatter([xm], [ym], s=18, zorder=6, color=style.load_color)

    y_min, y_max = ax.get_ylim()
    my = 0.05 * (y_max - y_min)
    ax.text(
        xm, _clamp(ym - my, y_min + my, y_max - my),
        f"δmax = {format_deflection(result.max_deflection, result.units)}",
        ha="center", va="top", fontsize=style.font_size, zorder=7,
    )

    unit = "m" if result.units == METRIC else "in"
    ax.set_ylabel(f"δ [{unit}]")
    ax.set_title("Beam Deflection δ(x)")
    ax.grid(True, alpha=0.25)


def save_deflection_png(
    path: str,
    result: Optional[CalculationResult],
    *,
    span_length: Optional[float] = None,
    style: Optional[RenderStyle] = None,
    dpi: int = 200,
) -> str:
    """Guarda la elástica a imagen sin pasar por pyplot (sirve sin Qt, p.ej. para la memoria PDF)."""
    fig = Figure(figsize=(8.0, 3.2))
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111)
    render_deflection(ax, result, span_length=span_length, style=style)
    fig.tight_layout()
    fig.savefig(path, dpi=dpi)
    return path
