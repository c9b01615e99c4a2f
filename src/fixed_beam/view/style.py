from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class RenderStyle:
    # Lienzo SVG (viewBox)
    svg_width: float = 700.0
    svg_height: float = 220.0
    curve_margin: float = 40.0    # espacio libre arriba/abajo de la curva

    # Apoyos (empotramientos)
    support_width: float = 20.0
    support_height: float = 80.0

    # Flecha de carga
    load_arrow_top: float = 70.0
    load_arrow_gap: float = 10.0

    curve_color: str = "#2563eb"
    curve_lw: float = 4.0
    baseline_color: str = "#1f2937"
    support_color: str = "#9ca3af"
    load_color: str = "#ef4444"
    fill_top: str = "#bfdbfe"
    fill_bottom: str = "#93c5fd"

    # Plot matplotlib
    plot_lw: float = 2.0
    font_size: int = 9

    @property
    def baseline_y(self) -> float:
        return self.svg_height / 2.0
