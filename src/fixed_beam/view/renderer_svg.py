from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from fixed_beam.domain.results import CalculationResult
from fixed_beam.view.style import RenderStyle


@dataclass(frozen=True)
class DeflectionPaths:
    curve_path: str
    area_path: str
    scale_label: str
    has_deflection: bool


def _flat_paths(style: RenderStyle) -> DeflectionPaths:
    w = style.svg_width
    y = style.baseline_y
    return DeflectionPaths(
        curve_path=f"M 0 {y:g} L {w:g} {y:g}",
        area_path=f"M 0 {y:g} L {w:g} {y:g} L {w:g} {y:g} L 0 {y:g} Z",
        scale_label="0",
        has_deflection=False,
    )


def deflection_paths(result: Optional[CalculationResult], style: Optional[RenderStyle] = None) -> DeflectionPaths:
    """
    Paths SVG de la elástica.

    - x = posición * ancho
    - y = línea base + δ * escala (δ+ hacia abajo, igual que el eje y del SVG)
    - escala = (alto/2 - margen) / max|δ|
    Sin resultado válido (o sin puntos) => línea recta en la base.
    """
    style = style or RenderStyle()
    if result is None or not result.is_valid or not result.deflection_points:
        return _flat_paths(style)

    pts = result.deflection_points
    max_abs = abs(float(result.max_deflection))
    for p in pts:
        max_abs = max(max_abs, abs(float(p.deflection)))

    scale = (style.svg_height / 2.0 - style.curve_margin) / max_abs if max_abs > 0 else 0.0
    y0 = style.baseline_y

    segs: List[str] = []
    for i, p in enumerate(pts):
        x = float(p.position) * style.svg_width
        y = y0 + float(p.deflection) * scale
        segs.append(f"{'M' if i == 0 else 'L'} {x:.2f} {y:.2f}")

    curve = " ".join(segs)
    area = f"{curve} L {style.svg_width:g} {y0:g} L 0 {y0:g} Z"

    return DeflectionPaths(
        curve_path=curve,
        area_path=area,
        scale_label=f"{max_abs:.2e}",
        has_deflection=max_abs > 0,
    )


def render_svg(result: Optional[CalculationResult], style: Optional[RenderStyle] = None) -> str:
    """Documento SVG completo: empotramientos, línea base, carga al centro y elástica."""
    s = style or RenderStyle()
    paths = deflection_paths(result, s)
    W, H, y0 = s.svg_width, s.svg_height, s.baseline_y
    xm = W / 2.0

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {W:g} {H:g}" role="img" aria-label="Beam deflection curve">',
        "<defs>",
        '<linearGradient id="deflection-fill" x1="0" x2="0" y1="0" y2="1">',
        f'<stop offset="0%" stop-color="{s.fill_top}" stop-opacity="0.7"/>',
        f'<stop offset="100%" stop-color="{s.fill_bottom}" stop-opacity="0.2"/>',
        "</linearGradient>",
        "</defs>",
        # viga
        f'<rect x="0" y="{y0 - 6:g}" width="{W:g}" height="12" fill="{s.baseline_color}" opacity="0.12"/>',
        f'<line x1="0" y1="{y0:g}" x2="{W:g}" y2="{y0:g}" stroke="{s.baseline_color}" '
        f'stroke-width="2" stroke-dasharray="6 6" opacity="0.4"/>',
        # empotramientos
        f'<rect x="0" y="{y0 - s.support_height / 2:g}" width="{s.support_width:g}" '
        f'height="{s.support_height:g}" fill="{s.support_color}" opacity="0.35"/>',
        f'<rect x="{W - s.support_width:g}" y="{y0 - s.support_height / 2:g}" width="{s.support_width:g}" '
        f'height="{s.support_height:g}" fill="{s.support_color}" opacity="0.35"/>',
        # carga P al centro
        f'<line x1="{xm:g}" y1="{y0 - s.load_arrow_top:g}" x2="{xm:g}" y2="{y0 - s.load_arrow_gap:g}" '
        f'stroke="{s.load_color}" stroke-width="3" stroke-linecap="round"/>',
        f'<polygon points="{xm - 8:g},{y0 - s.load_arrow_gap:g} {xm + 8:g},{y0 - s.load_arrow_gap:g} '
        f'{xm:g},{y0 + 4:g}" fill="{s.load_color}"/>',
        # elástica
        f'<path d="{paths.area_path}" fill="url(#deflection-fill)" opacity="{0.9 if paths.has_deflection else 0}"/>',
        f'<path d="{paths.curve_path}" fill="none" stroke="{s.curve_color}" '
        f'stroke-width="{s.curve_lw:g}" stroke-linecap="round"/>',
        "</svg>",
    ]
    return "\n".join(parts)


def export_svg(path: str, result: Optional[CalculationResult], style: Optional[RenderStyle] = None) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_svg(result, style))
