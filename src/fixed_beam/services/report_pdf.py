# path: src/fixed_beam/services/report_pdf.py
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from fixed_beam.domain.inputs import BeamInput
from fixed_beam.domain.results import CalculationResult
from fixed_beam.view.formatting import (
    format_deflection, format_moment, format_stress,
    inertia_unit, load_unit, length_unit, modulus_unit, section_length_unit,
)

# Nota: este módulo NO depende de Qt. Recibe el input, el resultado ya calculado
# y, opcionalmente, paths a imágenes generadas antes (elástica).

# cada cuántos puntos de la elástica se lista una fila (40 segmentos => 9 filas)
TABLE_STRIDE = 5


@dataclass(frozen=True)
class ReportHeader:
    title: str
    project: str = ""
    author: str = ""
    date: Optional[datetime] = None
    revision: str = "A"


def export_report_pdf(
    out_pdf_path: str,
    header: ReportHeader,
    beam_input: BeamInput,
    result: CalculationResult,
    images: Optional[Dict[str, str]] = None,
    page_size=pagesizes.A4,
) -> None:
    """
    Genera la memoria de cálculo (PDF A4) de una viga biempotrada con carga al centro.

    Si el resultado no es válido se incluye el mensaje de validación en lugar
    de la tabla de resultados.
    """
    imgs = _normalize_images_dict(images)
    u = beam_input.units

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))
    styles.add(ParagraphStyle(name="MonoSmall", parent=styles["BodyText"], fontName="Courier", fontSize=8, leading=10))

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=header.title,
    )

    story: List[object] = []

    # ----------------- Portada -----------------
    story.append(Paragraph(header.title, styles["H1c"]))
    story.append(Spacer(1, 4 * mm))

    date = header.date or datetime.now()
    meta_rows = [
        ["Project:", header.project or "-"],
        ["Author:", header.author or "-"],
        ["Date:", date.strftime("%Y-%m-%d %H:%M")],
        ["Revision:", header.revision],
        ["Units:", u],
    ]
    t = Table(meta_rows, colWidths=[40 * mm, 140 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    story.append(Paragraph("Scope and assumptions", styles["Heading2"]))
    base = [
        "Fixed-fixed beam (both ends restrained against rotation and translation) with a point load P at midspan.",
        "Linear elastic material, small deflections, plane sections remain plane (Euler-Bernoulli), prismatic beam.",
        "Deflection is reported positive downward and sampled at 41 evenly spaced points along the span.",
    ]
    story.extend(_bullets(base, styles))
    story.append(Spacer(1, 3 * mm))

    story.append(Paragraph("Main equations", styles["Heading3"]))
    eq = [
        "M     = P·L / 8",
        "σ     = M·c / I",
        "I     = b·h³ / 12          (custom rectangular section)",
        "δ(x)  = P·x·(3L²/4 - x²) / (48·E·I),   x <= L/2 (symmetric)",
        "δmax  = P·L³ / (192·E·I)",
    ]
    story.extend(_mono_block(eq, styles))
    story.append(Spacer(1, 4 * mm))

    # ----------------- Datos -----------------
    story.append(Paragraph("Input data", styles["Heading2"]))
    lu = section_length_unit(u)
    irows = [
        [f"Point load P [{load_unit(u)}]", _f(beam_input.load, 2)],
        [f"Span length L [{length_unit(u)}]", _f(beam_input.span_length, 3)],
        [f"Modulus of elasticity E [{modulus_unit(u)}]", f"{float(beam_input.modulus_of_elasticity):.4g}"],
    ]
    if beam_input.is_standard:
        irows.append(["Standard section", beam_input.standard_section or "-"])
    else:
        irows.append([f"Width b [{lu}]", _opt(beam_input.width, 4)])
        irows.append([f"Height h [{lu}]", _opt(beam_input.height, 4)])
        irows.append([
            f"Moment of inertia override [{inertia_unit(u)}]",
            "-" if not beam_input.moment_of_inertia else f"{float(beam_input.moment_of_inertia):.4g}",
        ])
    t = Table(irows, colWidths=[80 * mm, 100 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 4 * mm))

    # ----------------- Resultados -----------------
    story.append(Paragraph("Results", styles["Heading2"]))
    if not result.is_valid:
        story.append(Paragraph(f"Calculation not performed: {result.error or 'invalid input'}", styles["BodyText"]))
        doc.build(story)
        return

    rrows = [
        ["Maximum bending moment M", format_moment(result.bending_moment, u)],
        ["Maximum bending stress σ", format_stress(result.max_bending_stress, u)],
        ["Maximum deflection δmax", format_deflection(result.max_deflection, u)],
        [f"Moment of inertia used I [{inertia_unit(u)}]", f"{result.moment_of_inertia:.4g}"],
        [f"Outer fiber distance c [{lu}]", _f(result.c, 4)],
    ]
    t = Table(rrows, colWidths=[80 * mm, 100 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 3 * mm))

    if result.deflection_points:
        story.append(Paragraph("Deflection profile", styles["Heading3"]))
        rows = [["x / L", "δ"]]
        for i, p in enumerate(result.deflection_points):
            if i % TABLE_STRIDE == 0:
                rows.append([_f(p.position, 3), format_deflection(p.deflection, u)])
        t = Table(rows, colWidths=[40 * mm, 60 * mm], repeatRows=1)
        t.setStyle(_grid_table_style(header_rows=1))
        story.append(t)
        story.append(Spacer(1, 4 * mm))

    _append_figure(story, styles, "deflection", "Deflection curve", imgs, max_w=180 * mm, max_h=95 * mm)

    doc.build(story)


# ----------------- helpers -----------------

def _normalize_images_dict(images: Optional[Dict[str, str]]) -> Dict[str, str]:
    if not images:
        return {}
    out: Dict[str, str] = {}
    for k, v in images.items():
        kk = (k or "").strip().lower()
        vv = (v or "").strip()
        if kk and vv:
            out[kk] = vv
    return out


def _append_figure(story: List[object], styles, key: str, title: str, imgs: Dict[str, str], *, max_w: float, max_h: float):
    path = (imgs.get(key) or "").strip()
    if not path:
        return
    story.append(Paragraph(title, styles["Heading3"]))
    if os.path.exists(path):
        story.append(_img(path, max_w=max_w, max_h=max_h))
    else:
        story.append(Paragraph(f"(No image: '{path}' does not exist)", styles["Small"]))
    story.append(Spacer(1, 3 * mm))


def _f(v: float, dec: int) -> str:
    s = f"{float(v):.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _opt(v: Optional[float], dec: int) -> str:
    return "-" if v is None else _f(v, dec)


def _bullets(items: List[str], styles):
    out: List[object] = []
    for it in items:
        out.append(Paragraph(f"• {it}", styles["BodyText"]))
        out.append(Spacer(1, 1.2 * mm))
    return out


def _mono_block(lines: List[str], styles):
    return [Paragraph(ln.replace(" ", "&nbsp;"), styles["MonoSmall"]) for ln in lines]


def _kv_table_style():
    return TableStyle(
        [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("LEFTPADDING", (0, 0), (-1, -1), 6),
            ("RIGHTPADDING", (0, 0), (-1, -1), 6),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
    )


def _grid_table_style(header_rows: int = 1, font_size: int = 9):
    ts = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    if header_rows > 0:
        ts += [
            ("BACKGROUND", (0, 0), (-1, header_rows - 1), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, header_rows - 1), "Helvetica-Bold"),
        ]
    return TableStyle(ts)


def _img(path: str, *, max_w: float, max_h: float):
    img = Image(path)
    iw, ih = img.imageWidth, img.imageHeight
    if iw <= 0 or ih <= 0:
        return img
    scale = min(max_w / iw, max_h / ih, 1.0)
    img.drawWidth = iw * scale
    img.drawHeight = ih * scale
    return img
