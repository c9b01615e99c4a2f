# path: src/fixed_beam/ui/main_window.py
from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from typing import Optional

import matplotlib
matplotlib.use("QtAgg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QPushButton, QRadioButton, QButtonGroup, QComboBox, QGroupBox,
    QMessageBox, QFileDialog, QSplitter
)

from fixed_beam.domain.inputs import CUSTOM, IMPERIAL, METRIC, STANDARD
from fixed_beam.sections.section_db import default_section_db
from fixed_beam.services.report_pdf import ReportHeader, export_report_pdf
from fixed_beam.ui.calculator_state import CalculatorState
from fixed_beam.ui.numeric_edit import NullableFloatEdit
from fixed_beam.view.formatting import (
    format_deflection, format_moment, format_stress,
    inertia_unit, load_label, load_unit, length_unit, modulus_unit,
    section_length_unit, span_label,
)
from fixed_beam.view.renderer_deflection import render_deflection, save_deflection_png
from fixed_beam.view.renderer_svg import deflection_paths, export_svg
from fixed_beam.view.style import RenderStyle

logger = logging.getLogger(__name__)


class BeamCalculatorWindow(QMainWindow):
    """
    Formulario + resultados de la viga biempotrada.
    Toda edición pasa por CalculatorState (recalcula en el momento) y luego se refresca la vista.
    """
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Beam Stress Load Calculator")
        self.resize(1200, 720)

        self.state = CalculatorState()
        self.style_cfg = RenderStyle()
        self.db = default_section_db()

        splitter = QSplitter(Qt.Horizontal)
        splitter.addWidget(self._build_form())
        splitter.addWidget(self._build_results())
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self._load_state_into_form()
        self._refresh()

    # ------------------------------------------------------------
    # Construcción UI
    # ------------------------------------------------------------
    def _build_form(self) -> QWidget:
        w = QWidget()
        lay = QVBoxLayout(w)
        lay.setSpacing(10)

        title = QLabel("Fixed-fixed beam with a point load at the center")
        title.setWordWrap(True)
        title.setStyleSheet("font-weight: 600;")
        lay.addWidget(title)

        # Unidades
        self.rb_metric = QRadioButton("Metric (N, m, Pa)")
        self.rb_imperial = QRadioButton("Imperial (lb, ft, psi)")
        self.grp_units = QButtonGroup(self)
        self.grp_units.addButton(self.rb_metric)
        self.grp_units.addButton(self.rb_imperial)
        row = QHBoxLayout()
        row.addWidget(self.rb_metric)
        row.addWidget(self.rb_imperial)
        box = QGroupBox("Units")
        box.setLayout(row)
        lay.addWidget(box)

        form = QFormLayout()
        self.ed_load = NullableFloatEdit(placeholder="Enter load")
        self.ed_span = NullableFloatEdit(placeholder="Enter span length")
        self.lbl_load = QLabel()
        self.lbl_span = QLabel()
        form.addRow(self.lbl_load, self.ed_load)
        form.addRow(self.lbl_span, self.ed_span)
        lay.addLayout(form)

        # Tipo de viga
        self.rb_custom = QRadioButton("Custom Dimensions")
        self.rb_standard = QRadioButton("Standard Section")
        self.grp_type = QButtonGroup(self)
        self.grp_type.addButton(self.rb_custom)
        self.grp_type.addButton(self.rb_standard)
        row = QHBoxLayout()
        row.addWidget(self.rb_custom)
        row.addWidget(self.rb_standard)
        box = QGroupBox("Beam Type")
        box.setLayout(row)
        lay.addWidget(box)

        # Custom
        self.box_custom = QGroupBox("Custom section")
        fc = QFormLayout(self.box_custom)
        self.ed_width = NullableFloatEdit(placeholder="Enter width")
        self.ed_height = NullableFloatEdit(placeholder="Enter height")
        self.ed_inertia = NullableFloatEdit(placeholder="Enter moment of inertia (optional)")
        self.lbl_width = QLabel()
        self.lbl_height = QLabel()
        self.lbl_inertia = QLabel()
        fc.addRow(self.lbl_width, self.ed_width)
        fc.addRow(self.lbl_height, self.ed_height)
        fc.addRow(self.lbl_inertia, self.ed_inertia)
        hint = QLabel("If not provided, I will be calculated from width and height for a rectangular section")
        hint.setWordWrap(True)
        hint.setStyleSheet("color: gray; font-size: 11px;")
        fc.addRow(hint)
        lay.addWidget(self.box_custom)

        # Estándar
        self.box_standard = QGroupBox("Standard Beam Section")
        fs = QVBoxLayout(self.box_standard)
        self.cmb_section = QComboBox()
        self.lbl_section_info = QLabel("")
        self.lbl_section_info.setWordWrap(True)
        fs.addWidget(self.cmb_section)
        fs.addWidget(self.lbl_section_info)
        lay.addWidget(self.box_standard)

        # Material
        form = QFormLayout()
        self.ed_E = NullableFloatEdit()
        self.lbl_E = QLabel()
        form.addRow(self.lbl_E, self.ed_E)
        lay.addLayout(form)
        self.lbl_E_hint = QLabel()
        self.lbl_E_hint.setWordWrap(True)
        self.lbl_E_hint.setStyleSheet("color: gray; font-size: 11px;")
        lay.addWidget(self.lbl_E_hint)

        lay.addStretch(1)

        # Señales
        self.rb_metric.toggled.connect(lambda on: on and self._on_units(METRIC))
        self.rb_imperial.toggled.connect(lambda on: on and self._on_units(IMPERIAL))
        self.rb_custom.toggled.connect(lambda on: on and self._on_edit(beam_type=CUSTOM))
        self.rb_standard.toggled.connect(lambda on: on and self._on_edit(beam_type=STANDARD))

        self.ed_load.textChanged.connect(lambda _t: self._on_edit(load=self.ed_load.value() or 0.0))
        self.ed_span.textChanged.connect(lambda _t: self._on_edit(span_length=self.ed_span.value() or 0.0))
        self.ed_width.textChanged.connect(lambda _t: self._on_edit(width=self.ed_width.value() or 0.0))
        self.ed_height.textChanged.connect(lambda _t: self._on_edit(height=self.ed_height.value() or 0.0))
        self.ed_inertia.textChanged.connect(lambda _t: self._on_edit(moment_of_inertia=self.ed_inertia.value()))
        self.ed_E.textChanged.connect(lambda _t: self._on_edit(modulus_of_elasticity=self.ed_E.value() or 0.0))
        self.cmb_section.currentIndexChanged.connect(self._on_section_changed)

        w.setMinimumWidth(380)
        return w

    def _build_results(self) -> QWidget:
        w = QWidget()
        lay = QVBoxLayout(w)

        box = QGroupBox("Calculation Results")
        fr = QFormLayout(box)
        self.lbl_moment = QLabel("-")
        self.lbl_stress = QLabel("-")
        self.lbl_moment.setStyleSheet("font-size: 18px; font-weight: 600; color: #2563eb;")
        self.lbl_stress.setStyleSheet("font-size: 20px; font-weight: 700; color: #dc2626;")
        fr.addRow("Maximum Bending Moment", self.lbl_moment)
        fr.addRow("Maximum Bending Stress", self.lbl_stress)
        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet("color: #dc2626;")
        self.lbl_error.setWordWrap(True)
        fr.addRow(self.lbl_error)
        notes = QLabel(
            "Formula: σ = Mc/I\n"
            "Where: M = PL/8 (for fixed-fixed beam with center load)\n"
            "Note: This calculation assumes a fixed-fixed beam with a point load at the center of the span."
        )
        notes.setWordWrap(True)
        notes.setStyleSheet("color: gray; font-size: 11px;")
        fr.addRow(notes)
        lay.addWidget(box)

        self.fig = plt.Figure(figsize=(8, 3.2))
        self.canvas = FigureCanvas(self.fig)
        self.ax = self.fig.add_subplot(111)
        lay.addWidget(self.canvas, 1)

        row = QHBoxLayout()
        self.lbl_sum_span = QLabel()
        self.lbl_sum_load = QLabel()
        self.lbl_sum_defl = QLabel()
        for title, lbl in (("Span", self.lbl_sum_span), ("Load", self.lbl_sum_load), ("Max Deflection", self.lbl_sum_defl)):
            b = QGroupBox(title)
            bl = QVBoxLayout(b)
            lbl.setStyleSheet("font-size: 15px; font-weight: 600;")
            bl.addWidget(lbl)
            row.addWidget(b)
        lay.addLayout(row)

        self.lbl_scale = QLabel("")
        self.lbl_scale.setStyleSheet("color: gray; font-size: 11px;")
        lay.addWidget(self.lbl_scale)

        btns = QHBoxLayout()
        self.btn_svg = QPushButton("Save deflection curve (SVG)")
        self.btn_pdf = QPushButton("Export calculation report (PDF)")
        btns.addWidget(self.btn_svg)
        btns.addWidget(self.btn_pdf)
        btns.addStretch(1)
        lay.addLayout(btns)

        self.btn_svg.clicked.connect(self._export_svg)
        self.btn_pdf.clicked.connect(self._export_pdf)
        return w

    # ------------------------------------------------------------
    # Estado <-> formulario
    # ------------------------------------------------------------
    def _load_state_into_form(self):
        """Vuelca el BeamInput actual en los widgets (sin disparar recálculos)."""
        inp = self.state.input
        u = inp.units

        for rb, on in ((self.rb_metric, u == METRIC), (self.rb_imperial, u == IMPERIAL),
                       (self.rb_custom, not inp.is_standard), (self.rb_standard, inp.is_standard)):
            old = rb.blockSignals(True)
            rb.setChecked(on)
            rb.blockSignals(old)

        self.lbl_load.setText(f"Point Load (P) ({load_unit(u)})")
        self.lbl_span.setText(f"Span Length (L) ({length_unit(u)})")
        self.lbl_width.setText(f"Width (b) ({section_length_unit(u)})")
        self.lbl_height.setText(f"Height/Depth (h) ({section_length_unit(u)})")
        self.lbl_inertia.setText(f"Moment of Inertia (I) ({inertia_unit(u)})")
        self.lbl_E.setText(f"Modulus of Elasticity (E) ({modulus_unit(u)})")
        if u == METRIC:
            self.ed_E.setPlaceholderText("e.g., 200000000000 for steel (200 GPa)")
            self.lbl_E_hint.setText("Common values: Steel ≈ 200 GPa, Concrete ≈ 20-30 GPa")
        else:
            self.ed_E.setPlaceholderText("e.g., 29000000 for steel (29 Mpsi)")
            self.lbl_E_hint.setText("Common values: Steel ≈ 29 Mpsi, Concrete ≈ 3-4 Mpsi")

        self.ed_load.set_value(inp.load)
        self.ed_span.set_value(inp.span_length)
        self.ed_width.set_value(inp.width)
        self.ed_height.set_value(inp.height)
        self.ed_inertia.set_value(inp.moment_of_inertia)
        self.ed_E.set_value(inp.modulus_of_elasticity)

        old = self.cmb_section.blockSignals(True)
        self.cmb_section.clear()
        self.cmb_section.addItem("Select a section", "")
        for s in self.db.sections(u):
            self.cmb_section.addItem(f"{s.name} (Depth: {s.depth:.2f} {section_length_unit(u)})", s.name)
        i = self.cmb_section.findData(inp.standard_section)
        self.cmb_section.setCurrentIndex(max(i, 0))
        self.cmb_section.blockSignals(old)

        self.box_custom.setVisible(not inp.is_standard)
        self.box_standard.setVisible(inp.is_standard)

    def _on_units(self, units: str):
        self.state.set_units(units)
        self._load_state_into_form()
        self._refresh()

    def _on_edit(self, **changes):
        self.state.update(**changes)
        if "beam_type" in changes:
            self.box_custom.setVisible(not self.state.input.is_standard)
            self.box_standard.setVisible(self.state.input.is_standard)
        self._refresh()

    def _on_section_changed(self, _idx: int):
        self._on_edit(standard_section=self.cmb_section.currentData() or "")

    # ------------------------------------------------------------
    # Vista
    # ------------------------------------------------------------
    def _refresh(self):
        inp = self.state.input
        res = self.state.result
        u = inp.units

        sec = self.db.get(inp.standard_section, u) if inp.standard_section else None
        if sec is not None:
            lu = section_length_unit(u)
            self.lbl_section_info.setText(
                f"Depth: {sec.depth:.3f} {lu}\nWidth: {sec.width:.3f} {lu}\n"
                f"I: {sec.moment_of_inertia:.6f} {inertia_unit(u)}"
            )
        else:
            self.lbl_section_info.setText("")

        if res is None or not res.is_valid:
            self.lbl_moment.setText("-")
            self.lbl_stress.setText("-")
            if res is not None and res.error:
                self.lbl_error.setText(res.error)
            else:
                self.lbl_error.setText("Enter beam parameters to calculate stress")
        else:
            self.lbl_moment.setText(format_moment(res.bending_moment, res.units))
            self.lbl_stress.setText(format_stress(res.max_bending_stress, res.units))
            self.lbl_error.setText("")

        self.lbl_sum_span.setText(span_label(inp.span_length, u))
        self.lbl_sum_load.setText(load_label(inp.load, u))
        if res is not None and res.is_valid:
            self.lbl_sum_defl.setText(format_deflection(res.max_deflection, res.units))
            self.lbl_scale.setText(f"Scale reference (max |δ| in base units): {deflection_paths(res, self.style_cfg).scale_label}")
        else:
            self.lbl_sum_defl.setText("Awaiting valid inputs")
            self.lbl_scale.setText("")

        render_deflection(self.ax, res, span_length=inp.span_length, style=self.style_cfg)
        self.fig.tight_layout()
        self.canvas.draw_idle()

        can_export = res is not None and res.is_valid
        self.btn_svg.setEnabled(can_export)
        self.btn_pdf.setEnabled(can_export)

    # ------------------------------------------------------------
    # Exportaciones
    # ------------------------------------------------------------
    def _export_svg(self):
        path, _ = QFileDialog.getSaveFileName(self, "Save deflection curve", "deflection.svg", "SVG (*.svg)")
        if not path:
            return
        try:
            export_svg(path, self.state.result, self.style_cfg)
            logger.info("SVG exportado: %s", path)
        except OSError as e:
            logger.exception("Error al exportar SVG")
            QMessageBox.critical(self, "Export", f"Could not save SVG: {e}")

    def _export_pdf(self):
        path, _ = QFileDialog.getSaveFileName(self, "Export calculation report", "beam_report.pdf", "PDF (*.pdf)")
        if not path:
            return

        tmpdir = tempfile.mkdtemp(prefix="fixed_beam_")
        try:
            img = save_deflection_png(
                os.path.join(tmpdir, "deflection.png"),
                self.state.result,
                span_length=self.state.input.span_length,
                style=self.style_cfg,
            )
            export_report_pdf(
                path,
                header=ReportHeader(title="Beam Stress Calculation"),
                beam_input=self.state.input,
                result=self.state.result,
                images={"deflection": img},
            )
            logger.info("Memoria PDF generada: %s", path)
            QMessageBox.information(self, "Calculation report", f"PDF generated:\n{path}")
        except Exception as e:
            # atrapado acá no llega al excepthook: dejar traceback en el log
            logger.exception("Error al generar la memoria (PDF)")
            QMessageBox.critical(self, "Calculation report", f"Error generating the report: {e}")
        finally:
            shutil.rmtree(tmpdir, ignore_errors=True)


def main(argv: Optional[list] = None):
    app = QApplication(argv if argv is not None else sys.argv)
    w = BeamCalculatorWindow()
    w.show()
    sys.exit(app.exec())
