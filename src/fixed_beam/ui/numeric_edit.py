from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import QLineEdit


def try_float(s: str) -> Optional[float]:
    t = (s or "").strip().replace(",", ".")
    if t == "":
        return None
    try:
        return float(t)
    except ValueError:
        return None


def fmt_edit(v: Optional[float]) -> str:
    """Texto para el editor: vacío si es None/0, sin ceros de más."""
    if v is None or v == 0:
        return ""
    return f"{float(v):.6g}"


class NullableFloatEdit(QLineEdit):
    """
    Campo numérico que:
    - Acepta SOLO números (punto o coma, admite notación científica: 2e11)
    - Permite quedar vacío (=> None)
    """
    def __init__(self, parent=None, *, placeholder: str = "", minv: float = 0.0, maxv: float = 1e18, decimals: int = 12):
        super().__init__(parent)
        self.setAlignment(Qt.AlignRight)
        self.setPlaceholderText(placeholder)

        val = QDoubleValidator(minv, maxv, decimals, self)
        val.setNotation(QDoubleValidator.ScientificNotation)
        self.setValidator(val)

    def value(self) -> Optional[float]:
        return try_float(self.text())

    def set_value(self, v: Optional[float]):
        # no disparar textChanged al cargar valores desde el estado
        old = self.blockSignals(True)
        try:
            self.setText(fmt_edit(v))
        finally:
            self.blockSignals(old)
