# path: tests/test_formatting.py
from fixed_beam.view.formatting import (
    format_deflection, format_moment, format_stress, load_label, span_label,
)


def test_stress_metric_thresholds():
    assert format_stress(999.0, "metric") == "999.00 Pa"
    assert format_stress(1e3, "metric") == "1.00 kPa"
    assert format_stress(750_000.0, "metric") == "750.00 kPa"
    assert format_stress(1e6, "metric") == "1.00 MPa"
    assert format_stress(2.5e6, "metric") == "2.50 MPa"


def test_stress_imperial_thresholds():
    assert format_stress(12.345, "imperial") == "12.35 psi"
    assert format_stress(1500.0, "imperial") == "1.50 ksi"
    assert format_stress(-2e6, "imperial") == "-2.00 Mpsi"


def test_moment_fixed_two_decimals():
    assert format_moment(500.0, "metric") == "500.00 N·m"
    assert format_moment(1234.567, "imperial") == "1234.57 lb·ft"
    assert format_moment(2.5e7, "metric") == "25000000.00 N·m"


def test_deflection_metric():
    assert format_deflection(2.5, "metric") == "2.500 m"
    assert format_deflection(0.0042, "metric") == "4.20 mm"
    assert format_deflection(2.5e-5, "metric") == "25.00 µm"
    assert format_deflection(0.0, "metric") == "0.00 µm"


def test_deflection_imperial_inches_or_mils():
    assert format_deflection(1.5, "imperial") == "1.500 in"
    assert format_deflection(0.05, "imperial") == "0.050 in"
    assert format_deflection(0.005, "imperial") == "5.00 mils"


def test_span_and_load_labels():
    assert span_label(4.0, "metric") == "4.00 m"
    assert span_label(0.0, "imperial") == "—"
    assert load_label(1000.0, "metric") == "1000.00 N"
    assert load_label(250.0, "imperial") == "250.00 lb"
    assert load_label(0.0, "metric") == "No load applied"
