# path: tests/test_stress.py
import math

import pytest

from fixed_beam.domain.inputs import BeamInput, IMPERIAL, STANDARD
from fixed_beam.engine.stress import (
    ERR_DIMS_POSITIVE, ERR_DIMS_REQUIRED, ERR_LOAD_SPAN, ERR_MODULUS,
    ERR_SECTION_NOT_FOUND, ERR_SECTION_NOT_SELECTED,
    bending_moment, bending_stress, compute,
)


def _custom(**kw):
    base = dict(load=1000.0, span_length=4.0, modulus_of_elasticity=2e11, width=0.1, height=0.2)
    base.update(kw)
    return BeamInput(**base)


def test_worked_example_rectangular_metric():
    res = compute(_custom())

    assert res.is_valid
    assert res.error is None
    assert res.moment_of_inertia == pytest.approx(0.1 * 0.2 ** 3 / 12.0)
    assert res.moment_of_inertia == pytest.approx(6.6667e-5, rel=1e-4)
    assert res.c == pytest.approx(0.1)
    assert res.bending_moment == pytest.approx(500.0)
    assert res.bending_stress == pytest.approx(750_000.0)
    assert res.max_bending_stress == pytest.approx(750_000.0)
    assert res.units == "metric"


def test_moment_is_pl_over_8():
    for P, L in [(1.0, 1.0), (2500.0, 7.3), (0.01, 120.0)]:
        res = compute(_custom(load=P, span_length=L))
        assert res.is_valid
        assert res.bending_moment == pytest.approx(P * L / 8.0)


def test_explicit_inertia_overrides_rectangle_but_c_is_half_height():
    res = compute(_custom(moment_of_inertia=1e-4))
    assert res.moment_of_inertia == pytest.approx(1e-4)
    assert res.c == pytest.approx(0.1)
    assert res.max_bending_stress == pytest.approx(500.0 * 0.1 / 1e-4)


def test_non_positive_inertia_override_is_ignored():
    res = compute(_custom(moment_of_inertia=-5.0))
    assert res.moment_of_inertia == pytest.approx(0.1 * 0.2 ** 3 / 12.0)


def test_load_or_span_not_positive():
    for kw in ({"load": 0.0}, {"load": -10.0}, {"span_length": 0.0}, {"span_length": -1.0}):
        res = compute(_custom(**kw))
        assert not res.is_valid
        assert res.error == ERR_LOAD_SPAN
        assert "Load and span length" in res.error
        assert res.bending_moment == 0.0
        assert res.bending_stress == 0.0
        assert res.max_deflection == 0.0
        assert res.deflection_points == ()


def test_nan_load_is_rejected():
    res = compute(_custom(load=math.nan))
    assert not res.is_valid
    assert res.error == ERR_LOAD_SPAN


def test_modulus_checked_after_load_and_span():
    res = compute(_custom(modulus_of_elasticity=0.0))
    assert res.error == ERR_MODULUS

    # ambos inválidos: gana el de carga/vano
    res = compute(_custom(load=0.0, modulus_of_elasticity=-1.0))
    assert res.error == ERR_LOAD_SPAN


def test_standard_section_errors_are_distinct():
    res = compute(_custom(beam_type=STANDARD, standard_section=""))
    assert not res.is_valid
    assert res.error == ERR_SECTION_NOT_SELECTED

    res = compute(_custom(beam_type=STANDARD, standard_section="W99x999"))
    assert not res.is_valid
    assert res.error == ERR_SECTION_NOT_FOUND


def test_standard_section_uses_table_properties():
    inp = BeamInput(load=5000.0, span_length=6.0, modulus_of_elasticity=2e11,
                    beam_type=STANDARD, standard_section="W16x40")
    res = compute(inp)
    assert res.is_valid
    assert res.moment_of_inertia == pytest.approx(0.000518)
    assert res.c == pytest.approx(0.1995)
    assert res.bending_moment == pytest.approx(3750.0)
    assert res.max_bending_stress == pytest.approx(3750.0 * 0.1995 / 0.000518)


def test_standard_section_imperial_table():
    inp = BeamInput(load=1000.0, span_length=10.0, modulus_of_elasticity=29e6,
                    beam_type=STANDARD, standard_section="W14x22", units=IMPERIAL)
    res = compute(inp)
    assert res.is_valid
    assert res.units == IMPERIAL
    assert res.moment_of_inertia == pytest.approx(199.0)
    assert res.c == pytest.approx(7.0)


def test_standard_ignores_custom_dimensions():
    inp = _custom(beam_type=STANDARD, standard_section="W14x30", width=None, height=None)
    assert compute(inp).is_valid


def test_custom_dimensions_required():
    for kw in ({"width": None}, {"height": None}, {"width": 0.0}, {"height": 0.0}):
        res = compute(_custom(**kw))
        assert res.error == ERR_DIMS_REQUIRED


def test_custom_dimensions_positive():
    for kw in ({"width": -0.1}, {"height": -0.2}):
        res = compute(_custom(**kw))
        assert res.error == ERR_DIMS_POSITIVE


def test_section_checked_after_modulus():
    res = compute(_custom(modulus_of_elasticity=0.0, width=None))
    assert res.error == ERR_MODULUS


def test_bending_stress_zero_inertia_guard():
    assert bending_stress(500.0, 0.1, 0.0) == 0.0
    assert bending_stress(500.0, 0.1, 2.0) == pytest.approx(25.0)
    assert bending_moment(8.0, 2.0) == pytest.approx(2.0)


def test_compute_is_deterministic():
    inp = _custom()
    assert compute(inp) == compute(inp)


def test_imperial_deflection_uses_span_in_inches():
    inp = BeamInput(load=1000.0, span_length=10.0, modulus_of_elasticity=29e6,
                    width=4.0, height=10.0, units=IMPERIAL)
    res = compute(inp)
    I = 4.0 * 10.0 ** 3 / 12.0
    assert res.max_deflection == pytest.approx(1000.0 * 120.0 ** 3 / (192.0 * 29e6 * I))
    # el momento queda en lb·ft (vano sin convertir)
    assert res.bending_moment == pytest.approx(1000.0 * 10.0 / 8.0)
