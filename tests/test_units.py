# path: tests/test_units.py
import pytest

from fixed_beam.domain.inputs import BeamInput, IMPERIAL, METRIC, STANDARD
from fixed_beam.engine.units import M_TO_FT, N_TO_LB, PA_TO_PSI, convert_input, to_imperial, to_metric


def _inp(**kw):
    base = dict(load=1000.0, span_length=4.0, modulus_of_elasticity=2e11,
                width=0.1, height=0.2, moment_of_inertia=7e-5)
    base.update(kw)
    return BeamInput(**base)


def test_metric_to_imperial_factors():
    imp = to_imperial(_inp())
    assert imp.units == IMPERIAL
    assert imp.load == pytest.approx(1000.0 * N_TO_LB)
    assert imp.span_length == pytest.approx(4.0 * M_TO_FT)
    assert imp.width == pytest.approx(0.1 * M_TO_FT)
    assert imp.height == pytest.approx(0.2 * M_TO_FT)
    assert imp.moment_of_inertia == pytest.approx(7e-5 * M_TO_FT ** 4)
    assert imp.modulus_of_elasticity == pytest.approx(2e11 * PA_TO_PSI)


def test_round_trip_returns_original_values():
    inp = _inp()
    back = to_metric(to_imperial(inp))
    assert back.units == METRIC
    for name in ("load", "span_length", "width", "height", "moment_of_inertia", "modulus_of_elasticity"):
        assert getattr(back, name) == pytest.approx(getattr(inp, name), rel=1e-12)


def test_missing_optionals_stay_none_and_section_kept():
    inp = _inp(width=None, height=None, moment_of_inertia=None, beam_type=STANDARD, standard_section="W18x50")
    imp = to_imperial(inp)
    assert imp.width is None
    assert imp.height is None
    assert imp.moment_of_inertia is None
    assert imp.standard_section == "W18x50"
    assert imp.beam_type == STANDARD


def test_same_units_is_a_no_op():
    inp = _inp()
    assert convert_input(inp, METRIC) is inp


def test_unknown_units_raise():
    with pytest.raises(ValueError):
        convert_input(_inp(), "cgs")
