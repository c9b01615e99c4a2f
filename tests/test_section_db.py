# path: tests/test_section_db.py
import os
import tempfile

import pytest

from fixed_beam.sections.rect_section import RectSection
from fixed_beam.sections.section_db import (
    SectionDB, SectionTable, default_section_db, get_section_by_name,
)

HEADER = "name;depth;width;moment_of_inertia;section_modulus;c\n"


def _write(folder, name, text):
    path = os.path.join(folder, name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def test_default_tables_share_names():
    db = default_section_db()
    metric = db.names("metric")
    imperial = db.names("imperial")
    assert len(metric) == 20
    assert set(metric) == set(imperial)
    assert metric[0] == "W14x22"
    assert metric[-1] == "W36x135"


def test_lookup_by_name():
    s = get_section_by_name("W14x22", "metric")
    assert s is not None
    assert s.moment_of_inertia == pytest.approx(0.000199)
    assert s.c == pytest.approx(0.178)

    s = get_section_by_name(" W36x135 ", "imperial")
    assert s is not None
    assert s.depth == pytest.approx(36.0)
    assert s.moment_of_inertia == pytest.approx(8750.0)

    assert get_section_by_name("W99x1", "metric") is None
    assert get_section_by_name("", "metric") is None


def test_unknown_unit_system_raises():
    with pytest.raises(ValueError):
        default_section_db().sections("cgs")


def test_from_txt_skips_comments_and_blank_lines():
    with tempfile.TemporaryDirectory() as td:
        p = _write(td, "t.txt", "# comentario\n\n" + HEADER + "A1;1;2;3;4;0.5\nB2;2;3;4;5;1\n")
        t = SectionTable.from_txt(p)
        assert t.names() == ["A1", "B2"]
        assert t.get("B2").section_modulus == pytest.approx(5.0)


def test_from_txt_errors():
    with tempfile.TemporaryDirectory() as td:
        with pytest.raises(FileNotFoundError):
            SectionTable.from_txt(os.path.join(td, "missing.txt"))

        with pytest.raises(ValueError):
            SectionTable.from_txt(_write(td, "empty.txt", "# nada\n"))

        with pytest.raises(ValueError):
            SectionTable.from_txt(_write(td, "nocols.txt", "name;depth\nA;1\n"))

        with pytest.raises(ValueError):
            SectionTable.from_txt(_write(td, "bad.txt", HEADER + "A;uno;2;3;4;5\n"))

        with pytest.raises(ValueError):
            SectionTable.from_txt(_write(td, "short.txt", HEADER + "A;1;2\n"))


def test_tables_must_have_same_names():
    with tempfile.TemporaryDirectory() as td:
        _write(td, "sections_metric.txt", HEADER + "A;1;2;3;4;0.5\nB;1;2;3;4;0.5\n")
        _write(td, "sections_imperial.txt", HEADER + "A;1;2;3;4;0.5\n")
        with pytest.raises(ValueError):
            SectionDB.from_dir(td)

        _write(td, "sections_imperial.txt", HEADER + "B;1;2;3;4;0.5\nA;1;2;3;4;0.5\n")
        db = SectionDB.from_dir(td)
        assert set(db.names("imperial")) == {"A", "B"}


def test_rect_section_props():
    r = RectSection(width=0.1, height=0.2)
    p = r.props()
    assert p["I"] == pytest.approx(0.1 * 0.008 / 12.0)
    assert p["c"] == pytest.approx(0.1)
    assert p["S"] == pytest.approx(p["I"] / 0.1)

    assert RectSection(width=0.1, height=0.2, I_override=3e-5).I == pytest.approx(3e-5)
    assert RectSection(width=0.1, height=0.2, I_override=0.0).I == pytest.approx(p["I"])
