from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from fixed_beam.domain.inputs import IMPERIAL, METRIC

logger = logging.getLogger(__name__)

COLUMNS = ("name", "depth", "width", "moment_of_inertia", "section_modulus", "c")


@dataclass(frozen=True)
class BeamSection:
    """
    Perfil estándar (W-shape). Unidades según la tabla:
      - métrica: m / m^4 / m^3
      - imperial: in / in^4 / in^3
    """
    name: str
    depth: float
    width: float
    moment_of_inertia: float
    section_modulus: float
    c: float


class SectionTable:
    def __init__(self, sections: List[BeamSection]):
        self.sections: List[BeamSection] = list(sections)
        self.by_name: Dict[str, BeamSection] = {s.name: s for s in self.sections}

    def names(self) -> List[str]:
        return [s.name for s in self.sections]

    def get(self, name: str) -> Optional[BeamSection]:
        return self.by_name.get((name or "").strip())

    @classmethod
    def from_txt(cls, path: str | Path) -> "SectionTable":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Section table not found: {p}")

        rows: List[List[str]] = []
        for ln in p.read_text(encoding="utf-8").splitlines():
            t = ln.strip()
            if not t or t.startswith("#"):
                continue
            rows.append([c.strip() for c in t.split(";")])

        if not rows:
            raise ValueError(f"Section table is empty: {p}")

        header = [h.lower() for h in rows[0]]
        missing = [c for c in COLUMNS if c not in header]
        if missing:
            raise ValueError(f"Section table {p.name} is missing columns: {missing}")
        idx = {c: header.index(c) for c in COLUMNS}

        sections: List[BeamSection] = []
        for k, r in enumerate(rows[1:], start=2):
            if len(r) < len(header):
                raise ValueError(f"{p.name}, row {k}: expected {len(header)} fields, got {len(r)}")
            try:
                sections.append(BeamSection(
                    name=r[idx["name"]],
                    depth=float(r[idx["depth"]]),
                    width=float(r[idx["width"]]),
                    moment_of_inertia=float(r[idx["moment_of_inertia"]]),
                    section_modulus=float(r[idx["section_modulus"]]),
                    c=float(r[idx["c"]]),
                ))
            except ValueError as e:
                raise ValueError(f"{p.name}, row {k}: {e}") from e

        if not sections:
            raise ValueError(f"Section table has a header but no rows: {p}")

        return cls(sections)


class SectionDB:
    """Tablas métrica + imperial con los mismos nombres de perfil."""

    def __init__(self, metric: SectionTable, imperial: SectionTable):
        only_metric = set(metric.by_name) - set(imperial.by_name)
        only_imperial = set(imperial.by_name) - set(metric.by_name)
        if only_metric or only_imperial:
            raise ValueError(
                "Metric and imperial section tables differ: "
                f"only metric={sorted(only_metric)}, only imperial={sorted(only_imperial)}"
            )
        self._tables: Dict[str, SectionTable] = {METRIC: metric, IMPERIAL: imperial}

    def table(self, units: str) -> SectionTable:
        try:
            return self._tables[units]
        except KeyError:
            raise ValueError(f"Unknown unit system: {units!r}") from None

    def sections(self, units: str) -> List[BeamSection]:
        return list(self.table(units).sections)

    def names(self, units: str) -> List[str]:
        return self.table(units).names()

    def get(self, name: str, units: str) -> Optional[BeamSection]:
        return self.table(units).get(name)

    @classmethod
    def from_dir(cls, folder: str | Path) -> "SectionDB":
        folder = Path(folder)
        db = cls(
            metric=SectionTable.from_txt(folder / "sections_metric.txt"),
            imperial=SectionTable.from_txt(folder / "sections_imperial.txt"),
        )
        logger.info("Tablas de perfiles cargadas desde %s (%d perfiles)", folder, len(db.names(METRIC)))
        return db


def default_sections_dir() -> Path:
    """
    Carpeta de tablas dentro del paquete:
      src/fixed_beam/data/sections_*.txt
    """
    here = Path(__file__).resolve()
    return here.parents[1] / "data"


_DEFAULT_DB: Optional[SectionDB] = None


def default_section_db() -> SectionDB:
    global _DEFAULT_DB
    if _DEFAULT_DB is None:
        _DEFAULT_DB = SectionDB.from_dir(default_sections_dir())
    return _DEFAULT_DB


def get_section_by_name(name: str, units: str) -> Optional[BeamSection]:
    return default_section_db().get(name, units)
