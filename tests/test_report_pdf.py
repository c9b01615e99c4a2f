# path: tests/test_report_pdf.py
import logging
import os
import tempfile
from datetime import datetime

from fixed_beam.domain.inputs import BeamInput, STANDARD
from fixed_beam.engine.stress import compute
from fixed_beam.services.logging_setup import LOGGER_NAME, setup_logging
from fixed_beam.services.report_pdf import ReportHeader, export_report_pdf
from fixed_beam.view.renderer_deflection import save_deflection_png


def test_export_report_pdf_creates_file():
    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "report.pdf")
        inp = BeamInput(load=1000.0, span_length=4.0, modulus_of_elasticity=2e11, width=0.1, height=0.2)
        res = compute(inp)
        img = save_deflection_png(os.path.join(td, "d.png"), res, span_length=inp.span_length)

        header = ReportHeader(title="Test Report", project="Demo", date=datetime.now())
        export_report_pdf(out, header=header, beam_input=inp, result=res, images={"deflection": img})
        assert os.path.exists(out)
        assert os.path.getsize(out) > 0


def test_export_report_pdf_standard_and_invalid():
    with tempfile.TemporaryDirectory() as td:
        std = BeamInput(load=5000.0, span_length=6.0, modulus_of_elasticity=2e11,
                        beam_type=STANDARD, standard_section="W16x40")
        out = os.path.join(td, "std.pdf")
        export_report_pdf(out, ReportHeader(title="Standard"), std, compute(std), images={"deflection": "missing.png"})
        assert os.path.getsize(out) > 0

        bad = BeamInput(load=0.0, span_length=6.0, modulus_of_elasticity=2e11)
        out = os.path.join(td, "invalid.pdf")
        export_report_pdf(out, ReportHeader(title="Invalid"), bad, compute(bad))
        assert os.path.getsize(out) > 0


def test_setup_logging_is_idempotent():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    for h in saved:
        logger.removeHandler(h)
    try:
        with tempfile.TemporaryDirectory() as td:
            lg = setup_logging(log_dir=td, console=False)
            n = len(lg.handlers)
            assert setup_logging(log_dir=td, console=False) is lg
            assert len(lg.handlers) == n == 1
            assert os.path.exists(os.path.join(td, "app.log"))
            for h in list(lg.handlers):
                h.close()
                lg.removeHandler(h)
    finally:
        for h in saved:
            logger.addHandler(h)
