# path: src/fixed_beam/services/logging_setup.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "fixed_beam"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(
    log_dir: str = "logs",
    log_name: str = "app.log",
    level: int = logging.INFO,
    *,
    console: bool = True,
) -> logging.Logger:
    """
    Logger raíz de la app ("fixed_beam"): archivo rotativo + consola.
    Los módulos usan logging.getLogger(__name__) y heredan estos handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Llamar dos veces no duplica handlers
    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)

    fmt = logging.Formatter(LOG_FORMAT)

    fh = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    if console:
        sh = logging.StreamHandler()
        sh.setLevel(level)
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    logger.info("Logging inicializado. Archivo: %s", log_path)
    return logger
