"""
Logging configuration for the customer service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it runs.  It also aligns
uvicorn's own loggers with the service: they follow the configured
level, and per‑request access lines can be switched off without
touching application logs.  The uvicorn levels are applied on every
call, so a second ``create_app`` with different settings still takes
effect.
"""

import logging
from pathlib import Path
from typing import Optional

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _configure_uvicorn(level: int, access_log: bool) -> None:
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)
    if not access_log:
        logging.getLogger("uvicorn.access").setLevel(max(level, logging.WARNING))


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, access_log: bool = True) -> None:
    """Configure the root logger and uvicorn's loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    access_log : bool
        Whether uvicorn's per‑request access lines are emitted.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    _configure_uvicorn(numeric_level, access_log)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
