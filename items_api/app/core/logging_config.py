"""
Logging configuration for the Items API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Every module then logs through
``logging.getLogger(__name__)``; the service layer logs failures through
the :class:`~items_api.app.core.log.AppLogger` port adapter, which writes
to the ``items_api`` logger configured here.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str, debug: bool = False) -> int:
    """Translate a level name into a ``logging`` constant.

    Unknown names fall back to ``INFO``.  ``debug=True`` always wins.
    """
    if debug:
        return logging.DEBUG
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> logging.Logger:
    """Configure the root logger once and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
        Relative paths are resolved against the current working directory.
    debug : bool
        Force the ``DEBUG`` level regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (test runner, or create_app called twice).
        return root

    root.setLevel(resolve_level(level, debug))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return root
