"""
Logging for the portfolio site.

Everything goes through the root logger: the card and settings
services log each mutation, the store logs read fallbacks and failed
writes, and the ``StorageError`` handler logs the failing request.
``LOG_LEVEL`` picks the level and ``LOG_FILE`` adds a file next to the
console output; a relative ``LOG_FILE`` lives under the project root,
like the data directory.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import BASE_DIR

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# python-multipart logs every parsed form part at DEBUG.
QUIET_LOGGERS = ("multipart", "python_multipart")


def _log_path(logfile: str) -> Path:
    path = Path(logfile)
    if not path.is_absolute():
        path = BASE_DIR / path
    return path.resolve()


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the site.

    Handlers are attached only once, so building a second app (as the
    test suite does) does not duplicate every line.  Upload parsing
    stays at WARNING whatever ``level`` says.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        Extra log file.  Its directory is created when missing.
    """
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = _log_path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
