"""Logging for **RabbitHole**.

All modules log through children of the ``RabbitHole`` logger::

    from rabbit_hole.logger import get_logger
    log = get_logger("crawler")      # -> "RabbitHole.crawler"

Console output goes to *stderr*, so ``rabbit-hole links`` stays pipeable.
The CLI calls :func:`init_logging` once with the level/file/format options;
importing the package only installs a quiet WARNING-level console handler.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "RabbitHole"

_LevelT = Union[int, str]


def init_logging(
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Extra rotating logfile (5 MiB × 3); *None* → stderr only.
    log_format
        Format string for :class:`logging.Formatter`.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    lg.addHandler(console)

    if log_file is not None:
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        lg.addHandler(file_handler)

    lg.propagate = False
    return lg


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the project logger or its child ``RabbitHole.<name>``."""
    root = logging.getLogger(_LOGGER_NAME)
    return root.getChild(name) if name else root


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "get_logger"]
