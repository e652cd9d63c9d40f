"""
Logging utilities for the Consign Tracker dashboard.

Every module obtains its logger through logger(__file__). Loggers hang off a
single "consign_tracker" parent that owns the handler, so the whole package
shares one format and one level, read from LOG_LEVEL.
"""

import logging
import os
from pathlib import Path

ROOT_LOGGER = "consign_tracker"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _root() -> logging.Logger:
    """Return the package parent logger, attaching its handler on first use."""
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the package logger for a module.

    Args:
        name: Module name or __file__ path; paths are reduced to the stem.

    Returns:
        A child of the "consign_tracker" logger, e.g. "consign_tracker.state".
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    root = _root()
    if name == ROOT_LOGGER:
        return root
    return root.getChild(name)
