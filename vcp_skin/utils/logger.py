"""Central logging configuration for the library."""
from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "VCP_SKIN_LOG_LEVEL"
_DEFAULT_LEVEL = logging.INFO
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else _DEFAULT_LEVEL
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_level_from_env(), format=_LOG_FORMAT)
    return logger


def set_verbose(verbose: bool) -> None:
    """Switch the root logger between DEBUG and the configured level."""
    logging.getLogger().setLevel(logging.DEBUG if verbose else _level_from_env())
