# packages/geobounds-core/src/geobounds_core/config/logging.py
from __future__ import annotations

import logging
import sys
from typing import Optional

from geobounds_core.config.settings import get_settings


def configure_logging(level: Optional[str] = None, logger_name: Optional[str] = None) -> logging.Logger:
    """
    Stdout logging with a pipe-separated format.

    Level and format default to the GEOBOUNDS_LOG_LEVEL / GEOBOUNDS_LOG_FORMAT settings.
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.WARNING)

    handlers = [logging.StreamHandler(sys.stdout)]
    logging.basicConfig(
        level=log_level,
        format=settings.log_format,
        handlers=handlers,
    )

    logger = logging.getLogger(logger_name or "geobounds")
    logger.setLevel(log_level)
    return logger
