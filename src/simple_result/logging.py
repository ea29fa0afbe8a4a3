from __future__ import annotations

import logging
import os

logger = logging.getLogger(__package__)
if not logger.handlers:
    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

level = os.getenv("SIMPLE_RESULT_LOG_LEVEL", "INFO").upper()
logger.setLevel(level if level in logging.getLevelNamesMapping() else logging.INFO)
