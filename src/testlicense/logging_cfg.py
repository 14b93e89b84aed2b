from __future__ import annotations

import logging
import os

LOGGER_NAME = "testlicense"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging() -> logging.Logger:
    """
    Configure the package logger from LOG_LEVEL and LOG_FILE.

    Only the "testlicense" logger is touched; the root logger and any
    handlers the host process installed are left alone. Records go to
    LOG_FILE when set and are dropped otherwise, so the command line's
    stdout/stderr carry nothing but its own result.
    """
    # 0 = silent (default), 1 = INFO, 2 = DEBUG
    level_map = {"0": logging.CRITICAL, "1": logging.INFO, "2": logging.DEBUG}
    lvl = level_map.get(os.getenv("LOG_LEVEL", "0"), logging.CRITICAL)

    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    handler: logging.Handler
    log_file = os.getenv("LOG_FILE")
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(lvl)
    logger.propagate = False
    return logger
