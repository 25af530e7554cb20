from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

from . import paths

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Union[str, int, None]) -> int:
    """Map a level name (or number) to a logging level.

    SHIRUR_LOG_LEVEL in the environment wins over the argument so a deployed
    suggestion service can be made chatty without touching its config.
    """
    override = os.getenv("SHIRUR_LOG_LEVEL")
    if override:
        level = override
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    return getattr(logging, str(level).upper(), logging.INFO)


def get_logger(
    name: str,
    level: Union[str, int, None] = "INFO",
    to_file: bool = False,
    file_key: str = "artifacts.logs",
) -> logging.Logger:
    """Create or retrieve a configured logger.

    - level: string level (e.g., INFO, DEBUG)
    - to_file: if True, also write logs to <file_key dir>/<name>.log
    - file_key: dot key into configs/paths.yaml to locate the logs directory
    """
    logger = logging.getLogger(name)
    logger.propagate = False

    # Repeated calls replace handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    lvl = resolve_level(level)
    logger.setLevel(lvl)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream=sys.stdout)]
    log_path: Optional[str] = None
    if to_file:
        log_path = paths.expand(file_key, f"{name}.log")
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(lvl)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_path:
        logger.debug("Logging to %s", log_path)
    return logger
