import logging
import os
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "inventory_slots"
LOG_LEVEL_ENV = "INVENTORY_SLOTS_LOG_LEVEL"


def configure_logging(
    default_level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    propagate: bool = False,
) -> logging.Logger:
    """Attach a handler to the ``inventory_slots`` logger and set its level.

    Every module in the package logs through a child of this logger
    (``inventory_slots.inventory.inventory``, ``inventory_slots.config.loader``),
    so slot insertions, merges and rejected adds all flow through the handler
    installed here. The root logger is left alone.

    INVENTORY_SLOTS_LOG_LEVEL overrides ``default_level`` when set to a known
    level name. Calling this again replaces the handler instead of stacking
    another one.
    """
    level = default_level
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        )
    )

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(level)
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = propagate
    return pkg_logger
