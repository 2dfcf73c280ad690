"""
Logging setup for the API process.

Modules log through ``logging.getLogger(__name__)``; this only attaches
a console handler to the root logger, once.
"""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Does nothing if the root logger already has handlers, which happens
    under pytest or when ``create_app`` is called more than once.

    Args:
        level: Logging level name, case insensitive. Unknown names fall
            back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
