"""Logging configuration helpers."""

import logging


def configure_logging(debug: bool = False) -> None:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger("nutrition_query")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
