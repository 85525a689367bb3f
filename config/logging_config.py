"""Logging setup shared by the Streamlit entry point."""

import logging
import sys

from config.defaults import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a single stdout handler to the root logger.

    Streamlit re-executes the script on every interaction, so existing
    handlers are cleared before the new one is added.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if root.hasHandlers():
        root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return root
