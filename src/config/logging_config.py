"""
Pig Dice - Logging Configuration

Attaches a single stream handler to the ``src`` logger hierarchy.
"""

import logging

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "pig-dice"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured log level to the package loggers.

    Safe to call more than once; the handler is only added the first time.

    Args:
        settings: Settings to use (cached settings when omitted)

    Returns:
        The package root logger
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}.")

    root = logging.getLogger("src")
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root
