"""Logging configuration helpers."""

import logging

_BASE_FORMAT = "%(levelname)s: %(name)s: %(message)s"
# Supabase and OpenAI clients log every request through httpx at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "hpack")


def configure_logging(
    level: str | int = logging.INFO, *, timestamps: bool = False
) -> None:
    """Configure the fit_tracker logger with a single stream handler."""
    logger = logging.getLogger("fit_tracker")
    logger.setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    fmt = f"%(asctime)s {_BASE_FORMAT}" if timestamps else _BASE_FORMAT
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.propagate = False
