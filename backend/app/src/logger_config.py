"""Shared logger factory with the uvicorn console formatter."""

import logging
import os

import uvicorn

FORMAT = "%(levelprefix)s %(asctime)s [%(threadName)s] [%(name)s] %(message)s"


def get_logger(name: str = __name__, level: str | None = None) -> logging.Logger:
    """Return a named logger, attaching the console handler only once."""
    resolved = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logger = logging.getLogger(name)
    logger.setLevel(resolved)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(resolved)
        formatter = uvicorn.logging.DefaultFormatter(
            FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def configure_logging(level: str | None = None) -> None:
    """Give the module loggers (``summary.*``, ``providers.*``) a root console handler."""
    logging.basicConfig(level=(level or os.getenv("LOG_LEVEL") or "INFO").upper())
