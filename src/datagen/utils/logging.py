"""Logging utilities.

All loggers live under the ``datagen`` namespace.  The package root logger
carries a :class:`logging.NullHandler` so that library use stays silent until
an application (or the CLI) calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]

ROOT_LOGGER = "datagen"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace.

    ``name`` may be a module ``__name__`` already starting with ``datagen`` or
    a short suffix such as ``"cli"``.
    """

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str | int = logging.WARNING, *, verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Repeated calls only adjust the level.  ``verbose`` forces ``DEBUG``.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    resolved = logging.DEBUG if verbose else level
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
    logger.setLevel(resolved)

    if not any(getattr(h, "_datagen", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._datagen = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
