"""Logging utilities for the resourcemesh CLI and embedding scripts."""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union


_HANDLER_NAME = "_resourcemesh_stream_handler"
PACKAGE_LOGGER = "resourcemesh"


def coerce_level(level: Union[int, str]) -> int:
    """Accept ``logging.INFO`` or ``"info"`` style levels."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level '{level}'")
    return value


def configure_runtime_logging(
    level: Union[int, str] = logging.INFO,
    *,
    include_timestamp: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Route resourcemesh log records to ``stream`` (stderr by default, so they
    stay apart from console output).

    Calling this twice reconfigures the handler installed by the first call
    instead of stacking a second one.
    """
    numeric_level = coerce_level(level)
    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s" if include_timestamp else "[%(levelname)s] %(message)s"
    formatter = logging.Formatter(fmt, datefmt="%H:%M:%S")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handler = next((h for h in package_logger.handlers if getattr(h, _HANDLER_NAME, False)), None)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        setattr(handler, _HANDLER_NAME, True)
        package_logger.addHandler(handler)
    elif stream is not None and isinstance(handler, logging.StreamHandler):
        handler.setStream(stream)

    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)
    package_logger.setLevel(numeric_level)
    return handler
