"""Utility helpers for resourcemesh."""

from .logging import coerce_level, configure_runtime_logging  # noqa: F401

__all__ = [
    "coerce_level",
    "configure_runtime_logging",
]
