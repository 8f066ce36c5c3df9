"""
High-level, caller-friendly façade for resourcemesh.

This package exposes a wrapper that reports every registry outcome as a
result dict instead of raising, which is what the interactive menu needs.
"""

from .client import SimpleResourceManager  # noqa: F401

__all__ = ["SimpleResourceManager"]
