"""Helper utilities for the interactive menu."""

from .render import describe_result, render_projects, render_resources  # noqa: F401

__all__ = [
    "describe_result",
    "render_projects",
    "render_resources",
]
