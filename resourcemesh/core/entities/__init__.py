"""
Domain entities used throughout the resourcemesh registry.
"""

from .project import Project  # noqa: F401
from .resource import Resource  # noqa: F401
from .types import ResourceState, ResourceType  # noqa: F401

__all__ = [
    "Project",
    "Resource",
    "ResourceState",
    "ResourceType",
]
