"""
Core package bootstrap for the resourcemesh registry.

Re-exports the primary classes so callers can simply do::

    from resourcemesh.core import ResourceRegistry
"""

from __future__ import annotations

from resourcemesh.core.entities import Project, Resource, ResourceState, ResourceType
from resourcemesh.core.errors import (
    DuplicateKeyError,
    InvalidOperationError,
    NotFoundError,
    ProjectNotFoundError,
    ResourceMeshError,
    ResourceNotFoundError,
)
from resourcemesh.core.registry import ResourceRegistry
from resourcemesh.core.transaction_log import TransactionLog

__all__ = [
    "DuplicateKeyError",
    "InvalidOperationError",
    "NotFoundError",
    "Project",
    "ProjectNotFoundError",
    "Resource",
    "ResourceMeshError",
    "ResourceNotFoundError",
    "ResourceRegistry",
    "ResourceState",
    "ResourceType",
    "TransactionLog",
]
