"""
Common type definitions shared across entities and the registry.
"""

from __future__ import annotations

from enum import Enum


class ResourceType(str, Enum):
    """Closed set of inventory kinds."""

    WORKER = "worker"
    EQUIPMENT = "equipment"


class ResourceState(str, Enum):
    """Lifecycle states of a resource."""

    IDLE = "Idle"
    IN_USE = "InUse"
    UNDER_MAINTENANCE = "UnderMaintenance"

    @property
    def label(self) -> str:
        """Human-readable form used in state reports."""
        return _STATE_LABELS[self]


_STATE_LABELS = {
    ResourceState.IDLE: "Idle",
    ResourceState.IN_USE: "In Use",
    ResourceState.UNDER_MAINTENANCE: "under maintenance",
}
