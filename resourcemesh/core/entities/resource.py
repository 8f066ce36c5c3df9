"""
Resource entity definitions.
"""

from __future__ import annotations

from typing import Dict, Optional

from resourcemesh.core.entities.types import ResourceState, ResourceType


class Resource:
    """
    A single unit of inventory (a worker or a piece of equipment).

    The entity does not validate state transitions; the registry decides which
    transitions are legal for a given operation. The allocated project is kept
    as an id only, the registry resolves it when a name is needed.
    """

    def __init__(self, resource_id: str, resource_type: ResourceType):
        self._id = resource_id
        self._type = ResourceType(resource_type)
        self._state = ResourceState.IDLE
        self._allocated_project_id: Optional[str] = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def type(self) -> ResourceType:
        return self._type

    @property
    def state(self) -> ResourceState:
        return self._state

    @state.setter
    def state(self, new_state: ResourceState) -> None:
        """
        Store ``new_state`` coerced to :class:`ResourceState`.

        Plain strings such as ``"Idle"`` are accepted; a name outside the enum
        raises ``ValueError``. Whether the transition is allowed is not checked.
        """
        self._state = ResourceState(new_state)

    @property
    def allocated_project_id(self) -> Optional[str]:
        return self._allocated_project_id

    def allocate_to_project(self, project_id: Optional[str]) -> None:
        self._allocated_project_id = project_id

    def to_dict(self) -> Dict[str, object]:
        """Serialize resource metadata for rendering."""
        return {
            "id": self._id,
            "type": self._type.value,
            "state": self._state.value,
            "allocated_project": self._allocated_project_id,
        }

    def __repr__(self) -> str:
        return (
            f"Resource(id={self._id!r}, type={self._type.value}, state={self._state.value}"
            + (f", project={self._allocated_project_id!r}" if self._allocated_project_id else "")
            + ")"
        )
