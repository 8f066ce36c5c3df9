"""
Project entity definitions.
"""

from __future__ import annotations

from typing import Dict, List

from resourcemesh.core.entities.resource import Resource


class Project:
    """Named unit of work holding the resources allocated to it, in allocation order."""

    def __init__(self, project_id: str, name: str):
        self._id = project_id
        self._name = name
        self._resources: List[Resource] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def resources(self) -> List[Resource]:
        return list(self._resources)

    @property
    def resource_ids(self) -> List[str]:
        return [resource.id for resource in self._resources]

    def add_resource(self, resource: Resource) -> None:
        """Append ``resource`` and point its back-reference at this project."""
        self._resources.append(resource)
        resource.allocate_to_project(self._id)

    def discard_resource(self, resource_id: str) -> bool:
        """
        Drop every occurrence of ``resource_id`` from this project.

        Cross-project exclusivity is the registry's job; this helper only
        exists so the registry can detach a resource before moving it.
        """
        before = len(self._resources)
        self._resources = [item for item in self._resources if item.id != resource_id]
        return len(self._resources) != before

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self._id,
            "name": self._name,
            "resources": self.resource_ids,
        }

    def __contains__(self, resource: object) -> bool:
        if isinstance(resource, Resource):
            return any(item is resource for item in self._resources)
        return resource in self.resource_ids

    def __repr__(self) -> str:
        return f"Project(id={self._id!r}, name={self._name!r}, resources={self.resource_ids})"
