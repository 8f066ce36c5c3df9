"""
SimpleResourceManager
---------------------

Provides a thin, caller-friendly wrapper around
:class:`resourcemesh.core.registry.ResourceRegistry`.

The registry raises typed exceptions on lookup misses and rejected adds; this
façade turns every outcome into a result dict so that interactive callers can
render it and carry on::

    {"success": True, "resource": {...}}
    {"success": False, "error": "Resource not found", "reason": "not_found", ...}
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from resourcemesh.core.config import ResourceMeshConfig, get_config
from resourcemesh.core.errors import ResourceMeshError
from resourcemesh.core.registry import ResourceRegistry

logger = logging.getLogger(__name__)

Result = Dict[str, Any]


class SimpleResourceManager:
    """
    Result-dict façade over a single registry.

    Typical usage::

        manager = SimpleResourceManager()
        manager.add_resource("R1", "equipment")
        manager.add_project("P1", "Alpha")
        manager.allocate("R1", "P1")
        manager.display_state("R1")["text"]
    """

    def __init__(
        self,
        registry: Optional[ResourceRegistry] = None,
        *,
        config: Optional[ResourceMeshConfig] = None,
    ) -> None:
        if registry is None:
            registry = ResourceRegistry.from_config(config or get_config())
        self._registry = registry

    @property
    def registry(self) -> ResourceRegistry:
        return self._registry

    @staticmethod
    def _call(operation: str, func: Callable[[], Result]) -> Result:
        try:
            return func()
        except ResourceMeshError as exc:
            logger.debug("%s failed: %s (%s)", operation, exc.message, exc.reason)
            return exc.to_dict()

    # ---------------------------------------------------------------------
    # Registration
    # ---------------------------------------------------------------------

    def add_resource(self, resource_id: str, resource_type: str) -> Result:
        def _run() -> Result:
            resource = self._registry.add_resource(resource_id, resource_type)
            return {"success": True, "resource": resource.to_dict()}

        return self._call("add_resource", _run)

    def add_project(self, project_id: str, name: str) -> Result:
        def _run() -> Result:
            project = self._registry.add_project(project_id, name)
            return {"success": True, "project": project.to_dict()}

        return self._call("add_project", _run)

    # ---------------------------------------------------------------------
    # State transitions
    # ---------------------------------------------------------------------

    def use_resource(self, resource_id: str) -> Result:
        def _run() -> Result:
            resource = self._registry.use_resource(resource_id)
            return {"success": True, "resource": resource.to_dict()}

        return self._call("use_resource", _run)

    def maintain_resource(self, resource_id: str) -> Result:
        def _run() -> Result:
            accepted = self._registry.maintain_resource(resource_id)
            resource = self._registry.get_resource(resource_id)
            if not accepted:
                return {
                    "success": False,
                    "error": f"Resource {resource_id} is not equipment and cannot be maintained.",
                    "reason": "invalid_operation",
                    "resource": resource.to_dict(),
                }
            return {"success": True, "resource": resource.to_dict()}

        return self._call("maintain_resource", _run)

    def allocate(self, resource_id: str, project_id: str) -> Result:
        def _run() -> Result:
            project = self._registry.get_project(project_id)
            resource = self._registry.allocate_resource_to_project(resource_id, project)
            return {
                "success": True,
                "resource": resource.to_dict(),
                "project": project.to_dict(),
            }

        return self._call("allocate", _run)

    # ---------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------

    def display_state(self, resource_id: str) -> Result:
        def _run() -> Result:
            return {"success": True, "text": self._registry.display_resource_state(resource_id)}

        return self._call("display_state", _run)

    def list_resources(self) -> Result:
        return {"success": True, "resources": [r.to_dict() for r in self._registry.list_resources()]}

    def list_projects(self) -> Result:
        return {"success": True, "projects": [p.to_dict() for p in self._registry.list_projects()]}
