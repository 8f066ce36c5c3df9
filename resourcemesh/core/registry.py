"""
Central resource registry.

Owns every :class:`Resource` and :class:`Project` by id and applies the
allocation and maintenance rules across the two. Create one explicitly and
pass it to whoever needs it; there is no module-level instance.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from resourcemesh.config.policy import (
    DuplicatePolicy,
    ReallocationPolicy,
    normalize_duplicate_policy,
    normalize_reallocation_policy,
)
from resourcemesh.core.entities import Project, Resource, ResourceState, ResourceType
from resourcemesh.core.errors import (
    DuplicateKeyError,
    InvalidOperationError,
    ProjectNotFoundError,
    ResourceNotFoundError,
)
from resourcemesh.core.transaction_log import TransactionLog

logger = logging.getLogger(__name__)

ProjectRef = Union[Project, str]


class ResourceRegistry:
    """In-memory inventory of resources and projects."""

    def __init__(
        self,
        transaction_log: Optional[TransactionLog] = None,
        *,
        duplicate_policy: Union[str, DuplicatePolicy] = DuplicatePolicy.REJECT,
        reallocation_policy: Union[str, ReallocationPolicy] = ReallocationPolicy.PRESERVE,
    ):
        self.resources: Dict[str, Resource] = {}
        self.projects: Dict[str, Project] = {}
        self.transaction_log = transaction_log if transaction_log is not None else TransactionLog()

        resolved_duplicate = normalize_duplicate_policy(duplicate_policy)
        if resolved_duplicate is None:
            raise ValueError(f"Unknown duplicate policy '{duplicate_policy}'")
        resolved_reallocation = normalize_reallocation_policy(reallocation_policy)
        if resolved_reallocation is None:
            raise ValueError(f"Unknown reallocation policy '{reallocation_policy}'")
        self.duplicate_policy = resolved_duplicate
        self.reallocation_policy = resolved_reallocation

    @classmethod
    def from_config(cls, config) -> "ResourceRegistry":
        """Build a registry from a :class:`~resourcemesh.core.config.ResourceMeshConfig`."""
        log = TransactionLog(config.transaction_log.path, enabled=config.transaction_log.enabled)
        return cls(
            log,
            duplicate_policy=config.registry.duplicate_policy,
            reallocation_policy=config.registry.reallocation_policy,
        )

    # ------------------------------------------------------------------
    # Registration

    def _check_duplicate(self, kind: str, key: str, existing: Dict[str, object]) -> None:
        if key not in existing:
            return
        if self.duplicate_policy is DuplicatePolicy.REJECT:
            raise DuplicateKeyError(kind, key)
        logger.warning("%s '%s' already registered; overwriting", kind.capitalize(), key)

    def add_resource(self, resource_id: str, resource_type: Union[str, ResourceType]) -> Resource:
        """Register a new ``Idle`` resource under ``resource_id``."""
        try:
            kind = ResourceType(resource_type)
        except ValueError as exc:
            raise InvalidOperationError(
                f"Unknown resource type '{resource_type}'",
                hint=f"Use one of: {', '.join(t.value for t in ResourceType)}",
            ) from exc

        self._check_duplicate("resource", resource_id, self.resources)
        resource = Resource(resource_id, kind)
        self.resources[resource_id] = resource
        logger.info("Resource[%s] registered (type=%s)", resource_id, kind.value)
        self.log_transaction(f"Resource {resource_id} of type {kind.value} added.")
        return resource

    def add_project(self, project_id: str, name: str) -> Project:
        self._check_duplicate("project", project_id, self.projects)
        replaced = self.projects.get(project_id)
        if replaced is not None:
            # members of the replaced project must not resolve to the new one
            for resource in replaced.resources:
                if resource.allocated_project_id == project_id:
                    resource.allocate_to_project(None)
        project = Project(project_id, name)
        self.projects[project_id] = project
        logger.info("Project[%s] registered (name=%s)", project_id, name)
        self.log_transaction(f"Project {project_id} named {name} added.")
        return project

    # ------------------------------------------------------------------
    # Lookup

    def get_resource(self, resource_id: str) -> Resource:
        resource = self.resources.get(resource_id)
        if resource is None:
            raise ResourceNotFoundError(resource_id)
        return resource

    def get_project(self, project_id: str) -> Project:
        project = self.projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def find_resource(self, resource_id: str) -> Optional[Resource]:
        return self.resources.get(resource_id)

    def find_project(self, project_id: str) -> Optional[Project]:
        return self.projects.get(project_id)

    def list_resources(self) -> List[Resource]:
        return list(self.resources.values())

    def list_projects(self) -> List[Project]:
        return list(self.projects.values())

    # ------------------------------------------------------------------
    # State transitions

    def _resolve_project(self, project: ProjectRef) -> Project:
        if isinstance(project, Project):
            return project
        return self.get_project(project)

    def _apply_reallocation_policy(self, resource: Resource, target: Project) -> bool:
        """Return ``False`` when the resource must not be appended to ``target`` again."""
        previous_id = resource.allocated_project_id
        if previous_id is None or self.reallocation_policy is ReallocationPolicy.PRESERVE:
            return True

        if previous_id == target.id:
            return resource.id not in target

        if self.reallocation_policy is ReallocationPolicy.REJECT:
            raise InvalidOperationError(
                f"Resource {resource.id} is already allocated to project {previous_id}",
                hint="Set registry.reallocation_policy to 'detach' to move resources between projects",
            )

        previous = self.projects.get(previous_id)
        if previous is not None and previous.discard_resource(resource.id):
            logger.info("Resource[%s] detached from project %s", resource.id, previous_id)
        return True

    def allocate_resource_to_project(self, resource_id: str, project: ProjectRef) -> Resource:
        """
        Mark a resource ``InUse`` and append it to ``project``.

        ``project`` may be a :class:`Project` or a project id. Under the
        default ``preserve`` policy a resource already allocated elsewhere is
        appended again and keeps its stale membership in the previous project.
        """
        resource = self.get_resource(resource_id)
        target = self._resolve_project(project)

        should_append = self._apply_reallocation_policy(resource, target)
        resource.state = ResourceState.IN_USE
        if should_append:
            target.add_resource(resource)

        logger.info("Resource[%s] allocated to project %s (%s)", resource_id, target.id, target.name)
        self.log_transaction(f"Resource {resource_id} allocated to project {target.name}")
        return resource

    def use_resource(self, resource_id: str) -> Resource:
        """Mark a resource ``InUse`` without allocating it to a project."""
        resource = self.get_resource(resource_id)
        resource.state = ResourceState.IN_USE
        logger.info("Resource[%s] in use", resource_id)
        self.log_transaction(f"Resource {resource_id} is now in use.")
        return resource

    def maintain_resource(self, resource_id: str) -> bool:
        """
        Put an equipment resource under maintenance.

        Returns ``True`` on success. Workers cannot be maintained: the state is
        left untouched, nothing is written to the transaction log and
        ``False`` is returned.
        """
        resource = self.get_resource(resource_id)
        if resource.type is not ResourceType.EQUIPMENT:
            logger.info("Resource[%s] maintenance rejected: not equipment", resource_id)
            return False

        resource.state = ResourceState.UNDER_MAINTENANCE
        logger.info("Resource[%s] under maintenance", resource_id)
        self.log_transaction(f"Resource {resource_id} is under maintenance.")
        return True

    # ------------------------------------------------------------------
    # Reporting

    def display_resource_state(self, resource_id: str) -> str:
        resource = self.get_resource(resource_id)
        text = f"Resource {resource_id} is {resource.state.label}"
        if resource.state is ResourceState.UNDER_MAINTENANCE and resource.allocated_project_id is not None:
            project = self.projects.get(resource.allocated_project_id)
            if project is not None:
                text += f" and allocated to project {project.name}"
        return text + "."

    def log_transaction(self, message: str) -> None:
        self.transaction_log.write(message)

    def snapshot(self) -> dict:
        """Expose current state for inspection/testing."""
        return {
            "resources": [resource.to_dict() for resource in self.resources.values()],
            "projects": [project.to_dict() for project in self.projects.values()],
        }
