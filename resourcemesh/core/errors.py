"""Custom exceptions for resourcemesh."""

from __future__ import annotations

from typing import Optional


class ResourceMeshError(Exception):
    """Base exception for all resourcemesh errors."""

    reason: str = "error"
    default_hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.details = details
        self.hint = hint or self.default_hint
        super().__init__(message)

    def to_dict(self) -> dict:
        """Render the error as a failed operation result."""
        return {
            "success": False,
            "error": self.message,
            "reason": self.reason,
            "details": self.details,
            "hint": self.hint,
        }


# Lookup errors
class NotFoundError(ResourceMeshError):
    """Lookup miss on a resource or project id."""

    reason = "not_found"


class ResourceNotFoundError(NotFoundError):
    """No resource registered under the requested id."""

    default_hint = "Add the resource first (menu option 1)"

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__("Resource not found", details=f"id={resource_id}")


class ProjectNotFoundError(NotFoundError):
    """No project registered under the requested id."""

    default_hint = "Add the project first (menu option 4)"

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__("Project not found", details=f"id={project_id}")


# Registration errors
class DuplicateKeyError(ResourceMeshError):
    """An add was issued with an id that is already registered."""

    reason = "duplicate_key"
    default_hint = "Pick a different id, or set registry.duplicate_policy to 'overwrite'"

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} '{key}' already exists")


# Operation errors
class InvalidOperationError(ResourceMeshError, ValueError):
    """The requested operation is not legal for the target entity."""

    reason = "invalid_operation"
