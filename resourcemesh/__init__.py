"""
resourcemesh package.

Tracks workers, equipment and projects, and records which resource is
allocated to which project.
"""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "ResourceRegistry",
    "SimpleResourceManager",
    "TransactionLog",
    "__version__",
]


try:
    __version__ = version("resourcemesh-core")
except PackageNotFoundError:
    __version__ = "0.1.0"


_LAZY_TARGETS = {
    "ResourceRegistry": ("resourcemesh.core.registry", "ResourceRegistry"),
    "SimpleResourceManager": ("resourcemesh.simple", "SimpleResourceManager"),
    "TransactionLog": ("resourcemesh.core.transaction_log", "TransactionLog"),
}


def __getattr__(name: str):
    """Resolve public symbols on first access."""
    target = _LAZY_TARGETS.get(name)
    if target is None:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

    module_name, attribute = target
    module = import_module(module_name)
    value = getattr(module, attribute)
    globals()[name] = value  # cache for subsequent lookups
    return value
