"""Configuration helpers for resourcemesh.

This module loads optional YAML configuration files to customize registry
behaviour such as duplicate and re-allocation policies.  Configuration
precedence:

1. Environment variable ``RESOURCEMESH_CONFIG`` pointing to a YAML file.
2. ``resourcemesh.yaml`` in the current working directory.
3. Built-in defaults bundled with the package (``config/default.yaml``).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from resourcemesh.config.policy import (
    DuplicatePolicy,
    ReallocationPolicy,
    normalize_duplicate_policy,
    normalize_reallocation_policy,
)
from resourcemesh.core.transaction_log import DEFAULT_LOG_PATH

__all__ = [
    "LoggingConfig",
    "RegistryConfig",
    "ResourceMeshConfig",
    "TransactionLogConfig",
    "build_config",
    "get_config",
    "load_config",
    "reset_config",
]


_ENV_VAR = "RESOURCEMESH_CONFIG"
_CWD_FILENAME = "resourcemesh.yaml"


@dataclass
class RegistryConfig:
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT
    reallocation_policy: ReallocationPolicy = ReallocationPolicy.PRESERVE


@dataclass
class TransactionLogConfig:
    path: str = DEFAULT_LOG_PATH
    enabled: bool = True


@dataclass
class LoggingConfig:
    level: str = "WARNING"

    @property
    def numeric_level(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class ResourceMeshConfig:
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    transaction_log: TransactionLogConfig = field(default_factory=TransactionLogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_config: Optional[ResourceMeshConfig] = None


def _resolve_config_path() -> Optional[Path]:
    env_path = os.environ.get(_ENV_VAR)
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate.is_file():
            return candidate

    cwd_file = Path.cwd() / _CWD_FILENAME
    if cwd_file.is_file():
        return cwd_file
    return None


def _read_yaml(path: Path) -> Dict[str, object]:
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return data


def _load_yaml_dict() -> Dict[str, object]:
    path = _resolve_config_path()
    if path is not None:
        return _read_yaml(path)

    # Fallback to bundled default configuration
    from importlib import resources

    text = resources.files("resourcemesh.config").joinpath("default.yaml").read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def _section(data: Dict[str, object], key: str) -> Dict[str, object]:
    node = data.get(key, {})
    if node is None:
        return {}
    if not isinstance(node, dict):
        raise ValueError(f"'{key}' section must be a mapping")
    return node


def _build_registry_config(node: Dict[str, object]) -> RegistryConfig:
    raw_duplicate = node.get("duplicate_policy", DuplicatePolicy.REJECT.value)
    duplicate = normalize_duplicate_policy(raw_duplicate)
    if duplicate is None:
        raise ValueError(
            f"Unknown duplicate_policy '{raw_duplicate}'. "
            f"Available: {', '.join(p.value for p in DuplicatePolicy)}"
        )

    raw_reallocation = node.get("reallocation_policy", ReallocationPolicy.PRESERVE.value)
    reallocation = normalize_reallocation_policy(raw_reallocation)
    if reallocation is None:
        raise ValueError(
            f"Unknown reallocation_policy '{raw_reallocation}'. "
            f"Available: {', '.join(p.value for p in ReallocationPolicy)}"
        )
    return RegistryConfig(duplicate_policy=duplicate, reallocation_policy=reallocation)


def _build_transaction_log_config(node: Dict[str, object]) -> TransactionLogConfig:
    path = str(node.get("path") or DEFAULT_LOG_PATH).strip()
    if not path:
        raise ValueError("'transaction_log.path' must be non-empty")
    enabled = node.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ValueError(f"'transaction_log.enabled' must be true or false, got {enabled!r}")
    return TransactionLogConfig(path=path, enabled=enabled)


def _build_logging_config(node: Dict[str, object]) -> LoggingConfig:
    level = str(node.get("level", "WARNING")).strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown logging level '{level}'")
    return LoggingConfig(level=level)


def build_config(data: Dict[str, object]) -> ResourceMeshConfig:
    """Validate a raw mapping (as parsed from YAML) into :class:`ResourceMeshConfig`."""
    return ResourceMeshConfig(
        registry=_build_registry_config(_section(data, "registry")),
        transaction_log=_build_transaction_log_config(_section(data, "transaction_log")),
        logging=_build_logging_config(_section(data, "logging")),
    )


def load_config(path: Union[str, Path]) -> ResourceMeshConfig:
    """Load configuration from an explicit file, bypassing the lookup chain and cache."""
    return build_config(_read_yaml(Path(path).expanduser()))


def get_config() -> ResourceMeshConfig:
    global _config
    if _config is None:
        _config = build_config(_load_yaml_dict())
    return _config


def reset_config() -> None:
    """Reset cached configuration (intended for tests)."""
    global _config
    _config = None
