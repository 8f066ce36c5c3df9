"""
Shared pytest fixtures.
"""

from __future__ import annotations

import logging

import pytest

from resourcemesh.core import ResourceRegistry, TransactionLog
from resourcemesh.core.config import reset_config

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s", force=True)
logging.getLogger("resourcemesh").setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep config lookup and stray log files away from the developer's cwd."""
    monkeypatch.delenv("RESOURCEMESH_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    package_logger = logging.getLogger("resourcemesh")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    reset_config()
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "resource_log.txt"


@pytest.fixture
def transaction_log(log_path):
    return TransactionLog(log_path)


@pytest.fixture
def registry(transaction_log):
    """Provide a fresh registry per test."""
    return ResourceRegistry(transaction_log)
