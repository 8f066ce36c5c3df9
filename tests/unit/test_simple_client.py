"""
Unit tests for the SimpleResourceManager result-dict façade.
"""

from __future__ import annotations

import pytest

from resourcemesh.core import ResourceRegistry
from resourcemesh.simple import SimpleResourceManager


@pytest.fixture
def manager(registry):
    return SimpleResourceManager(registry)


def test_add_and_allocate(manager):
    assert manager.add_resource("R1", "equipment")["success"] is True
    project = manager.add_project("P1", "Alpha")
    assert project == {"success": True, "project": {"id": "P1", "name": "Alpha", "resources": []}}

    result = manager.allocate("R1", "P1")

    assert result["success"] is True
    assert result["resource"]["state"] == "InUse"
    assert result["resource"]["allocated_project"] == "P1"
    assert result["project"]["resources"] == ["R1"]


def test_not_found_becomes_result(manager):
    result = manager.display_state("ghost")

    assert result["success"] is False
    assert result["reason"] == "not_found"
    assert result["error"] == "Resource not found"
    assert result["details"] == "id=ghost"
    assert result["hint"]


def test_allocate_to_missing_project(manager):
    manager.add_resource("R1", "worker")

    result = manager.allocate("R1", "nope")

    assert result["success"] is False
    assert result["error"] == "Project not found"


def test_duplicate_becomes_result(manager):
    manager.add_project("P1", "Alpha")

    result = manager.add_project("P1", "Again")

    assert result["success"] is False
    assert result["reason"] == "duplicate_key"


def test_maintenance_rejection_for_worker(manager):
    manager.add_resource("W1", "worker")

    result = manager.maintain_resource("W1")

    assert result["success"] is False
    assert result["reason"] == "invalid_operation"
    assert result["error"] == "Resource W1 is not equipment and cannot be maintained."
    assert result["resource"]["state"] == "Idle"


def test_maintenance_success(manager):
    manager.add_resource("E1", "equipment")

    result = manager.maintain_resource("E1")

    assert result["success"] is True
    assert result["resource"]["state"] == "UnderMaintenance"


def test_use_and_display(manager):
    manager.add_resource("W1", "worker")

    assert manager.use_resource("W1")["success"] is True
    assert manager.display_state("W1") == {"success": True, "text": "Resource W1 is In Use."}


def test_listings(manager):
    manager.add_resource("R1", "equipment")
    manager.add_project("P1", "Alpha")

    assert [r["id"] for r in manager.list_resources()["resources"]] == ["R1"]
    assert [p["id"] for p in manager.list_projects()["projects"]] == ["P1"]


def test_default_registry_follows_config(tmp_path, monkeypatch):
    config_file = tmp_path / "resourcemesh.yaml"
    config_file.write_text("registry:\n  duplicate_policy: overwrite\n", encoding="utf-8")
    monkeypatch.setenv("RESOURCEMESH_CONFIG", str(config_file))

    manager = SimpleResourceManager()

    assert isinstance(manager.registry, ResourceRegistry)
    manager.add_resource("R1", "worker")
    assert manager.add_resource("R1", "equipment")["success"] is True
