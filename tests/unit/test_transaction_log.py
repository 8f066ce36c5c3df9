"""
Unit tests for the append-only transaction log and what the registry writes to it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from resourcemesh.core import ResourceRegistry, ResourceState, TransactionLog


def test_write_appends_lines(transaction_log, log_path):
    assert transaction_log.write("first") is True
    assert transaction_log.write("second") is True

    assert log_path.read_text(encoding="utf-8") == "first\nsecond\n"
    assert transaction_log.read_lines() == ["first", "second"]


def test_read_lines_without_file(tmp_path):
    log = TransactionLog(tmp_path / "absent.txt")
    assert log.read_lines() == []


def test_disabled_log_writes_nothing(tmp_path):
    path = tmp_path / "disabled.txt"
    log = TransactionLog(path, enabled=False)

    assert log.write("ignored") is False
    assert not path.exists()


def test_write_failure_is_reported_not_raised(tmp_path, caplog):
    # a directory cannot be opened for appending
    log = TransactionLog(tmp_path)

    with caplog.at_level(logging.ERROR, logger="resourcemesh"):
        assert log.write("lost") is False

    assert any("transaction log" in record.getMessage() for record in caplog.records)


def test_registry_operations_survive_log_failure(tmp_path):
    registry = ResourceRegistry(TransactionLog(tmp_path))

    registry.add_resource("R1", "equipment")
    registry.add_project("P1", "Alpha")
    registry.allocate_resource_to_project("R1", "P1")

    assert registry.get_resource("R1").state is ResourceState.IN_USE
    assert registry.get_project("P1").resource_ids == ["R1"]


def test_registry_transaction_lines(registry, transaction_log):
    registry.add_resource("R1", "equipment")
    registry.add_resource("W1", "worker")
    registry.add_project("P1", "Alpha")
    registry.allocate_resource_to_project("R1", "P1")
    registry.use_resource("W1")
    registry.maintain_resource("R1")

    assert transaction_log.read_lines() == [
        "Resource R1 of type equipment added.",
        "Resource W1 of type worker added.",
        "Project P1 named Alpha added.",
        "Resource R1 allocated to project Alpha",
        "Resource W1 is now in use.",
        "Resource R1 is under maintenance.",
    ]


def test_rejected_maintenance_is_not_logged(registry, transaction_log):
    registry.add_resource("W1", "worker")

    registry.maintain_resource("W1")

    assert transaction_log.read_lines() == ["Resource W1 of type worker added."]


def test_lookups_do_not_log(registry, transaction_log):
    registry.add_resource("R1", "equipment")

    registry.get_resource("R1")
    registry.display_resource_state("R1")

    assert transaction_log.read_lines() == ["Resource R1 of type equipment added."]


def test_undecodable_input_is_escaped_in_log(registry, transaction_log):
    """终端输入中的非法 UTF-8 (surrogateescape) 不应影响业务操作"""
    project = registry.add_project("P1", "Al\udcffpha")
    registry.add_resource("R1", "equipment")

    registry.allocate_resource_to_project("R1", project)

    assert registry.get_resource("R1").allocated_project_id == "P1"
    lines = transaction_log.read_lines()
    assert lines[0] == "Project P1 named Al\\udcffpha added."
    assert lines[-1] == "Resource R1 allocated to project Al\\udcffpha"


def test_non_os_write_failure_is_reported_not_raised(registry, monkeypatch, caplog):
    def _broken_open(self, *args, **kwargs):
        raise UnicodeEncodeError("utf-8", "x", 0, 1, "cannot encode")

    registry.add_resource("R1", "equipment")
    project = registry.add_project("P1", "Alpha")
    monkeypatch.setattr(Path, "open", _broken_open)

    with caplog.at_level(logging.ERROR, logger="resourcemesh"):
        registry.allocate_resource_to_project("R1", project)

    assert registry.get_resource("R1").state is ResourceState.IN_USE
    assert project.resource_ids == ["R1"]
    assert any("transaction log" in record.getMessage() for record in caplog.records)
