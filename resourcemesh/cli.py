"""
Interactive console menu for resourcemesh.

Usage::

    resourcemesh [--config resourcemesh.yaml] [--log-file PATH] [--log-level DEBUG]
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

import yaml

from resourcemesh.core.config import get_config, load_config
from resourcemesh.core.registry import ResourceRegistry
from resourcemesh.core.utils import configure_runtime_logging
from resourcemesh.simple import SimpleResourceManager
from resourcemesh.simple.utils import describe_result, render_projects, render_resources

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = (
    "1. Add Resource\n"
    "2. Use Resource\n"
    "3. Maintain Resource\n"
    "4. Add Project\n"
    "5. Allocate Resource to Project\n"
    "6. Display Resource State\n"
    "7. Exit\n"
    "8. List Resources\n"
    "9. List Projects\n"
    "Enter your choice: "
)

EXIT_CHOICE = "7"

_TYPE_CHOICES = {
    "1": "worker",
    "2": "equipment",
    "worker": "worker",
    "equipment": "equipment",
}


class _EndOfInput(Exception):
    pass


class MenuSession:
    """One run of the interactive loop against a single manager."""

    def __init__(
        self,
        manager: SimpleResourceManager,
        *,
        input_fn: InputFn = input,
        output: OutputFn = print,
    ):
        self.manager = manager
        self._input = input_fn
        self._output = output
        self._handlers = {
            "1": self.add_resource,
            "2": self.use_resource,
            "3": self.maintain_resource,
            "4": self.add_project,
            "5": self.allocate,
            "6": self.display_state,
            "8": self.list_resources,
            "9": self.list_projects,
        }

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except EOFError as exc:
            raise _EndOfInput() from exc

    def _emit(self, lines: Sequence[str]) -> None:
        for line in lines:
            self._output(line)

    def _ask_id(self, prompt: str) -> Optional[str]:
        value = self._ask(prompt)
        if not value:
            self._output("Error: id must not be empty.")
            return None
        return value

    # ------------------------------------------------------------------
    # Menu actions

    def add_resource(self) -> None:
        resource_id = self._ask_id("Enter Resource ID to add: ")
        if resource_id is None:
            return
        raw_type = self._ask("Select Resource Type (1. Worker, 2. Equipment): ").lower()
        resource_type = _TYPE_CHOICES.get(raw_type)
        if resource_type is None:
            self._output(f"Error: Unknown resource type '{raw_type}'.")
            return
        result = self.manager.add_resource(resource_id, resource_type)
        self._emit(describe_result(result, f"Resource {resource_id} of type {resource_type} added."))

    def use_resource(self) -> None:
        resource_id = self._ask_id("Enter Resource ID to use: ")
        if resource_id is None:
            return
        result = self.manager.use_resource(resource_id)
        self._emit(describe_result(result, f"Resource {resource_id} is now in use."))

    def maintain_resource(self) -> None:
        resource_id = self._ask_id("Enter Resource ID to maintain: ")
        if resource_id is None:
            return
        result = self.manager.maintain_resource(resource_id)
        if result.get("reason") == "invalid_operation":
            self._output(result["error"])
            return
        self._emit(describe_result(result, f"Resource {resource_id} is under maintenance."))

    def add_project(self) -> None:
        project_id = self._ask_id("Enter Project ID to add: ")
        if project_id is None:
            return
        name = self._ask("Enter Project Name: ")
        result = self.manager.add_project(project_id, name)
        self._emit(describe_result(result, f"Project {project_id} named {name} added."))

    def allocate(self) -> None:
        resource_id = self._ask_id("Enter Resource ID to allocate: ")
        if resource_id is None:
            return
        project_id = self._ask_id("Enter Project ID to allocate to: ")
        if project_id is None:
            return
        result = self.manager.allocate(resource_id, project_id)
        self._emit(describe_result(result, f"Resource {resource_id} allocated to project {project_id}."))

    def display_state(self) -> None:
        resource_id = self._ask_id("Enter Resource ID to display state: ")
        if resource_id is None:
            return
        result = self.manager.display_state(resource_id)
        self._emit(describe_result(result, result.get("text", "")))

    def list_resources(self) -> None:
        self._emit(render_resources(self.manager.list_resources()["resources"]))

    def list_projects(self) -> None:
        self._emit(render_projects(self.manager.list_projects()["projects"]))

    # ------------------------------------------------------------------

    def run(self) -> int:
        while True:
            try:
                choice = self._ask(MENU)
                if choice == EXIT_CHOICE:
                    self._output("Exiting...")
                    return 0
                handler = self._handlers.get(choice)
                if handler is None:
                    self._output("Invalid choice. Please try again.")
                    continue
                handler()
            except _EndOfInput:
                self._output("Exiting...")
                return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resourcemesh", description="Track resources and their project allocations.")
    parser.add_argument("--config", help="YAML configuration file (overrides $RESOURCEMESH_CONFIG)")
    parser.add_argument("--log-file", help="Transaction log path (overrides transaction_log.path)")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or WARNING")
    return parser


def main(
    argv: Optional[List[str]] = None,
    *,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_config()
    except (OSError, yaml.YAMLError, ValueError) as exc:
        parser.error(f"cannot load configuration: {exc}")
    if args.log_file:
        config = replace(config, transaction_log=replace(config.transaction_log, path=args.log_file))
    try:
        configure_runtime_logging(args.log_level or config.logging.level)
    except ValueError as exc:
        parser.error(str(exc))

    registry = ResourceRegistry.from_config(config)
    logger.debug("Transaction log at %s", registry.transaction_log.path)
    session = MenuSession(SimpleResourceManager(registry), input_fn=input_fn, output=output)
    return session.run()


if __name__ == "__main__":
    raise SystemExit(main())
