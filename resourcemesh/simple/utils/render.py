"""Rendering helpers for friendly CLI output."""

from __future__ import annotations

from typing import Any, Dict, List


def describe_result(result: Dict[str, Any], success_message: str) -> List[str]:
    """Turn a façade result dict into the lines printed by the menu."""
    if result.get("success"):
        return [success_message]
    lines = [f"Error: {result.get('error')}"]
    details = result.get("details")
    if details:
        lines.append(f"  - {details}")
    hint = result.get("hint")
    if hint:
        lines.append(f"  - hint: {hint}")
    return lines


def render_resources(resources: List[Dict[str, Any]]) -> List[str]:
    if not resources:
        return ["No resources registered."]
    lines = []
    for item in resources:
        project = item.get("allocated_project")
        suffix = f" project={project}" if project else ""
        lines.append(f"  • {item.get('id')} [{item.get('type')}] {item.get('state')}{suffix}")
    return lines


def render_projects(projects: List[Dict[str, Any]]) -> List[str]:
    if not projects:
        return ["No projects registered."]
    return [
        f"  • {item.get('id')} \"{item.get('name')}\" resources={', '.join(item.get('resources') or []) or '-'}"
        for item in projects
    ]
