"""Substitute top-level variables referenced as ``{{name}}``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from ..data import DevfileData

VARIABLE_PATTERN = re.compile(r"\{\{(.*?)\}\}")


@dataclass
class VariableWarning:
    """Undefined variable names referenced by each entity, keyed by entity name."""

    commands: dict[str, list[str]] = field(default_factory=dict)
    components: dict[str, list[str]] = field(default_factory=dict)
    projects: dict[str, list[str]] = field(default_factory=dict)
    starter_projects: dict[str, list[str]] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.commands or self.components or self.projects or self.starter_projects)

    def lines(self) -> list[str]:
        """Human-readable description, one line per offending entity."""
        lines = []
        for label, entries in (
            ("commands", self.commands),
            ("components", self.components),
            ("projects", self.projects),
            ("starter projects", self.starter_projects),
        ):
            if entries:
                lines.append(
                    f"top-level variable warning - the following {label} "
                    "reference invalid variables:"
                )
                for name, keys in entries.items():
                    lines.append(f"{name}: {','.join(keys)}")
        return lines


def _substitute(value: Any, variables: dict[str, str], missing: list[str]) -> Any:
    if isinstance(value, str):

        def replace(match: re.Match) -> str:
            key = match.group(1).strip()
            if key in variables:
                return variables[key]
            if key not in missing:
                missing.append(key)
            return match.group(0)

        return VARIABLE_PATTERN.sub(replace, value)
    if isinstance(value, dict):
        return {key: _substitute(item, variables, missing) for key, item in value.items()}
    if isinstance(value, list):
        return [_substitute(item, variables, missing) for item in value]
    return value


def _replace_in(items: list, key_attr: str, variables: dict[str, str], found: dict[str, list[str]]) -> list:
    replaced = []
    for item in items:
        missing: list[str] = []
        raw = _substitute(item.model_dump(mode="json", exclude_none=True), variables, missing)
        if missing:
            found[getattr(item, key_attr)] = missing
        replaced.append(type(item).model_validate(raw))
    return replaced


def validate_and_replace_global_variables(data: DevfileData) -> VariableWarning:
    """Replace ``{{name}}`` references with top-level variable values.

    References to undefined variables are left in place and reported.

    Raises:
        UnsupportedBySchemaVersionError: on schema versions without variables.
    """
    variables = data.get_top_level_variables()
    warning = VariableWarning()
    content = data.content

    content.commands = _replace_in(content.commands, "id", variables, warning.commands)
    content.components = _replace_in(content.components, "name", variables, warning.components)
    content.projects = _replace_in(content.projects, "name", variables, warning.projects)
    content.starterProjects = _replace_in(
        content.starterProjects, "name", variables, warning.starter_projects
    )
    return warning
