"""Resolve the populated member of component, command and project source unions."""

from __future__ import annotations

from ..models import (
    Command,
    CommandGroup,
    CommandType,
    Component,
    ComponentType,
    Project,
    ProjectSource,
    ProjectSourceType,
    StarterProject,
)
from .errors import InvalidSourceTypeError, UnknownVariantError

COMPONENT_TYPES = {
    "container": ComponentType.CONTAINER,
    "volume": ComponentType.VOLUME,
    "kubernetes": ComponentType.KUBERNETES,
    "openshift": ComponentType.OPENSHIFT,
    "plugin": ComponentType.PLUGIN,
    "custom": ComponentType.CUSTOM,
}

COMMAND_TYPES = {
    "exec": CommandType.EXEC,
    "apply": CommandType.APPLY,
    "composite": CommandType.COMPOSITE,
    "custom": CommandType.CUSTOM,
}

PROJECT_SOURCE_TYPES = {
    "git": ProjectSourceType.GIT,
    "zip": ProjectSourceType.ZIP,
    "custom": ProjectSourceType.CUSTOM,
}


def get_component_type(component: Component) -> ComponentType:
    """Return the variant of a component.

    Raises:
        UnknownVariantError: if no variant member is set.
    """
    members = component.populated_members()
    if members:
        return COMPONENT_TYPES[members[0]]
    raise UnknownVariantError("component", component.name)


def get_command_type(command: Command) -> CommandType:
    """Return the variant of a command.

    Raises:
        UnknownVariantError: if no variant member is set.
    """
    members = command.populated_members()
    if members:
        return COMMAND_TYPES[members[0]]
    raise UnknownVariantError("command", command.id)


def get_project_source_type(
    source: Project | StarterProject | ProjectSource,
) -> ProjectSourceType:
    """Return the source kind of a project or starter project.

    Raises:
        InvalidSourceTypeError: if no source member is set.
    """
    members = source.populated_members()
    if members:
        return PROJECT_SOURCE_TYPES[members[0]]
    raise InvalidSourceTypeError(getattr(source, "name", ""))


def is_container(component: Component) -> bool:
    """Check whether the component is a container."""
    return component.container is not None


def is_volume(component: Component) -> bool:
    """Check whether the component is a volume."""
    return component.volume is not None


def get_group(command: Command) -> CommandGroup | None:
    """Get the group of a command, whatever its variant."""
    members = command.populated_members()
    if members:
        return getattr(command, members[0]).group
    return None


def get_exec_component(command: Command) -> str:
    """Get the component an exec command runs in."""
    if command.exec is not None:
        return command.exec.component
    return ""


def get_exec_command_line(command: Command) -> str:
    """Get the command line of an exec command."""
    if command.exec is not None:
        return command.exec.commandLine
    return ""


def get_exec_working_dir(command: Command) -> str:
    """Get the working directory of an exec command."""
    if command.exec is not None:
        return command.exec.workingDir or ""
    return ""
