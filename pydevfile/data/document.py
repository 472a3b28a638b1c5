"""Versioned devfile document facade."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from ..models import (
    Command,
    Component,
    DevfileContent,
    DevfileMetadata,
    Events,
    Parent,
    Project,
    StarterProject,
    VolumeMount,
)
from .commands import CommandManager
from .components import ComponentManager
from .events import EventsManager
from .filters import DevfileOptions
from .projects import ProjectManager, StarterProjectManager
from .volumes import VolumeMountCoordinator

logger = logging.getLogger(__name__)


class DevfileData(ABC):
    """In-memory devfile document and the operations allowed on it.

    Concrete subclasses are picked per schema version by a
    :class:`~pydevfile.data.versions.SchemaRegistry`. The document is not
    thread-safe; callers sharing it across threads must lock around it.
    """

    def __init__(self, content: DevfileContent):
        self._content = content
        self._mounts = VolumeMountCoordinator(content)
        self._components = ComponentManager(content, self._mounts)
        self._commands = CommandManager(content)
        self._projects = ProjectManager(content)
        self._starter_projects = StarterProjectManager(content)
        self._events = EventsManager(content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(schemaVersion={self._content.schemaVersion!r})"

    @property
    def content(self) -> DevfileContent:
        """The underlying document model."""
        return self._content

    # header

    def get_schema_version(self) -> str:
        return self._content.schemaVersion

    def set_schema_version(self, version: str) -> None:
        """Set the version string; version-gated operations follow it."""
        self._content.schemaVersion = version

    def get_metadata(self) -> DevfileMetadata:
        return self._content.metadata

    def set_metadata(self, metadata: DevfileMetadata) -> None:
        self._content.metadata = metadata

    def get_parent(self) -> Parent | None:
        return self._content.parent

    def set_parent(self, parent: Parent | None) -> None:
        self._content.parent = parent

    # events

    def get_events(self) -> Events:
        return self._events.get_events()

    def add_events(self, events: Events) -> None:
        self._events.add_events(events)

    def update_events(
        self,
        post_start: list[str] | None = None,
        post_stop: list[str] | None = None,
        pre_start: list[str] | None = None,
        pre_stop: list[str] | None = None,
    ) -> None:
        self._events.update_events(post_start, post_stop, pre_start, pre_stop)

    # components

    def get_components(self, options: DevfileOptions | None = None) -> list[Component]:
        return self._components.get_components(options)

    def add_components(self, components: list[Component]) -> None:
        self._components.add_components(components)

    def update_component(self, component: Component) -> None:
        self._components.update_component(component)

    def delete_component(self, name: str) -> None:
        self._components.delete_component(name)

    def get_devfile_container_components(
        self, options: DevfileOptions | None = None
    ) -> list[Component]:
        return self._components.get_container_components(options)

    def get_devfile_volume_components(
        self, options: DevfileOptions | None = None
    ) -> list[Component]:
        return self._components.get_volume_components(options)

    # projects

    def get_projects(self, options: DevfileOptions | None = None) -> list[Project]:
        return self._projects.get(options)

    def add_projects(self, projects: list[Project]) -> None:
        self._projects.add(projects)

    def update_project(self, project: Project) -> None:
        self._projects.update(project)

    def delete_project(self, name: str) -> None:
        self._projects.delete(name)

    # starter projects

    def get_starter_projects(
        self, options: DevfileOptions | None = None
    ) -> list[StarterProject]:
        return self._starter_projects.get(options)

    def add_starter_projects(self, projects: list[StarterProject]) -> None:
        self._starter_projects.add(projects)

    def update_starter_project(self, project: StarterProject) -> None:
        self._starter_projects.update(project)

    def delete_starter_project(self, name: str) -> None:
        self._starter_projects.delete(name)

    # commands

    def get_commands(self, options: DevfileOptions | None = None) -> dict[str, Command]:
        return self._commands.get_commands(options)

    def add_commands(self, commands: list[Command]) -> None:
        self._commands.add_commands(commands)

    def update_command(self, command: Command) -> None:
        self._commands.update_command(command)

    def delete_command(self, command_id: str) -> None:
        self._commands.delete_command(command_id)

    # volume mounts

    def add_volume_mounts(self, container_name: str, mounts: list[VolumeMount]) -> None:
        self._mounts.add_volume_mounts(container_name, mounts)

    def delete_volume_mount(self, name: str) -> None:
        self._mounts.delete_volume_mount(name)

    def get_volume_mount_paths(self, mount_name: str, component_name: str) -> list[str]:
        return self._mounts.get_volume_mount_paths(mount_name, component_name)

    # top-level attributes and variables

    @abstractmethod
    def get_top_level_attributes(self) -> dict[str, Any]:
        """Get the document-wide attributes."""

    @abstractmethod
    def get_top_level_variables(self) -> dict[str, str]:
        """Get the document-wide variables."""

    @abstractmethod
    def update_top_level_variables(self, variables: Mapping[str, str]) -> None:
        """Merge variables into the document-wide variables."""

    # workspace

    def get_devfile_workspace(self) -> dict[str, Any]:
        """Dump the workspace body (everything but schema version and metadata)."""
        return self._content.model_dump(
            include=self._content.workspace_fields(), exclude_none=True, mode="json"
        )

    def set_devfile_workspace(self, workspace: Mapping[str, Any]) -> None:
        """Replace the workspace body, keeping schema version and metadata."""
        header = {
            "schemaVersion": self._content.schemaVersion,
            "metadata": self._content.metadata,
        }
        replacement = DevfileContent.model_validate({**workspace, **header})
        for name in self._content.workspace_fields():
            setattr(self._content, name, getattr(replacement, name))

    @contextmanager
    def transaction(self) -> Iterator["DevfileData"]:
        """Run a block of mutations all-or-nothing.

        The document is restored to its state at entry if the block raises.
        """
        snapshot = self._content.model_copy(deep=True)
        try:
            yield self
        except Exception:
            logger.debug("Rolling back devfile changes")
            for name in type(snapshot).model_fields:
                setattr(self._content, name, getattr(snapshot, name))
            raise
