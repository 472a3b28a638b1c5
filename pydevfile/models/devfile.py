"""Root document models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .base import Attributes, DevfileMetadata
from .command import Command
from .component import Component
from .events import Events
from .project import Project, StarterProject


class KubernetesParentRef(BaseModel):
    """Parent devfile stored as a Kubernetes resource."""

    name: str
    namespace: str | None = None


class Parent(BaseModel):
    """Reference to the devfile this one inherits from, plus overrides."""

    uri: str | None = None
    id: str | None = None
    registryUrl: str | None = None
    version: str | None = None
    kubernetes: KubernetesParentRef | None = None
    attributes: Attributes = Field(default_factory=dict)
    variables: dict[str, str] = Field(default_factory=dict)
    components: list[dict[str, Any]] = Field(default_factory=list)
    commands: list[dict[str, Any]] = Field(default_factory=list)
    projects: list[dict[str, Any]] = Field(default_factory=list)
    starterProjects: list[dict[str, Any]] = Field(default_factory=list)


class DevfileContent(BaseModel):
    """Whole devfile document. Unknown top-level keys are kept as-is."""

    model_config = ConfigDict(extra="allow")

    schemaVersion: str = Field(..., title="Schema Version")
    metadata: DevfileMetadata = Field(default_factory=DevfileMetadata)
    parent: Parent | None = None
    attributes: Attributes = Field(default_factory=dict)
    variables: dict[str, str] = Field(default_factory=dict)
    components: list[Component] = Field(default_factory=list)
    commands: list[Command] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    starterProjects: list[StarterProject] = Field(default_factory=list)
    events: Events | None = None

    def workspace_fields(self) -> set[str]:
        """Field names that make up the workspace body (everything but the header)."""
        return set(type(self).model_fields) - {"schemaVersion", "metadata"}
