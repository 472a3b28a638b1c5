"""Command models."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from .base import Attributes, EnvVar, UnionModel


class CommandType(str, Enum):
    """Supported command variants."""

    EXEC = "Exec"
    APPLY = "Apply"
    COMPOSITE = "Composite"
    CUSTOM = "Custom"


class CommandGroupKind(str, Enum):
    """Group a command belongs to."""

    BUILD = "build"
    RUN = "run"
    TEST = "test"
    DEBUG = "debug"
    DEPLOY = "deploy"


class CommandGroup(BaseModel):
    """Group classification of a command."""

    kind: CommandGroupKind
    isDefault: bool | None = None


class ExecCommand(BaseModel):
    """Command line run inside a container component."""

    commandLine: str = ""
    component: str = ""
    workingDir: str | None = None
    env: list[EnvVar] = Field(default_factory=list)
    hotReloadCapable: bool | None = None
    label: str | None = None
    group: CommandGroup | None = None


class ApplyCommand(BaseModel):
    """Applies a component (e.g. kubernetes resources) instead of executing."""

    component: str = ""
    label: str | None = None
    group: CommandGroup | None = None


class CompositeCommand(BaseModel):
    """Command made of other commands, run serially or in parallel."""

    commands: list[str] = Field(default_factory=list)
    parallel: bool | None = None
    label: str | None = None
    group: CommandGroup | None = None


class CustomCommand(BaseModel):
    """Command handled by an external tool."""

    commandClass: str
    embeddedResource: dict[str, Any] = Field(default_factory=dict)
    label: str | None = None
    group: CommandGroup | None = None


class Command(UnionModel):
    """Workspace command. Exactly one variant member is expected."""

    UNION_FIELDS: ClassVar[tuple[str, ...]] = ("exec", "apply", "composite", "custom")

    id: str = Field(..., title="Id")
    attributes: Attributes = Field(default_factory=dict)
    exec: ExecCommand | None = None
    apply: ApplyCommand | None = None
    composite: CompositeCommand | None = None
    custom: CustomCommand | None = None
