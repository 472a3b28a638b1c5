"""Pydantic models for devfile documents."""

from .base import Attributes, DevfileMetadata, Endpoint, EnvVar, UnionModel
from .command import (
    ApplyCommand,
    Command,
    CommandGroup,
    CommandGroupKind,
    CommandType,
    CompositeCommand,
    CustomCommand,
    ExecCommand,
)
from .component import (
    Component,
    ComponentType,
    ContainerComponent,
    CustomComponent,
    KubernetesComponent,
    OpenshiftComponent,
    PluginComponent,
    VolumeComponent,
    VolumeMount,
)
from .devfile import DevfileContent, KubernetesParentRef, Parent
from .events import Events
from .project import (
    CheckoutFrom,
    CustomProjectSource,
    GitProjectSource,
    Project,
    ProjectSource,
    ProjectSourceType,
    StarterProject,
    ZipProjectSource,
)

__all__ = [
    "Attributes",
    "DevfileMetadata",
    "Endpoint",
    "EnvVar",
    "UnionModel",
    "ApplyCommand",
    "Command",
    "CommandGroup",
    "CommandGroupKind",
    "CommandType",
    "CompositeCommand",
    "CustomCommand",
    "ExecCommand",
    "Component",
    "ComponentType",
    "ContainerComponent",
    "CustomComponent",
    "KubernetesComponent",
    "OpenshiftComponent",
    "PluginComponent",
    "VolumeComponent",
    "VolumeMount",
    "DevfileContent",
    "KubernetesParentRef",
    "Parent",
    "Events",
    "CheckoutFrom",
    "CustomProjectSource",
    "GitProjectSource",
    "Project",
    "ProjectSource",
    "ProjectSourceType",
    "StarterProject",
    "ZipProjectSource",
]
