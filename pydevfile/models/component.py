"""Component models."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from .base import Attributes, Endpoint, EnvVar, UnionModel


class ComponentType(str, Enum):
    """Supported component variants."""

    CONTAINER = "Container"
    VOLUME = "Volume"
    KUBERNETES = "Kubernetes"
    OPENSHIFT = "Openshift"
    PLUGIN = "Plugin"
    CUSTOM = "Custom"


class VolumeMount(BaseModel):
    """Attachment of a volume component to a path inside a container."""

    name: str = Field(..., description="Name of the volume component")
    path: str = Field(default="", description="Mount path inside the container")


class ContainerComponent(BaseModel):
    """Container running inside the workspace."""

    image: str = Field(default="", title="Image")
    env: list[EnvVar] = Field(default_factory=list)
    volumeMounts: list[VolumeMount] = Field(default_factory=list)
    memoryLimit: str | None = None
    memoryRequest: str | None = None
    cpuLimit: str | None = None
    cpuRequest: str | None = None
    command: list[str] = Field(default_factory=list)
    args: list[str] = Field(default_factory=list)
    mountSources: bool | None = None
    sourceMapping: str | None = None
    dedicatedPod: bool | None = None
    endpoints: list[Endpoint] = Field(default_factory=list)


class VolumeComponent(BaseModel):
    """Persistent or ephemeral volume."""

    size: str | None = None
    ephemeral: bool | None = None


class KubernetesComponent(BaseModel):
    """Kubernetes resources, referenced by uri or inlined."""

    uri: str | None = None
    inlined: str | None = None
    endpoints: list[Endpoint] = Field(default_factory=list)


class OpenshiftComponent(KubernetesComponent):
    """OpenShift resources, referenced by uri or inlined."""


class PluginComponent(BaseModel):
    """Plugin imported from a registry or uri."""

    id: str | None = None
    uri: str | None = None
    registryUrl: str | None = None
    commands: list[dict[str, Any]] = Field(default_factory=list)
    components: list[dict[str, Any]] = Field(default_factory=list)


class CustomComponent(BaseModel):
    """Component handled by an external tool."""

    componentClass: str
    embeddedResource: dict[str, Any] = Field(default_factory=dict)


class Component(UnionModel):
    """Workspace component. Exactly one variant member is expected."""

    UNION_FIELDS: ClassVar[tuple[str, ...]] = (
        "container",
        "volume",
        "kubernetes",
        "openshift",
        "plugin",
        "custom",
    )

    name: str = Field(..., title="Name")
    attributes: Attributes = Field(default_factory=dict)
    container: ContainerComponent | None = None
    volume: VolumeComponent | None = None
    kubernetes: KubernetesComponent | None = None
    openshift: OpenshiftComponent | None = None
    plugin: PluginComponent | None = None
    custom: CustomComponent | None = None
