"""Project and starter project models."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from .base import Attributes, UnionModel


class ProjectSourceType(str, Enum):
    """Supported project source kinds."""

    GIT = "Git"
    ZIP = "Zip"
    CUSTOM = "Custom"


class CheckoutFrom(BaseModel):
    """Selects the remote and revision to check out."""

    remote: str | None = None
    revision: str | None = None


class GitProjectSource(BaseModel):
    """Git-like source: named remotes plus an optional checkout selector."""

    remotes: dict[str, str] = Field(default_factory=dict)
    checkoutFrom: CheckoutFrom | None = None


class ZipProjectSource(BaseModel):
    """Zip archive source."""

    location: str | None = None


class CustomProjectSource(BaseModel):
    """Source handled by an external tool."""

    projectSourceClass: str
    embeddedResource: dict[str, Any] = Field(default_factory=dict)


class ProjectSource(UnionModel):
    """Source union shared by projects and starter projects."""

    UNION_FIELDS: ClassVar[tuple[str, ...]] = ("git", "zip", "custom")

    git: GitProjectSource | None = None
    zip: ZipProjectSource | None = None
    custom: CustomProjectSource | None = None


class Project(UnionModel):
    """Project cloned into the workspace."""

    UNION_FIELDS: ClassVar[tuple[str, ...]] = ProjectSource.UNION_FIELDS

    name: str = Field(..., title="Name")
    attributes: Attributes = Field(default_factory=dict)
    clonePath: str | None = None
    git: GitProjectSource | None = None
    zip: ZipProjectSource | None = None
    custom: CustomProjectSource | None = None


class StarterProject(UnionModel):
    """Template project offered when bootstrapping a workspace."""

    UNION_FIELDS: ClassVar[tuple[str, ...]] = ProjectSource.UNION_FIELDS

    name: str = Field(..., title="Name")
    attributes: Attributes = Field(default_factory=dict)
    description: str | None = None
    subDir: str | None = None
    git: GitProjectSource | None = None
    zip: ZipProjectSource | None = None
    custom: CustomProjectSource | None = None
