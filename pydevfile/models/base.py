"""Base models shared by all devfile entities."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

Attributes = dict[str, Any]


class UnionModel(BaseModel):
    """Model holding at most one populated member out of ``UNION_FIELDS``.

    Zero populated members is allowed here and reported later by the
    variant resolver; more than one is rejected at construction.
    """

    UNION_FIELDS: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def check_single_member(self) -> "UnionModel":
        populated = self.populated_members()
        if len(populated) > 1:
            raise ValueError(
                f"only one of {', '.join(self.UNION_FIELDS)} may be set, "
                f"got: {', '.join(populated)}"
            )
        return self

    def populated_members(self) -> list[str]:
        """Names of the union members that are set."""
        return [name for name in self.UNION_FIELDS if getattr(self, name) is not None]


class EnvVar(BaseModel):
    """Environment variable passed to a container or command."""

    name: str
    value: str = ""


class Endpoint(BaseModel):
    """Network endpoint exposed by a component."""

    name: str
    targetPort: int
    exposure: str | None = None
    protocol: str | None = None
    secure: bool | None = None
    path: str | None = None
    attributes: Attributes = Field(default_factory=dict)


class DevfileMetadata(BaseModel):
    """Document metadata. Unknown keys are kept as-is."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, title="Name")
    version: str | None = Field(default=None, title="Version")
    displayName: str | None = Field(default=None, title="Display Name")
    description: str | None = Field(default=None, title="Description")
    tags: list[str] = Field(default_factory=list, title="Tags")
    icon: str | None = None
    language: str | None = None
    projectType: str | None = None
    provider: str | None = None
    supportUrl: str | None = None
    website: str | None = None
    attributes: Attributes = Field(default_factory=dict)
