"""Lifecycle events model."""

from pydantic import BaseModel, Field


class Events(BaseModel):
    """Command ids bound to the workspace lifecycle."""

    preStart: list[str] = Field(default_factory=list)
    postStart: list[str] = Field(default_factory=list)
    preStop: list[str] = Field(default_factory=list)
    postStop: list[str] = Field(default_factory=list)
