"""Filter options and attribute matching for devfile entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..models import CommandGroupKind, CommandType, ComponentType, ProjectSourceType
from .errors import InvalidAttributesError


@dataclass
class ComponentOptions:
    """Component specific filters."""

    component_type: ComponentType | None = None


@dataclass
class CommandOptions:
    """Command specific filters."""

    command_type: CommandType | None = None
    command_group_kind: CommandGroupKind | None = None


@dataclass
class ProjectOptions:
    """Project and starter project specific filters."""

    project_source_type: ProjectSourceType | None = None


@dataclass
class DevfileOptions:
    """Options accepted by the Get* listings.

    ``filter`` is matched as a subset of each entity's attributes: every key
    must be present with an equal value, extra attributes are ignored.
    """

    filter: dict[str, Any] = field(default_factory=dict)
    component_options: ComponentOptions = field(default_factory=ComponentOptions)
    command_options: CommandOptions = field(default_factory=CommandOptions)
    project_options: ProjectOptions = field(default_factory=ProjectOptions)


def filter_devfile_object(attributes: Any, options: DevfileOptions | None) -> bool:
    """Check whether an attribute bag passes the options' filter.

    Args:
        attributes: Attributes of the entity being filtered.
        options: Listing options; None or an empty filter matches everything.

    Returns:
        True if the entity should be kept.

    Raises:
        InvalidAttributesError: if the attributes are not a mapping.
    """
    if attributes is None:
        attributes = {}
    if not isinstance(attributes, Mapping):
        raise InvalidAttributesError(
            f"attributes must be a mapping, got {type(attributes).__name__}"
        )
    if options is None or not options.filter:
        return True

    for key, expected in options.filter.items():
        if key not in attributes or attributes[key] != expected:
            return False
    return True
