"""Semantic validation of a parsed devfile."""

from __future__ import annotations

import logging

from ..data import (
    DevfileData,
    DevfileValidationError,
    UnknownVariantError,
    get_component_type,
    normalize_id,
)
from ..models import ComponentType

logger = logging.getLogger(__name__)


def _validate_components(data: DevfileData) -> list[str]:
    problems = []
    components = data.content.components
    volumes = set()
    for component in components:
        try:
            if get_component_type(component) == ComponentType.VOLUME:
                volumes.add(component.name)
        except UnknownVariantError as e:
            problems.append(str(e))

    for component in components:
        if component.container is None:
            continue
        for mount in component.container.volumeMounts:
            if mount.name not in volumes:
                problems.append(
                    f"container {component.name} mounts volume {mount.name}, "
                    "which is not a volume component"
                )
    return problems


def _validate_commands(data: DevfileData) -> list[str]:
    problems = []
    component_names = {component.name for component in data.content.components}
    command_ids = {normalize_id(command.id) for command in data.content.commands}

    for command in data.content.commands:
        target = command.exec or command.apply
        if target is not None and target.component not in component_names:
            problems.append(
                f"command {command.id} references missing component {target.component!r}"
            )
        if command.composite is not None:
            for sub_command in command.composite.commands:
                if normalize_id(sub_command) not in command_ids:
                    problems.append(
                        f"composite command {command.id} references missing command {sub_command}"
                    )
    return problems


def _validate_events(data: DevfileData) -> list[str]:
    problems = []
    command_ids = {normalize_id(command.id) for command in data.content.commands}
    events = data.get_events()
    for slot in ("preStart", "postStart", "preStop", "postStop"):
        for command_id in getattr(events, slot):
            if normalize_id(command_id) not in command_ids:
                problems.append(f"{slot} event references missing command {command_id}")
    return problems


def validate_devfile_data(data: DevfileData) -> None:
    """Check cross references between components, commands and events.

    Raises:
        DevfileValidationError: listing every problem found.
    """
    problems = _validate_components(data)
    problems.extend(_validate_commands(data))
    problems.extend(_validate_events(data))
    if problems:
        raise DevfileValidationError(problems)
    logger.debug("Devfile passed validation")
