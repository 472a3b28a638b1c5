"""Command collection operations."""

from __future__ import annotations

import logging

from ..models import Command, DevfileContent
from .errors import AlreadyExistsError, NotFoundError
from .filters import DevfileOptions, filter_devfile_object
from .variants import get_command_type, get_group

logger = logging.getLogger(__name__)


def normalize_id(command_id: str) -> str:
    """Command ids are compared and stored lower-cased."""
    return command_id.lower()


class CommandManager:
    """List, add, update and delete the document's commands."""

    def __init__(self, content: DevfileContent):
        self._content = content

    def get_commands(self, options: DevfileOptions | None = None) -> dict[str, Command]:
        """Get commands keyed by normalized id, in document order.

        Raises:
            UnknownVariantError: if a type filter is set and a command
                has no variant.
        """
        options = options or DevfileOptions()
        wanted_type = options.command_options.command_type
        wanted_group = options.command_options.command_group_kind

        commands: dict[str, Command] = {}
        for command in self._content.commands:
            if not filter_devfile_object(command.attributes, options):
                continue
            if wanted_type is not None and get_command_type(command) != wanted_type:
                continue
            if wanted_group is not None:
                group = get_group(command)
                if group is None or group.kind != wanted_group:
                    continue
            commands[normalize_id(command.id)] = command
        return commands

    def _exists(self, command_id: str) -> bool:
        return any(normalize_id(command.id) == command_id for command in self._content.commands)

    def add_commands(self, commands: list[Command]) -> None:
        """Append commands with their ids lower-cased.

        Raises:
            AlreadyExistsError: on the first id clash; earlier commands of
                the batch stay added.
        """
        for command in commands:
            command_id = normalize_id(command.id)
            if self._exists(command_id):
                raise AlreadyExistsError("command", command_id)
            self._content.commands.append(command.model_copy(update={"id": command_id}))
            logger.debug(f"Added command {command_id}")

    def update_command(self, command: Command) -> None:
        """Replace the command with the same normalized id, if any."""
        command_id = normalize_id(command.id)
        for i, current in enumerate(self._content.commands):
            if normalize_id(current.id) == command_id:
                self._content.commands[i] = command.model_copy(update={"id": command_id})
                return

    def delete_command(self, command_id: str) -> None:
        """Delete the command with this id (case-insensitive).

        Raises:
            NotFoundError: if no such command exists.
        """
        normalized = normalize_id(command_id)
        for i, current in enumerate(self._content.commands):
            if normalize_id(current.id) == normalized:
                del self._content.commands[i]
                logger.debug(f"Deleted command {normalized}")
                return
        raise NotFoundError("command", command_id)
