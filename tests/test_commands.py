"""Tests for command collection operations."""

import pytest

from builders import exec_command, make_devfile
from pydevfile.data import (
    AlreadyExistsError,
    CommandOptions,
    DevfileOptions,
    NotFoundError,
)
from pydevfile.models import (
    Command,
    CommandGroup,
    CommandGroupKind,
    CommandType,
    CompositeCommand,
)


class TestGetCommands:
    """Tests for listing commands."""

    def test_keyed_by_lowercase_id(self):
        """Test commands are keyed by their lower-cased id, in order."""
        d = make_devfile(commands=[exec_command("Build"), exec_command("run")])
        commands = d.get_commands()
        assert list(commands) == ["build", "run"]
        assert commands["build"].exec.commandLine == "make"

    def test_attribute_filter(self):
        """Test the attribute filter applies to commands."""
        d = make_devfile(
            commands=[
                exec_command("a", attributes={"tier": "fast"}),
                exec_command("b", attributes={"tier": "slow"}),
            ]
        )
        assert list(d.get_commands(DevfileOptions(filter={"tier": "slow"}))) == ["b"]

    def test_type_and_group_filters(self):
        """Test command type and group kind options."""
        d = make_devfile(
            commands=[
                exec_command("build", group=CommandGroup(kind=CommandGroupKind.BUILD)),
                exec_command("test", group=CommandGroup(kind=CommandGroupKind.TEST)),
                Command(id="all", composite=CompositeCommand(commands=["build", "test"])),
            ]
        )
        by_type = DevfileOptions(command_options=CommandOptions(command_type=CommandType.COMPOSITE))
        by_group = DevfileOptions(
            command_options=CommandOptions(command_group_kind=CommandGroupKind.TEST)
        )
        assert list(d.get_commands(by_type)) == ["all"]
        assert list(d.get_commands(by_group)) == ["test"]


class TestAddCommands:
    """Tests for adding commands."""

    def test_ids_are_stored_lowercase(self, devfile):
        """Test the stored id is normalized."""
        devfile.add_commands([exec_command("RunApp")])
        assert devfile.content.commands[-1].id == "runapp"
        assert "runapp" in devfile.get_commands()

    def test_case_insensitive_duplicate(self, devfile):
        """Test ids clash regardless of case."""
        with pytest.raises(AlreadyExistsError, match="command build"):
            devfile.add_commands([exec_command("BUILD")])
        assert list(devfile.get_commands()) == ["build"]

    def test_partial_apply_on_conflict(self, devfile):
        """Test commands before a clash in the batch remain added."""
        with pytest.raises(AlreadyExistsError):
            devfile.add_commands([exec_command("run"), exec_command("Run"), exec_command("debug")])
        assert list(devfile.get_commands()) == ["build", "run"]


class TestUpdateDeleteCommand:
    """Tests for updating and deleting commands."""

    def test_update_by_normalized_id(self, devfile):
        """Test updating matches ids case-insensitively."""
        updated = exec_command("BUILD")
        updated.exec.commandLine = "make all"
        devfile.update_command(updated)
        assert devfile.get_commands()["build"].exec.commandLine == "make all"
        assert len(devfile.content.commands) == 1

    def test_update_missing_is_noop(self, devfile):
        """Test updating an unknown command changes nothing."""
        devfile.update_command(exec_command("unknown"))
        assert list(devfile.get_commands()) == ["build"]

    def test_delete(self, devfile):
        """Test deleting by id in any case."""
        devfile.delete_command("Build")
        assert devfile.get_commands() == {}

    def test_delete_missing(self, devfile):
        """Test deleting an unknown command fails."""
        with pytest.raises(NotFoundError):
            devfile.delete_command("unknown")
        assert list(devfile.get_commands()) == ["build"]
