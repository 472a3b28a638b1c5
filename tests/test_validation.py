"""Tests for semantic validation."""

import pytest

from builders import container, exec_command, make_devfile, volume
from pydevfile.data import DevfileValidationError
from pydevfile.models import Command, Component, CompositeCommand, Events
from pydevfile.validation import validate_devfile_data


class TestValidateDevfileData:
    """Cross reference checks."""

    def test_valid_document(self, devfile):
        """Test a consistent document passes."""
        devfile.add_events(Events(postStart=["BUILD"]))
        validate_devfile_data(devfile)

    def test_all_problems_reported(self):
        """Test every broken reference is listed."""
        d = make_devfile(
            components=[container("runtime", ("missing-volume", "/data")), Component(name="x")],
            commands=[
                exec_command("build", component="nowhere"),
                Command(id="all", composite=CompositeCommand(commands=["build", "ghost"])),
            ],
            events=Events(preStop=["gone"]),
        )
        with pytest.raises(DevfileValidationError) as exc:
            validate_devfile_data(d)

        problems = exc.value.problems
        assert len(problems) == 5
        assert any("missing-volume" in problem for problem in problems)
        assert any("nowhere" in problem for problem in problems)
        assert any("ghost" in problem for problem in problems)
        assert any("gone" in problem for problem in problems)
        assert any("unknown component type" in problem for problem in problems)

    def test_mount_must_target_volume(self):
        """Test mounting a container name is not enough."""
        d = make_devfile(components=[container("a", ("b", "/b")), container("b"), volume("v")])
        with pytest.raises(DevfileValidationError, match="container a mounts volume b"):
            validate_devfile_data(d)
