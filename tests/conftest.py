"""Shared fixtures for devfile tests."""

import pytest

from builders import container, exec_command, make_devfile, volume


@pytest.fixture
def devfile():
    """A 2.1.0 document with a container, a volume and a command."""
    return make_devfile(
        components=[container("runtime", ("cache", "/cache")), volume("cache")],
        commands=[exec_command("build")],
        variables={"image": "node:18"},
    )
