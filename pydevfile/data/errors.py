"""Errors raised by devfile document operations."""

from __future__ import annotations


class DevfileError(Exception):
    """Base class for all devfile errors."""


class AlreadyExistsError(DevfileError):
    """Raised when an entity or field with the same key is already present."""

    def __init__(self, field: str, name: str = ""):
        self.name = name
        self.field = field
        if name:
            message = f"{field} {name} already exists in devfile"
        else:
            message = f"{field} already exists in devfile"
        super().__init__(message)


class NotFoundError(DevfileError):
    """Raised when the requested entity is not present."""

    def __init__(self, field: str, name: str = ""):
        self.name = name
        self.field = field
        if name:
            message = f"{field} {name} is not found in the devfile"
        else:
            message = f"{field} is not found in the devfile"
        super().__init__(message)


class UnknownVariantError(DevfileError):
    """Raised when a union entity has no populated member."""

    def __init__(self, kind: str, name: str = ""):
        self.kind = kind
        self.name = name
        super().__init__(f"unknown {kind} type for {kind} {name!r}")


class InvalidSourceTypeError(DevfileError):
    """Raised when a project has no resolvable source."""

    def __init__(self, name: str = ""):
        self.name = name
        super().__init__(f"unknown project source type for project {name!r}")


class AmbiguousRemoteError(DevfileError):
    """Raised when several remotes exist and none is selected."""

    def __init__(self, remotes: list[str]):
        self.remotes = remotes
        super().__init__(
            "there are multiple remotes "
            f"({', '.join(remotes)}) and no checkoutFrom remote specified"
        )


class RemoteNotFoundError(DevfileError):
    """Raised when checkoutFrom names a remote that is not defined."""

    def __init__(self, remote: str):
        self.remote = remote
        super().__init__(f"checkoutFrom.remote {remote!r} is not found in remotes")


class PathConflictError(DevfileError):
    """Raised when requested volume mounts collide on path with existing ones."""

    def __init__(self, container: str, conflicts: list[str]):
        self.container = container
        self.conflicts = conflicts
        super().__init__(
            f"unable to add volume mounts to container {container}:\n"
            + "\n".join(conflicts)
        )


class UnsupportedBySchemaVersionError(DevfileError):
    """Raised when a feature is not available in the document's schema version."""

    def __init__(self, feature: str, version: str):
        self.feature = feature
        self.version = version
        super().__init__(
            f"{feature} is not supported in devfile schema version {version}"
        )


class InvalidAttributesError(DevfileError):
    """Raised when an entity's attributes cannot be matched against a filter."""


class DevfileParseError(DevfileError):
    """Raised when raw data cannot be turned into a devfile document."""


class DevfileValidationError(DevfileError):
    """Raised when a parsed document breaks a semantic rule."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("devfile is invalid:\n" + "\n".join(problems))
