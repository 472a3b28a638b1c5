"""Schema version implementations and their registry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import DevfileContent
from .document import DevfileData
from .errors import UnsupportedBySchemaVersionError

SCHEMA_VERSION_200 = "2.0.0"
SCHEMA_VERSION_210 = "2.1.0"
SCHEMA_VERSION_220 = "2.2.0"


class DevfileV210(DevfileData):
    """Schema 2.1.0 and later.

    Top-level attributes and variables are gated on the document's current
    schema version, so a later :meth:`set_schema_version` takes effect.
    """

    def _require_top_level(self, feature: str) -> None:
        version = self.get_schema_version()
        if version == SCHEMA_VERSION_200:
            raise UnsupportedBySchemaVersionError(feature, version)

    def get_top_level_attributes(self) -> dict[str, Any]:
        self._require_top_level("top-level attributes")
        return self._content.attributes

    def get_top_level_variables(self) -> dict[str, str]:
        self._require_top_level("top-level variables")
        return self._content.variables

    def update_top_level_variables(self, variables: Mapping[str, str]) -> None:
        self._require_top_level("top-level variables")
        self._content.variables.update(variables)


class DevfileV200(DevfileV210):
    """Schema 2.0.0: no top-level attributes or variables until upgraded."""


class SchemaRegistry:
    """Maps exact schema version strings to document implementations."""

    def __init__(
        self,
        implementations: Mapping[str, type[DevfileData]] | None = None,
        default: type[DevfileData] = DevfileV210,
    ):
        self._implementations = dict(implementations or {})
        self._default = default

    def register(self, version: str, implementation: type[DevfileData]) -> None:
        """Register the implementation used for ``version``."""
        self._implementations[version] = implementation

    def resolve(self, version: str) -> type[DevfileData]:
        """Get the implementation for a version, or the default one."""
        return self._implementations.get(version, self._default)

    def versions(self) -> list[str]:
        """Versions with an explicit registration."""
        return list(self._implementations)


def default_registry() -> SchemaRegistry:
    """Build a registry with the built-in schema versions."""
    return SchemaRegistry(
        {
            SCHEMA_VERSION_200: DevfileV200,
            SCHEMA_VERSION_210: DevfileV210,
            SCHEMA_VERSION_220: DevfileV210,
        }
    )


def new_devfile_data(
    content: DevfileContent | Mapping[str, Any],
    registry: SchemaRegistry | None = None,
) -> DevfileData:
    """Create the document implementation matching the content's schema version.

    Args:
        content: Document model, or a raw decoded tree to validate into one.
        registry: Version registry; the built-in one if None.
    """
    if not isinstance(content, DevfileContent):
        content = DevfileContent.model_validate(content)
    registry = registry or default_registry()
    return registry.resolve(content.schemaVersion)(content)
