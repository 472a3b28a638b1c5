"""In-memory devfile document and its query and mutation operations."""

from .commands import CommandManager, normalize_id
from .components import ComponentManager
from .document import DevfileData
from .errors import (
    AlreadyExistsError,
    AmbiguousRemoteError,
    DevfileError,
    DevfileParseError,
    DevfileValidationError,
    InvalidAttributesError,
    InvalidSourceTypeError,
    NotFoundError,
    PathConflictError,
    RemoteNotFoundError,
    UnknownVariantError,
    UnsupportedBySchemaVersionError,
)
from .events import EventsManager
from .filters import (
    CommandOptions,
    ComponentOptions,
    DevfileOptions,
    ProjectOptions,
    filter_devfile_object,
)
from .projects import ProjectManager, StarterProjectManager, get_default_source
from .variants import (
    get_command_type,
    get_component_type,
    get_exec_command_line,
    get_exec_component,
    get_exec_working_dir,
    get_group,
    get_project_source_type,
    is_container,
    is_volume,
)
from .versions import (
    SCHEMA_VERSION_200,
    SCHEMA_VERSION_210,
    SCHEMA_VERSION_220,
    DevfileV200,
    DevfileV210,
    SchemaRegistry,
    default_registry,
    new_devfile_data,
)
from .volumes import VolumeMountCoordinator

__all__ = [
    "CommandManager",
    "normalize_id",
    "ComponentManager",
    "DevfileData",
    "AlreadyExistsError",
    "AmbiguousRemoteError",
    "DevfileError",
    "DevfileParseError",
    "DevfileValidationError",
    "InvalidAttributesError",
    "InvalidSourceTypeError",
    "NotFoundError",
    "PathConflictError",
    "RemoteNotFoundError",
    "UnknownVariantError",
    "UnsupportedBySchemaVersionError",
    "EventsManager",
    "CommandOptions",
    "ComponentOptions",
    "DevfileOptions",
    "ProjectOptions",
    "filter_devfile_object",
    "ProjectManager",
    "StarterProjectManager",
    "get_default_source",
    "get_command_type",
    "get_component_type",
    "get_exec_command_line",
    "get_exec_component",
    "get_exec_working_dir",
    "get_group",
    "get_project_source_type",
    "is_container",
    "is_volume",
    "SCHEMA_VERSION_200",
    "SCHEMA_VERSION_210",
    "SCHEMA_VERSION_220",
    "DevfileV200",
    "DevfileV210",
    "SchemaRegistry",
    "default_registry",
    "new_devfile_data",
    "VolumeMountCoordinator",
]
