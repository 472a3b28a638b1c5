"""Component collection operations."""

from __future__ import annotations

import logging

from ..models import Component, ComponentType, DevfileContent
from .errors import AlreadyExistsError, NotFoundError
from .filters import DevfileOptions, filter_devfile_object
from .variants import get_component_type, is_container
from .volumes import VolumeMountCoordinator

logger = logging.getLogger(__name__)


class ComponentManager:
    """List, add, update and delete the document's components.

    Component names are unique per variant: a container and a volume may
    share a name, two containers may not.
    """

    def __init__(self, content: DevfileContent, mounts: VolumeMountCoordinator):
        self._content = content
        self._mounts = mounts

    def get_components(self, options: DevfileOptions | None = None) -> list[Component]:
        """Get components in document order, filtered by ``options``."""
        options = options or DevfileOptions()
        wanted_type = options.component_options.component_type

        components = []
        for component in self._content.components:
            if not filter_devfile_object(component.attributes, options):
                continue
            if wanted_type is not None and get_component_type(component) != wanted_type:
                continue
            components.append(component)
        return components

    def get_container_components(self, options: DevfileOptions | None = None) -> list[Component]:
        """Get container components passing the attribute filter."""
        return self._of_type(ComponentType.CONTAINER, options)

    def get_volume_components(self, options: DevfileOptions | None = None) -> list[Component]:
        """Get volume components passing the attribute filter."""
        return self._of_type(ComponentType.VOLUME, options)

    def _of_type(
        self, component_type: ComponentType, options: DevfileOptions | None
    ) -> list[Component]:
        options = options or DevfileOptions()
        return [
            component
            for component in self.get_components(DevfileOptions(filter=options.filter))
            if component.populated_members()
            and get_component_type(component) == component_type
        ]

    def _exists(self, name: str, component_type: ComponentType) -> bool:
        for component in self._content.components:
            if component.name != name or not component.populated_members():
                continue
            if get_component_type(component) == component_type:
                return True
        return False

    def add_components(self, components: list[Component]) -> None:
        """Append components, one at a time.

        Each component is checked against the live collection, so a
        duplicate later in the batch fails after the earlier ones were added.

        Raises:
            AlreadyExistsError: on the first name clash within a variant.
            UnknownVariantError: if a component has no variant set.
        """
        for component in components:
            component_type = get_component_type(component)
            if self._exists(component.name, component_type):
                raise AlreadyExistsError("component", component.name)
            self._content.components.append(component)
            logger.debug(f"Added {component_type.value} component {component.name}")

    def update_component(self, component: Component) -> None:
        """Replace the component with the same name and variant.

        Does nothing when no such component exists.
        """
        component_type = get_component_type(component)
        for i, current in enumerate(self._content.components):
            if current.name != component.name or not current.populated_members():
                continue
            if get_component_type(current) == component_type:
                self._content.components[i] = component
                return

    def delete_component(self, name: str) -> None:
        """Delete every component with this name.

        Deleting a non-container component also strips the mounts that
        reference its name from all containers.

        Raises:
            NotFoundError: if no component has that name.
        """
        kept = []
        removed = []
        for component in self._content.components:
            (removed if component.name == name else kept).append(component)

        if not removed:
            raise NotFoundError("component", name)

        self._content.components = kept
        if any(not is_container(component) for component in removed):
            self._mounts.remove_mount_references(name)
        logger.debug(f"Deleted component {name}")
