"""Volume mounts linking volume components to container components."""

from __future__ import annotations

import logging

from ..models import Component, DevfileContent, VolumeMount
from .errors import NotFoundError, PathConflictError
from .variants import is_container

logger = logging.getLogger(__name__)


class VolumeMountCoordinator:
    """Add, remove and look up volume mounts across container components.

    Every mount scrub in the document goes through ``remove_mount_references``
    so that no container keeps a mount pointing to a deleted volume.
    """

    def __init__(self, content: DevfileContent):
        self._content = content

    def _find_container(self, name: str) -> Component:
        for component in self._content.components:
            if component.name == name and is_container(component):
                return component
        raise NotFoundError("container component", name)

    def add_volume_mounts(self, container_name: str, mounts: list[VolumeMount]) -> None:
        """Append volume mounts to a container component.

        Nothing is mutated unless every requested mount has a free path.

        Raises:
            NotFoundError: if no container component has that name.
            PathConflictError: listing every path collision found.
        """
        component = self._find_container(container_name)
        container = component.container

        taken = {mount.path: mount.name for mount in container.volumeMounts}
        conflicts: list[str] = []
        for mount in mounts:
            if mount.path in taken:
                conflicts.append(
                    f"unable to mount volume {mount.name}, as another volume "
                    f"{taken[mount.path]} is mounted to the same path {mount.path}"
                )
            else:
                taken[mount.path] = mount.name

        if conflicts:
            raise PathConflictError(container_name, conflicts)

        container.volumeMounts.extend(mounts)
        logger.debug(f"Added {len(mounts)} volume mount(s) to container {container_name}")

    def remove_mount_references(self, volume_name: str) -> int:
        """Strip every mount of ``volume_name`` from all containers.

        Args:
            volume_name: Name of the volume the mounts refer to.

        Returns:
            Number of mounts removed.
        """
        removed = 0
        for component in self._content.components:
            if not is_container(component):
                continue
            container = component.container
            kept = [mount for mount in container.volumeMounts if mount.name != volume_name]
            removed += len(container.volumeMounts) - len(kept)
            container.volumeMounts = kept
        return removed

    def delete_volume_mount(self, volume_name: str) -> None:
        """Remove all mounts of a volume from every container.

        Raises:
            NotFoundError: if no container mounts that volume.
        """
        if self.remove_mount_references(volume_name) == 0:
            raise NotFoundError("volume mount", volume_name)
        logger.debug(f"Deleted volume mounts of {volume_name}")

    def get_volume_mount_paths(self, mount_name: str, component_name: str) -> list[str]:
        """Get the paths a volume is mounted at in a container component.

        Raises:
            NotFoundError: if the container is missing or does not mount the volume.
        """
        component = self._find_container(component_name)
        paths = [
            mount.path
            for mount in component.container.volumeMounts
            if mount.name == mount_name
        ]
        if not paths:
            raise NotFoundError(f"volume mount in container {component_name}", mount_name)
        return paths
