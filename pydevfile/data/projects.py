"""Project and starter project collection operations."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from ..models import DevfileContent, GitProjectSource, Project, StarterProject
from .errors import (
    AlreadyExistsError,
    AmbiguousRemoteError,
    NotFoundError,
    RemoteNotFoundError,
)
from .filters import DevfileOptions, filter_devfile_object
from .variants import get_project_source_type

logger = logging.getLogger(__name__)

P = TypeVar("P", Project, StarterProject)


def get_default_source(source: GitProjectSource) -> tuple[str, str, str]:
    """Resolve the (remote name, url, revision) to check out.

    A source without remotes resolves to empty values.

    Raises:
        RemoteNotFoundError: if checkoutFrom names an undefined remote.
        AmbiguousRemoteError: if several remotes exist and none is selected.
    """
    checkout = source.checkoutFrom
    remote_name = checkout.remote if checkout else None
    revision = (checkout.revision if checkout else None) or ""

    if remote_name:
        if remote_name not in source.remotes:
            raise RemoteNotFoundError(remote_name)
        return remote_name, source.remotes[remote_name], revision

    if not source.remotes:
        return "", "", ""

    if len(source.remotes) == 1:
        remote_name, url = next(iter(source.remotes.items()))
        return remote_name, url, revision

    raise AmbiguousRemoteError(sorted(source.remotes))


class _ProjectCollection(Generic[P]):
    """Name-keyed operations shared by projects and starter projects."""

    FIELD = ""
    ATTRIBUTE = ""

    def __init__(self, content: DevfileContent):
        self._content = content

    @property
    def _items(self) -> list[P]:
        return getattr(self._content, self.ATTRIBUTE)

    def get(self, options: DevfileOptions | None = None) -> list[P]:
        """Get entries in document order, filtered by ``options``.

        Raises:
            InvalidSourceTypeError: if an entry passing the attribute filter
                has no source.
        """
        options = options or DevfileOptions()
        wanted_source = options.project_options.project_source_type

        items = []
        for item in self._items:
            if not filter_devfile_object(item.attributes, options):
                continue
            source_type = get_project_source_type(item)
            if wanted_source is not None and source_type != wanted_source:
                continue
            items.append(item)
        return items

    def add(self, items: list[P]) -> None:
        """Append entries; stops at the first duplicate name.

        Raises:
            AlreadyExistsError: on the first name clash.
        """
        for item in items:
            if any(current.name == item.name for current in self._items):
                raise AlreadyExistsError(self.FIELD, item.name)
            self._items.append(item)
            logger.debug(f"Added {self.FIELD} {item.name}")

    def update(self, item: P) -> None:
        """Replace the entry with the same name, if any."""
        for i, current in enumerate(self._items):
            if current.name == item.name:
                self._items[i] = item
                return

    def delete(self, name: str) -> None:
        """Delete the entry with this name.

        Raises:
            NotFoundError: if no entry has that name.
        """
        for i, current in enumerate(self._items):
            if current.name == name:
                del self._items[i]
                logger.debug(f"Deleted {self.FIELD} {name}")
                return
        raise NotFoundError(self.FIELD, name)


class ProjectManager(_ProjectCollection[Project]):
    """Operations on the document's projects."""

    FIELD = "project"
    ATTRIBUTE = "projects"


class StarterProjectManager(_ProjectCollection[StarterProject]):
    """Operations on the document's starter projects."""

    FIELD = "starterProject"
    ATTRIBUTE = "starterProjects"
