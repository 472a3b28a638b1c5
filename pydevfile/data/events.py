"""Lifecycle events operations."""

from __future__ import annotations

import logging

from ..models import DevfileContent, Events
from .errors import AlreadyExistsError

logger = logging.getLogger(__name__)

# (attribute, field name used in errors), in the order slots are checked
EVENT_SLOTS = (
    ("preStop", "pre stop"),
    ("preStart", "pre start"),
    ("postStop", "post stop"),
    ("postStart", "post start"),
)


class EventsManager:
    """Manage the four lifecycle event slots."""

    def __init__(self, content: DevfileContent):
        self._content = content

    def _events(self) -> Events:
        if self._content.events is None:
            self._content.events = Events()
        return self._content.events

    def get_events(self) -> Events:
        """Get the events block, empty if the document has none."""
        if self._content.events is None:
            return Events()
        return self._content.events

    def add_events(self, events: Events) -> None:
        """Fill empty slots with the non-empty slots of ``events``.

        All slots are checked before any is written, so a conflict leaves
        the document untouched.

        Raises:
            AlreadyExistsError: if a non-empty incoming slot is already set.
        """
        current = self._events()
        for attribute, field in EVENT_SLOTS:
            if getattr(events, attribute) and getattr(current, attribute):
                raise AlreadyExistsError(field)

        for attribute, _ in EVENT_SLOTS:
            incoming = getattr(events, attribute)
            if incoming:
                setattr(current, attribute, list(incoming))
                logger.debug(f"Set {attribute} events: {incoming}")

    def update_events(
        self,
        post_start: list[str] | None = None,
        post_stop: list[str] | None = None,
        pre_start: list[str] | None = None,
        pre_stop: list[str] | None = None,
    ) -> None:
        """Overwrite the slots given as non-empty lists; others are left as-is."""
        current = self._events()
        updates = {
            "postStart": post_start,
            "postStop": post_stop,
            "preStart": pre_start,
            "preStop": pre_stop,
        }
        for attribute, value in updates.items():
            if value:
                setattr(current, attribute, list(value))
