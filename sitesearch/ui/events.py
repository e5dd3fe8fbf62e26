"""Minimal node tree and event target used for document-level listeners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Listener = Callable[["Event"], None]


class Node:
    """A UI element with an optional parent."""

    def __init__(self, name: str = "", parent: Node | None = None):
        self.name = name
        self.parent = parent

    def contains(self, other: Node | None) -> bool:
        """True if ``other`` is this node or one of its descendants."""
        node = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def __repr__(self) -> str:
        return f"Node({self.name!r})"


@dataclass(slots=True)
class Event:
    type: str
    target: Node | None = None
    detail: Any = None


class ListenerHandle:
    """Removes one listener registration. Safe to call more than once."""

    def __init__(self, remove: Callable[[], None]):
        self._remove: Callable[[], None] | None = remove

    @property
    def active(self) -> bool:
        return self._remove is not None

    def remove(self) -> None:
        if self._remove is None:
            return
        remove, self._remove = self._remove, None
        remove()


class EventTarget:
    """Dispatches events to listeners registered per event type."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add_listener(self, event_type: str, listener: Listener) -> ListenerHandle:
        self._listeners.setdefault(event_type, []).append(listener)
        return ListenerHandle(lambda: self._remove(event_type, listener))

    def listener_count(self, event_type: str | None = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, []))
        return sum(len(items) for items in self._listeners.values())

    def dispatch(self, event: Event) -> None:
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)

    def _remove(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            self._listeners.pop(event_type, None)
