"""Intersection observation and the infinite-scroll sentinel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from loguru import logger

from sitesearch.ui.events import Node


@dataclass(frozen=True, slots=True)
class IntersectionEntry:
    node: Node
    is_intersecting: bool


ObserverCallback = Callable[[IntersectionEntry], None]


class Observation:
    """One node being observed by a viewport."""

    def __init__(self, viewport: Viewport, node: Node, callback: ObserverCallback):
        self._viewport = viewport
        self.node = node
        self.callback = callback
        self.connected = True

    def disconnect(self) -> None:
        if not self.connected:
            return
        self.connected = False
        self._viewport._forget(self)


class Viewport:
    """In-memory stand-in for an intersection observer root."""

    def __init__(self) -> None:
        self._observations: list[Observation] = []

    @property
    def observation_count(self) -> int:
        return len(self._observations)

    def observe(self, node: Node, callback: ObserverCallback) -> Observation:
        observation = Observation(self, node, callback)
        self._observations.append(observation)
        return observation

    def set_visible(self, node: Node, visible: bool = True) -> int:
        """Report a visibility change for ``node``. Returns how many observers were called."""
        entry = IntersectionEntry(node=node, is_intersecting=visible)
        targets = [obs for obs in self._observations if obs.node is node]
        for observation in targets:
            if observation.connected:
                observation.callback(entry)
        return len(targets)

    def _forget(self, observation: Observation) -> None:
        if observation in self._observations:
            self._observations.remove(observation)


class ScrollSentinel:
    """
    Request the next page when the sentinel node scrolls into view.

    Holds at most one observation; binding a new node disconnects the previous one first.
    """

    def __init__(
        self,
        viewport: Viewport,
        on_trigger: Callable[[], None],
        has_more: Callable[[], bool],
    ):
        self.viewport = viewport
        self._on_trigger = on_trigger
        self._has_more = has_more
        self._observation: Observation | None = None

    @property
    def bound(self) -> Node | None:
        return self._observation.node if self._observation else None

    def bind(self, node: Node | None) -> None:
        self.unbind()
        if node is None:
            return
        self._observation = self.viewport.observe(node, self._handle)

    def unbind(self) -> None:
        if self._observation is not None:
            self._observation.disconnect()
            self._observation = None

    def _handle(self, entry: IntersectionEntry) -> None:
        if not entry.is_intersecting:
            return
        if not self._has_more():
            logger.debug("Sentinel visible but no more pages")
            return
        self._on_trigger()
