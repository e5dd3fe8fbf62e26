"""Navigable location and query-parameter synchronization."""

from __future__ import annotations

from typing import Callable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from sitesearch.ui.events import ListenerHandle

LocationListener = Callable[[str], None]


class Navigator:
    """
    In-memory browser location with a history stack.

    ``push`` adds a history entry, ``replace`` overwrites the current one.
    Subscribers are notified with the new URL after every change.
    """

    def __init__(self, url: str = "/"):
        self._history: list[str] = [url]
        self._index = 0
        self._listeners: list[LocationListener] = []

    @property
    def url(self) -> str:
        return self._history[self._index]

    @property
    def history(self) -> list[str]:
        return self._history[: self._index + 1]

    def push(self, url: str) -> None:
        del self._history[self._index + 1 :]
        self._history.append(url)
        self._index += 1
        self._notify()

    def replace(self, url: str) -> None:
        if url == self.url:
            return
        self._history[self._index] = url
        self._notify()

    def back(self) -> bool:
        if self._index == 0:
            return False
        self._index -= 1
        self._notify()
        return True

    def subscribe(self, listener: LocationListener) -> ListenerHandle:
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return ListenerHandle(_remove)

    def _notify(self) -> None:
        url = self.url
        for listener in list(self._listeners):
            listener(url)


class URLSynchronizer:
    """Mirror the committed query into a single location query parameter."""

    def __init__(self, navigator: Navigator, param: str = "query"):
        self.navigator = navigator
        self.param = param

    def read(self) -> str:
        for key, value in parse_qsl(urlsplit(self.navigator.url).query, keep_blank_values=True):
            if key == self.param:
                return value
        return ""

    def write(self, query: str) -> None:
        """Set (or remove, when empty) the query parameter without a new history entry."""
        parts = urlsplit(self.navigator.url)
        params = [
            (key, value)
            for key, value in parse_qsl(parts.query, keep_blank_values=True)
            if key != self.param
        ]
        if query:
            params.append((self.param, query))
        url = urlunsplit(parts._replace(query=urlencode(params)))
        self.navigator.replace(url)

    def subscribe(self, listener: Callable[[str], None]) -> ListenerHandle:
        """Call ``listener`` with the parameter value whenever the location changes."""
        return self.navigator.subscribe(lambda _url: listener(self.read()))
