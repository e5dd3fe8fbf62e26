"""Incremental search controller: debounce, pagination, URL sync and teardown."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

from loguru import logger

from sitesearch.search.accumulator import ResultAccumulator
from sitesearch.search.errors import FetchError
from sitesearch.search.models import PageRequest, SearchHit, SearchPage
from sitesearch.ui.debounce import QueryDebouncer
from sitesearch.ui.events import Event, EventTarget, ListenerHandle, Node
from sitesearch.ui.location import URLSynchronizer
from sitesearch.ui.sentinel import ScrollSentinel, Viewport


class Fetcher(Protocol):
    async def fetch(self, query: str, page: int = 1) -> SearchPage: ...


class SearchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    LOADING_MORE = "loading_more"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class SearchView:
    """Snapshot handed to the rendering layer."""

    query: str
    state: SearchState
    page: int
    results: tuple[SearchHit, ...]
    is_open: bool
    is_expanded: bool
    is_loading_more: bool
    error: str | None
    sentinel_ref: Callable[[Node | None], None]


class SearchController:
    """
    Composition root for the search bar.

    Keystrokes go through the debouncer; each commit resets the accumulator,
    writes the location and fetches page 1. The sentinel requests following
    pages one at a time. Responses are reconciled only if they were requested
    under the currently committed query; superseded fetches are left to finish
    and are only cancelled by ``stop``.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        location: URLSynchronizer,
        *,
        viewport: Viewport,
        document: EventTarget,
        container: Node | None = None,
        debounce_ms: int = 300,
        on_update: Callable[[SearchView], None] | None = None,
    ):
        self.fetcher = fetcher
        self.location = location
        self.document = document
        self.container = container
        self.on_update = on_update

        self._results = ResultAccumulator()
        self._debouncer = QueryDebouncer(self._on_commit, wait_ms=debounce_ms)
        self._sentinel = ScrollSentinel(
            viewport,
            on_trigger=self.load_more,
            has_more=lambda: self._results.state.has_more,
        )
        self._handles: list[ListenerHandle] = []
        self._tasks: set[asyncio.Task] = set()
        self._expanded = False
        self._running = False

    @property
    def query(self) -> str:
        return self._results.query

    @property
    def state(self) -> SearchState:
        pagination = self._results.state
        if not self._results.query:
            return SearchState.IDLE
        if pagination.is_fetching:
            return SearchState.LOADING if pagination.current_page == 0 else SearchState.LOADING_MORE
        if not pagination.has_more:
            return SearchState.EXHAUSTED
        return SearchState.READY

    @property
    def running(self) -> bool:
        return self._running

    def view(self) -> SearchView:
        state = self.state
        return SearchView(
            query=self.query,
            state=state,
            page=self._results.state.current_page,
            results=self._results.results,
            is_open=self._expanded and bool(self.query),
            is_expanded=self._expanded,
            is_loading_more=state is SearchState.LOADING_MORE,
            error=self._results.state.error,
            sentinel_ref=self.sentinel_ref,
        )

    async def start(self) -> None:
        """Install listeners and pick up the query already present in the location."""
        if self._running:
            return
        self._running = True
        self._handles.append(self.document.add_listener("mousedown", self._on_mousedown))
        self._handles.append(self.location.subscribe(self._on_location_change))
        logger.info("Search controller started")

        initial = self.location.read()
        if initial:
            self._apply_query(initial)

    def stop(self) -> None:
        """Tear down timers, observers, listeners and outstanding fetches."""
        if not self._running:
            return
        self._running = False
        self._debouncer.cancel()
        self._sentinel.unbind()
        for handle in self._handles:
            handle.remove()
        self._handles.clear()
        for task in list(self._tasks):
            task.cancel()
        self._results.reset("")
        logger.info("Search controller stopped")

    async def wait_idle(self) -> None:
        """Wait until every outstanding fetch task has finished."""
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    # Input hooks

    def on_query_change(self, raw: str) -> None:
        if not self._running or not self._expanded:
            return
        self._debouncer.push(raw)

    def on_toggle_open(self) -> None:
        self._expanded = not self._expanded
        self._notify()

    def sentinel_ref(self, node: Node | None) -> None:
        """Attach the list-tail sentinel; called again whenever it is re-rendered."""
        if not self._running:
            return
        self._sentinel.bind(node)

    def load_more(self) -> None:
        if not self._running:
            return
        request = self._results.begin_fetch()
        if request is None:
            return
        self._dispatch(request)
        self._notify()

    # Internals

    def _on_commit(self, raw: str) -> None:
        query = raw if raw.strip() else ""
        logger.debug("Committed query {!r}", query)
        self._apply_query(query)

    def _on_location_change(self, value: str) -> None:
        if value != self.query:
            logger.debug("Location query changed externally to {!r}", value)
            self._apply_query(value)

    def _on_mousedown(self, event: Event) -> None:
        if self.container is None or self.container.contains(event.target):
            return
        if self._expanded:
            self._expanded = False
            self._notify()

    def _apply_query(self, query: str) -> None:
        self._results.reset(query)
        self.location.write(query)
        if query:
            request = self._results.begin_fetch()
            if request is not None:
                self._dispatch(request)
        self._notify()

    def _dispatch(self, request: PageRequest) -> None:
        logger.debug("Requesting page {} for {!r}", request.page, request.query)
        task = asyncio.create_task(self._run_fetch(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_fetch(self, request: PageRequest) -> None:
        try:
            page = await self.fetcher.fetch(request.query, request.page)
        except FetchError as e:
            logger.warning("Search for {!r} page {} failed: {}", request.query, request.page, e)
            self._fail(request, str(e))
            return
        except Exception as e:
            logger.exception("Unexpected error searching for {!r}", request.query)
            self._fail(request, str(e))
            return

        applied = self._results.append(
            page.hits,
            request.query,
            request.page,
            page.total_pages,
            epoch=request.epoch,
        )
        if applied:
            logger.info(
                "Search {!r}: page {}/{} with {} hits",
                request.query,
                request.page,
                page.total_pages,
                len(page.hits),
            )
            self._notify()

    def _fail(self, request: PageRequest, message: str) -> None:
        if self._results.fail(request, message):
            self._notify()

    def _notify(self) -> None:
        if self.on_update is not None:
            self.on_update(self.view())
