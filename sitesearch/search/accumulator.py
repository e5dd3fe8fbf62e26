"""Result accumulation for the committed search query."""

from __future__ import annotations

from loguru import logger

from sitesearch.search.models import PageRequest, PaginationState, SearchHit


class ResultAccumulator:
    """
    Owns the result list and pagination state for one committed query.

    Every ``reset`` starts a new epoch. Responses are reconciled only when the
    query and epoch they were requested under are still current, and only as
    the page directly following the last applied one.
    """

    def __init__(self) -> None:
        self._query = ""
        self._epoch = 0
        self._results: tuple[SearchHit, ...] = ()
        self._state = PaginationState()

    @property
    def query(self) -> str:
        return self._query

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def results(self) -> tuple[SearchHit, ...]:
        return self._results

    @property
    def state(self) -> PaginationState:
        return self._state

    def reset(self, query: str = "") -> None:
        """Discard results and paging progress and start tracking ``query``."""
        self._query = query
        self._epoch += 1
        self._results = ()
        self._state = PaginationState()

    def is_current(self, request: PageRequest) -> bool:
        return request.query == self._query and request.epoch == self._epoch

    def begin_fetch(self) -> PageRequest | None:
        """Reserve the next page for fetching, or None if that is not allowed now."""
        if not self._query or self._state.is_fetching or not self._state.has_more:
            return None
        self._state.is_fetching = True
        return PageRequest(query=self._query, page=self._state.current_page + 1, epoch=self._epoch)

    def append(
        self,
        hits: tuple[SearchHit, ...] | list[SearchHit],
        query: str,
        page: int,
        total_pages: int,
        *,
        epoch: int | None = None,
    ) -> bool:
        """Reconcile one fetched page. Returns False if it was discarded as stale."""
        if query != self._query or (epoch is not None and epoch != self._epoch):
            logger.debug("Discarding stale page {} for {!r} (current {!r})", page, query, self._query)
            return False
        if page != self._state.current_page + 1:
            logger.debug("Discarding out-of-order page {} for {!r}", page, query)
            return False

        batch = tuple(hits)
        self._results = batch if page == 1 else self._results + batch
        self._state.has_more = self._state.has_more and bool(batch) and page < total_pages
        self._state.current_page = page
        self._state.is_fetching = False
        self._state.error = None
        return True

    def fail(self, request: PageRequest, message: str = "") -> bool:
        """Stop paging after a failed fetch. Stale failures are ignored."""
        if not self.is_current(request):
            return False
        self._results = ()
        self._state.is_fetching = False
        self._state.has_more = False
        self._state.error = message or "search failed"
        return True
