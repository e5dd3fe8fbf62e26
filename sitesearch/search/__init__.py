"""Search endpoint client and result accumulation."""

from sitesearch.search.accumulator import ResultAccumulator
from sitesearch.search.errors import FetchError, MalformedResponseError, NetworkError, ServerError
from sitesearch.search.fetcher import PageFetcher
from sitesearch.search.models import PageRequest, PaginationState, SearchHit, SearchPage

__all__ = [
    "FetchError",
    "MalformedResponseError",
    "NetworkError",
    "PageFetcher",
    "PageRequest",
    "PaginationState",
    "ResultAccumulator",
    "SearchHit",
    "SearchPage",
    "ServerError",
]
