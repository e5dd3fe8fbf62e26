"""Search endpoint adapter."""

import httpx

from sitesearch.search.errors import MalformedResponseError, NetworkError, ServerError
from sitesearch.search.models import SearchPage


class PageFetcher:
    """Fetch one page of results for a query from the search endpoint."""

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url
        self.timeout = timeout

    async def fetch(self, query: str, page: int = 1) -> SearchPage:
        """Issue a single GET for (query, page) and normalize the response."""
        if page < 1:
            raise ValueError("page must be >= 1")
        if not query.strip():
            return SearchPage.empty(page)

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.base_url,
                    params={"q": query, "page": page},
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise ServerError(f"search endpoint returned {status}", status_code=status) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"search request failed: {e}") from e

        try:
            return SearchPage.from_dict(response.json(), requested_page=page)
        except ValueError as e:
            raise MalformedResponseError(f"invalid search response: {e}") from e
