"""Run the search bar controller headlessly against a live search endpoint."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from urllib.parse import urlencode

from loguru import logger

from sitesearch.config.loader import load_config
from sitesearch.config.schema import Config
from sitesearch.search.fetcher import PageFetcher
from sitesearch.ui.controller import SearchController, SearchState, SearchView
from sitesearch.ui.events import EventTarget, Node
from sitesearch.ui.location import Navigator, URLSynchronizer
from sitesearch.ui.sentinel import Viewport


async def run_search(
    query: str,
    *,
    pages: int,
    config: Config,
    fetcher: PageFetcher | None = None,
) -> SearchView:
    """Load up to ``pages`` pages for ``query`` by scrolling the sentinel into view."""
    param = config.search_bar.query_param
    navigator = Navigator("/?" + urlencode({param: query}))
    viewport = Viewport()
    container = Node("search-bar")
    sentinel = Node("load-more", parent=container)

    controller = SearchController(
        fetcher or PageFetcher(config.endpoint.base_url, timeout=config.endpoint.timeout),
        URLSynchronizer(navigator, param=param),
        viewport=viewport,
        document=EventTarget(),
        container=container,
        debounce_ms=config.search_bar.debounce_ms,
    )
    await controller.start()
    try:
        await controller.wait_idle()
        controller.sentinel_ref(sentinel)
        while controller.state is SearchState.READY and controller.view().page < pages:
            viewport.set_visible(sentinel)
            await controller.wait_idle()
        return controller.view()
    finally:
        controller.stop()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("query")
    parser.add_argument("--pages", type=int, default=1, help="maximum number of pages to load")
    parser.add_argument("--base-url", default=None, help="search endpoint URL")
    parser.add_argument("--config", default=None, help="path to config.json")
    args = parser.parse_args(argv)

    config = load_config(Path(args.config) if args.config else None)
    if args.base_url:
        config.endpoint.base_url = args.base_url

    logger.remove()
    logger.add(sys.stderr, level=config.logging.level)

    query = args.query.strip()
    if not query:
        parser.error("query must not be empty")

    view = asyncio.run(run_search(query, pages=max(1, args.pages), config=config))

    if view.error:
        print(f"Error: {view.error}", file=sys.stderr)
        return 1
    if not view.results:
        print(f"No results for: {query}")
        return 0

    for i, hit in enumerate(view.results, 1):
        print(f"{i}. [{hit.category}] {hit.title}\n   {hit.path}")
        if hit.summary:
            print(f"   {hit.summary}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
