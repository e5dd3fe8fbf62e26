"""Search bar controller and the UI collaborators it is wired to."""

from sitesearch.ui.controller import SearchController, SearchState, SearchView
from sitesearch.ui.debounce import QueryDebouncer
from sitesearch.ui.events import Event, EventTarget, ListenerHandle, Node
from sitesearch.ui.location import Navigator, URLSynchronizer
from sitesearch.ui.sentinel import IntersectionEntry, Observation, ScrollSentinel, Viewport

__all__ = [
    "Event",
    "EventTarget",
    "IntersectionEntry",
    "ListenerHandle",
    "Navigator",
    "Node",
    "Observation",
    "QueryDebouncer",
    "ScrollSentinel",
    "SearchController",
    "SearchState",
    "SearchView",
    "URLSynchronizer",
    "Viewport",
]
