"""Models for search hits, result pages and pagination state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

_HIT_FIELDS: tuple[str, ...] = ("id", "title", "category", "summary", "content")


def _require_int(data: dict[str, Any], key: str, default: int | None = None) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    if value < 0:
        raise ValueError(f"{key} must be >= 0")
    return value


@dataclass(frozen=True, slots=True)
class SearchHit:
    """Single search result record."""

    id: str
    title: str
    category: str
    summary: str = ""
    content: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchHit":
        if not isinstance(data, dict):
            raise ValueError("Search hit must be an object")

        values: dict[str, str] = {}
        for key in _HIT_FIELDS:
            value = data.get(key, "")
            if not isinstance(value, str):
                raise ValueError(f"{key} must be a string")
            values[key] = value

        if not values["id"].strip():
            raise ValueError("Search hit id is required")
        return cls(**values)

    @property
    def path(self) -> str:
        """Site path of the page this hit points at."""
        parts = (self.category, self.id, self.title)
        return "/" + "/".join(quote(part, safe="") for part in parts)


@dataclass(frozen=True, slots=True)
class SearchPage:
    """One page of results as returned by the search endpoint."""

    hits: tuple[SearchHit, ...] = ()
    total_hits: int = 0
    total_pages: int = 0
    current_page: int = 1

    @classmethod
    def empty(cls, page: int = 1) -> "SearchPage":
        return cls(current_page=page)

    @classmethod
    def from_dict(cls, data: Any, requested_page: int = 1) -> "SearchPage":
        if not isinstance(data, dict):
            raise ValueError("Search response must be an object")

        raw_results = data.get("results", [])
        if not isinstance(raw_results, list):
            raise ValueError("results must be an array")

        return cls(
            hits=tuple(SearchHit.from_dict(item) for item in raw_results),
            total_hits=_require_int(data, "total_hits", 0),
            total_pages=_require_int(data, "total_pages"),
            current_page=_require_int(data, "current_page", requested_page),
        )


@dataclass(frozen=True, slots=True)
class PageRequest:
    """A page fetch tagged with the query and reset epoch that issued it."""

    query: str
    page: int
    epoch: int = 0


@dataclass(slots=True)
class PaginationState:
    """Paging progress for the committed query."""

    current_page: int = 0
    has_more: bool = True
    is_fetching: bool = False
    error: str | None = None
