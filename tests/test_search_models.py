import pytest

from sitesearch.search.models import SearchHit, SearchPage


def test_hit_from_dict_fills_optional_fields() -> None:
    hit = SearchHit.from_dict({"id": "n7", "title": "Weekly notes", "category": "note"})

    assert hit.summary == ""
    assert hit.content == ""


def test_hit_from_dict_requires_id() -> None:
    with pytest.raises(ValueError, match="id is required"):
        SearchHit.from_dict({"id": " ", "title": "x", "category": "article"})


def test_hit_from_dict_rejects_non_string_fields() -> None:
    with pytest.raises(ValueError, match="title must be a string"):
        SearchHit.from_dict({"id": "a1", "title": 42, "category": "article"})


def test_hit_path_quotes_segments() -> None:
    hit = SearchHit(id="a1", title="Async / Await in Rust", category="article")

    assert hit.path == "/article/a1/Async%20%2F%20Await%20in%20Rust"


def test_unknown_category_is_kept() -> None:
    hit = SearchHit.from_dict({"id": "x", "title": "t", "category": "podcast"})

    assert hit.category == "podcast"


def test_page_from_dict_defaults_current_page_to_requested() -> None:
    page = SearchPage.from_dict({"total_pages": 3, "results": []}, requested_page=2)

    assert page.current_page == 2
    assert page.total_hits == 0
    assert page.hits == ()


def test_page_from_dict_rejects_bool_as_integer() -> None:
    with pytest.raises(ValueError, match="total_pages must be an integer"):
        SearchPage.from_dict({"total_pages": True, "results": []})


def test_page_from_dict_rejects_non_object() -> None:
    with pytest.raises(ValueError, match="must be an object"):
        SearchPage.from_dict([])
