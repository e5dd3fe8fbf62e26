import asyncio

import pytest

from sitesearch.ui.debounce import QueryDebouncer


@pytest.mark.asyncio
async def test_burst_commits_only_last_value_once() -> None:
    commits: list[str] = []
    debouncer = QueryDebouncer(commits.append, wait_ms=40)

    for value in ("r", "re", "rea", "read"):
        debouncer.push(value)
        await asyncio.sleep(0.005)

    assert commits == []
    await asyncio.sleep(0.12)

    assert commits == ["read"]
    assert debouncer.pending is False


@pytest.mark.asyncio
async def test_separate_bursts_commit_separately() -> None:
    commits: list[str] = []
    debouncer = QueryDebouncer(commits.append, wait_ms=10)

    debouncer.push("go")
    await asyncio.sleep(0.06)
    debouncer.push("rust")
    await asyncio.sleep(0.06)

    assert commits == ["go", "rust"]


@pytest.mark.asyncio
async def test_flush_commits_pending_value_immediately() -> None:
    commits: list[str] = []
    debouncer = QueryDebouncer(commits.append, wait_ms=10_000)

    debouncer.push("a")
    debouncer.push("ab")
    debouncer.flush()
    debouncer.flush()

    assert commits == ["ab"]
    assert debouncer.pending is False


@pytest.mark.asyncio
async def test_cancel_drops_pending_value() -> None:
    commits: list[str] = []
    debouncer = QueryDebouncer(commits.append, wait_ms=10)

    debouncer.push("abc")
    debouncer.cancel()
    await asyncio.sleep(0.05)

    assert commits == []


def test_negative_wait_is_rejected() -> None:
    with pytest.raises(ValueError):
        QueryDebouncer(lambda _v: None, wait_ms=-1)
