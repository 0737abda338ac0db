"""Tests for the latest-query guard and debouncer."""

import asyncio

from wordbank.core.query import Debouncer, LatestQueryGuard


def test_tokens_increase():
    guard = LatestQueryGuard()
    t1 = guard.issue()
    t2 = guard.issue()
    assert t2 > t1
    assert guard.latest == t2


def test_stale_result_discarded():
    guard = LatestQueryGuard()
    t1 = guard.issue()
    t2 = guard.issue()

    assert guard.apply(t2, ["new"]) is True
    assert guard.apply(t1, ["old"]) is False
    assert guard.result == ["new"]


def test_debounce_runs_only_last_call():
    calls = []

    async def fetch(term):
        calls.append(term)
        return [term]

    async def scenario():
        debouncer = Debouncer(delay=0.02)
        results = await asyncio.gather(
            debouncer.run(fetch, "a"),
            debouncer.run(fetch, "ab"),
            debouncer.run(fetch, "abc"),
        )
        return debouncer, results

    debouncer, results = asyncio.run(scenario())

    assert calls == ["abc"]
    assert results == [None, None, ["abc"]]
    assert debouncer.guard.result == ["abc"]


def test_late_response_does_not_overwrite_newer():
    async def slow(term):
        await asyncio.sleep(0.05)
        return [term]

    async def fast(term):
        return [term]

    async def scenario():
        debouncer = Debouncer(delay=0)

        async def later():
            await asyncio.sleep(0.01)
            return await debouncer.run(fast, "new")

        results = await asyncio.gather(debouncer.run(slow, "old"), later())
        return debouncer, results

    debouncer, results = asyncio.run(scenario())

    assert results == [None, ["new"]]
    assert debouncer.guard.result == ["new"]
