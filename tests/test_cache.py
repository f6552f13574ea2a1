import asyncio

import pytest

from analogfolio.cache import ListingCache
from analogfolio.errors import ExternalServiceFailure


class CountingFetch:
    def __init__(self, result=None, fail=False, delay=0):
        self.calls = 0
        self.result = result if result is not None else {"resources": []}
        self.fail = fail
        self.delay = delay

    async def __call__(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise ExternalServiceFailure("search is down")
        return self.result


def test_second_call_returns_cached_value():
    fetch = CountingFetch()
    cache = ListingCache(fetch)

    async def run():
        first = await cache.get_listing()
        second = await cache.get_listing()
        return first, second

    first, second = asyncio.run(run())
    assert fetch.calls == 1
    assert first is second
    assert cache.loaded


def test_cached_value_survives_source_changes():
    fetch = CountingFetch(result={"resources": [{"public_id": "a"}]})
    cache = ListingCache(fetch)

    async def run():
        await cache.get_listing()
        fetch.result = {"resources": []}
        return await cache.get_listing()

    assert asyncio.run(run()) == {"resources": [{"public_id": "a"}]}


def test_concurrent_first_calls_share_one_fetch():
    fetch = CountingFetch(delay=0.01)
    cache = ListingCache(fetch)

    async def run():
        return await asyncio.gather(*(cache.get_listing() for _ in range(5)))

    results = asyncio.run(run())
    assert fetch.calls == 1
    assert all(r is results[0] for r in results)


def test_errors_propagate_and_are_not_cached():
    fetch = CountingFetch(fail=True)
    cache = ListingCache(fetch)

    async def run():
        with pytest.raises(ExternalServiceFailure):
            await cache.get_listing()
        fetch.fail = False
        return await cache.get_listing()

    assert asyncio.run(run()) == {"resources": []}
    assert fetch.calls == 2
