"""Process-lifetime cache for the folder listing."""

import asyncio
import logging
from typing import Any, Awaitable, Callable

log = logging.getLogger(__name__)


class ListingCache:
    """Fetch the listing once and hand back the same object afterwards.

    There is no expiry and no invalidation: a listing is considered fresh
    until the process exits. Concurrent first callers wait on one lock so only
    one external call is made. If the fetch raises, nothing is stored and the
    error goes to the caller; the next call tries again.
    """

    def __init__(self, fetch: Callable[[], Awaitable[Any]]):
        self._fetch = fetch
        self._lock = asyncio.Lock()
        self._value = None
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def get_listing(self):
        if self._loaded:
            return self._value
        async with self._lock:
            if not self._loaded:
                log.debug("Listing cache miss, fetching")
                self._value = await self._fetch()
                self._loaded = True
        return self._value
