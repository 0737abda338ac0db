"""
Chunked dictionary loader.

The dictionary is split offline into fixed-size, word-sorted chunks plus an
index of each chunk's first word (see wordbank.data.chunk). The loader
answers two kinds of query over that dataset:

  browse(start_after, limit)  ordered page of entries after a cursor
  search(query, max_results)  substring match on words and definitions

Only a handful of decoded chunks are held in memory. Eviction is FIFO by
insertion: when the cache grows past its cap, the chunk that was inserted
first is dropped, no matter how recently it was read.
"""

import asyncio
import bisect
import logging
from collections import OrderedDict

from wordbank.core.errors import FetchFailure, IndexUnavailable, NotFound
from wordbank.core.models import DictionaryEntry, IndexEntry
from wordbank.core.sources import ChunkSource


logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 5

Chunk = tuple[DictionaryEntry, ...]


class DictionaryLoader:
    def __init__(self, source: ChunkSource, cache_size: int = DEFAULT_CACHE_SIZE):
        if cache_size < 1:
            raise ValueError(f"cache_size must be >= 1, got {cache_size}")
        self.source = source
        self.cache_size = cache_size
        self._index: list[IndexEntry] | None = None
        self._index_task: asyncio.Task | None = None
        self._cache: OrderedDict[int, Chunk] = OrderedDict()
        self._inflight: dict[int, asyncio.Task] = {}

    # === Index ===

    @property
    def index(self) -> list[IndexEntry] | None:
        return self._index

    async def ensure_index_loaded(self) -> list[IndexEntry]:
        """Fetch the index once. Failures propagate; the next call refetches."""
        if self._index is not None:
            return self._index

        if self._index_task is None:
            self._index_task = asyncio.ensure_future(self._fetch_index())
        task = self._index_task
        try:
            return await asyncio.shield(task)
        finally:
            if task.done() and self._index_task is task:
                self._index_task = None

    async def _fetch_index(self) -> list[IndexEntry]:
        try:
            raw = await self.source.fetch_index()
            index = [IndexEntry.from_dict(e) for e in raw]
        except (FetchFailure, NotFound) as e:
            logger.warning("Dictionary index unavailable from %r: %s", self.source, e)
            raise IndexUnavailable(f"Dictionary index unavailable: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise IndexUnavailable(f"Malformed dictionary index: {e}") from e

        self._index = index
        logger.info("Loaded dictionary index: %d chunks", len(index))
        return index

    # === Chunks ===

    def cached_chunks(self) -> list[int]:
        """Resident chunk numbers, oldest insertion first."""
        return list(self._cache)

    async def load_chunk(self, n: int) -> Chunk:
        """Return chunk `n`, fetching it when it is not cached.

        Concurrent callers asking for the same uncached chunk wait on a
        single fetch.
        """
        if n < 0:
            raise NotFound(f"No chunk {n}")

        chunk = self._cache.get(n)
        if chunk is not None:
            return chunk

        task = self._inflight.get(n)
        if task is None:
            task = asyncio.ensure_future(self._fetch_chunk(n))
            self._inflight[n] = task
            task.add_done_callback(lambda _t, n=n: self._inflight.pop(n, None))
        return await asyncio.shield(task)

    async def _fetch_chunk(self, n: int) -> Chunk:
        raw = await self.source.fetch_chunk(n)
        try:
            chunk = tuple(DictionaryEntry.from_dict(e) for e in raw)
        except (KeyError, TypeError, ValueError) as e:
            raise FetchFailure(f"Malformed chunk {n}: {e}") from e

        self._insert(n, chunk)
        return chunk

    def _insert(self, n: int, chunk: Chunk):
        if n in self._cache:
            return
        self._cache[n] = chunk
        if len(self._cache) > self.cache_size:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug("Evicted chunk %d", evicted)

    def reset(self):
        """Forget the index and every cached chunk."""
        self._index = None
        self._index_task = None
        self._cache.clear()
        self._inflight.clear()

    # === Queries ===

    def _locate(self, index: list[IndexEntry], start_after: str) -> int:
        if not start_after:
            return 0
        first_words = [e.first_word for e in index]
        pos = bisect.bisect_right(first_words, start_after) - 1
        return max(pos, 0)

    async def browse(self, start_after: str = "", limit: int = 20) -> list[DictionaryEntry]:
        """Up to `limit` entries whose word sorts strictly after `start_after`.

        An empty cursor starts from the first entry. A cursor outside every
        chunk's range falls back to chunk 0 instead of failing.
        """
        index = await self.ensure_index_loaded()
        if limit <= 0 or not index:
            return []

        results: list[DictionaryEntry] = []
        pos = self._locate(index, start_after)

        while pos < len(index) and len(results) < limit:
            chunk = await self.load_chunk(index[pos].chunk)
            start = 0
            if start_after:
                start = bisect.bisect_right([e.word for e in chunk], start_after)
            results.extend(chunk[start:start + limit - len(results)])
            pos += 1

        return results

    async def search(self, query: str, max_results: int = 50) -> list[DictionaryEntry]:
        """Case-insensitive substring search in dictionary order. No ranking."""
        query_lower = query.strip().lower()
        if not query_lower or max_results <= 0:
            return []

        index = await self.ensure_index_loaded()
        results: list[DictionaryEntry] = []

        for entry in index:
            chunk = await self.load_chunk(entry.chunk)
            for item in chunk:
                if item.matches(query_lower):
                    results.append(item)
                    if len(results) >= max_results:
                        return results

        return results
