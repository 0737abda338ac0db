"""Shared fixtures: synthetic dictionaries, chunk directories, in-process Redis."""

import asyncio

import fakeredis
import httpx
import pytest

from wordbank.core.models import DictionaryEntry, Sense
from wordbank.core.sources import DirectorySource
from wordbank.data.chunk import write_chunks


def make_entry(word: str, definition: str | None = None) -> DictionaryEntry:
    return DictionaryEntry(
        word=word,
        part_of_speech="n",
        senses=[Sense(definitions=[definition or f"definition of {word}"])],
    )


def make_dictionary(count: int, extra: list[DictionaryEntry] | None = None) -> list[DictionaryEntry]:
    entries = [make_entry(f"a{i:05d}") for i in range(count)]
    entries.extend(extra or [])
    return sorted(entries, key=lambda e: e.word)


class CountingSource:
    """Wraps a source, counting fetches and optionally slowing them down."""

    def __init__(self, inner, delay: float = 0):
        self.inner = inner
        self.delay = delay
        self.index_fetches = 0
        self.chunk_fetches: list[int] = []

    async def fetch_index(self):
        self.index_fetches += 1
        return await self.inner.fetch_index()

    async def fetch_chunk(self, n):
        self.chunk_fetches.append(n)
        if self.delay:
            await asyncio.sleep(self.delay)
        return await self.inner.fetch_chunk(n)


@pytest.fixture
def dictionary():
    """2500 entries plus "abandon", which sorts last and lands in chunk 2."""
    return make_dictionary(2500, extra=[make_entry("abandon", "To Give Up completely")])


@pytest.fixture
def chunk_dir(tmp_path, dictionary):
    out = tmp_path / "chunks"
    write_chunks(dictionary, out, chunk_size=1000)
    return out


@pytest.fixture
def source(chunk_dir):
    return CountingSource(DirectorySource(chunk_dir))


@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis()


# === Canned third-party API responses ===

def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


DICTIONARY_PAYLOAD = [{
    "word": "abandon",
    "phonetic": "/əˈbæn.dən/",
    "meanings": [{
        "partOfSpeech": "verb",
        "definitions": [
            {"definition": "To give up completely.", "example": "abandon hope"},
            {"definition": "To leave behind."},
        ],
    }],
}]


def wikipedia_handler(request):
    params = request.url.params
    if params.get("list") == "search":
        if params["srsearch"] == "nothing here":
            return httpx.Response(200, json={"query": {"search": []}})
        return httpx.Response(200, json={"query": {"search": [
            {"pageid": 42, "title": "Occam's razor", "snippet": "problem-solving principle"},
        ]}})
    assert params["pageids"] == "42"
    return httpx.Response(200, json={"query": {"pages": {"42": {
        "pageid": 42,
        "title": "Occam's razor",
        "extract": "Occam's razor is a problem-solving principle.",
        "categories": [{"title": "Category:Heuristics"}, {"title": "Category:Philosophy of science"}],
    }}}})
