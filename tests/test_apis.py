"""Tests for the third-party API clients, with httpx.MockTransport."""

import asyncio

import httpx
import pytest

from conftest import DICTIONARY_PAYLOAD, mock_client, wikipedia_handler
from wordbank.core.apis.datamuse import DatamuseClient
from wordbank.core.apis.dictionary_api import DictionaryApiClient, format_entry
from wordbank.core.apis.wikipedia import WikipediaClient, popular_categories
from wordbank.core.errors import FetchFailure, NotFound
from wordbank.core.sources import HttpSource


# === dictionaryapi.dev ===

def test_lookup_formats_first_meaning():
    def handler(request):
        assert request.url.path.endswith("/abandon")
        return httpx.Response(200, json=DICTIONARY_PAYLOAD)

    api = DictionaryApiClient(client=mock_client(handler))
    [entry] = asyncio.run(api.lookup("abandon"))

    assert entry == {
        "word": "abandon",
        "definition": "To give up completely.",
        "partOfSpeech": "verb",
        "pronunciation": "/əˈbæn.dən/",
        "examples": ["abandon hope"],
    }


def test_lookup_escapes_word_in_path():
    paths = []

    def handler(request):
        paths.append(request.url.raw_path)
        return httpx.Response(200, json=DICTIONARY_PAYLOAD)

    api = DictionaryApiClient(client=mock_client(handler))
    asyncio.run(api.lookup("what?"))
    asyncio.run(api.lookup("AC/DC"))

    assert paths[0].endswith(b"/what%3F")
    assert paths[1].endswith(b"/AC%2FDC")


def test_lookup_unknown_word_is_empty():
    api = DictionaryApiClient(client=mock_client(lambda r: httpx.Response(404, json={"title": "No Definitions Found"})))
    assert asyncio.run(api.lookup("qwzx")) == []


def test_lookup_server_error_is_fetch_failure():
    api = DictionaryApiClient(client=mock_client(lambda r: httpx.Response(500)))
    with pytest.raises(FetchFailure):
        asyncio.run(api.lookup("abandon"))


def test_lookup_network_error_is_fetch_failure():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    api = DictionaryApiClient(client=mock_client(handler))
    with pytest.raises(FetchFailure):
        asyncio.run(api.lookup("abandon"))


def test_format_entry_without_meanings():
    assert format_entry({"word": "x"}) == {
        "word": "x",
        "definition": "",
        "partOfSpeech": None,
        "pronunciation": None,
        "examples": [],
    }


# === Datamuse ===

def test_suggest_keeps_words_with_definitions():
    def handler(request):
        assert request.url.params["sp"] == "aba*"
        assert request.url.params["md"] == "d"
        return httpx.Response(200, json=[
            {"word": "abandon", "defs": ["v\tto give up"]},
            {"word": "abax"},
        ])

    datamuse = DatamuseClient(client=mock_client(handler))
    assert asyncio.run(datamuse.suggest("aba")) == [
        {"word": "abandon", "definition": "to give up", "partOfSpeech": "v"},
    ]


def test_suggest_empty_prefix_returns_popular():
    def handler(request):
        assert request.url.params["v"] == "1000"
        return httpx.Response(200, json=[{"word": f"w{i}"} for i in range(80)])

    datamuse = DatamuseClient(client=mock_client(handler))
    result = asyncio.run(datamuse.suggest(""))
    assert len(result) == 50
    assert result[0] == {"word": "w0", "definition": "", "partOfSpeech": None}


def test_related_words():
    responses = {
        "rel_syn": [{"word": "desert"}, {"word": "forsake"}],
        "rel_ant": [{"word": "keep"}],
        "rel_rhy": [],
    }

    def handler(request):
        [param] = list(request.url.params.keys())
        return httpx.Response(200, json=responses[param])

    datamuse = DatamuseClient(client=mock_client(handler))
    assert asyncio.run(datamuse.related("abandon")) == {
        "synonyms": ["desert", "forsake"],
        "antonyms": ["keep"],
        "rhymes": [],
        "related": [],
    }


# === Wikipedia ===

def test_find_concept():
    wikipedia = WikipediaClient(client=mock_client(wikipedia_handler))
    concept = asyncio.run(wikipedia.find_concept("Occam's Razor"))

    assert concept == {
        "type": "concept",
        "id": "42",
        "word": "Occam's razor",
        "definition": "Occam's razor is a problem-solving principle.",
        "source": "Wikipedia",
        "url": "https://en.wikipedia.org/?curid=42",
        "categories": ["Heuristics", "Philosophy of science"],
    }


def test_find_concept_not_found():
    wikipedia = WikipediaClient(client=mock_client(wikipedia_handler))
    with pytest.raises(NotFound):
        asyncio.run(wikipedia.find_concept("nothing here"))


def test_popular_categories_unique_in_order():
    assert popular_categories() == ["Politics", "Philosophy", "Psychology", "Social", "Culture", "Business"]


# === Static chunk server ===

def test_http_source():
    def handler(request):
        if request.url.path == "/chunks/index.json":
            return httpx.Response(200, json=[{"firstWord": "a", "chunk": 0}])
        if request.url.path == "/chunks/chunk-0.json":
            return httpx.Response(200, json=[{"word": "a", "senses": []}])
        if request.url.path == "/chunks/chunk-1.json":
            return httpx.Response(503)
        return httpx.Response(404)

    source = HttpSource("https://static.example/chunks/", client=mock_client(handler))

    assert asyncio.run(source.fetch_index()) == [{"firstWord": "a", "chunk": 0}]
    assert asyncio.run(source.fetch_chunk(0)) == [{"word": "a", "senses": []}]
    with pytest.raises(FetchFailure):
        asyncio.run(source.fetch_chunk(1))
    with pytest.raises(NotFound):
        asyncio.run(source.fetch_chunk(2))
