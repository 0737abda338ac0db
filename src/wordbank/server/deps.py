"""
Shared dependencies for routes.

Everything is built once in the app lifespan and kept on app.state;
these functions only hand it out, so tests can swap any of them through
app.dependency_overrides.
"""

from fastapi import Request

from wordbank.core.apis.datamuse import DatamuseClient
from wordbank.core.apis.dictionary_api import DictionaryApiClient
from wordbank.core.apis.wikipedia import WikipediaClient
from wordbank.core.loader import DictionaryLoader
from wordbank.core.word_bank import WordBankStore


def get_loader(request: Request) -> DictionaryLoader:
    return request.app.state.loader


def get_word_bank(request: Request) -> WordBankStore:
    return request.app.state.word_bank


def get_dictionary_api(request: Request) -> DictionaryApiClient:
    return request.app.state.dictionary_api


def get_datamuse(request: Request) -> DatamuseClient:
    return request.app.state.datamuse


def get_wikipedia(request: Request) -> WikipediaClient:
    return request.app.state.wikipedia
