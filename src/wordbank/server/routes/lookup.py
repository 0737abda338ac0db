"""
Third-party word lookups: /api/lookup
"""

from fastapi import APIRouter, Depends, Query

from wordbank.core.apis.datamuse import DatamuseClient
from wordbank.core.apis.dictionary_api import DictionaryApiClient
from wordbank.server.deps import get_datamuse, get_dictionary_api


router = APIRouter(prefix="/api/lookup", tags=["lookup"])


@router.get("/suggest")
async def suggest(q: str = "", max_results: int = Query(50, alias="max"), datamuse: DatamuseClient = Depends(get_datamuse)):
    """Prefix suggestions, or popular words for an empty query."""
    return {"query": q, "words": await datamuse.suggest(q, max_results=max_results)}


@router.get("/{word}")
async def lookup_word(word: str, api: DictionaryApiClient = Depends(get_dictionary_api)):
    """Definitions for an exact word. Unknown words give an empty list."""
    return {"word": word, "entries": await api.lookup(word)}


@router.get("/{word}/related")
async def related_words(word: str, datamuse: DatamuseClient = Depends(get_datamuse)):
    """Synonyms, antonyms and rhymes."""
    return {"word": word, **(await datamuse.related(word))}
