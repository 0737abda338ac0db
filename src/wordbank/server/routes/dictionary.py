"""
Chunked dictionary routes: /api/dictionary
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from wordbank.core.errors import NotFound
from wordbank.core.letters import words_for_letter
from wordbank.core.loader import DictionaryLoader
from wordbank.server.deps import get_loader


router = APIRouter(prefix="/api/dictionary", tags=["dictionary"])


@router.get("/browse")
async def browse(after: str = "", limit: int = 20, loader: DictionaryLoader = Depends(get_loader)):
    """Page through the dictionary in word order."""
    if limit < 1 or limit > 1000:
        raise HTTPException(status_code=400, detail="limit must be between 1 and 1000")
    entries = await loader.browse(after, limit)
    return {
        "words": [e.to_dict() for e in entries],
        "next": entries[-1].word if len(entries) == limit else None,
    }


@router.get("/search")
async def search(q: str, max_results: int = Query(50, alias="max"), loader: DictionaryLoader = Depends(get_loader)):
    """Substring search over words and definitions."""
    entries = await loader.search(q, max_results=max_results)
    return {"query": q, "words": [e.to_dict() for e in entries]}


@router.get("/chunks")
async def chunk_status(loader: DictionaryLoader = Depends(get_loader)):
    """Chunk index and which chunks are resident."""
    index = await loader.ensure_index_loaded()
    return {
        "index": [e.to_dict() for e in index],
        "cached": loader.cached_chunks(),
        "cache_size": loader.cache_size,
    }


@router.get("/letters/{letter}")
async def letter_words(letter: str):
    """Starter word list for a letter."""
    try:
        return {"letter": letter.lower(), "words": words_for_letter(letter)}
    except NotFound:
        raise HTTPException(status_code=400, detail="Invalid letter")
