"""
Word bank routes: /api/words
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from wordbank.core.recommendations import recommend
from wordbank.core.word_bank import WordBankStore
from wordbank.server.deps import get_word_bank


router = APIRouter(prefix="/api/words", tags=["words"])


class AddWordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    word: str
    id: str | None = None
    type: str | None = None
    definition: str | None = None
    pronunciation: str | None = None
    examples: list[str] | None = None
    part_of_speech: str | None = Field(None, alias="partOfSpeech")
    senses: list[dict] | None = None
    categories: list[str] | None = None
    source: str | None = None
    url: str | None = None


class TagRequest(BaseModel):
    tag: str


def _require(store: WordBankStore, word_id: str):
    word = store.get(word_id)
    if not word:
        raise HTTPException(status_code=404, detail="Word not found")
    return word


@router.get("")
async def list_words(q: str = "", store: WordBankStore = Depends(get_word_bank)):
    """List saved words, optionally filtered by word or definition."""
    return {"words": [w.to_dict() for w in store.filter(q)]}


@router.post("")
async def add_word(req: AddWordRequest, store: WordBankStore = Depends(get_word_bank)):
    """Save a word. Saving a word twice keeps the first copy."""
    if not req.word.strip():
        raise HTTPException(status_code=400, detail="word must not be empty")
    added = store.find_by_word(req.word) is None
    saved = store.add_word(req.model_dump(by_alias=True, exclude_none=True))
    return {"added": added, "word": saved.to_dict()}


@router.get("/recommendations")
async def recommendations(store: WordBankStore = Depends(get_word_bank)):
    """Suggested words to add next."""
    return {"recommendations": recommend(store.list_words())}


@router.get("/{word_id}")
async def get_word(word_id: str, store: WordBankStore = Depends(get_word_bank)):
    """Get a saved word by ID."""
    return _require(store, word_id).to_dict()


@router.delete("/{word_id}")
async def remove_word(word_id: str, store: WordBankStore = Depends(get_word_bank)):
    """Remove a saved word."""
    if not store.remove_word(word_id):
        raise HTTPException(status_code=404, detail="Word not found")
    return {"deleted": word_id}


@router.post("/{word_id}/tags")
async def add_tag(word_id: str, req: TagRequest, store: WordBankStore = Depends(get_word_bank)):
    """Tag a saved word. Tags already present are ignored."""
    _require(store, word_id)
    try:
        word = store.add_tag(word_id, req.tag)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return word.to_dict()


@router.delete("/{word_id}/tags/{tag}")
async def remove_tag(word_id: str, tag: str, store: WordBankStore = Depends(get_word_bank)):
    """Remove a tag from a saved word."""
    _require(store, word_id)
    return store.remove_tag(word_id, tag).to_dict()


@router.post("/{word_id}/review")
async def mark_reviewed(word_id: str, store: WordBankStore = Depends(get_word_bank)):
    """Record that a saved word was just reviewed."""
    _require(store, word_id)
    return store.mark_reviewed(word_id).to_dict()
