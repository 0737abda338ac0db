"""
Encyclopedic concept routes: /api/concepts
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from wordbank.core.apis.wikipedia import POPULAR_CONCEPTS, WikipediaClient, popular_categories
from wordbank.core.word_bank import WordBankStore
from wordbank.server.deps import get_wikipedia, get_word_bank


router = APIRouter(prefix="/api/concepts", tags=["concepts"])


class AddConceptRequest(BaseModel):
    query: str


@router.get("/popular")
async def popular():
    """Quick-add concepts and their categories."""
    return {"concepts": POPULAR_CONCEPTS, "categories": popular_categories()}


@router.post("")
async def add_concept(
    req: AddConceptRequest,
    wikipedia: WikipediaClient = Depends(get_wikipedia),
    store: WordBankStore = Depends(get_word_bank),
):
    """Look a concept up on Wikipedia and save it to the word bank."""
    concept = await wikipedia.find_concept(req.query)
    added = store.find_by_word(concept["word"]) is None
    saved = store.add_word(concept)
    return {"added": added, "word": saved.to_dict()}
