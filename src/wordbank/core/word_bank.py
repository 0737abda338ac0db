"""
Word bank - the user's saved words, persisted in Redis.

The whole word list lives under one key and is rewritten on every
mutation. Each mutation builds a new list and only replaces the in-memory
state once the write succeeded, so a failed write leaves nothing behind.
"""

import json
import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone

import redis

from wordbank.core.config import DEFAULT_STORAGE_KEY
from wordbank.core.errors import WordBankError
from wordbank.core.models import SavedWord


logger = logging.getLogger(__name__)

STORAGE_VERSION = 0


def generate_id() -> str:
    return uuid.uuid4().hex[:12]


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class WordBankStore:
    """Stores saved words in Redis."""

    def __init__(self, client: redis.Redis, key: str = DEFAULT_STORAGE_KEY):
        self.client = client
        self.key = key
        self.words: list[SavedWord] = self._hydrate()

    def _hydrate(self) -> list[SavedWord]:
        data = self.client.get(self.key)
        if data is None:
            return []
        try:
            doc = json.loads(data)
            words = [SavedWord.from_dict(w) for w in doc["state"]["words"]]
        except (KeyError, TypeError, ValueError) as e:
            raise WordBankError(f"Corrupt word bank under {self.key}: {e}") from e
        logger.info("Hydrated %d saved words from %s", len(words), self.key)
        return words

    def _commit(self, words: list[SavedWord]):
        doc = {
            "state": {"words": [w.to_dict() for w in words]},
            "version": STORAGE_VERSION,
        }
        self.client.set(self.key, json.dumps(doc))
        self.words = words

    def _update(self, word_id: str, fn) -> SavedWord | None:
        for i, word in enumerate(self.words):
            if word.id == word_id:
                updated = fn(word)
                words = list(self.words)
                words[i] = updated
                self._commit(words)
                return updated
        return None

    # === Reads ===

    def list_words(self) -> list[SavedWord]:
        return list(self.words)

    def get(self, word_id: str) -> SavedWord | None:
        return next((w for w in self.words if w.id == word_id), None)

    def find_by_word(self, word: str) -> SavedWord | None:
        return next((w for w in self.words if w.word == word), None)

    def filter(self, term: str) -> list[SavedWord]:
        """Saved words whose word or definition contains `term`, ignoring case."""
        term_lower = term.strip().lower()
        if not term_lower:
            return self.list_words()
        return [
            w for w in self.words
            if term_lower in w.word.lower()
            or term_lower in (w.definition or "").lower()
        ]

    # === Mutations ===

    def add_word(self, candidate: dict) -> SavedWord:
        """Save a word. Returns the existing entry if the word is already saved."""
        existing = self.find_by_word(candidate["word"])
        if existing:
            return existing

        word_id = candidate.get("id")
        if not word_id or self.get(word_id) is not None:
            word_id = generate_id()

        saved = SavedWord(
            id=word_id,
            type=candidate.get("type") or "word",
            word=candidate["word"],
            definition=candidate.get("definition"),
            pronunciation=candidate.get("pronunciation"),
            examples=candidate.get("examples"),
            part_of_speech=candidate.get("partOfSpeech"),
            senses=candidate.get("senses"),
            categories=candidate.get("categories"),
            source=candidate.get("source"),
            url=candidate.get("url"),
            tags=[],
            date_added=now_iso(),
        )
        self._commit(self.words + [saved])
        return saved

    def remove_word(self, word_id: str) -> bool:
        words = [w for w in self.words if w.id != word_id]
        if len(words) == len(self.words):
            return False
        self._commit(words)
        return True

    def add_tag(self, word_id: str, tag: str) -> SavedWord | None:
        tag = tag.strip()
        if not tag:
            raise ValueError("Tag must not be blank")

        word = self.get(word_id)
        if word is None or tag in word.tags:
            return word
        return self._update(word_id, lambda w: replace(w, tags=w.tags + [tag]))

    def remove_tag(self, word_id: str, tag: str) -> SavedWord | None:
        word = self.get(word_id)
        if word is None or tag not in word.tags:
            return word
        return self._update(word_id, lambda w: replace(w, tags=[t for t in w.tags if t != tag]))

    def mark_reviewed(self, word_id: str) -> SavedWord | None:
        return self._update(word_id, lambda w: replace(w, last_reviewed=now_iso()))

    def clear(self):
        self._commit([])
