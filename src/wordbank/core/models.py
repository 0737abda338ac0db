"""
Dictionary entries, chunk index entries and saved words.

JSON field names follow the chunked dataset files (camelCase), Python
attributes are snake_case.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Relation:
    type: str
    target: str

    def to_dict(self) -> dict:
        return {"type": self.type, "target": self.target}

    @classmethod
    def from_dict(cls, data: dict) -> "Relation":
        return cls(type=data["type"], target=data["target"])


@dataclass
class Sense:
    definitions: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)
    id: str | None = None
    synset_id: str | None = None

    def to_dict(self) -> dict:
        data = {
            "definitions": list(self.definitions),
            "examples": list(self.examples),
            "relations": [r.to_dict() for r in self.relations],
        }
        if self.id is not None:
            data["id"] = self.id
        if self.synset_id is not None:
            data["synsetId"] = self.synset_id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Sense":
        return cls(
            definitions=list(data.get("definitions", [])),
            examples=list(data.get("examples", [])),
            relations=[Relation.from_dict(r) for r in data.get("relations", [])],
            id=data.get("id"),
            synset_id=data.get("synsetId"),
        )


@dataclass
class DictionaryEntry:
    word: str
    senses: list[Sense] = field(default_factory=list)
    part_of_speech: str | None = None
    spellings: list[str] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)
    id: str | None = None

    def definitions(self) -> list[str]:
        return [d for sense in self.senses for d in sense.definitions]

    def matches(self, query_lower: str) -> bool:
        """Case-insensitive substring match on the word or any definition."""
        if query_lower in self.word.lower():
            return True
        return any(query_lower in d.lower() for d in self.definitions())

    def to_dict(self) -> dict:
        data = {
            "word": self.word,
            "senses": [s.to_dict() for s in self.senses],
            "spellings": list(self.spellings),
            "relations": [r.to_dict() for r in self.relations],
        }
        if self.id is not None:
            data["id"] = self.id
        if self.part_of_speech is not None:
            data["partOfSpeech"] = self.part_of_speech
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DictionaryEntry":
        return cls(
            word=data["word"],
            senses=[Sense.from_dict(s) for s in data.get("senses", [])],
            part_of_speech=data.get("partOfSpeech"),
            spellings=list(data.get("spellings", [])),
            relations=[Relation.from_dict(r) for r in data.get("relations", [])],
            id=data.get("id"),
        )


@dataclass(frozen=True)
class IndexEntry:
    first_word: str
    chunk: int

    def to_dict(self) -> dict:
        return {"firstWord": self.first_word, "chunk": self.chunk}

    @classmethod
    def from_dict(cls, data: dict) -> "IndexEntry":
        return cls(first_word=data["firstWord"], chunk=int(data["chunk"]))


@dataclass
class SavedWord:
    id: str
    word: str
    date_added: str
    type: str = "word"
    definition: str | None = None
    pronunciation: str | None = None
    examples: list[str] | None = None
    part_of_speech: str | None = None
    senses: list[dict] | None = None
    categories: list[str] | None = None
    source: str | None = None
    url: str | None = None
    tags: list[str] = field(default_factory=list)
    last_reviewed: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "word": self.word,
            "definition": self.definition,
            "pronunciation": self.pronunciation,
            "examples": self.examples,
            "partOfSpeech": self.part_of_speech,
            "senses": self.senses,
            "categories": self.categories,
            "source": self.source,
            "url": self.url,
            "tags": list(self.tags),
            "dateAdded": self.date_added,
            "lastReviewed": self.last_reviewed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SavedWord":
        return cls(
            id=data["id"],
            type=data.get("type") or "word",
            word=data["word"],
            definition=data.get("definition"),
            pronunciation=data.get("pronunciation"),
            examples=data.get("examples"),
            part_of_speech=data.get("partOfSpeech"),
            senses=data.get("senses"),
            categories=data.get("categories"),
            source=data.get("source"),
            url=data.get("url"),
            tags=list(data.get("tags") or []),
            date_added=data["dateAdded"],
            last_reviewed=data.get("lastReviewed"),
        )


PART_OF_SPEECH_LABELS = {
    "n": "Noun",
    "v": "Verb",
    "a": "Adjective",
    "r": "Adverb",
}


def part_of_speech_label(pos: str | None) -> str:
    return PART_OF_SPEECH_LABELS.get(pos, pos or "Unknown")
