"""
Word definitions from dictionaryapi.dev, keyed by exact word.
"""

from urllib.parse import quote

from wordbank.core.apis.base import ApiClient
from wordbank.core.errors import NotFound


API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


def format_entry(entry: dict) -> dict:
    """Flatten an API entry down to its first meaning's first definition."""
    meanings = entry.get("meanings") or [{}]
    meaning = meanings[0]
    definitions = meaning.get("definitions") or [{}]
    first = definitions[0]

    return {
        "word": entry["word"],
        "definition": first.get("definition", ""),
        "partOfSpeech": meaning.get("partOfSpeech"),
        "pronunciation": entry.get("phonetic"),
        "examples": [first["example"]] if first.get("example") else [],
    }


class DictionaryApiClient(ApiClient):
    name = "dictionaryapi"

    def __init__(self, client=None, base_url: str = API_URL):
        super().__init__(client)
        self.base_url = base_url.rstrip("/")

    async def lookup(self, word: str) -> list[dict]:
        """Formatted entries for `word`. An unknown word gives an empty list."""
        word = word.strip()
        if not word:
            return []
        try:
            data = await self.get_json(f"{self.base_url}/{quote(word, safe='')}")
        except NotFound:
            return []
        return [format_entry(e) for e in data]
