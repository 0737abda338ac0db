"""
Prefix suggestions, popular words and word relations from Datamuse.
"""

import asyncio

from wordbank.core.apis.base import ApiClient


API_URL = "https://api.datamuse.com/words"

RELATIONS = {
    "synonyms": "rel_syn",
    "antonyms": "rel_ant",
    "rhymes": "rel_rhy",
}


def split_def(raw: str) -> tuple[str, str]:
    """Datamuse definitions look like "n\\ta thing"."""
    pos, _, definition = raw.partition("\t")
    return pos, definition


def format_suggestion(item: dict) -> dict:
    defs = item.get("defs") or []
    pos, definition = split_def(defs[0]) if defs else ("", "")
    return {
        "word": item["word"],
        "definition": definition,
        "partOfSpeech": pos or None,
    }


class DatamuseClient(ApiClient):
    name = "datamuse"

    def __init__(self, client=None, base_url: str = API_URL):
        super().__init__(client)
        self.base_url = base_url

    async def suggest(self, prefix: str, max_results: int = 50) -> list[dict]:
        """Words starting with `prefix`, keeping only those with a definition."""
        prefix = prefix.strip()
        if not prefix:
            return await self.popular(max_results)
        data = await self.get_json(
            self.base_url, params={"sp": f"{prefix}*", "md": "d", "max": max_results}
        )
        return [format_suggestion(w) for w in data if w.get("defs")]

    async def popular(self, limit: int = 50) -> list[dict]:
        data = await self.get_json(self.base_url, params={"v": 1000})
        return [format_suggestion(w) for w in data[:limit]]

    async def related(self, word: str, limit: int = 5) -> dict[str, list[str]]:
        """Synonyms, antonyms and rhymes, fetched concurrently."""
        results = await asyncio.gather(*[
            self.get_json(self.base_url, params={param: word})
            for param in RELATIONS.values()
        ])
        related = {
            kind: [w["word"] for w in data[:limit]]
            for kind, data in zip(RELATIONS, results)
        }
        related["related"] = []
        return related
