"""
Encyclopedic concepts from the Wikipedia search API.
"""

from wordbank.core.apis.base import ApiClient
from wordbank.core.errors import NotFound


API_URL = "https://en.wikipedia.org/w/api.php"

POPULAR_CONCEPTS = [
    {"name": "Overton Window", "category": "Politics"},
    {"name": "Hanlon's Razor", "category": "Philosophy"},
    {"name": "Dunning-Kruger Effect", "category": "Psychology"},
    {"name": "Streisand Effect", "category": "Social"},
    {"name": "Occam's Razor", "category": "Philosophy"},
    {"name": "Murphy's Law", "category": "Culture"},
    {"name": "Peter Principle", "category": "Business"},
    {"name": "Parkinson's Law", "category": "Business"},
]


def popular_categories() -> list[str]:
    return list(dict.fromkeys(c["category"] for c in POPULAR_CONCEPTS))


def page_url(page_id: int | str) -> str:
    return f"https://en.wikipedia.org/?curid={page_id}"


class WikipediaClient(ApiClient):
    name = "wikipedia"

    def __init__(self, client=None, base_url: str = API_URL):
        super().__init__(client)
        self.base_url = base_url

    async def search(self, query: str) -> list[dict]:
        """Search hits: page id, title and snippet."""
        data = await self.get_json(self.base_url, params={
            "action": "query",
            "list": "search",
            "srsearch": query,
            "format": "json",
        })
        return [
            {"pageid": hit["pageid"], "title": hit["title"], "snippet": hit.get("snippet", "")}
            for hit in data.get("query", {}).get("search", [])
        ]

    async def find_concept(self, query: str) -> dict:
        """Best hit for `query` as a word bank candidate of type "concept"."""
        query = query.strip()
        hits = await self.search(query) if query else []
        if not hits:
            raise NotFound(f"Concept not found: {query!r}")
        page_id = hits[0]["pageid"]

        data = await self.get_json(self.base_url, params={
            "action": "query",
            "prop": "extracts|categories",
            "exintro": 1,
            "explaintext": 1,
            "pageids": page_id,
            "format": "json",
        })
        page = data.get("query", {}).get("pages", {}).get(str(page_id))
        if page is None:
            raise NotFound(f"Concept page {page_id} missing")

        return {
            "type": "concept",
            "id": str(page_id),
            "word": page["title"],
            "definition": page.get("extract", ""),
            "source": "Wikipedia",
            "url": page_url(page_id),
            "categories": [
                c["title"].replace("Category:", "") for c in page.get("categories", [])
            ],
        }
