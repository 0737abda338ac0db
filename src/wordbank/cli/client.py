"""
HTTP client for the Word Bank API.
"""

import os
from urllib.parse import quote

import httpx

from wordbank.core.config import Settings


def base_url() -> str:
    return os.environ.get("WORDBANK_API_URL", Settings.api_url)


# === Word bank ===

def list_words(query: str = "") -> list[dict]:
    params = {"q": query} if query else None
    r = httpx.get(f"{base_url()}/words", params=params)
    r.raise_for_status()
    return r.json()["words"]


def add_word(payload: dict) -> dict:
    r = httpx.post(f"{base_url()}/words", json=payload, timeout=60)
    r.raise_for_status()
    return r.json()


def get_word(word_id: str) -> dict:
    r = httpx.get(f"{base_url()}/words/{word_id}")
    r.raise_for_status()
    return r.json()


def remove_word(word_id: str) -> dict:
    r = httpx.delete(f"{base_url()}/words/{word_id}")
    r.raise_for_status()
    return r.json()


def add_tag(word_id: str, tag: str) -> dict:
    r = httpx.post(f"{base_url()}/words/{word_id}/tags", json={"tag": tag})
    r.raise_for_status()
    return r.json()


def remove_tag(word_id: str, tag: str) -> dict:
    r = httpx.delete(f"{base_url()}/words/{word_id}/tags/{quote(tag, safe='')}")
    r.raise_for_status()
    return r.json()


def mark_reviewed(word_id: str) -> dict:
    r = httpx.post(f"{base_url()}/words/{word_id}/review")
    r.raise_for_status()
    return r.json()


def recommendations() -> list[dict]:
    r = httpx.get(f"{base_url()}/words/recommendations")
    r.raise_for_status()
    return r.json()["recommendations"]


# === Dictionary ===

def browse(after: str = "", limit: int = 20) -> dict:
    r = httpx.get(f"{base_url()}/dictionary/browse", params={"after": after, "limit": limit}, timeout=60)
    r.raise_for_status()
    return r.json()


def search(query: str, max_results: int = 50) -> list[dict]:
    r = httpx.get(f"{base_url()}/dictionary/search", params={"q": query, "max": max_results}, timeout=120)
    r.raise_for_status()
    return r.json()["words"]


def lookup(word: str) -> list[dict]:
    r = httpx.get(f"{base_url()}/lookup/{quote(word, safe='')}", timeout=60)
    r.raise_for_status()
    return r.json()["entries"]


def related(word: str) -> dict:
    r = httpx.get(f"{base_url()}/lookup/{quote(word, safe='')}/related", timeout=60)
    r.raise_for_status()
    return r.json()


# === Concepts ===

def add_concept(query: str) -> dict:
    r = httpx.post(f"{base_url()}/concepts", json={"query": query}, timeout=60)
    r.raise_for_status()
    return r.json()


def popular_concepts() -> dict:
    r = httpx.get(f"{base_url()}/concepts/popular")
    r.raise_for_status()
    return r.json()
