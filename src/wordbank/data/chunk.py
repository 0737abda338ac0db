"""
Split the unified dictionary into fixed-size chunk files plus an index.

  out_dir/chunk-<N>.json   entries [N * chunk_size, (N + 1) * chunk_size)
  out_dir/index.json       [{"firstWord": ..., "chunk": N}, ...]

Entries are sorted by word (Python string order) and deduplicated before
splitting.
"""

import json
import logging
from pathlib import Path

from wordbank.core.models import DictionaryEntry, IndexEntry
from wordbank.core.sources import INDEX_FILENAME, chunk_filename
from wordbank.data.convert import sort_and_dedupe


logger = logging.getLogger(__name__)

CHUNK_SIZE = 1000


def split_chunks(entries: list, chunk_size: int = CHUNK_SIZE) -> list[list]:
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    return [entries[i:i + chunk_size] for i in range(0, len(entries), chunk_size)]


def build_index(entries: list[DictionaryEntry], chunk_size: int = CHUNK_SIZE) -> list[IndexEntry]:
    return [
        IndexEntry(first_word=chunk[0].word, chunk=n)
        for n, chunk in enumerate(split_chunks(entries, chunk_size))
    ]


def load_dictionary(path: str | Path) -> list[DictionaryEntry]:
    with open(path, encoding="utf-8") as f:
        return [DictionaryEntry.from_dict(e) for e in json.load(f)]


def write_chunks(
    entries: list[DictionaryEntry], out_dir: str | Path, chunk_size: int = CHUNK_SIZE
) -> list[IndexEntry]:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    entries = sort_and_dedupe(entries)
    chunks = split_chunks(entries, chunk_size)
    for n, chunk in enumerate(chunks):
        with open(out_dir / chunk_filename(n), "w", encoding="utf-8") as f:
            json.dump([e.to_dict() for e in chunk], f, ensure_ascii=False)

    index = build_index(entries, chunk_size)
    with open(out_dir / INDEX_FILENAME, "w", encoding="utf-8") as f:
        json.dump([e.to_dict() for e in index], f, ensure_ascii=False)

    logger.info("Created %d chunks in %s", len(chunks), out_dir)
    return index
