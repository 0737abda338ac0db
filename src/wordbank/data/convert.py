"""
WordNet LMF XML -> unified dictionary entries.

Reads a LexicalResource/Lexicon document in two passes: synsets first
(definitions, examples, synset relations), then lexical entries, whose
senses borrow definitions and examples from their synset. The result is
sorted by word and keeps only the first entry per exact word.
"""

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from wordbank.core.models import DictionaryEntry, Relation, Sense


logger = logging.getLogger(__name__)


def _relations(elem: ET.Element, tag: str) -> list[Relation]:
    return [
        Relation(type=rel.get("relType", ""), target=rel.get("target", ""))
        for rel in elem.findall(tag)
    ]


def _texts(elem: ET.Element, tag: str) -> list[str]:
    return [(e.text or "").strip() for e in elem.findall(tag)]


def parse_synsets(lexicon: ET.Element) -> dict[str, dict]:
    synsets = {}
    for synset in lexicon.findall("Synset"):
        synsets[synset.get("id")] = {
            "definitions": _texts(synset, "Definition"),
            "examples": _texts(synset, "Example"),
            "relations": _relations(synset, "SynsetRelation"),
        }
    return synsets


def parse_entry(entry: ET.Element, synsets: dict[str, dict]) -> DictionaryEntry:
    lemma = entry.find("Lemma")
    if lemma is None:
        raise ValueError(f"LexicalEntry {entry.get('id')} has no Lemma")

    senses = []
    for sense in entry.findall("Sense"):
        synset = synsets.get(sense.get("synset"), {})
        senses.append(Sense(
            id=sense.get("id"),
            synset_id=sense.get("synset"),
            definitions=list(synset.get("definitions", [])),
            examples=list(synset.get("examples", [])),
            relations=_relations(sense, "SenseRelation"),
        ))

    relations = [r for s in senses for r in s.relations]
    return DictionaryEntry(
        id=entry.get("id"),
        word=lemma.get("writtenForm", ""),
        part_of_speech=lemma.get("partOfSpeech"),
        senses=senses,
        spellings=[r.type for r in relations if "spelling" in r.type],
        relations=relations,
    )


def sort_and_dedupe(entries: list[DictionaryEntry]) -> list[DictionaryEntry]:
    """Sort by word, keeping the first entry seen for each exact word."""
    seen = set()
    result = []
    for entry in sorted(entries, key=lambda e: e.word):
        if entry.word in seen:
            continue
        seen.add(entry.word)
        result.append(entry)
    return result


def convert_lmf(xml_path: str | Path) -> list[DictionaryEntry]:
    root = ET.parse(xml_path).getroot()
    lexicon = root.find("Lexicon")
    if lexicon is None:
        raise ValueError(f"{xml_path}: no Lexicon element")

    synsets = parse_synsets(lexicon)
    logger.info("Parsed %d synsets", len(synsets))

    entries = [parse_entry(e, synsets) for e in lexicon.findall("LexicalEntry")]
    dictionary = sort_and_dedupe(entries)

    multi = sum(1 for e in dictionary if len(e.senses) > 1)
    logger.info("Processed %d words (%d with multiple senses)", len(dictionary), multi)
    return dictionary


def write_dictionary(entries: list[DictionaryEntry], out_path: str | Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump([e.to_dict() for e in entries], f, indent=2, ensure_ascii=False)
    return out_path
