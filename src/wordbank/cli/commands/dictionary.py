"""
Dictionary browse, search and lookup commands.
"""

import sys
from wordbank.cli import client
from wordbank.core.models import part_of_speech_label


def add_subparser(subparsers):
    parser = subparsers.add_parser("dict", help="Browse and search the dictionary")
    dict_sub = parser.add_subparsers(dest="dict_command", required=True)

    browse_p = dict_sub.add_parser("browse", help="Page through the dictionary")
    browse_p.add_argument("--after", default="", help="Start after this word")
    browse_p.add_argument("-n", "--limit", type=int, default=20, help="Page size")
    browse_p.set_defaults(func=dict_browse)

    search_p = dict_sub.add_parser("search", help="Search words and definitions")
    search_p.add_argument("query", help="Search text")
    search_p.add_argument("-n", "--max", type=int, default=50, help="Max results")
    search_p.set_defaults(func=dict_search)

    lookup_p = dict_sub.add_parser("lookup", help="Look up a word online")
    lookup_p.add_argument("word", help="Word")
    lookup_p.set_defaults(func=dict_lookup)

    related_p = dict_sub.add_parser("related", help="Synonyms, antonyms and rhymes")
    related_p.add_argument("word", help="Word")
    related_p.set_defaults(func=dict_related)


def _print_entry(entry: dict):
    definitions = [d for s in entry.get("senses", []) for d in s.get("definitions", [])]
    first = definitions[0] if definitions else ""
    pos = part_of_speech_label(entry.get("partOfSpeech"))
    print(f"{entry['word']:20} {pos:10} {first[:60]}")


def dict_browse(args):
    try:
        page = client.browse(args.after, args.limit)
        for entry in page["words"]:
            _print_entry(entry)
        if page["next"]:
            print(f"\nnext: --after {page['next']!r}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_search(args):
    try:
        entries = client.search(args.query, args.max)
        if not entries:
            print("No words found.")
            return
        for entry in entries:
            _print_entry(entry)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_lookup(args):
    try:
        entries = client.lookup(args.word)
        if not entries:
            print(f"No definition found for {args.word!r}.")
            return
        for entry in entries:
            print(f"{entry['word']} ({entry.get('partOfSpeech') or '?'})")
            if entry.get("pronunciation"):
                print(f"  {entry['pronunciation']}")
            print(f"  {entry['definition']}")
            for example in entry.get("examples", []):
                print(f"  e.g. {example}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_related(args):
    try:
        result = client.related(args.word)
        for kind in ("synonyms", "antonyms", "rhymes"):
            if result.get(kind):
                print(f"{kind}: {', '.join(result[kind])}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
