"""
Concept commands.
"""

import sys
from wordbank.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("concept", help="Encyclopedic concepts")
    concept_sub = parser.add_subparsers(dest="concept_command", required=True)

    add_p = concept_sub.add_parser("add", help="Find a concept on Wikipedia and save it")
    add_p.add_argument("query", help="Concept name")
    add_p.set_defaults(func=concept_add)

    popular_p = concept_sub.add_parser("popular", help="List quick-add concepts")
    popular_p.set_defaults(func=concept_popular)


def concept_add(args):
    try:
        result = client.add_concept(args.query)
        word = result["word"]
        if result["added"]:
            print(f"✓ Concept added: {word['word']}")
        else:
            print(f"Already saved: {word['word']}")
        print(f"  {word['url']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def concept_popular(args):
    try:
        result = client.popular_concepts()
        for c in result["concepts"]:
            print(f"{c['name']:25} {c['category']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
