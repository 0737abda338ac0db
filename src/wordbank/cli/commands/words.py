"""
Word bank commands.
"""

import sys
from rich import print_json
from rich.console import Console
from rich.table import Table

from wordbank.cli import client

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("words", help="Word bank management")
    words_sub = parser.add_subparsers(dest="words_command", required=True)

    # list
    list_p = words_sub.add_parser("list", help="List saved words")
    list_p.add_argument("query", nargs="?", default="", help="Filter by word or definition")
    list_p.set_defaults(func=words_list)

    # add
    add_p = words_sub.add_parser("add", help="Save a word")
    add_p.add_argument("word", help="Word to save")
    add_p.add_argument("--definition", help="Definition (default: looked up)")
    add_p.add_argument("--pos", dest="part_of_speech", help="Part of speech")
    add_p.set_defaults(func=words_add)

    # show
    show_p = words_sub.add_parser("show", help="Show a saved word as JSON")
    show_p.add_argument("word_id", help="Word ID")
    show_p.set_defaults(func=words_show)

    # remove
    rm_p = words_sub.add_parser("remove", help="Remove a saved word")
    rm_p.add_argument("word_id", help="Word ID")
    rm_p.set_defaults(func=words_remove)

    # tag / untag
    tag_p = words_sub.add_parser("tag", help="Tag a saved word")
    tag_p.add_argument("word_id", help="Word ID")
    tag_p.add_argument("tag", help="Tag")
    tag_p.set_defaults(func=words_tag)

    untag_p = words_sub.add_parser("untag", help="Remove a tag")
    untag_p.add_argument("word_id", help="Word ID")
    untag_p.add_argument("tag", help="Tag")
    untag_p.set_defaults(func=words_untag)

    # review
    review_p = words_sub.add_parser("review", help="Mark a saved word as reviewed")
    review_p.add_argument("word_id", help="Word ID")
    review_p.set_defaults(func=words_review)

    # recommend
    rec_p = words_sub.add_parser("recommend", help="Suggest words to add")
    rec_p.set_defaults(func=words_recommend)


def words_list(args):
    try:
        words = client.list_words(args.query)
        if not words:
            print("No matching words." if args.query else "Your word bank is empty.")
            return
        table = Table("id", "word", "definition", "tags")
        for w in words:
            definition = w.get("definition") or ""
            if len(definition) > 60:
                definition = definition[:60] + "..."
            table.add_row(w["id"], w["word"], definition, ", ".join(w["tags"]))
        console.print(table)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def words_add(args):
    try:
        payload = {"word": args.word}
        if args.definition:
            payload["definition"] = args.definition
            if args.part_of_speech:
                payload["partOfSpeech"] = args.part_of_speech
        else:
            entries = client.lookup(args.word)
            if entries:
                payload = entries[0]

        result = client.add_word(payload)
        word = result["word"]
        if result["added"]:
            print(f"✓ Saved: {word['word']} ({word['id']})")
        else:
            print(f"Already saved: {word['word']} ({word['id']})")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def words_show(args):
    try:
        print_json(data=client.get_word(args.word_id))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def words_remove(args):
    try:
        client.remove_word(args.word_id)
        print(f"✓ Removed: {args.word_id}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def words_tag(args):
    try:
        word = client.add_tag(args.word_id, args.tag)
        print(f"✓ {word['word']}: {', '.join(word['tags'])}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def words_untag(args):
    try:
        word = client.remove_tag(args.word_id, args.tag)
        print(f"✓ {word['word']}: {', '.join(word['tags']) or '(no tags)'}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def words_review(args):
    try:
        word = client.mark_reviewed(args.word_id)
        print(f"✓ Reviewed {word['word']} at {word['lastReviewed']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def words_recommend(args):
    try:
        recs = client.recommendations()
        if not recs:
            print("No recommendations.")
            return
        for rec in recs:
            print(f"{rec['word']:15} {rec['reason']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
