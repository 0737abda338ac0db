"""
Word Bank CLI.
"""

import argparse
import logging
import os

from wordbank.cli.commands import concept, data, dictionary, serve, words
from wordbank.core.config import Settings


def main():
    logging.basicConfig(
        level=os.environ.get("WORDBANK_LOG_LEVEL", Settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(prog="wordbank", description="Word Bank CLI")
    subparsers = parser.add_subparsers(dest="command")

    words.add_subparser(subparsers)
    dictionary.add_subparser(subparsers)
    concept.add_subparser(subparsers)
    data.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
