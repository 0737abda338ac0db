"""
Offline dataset preparation commands. These run locally, no server needed.
"""

import sys
from pathlib import Path

from wordbank.data.chunk import CHUNK_SIZE, load_dictionary, write_chunks
from wordbank.data.convert import convert_lmf, write_dictionary


def add_subparser(subparsers):
    parser = subparsers.add_parser("data", help="Build the chunked dictionary dataset")
    data_sub = parser.add_subparsers(dest="data_command", required=True)

    convert_p = data_sub.add_parser("convert", help="Convert WordNet LMF XML to dictionary JSON")
    convert_p.add_argument("xml", help="Path to WordNet LMF .xml")
    convert_p.add_argument("output", help="Output dictionary .json")
    convert_p.set_defaults(func=data_convert)

    chunk_p = data_sub.add_parser("chunk", help="Split dictionary JSON into chunk files")
    chunk_p.add_argument("dictionary", help="Dictionary .json")
    chunk_p.add_argument("out_dir", help="Output directory")
    chunk_p.add_argument("--size", type=int, default=CHUNK_SIZE, help="Words per chunk")
    chunk_p.set_defaults(func=data_chunk)


def data_convert(args):
    if not Path(args.xml).exists():
        print(f"✗ File not found: {args.xml}")
        sys.exit(1)
    try:
        entries = convert_lmf(args.xml)
        path = write_dictionary(entries, args.output)
        print(f"✓ Wrote {len(entries)} words to {path}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def data_chunk(args):
    if not Path(args.dictionary).exists():
        print(f"✗ File not found: {args.dictionary}")
        sys.exit(1)
    try:
        entries = load_dictionary(args.dictionary)
        index = write_chunks(entries, args.out_dir, chunk_size=args.size)
        print(f"✓ Created {len(index)} chunks in {args.out_dir}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
