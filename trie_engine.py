#!/usr/bin/env python3
"""
Word Trie Engine

Loads a word list into a prefix trie / Aho-Corasick automaton and answers
membership, prefix, multi-pattern, wildcard and anagram queries from the
command line.

Requires: pip install numpy
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordtrie.cli import (
    run_contains,
    run_interactive,
    run_match,
    run_permute,
    run_prefix,
    run_query,
    run_stats,
)
from wordtrie.constants import WILDCARD
from wordtrie.dictionary import Dictionary
from wordtrie.snapshot import load_snapshot, save_snapshot
from wordtrie.trie import AutomatonNotBuiltError, Trie

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("wordtrie")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordtrie",
        description="Word Trie Engine -- prefix, wildcard, anagram and multi-pattern word search",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--snapshot", type=str, default=None,
                        help="Load the trie from a saved snapshot instead of a word list")
    parser.add_argument("--save-snapshot", type=str, default=None, metavar="PATH",
                        help="Save the loaded trie to PATH (.npz) before running the command")
    parser.add_argument("--wildcard", type=str, default=WILDCARD,
                        help=f"Wildcard marker for query expressions (default: {WILDCARD!r})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")

    sub = parser.add_subparsers(dest="command")
    p = sub.add_parser("contains", help="Check whether words are in the dictionary")
    p.add_argument("words", nargs="+")
    p = sub.add_parser("prefix", help="List words starting with a prefix")
    p.add_argument("prefix")
    p.add_argument("--order", choices=("bfs", "dfs"), default="bfs",
                   help="bfs: shortest first; dfs: lexicographic")
    p = sub.add_parser("match", help="Find every dictionary word occurring in a text")
    p.add_argument("text")
    p = sub.add_parser("query", help="Find words matching an expression with wildcards")
    p.add_argument("expression")
    p = sub.add_parser("permute", help="Find words spelled from a set of letters")
    p.add_argument("letters")
    p.add_argument("--unique", action="store_true",
                   help="Drop repeated results caused by repeated letters")
    sub.add_parser("stats", help="Print dictionary statistics")
    sub.add_parser("interactive", help="Interactive terminal mode")
    return parser


def load_trie(args: argparse.Namespace) -> Trie:
    if args.snapshot:
        return load_snapshot(args.snapshot)
    return Dictionary(args.dict).trie


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if len(args.wildcard) != 1:
        parser.error("--wildcard must be a single character")

    try:
        trie = load_trie(args)
        if args.save_snapshot:
            save_snapshot(trie, args.save_snapshot)

        command = args.command or "interactive"
        if command == "contains":
            return 0 if run_contains(trie, args.words) else 1
        if command == "prefix":
            run_prefix(trie, args.prefix, args.order)
        elif command == "match":
            run_match(trie, args.text)
        elif command == "query":
            run_query(trie, args.expression, args.wildcard)
        elif command == "permute":
            run_permute(trie, args.letters, unique=args.unique)
        elif command == "stats":
            run_stats(trie)
        else:
            run_interactive(trie, args.wildcard)
    except AutomatonNotBuiltError as exc:
        log.error("%s", exc)
        return 1
    except (OSError, ValueError) as exc:
        log.error("%s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
