"""CLI / terminal mode for the word trie."""

from __future__ import annotations

import time

from wordtrie.constants import WILDCARD
from wordtrie.trie import Trie


def _print_words(words: list[str], unique: bool = False) -> None:
    if unique:
        words = list(dict.fromkeys(words))
    for w in words:
        print(f"  {w}")
    print(f"({len(words)} result{'s' if len(words) != 1 else ''})")


def run_contains(trie: Trie, words: list[str]) -> bool:
    """Print yes/no per word; True if every word is present."""
    found_all = True
    for w in words:
        found = trie.contains(w)
        found_all &= found
        print(f"  {w:<20} {'yes' if found else 'no'}")
    return found_all


def run_prefix(trie: Trie, prefix: str, order: str = "bfs") -> None:
    _print_words(trie.starts_with(prefix, order=order))


def run_match(trie: Trie, text: str) -> None:
    matches = list(trie.iter_matches(text))
    for m in matches:
        print(f"  {m.word:<20} [{m.start}:{m.end}]")
    print(f"({len(matches)} match{'es' if len(matches) != 1 else ''})")


def run_query(trie: Trie, expression: str, wildcard: str = WILDCARD) -> None:
    _print_words(trie.query(expression, wildcard))


def run_permute(trie: Trie, letters: str, unique: bool = False) -> None:
    _print_words(trie.permute(letters), unique=unique)


def run_stats(trie: Trie) -> None:
    print(f"  words:         {len(trie):,}")
    print(f"  nodes:         {trie.node_count:,}")
    print(f"  alphabet:      {trie.alphabet_size} symbols from {trie.first_symbol!r}")
    print(f"  automaton:     {'built' if trie.automaton_ready else 'not built'}")


def run_interactive(trie: Trie, wildcard: str = WILDCARD) -> None:
    """Read commands from the terminal until ``quit`` or EOF."""
    print("\n" + "=" * 60)
    print("  WORD TRIE -- Interactive Mode")
    print("=" * 60)
    print()
    print("Commands:")
    print("  has WORD...        -- check dictionary membership")
    print("  prefix PREFIX      -- words starting with PREFIX")
    print("  match TEXT         -- dictionary words occurring in TEXT")
    print(f"  query EXPR         -- words matching EXPR ('{wildcard}' = any letter)")
    print("  permute LETTERS    -- words spelled from LETTERS")
    print("  add WORD...        -- insert words and rebuild the automaton")
    print("  stats              -- dictionary statistics")
    print("  quit               -- leave")
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd, *args = inp.split()
        cmd = cmd.lower()
        if cmd in ("quit", "exit", "done"):
            break

        t0 = time.time()
        try:
            if cmd == "has" and args:
                run_contains(trie, args)
            elif cmd == "prefix" and len(args) == 1:
                run_prefix(trie, args[0])
            elif cmd == "match" and len(args) == 1:
                run_match(trie, args[0])
            elif cmd == "query" and len(args) == 1:
                run_query(trie, args[0], wildcard)
            elif cmd == "permute" and len(args) == 1:
                run_permute(trie, args[0])
            elif cmd == "add" and args:
                trie.insert_all(args)
                trie.build_automaton()
                print(f"  Added {len(args)} word{'s' if len(args) != 1 else ''}.")
            elif cmd == "stats":
                run_stats(trie)
            else:
                print("  Unknown command.  Try: has, prefix, match, query, permute, add, stats, quit")
                continue
        except ValueError as exc:
            print(f"  Invalid input: {exc}")
            continue
        print(f"  ({(time.time() - t0) * 1000:.1f} ms)")
