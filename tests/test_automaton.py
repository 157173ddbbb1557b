import random

import numpy as np
import pytest

from wordtrie.automaton import Match
from wordtrie.trie import AutomatonNotBuiltError, Trie


def _brute_force(words, text):
    """(end, -len, word) ordering of every occurrence."""
    found = []
    for end in range(1, len(text) + 1):
        hits = [w for w in words if text[:end].endswith(w)]
        found.extend(sorted(hits, key=len, reverse=True))
    return found


def test_match_before_build_raises():
    t = Trie()
    t.insert("call")
    with pytest.raises(AutomatonNotBuiltError):
        t.match("call")
    with pytest.raises(RuntimeError):
        t.iter_matches("call")


def test_vertical_call_all():
    t = Trie()
    t.insert_all(["vertical", "call", "all"])
    t.build_automaton()
    assert t.automaton_ready
    assert t.match("wverticall") == ["vertical", "call", "all"]


def test_classic_example(automaton):
    assert automaton.match("ushers") == ["she", "he", "hers"]


def test_match_positions(automaton):
    assert list(automaton.iter_matches("ushers")) == [
        Match(1, 4, "she"),
        Match(2, 4, "he"),
        Match(2, 6, "hers"),
    ]


def test_overlapping_repeats():
    t = Trie()
    t.insert_all(["a", "aa", "aaa"])
    t.build_automaton()
    assert t.match("aaaa") == ["a", "aa", "a", "aaa", "aa", "a", "aaa", "aa", "a"]


def test_no_matches(automaton):
    assert automaton.match("xyzzy") == []
    assert automaton.match("") == []


def test_symbols_outside_alphabet_reset_scan(automaton):
    assert automaton.match("s-he HIS his") == ["he", "his"]


def test_root_links():
    t = Trie()
    t.insert_all(["ab", "b"])
    t.build_automaton()
    root = t.root
    assert root.failure == root
    assert root.output is None
    assert t.lookup_node("a").failure == root
    ab = t.lookup_node("ab")
    assert ab.failure == t.lookup_node("b")
    assert ab.output == t.lookup_node("b")


def test_output_skips_non_terminal_failures():
    t = Trie()
    t.insert_all(["abcd", "bcd", "cd"])
    t.insert("bcx")
    t.build_automaton()
    # "bc" is not a word, so "abc" has no output even though it fails to "bc"
    assert t.lookup_node("abc").failure == t.lookup_node("bc")
    assert t.lookup_node("abc").output is None
    assert t.lookup_node("abcd").output == t.lookup_node("bcd")
    assert t.lookup_node("bcd").output == t.lookup_node("cd")


def test_build_is_idempotent(automaton):
    arena = automaton.arena
    n = arena.size
    failure, output = arena.failure[:n].copy(), arena.output[:n].copy()
    automaton.build_automaton()
    assert np.array_equal(arena.failure[:n], failure)
    assert np.array_equal(arena.output[:n], output)


def test_insert_after_build_is_not_rebuilt(automaton, caplog):
    with caplog.at_level("WARNING", logger="wordtrie"):
        automaton.insert("us")
    assert "build_automaton" in caplog.text
    assert automaton.automaton_ready
    # new node has no links until the caller rebuilds
    assert automaton.lookup_node("us").failure is None
    automaton.build_automaton()
    assert automaton.match("ushers") == ["us", "she", "he", "hers"]


def test_match_agrees_with_brute_force():
    rng = random.Random(42)
    words = sorted({"".join(rng.choice("abc") for _ in range(rng.randint(1, 4))) for _ in range(25)})
    t = Trie(3)
    t.insert_all(words)
    t.build_automaton()
    for _ in range(20):
        text = "".join(rng.choice("abc") for _ in range(30))
        assert t.match(text) == _brute_force(words, text)


def test_match_through_node_inserted_after_build():
    t = Trie()
    t.insert("ab")
    t.build_automaton()
    t.insert("abc")
    # the new node has no failure link; scanning past it falls back to the root
    assert t.match("abcx") == ["ab", "abc"]
    assert t.match("abcxab") == ["ab", "abc", "ab"]
