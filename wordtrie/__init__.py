"""Word Trie — prefix trie, Aho-Corasick matcher and word searches."""

from wordtrie.automaton import Match
from wordtrie.constants import ENGLISH_ALPHABET_SIZE, FIRST_SYMBOL, WILDCARD
from wordtrie.dictionary import Dictionary
from wordtrie.node import NodeArena, TrieNode
from wordtrie.snapshot import export_snapshot, import_snapshot, load_snapshot, save_snapshot
from wordtrie.trie import AutomatonNotBuiltError, Trie

__all__ = [
    "ENGLISH_ALPHABET_SIZE",
    "FIRST_SYMBOL",
    "WILDCARD",
    "AutomatonNotBuiltError",
    "Dictionary",
    "Match",
    "NodeArena",
    "Trie",
    "TrieNode",
    "export_snapshot",
    "import_snapshot",
    "load_snapshot",
    "save_snapshot",
]
