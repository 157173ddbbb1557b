"""Shared constants and tunables for the word trie."""

from __future__ import annotations

import os

# ── Alphabet ────────────────────────────────────────────────────────────
# Children are addressed by offset from the first symbol, so the alphabet
# must be a contiguous range of code points.

ENGLISH_ALPHABET_SIZE = 26
FIRST_SYMBOL = "a"

# Marker matching any single symbol in a query expression.
WILDCARD = "?"

# ── Arena ───────────────────────────────────────────────────────────────

NO_NODE = -1
ROOT = 0
INITIAL_CAPACITY = 64

# ── Word-list loading ───────────────────────────────────────────────────

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 32

DICTIONARY_SEARCH_PATHS: tuple[str, ...] = (
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
)
