"""Word list loaded into a trie, ready for matching and searches."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from wordtrie.constants import (
    DICTIONARY_SEARCH_PATHS,
    ENGLISH_ALPHABET_SIZE,
    FIRST_SYMBOL,
    MAX_WORD_LENGTH,
    MIN_WORD_LENGTH,
)
from wordtrie.trie import Trie

log = logging.getLogger("wordtrie")

BUILTIN_WORDS = (
    "all", "are", "call", "dare", "dear", "ear", "era", "rad", "read", "red",
    "since", "slice", "space", "vertical", "apple", "apply", "app", "bat",
    "batch", "bath", "bar", "bark", "cat", "cater", "do", "dog", "dove",
    "he", "she", "his", "hers",
)


class Dictionary:
    """Word list with set lookup and a trie for prefix, wildcard and
    multi-pattern searches.  The automaton is built once loading is done."""

    def __init__(self, dict_path: str | None = None, *,
                 words: Iterable[str] | None = None,
                 alphabet_size: int = ENGLISH_ALPHABET_SIZE,
                 first_symbol: str = FIRST_SYMBOL,
                 search_paths: Iterable[str] = DICTIONARY_SEARCH_PATHS,
                 min_length: int = MIN_WORD_LENGTH,
                 max_length: int = MAX_WORD_LENGTH):
        self.words: set[str] = set()
        self.trie = Trie(alphabet_size, first_symbol=first_symbol)
        self.min_length = min_length
        self.max_length = max_length
        self.source: str | None = None
        if words is not None:
            for w in words:
                self._add(w)
        else:
            self._load(dict_path, search_paths)
        self.trie.build_automaton()

    def _accepts(self, word: str) -> bool:
        if not self.min_length <= len(word) <= self.max_length:
            return False
        return all(self.trie.arena.offset_of(ch) >= 0 for ch in word)

    def _add(self, word: str) -> bool:
        if not self._accepts(word):
            return False
        if word not in self.words:
            self.words.add(word)
            self.trie.insert(word)
        return True

    def _load(self, dict_path: str | None, search_paths: Iterable[str]) -> None:
        paths: list[str] = []
        if dict_path:
            if not os.path.exists(dict_path):
                log.warning("Dictionary file %s not found, searching defaults", dict_path)
            paths.append(dict_path)
        paths.extend(search_paths)

        for path in paths:
            if os.path.exists(path):
                skipped = 0
                with open(path, "r", encoding="utf-8") as f:
                    for line in f:
                        word = line.strip()
                        if word and not self._add(word):
                            skipped += 1
                if self.words:
                    self.source = path
                    log.info("Loaded %s words from %s", f"{len(self.words):,}", path)
                    if skipped:
                        log.debug("Skipped %d entries outside the alphabet or length bounds", skipped)
                    return

        log.warning("No dictionary file found -- using built-in minimal word list.")
        self._load_minimal()

    def _load_minimal(self) -> None:
        for w in BUILTIN_WORDS:
            self._add(w)

    def is_valid(self, word: str) -> bool:
        return word in self.words

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)
