"""Prefix trie over a fixed contiguous alphabet."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Iterator

from wordtrie.automaton import Match, build_links, scan
from wordtrie.constants import ENGLISH_ALPHABET_SIZE, FIRST_SYMBOL, NO_NODE, ROOT, WILDCARD
from wordtrie.node import NodeArena, TrieNode
from wordtrie.search import permutation_search, wildcard_query

log = logging.getLogger("wordtrie")

ENUMERATION_ORDERS = ("bfs", "dfs")


class AutomatonNotBuiltError(RuntimeError):
    """Raised when matching is attempted before :meth:`Trie.build_automaton`."""


class Trie:
    """Prefix trie that can be turned into an Aho-Corasick automaton.

    Words are inserted with :meth:`insert`.  Once every word meant for
    matching is in, call :meth:`build_automaton` and then :meth:`match`.
    Links are not refreshed by later insertions; build again if needed.
    """

    def __init__(self, alphabet_size: int = ENGLISH_ALPHABET_SIZE, *,
                 root: TrieNode | None = None, first_symbol: str = FIRST_SYMBOL):
        if root is not None:
            self._arena = _copy_subtree(root)
        else:
            self._arena = NodeArena(alphabet_size, first_symbol)
            self._arena.new_node()
        self._ready = False
        self._stale = False
        self._word_count = int(self._arena.terminal[1: self._arena.size].sum())

    @classmethod
    def _from_arena(cls, arena: NodeArena, ready: bool) -> Trie:
        trie = cls.__new__(cls)
        trie._arena = arena
        trie._ready = ready
        trie._stale = False
        trie._word_count = int(arena.terminal[1: arena.size].sum())
        return trie

    # properties

    @property
    def root(self) -> TrieNode:
        return TrieNode(self._arena, ROOT)

    @property
    def arena(self) -> NodeArena:
        return self._arena

    @property
    def alphabet_size(self) -> int:
        return self._arena.alphabet_size

    @property
    def first_symbol(self) -> str:
        return self._arena.first_symbol

    @property
    def node_count(self) -> int:
        return self._arena.size

    @property
    def automaton_ready(self) -> bool:
        return self._ready

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __repr__(self) -> str:
        return (f"Trie(words={len(self)}, nodes={self.node_count}, "
                f"alphabet={self.alphabet_size}, ready={self._ready})")

    # insertion

    def _offsets(self, word: str) -> list[int]:
        if word is None:
            raise ValueError("Word argument is None")
        offsets = []
        for ch in word:
            k = self._arena.offset_of(ch)
            if k == NO_NODE:
                raise ValueError(f"Symbol {ch!r} in {word!r} is outside the alphabet")
            offsets.append(k)
        return offsets

    def insert(self, word: str) -> None:
        self._insert_offsets(word, self._offsets(word))

    def _insert_offsets(self, word: str, offsets: list[int]) -> None:
        arena = self._arena
        node = ROOT
        for k in offsets:
            nxt = arena.child(node, k)
            if nxt == NO_NODE:
                nxt = arena.new_node(node, k)
            node = nxt
        if not arena.terminal[node]:
            arena.terminal[node] = True
            if node != ROOT:
                self._word_count += 1

        if self._ready and not self._stale:
            self._stale = True
            log.warning("Inserted %r after the automaton was built; "
                        "call build_automaton() again before matching.", word)

    def insert_all(self, words: Iterable[str]) -> int:
        """Insert every word; returns how many were inserted.

        Every word is checked first, so a bad word leaves the trie untouched.
        """
        checked = [(w, self._offsets(w)) for w in words]
        for word, offsets in checked:
            self._insert_offsets(word, offsets)
        return len(checked)

    # lookup

    def _walk(self, s: str) -> int:
        arena = self._arena
        node = ROOT
        for ch in s:
            k = arena.offset_of(ch)
            if k == NO_NODE:
                return NO_NODE
            node = arena.child(node, k)
            if node == NO_NODE:
                return NO_NODE
        return node

    def contains(self, word: str) -> bool:
        node = self.lookup_node(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) != NO_NODE

    def lookup_node(self, prefix: str) -> TrieNode | None:
        """Node at the end of ``prefix``.

        Returns None when the path is missing, and also when it resolves to
        the root itself (so the empty prefix yields None).
        """
        node = self._walk(prefix)
        if node == NO_NODE or node == ROOT:
            return None
        return TrieNode(self._arena, node)

    def word_of(self, node: TrieNode) -> str:
        return self._arena.word_of(node.index)

    # enumeration

    def starts_with(self, prefix: str, order: str = "bfs") -> list[str]:
        """All words beginning with ``prefix``.

        With the default breadth-first order, shorter words come first and
        words of equal length are sorted.  ``order="dfs"`` gives plain
        lexicographic order.
        """
        return list(self.enumerate_words(self.lookup_node(prefix), prefix, order))

    def enumerate_words(self, node: TrieNode | None, prefix: str = "",
                        order: str = "bfs") -> Iterator[str]:
        """Yield every word in the subtree of ``node``, each spelled as
        ``prefix`` followed by the path below ``node``."""
        if order not in ENUMERATION_ORDERS:
            raise ValueError(f"Unknown enumeration order {order!r}; expected one of {ENUMERATION_ORDERS}")
        if node is None:
            return iter(())
        if order == "bfs":
            return self._bfs(node.index, prefix)
        return self._dfs(node.index, prefix)

    def _bfs(self, start: int, prefix: str) -> Iterator[str]:
        arena = self._arena
        if start != ROOT and arena.terminal[start]:
            yield prefix
        queue: deque[tuple[int, str]] = deque([(start, prefix)])
        while queue:
            idx, acc = queue.popleft()
            for k, child in arena.present_children(idx):
                word = acc + arena.symbol_at(k)
                if arena.terminal[child]:
                    yield word
                queue.append((child, word))

    def _dfs(self, start: int, prefix: str) -> Iterator[str]:
        arena = self._arena
        stack: list[tuple[int, str]] = [(start, prefix)]
        while stack:
            idx, acc = stack.pop()
            if idx != ROOT and arena.terminal[idx]:
                yield acc
            for k, child in reversed(arena.present_children(idx)):
                stack.append((child, acc + arena.symbol_at(k)))

    def words(self) -> list[str]:
        """Every word in the trie, in lexicographic order."""
        return list(self._dfs(ROOT, ""))

    # automaton

    def build_automaton(self) -> None:
        build_links(self._arena)
        self._ready = True
        self._stale = False
        log.debug("Automaton built over %d nodes", self.node_count)

    def iter_matches(self, text: str) -> Iterator[Match]:
        if not self._ready:
            raise AutomatonNotBuiltError(
                "Automaton not built yet. Call build_automaton() first"
            )
        return scan(self._arena, text)

    def match(self, text: str) -> list[str]:
        """Every dictionary word occurring in ``text``, by end position."""
        return [m.word for m in self.iter_matches(text)]

    # searches

    def query(self, expression: str, wildcard: str = WILDCARD) -> list[str]:
        return wildcard_query(self._arena, expression, wildcard)

    def permute(self, letters: Iterable[str]) -> list[str]:
        return permutation_search(self._arena, list(letters))


def _copy_subtree(root: TrieNode) -> NodeArena:
    """Copy the subtree under ``root`` into a fresh arena rooted at index 0."""
    src: NodeArena = root._arena
    dst = NodeArena(src.alphabet_size, src.first_symbol)
    dst.new_node()
    dst.terminal[ROOT] = src.terminal[root.index]
    queue: deque[tuple[int, int]] = deque([(root.index, ROOT)])
    while queue:
        s, d = queue.popleft()
        for k, child in src.present_children(s):
            copy = dst.new_node(d, k)
            dst.terminal[copy] = src.terminal[child]
            queue.append((child, copy))
    return dst
