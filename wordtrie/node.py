"""Node storage for the trie.

All nodes of one trie live in a single :class:`NodeArena`.  A node is just
a row index into a handful of numpy arrays:

  * ``children[i, k]`` -- index of the child reached by symbol offset ``k``
  * ``parent[i]``      -- index of the owning node (``NO_NODE`` for the root)
  * ``failure[i]``     -- failure link, set by the automaton builder
  * ``output[i]``      -- nearest terminal node along the failure chain
  * ``symbol[i]``      -- symbol offset of the edge leading into ``i``
  * ``terminal[i]``    -- True if an inserted word ends here

Parent, failure and output are plain indices, so the cycle formed by the
root's failure link pointing at itself needs no special handling.

:class:`TrieNode` is a lightweight handle over one row and is what the
public API hands out.
"""

from __future__ import annotations

import logging

import numpy as np

from wordtrie.constants import FIRST_SYMBOL, INITIAL_CAPACITY, NO_NODE, ROOT

log = logging.getLogger("wordtrie.node")

INDEX_DTYPE = np.int32


class NodeArena:
    """Growable, index-addressed store of trie nodes."""

    __slots__ = (
        "alphabet_size", "first_symbol", "size",
        "children", "parent", "failure", "output", "symbol", "terminal",
    )

    def __init__(self, alphabet_size: int, first_symbol: str = FIRST_SYMBOL,
                 capacity: int = INITIAL_CAPACITY):
        if alphabet_size < 1:
            raise ValueError("Alphabet size must be positive")
        if len(first_symbol) != 1:
            raise ValueError(f"First symbol must be a single character, got {first_symbol!r}")
        self.alphabet_size = alphabet_size
        self.first_symbol = first_symbol
        self.size = 0
        capacity = max(1, capacity)
        self.children = np.full((capacity, alphabet_size), NO_NODE, dtype=INDEX_DTYPE)
        self.parent = np.full(capacity, NO_NODE, dtype=INDEX_DTYPE)
        self.failure = np.full(capacity, NO_NODE, dtype=INDEX_DTYPE)
        self.output = np.full(capacity, NO_NODE, dtype=INDEX_DTYPE)
        self.symbol = np.full(capacity, NO_NODE, dtype=INDEX_DTYPE)
        self.terminal = np.zeros(capacity, dtype=bool)

    @property
    def capacity(self) -> int:
        return len(self.parent)

    def new_node(self, parent: int = NO_NODE, offset: int = NO_NODE) -> int:
        """Append a node and return its index.  Links it under ``parent``."""
        if self.size == self.capacity:
            self._grow()
        idx = self.size
        self.size += 1
        self.parent[idx] = parent
        self.symbol[idx] = offset
        if parent != NO_NODE:
            self.children[parent, offset] = idx
        return idx

    def _grow(self) -> None:
        new_cap = self.capacity * 2
        log.debug("Growing node arena %d -> %d", self.capacity, new_cap)
        extra = new_cap - self.capacity
        self.children = np.concatenate(
            (self.children, np.full((extra, self.alphabet_size), NO_NODE, dtype=INDEX_DTYPE))
        )
        for name in ("parent", "failure", "output", "symbol"):
            arr = getattr(self, name)
            setattr(self, name, np.concatenate((arr, np.full(extra, NO_NODE, dtype=INDEX_DTYPE))))
        self.terminal = np.concatenate((self.terminal, np.zeros(extra, dtype=bool)))

    # symbol <-> offset

    def offset_of(self, ch: str) -> int:
        """Slot offset for ``ch``, or ``NO_NODE`` if it is outside the alphabet."""
        k = ord(ch) - ord(self.first_symbol)
        if 0 <= k < self.alphabet_size:
            return k
        return NO_NODE

    def symbol_at(self, offset: int) -> str:
        return chr(ord(self.first_symbol) + offset)

    def child(self, idx: int, offset: int) -> int:
        return int(self.children[idx, offset])

    def present_children(self, idx: int) -> list[tuple[int, int]]:
        """(offset, child index) pairs for occupied slots, in offset order."""
        row = self.children[idx]
        return [(int(k), int(row[k])) for k in np.flatnonzero(row != NO_NODE)]

    def word_of(self, idx: int) -> str:
        """Rebuild the word spelled by the path from the root to ``idx``."""
        chars: list[str] = []
        while idx != ROOT and idx != NO_NODE:
            chars.append(self.symbol_at(int(self.symbol[idx])))
            idx = int(self.parent[idx])
        return "".join(reversed(chars))


class TrieNode:
    """Handle on a single node of a trie's arena."""

    __slots__ = ("_arena", "index")

    def __init__(self, arena: NodeArena, index: int):
        self._arena = arena
        self.index = index

    def _wrap(self, idx: int) -> TrieNode | None:
        return None if idx == NO_NODE else TrieNode(self._arena, idx)

    @property
    def alphabet_size(self) -> int:
        return self._arena.alphabet_size

    @property
    def is_root(self) -> bool:
        return self.index == ROOT

    @property
    def is_terminal(self) -> bool:
        return bool(self._arena.terminal[self.index])

    @property
    def symbol(self) -> str | None:
        """Symbol on the edge into this node; None for the root."""
        offset = int(self._arena.symbol[self.index])
        return None if offset == NO_NODE else self._arena.symbol_at(offset)

    @property
    def children(self) -> tuple[TrieNode | None, ...]:
        """One slot per alphabet offset; empty slots are None."""
        return tuple(self._wrap(int(i)) for i in self._arena.children[self.index])

    def child(self, offset: int) -> TrieNode | None:
        return self._wrap(self._arena.child(self.index, offset))

    @property
    def parent(self) -> TrieNode | None:
        return self._wrap(int(self._arena.parent[self.index]))

    @property
    def failure(self) -> TrieNode | None:
        """Failure link; only meaningful after the automaton is built."""
        return self._wrap(int(self._arena.failure[self.index]))

    @property
    def output(self) -> TrieNode | None:
        """Output link; only meaningful after the automaton is built."""
        return self._wrap(int(self._arena.output[self.index]))

    @property
    def depth(self) -> int:
        d = 0
        idx = self.index
        while idx != ROOT:
            idx = int(self._arena.parent[idx])
            d += 1
        return d

    @property
    def word(self) -> str:
        return self._arena.word_of(self.index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return self._arena is other._arena and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self._arena), self.index))

    def __repr__(self) -> str:
        if self.is_root:
            return "TrieNode(<root>)"
        mark = "*" if self.is_terminal else ""
        return f"TrieNode({self.word!r}{mark})"
