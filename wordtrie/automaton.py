"""Aho-Corasick failure/output links and multi-pattern scanning.

The trie's children act as the goto function.  :func:`build_links` adds

  * a failure link per node: the node spelling the longest proper suffix
    of this node's word that is also a path in the trie (root if none).
    The root's failure link points at the root itself, which is what
    stops every failure-chain walk;
  * an output link per node: the nearest terminal node on the failure
    chain, not counting the node itself.

:func:`scan` then reads the text one symbol at a time and, at each
position, reports the current node (if terminal) followed by the whole
output chain, i.e. every word ending at that position from longest to
shortest.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, NamedTuple

from wordtrie.constants import NO_NODE, ROOT
from wordtrie.node import NodeArena

log = logging.getLogger("wordtrie.automaton")


class Match(NamedTuple):
    """A dictionary word found in scanned text; ``text[start:end] == word``."""

    start: int
    end: int
    word: str


def build_links(arena: NodeArena) -> None:
    """Compute failure and output links for every node, breadth-first."""
    failure = arena.failure
    output = arena.output
    terminal = arena.terminal
    children = arena.children

    failure[: arena.size] = NO_NODE
    output[: arena.size] = NO_NODE
    failure[ROOT] = ROOT

    queue: deque[int] = deque()
    for _, child in arena.present_children(ROOT):
        failure[child] = ROOT
        queue.append(child)

    while queue:
        current = queue.popleft()
        for k, child in arena.present_children(current):
            # deepest proper suffix of current's word that can be extended by k
            fail = int(failure[current])
            while children[fail, k] == NO_NODE and fail != ROOT:
                fail = int(failure[fail])
            nxt = int(children[fail, k])
            fail = ROOT if nxt == NO_NODE else nxt
            failure[child] = fail
            output[child] = fail if terminal[fail] and fail != ROOT else output[fail]
            queue.append(child)

    log.debug("Failure/output links set for %d nodes", arena.size)


def next_state(arena: NodeArena, current: int, ch: str) -> int:
    """Goto/failure transition from ``current`` on ``ch``.

    Falls back to the root when no transition exists anywhere on the
    failure chain, or when ``ch`` is not in the alphabet.  Nodes inserted
    after the last build have no failure link; those fall back to the root.
    """
    k = arena.offset_of(ch)
    if k == NO_NODE:
        return ROOT
    children = arena.children
    while children[current, k] == NO_NODE and current != ROOT:
        current = int(arena.failure[current])
        if current == NO_NODE:
            current = ROOT
    nxt = int(children[current, k])
    return ROOT if nxt == NO_NODE else nxt


def scan(arena: NodeArena, text: str) -> Iterator[Match]:
    """Yield every occurrence of a dictionary word in ``text``.

    Matches come out by increasing end position; matches sharing an end
    position come longest first.
    """
    current = ROOT
    for pos, ch in enumerate(text):
        current = next_state(arena, current, ch)
        end = pos + 1
        if current != ROOT and arena.terminal[current]:
            word = arena.word_of(current)
            yield Match(end - len(word), end, word)
        out = int(arena.output[current])
        while out != NO_NODE:
            word = arena.word_of(out)
            yield Match(end - len(word), end, word)
            out = int(arena.output[out])
