"""Wildcard and permutation searches over the trie.

Both are depth-first backtracking searches.  They run on an explicit
stack rather than recursion so long expressions or large letter sets
cannot hit the interpreter's recursion limit.  Children are pushed in
reverse offset order, so results come out in the same order a recursive
walk over offsets ``0..alphabet_size-1`` would produce.
"""

from __future__ import annotations

from wordtrie.constants import NO_NODE, ROOT, WILDCARD
from wordtrie.node import NodeArena


def wildcard_query(arena: NodeArena, expression: str, wildcard: str = WILDCARD) -> list[str]:
    """Words of exactly ``len(expression)`` symbols matching ``expression``.

    Each position is either a literal symbol or the ``wildcard`` marker,
    which matches any symbol.  Only children that actually exist are
    explored at a wildcard position.
    """
    words: list[str] = []
    n = len(expression)
    stack: list[tuple[int, int, str]] = [(ROOT, 0, "")]
    while stack:
        node, index, current = stack.pop()
        if index == n:
            if node != ROOT and arena.terminal[node]:
                words.append(current)
            continue

        ch = expression[index]
        if ch == wildcard:
            for k, child in reversed(arena.present_children(node)):
                stack.append((child, index + 1, current + arena.symbol_at(k)))
        else:
            k = arena.offset_of(ch)
            if k == NO_NODE:
                continue
            child = arena.child(node, k)
            if child != NO_NODE:
                stack.append((child, index + 1, current + ch))
    return words


def permutation_search(arena: NodeArena, letters: list[str]) -> list[str]:
    """Words spelled by some ordering of some of ``letters``.

    Orderings are generated by picking each remaining letter in turn and
    recursing on the rest; every non-empty prefix along the way is checked.
    Repeated letters generate the same prefixes more than once, so words
    may appear several times in the result.  Branches whose prefix is not
    a path in the trie are dropped, since nothing below them can match.
    """
    words: list[str] = []
    stack: list[tuple[int, str, list[str]]] = [(ROOT, "", letters)]
    while stack:
        node, current, remaining = stack.pop()
        if current and arena.terminal[node]:
            words.append(current)

        branches = []
        for ch in remaining:
            k = arena.offset_of(ch)
            if k == NO_NODE:
                continue
            child = arena.child(node, k)
            if child == NO_NODE:
                continue
            rest = list(remaining)
            rest.remove(ch)
            branches.append((child, current + ch, rest))
        stack.extend(reversed(branches))
    return words
