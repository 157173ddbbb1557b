"""Save and restore a trie, automaton links included.

A snapshot is the node arena written out as numpy arrays: children,
parent, failure, output, symbol and terminal rows for every node, plus
a few scalars (alphabet size, first symbol, whether the automaton was
built).  Because links are stored as indices, the root's self-referencing
failure link round-trips like any other value.
"""

from __future__ import annotations

import logging
import os

import numpy as np

from wordtrie.constants import NO_NODE, ROOT
from wordtrie.node import INDEX_DTYPE, NodeArena
from wordtrie.trie import Trie

log = logging.getLogger("wordtrie")

FORMAT_VERSION = 1

_LINK_ARRAYS = ("parent", "failure", "output", "symbol")


def export_snapshot(trie: Trie) -> dict[str, np.ndarray]:
    """Copy the trie's arena into a dict of plain arrays."""
    arena = trie.arena
    n = arena.size
    data = {
        "version": np.array(FORMAT_VERSION),
        "alphabet_size": np.array(arena.alphabet_size),
        "first_symbol": np.array(ord(arena.first_symbol)),
        # nodes added after the last build have no links, so they export as unbuilt
        "ready": np.array(trie.automaton_ready and bool((arena.failure[1:n] >= 0).all())),
        "children": arena.children[:n].copy(),
        "terminal": arena.terminal[:n].copy(),
    }
    for name in _LINK_ARRAYS:
        data[name] = getattr(arena, name)[:n].copy()
    return data


def import_snapshot(data) -> Trie:
    """Rebuild a :class:`Trie` from :func:`export_snapshot` output.

    ``data`` may be the dict itself or an opened ``.npz`` file.
    """
    missing = {"version", "alphabet_size", "first_symbol", "ready", "children",
               "terminal", *_LINK_ARRAYS} - set(data.keys())
    if missing:
        raise ValueError(f"Snapshot is missing arrays: {sorted(missing)}")
    version = int(data["version"])
    if version != FORMAT_VERSION:
        raise ValueError(f"Unsupported snapshot version {version}")

    alphabet_size = int(data["alphabet_size"])
    children = np.asarray(data["children"], dtype=INDEX_DTYPE)
    n = len(children)
    if n < 1:
        raise ValueError("Snapshot has no root node")
    if children.shape != (n, alphabet_size):
        raise ValueError(
            f"children has shape {children.shape}, expected ({n}, {alphabet_size})"
        )

    arena = NodeArena(alphabet_size, chr(int(data["first_symbol"])), capacity=n)
    arena.size = n
    arena.children[:n] = children
    terminal = np.asarray(data["terminal"], dtype=bool)
    if terminal.shape != (n,):
        raise ValueError(f"terminal has shape {terminal.shape}, expected ({n},)")
    arena.terminal[:n] = terminal
    for name in _LINK_ARRAYS:
        arr = np.asarray(data[name], dtype=INDEX_DTYPE)
        if arr.shape != (n,):
            raise ValueError(f"{name} has shape {arr.shape}, expected ({n},)")
        getattr(arena, name)[:n] = arr

    for name in ("children", "parent", "failure", "output"):
        arr = getattr(arena, name)[:n]
        if ((arr < NO_NODE) | (arr >= n)).any():
            raise ValueError(f"{name} holds a link outside the node range")
    if arena.parent[ROOT] != NO_NODE:
        raise ValueError("Node 0 must be the root")
    symbols = arena.symbol[1:n]
    if ((symbols < 0) | (symbols >= alphabet_size)).any():
        raise ValueError("symbol holds an offset outside the alphabet")

    ready = bool(data["ready"])
    if ready and (arena.failure[ROOT] != ROOT or (arena.failure[1:n] < 0).any()):
        raise ValueError("Snapshot is marked built but has unset failure links")

    return Trie._from_arena(arena, ready=ready)


def save_snapshot(trie: Trie, path: str | os.PathLike) -> None:
    np.savez_compressed(path, **export_snapshot(trie))
    log.info("Saved snapshot of %s words (%s nodes) to %s",
             f"{len(trie):,}", f"{trie.node_count:,}", path)


def load_snapshot(path: str | os.PathLike) -> Trie:
    with np.load(path) as data:
        trie = import_snapshot(data)
    log.info("Loaded snapshot of %s words from %s", f"{len(trie):,}", path)
    return trie
