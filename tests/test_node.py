import numpy as np
import pytest

from wordtrie.constants import NO_NODE, ROOT
from wordtrie.node import NodeArena, TrieNode


def test_new_arena_is_empty():
    arena = NodeArena(5)
    assert arena.size == 0
    assert arena.children.shape[1] == 5


@pytest.mark.parametrize("size", [0, -1])
def test_bad_alphabet(size):
    with pytest.raises(ValueError):
        NodeArena(size)


def test_bad_first_symbol():
    with pytest.raises(ValueError):
        NodeArena(26, first_symbol="ab")


def test_new_node_links_parent():
    arena = NodeArena(26)
    root = arena.new_node()
    child = arena.new_node(root, 2)
    assert root == ROOT
    assert arena.child(root, 2) == child
    assert arena.parent[child] == root
    assert arena.symbol_at(int(arena.symbol[child])) == "c"
    assert arena.failure[child] == NO_NODE


def test_growth_preserves_rows():
    arena = NodeArena(3, capacity=2)
    root = arena.new_node()
    prev = root
    for _ in range(10):
        prev = arena.new_node(prev, 1)
    assert arena.capacity >= 11
    assert arena.word_of(prev) == "b" * 10
    assert np.all(arena.children[arena.size:] == NO_NODE)


def test_offset_of():
    arena = NodeArena(26)
    assert arena.offset_of("a") == 0
    assert arena.offset_of("z") == 25
    assert arena.offset_of("A") == NO_NODE
    assert arena.offset_of("{") == NO_NODE


def test_present_children_in_offset_order():
    arena = NodeArena(26)
    root = arena.new_node()
    z = arena.new_node(root, 25)
    a = arena.new_node(root, 0)
    assert arena.present_children(root) == [(0, a), (25, z)]


def test_handle_repr():
    arena = NodeArena(26)
    root = arena.new_node()
    child = arena.new_node(root, 7)
    arena.terminal[child] = True
    assert repr(TrieNode(arena, root)) == "TrieNode(<root>)"
    assert repr(TrieNode(arena, child)) == "TrieNode('h'*)"
