import pytest

from wordtrie.trie import Trie

FIXED_WORDS = [
    "app", "apple", "apply",
    "bat", "batch", "bath",
    "bar", "bark",
    "cat", "cater",
    "do", "dog", "dove",
]


@pytest.fixture
def words():
    return list(FIXED_WORDS)


@pytest.fixture
def trie(words):
    t = Trie()
    t.insert_all(words)
    return t


@pytest.fixture
def automaton():
    t = Trie()
    t.insert_all(["he", "she", "his", "hers"])
    t.build_automaton()
    return t
