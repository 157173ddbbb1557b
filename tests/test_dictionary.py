import logging

from wordtrie.dictionary import BUILTIN_WORDS, Dictionary


def test_loads_word_file(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("apple\nbanana\n\nCherry\nit's\ngrape\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="wordtrie"):
        d = Dictionary(str(path), search_paths=())
    assert d.words == {"apple", "banana", "grape"}
    assert d.source == str(path)
    assert "Loaded 3 words" in caplog.text
    assert "apple" in d
    assert "Cherry" not in d


def test_automaton_ready_after_load(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("vertical\ncall\nall\n", encoding="utf-8")
    d = Dictionary(str(path), search_paths=())
    assert d.trie.automaton_ready
    assert d.trie.match("wverticall") == ["vertical", "call", "all"]


def test_length_bounds(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("a\nab\nabc\nabcd\n", encoding="utf-8")
    d = Dictionary(str(path), search_paths=(), min_length=2, max_length=3)
    assert d.words == {"ab", "abc"}


def test_search_paths_used_in_order(tmp_path):
    first = tmp_path / "missing.txt"
    second = tmp_path / "second.txt"
    second.write_text("dog\n", encoding="utf-8")
    d = Dictionary(search_paths=(str(first), str(second)))
    assert d.source == str(second)
    assert d.is_valid("dog")


def test_falls_back_to_builtin(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="wordtrie"):
        d = Dictionary(str(tmp_path / "nope.txt"), search_paths=())
    assert d.source is None
    assert len(d) == len(set(BUILTIN_WORDS))
    assert "built-in" in caplog.text
    assert sorted(d.trie.permute("aerd")) == sorted(["are", "dare", "dear", "ear", "era", "rad", "read", "red"])


def test_in_memory_words():
    d = Dictionary(words=["he", "she", "HIS", "hers"])
    assert d.words == {"he", "she", "hers"}
    assert d.trie.match("ushers") == ["she", "he", "hers"]
