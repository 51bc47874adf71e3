import pytest

from algokit.trie import Trie


@pytest.fixture
def trie():
    t = Trie()
    for word in ("abc", "abd", "mno"):
        t.insert(word)
    return t


def test_contains_inserted(trie):
    assert "abc" in trie
    assert "abd" in trie
    assert "mno" in trie


def test_prefix_is_not_a_word(trie):
    assert "ab" not in trie
    assert "abcd" not in trie
    assert "xyz" not in trie


def test_remove_keeps_siblings(trie):
    trie.remove("abc")
    assert "abc" not in trie
    assert "abd" in trie
    assert "mno" in trie


def test_remove_missing_raises(trie):
    with pytest.raises(KeyError):
        trie.remove("ab")
    assert "abc" in trie


def test_remove_prefix_word_keeps_longer():
    t = Trie()
    t.insert("car")
    t.insert("cart")
    t.remove("car")
    assert "car" not in t
    assert "cart" in t


def test_remove_longer_keeps_prefix_word():
    t = Trie()
    t.insert("car")
    t.insert("cart")
    t.remove("cart")
    assert "cart" not in t
    assert "car" in t


def test_is_empty_lifecycle(trie):
    assert Trie().is_empty() is True
    assert trie.is_empty() is False
    for word in ("abc", "abd", "mno"):
        trie.remove(word)
    assert trie.is_empty() is True


def test_reinsert_after_remove(trie):
    trie.remove("mno")
    trie.insert("mno")
    assert "mno" in trie


def test_non_string_not_contained(trie):
    assert 42 not in trie