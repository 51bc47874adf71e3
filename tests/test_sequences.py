import random

import pytest

from algokit.sequences import (
    count_palindromic_subsequences,
    edit_distance,
    is_interleaving,
    longest_common_subsequence,
    longest_repeating_subsequence,
    wildcard_match,
)

_rng = random.Random(1234)
WORDS = ["", "a", "abc", "yabd", "sdsddd", "dasdssdds", "kitten", "sitting", "abcba"] + [
    "".join(_rng.choice("abc") for _ in range(_rng.randint(0, 7))) for _ in range(10)
]
PAIRS = [(a, b) for a in WORDS[:9] for b in WORDS[:9]] + list(zip(WORDS[9:], reversed(WORDS[9:])))


def test_edit_distance_known_example():
    assert edit_distance("kitten", "sitting") == 3


@pytest.mark.parametrize("a,b", PAIRS)
def test_edit_distance_symmetric_and_bounded(a, b):
    d = edit_distance(a, b)
    assert d == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))


@pytest.mark.parametrize("word", WORDS)
def test_edit_distance_identity_and_empty(word):
    assert edit_distance(word, word) == edit_distance("", "")
    assert edit_distance("", word) == len(word)
    assert edit_distance(word, "") == len(word)


@pytest.mark.parametrize("a,b,c", [("abc", "yabd", "sdsddd"), ("kitten", "sitting", "abcba"), ("", "a", "abc")])
def test_edit_distance_triangle_inequality(a, b, c):
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_lcs_known_example():
    assert longest_common_subsequence("ABCDGH", "AEDFHR") == 3


@pytest.mark.parametrize("a,b", PAIRS)
def test_lcs_symmetric_and_bounded(a, b):
    length = longest_common_subsequence(a, b)
    assert length == longest_common_subsequence(b, a)
    assert length <= min(len(a), len(b))
    # Keeping the common subsequence and editing the rest bounds the distance.
    assert edit_distance(a, b) <= len(a) + len(b) - 2 * length


@pytest.mark.parametrize("word", WORDS)
def test_lcs_with_self_and_prefix(word):
    assert longest_common_subsequence(word, word) == len(word)
    assert longest_common_subsequence(word, word[: len(word) // 2]) == len(word) // 2


@pytest.mark.parametrize("base", ["abc", "xyz", "a", "abcdef"])
def test_repeating_subsequence_of_doubled_distinct_text(base):
    assert longest_repeating_subsequence(base) == longest_repeating_subsequence("")
    assert longest_repeating_subsequence(base + base) == len(base)


def test_wildcard_source_example():
    assert wildcard_match("abcba", "a?c*a")


@pytest.mark.parametrize(
    "text,pattern,expected",
    [
        ("abc", "abc", True),
        ("abc", "a?c", True),
        ("abc", "*", True),
        ("", "*", True),
        ("", "**", True),
        ("", "", True),
        ("", "?", False),
        ("abc", "ab", False),
        ("abc", "a*d", False),
        ("abcba", "*b*", True),
        ("abc", "abc*", True),
        ("ab", "a*?b", False),
    ],
)
def test_wildcard_cases(text, pattern, expected):
    assert wildcard_match(text, pattern) is expected


@pytest.mark.parametrize("word", WORDS)
def test_wildcard_literal_pattern_matches_itself(word):
    assert wildcard_match(word, word)
    assert wildcard_match(word, "?" * len(word))
    assert not wildcard_match(word, "?" * (len(word) + 1))


def test_palindromic_subsequences_distinct_characters():
    assert count_palindromic_subsequences("abcd") == len("abcd")
    assert count_palindromic_subsequences("") == count_palindromic_subsequences([])


@pytest.mark.parametrize("n", range(1, 8))
def test_palindromic_subsequences_all_same(n):
    assert count_palindromic_subsequences("a" * n) == 2**n - 1


@pytest.mark.parametrize("word", WORDS)
def test_palindromic_subsequences_reverse_invariant(word):
    assert count_palindromic_subsequences(word) == count_palindromic_subsequences(word[::-1])
    assert count_palindromic_subsequences(word) >= len(word)


def test_interleaving_source_example():
    assert is_interleaving("abc", "def", "adebcf")


@pytest.mark.parametrize(
    "x,y,z,expected",
    [
        ("abc", "def", "abcdef", True),
        ("abc", "def", "defabc", True),
        ("abc", "def", "abdecf", True),
        ("abc", "def", "acbdef", False),
        ("abc", "def", "abcde", False),
        ("aab", "axy", "aaxaby", True),
        ("aab", "axy", "abaaxy", False),
        ("", "", "", True),
        ("", "ab", "ab", True),
        ("a", "", "b", False),
    ],
)
def test_interleaving_cases(x, y, z, expected):
    assert is_interleaving(x, y, z) is expected


@pytest.mark.parametrize("x,y", list(zip(WORDS, reversed(WORDS))))
def test_interleaving_concatenation(x, y):
    assert is_interleaving(x, y, x + y)
    assert is_interleaving(x, y, y + x)
    assert not is_interleaving(x, y, x + y + "a")