"""
Substring search tests: Boyer-Moore offsets, non-overlapping semantics,
degenerate inputs and the contains/count/index_of_all helpers.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stringkit.search import (
    boyer_moore_search,
    build_bad_char_table,
    contains,
    count,
    index_of_all,
)


def test_bad_char_table_keeps_rightmost_index():
    assert build_bad_char_table("abcab") == {"a": 3, "b": 4, "c": 2}
    assert build_bad_char_table("") == {}


def test_boyer_moore_finds_all_occurrences():
    assert boyer_moore_search("abcabcabc", "abc") == [0, 3, 6]
    assert boyer_moore_search("hello world hello", "hello") == [0, 12]
    assert boyer_moore_search("test", "st") == [2]


def test_boyer_moore_single_character_pattern():
    assert boyer_moore_search("hello", "l") == [2, 3]
    assert boyer_moore_search("aaa", "a") == [0, 1, 2]


def test_boyer_moore_non_overlapping():
    assert boyer_moore_search("aaaa", "aa") == [0, 2]
    assert boyer_moore_search("aaaaa", "aa") == [0, 2]


def test_boyer_moore_degenerate_inputs():
    assert boyer_moore_search("", "test") == []
    assert boyer_moore_search("test", "") == []
    assert boyer_moore_search("", "") == []
    assert boyer_moore_search("hi", "hello") == []


def test_boyer_moore_not_found():
    assert boyer_moore_search("hello", "xyz") == []
    assert boyer_moore_search("abc", "def") == []


def test_boyer_moore_case_sensitive():
    assert boyer_moore_search("Hello", "hello") == []
    assert boyer_moore_search("Hello", "Hello") == [0]


def test_boyer_moore_matches_naive_scan():
    text = "the quick brown fox jumps over the lazy dog; the end"
    for pattern in ("the", "o", "he ", "dog;", "zz", "e"):
        expected = []
        i = text.find(pattern)
        while i != -1:
            expected.append(i)
            i = text.find(pattern, i + len(pattern))
        assert boyer_moore_search(text, pattern) == expected


def test_contains():
    assert contains("Hello World", "World")
    assert not contains("Hello World", "world")
    assert contains("Hello World", "world", case_sensitive=False)


def test_count():
    assert count("aaaa", "aa") == 2
    assert count("hello hello", "hello") == 2
    assert count("hello", "") == 0
    assert count("hello", "x") == 0


def test_index_of_all():
    assert index_of_all("aaaa", "aa") == [0, 2]
    assert index_of_all("hello", "") == []
