"""
Edit-distance engine tests: Levenshtein, Jaro and cosine base cases,
symmetry and the short-string Jaro window.
"""

import math
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stringkit.distance import (
    character_bigrams,
    cosine_distance,
    jaro_distance,
    levenshtein_distance,
)

WORDS = ["", "a", "ab", "kitten", "sitting", "saturday", "sunday", "hello", "Hello", "abc", "xyz"]


def test_levenshtein_known_values():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("saturday", "sunday") == 3
    assert levenshtein_distance("hello", "hallo") == 1
    assert levenshtein_distance("hello", "helllo") == 1
    assert levenshtein_distance("hello", "helo") == 1
    assert levenshtein_distance("abc", "xyz") == 3


def test_levenshtein_empty_and_single():
    assert levenshtein_distance("", "") == 0
    assert levenshtein_distance("", "hello") == 5
    assert levenshtein_distance("hello", "") == 5
    assert levenshtein_distance("a", "b") == 1
    assert levenshtein_distance("a", "a") == 0


def test_levenshtein_counts_code_points():
    assert levenshtein_distance("caf" + chr(0xE9), "cafe") == 1
    assert levenshtein_distance(chr(0x1F680), chr(0x1F30D)) == 1


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_levenshtein_symmetric_and_zero_iff_equal(a, b):
    d = levenshtein_distance(a, b)
    assert d == levenshtein_distance(b, a)
    assert (d == 0) == (a == b)
    assert 0 <= d <= max(len(a), len(b))


def test_jaro_identity_and_empty():
    assert jaro_distance("hello", "hello") == 1.0
    assert jaro_distance("", "") == 1.0
    assert jaro_distance("", "hello") == 0.0
    assert jaro_distance("hello", "") == 0.0


def test_jaro_no_matches():
    assert jaro_distance("abc", "xyz") == 0.0


def test_jaro_martha_marhta():
    assert jaro_distance("martha", "marhta") == pytest.approx(0.9444, abs=1e-4)


def test_jaro_short_strings_use_zero_window():
    assert jaro_distance("a", "a") == 1.0
    assert jaro_distance("a", "b") == 0.0
    # window is 0 for length 2: swapped characters do not match
    assert jaro_distance("ab", "ba") == 0.0
    assert jaro_distance("ab", "ab") == 1.0


def test_jaro_partial_and_case_sensitive():
    s = jaro_distance("hello", "helloworld")
    assert 0 < s < 1
    s = jaro_distance("Hello", "hello")
    assert 0 < s < 1


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_jaro_bounded(a, b):
    assert 0.0 <= jaro_distance(a, b) <= 1.0


def test_character_bigrams():
    assert character_bigrams("hello") == {"he", "el", "ll", "lo"}
    assert character_bigrams("a") == {"a"}
    assert character_bigrams("") == set()


def test_cosine_identity():
    assert cosine_distance("hello", "hello") == 1.0
    assert cosine_distance("abc def", "abc def") == 1.0
    assert cosine_distance("", "") == 1.0


def test_cosine_single_characters():
    assert cosine_distance("a", "a") == 1.0
    assert cosine_distance("a", "b") == 0.0


def test_cosine_values():
    assert cosine_distance("abc", "xyz") == 0.0
    assert cosine_distance("hello", "helo") == pytest.approx(3 / math.sqrt(12))
    assert cosine_distance("ab", "ba") == cosine_distance("ba", "ab")


def test_cosine_one_empty_is_nan():
    assert math.isnan(cosine_distance("", "hello"))
    assert math.isnan(cosine_distance("hello", ""))
