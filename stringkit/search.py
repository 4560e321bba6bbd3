"""
Substring search.

- Boyer-Moore with the bad-character heuristic; non-overlapping matches.
- The bad-character table is rebuilt on every call and never cached.
- contains / count / index_of_all are the plain helpers built on top of it.
"""

from typing import Dict, List


def build_bad_char_table(pattern: str) -> Dict[str, int]:
    """Rightmost index of each character of pattern."""
    return {c: i for i, c in enumerate(pattern)}


def boyer_moore_search(text: str, pattern: str) -> List[int]:
    """
    Start offsets of every non-overlapping occurrence of pattern in text, ascending.
    Case-sensitive. Empty pattern, empty text or a pattern longer than the
    text give no matches.
    """
    indices: List[int] = []
    m, n = len(pattern), len(text)
    if m == 0 or n == 0 or m > n:
        return indices

    table = build_bad_char_table(pattern)
    skip = 0
    while skip <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[skip + j]:
            j -= 1
        if j < 0:
            indices.append(skip)
            skip += m
        else:
            skip += max(1, j - table.get(text[skip + j], m))
    return indices


def contains(text: str, search: str, case_sensitive: bool = True) -> bool:
    if not case_sensitive:
        return search.lower() in text.lower()
    return search in text


def count(text: str, search: str) -> int:
    """Number of non-overlapping occurrences of search; 0 for an empty search."""
    if not search:
        return 0
    return text.count(search)


def index_of_all(text: str, search: str) -> List[int]:
    if not search:
        return []
    return boyer_moore_search(text, search)
