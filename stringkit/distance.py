"""
Edit-distance and similarity scores between two strings.

- Levenshtein: unit-cost insert/delete/substitute, rolling-row DP.
- Jaro: windowed character matches plus transpositions, score in [0, 1].
- Cosine: overlap of character-bigram sets, score in [0, 1].

All scores are case-sensitive and symmetric; no normalization is applied.
Levenshtein and Jaro are quadratic in input length; keep inputs to a few
thousand characters when calling them repeatedly.
"""

import math
from typing import Set


def levenshtein_distance(a: str, b: str) -> int:
    """
    Edit distance (Levenshtein) between two strings.
    Only the previous row of the cost matrix is kept, over the shorter string.
    """
    if len(a) < len(b):
        a, b = b, a
    n, m = len(a), len(b)
    if m == 0:
        return n
    prev = list(range(m + 1))
    for i in range(1, n + 1):
        curr = [i]
        for j in range(1, m + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            curr.append(min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[m]


def jaro_distance(a: str, b: str) -> float:
    """
    Jaro similarity: 1.0 for identical strings, 0.0 when nothing matches.

    Characters match when equal and no further apart than
    max(0, max(len_a, len_b) // 2 - 1); strings of length 1-2 therefore only
    match position by position. The first unmatched candidate in the window wins.
    """
    len_a, len_b = len(a), len(b)
    if len_a == 0 and len_b == 0:
        return 1.0
    if len_a == 0 or len_b == 0:
        return 0.0

    window = max(0, max(len_a, len_b) // 2 - 1)
    a_matched = [False] * len_a
    b_matched = [False] * len_b

    matches = 0
    for i in range(len_a):
        start = max(0, i - window)
        end = min(i + window + 1, len_b)
        for j in range(start, end):
            if b_matched[j] or a[i] != b[j]:
                continue
            a_matched[i] = True
            b_matched[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i in range(len_a):
        if not a_matched[i]:
            continue
        while not b_matched[k]:
            k += 1
        if a[i] != b[k]:
            transpositions += 1
        k += 1

    return (
        matches / len_a
        + matches / len_b
        + (matches - transpositions / 2) / matches
    ) / 3


def character_bigrams(text: str) -> Set[str]:
    """
    Unique overlapping 2-character windows of text.
    A single character is its own bigram; empty text has none.
    """
    if len(text) < 2:
        return {text} if text else set()
    return {text[i : i + 2] for i in range(len(text) - 1)}


def cosine_distance(a: str, b: str) -> float:
    """
    Cosine similarity of the bigram sets: |A & B| / sqrt(|A| * |B|).

    Two empty strings score 1.0. If exactly one is empty the score is
    undefined and math.nan is returned; callers must guard that case.
    """
    bigrams_a = character_bigrams(a)
    bigrams_b = character_bigrams(b)
    if not bigrams_a and not bigrams_b:
        return 1.0
    if not bigrams_a or not bigrams_b:
        return math.nan
    return len(bigrams_a & bigrams_b) / math.sqrt(len(bigrams_a) * len(bigrams_b))
