"""
Text analysis helpers built on the segmentation and search primitives.

- words: runs of Unicode letters and digits.
- find_patterns: repeated substrings with their offsets (cubic; input is capped).
- is_repeating: whole-string repetition of a shorter unit.
"""

from typing import List

import regex
from pydantic import BaseModel

from . import config
from .unicode import graphemes

_WORD_RE = regex.compile(r"[\p{L}\p{N}]+")


class Pattern(BaseModel):
    """A substring seen more than once, with every start offset."""
    pattern: str
    indices: List[int]
    length: int
    frequency: int


def words(text: str) -> List[str]:
    if not isinstance(text, str):
        return []
    return _WORD_RE.findall(text)


def chars(text: str) -> List[str]:
    """User-perceived characters of text."""
    return graphemes(text)


def find_patterns(text: str, min_length: int = 2) -> List[Pattern]:
    """
    Substrings of length min_length .. len(text) // 2 that occur more than once.
    Overlapping occurrences count. Sorted by frequency, then length, both
    descending; ties keep first-seen order.
    Raises ValueError if min_length < 1 or text exceeds config.MAX_PATTERN_INPUT_LENGTH.
    """
    if min_length < 1:
        raise ValueError("min_length must be at least 1")
    if len(text) > config.MAX_PATTERN_INPUT_LENGTH:
        raise ValueError(
            f"String too long for pattern finding (max {config.MAX_PATTERN_INPUT_LENGTH} characters)"
        )

    seen = {}
    for length in range(min_length, len(text) // 2 + 1):
        for i in range(len(text) - length + 1):
            sub = text[i : i + length]
            if sub in seen:
                seen[sub].append(i)
            else:
                seen[sub] = [i]

    patterns = [
        Pattern(pattern=sub, indices=indices, length=len(sub), frequency=len(indices))
        for sub, indices in seen.items()
        if len(indices) > 1
    ]
    patterns.sort(key=lambda p: (-p.frequency, -p.length))
    return patterns


def is_repeating(text: str) -> bool:
    """True if text is a shorter unit repeated two or more times."""
    n = len(text)
    for size in range(1, n // 2 + 1):
        if n % size == 0 and text[:size] * (n // size) == text:
            return True
    return False
