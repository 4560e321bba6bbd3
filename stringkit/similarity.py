"""
Similarity facade: named-algorithm dispatch over the distance and phonetic encoders.

Selectors are closed enums; plain strings are accepted and converted, and an
unrecognized name raises UnknownAlgorithmError instead of falling back.
"""

from enum import Enum
from typing import Optional, Union

from . import config
from .distance import cosine_distance, jaro_distance, levenshtein_distance
from .errors import UnknownAlgorithmError
from .phonetic import metaphone, soundex


class SimilarityAlgorithm(str, Enum):
    LEVENSHTEIN = "levenshtein"
    JARO = "jaro"
    COSINE = "cosine"


class SoundsLikeAlgorithm(str, Enum):
    SOUNDEX = "soundex"
    METAPHONE = "metaphone"


def _coerce(enum_cls, kind: str, algorithm):
    try:
        return enum_cls(algorithm)
    except ValueError:
        raise UnknownAlgorithmError(kind, algorithm) from None


def similarity(
    a: str,
    b: str,
    algorithm: Union[SimilarityAlgorithm, str] = SimilarityAlgorithm.LEVENSHTEIN,
) -> float:
    """
    Similarity score of a and b in [0, 1] using the selected algorithm.

    Levenshtein is normalized as 1 - distance / max(len(a), len(b)), with two
    empty strings scoring 1.0. Cosine returns nan when exactly one input is empty.
    """
    algo = _coerce(SimilarityAlgorithm, "similarity", algorithm)
    if algo is SimilarityAlgorithm.LEVENSHTEIN:
        max_len = max(len(a), len(b))
        if max_len == 0:
            return 1.0
        return 1.0 - levenshtein_distance(a, b) / max_len
    if algo is SimilarityAlgorithm.JARO:
        return jaro_distance(a, b)
    if algo is SimilarityAlgorithm.COSINE:
        return cosine_distance(a, b)
    raise UnknownAlgorithmError("similarity", algorithm)


def fuzzy_match(text: str, pattern: str, threshold: Optional[float] = None) -> bool:
    """Levenshtein similarity >= threshold (default: config.FUZZY_THRESHOLD, 0.6)."""
    if threshold is None:
        threshold = config.FUZZY_THRESHOLD
    return similarity(text, pattern, SimilarityAlgorithm.LEVENSHTEIN) >= threshold


def sounds_like(
    a: str,
    b: str,
    algorithm: Union[SoundsLikeAlgorithm, str] = SoundsLikeAlgorithm.SOUNDEX,
) -> bool:
    """True when both words have the same phonetic code."""
    algo = _coerce(SoundsLikeAlgorithm, "sounds-like", algorithm)
    if algo is SoundsLikeAlgorithm.SOUNDEX:
        return soundex(a) == soundex(b)
    if algo is SoundsLikeAlgorithm.METAPHONE:
        return metaphone(a) == metaphone(b)
    raise UnknownAlgorithmError("sounds-like", algorithm)
