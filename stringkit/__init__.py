"""String algorithms: similarity, phonetic codes, substring search and Unicode segmentation."""

from .unicode import (
    Segmenter,
    ClusterSegmenter,
    CodePointSegmenter,
    get_segmenter,
    graphemes,
    code_points,
    string_width,
    remove_accents,
    is_rtl,
    reverse_unicode,
    normalize_unicode,
    is_emoji,
    strip_emojis,
)
from .distance import (
    levenshtein_distance,
    jaro_distance,
    cosine_distance,
    character_bigrams,
)
from .phonetic import soundex, metaphone
from .search import (
    build_bad_char_table,
    boyer_moore_search,
    contains,
    count,
    index_of_all,
)
from .similarity import (
    SimilarityAlgorithm,
    SoundsLikeAlgorithm,
    similarity,
    fuzzy_match,
    sounds_like,
)
from .analysis import Pattern, words, chars, find_patterns, is_repeating
from .errors import UnknownAlgorithmError

__all__ = [
    "Segmenter",
    "ClusterSegmenter",
    "CodePointSegmenter",
    "get_segmenter",
    "graphemes",
    "code_points",
    "string_width",
    "remove_accents",
    "is_rtl",
    "reverse_unicode",
    "normalize_unicode",
    "is_emoji",
    "strip_emojis",
    "levenshtein_distance",
    "jaro_distance",
    "cosine_distance",
    "character_bigrams",
    "soundex",
    "metaphone",
    "build_bad_char_table",
    "boyer_moore_search",
    "contains",
    "count",
    "index_of_all",
    "SimilarityAlgorithm",
    "SoundsLikeAlgorithm",
    "similarity",
    "fuzzy_match",
    "sounds_like",
    "Pattern",
    "words",
    "chars",
    "find_patterns",
    "is_repeating",
    "UnknownAlgorithmError",
]
