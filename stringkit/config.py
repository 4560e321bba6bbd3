"""Library configuration from environment."""
import logging
import os

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

# Load .env from the working directory tree, if any
load_dotenv(find_dotenv(usecwd=True))

# Grapheme segmentation strategy: "cluster" (extended grapheme clusters) or "codepoint"
SEGMENTER_NAMES = frozenset({"cluster", "codepoint"})
SEGMENTER = os.environ.get("STRINGKIT_SEGMENTER", "cluster").strip().lower()
if SEGMENTER not in SEGMENTER_NAMES:
    logger.warning("Unknown STRINGKIT_SEGMENTER %r, using 'cluster'", SEGMENTER)
    SEGMENTER = "cluster"


def _fuzzy_threshold() -> float:
    raw = os.environ.get("STRINGKIT_FUZZY_THRESHOLD", "0.6")
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid STRINGKIT_FUZZY_THRESHOLD %r, using 0.6", raw)
        return 0.6
    return min(1.0, max(0.0, value))


# Default threshold for fuzzy_match (Levenshtein similarity)
FUZZY_THRESHOLD = _fuzzy_threshold()

# find_patterns is cubic in input length; longer inputs are rejected
MAX_PATTERN_INPUT_LENGTH = int(os.environ.get("STRINGKIT_MAX_PATTERN_INPUT", 1000))

# Phonetic code sizes
SOUNDEX_LENGTH = 4
METAPHONE_MAX_LENGTH = 4
