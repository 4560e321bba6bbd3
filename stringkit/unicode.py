"""
Unicode-aware text segmentation and measurement.

- Graphemes: user-perceived characters (base + combining marks, ZWJ emoji
  sequences, flags) via the regex module's extended grapheme clusters.
- Segmentation strategy is injectable; CodePointSegmenter is the naive mode
  with reduced cluster correctness.
- Display width follows East Asian wide ranges; control characters are zero width.
- All functions accept any input and degrade to empty defaults on non-strings.
"""

import logging
import unicodedata
from typing import List, Optional

import regex

from . import config

logger = logging.getLogger(__name__)

NORMALIZATION_FORMS = ("NFC", "NFD", "NFKC", "NFKD")

_GRAPHEME_RE = regex.compile(r"\X")
_COMBINING_MARKS = (0x0300, 0x036F)
_RTL_RANGES = (
    (0x0590, 0x05FF),  # Hebrew
    (0x0600, 0x06FF),  # Arabic
    (0x0750, 0x077F),  # Arabic Supplement
    (0x08A0, 0x08FF),  # Arabic Extended-A
    (0xFB50, 0xFDFF),  # Arabic Presentation Forms-A
    (0xFE70, 0xFEFF),  # Arabic Presentation Forms-B
)
_EMOJI_RANGES = (
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x2000, 0x3300),
    (0x1F000, 0x1FBFF),
)


def _in_ranges(ch: str, ranges) -> bool:
    code = ord(ch)
    return any(lo <= code <= hi for lo, hi in ranges)


class Segmenter:
    """Strategy splitting text into grapheme-like units."""

    name = ""

    def split(self, text: str) -> List[str]:
        raise NotImplementedError


class ClusterSegmenter(Segmenter):
    """Extended grapheme cluster segmentation (UAX #29)."""

    name = "cluster"

    def split(self, text: str) -> List[str]:
        return _GRAPHEME_RE.findall(text)


class CodePointSegmenter(Segmenter):
    """One unit per code point. Joined emoji and combining marks are split apart."""

    name = "codepoint"

    def split(self, text: str) -> List[str]:
        return list(text)


_SEGMENTERS = {
    ClusterSegmenter.name: ClusterSegmenter(),
    CodePointSegmenter.name: CodePointSegmenter(),
}


def get_segmenter(name: Optional[str] = None) -> Segmenter:
    """Resolve a segmenter by name; None uses the configured default."""
    key = (name or config.SEGMENTER).lower()
    try:
        segmenter = _SEGMENTERS[key]
    except KeyError:
        raise ValueError(
            f"Unknown segmenter: {name!r} (expected one of {sorted(_SEGMENTERS)})"
        ) from None
    logger.debug("Using %s segmenter", segmenter.name)
    return segmenter


def graphemes(text: str, segmenter: Optional[Segmenter] = None) -> List[str]:
    """Split text into grapheme clusters (or code points with CodePointSegmenter)."""
    if not isinstance(text, str) or not text:
        return []
    return (segmenter or get_segmenter()).split(text)


def code_points(text: str) -> List[int]:
    """Unicode scalar values of text; astral characters yield a single entry."""
    if not isinstance(text, str):
        return []
    return [ord(ch) for ch in text]


def _char_width(code: int) -> int:
    if code >= 0x1100 and (
        code <= 0x115F
        or code == 0x2329
        or code == 0x232A
        or (0x2E80 <= code <= 0xA4CF and code != 0x303F)
        or 0xAC00 <= code <= 0xD7A3
        or 0xF900 <= code <= 0xFAFF
        or 0xFE10 <= code <= 0xFE19
        or 0xFE30 <= code <= 0xFE6F
        or 0xFF00 <= code <= 0xFF60
        or 0xFFE0 <= code <= 0xFFE6
        or 0x20000 <= code <= 0x2FFFD
        or 0x30000 <= code <= 0x3FFFD
    ):
        return 2
    if 0x20 <= code <= 0x7E:
        return 1
    if code >= 0xA1:
        return 1
    # C0 controls, DEL and C1 controls up to NBSP
    return 0


def string_width(text: str, segmenter: Optional[Segmenter] = None) -> int:
    """
    Terminal display width of text.
    Each grapheme is measured by its first code point: wide CJK/fullwidth = 2,
    printable = 1, control = 0.
    """
    return sum(_char_width(ord(g[0])) for g in graphemes(text, segmenter))


def remove_accents(text: str) -> str:
    """Decompose (NFD) and drop combining diacritical marks U+0300..U+036F."""
    if not isinstance(text, str) or not text:
        return ""
    lo, hi = _COMBINING_MARKS
    return "".join(ch for ch in unicodedata.normalize("NFD", text) if not lo <= ord(ch) <= hi)


def is_rtl(text: str) -> bool:
    """True if text contains any Hebrew or Arabic script character."""
    if not isinstance(text, str):
        return False
    return any(_in_ranges(ch, _RTL_RANGES) for ch in text)


def reverse_unicode(text: str, segmenter: Optional[Segmenter] = None) -> str:
    """Reverse text grapheme by grapheme, keeping clusters intact."""
    return "".join(reversed(graphemes(text, segmenter)))


def normalize_unicode(text: str, form: str = "NFC") -> str:
    if form not in NORMALIZATION_FORMS:
        raise ValueError(f"Unknown normalization form: {form!r}")
    if not isinstance(text, str):
        return ""
    return unicodedata.normalize(form, text)


def is_emoji(char: str) -> bool:
    if not isinstance(char, str):
        return False
    return any(_in_ranges(ch, _EMOJI_RANGES) for ch in char)


def strip_emojis(text: str) -> str:
    if not isinstance(text, str):
        return ""
    return "".join(ch for ch in text if not _in_ranges(ch, _EMOJI_RANGES))
