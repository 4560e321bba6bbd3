"""
Phonetic encoding for sounds-alike matching.

- Soundex: first letter + 3 digits from consonant classes.
- Metaphone: up to 4 consonant-sound symbols ('0' stands for TH, 'X' for SH/CH).
Both are case-insensitive; similar-sounding words get the same code.
"""

from . import config

# Soundex digit classes; letters not listed (vowels, H, W, Y) emit nothing
_SOUNDEX_DIGITS = {
    **dict.fromkeys("BFPV", "1"),
    **dict.fromkeys("CGJKQSXZ", "2"),
    **dict.fromkeys("DT", "3"),
    "L": "4",
    **dict.fromkeys("MN", "5"),
    "R": "6",
}

_VOWELS = frozenset("AEIOU")
_FRONT_VOWELS = frozenset("EIY")
_SILENT_PREFIXES = ("KN", "GN", "PN", "AE", "WR")


def soundex(word: str, length: int = config.SOUNDEX_LENGTH) -> str:
    """
    Soundex encoding: first character kept as is, then digits of the following
    letters. A digit equal to the last emitted character is dropped.
    Padded with '0' to length; empty input gives '0000'.
    """
    word = word.upper()
    code = word[:1]
    for c in word[1:]:
        if len(code) >= length:
            break
        d = _SOUNDEX_DIGITS.get(c)
        if d and d != code[-1]:
            code += d
    return code.ljust(length, "0")[:length]


def _is_vowel(c: str) -> bool:
    return c in _VOWELS


def metaphone(word: str, max_length: int = config.METAPHONE_MAX_LENGTH) -> str:
    """
    Metaphone encoding of a single word, capped at max_length symbols.
    Non-letters are ignored; returns '' when no letters remain.
    """
    word = "".join(c for c in word.upper() if "A" <= c <= "Z")
    if not word:
        return ""

    size = len(word)

    def at(k: int) -> str:
        return word[k] if 0 <= k < size else ""

    code = ""
    i = 0
    if word.startswith(_SILENT_PREFIXES):
        i = 1
    if word[0] == "X":
        code = "S"
        i = 1

    while i < size and len(code) < max_length:
        c = word[i]
        prev = at(i - 1)
        nxt = at(i + 1)
        after = at(i + 2)

        if c == "B":
            # silent in a final MB
            if not (i == size - 1 and prev == "M"):
                code += "B"
        elif c == "C":
            if nxt == "H" or (nxt == "I" and after == "A"):
                code += "X"
                i += 1
            elif nxt in _FRONT_VOWELS:
                code += "S"
            else:
                code += "K"
        elif c == "D":
            if nxt == "G" and after in _FRONT_VOWELS:
                code += "J"
                i += 2
            else:
                code += "T"
        elif c == "G":
            if nxt == "H" and i > 0:
                pass
            elif nxt == "N" and i == size - 2:
                pass
            elif nxt in _FRONT_VOWELS:
                code += "J"
            else:
                code += "K"
        elif c == "H":
            if i == 0 or (_is_vowel(prev) and _is_vowel(nxt)):
                code += "H"
        elif c == "K":
            if prev != "C":
                code += "K"
        elif c == "P":
            if nxt == "H":
                code += "F"
                i += 1
            else:
                code += "P"
        elif c == "Q":
            code += "K"
        elif c == "S":
            if nxt == "H":
                code += "X"
                i += 1
            elif nxt == "I" and after in ("O", "A"):
                code += "X"
            else:
                code += "S"
        elif c == "T":
            if nxt == "H":
                code += "0"
                i += 1
            elif nxt == "I" and after in ("O", "A"):
                code += "X"
            else:
                code += "T"
        elif c == "V":
            code += "F"
        elif c in ("W", "Y"):
            if _is_vowel(nxt):
                code += c
        elif c == "X":
            code += "KS"
        elif c == "Z":
            code += "S"
        elif c in "FJLMNR":
            code += c
        # vowels emit nothing
        i += 1

    return code[:max_length]
