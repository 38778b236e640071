"""
Normalization helpers for candidate handles and dictionary terms.

WHAT:
  - lowercase, fold homoglyphs to Latin, squeeze repeated letters, drop
    punctuation, undo leetspeak.
  - fold_text() stops before the leetspeak table so rules that care about
    literal digits can still see them.

WHY:
  - "B4DW0RD", "baaadword" and "bаdword" (Cyrillic a) must all compare equal
    to the term "badword". The step order matters; keep it.
"""

import re
from unidecode import unidecode

REPEAT_RE = re.compile(r"([a-z])\1+")
NON_WORD_RE = re.compile(r"[^\w\s]|_")

LEET_TABLE = str.maketrans({
    "0": "o",
    "1": "i", "!": "i", "|": "i",
    "3": "e",
    "4": "a", "@": "a", "^": "a",
    "5": "s", "$": "s",
    "7": "t", "+": "t",
    "8": "b",
    "9": "g",
    "(": "c", "[": "c",
    ")": "d", "]": "d",
    # ¥ and the accented letters below are already folded by unidecode;
    # they only take effect if fold_text stops transliterating them
    "¥": "y",
    "2": "z",
    "ü": "u", "ù": "u", "ú": "u", "û": "u", "ũ": "u", "ū": "u",
    "ç": "c",
    "ñ": "n",
})


def fold_text(text: str) -> str:
    """Steps 1-4: lowercase, homoglyph fold, squeeze letter runs, strip punctuation."""
    t = (text or "").lower()
    t = unidecode(t).lower()
    t = REPEAT_RE.sub(r"\1", t)
    return NON_WORD_RE.sub("", t)


def normalize_text(text: str) -> str:
    t = fold_text(text).translate(LEET_TABLE)
    # "g00d" only becomes a run after substitution
    return REPEAT_RE.sub(r"\1", t)


class Candidate:
    """One input handle with its folded and normalized forms."""

    __slots__ = ("raw", "folded", "normalized")

    def __init__(self, raw: str):
        self.raw = raw
        self.folded = fold_text(raw)
        self.normalized = normalize_text(raw)

    def __repr__(self):
        return f"Candidate({self.raw!r} -> {self.normalized!r})"
