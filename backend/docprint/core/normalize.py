"""Text normalization and word position indexing.

Word characters are Unicode letters, marks and digits. Everything else
(ASCII/Unicode punctuation, symbols, underscores) separates words, except an
apostrophe with a letter on both sides, which stays inside a contraction.
"""
from __future__ import annotations

import re
import unicodedata

from docprint.errors import require_text
from docprint.schemas.fingerprint import NormalizedWord

APOSTROPHE = "'"
_WHITESPACE_RE = re.compile(r"\s+")


def _is_word_char(ch: str) -> bool:
    return unicodedata.category(ch)[0] in "LMN"


def _is_letter(ch: str) -> bool:
    # Marks count so that a decomposed accent before an apostrophe stays a letter.
    return unicodedata.category(ch)[0] in "LM"


def _keep_mask(text: str) -> list[bool]:
    """Per-character flag: True when the character belongs to a word."""
    mask = [_is_word_char(ch) for ch in text]
    last = len(text) - 1
    for i, ch in enumerate(text):
        if ch == APOSTROPHE and 0 < i < last and _is_letter(text[i - 1]) and _is_letter(text[i + 1]):
            mask[i] = True
    return mask


def normalize_text(text: str) -> str:
    """Lowercase, strip punctuation (keeping contractions), collapse whitespace."""
    require_text(text)
    if not text:
        return ""
    mask = _keep_mask(text)
    # Lowercase the joined string, not per character: Greek final sigma depends on context.
    kept = "".join(ch if keep else " " for ch, keep in zip(text, mask)).lower()
    return _WHITESPACE_RE.sub(" ", kept).strip()


def split_into_words(text: str) -> list[str]:
    """Normalize `text` and split it into words."""
    return [w for w in normalize_text(text).split(" ") if w]


def get_word_positions(text: str) -> list[NormalizedWord]:
    """Words of `text` with their `[start, end)` character span in the original string.

    `word` is the lowercase token without apostrophes (`"Don't"` -> `"dont"`),
    while the span covers the raw substring including the apostrophe.
    """
    require_text(text)
    positions: list[NormalizedWord] = []
    start: int | None = None
    for i, keep in enumerate(_keep_mask(text)):
        if keep and start is None:
            start = i
        elif not keep and start is not None:
            positions.append(_word_at(text, start, i))
            start = None
    if start is not None:
        positions.append(_word_at(text, start, len(text)))
    return positions


def _word_at(text: str, start: int, end: int) -> NormalizedWord:
    word = text[start:end].lower().replace(APOSTROPHE, "")
    return NormalizedWord(word=word, start=start, end=end)
