"""Polynomial string hashing (base 31, unsigned 32-bit wrap-around)."""
from __future__ import annotations

from typing import Sequence

from docprint.errors import FingerprintValidationError, require_positive_int, require_text
from docprint.schemas.fingerprint import NGRAM_SEPARATOR

HASH_BASE = 31
HASH_BITS = 32
HASH_MASK = (1 << HASH_BITS) - 1


def compute_hash(s: str) -> int:
    """`h = h * 31 + ord(ch)` over the code points of `s`, modulo 2**32."""
    require_text(s, "s")
    h = 0
    for ch in s:
        h = (h * HASH_BASE + ord(ch)) & HASH_MASK
    return h


def compute_ngram_hash(words: Sequence[str]) -> int:
    """Order-sensitive hash of an n-gram's words.

    Normalized words never contain whitespace, so joining on a space keeps
    `["a", "b"]` and `["ab"]` apart.
    """
    if isinstance(words, str):
        raise FingerprintValidationError("words", "expected a sequence of words, got a single str")
    words = list(words)
    for word in words:
        require_text(word, "words")
        if not word or NGRAM_SEPARATOR in word:
            raise FingerprintValidationError("words", f"invalid n-gram word {word!r}")
    return compute_hash(NGRAM_SEPARATOR.join(words))


def window_power(k: int) -> int:
    """Weight of the oldest character in a `k`-character rolling window."""
    require_positive_int(k, "k")
    return pow(HASH_BASE, k - 1, 1 << HASH_BITS)


def rolling_hash_update(old_hash: int, old_char: int, new_char: int, highest_power: int) -> int:
    """Slide a Rabin-Karp window one character: drop `old_char`, append `new_char`."""
    h = (old_hash - old_char * highest_power) & HASH_MASK
    return (h * HASH_BASE + new_char) & HASH_MASK
