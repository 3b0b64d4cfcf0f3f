"""Word n-gram construction."""
from __future__ import annotations

from docprint.core.hashing import compute_ngram_hash
from docprint.core.normalize import split_into_words
from docprint.errors import require_positive_int
from docprint.schemas.fingerprint import NGRAM_SEPARATOR, HashedNGram, NGram

DEFAULT_NGRAM_SIZE = 5


def _windows(words: list[str], n: int) -> list[tuple[int, tuple[str, ...]]]:
    # Short documents shrink to a single window covering every word.
    effective_n = min(n, len(words))
    if effective_n == 0:
        return []
    return [(i, tuple(words[i : i + effective_n])) for i in range(len(words) - effective_n + 1)]


def generate_ngrams(text: str, n: int = DEFAULT_NGRAM_SIZE) -> list[NGram]:
    require_positive_int(n, "n")
    return [
        NGram(words=window, text=NGRAM_SEPARATOR.join(window), word_offset=offset)
        for offset, window in _windows(split_into_words(text), n)
    ]


def generate_ngram_hashes(text: str, n: int = DEFAULT_NGRAM_SIZE) -> list[HashedNGram]:
    """N-grams of `text` with their hash; `position` is the starting word index."""
    require_positive_int(n, "n")
    return [
        HashedNGram(
            words=ngram.words,
            text=ngram.text,
            word_offset=ngram.word_offset,
            hash=compute_ngram_hash(ngram.words),
            position=ngram.word_offset,
        )
        for ngram in generate_ngrams(text, n)
    ]
