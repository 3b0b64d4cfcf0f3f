from __future__ import annotations

import pytest

from docprint.core.hashing import compute_ngram_hash
from docprint.core.ngrams import generate_ngram_hashes, generate_ngrams
from docprint.errors import FingerprintValidationError


def test_generate_ngrams_slides_over_words() -> None:
    ngrams = generate_ngrams("The quick brown fox jumps", 3)
    assert [ng.words for ng in ngrams] == [
        ("the", "quick", "brown"),
        ("quick", "brown", "fox"),
        ("brown", "fox", "jumps"),
    ]


def test_generate_ngrams_text_and_offsets() -> None:
    ngrams = generate_ngrams("hello world test", 2)
    assert [ng.text for ng in ngrams] == ["hello world", "world test"]
    assert [ng.word_offset for ng in generate_ngrams("a b c d e", 2)] == [0, 1, 2, 3]


@pytest.mark.parametrize("word_count,n", [(5, 5), (10, 5), (10, 3), (7, 1), (30, 5)])
def test_generate_ngrams_count(word_count: int, n: int) -> None:
    text = " ".join(f"w{i}" for i in range(word_count))
    assert len(generate_ngrams(text, n)) == word_count - n + 1


def test_generate_ngrams_shrinks_for_short_text() -> None:
    ngrams = generate_ngrams("hello world", 5)
    assert len(ngrams) == 1
    assert ngrams[0].words == ("hello", "world")
    assert ngrams[0].word_offset == 0


def test_generate_ngrams_unigrams() -> None:
    assert [ng.words for ng in generate_ngrams("hello world", 1)] == [("hello",), ("world",)]


def test_generate_ngrams_default_size_is_five() -> None:
    ngrams = generate_ngrams("one two three four five six")
    assert len(ngrams) == 2
    assert ngrams[0].size == 5


def test_generate_ngrams_empty_text() -> None:
    assert generate_ngrams("") == []
    assert generate_ngrams("... !!!") == []


@pytest.mark.parametrize("bad_n", [0, -1, 2.5, True, "5"])
def test_generate_ngrams_rejects_invalid_size(bad_n) -> None:
    with pytest.raises(FingerprintValidationError):
        generate_ngrams("some text here", bad_n)


def test_generate_ngram_hashes_attach_hash_and_position() -> None:
    hashes = generate_ngram_hashes("The quick brown fox jumps", 3)
    assert len(hashes) == 3
    for h in hashes:
        assert h.hash == compute_ngram_hash(h.words)
        assert h.position == h.word_offset


def test_generate_ngram_hashes_consistent() -> None:
    assert generate_ngram_hashes("hello world test", 2) == generate_ngram_hashes("hello world test", 2)


def test_generate_ngram_hashes_ignore_surface_variation() -> None:
    a = generate_ngram_hashes("Hello, World! How are you today?", 3)
    b = generate_ngram_hashes("hello world   how ARE you... today", 3)
    assert [h.hash for h in a] == [h.hash for h in b]
