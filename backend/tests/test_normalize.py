from __future__ import annotations

import pytest

from docprint.core.normalize import get_word_positions, normalize_text, split_into_words
from docprint.errors import FingerprintValidationError


def test_normalize_canonicalizes_case_punctuation_and_spacing() -> None:
    assert normalize_text("Hello, World! This is a TEST.") == "hello world this is a test"


@pytest.mark.parametrize(
    "variant",
    ["Hello, world!", "Hello world", "Hello... world???", "HeLLo    WoRLd", "Hello\t\tworld", "\n Hello\n\nworld \n"],
)
def test_normalize_variants_collapse_to_same_form(variant: str) -> None:
    assert normalize_text(variant) == "hello world"


def test_normalize_keeps_contractions() -> None:
    assert normalize_text("don't can't won't it's") == "don't can't won't it's"


def test_normalize_drops_standalone_apostrophes() -> None:
    assert normalize_text("hello ' world") == "hello world"
    assert normalize_text("'quoted' words'") == "quoted words"
    assert normalize_text("the 90's") == "the 90 s"


def test_normalize_empty_and_punctuation_only() -> None:
    assert normalize_text("") == ""
    assert normalize_text("!!!") == ""
    assert normalize_text(" ' , ; ") == ""


def test_normalize_splits_on_symbols() -> None:
    assert normalize_text("hello@world #test $money snake_case") == "hello world test money snake case"


def test_normalize_passes_non_ascii_letters_through() -> None:
    assert normalize_text("こんにちは世界 Café NAÏVE") == "こんにちは世界 café naïve"


@pytest.mark.parametrize(
    "text",
    [
        "Hello, World! This is a TEST.",
        "don't  'stop' believin'",
        "İstanbul'un O''Brien rock'n'roll",
        "a_b--c...d'e' 'f",
        "Ünïcödé — “quotes” and… ellipses",
        "",
    ],
)
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize_text(text)
    assert normalize_text(once) == once


def test_normalize_rejects_non_string() -> None:
    with pytest.raises(FingerprintValidationError):
        normalize_text(None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        normalize_text(b"bytes")  # type: ignore[arg-type]


def test_split_into_words() -> None:
    assert split_into_words("Hello world this is a test") == ["hello", "world", "this", "is", "a", "test"]
    assert split_into_words("hello    world") == ["hello", "world"]
    assert split_into_words("") == []


def test_word_positions_follow_original_text() -> None:
    positions = get_word_positions("Hello world test")
    assert [(p.word, p.start, p.end) for p in positions] == [
        ("hello", 0, 5),
        ("world", 6, 11),
        ("test", 12, 16),
    ]


def test_word_positions_span_contractions_in_original() -> None:
    text = "  Don't   worry!"
    positions = get_word_positions(text)
    assert [p.word for p in positions] == ["dont", "worry"]
    assert text[positions[0].start : positions[0].end] == "Don't"
    assert text[positions[1].start : positions[1].end] == "worry"


def test_word_positions_align_with_split_words() -> None:
    text = "It's a dog-eat-dog world, isn't it? 'Maybe'."
    positions = get_word_positions(text)
    words = split_into_words(text)
    assert len(positions) == len(words)
    assert [p.word for p in positions] == [w.replace("'", "") for w in words]


def test_word_positions_empty() -> None:
    assert get_word_positions("") == []
    assert get_word_positions("?!") == []


def test_normalize_case_variants_agree_on_greek_final_sigma() -> None:
    assert normalize_text("ΟΔΟΣ") == normalize_text("οδος") == "οδος"
    assert normalize_text("ΣΤΗΝ ΟΔΟΣ, ΤΟΥ ΚΟΣΜΟΣ") == "στην οδος του κοσμος"


def test_word_positions_agree_with_split_words_on_greek_text() -> None:
    text = "ΣΤΗΝ ΟΔΟΣ ΤΟΥ ΚΟΣΜΟΣ"
    assert [p.word for p in get_word_positions(text)] == split_into_words(text)
