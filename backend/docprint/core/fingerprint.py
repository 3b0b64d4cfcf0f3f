"""Fingerprint set construction: normalize -> n-grams -> hashes -> winnow."""
from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Mapping

from docprint.core.ngrams import DEFAULT_NGRAM_SIZE, generate_ngram_hashes
from docprint.core.normalize import split_into_words
from docprint.core.winnow import DEFAULT_WINDOW_SIZE, winnow
from docprint.errors import FingerprintValidationError, require_positive_int, require_text
from docprint.metrics import FINGERPRINT_DENSITY, FINGERPRINT_SETS_TOTAL, FINGERPRINT_WORDS
from docprint.schemas.fingerprint import FingerprintSet

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_fingerprints(
    text: str,
    document_id: str,
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> FingerprintSet:
    """Build the winnowed fingerprint set of one document."""
    require_text(text)
    require_text(document_id, "document_id")
    if not document_id:
        raise FingerprintValidationError("document_id", "must not be empty")
    require_positive_int(ngram_size, "ngram_size")
    require_positive_int(window_size, "window_size")

    hashes = generate_ngram_hashes(text, ngram_size)
    fingerprints = winnow(hashes, window_size)
    word_count = len(split_into_words(text))

    FINGERPRINT_SETS_TOTAL.inc()
    FINGERPRINT_WORDS.observe(word_count)
    if hashes:
        FINGERPRINT_DENSITY.observe(len(fingerprints) / len(hashes))
    logger.debug(
        "Fingerprinted %s: %d words, %d n-grams, %d fingerprints",
        document_id,
        word_count,
        len(hashes),
        len(fingerprints),
    )

    return FingerprintSet(
        document_id=document_id,
        fingerprints=tuple(fingerprints),
        ngram_size=ngram_size,
        window_size=window_size,
        word_count=word_count,
        generated_at=_now_ms(),
    )


def _document_pair(doc: Any) -> tuple[str, str]:
    if isinstance(doc, Mapping):
        try:
            return doc["id"], doc["text"]
        except KeyError as exc:
            raise FingerprintValidationError("documents", f"document mapping is missing {exc}") from exc
    try:
        document_id, text = doc
    except (TypeError, ValueError) as exc:
        raise FingerprintValidationError("documents", "expected (id, text) pairs or {'id', 'text'} mappings") from exc
    return document_id, text


def generate_fingerprints_for_documents(
    documents: Iterable[Any],
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> dict[str, FingerprintSet]:
    """Fingerprint many documents; a repeated id keeps the last text."""
    result: dict[str, FingerprintSet] = {}
    for doc in documents:
        document_id, text = _document_pair(doc)
        result[document_id] = generate_fingerprints(text, document_id, ngram_size, window_size)
    return result
