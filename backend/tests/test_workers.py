from __future__ import annotations

from docprint.schemas.fingerprint import FingerprintSet
from docprint.workers.fingerprint import run_collection_search, run_fingerprint, run_match

SOURCE = "Any contiguous shared word sequence long enough is caught by both fingerprint sets every time"
COPY = "Students noted that any contiguous shared word sequence long enough is caught by both fingerprint sets"
OTHER = "Bread dough rises faster in a warm kitchen when the yeast is fresh and the flour is strong"


def test_run_fingerprint_returns_persisted_shape() -> None:
    payload = run_fingerprint("worker-doc", SOURCE, 5, 4)
    fp_set = FingerprintSet.from_json(payload)
    assert fp_set.document_id == "worker-doc"
    assert fp_set.word_count == 15
    assert payload["fingerprints"]


def test_run_match_verifies_matches() -> None:
    a = run_fingerprint("src", SOURCE)
    b = run_fingerprint("copy", COPY)
    matches = run_match(a, b)
    assert matches
    for m in matches:
        assert m["doc1Fingerprint"]["ngram"] == m["doc2Fingerprint"]["ngram"]


def test_run_collection_search_uses_index() -> None:
    src = run_fingerprint("src", SOURCE)
    collection = [src, run_fingerprint("copy", COPY), run_fingerprint("other", OTHER)]
    results = run_collection_search(src, collection)
    assert list(results) == ["copy"]
    assert results["copy"]
