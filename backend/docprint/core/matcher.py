"""Fingerprint matching.

Hash equality only nominates candidates; a match is reported only when the
literal n-gram texts are equal as well, so hash collisions never surface.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Mapping

from docprint.metrics import HASH_COLLISIONS_TOTAL, MATCHES_TOTAL
from docprint.schemas.fingerprint import Fingerprint, FingerprintSet, IndexEntry, Match

logger = logging.getLogger(__name__)

FingerprintIndex = dict[int, list[IndexEntry]]


def _group_by_hash(fingerprints: Iterable[Fingerprint]) -> dict[int, list[Fingerprint]]:
    buckets: dict[int, list[Fingerprint]] = defaultdict(list)
    for fp in fingerprints:
        buckets[fp.hash].append(fp)
    return buckets


def find_matching_fingerprints(a: FingerprintSet, b: FingerprintSet) -> list[Match]:
    """Verified matches between two documents, one per (a, b) fingerprint pair."""
    if not a.fingerprints or not b.fingerprints:
        return []

    by_hash = _group_by_hash(a.fingerprints)
    matches: list[Match] = []
    collisions = 0
    for fp_b in b.fingerprints:
        for fp_a in by_hash.get(fp_b.hash, ()):
            if fp_a.text != fp_b.text:
                collisions += 1
                continue
            matches.append(Match(doc1_fingerprint=fp_a, doc2_fingerprint=fp_b))

    if collisions:
        logger.debug(
            "Rejected %d hash collisions between %s and %s", collisions, a.document_id, b.document_id
        )
        HASH_COLLISIONS_TOTAL.labels(mode="pairwise").inc(collisions)
    MATCHES_TOTAL.labels(mode="pairwise").inc(len(matches))
    return matches


def find_matches_in_collection(
    document: FingerprintSet,
    collection: Mapping[str, FingerprintSet],
) -> dict[str, list[Match]]:
    """Pairwise matching against every other document of `collection`."""
    results: dict[str, list[Match]] = {}
    for doc_id, other in collection.items():
        if doc_id == document.document_id:
            continue
        matches = find_matching_fingerprints(document, other)
        if matches:
            results[doc_id] = matches
    return results


def build_fingerprint_index(
    documents: Mapping[str, FingerprintSet] | Iterable[FingerprintSet],
) -> FingerprintIndex:
    """Corpus-wide inverted index `hash -> [(document_id, fingerprint)]`."""
    if isinstance(documents, Mapping):
        items = documents.items()
    else:
        items = ((fp_set.document_id, fp_set) for fp_set in documents)

    index: FingerprintIndex = defaultdict(list)
    for doc_id, fp_set in items:
        for fp in fp_set.fingerprints:
            index[fp.hash].append(IndexEntry(document_id=doc_id, fingerprint=fp))
    return dict(index)


def search_with_index(document: FingerprintSet, index: FingerprintIndex) -> dict[str, list[Match]]:
    """Resolve matches for `document` by hash bucket instead of pairwise joins."""
    results: dict[str, list[Match]] = defaultdict(list)
    collisions = 0
    for fp in document.fingerprints:
        for entry in index.get(fp.hash, ()):
            if entry.document_id == document.document_id:
                continue
            if entry.fingerprint.text != fp.text:
                collisions += 1
                continue
            results[entry.document_id].append(Match(doc1_fingerprint=fp, doc2_fingerprint=entry.fingerprint))

    if collisions:
        HASH_COLLISIONS_TOTAL.labels(mode="index").inc(collisions)
    MATCHES_TOTAL.labels(mode="index").inc(sum(len(m) for m in results.values()))
    return dict(results)
