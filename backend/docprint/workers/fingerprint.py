"""Fingerprinting and matching tasks.

Payloads travel as the JSON form of `FingerprintSet` / `Match`, so results can
be stored or forwarded without touching the engine's value types.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from docprint.cache import fingerprint_cache
from docprint.celery_app import celery
from docprint.core.matcher import build_fingerprint_index, find_matching_fingerprints, search_with_index
from docprint.schemas.fingerprint import FingerprintSet

logger = logging.getLogger(__name__)


@celery.task(name="docprint.workers.fingerprint.run_fingerprint")
def run_fingerprint(
    document_id: str,
    text: str,
    ngram_size: int | None = None,
    window_size: int | None = None,
) -> Dict[str, Any]:
    """Fingerprint one document (cached per content hash)."""
    fp_set = fingerprint_cache.get_or_compute(text, document_id, ngram_size, window_size)
    logger.info(
        f"Fingerprinted {document_id}",
        extra={"document_id": document_id, "fingerprints": len(fp_set.fingerprints)},
    )
    return fp_set.to_json_dict()


@celery.task(name="docprint.workers.fingerprint.run_match")
def run_match(set_a: Dict[str, Any], set_b: Dict[str, Any]) -> List[Dict[str, Any]]:
    a = FingerprintSet.from_json(set_a)
    b = FingerprintSet.from_json(set_b)
    return [m.to_json_dict() for m in find_matching_fingerprints(a, b)]


@celery.task(name="docprint.workers.fingerprint.run_collection_search")
def run_collection_search(
    document: Dict[str, Any],
    collection: List[Dict[str, Any]],
) -> Dict[str, List[Dict[str, Any]]]:
    """Match one document against a corpus through a single inverted index."""
    query = FingerprintSet.from_json(document)
    index = build_fingerprint_index(FingerprintSet.from_json(raw) for raw in collection)
    results = search_with_index(query, index)
    logger.info(
        f"Searched {query.document_id} against {len(collection)} documents",
        extra={"document_id": query.document_id, "matched_documents": len(results)},
    )
    return {doc_id: [m.to_json_dict() for m in matches] for doc_id, matches in results.items()}
