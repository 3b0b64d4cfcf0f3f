"""Fingerprint API: build fingerprint sets and resolve matches.

Scoring and storage live with the callers; these endpoints only expose the
engine over HTTP.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from docprint.cache import fingerprint_cache
from docprint.config import settings
from docprint.core.matcher import build_fingerprint_index, find_matching_fingerprints, search_with_index
from docprint.errors import FingerprintValidationError
from docprint.schemas.fingerprint import FingerprintSet

router = APIRouter(prefix="/api/fingerprints", tags=["fingerprints"])
logger = logging.getLogger(__name__)


class FingerprintRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="documentId", min_length=1)
    text: str
    ngram_size: int | None = Field(default=None, alias="ngramSize", gt=0)
    window_size: int | None = Field(default=None, alias="windowSize", gt=0)


class MatchRequest(BaseModel):
    a: FingerprintSet
    b: FingerprintSet


class SearchRequest(BaseModel):
    document: FingerprintSet
    collection: List[FingerprintSet] = Field(default_factory=list)


class MatchResponse(BaseModel):
    count: int
    matches: List[Dict[str, Any]]


@router.post("")
async def create_fingerprints(payload: FingerprintRequest) -> Dict[str, Any]:
    """Fingerprint one document with the configured (or requested) parameters."""
    if len(payload.text) > settings.MAX_TEXT_CHARS:
        raise HTTPException(status_code=413, detail=f"text exceeds {settings.MAX_TEXT_CHARS} characters")
    try:
        fp_set = fingerprint_cache.get_or_compute(
            payload.text, payload.document_id, payload.ngram_size, payload.window_size
        )
    except (FingerprintValidationError, ValidationError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return fp_set.to_json_dict()


@router.post("/match")
async def match_fingerprints(payload: MatchRequest) -> MatchResponse:
    matches = find_matching_fingerprints(payload.a, payload.b)
    return MatchResponse(count=len(matches), matches=[m.to_json_dict() for m in matches])


@router.post("/search")
async def search_fingerprints(payload: SearchRequest) -> Dict[str, MatchResponse]:
    """Match a document against a collection through a single inverted index."""
    index = build_fingerprint_index(payload.collection)
    results = search_with_index(payload.document, index)
    logger.info(
        "Index search for %s: %d of %d documents matched",
        payload.document.document_id,
        len(results),
        len(payload.collection),
    )
    return {
        doc_id: MatchResponse(count=len(matches), matches=[m.to_json_dict() for m in matches])
        for doc_id, matches in results.items()
    }
