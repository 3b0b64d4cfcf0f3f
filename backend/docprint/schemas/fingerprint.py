"""Value types of the fingerprinting engine.

All models are frozen: a fingerprint set is rebuilt wholesale when its source
text changes, never edited in place. JSON keys follow the persisted shape
(`documentId`, `ngramSize`, `wordCount`, `generatedAt`, `wordOffset`, `ngram`).
"""
from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

NGRAM_SEPARATOR = " "


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class NormalizedWord(_Frozen):
    """A normalized token with its span in the original (non-normalized) text."""

    word: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def validate_span(self) -> "NormalizedWord":
        if self.end < self.start:
            raise ValueError(f"Span end {self.end} precedes start {self.start}")
        return self


class NGram(_Frozen):
    words: tuple[str, ...]
    text: str = Field(alias="ngram")
    word_offset: int = Field(alias="wordOffset", ge=0)

    @model_validator(mode="before")
    @classmethod
    def derive_words(cls, data: Any) -> Any:
        # The persisted shape carries only the joined text.
        if isinstance(data, dict) and data.get("words") is None:
            text = data.get("ngram", data.get("text"))
            if isinstance(text, str):
                data = {**data, "words": tuple(text.split(NGRAM_SEPARATOR))}
        return data

    @field_validator("words")
    @classmethod
    def validate_words(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("An n-gram needs at least one word")
        for word in v:
            if not word or NGRAM_SEPARATOR in word:
                raise ValueError(f"Invalid n-gram word {word!r}")
        return v

    @model_validator(mode="after")
    def validate_text(self) -> "NGram":
        if self.text != NGRAM_SEPARATOR.join(self.words):
            raise ValueError("N-gram text must be the space-joined words")
        return self

    @property
    def size(self) -> int:
        return len(self.words)


class HashedNGram(NGram):
    hash: int = Field(ge=0)
    position: int = Field(ge=0)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"words"})


# A fingerprint is a hashed n-gram picked by the winnower; the shape is identical.
Fingerprint = HashedNGram


class FingerprintSet(_Frozen):
    """One document's selected fingerprints plus the parameters that produced them."""

    document_id: str = Field(alias="documentId", min_length=1)
    fingerprints: tuple[Fingerprint, ...] = ()
    ngram_size: int = Field(alias="ngramSize", gt=0)
    window_size: int = Field(default=4, alias="windowSize", gt=0)
    word_count: int = Field(alias="wordCount", ge=0)
    generated_at: int = Field(alias="generatedAt", ge=0)

    @field_validator("fingerprints")
    @classmethod
    def validate_order(cls, v: tuple[Fingerprint, ...]) -> tuple[Fingerprint, ...]:
        for prev, cur in zip(v, v[1:]):
            if cur.position <= prev.position:
                raise ValueError(
                    f"Fingerprints must be in ascending position order ({prev.position} then {cur.position})"
                )
        return v

    def to_json_dict(self) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True, exclude={"fingerprints"})
        payload["fingerprints"] = [fp.to_json_dict() for fp in self.fingerprints]
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_json_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str | bytes | dict[str, Any]) -> "FingerprintSet":
        if isinstance(raw, (str, bytes)):
            raw = json.loads(raw)
        return cls.model_validate(raw)

    def hashes(self) -> list[int]:
        return [fp.hash for fp in self.fingerprints]


class Match(_Frozen):
    """A verified shared n-gram: equal hash and equal literal text."""

    doc1_fingerprint: Fingerprint = Field(alias="doc1Fingerprint")
    doc2_fingerprint: Fingerprint = Field(alias="doc2Fingerprint")

    @model_validator(mode="after")
    def validate_verified(self) -> "Match":
        if self.doc1_fingerprint.hash != self.doc2_fingerprint.hash:
            raise ValueError("Matched fingerprints must share a hash")
        if self.doc1_fingerprint.text != self.doc2_fingerprint.text:
            raise ValueError("Matched fingerprints must share the n-gram text")
        return self

    def to_json_dict(self) -> dict[str, Any]:
        return {
            "doc1Fingerprint": self.doc1_fingerprint.to_json_dict(),
            "doc2Fingerprint": self.doc2_fingerprint.to_json_dict(),
        }


class IndexEntry(_Frozen):
    document_id: str = Field(alias="documentId")
    fingerprint: Fingerprint
