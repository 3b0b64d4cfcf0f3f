from docprint.schemas.fingerprint import (
    Fingerprint,
    FingerprintSet,
    HashedNGram,
    IndexEntry,
    Match,
    NGram,
    NormalizedWord,
)

__all__ = [
    "Fingerprint",
    "FingerprintSet",
    "HashedNGram",
    "IndexEntry",
    "Match",
    "NGram",
    "NormalizedWord",
]
