"""Prometheus metrics for fingerprinting and matching."""
from __future__ import annotations

from prometheus_client import Counter, Histogram


FINGERPRINT_SETS_TOTAL = Counter(
    "docprint_fingerprint_sets_total",
    "Fingerprint sets built",
)

FINGERPRINT_WORDS = Histogram(
    "docprint_fingerprint_words",
    "Word count of fingerprinted documents",
    buckets=(0, 10, 50, 100, 250, 500, 1000, 2500, 5000, 10000, 50000),
)

FINGERPRINT_DENSITY = Histogram(
    "docprint_fingerprint_density",
    "Selected fingerprints / hashed n-grams per document",
    buckets=(0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.8, 1.0),
)

MATCHES_TOTAL = Counter(
    "docprint_matches_total",
    "Verified fingerprint matches emitted",
    ["mode"],
)

HASH_COLLISIONS_TOTAL = Counter(
    "docprint_hash_collisions_total",
    "Hash-equal fingerprints rejected by text verification",
    ["mode"],
)

CACHE_LOOKUPS_TOTAL = Counter(
    "docprint_cache_lookups_total",
    "FingerprintSet cache lookups by result",
    ["result"],
)
