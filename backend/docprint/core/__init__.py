from docprint.core.fingerprint import generate_fingerprints, generate_fingerprints_for_documents
from docprint.core.hashing import compute_hash, compute_ngram_hash, rolling_hash_update, window_power
from docprint.core.matcher import (
    build_fingerprint_index,
    find_matches_in_collection,
    find_matching_fingerprints,
    search_with_index,
)
from docprint.core.ngrams import generate_ngram_hashes, generate_ngrams
from docprint.core.normalize import get_word_positions, normalize_text, split_into_words
from docprint.core.winnow import winnow

__all__ = [
    "build_fingerprint_index",
    "compute_hash",
    "compute_ngram_hash",
    "find_matches_in_collection",
    "find_matching_fingerprints",
    "generate_fingerprints",
    "generate_fingerprints_for_documents",
    "generate_ngram_hashes",
    "generate_ngrams",
    "get_word_positions",
    "normalize_text",
    "rolling_hash_update",
    "search_with_index",
    "split_into_words",
    "window_power",
    "winnow",
]
