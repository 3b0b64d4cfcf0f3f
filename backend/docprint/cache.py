"""Process-local FingerprintSet cache.

Keys are `(document_id, sha256(text), ngram_size, window_size)`. Each key is
computed at most once even when several threads ask for it concurrently: the
first caller builds the set under a per-key lock while the others wait.
"""
from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict
from typing import Callable

from docprint.config import settings
from docprint.core.fingerprint import generate_fingerprints
from docprint.errors import require_positive_int, require_text
from docprint.metrics import CACHE_LOOKUPS_TOTAL
from docprint.schemas.fingerprint import FingerprintSet

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str, int, int]


def content_hash(text: str) -> str:
    return hashlib.sha256(require_text(text).encode("utf-8")).hexdigest()


class FingerprintCache:
    """Bounded LRU of fingerprint sets with insert-if-absent semantics."""

    def __init__(
        self,
        max_entries: int | None = None,
        builder: Callable[..., FingerprintSet] = generate_fingerprints,
    ):
        self._max_entries = require_positive_int(
            max_entries if max_entries is not None else settings.CACHE_MAX_ENTRIES, "max_entries"
        )
        self._builder = builder
        self._entries: OrderedDict[CacheKey, FingerprintSet] = OrderedDict()
        self._key_locks: dict[CacheKey, threading.Lock] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _lookup(self, key: CacheKey) -> FingerprintSet | None:
        with self._lock:
            found = self._entries.get(key)
            if found is not None:
                self._entries.move_to_end(key)
            return found

    def get_or_compute(
        self,
        text: str,
        document_id: str,
        ngram_size: int | None = None,
        window_size: int | None = None,
    ) -> FingerprintSet:
        ngram_size = ngram_size if ngram_size is not None else settings.NGRAM_SIZE
        window_size = window_size if window_size is not None else settings.WINNOW_WINDOW
        key: CacheKey = (document_id, content_hash(text), ngram_size, window_size)

        found = self._lookup(key)
        if found is not None:
            CACHE_LOOKUPS_TOTAL.labels(result="hit").inc()
            return found

        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            # Another thread may have finished while we waited on the key lock.
            found = self._lookup(key)
            if found is not None:
                CACHE_LOOKUPS_TOTAL.labels(result="hit").inc()
                return found

            CACHE_LOOKUPS_TOTAL.labels(result="miss").inc()
            try:
                built = self._builder(text, document_id, ngram_size, window_size)
                with self._lock:
                    self._entries[key] = built
                    self._entries.move_to_end(key)
                    while len(self._entries) > self._max_entries:
                        evicted, _ = self._entries.popitem(last=False)
                        logger.debug("Evicted fingerprint set for %s", evicted[0])
            finally:
                with self._lock:
                    self._key_locks.pop(key, None)
            return built

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


fingerprint_cache = FingerprintCache()
