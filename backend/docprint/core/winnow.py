"""Winnowing (Schleimer, Wilkerson & Aiken, SIGMOD 2003).

Slides a window of `window_size` consecutive n-gram hashes and records the
minimum of each window, taking the rightmost one on ties. A window whose
minimum is the same n-gram as the previous pick adds nothing. Any run of at
least `window_size + ngram_size - 1` shared words fills a whole window in both
documents, so both pick the same minimum.
"""
from __future__ import annotations

from collections import deque
from typing import Sequence

from docprint.errors import require_positive_int
from docprint.schemas.fingerprint import Fingerprint, HashedNGram

DEFAULT_WINDOW_SIZE = 4


def winnow(hashes: Sequence[HashedNGram], window_size: int = DEFAULT_WINDOW_SIZE) -> list[Fingerprint]:
    require_positive_int(window_size, "window_size")
    if len(hashes) <= window_size:
        return list(hashes)

    # Indices whose hashes increase strictly from front to back; the front is
    # the rightmost minimum of the current window.
    candidates: deque[int] = deque()
    picks: list[Fingerprint] = []
    last_pick = -1

    for i, item in enumerate(hashes):
        while candidates and hashes[candidates[-1]].hash >= item.hash:
            candidates.pop()
        candidates.append(i)
        if candidates[0] <= i - window_size:
            candidates.popleft()

        if i >= window_size - 1 and candidates[0] != last_pick:
            last_pick = candidates[0]
            picks.append(hashes[last_pick])

    return picks


def expected_density(window_size: int = DEFAULT_WINDOW_SIZE) -> float:
    """Expected fraction of hashes selected for random input: 2 / (w + 1)."""
    require_positive_int(window_size, "window_size")
    return 2.0 / (window_size + 1)
