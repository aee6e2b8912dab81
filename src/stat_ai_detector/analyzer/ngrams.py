from __future__ import annotations

from collections import Counter
from typing import Sequence, Tuple


def ngram_repetition(tokens: Sequence[str], n: int) -> float:
    """
    Density of the single most frequent contiguous n-token window.

    Returns the top window count divided by the number of windows, or 0.0
    when there are fewer than n tokens.
    """
    if n < 1 or len(tokens) < n:
        return 0.0
    window_count = len(tokens) - n + 1
    counts: Counter[Tuple[str, ...]] = Counter(
        tuple(tokens[idx : idx + n]) for idx in range(window_count)
    )
    return max(counts.values()) / window_count
