from __future__ import annotations

import math
from collections import Counter
from typing import Sequence

from .lexical import mean_and_pstdev


def shannon_entropy(text: str) -> float:
    """Shannon entropy in bits per character, counted over codepoints."""
    if not text:
        return 0.0
    total = len(text)
    entropy = 0.0
    for count in Counter(text).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def sentence_entropy_std(sentences: Sequence[str]) -> float:
    """Population std of per-sentence entropy; 0.0 below two sentences."""
    _, std = mean_and_pstdev([shannon_entropy(s) for s in sentences])
    return std
