from __future__ import annotations
from typing import List

from .config import LENGTH_WINDOW
from .dictionary import Dictionary
from .models import WordEntry


def candidates(query: str, dictionary: Dictionary, window: int = LENGTH_WINDOW) -> List[WordEntry]:
    """
    Entries worth aligning against `query`: same first letter, canonical length
    within +/- window of the query length. Reads whole index buckets, never
    scans the dictionary. A word whose first key was mis-sampled is not found.
    """
    if not query:
        return []
    first = query[0]
    m = len(query)
    out: List[WordEntry] = []
    for length in range(max(1, m - window), m + window + 1):
        out.extend(dictionary.bucket(first, length))
    return out
