from __future__ import annotations
from typing import Iterable, List

from .models import Candidate


def rank(candidates: Iterable[Candidate], limit: int) -> List[Candidate]:
    """
    Best first: score descending, then frequency descending, then the word
    alphabetically, so equal candidates always come out in the same order.
    At most `limit` items; limit <= 0 gives [].
    """
    if limit <= 0:
        return []
    out = sorted(candidates, key=lambda c: (-c.score, -c.frequency, c.word))
    return out[:limit]
