"""
Path alignment between a normalized query and a word's canonical sequence.

Three operations, each with its own cost:
  * match/substitute: layout.cost(q, w), zero for the same key
  * insertion: the query has a letter the word lacks (the swipe grazed a key
    on its way); cheap, because over-travel is common
  * deletion: the word has a letter the query never sampled; dearer, because
    skipping an intended key is rarer than grazing an extra one

The minimum total cost D becomes a similarity S = exp(-D / scale), blended
with the normalized frequency:

    score = S ** alpha * (frequency / max_frequency) ** (1 - alpha)
"""
from __future__ import annotations

import math
from typing import List, Optional

from .layout import cost
from .models import Candidate, ScoringParams, WordEntry


class Aligner:
    """
    Holds one DP table and reuses it for every candidate of a prediction.

    The table only grows, so after the first few candidates no row is
    allocated. An Aligner is per call; do not share one between threads.
    """

    def __init__(self, params: Optional[ScoringParams] = None) -> None:
        self.params = params or ScoringParams.from_config()
        self._table: List[List[float]] = [[0.0]]

    def _reserve(self, rows: int, cols: int) -> List[List[float]]:
        table = self._table
        if len(table[0]) < cols:
            grow = cols - len(table[0])
            for row in table:
                row.extend([0.0] * grow)
        width = len(table[0])
        while len(table) < rows:
            table.append([0.0] * width)
        return table

    def distance(self, query: str, canonical: str) -> float:
        """Minimum alignment cost turning `query` into `canonical`."""
        ins = self.params.insertion_penalty
        dele = self.params.deletion_penalty
        m, n = len(query), len(canonical)
        dp = self._reserve(m + 1, n + 1)

        # row 0: word letters with nothing sampled; column 0: sampled letters with no word
        for j in range(n + 1):
            dp[0][j] = j * dele
        for i in range(1, m + 1):
            dp[i][0] = i * ins

        for i in range(1, m + 1):
            q = query[i - 1]
            prev = dp[i - 1]
            row = dp[i]
            for j in range(1, n + 1):
                row[j] = min(
                    prev[j - 1] + cost(q, canonical[j - 1]),
                    prev[j] + ins,
                    row[j - 1] + dele,
                )
        return dp[m][n]

    def similarity(self, d: float) -> float:
        return math.exp(-d / self.params.scale)

    def blend(self, similarity: float, frequency: float, max_frequency: float) -> float:
        alpha = self.params.alpha
        freq_norm = frequency / max_frequency if max_frequency > 0 else 0.0
        return similarity ** alpha * freq_norm ** (1.0 - alpha)

    def score(self, query: str, entry: WordEntry, max_frequency: float, *, generation: int = 0) -> Candidate:
        d = self.distance(query, entry.canonical)
        return Candidate(
            word=entry.word,
            distance=d,
            frequency=entry.frequency,
            score=self.blend(self.similarity(d), entry.frequency, max_frequency),
            generation=generation,
        )


def score(query: str, entry: WordEntry, max_frequency: float, params: Optional[ScoringParams] = None) -> float:
    """Final score of one entry against one query."""
    return Aligner(params).score(query, entry, max_frequency).score
