"""
Immutable dictionary snapshot.

A Dictionary is built once per successful load and never changed afterwards:
predictions that captured a snapshot keep using it while a newer one is
published. Besides the word -> entry mapping it carries a bucket index keyed by
(first letter, canonical length) so candidate selection never scans every word.
"""

from __future__ import annotations

from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from .models import WordEntry

BucketKey = Tuple[str, int]


class Dictionary:
    __slots__ = ("_entries", "_buckets", "_max_frequency", "_generation")

    def __init__(self, entries: Iterable[WordEntry], *, generation: int = 0) -> None:
        rows: Dict[str, WordEntry] = {}
        for e in entries:
            prev = rows.get(e.word)
            # duplicate words keep their highest frequency
            if prev is None or e.frequency > prev.frequency:
                rows[e.word] = e

        idx: Dict[BucketKey, List[WordEntry]] = defaultdict(list)
        for word in sorted(rows):
            e = rows[word]
            idx[(e.canonical[0], len(e.canonical))].append(e)

        self._entries: Mapping[str, WordEntry] = MappingProxyType(rows)
        self._buckets: Mapping[BucketKey, Tuple[WordEntry, ...]] = MappingProxyType(
            {k: tuple(v) for k, v in idx.items()}
        )
        self._max_frequency = max((e.frequency for e in rows.values()), default=0.0)
        self._generation = int(generation)

    # ------------- read-only views -------------

    @property
    def entries(self) -> Mapping[str, WordEntry]:
        return self._entries

    @property
    def max_frequency(self) -> float:
        return self._max_frequency

    @property
    def generation(self) -> int:
        return self._generation

    def bucket(self, first: str, length: int) -> Tuple[WordEntry, ...]:
        """Entries whose canonical sequence starts with `first` and has `length` letters."""
        return self._buckets.get((first, length), ())

    def get(self, word: str) -> WordEntry | None:
        return self._entries.get(word)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"Dictionary(words={len(self)}, generation={self._generation})"
