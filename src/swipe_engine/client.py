"""Client-side view of the bridge, shaped like the GUI's engine wrapper."""
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional

from . import config as CFG
from .bridge import SwipeBridge

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Prediction:
    word: str
    score: float
    frequency: float


class EngineClient:
    def __init__(self, bridge: Optional[SwipeBridge] = None) -> None:
        self.bridge = bridge or SwipeBridge()
        self.is_loaded = False
        self.loaded_word_count = 0

    def load_dictionary(self, path: str) -> int:
        result = self.bridge.load(path)
        # a failed load leaves the previous dictionary published
        if result > 0:
            self.is_loaded = True
            self.loaded_word_count = result
        return result

    def load_bundled_dictionary(self) -> int:
        if not CFG.BUNDLED_DICTIONARY.is_file():
            return -1
        return self.load_dictionary(str(CFG.BUNDLED_DICTIONARY))

    @contextmanager
    def _acquire(self, trace: str, limit: int) -> Iterator[str]:
        handle = self.bridge.predict(trace, limit)
        try:
            yield handle.read()
        finally:
            self.bridge.release(handle)

    def predict(self, trace: str, limit: int = 5) -> List[Prediction]:
        if not self.is_loaded:
            return []
        with self._acquire(trace, limit) as payload:
            try:
                rows = json.loads(payload)
            except json.JSONDecodeError:
                log.warning("Discarding malformed prediction payload")
                return []
        out: List[Prediction] = []
        for d in rows if isinstance(rows, list) else []:
            try:
                out.append(Prediction(word=str(d["word"]), score=float(d["score"]), frequency=float(d["frequency"])))
            except (KeyError, TypeError, ValueError):
                continue
        return out
