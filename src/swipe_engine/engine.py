# swipe_engine/engine.py
from __future__ import annotations

import itertools
import logging
import os
import threading
from typing import Any, Callable, List, Optional

from . import config as CFG
from .dictionary import Dictionary
from .loader import load_dictionary, load_dictionary_text
from .models import Candidate, ScoringParams
from .search import predict_query

log = logging.getLogger(__name__)


class Engine:
    """
    Owns the current Dictionary snapshot and the scoring parameters.

    Public API (used by the bridge, the REPL and Flask):
      * load(path):            parse -> build snapshot -> publish; returns word count
      * load_text(content):    same, from a string
      * predict(trace, limit): ranked candidates against the current snapshot
      * unload():              drop the snapshot
      * set_blend_weight(a) / set_params(...): retune scoring

    Publishing is a single reference assignment made while holding the writer
    lock, so loads run one at a time while predictions never take the lock:
    each prediction reads `self._current` once and works on that snapshot to
    the end, even if a newer one is published meanwhile.
    """

    # ------------- lifecycle -------------

    def __init__(self, params: Optional[ScoringParams] = None, *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
        self._current: Optional[Dictionary] = None
        self._params: ScoringParams = params or ScoringParams.from_config()
        self._write_lock = threading.Lock()
        self._generations = itertools.count(1)

    # /* ~~~ Parse a dictionary file and publish it as current ~~~ */
    def load(self, path: str | os.PathLike[str]) -> int:
        """
        Replace the current dictionary with the one at `path`.
        Returns the number of words. Raises a LoadError subclass and leaves the
        engine untouched when nothing could be loaded.
        """
        log.info("Loading dictionary from %s", path)
        return self._publish(lambda gen: load_dictionary(path, generation=gen))

    def load_text(self, content: str, *, source: str = "<text>") -> int:
        log.info("Loading dictionary from %s", source)
        return self._publish(lambda gen: load_dictionary_text(content, source=source, generation=gen))

    def unload(self) -> None:
        with self._write_lock:
            self._current = None
        log.info("Dictionary unloaded")

    # ------------- query -------------

    # /* ~~~ Decode a letter trace into ranked words ~~~ */
    def predict(self, trace: str, limit: int = CFG.TOP_K) -> List[Candidate]:
        snapshot = self._current
        if snapshot is None:
            return []
        return predict_query(trace, snapshot, limit, self._params)

    # ------------- tuning -------------

    @property
    def params(self) -> ScoringParams:
        return self._params

    def set_params(self, **overrides: Any) -> ScoringParams:
        """Swap in new scoring parameters; raises ValueError on invalid values."""
        new = self._params.with_overrides(**overrides)
        self._params = new
        log.info("Scoring params: %s", new.to_dict())
        return new

    def set_blend_weight(self, alpha: float) -> ScoringParams:
        return self.set_params(alpha=float(alpha))

    # ------------- status -------------

    @property
    def dictionary(self) -> Optional[Dictionary]:
        return self._current

    @property
    def is_loaded(self) -> bool:
        return self._current is not None

    @property
    def word_count(self) -> int:
        snapshot = self._current
        return len(snapshot) if snapshot is not None else 0

    @property
    def generation(self) -> int:
        snapshot = self._current
        return snapshot.generation if snapshot is not None else 0

    # ------------- internals -------------

    def _publish(self, build: Callable[[int], Dictionary]) -> int:
        with self._write_lock:
            dictionary = build(next(self._generations))
            self._current = dictionary
        log.info("Published dictionary: words=%d generation=%d", len(dictionary), dictionary.generation)
        return len(dictionary)
