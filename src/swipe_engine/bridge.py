"""
Call boundary for GUI clients.

Every operation takes and returns plain values: integer status codes for
loads, and for predictions a ResultHandle owning a JSON text buffer:

    [{"word": "cat", "score": 0.97, "frequency": 100.0}, ...]

The caller owns each handle it receives and must pass it to release()
exactly once and never read it afterwards. Releasing twice or reading after
release raises HandleReleasedError; that is a caller bug and leaves the engine
untouched. Releasing a handle issued by another bridge raises ValueError.
`outstanding` counts handles not yet released.
"""
from __future__ import annotations

import json
import logging
import threading
from typing import Optional

from .engine import Engine
from .errors import LoadError

log = logging.getLogger(__name__)


class HandleReleasedError(RuntimeError):
    """A result buffer was used after release, or released twice."""


class ResultHandle:
    __slots__ = ("_payload", "_released", "_owner")

    def __init__(self, payload: str, owner: Optional["SwipeBridge"] = None) -> None:
        self._payload: Optional[str] = payload
        self._released = False
        self._owner = owner

    @property
    def released(self) -> bool:
        return self._released

    def read(self) -> str:
        if self._released or self._payload is None:
            raise HandleReleasedError("result buffer read after release")
        return self._payload


class SwipeBridge:
    def __init__(self, engine: Optional[Engine] = None) -> None:
        self.engine = engine or Engine()
        self._live = 0
        self._live_lock = threading.Lock()

    # /* ~~~ load: positive word count, or a zero/negative LoadError code ~~~ */
    def load(self, path: str) -> int:
        try:
            return self.engine.load(path)
        except LoadError as e:
            log.warning("Dictionary load failed (code %d): %s", e.code, e)
            return e.code

    def load_text(self, content: str) -> int:
        try:
            return self.engine.load_text(content)
        except LoadError as e:
            log.warning("Dictionary load failed (code %d): %s", e.code, e)
            return e.code

    def word_count(self) -> int:
        return self.engine.word_count

    def set_blend_weight(self, alpha: float) -> None:
        self.engine.set_blend_weight(alpha)

    # /* ~~~ predict: the caller owns the returned handle ~~~ */
    def predict(self, trace: str, limit: int) -> ResultHandle:
        rows = [c.to_dict() for c in self.engine.predict(trace or "", int(limit))]
        handle = ResultHandle(json.dumps(rows), owner=self)
        with self._live_lock:
            self._live += 1
        return handle

    def release(self, handle: ResultHandle) -> None:
        # check and flip under the lock so racing releases decrement once
        with self._live_lock:
            if handle._owner is not self:
                raise ValueError("result buffer was not issued by this bridge")
            if handle._released:
                raise HandleReleasedError("result buffer released twice")
            handle._released = True
            handle._payload = None
            self._live -= 1

    @property
    def outstanding(self) -> int:
        with self._live_lock:
            return self._live
