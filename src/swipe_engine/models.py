# src/swipe_engine/models.py
"""
Data models for the swipe decoding engine.

- WordEntry: one dictionary word with its frequency and canonical letter path.
- Candidate: the scored result item handed to the ranker and to callers.
- ScoringParams: the tunable constants of the aligner and the score blend.

These classes carry no search logic; they validate their own invariants at
construction so the scoring path never has to.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict

from . import config as CFG
from .normalize import ALPHABET, collapse_runs

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WordEntry:
    """
    One word of the dictionary.

    Attributes
    ----------
    word : str
        Lowercase letters a-z only, non-empty.
    frequency : float
        Strictly positive, finite.
    canonical : str
        The word with consecutive duplicate letters collapsed ("hello" ->
        "helo"). A swipe that lingers on a key cannot tell one press from
        several, so matching is done against this form. Derived when omitted.
    """
    word: str
    frequency: float
    canonical: str = field(default="")

    def __post_init__(self) -> None:
        if not self.word or any(ch not in ALPHABET for ch in self.word):
            raise ValueError(f"invalid word: {self.word!r}")
        freq = float(self.frequency)
        if not math.isfinite(freq) or freq <= 0:
            raise ValueError(f"frequency must be a positive number, got {self.frequency!r}")
        object.__setattr__(self, "frequency", freq)
        canonical = self.canonical or collapse_runs(self.word)
        if canonical != collapse_runs(self.word):
            raise ValueError(f"canonical {canonical!r} does not match word {self.word!r}")
        object.__setattr__(self, "canonical", canonical)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A scored dictionary word. `generation` names the dictionary it came from."""
    word: str
    distance: float
    frequency: float
    score: float
    generation: int = 0

    def to_dict(self) -> Dict[str, Any]:
        # wire record; the boundary contract is exactly these three fields
        return {"word": self.word, "score": self.score, "frequency": self.frequency}


@dataclass(frozen=True, slots=True)
class ScoringParams:
    insertion_penalty: float = CFG.INSERTION_PENALTY
    deletion_penalty: float = CFG.DELETION_PENALTY
    scale: float = CFG.SIMILARITY_SCALE
    alpha: float = CFG.BLEND_ALPHA
    length_window: int = CFG.LENGTH_WINDOW

    def __post_init__(self) -> None:
        for name in ("insertion_penalty", "deletion_penalty", "scale"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number, got {value!r}")
        if not 0.0 < self.alpha < 1.0:
            raise ValueError(f"alpha must lie in (0, 1), got {self.alpha!r}")
        if self.length_window < 0:
            raise ValueError("length_window must be >= 0")
        if self.insertion_penalty >= self.deletion_penalty:
            log.warning("insertion penalty %.3f >= deletion penalty %.3f; over-travel will cost as much as a skipped key",
                        self.insertion_penalty, self.deletion_penalty)

    @classmethod
    def from_config(cls) -> "ScoringParams":
        """Snapshot the current module-level tunables (config may be patched at runtime)."""
        return cls(
            insertion_penalty=CFG.INSERTION_PENALTY,
            deletion_penalty=CFG.DELETION_PENALTY,
            scale=CFG.SIMILARITY_SCALE,
            alpha=CFG.BLEND_ALPHA,
            length_window=CFG.LENGTH_WINDOW,
        )

    def with_overrides(self, **overrides: Any) -> "ScoringParams":
        clean = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **clean)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "insertion_penalty": self.insertion_penalty,
            "deletion_penalty": self.deletion_penalty,
            "scale": self.scale,
            "alpha": self.alpha,
            "length_window": self.length_window,
        }
