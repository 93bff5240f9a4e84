"""
Swipe Decoding Engine

Turns the letters sampled under a finger or pointer sliding across a QWERTY
keyboard into a ranked list of dictionary words. Each candidate is scored by
how cheaply its letter path aligns with the trace (key-distance aware edit
costs) and by how common the word is.

The package is split along the pipeline:
- layout / normalize: key geometry and trace clean-up
- loader / dictionary: word-frequency parsing and the immutable snapshot
- prune / align / rank / search: candidate selection, scoring and ordering
- engine: the facade that owns and atomically replaces the snapshot
- bridge / client: the plain-value call boundary used by GUI clients

Example Usage:
    from swipe_engine import Engine

    engine = Engine()
    engine.load("data/word_freq.txt")
    for c in engine.predict("caaat", limit=3):
        print(f"{c.score:.3f} {c.word}")
"""

# src/swipe_engine/__init__.py
from .engine import Engine  # re-export
from .errors import LoadError, DictionaryNotFound, DictionaryEmpty, DictionaryParseFailure, EmptyInput
from .models import Candidate, ScoringParams, WordEntry
from .normalize import normalize

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "Candidate",
    "ScoringParams",
    "WordEntry",
    "normalize",
    "LoadError",
    "DictionaryNotFound",
    "DictionaryEmpty",
    "DictionaryParseFailure",
    "EmptyInput",
]
