from __future__ import annotations
import logging
import string

from .config import MAX_QUERY_LENGTH

log = logging.getLogger(__name__)

# letters present on the reference layout
ALPHABET = frozenset(string.ascii_lowercase)


def collapse_runs(letters: str) -> str:
    """Collapse every run of identical consecutive characters to one ("caaat" -> "cat")."""
    out: list[str] = []
    for ch in letters:
        if not out or out[-1] != ch:
            out.append(ch)
    return "".join(out)


def normalize(trace: str, max_length: int = MAX_QUERY_LENGTH) -> str:
    """
    Turn a raw gesture trace into the query the aligner scores against.
    Rules:
      * case-insensitive: the trace is casefolded first
      * any character off the layout alphabet is dropped (digits, spaces, punctuation, accents)
      * runs of the same letter collapse to one, since dwelling on a key is not a repeat
      * the result is cut to max_length letters, trailing excess discarded

    The cut is lossy for pathological traces; it keeps the DP table bounded.
    normalize(normalize(t)) == normalize(t).
    """
    if not trace:
        return ""
    letters = "".join(ch for ch in trace.casefold() if ch in ALPHABET)
    query = collapse_runs(letters)
    if len(query) > max_length:
        log.debug("query truncated from %d to %d letters", len(query), max_length)
        query = query[:max_length]
    return query
