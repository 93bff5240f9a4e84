"""
Dictionary Loading Module

Parses a word-frequency list into a Dictionary snapshot. One entry per line:

    word<sep>frequency

where <sep> is a tab, comma, semicolon or run of whitespace. Blank lines and
lines starting with '#' are ignored. Any other line that does not yield a
lowercase-able alphabetic word and a positive finite frequency is skipped; a
load fails only when nothing survives.

Key Functions:
    load_dictionary(path): read a file into a Dictionary
    load_dictionary_text(text): same for in-memory content
    parse_line(line): one line -> WordEntry or None

Publishing the result as "current" is the Engine's job, not the loader's.
"""

from __future__ import annotations

import logging
import math
import os
import re
from typing import Iterable, List, Optional, Tuple

from .config import ENCODING
from .dictionary import Dictionary
from .errors import DictionaryEmpty, DictionaryNotFound, DictionaryParseFailure, EmptyInput
from .models import WordEntry
from .normalize import ALPHABET

log = logging.getLogger(__name__)

# separator: tab/comma/semicolon (with optional padding) or plain whitespace
_SEP = re.compile(r"\s*[\t,;]\s*|\s+")

# how many offending line numbers to report at debug level
_REPORT_SKIPPED = 10


def _is_data_line(line: str) -> bool:
    s = line.strip()
    return bool(s) and not s.startswith("#")


def parse_line(line: str) -> Optional[WordEntry]:
    """
    Parse one `word<sep>frequency` line.

    Returns None for a malformed line: wrong field count, a word with
    characters off the layout, or a frequency that is not a positive number.

    Example:
        >>> parse_line("Hello\\t1000")
        WordEntry(word='hello', frequency=1000.0, canonical='helo')
        >>> parse_line("don't\\t5") is None
        True
    """
    parts = _SEP.split(line.strip())
    if len(parts) != 2:
        return None
    word = parts[0].casefold()
    if not word or any(ch not in ALPHABET for ch in word):
        return None
    try:
        freq = float(parts[1])
    except ValueError:
        return None
    if not math.isfinite(freq) or freq <= 0:
        return None
    return WordEntry(word=word, frequency=freq)


def parse_lines(lines: Iterable[str]) -> Tuple[List[WordEntry], int, List[int]]:
    """Return (entries, number of data lines, 1-based numbers of skipped lines)."""
    entries: List[WordEntry] = []
    skipped: List[int] = []
    data_lines = 0
    for line_no, raw in enumerate(lines, start=1):
        if not _is_data_line(raw):
            continue
        data_lines += 1
        entry = parse_line(raw)
        if entry is None:
            skipped.append(line_no)
            continue
        entries.append(entry)
    return entries, data_lines, skipped


def _build(lines: Iterable[str], source: str, generation: int) -> Dictionary:
    entries, data_lines, skipped = parse_lines(lines)
    if data_lines == 0:
        raise EmptyInput(source, f"no dictionary lines in {source}")
    if skipped:
        log.warning("Skipped %d malformed line(s) in %s", len(skipped), source)
        log.debug("First skipped lines: %s", skipped[:_REPORT_SKIPPED])
    if not entries:
        raise DictionaryEmpty(source, f"no valid entries among {data_lines} line(s) in {source}")

    dictionary = Dictionary(entries, generation=generation)
    log.info("Parsed %s: lines=%d words=%d skipped=%d", source, data_lines, len(dictionary), len(skipped))
    return dictionary


def load_dictionary(path: str | os.PathLike[str], *, generation: int = 0) -> Dictionary:
    """
    Read a word-frequency file into a new Dictionary.

    Raises:
        DictionaryNotFound: the path is empty, missing, a directory or unreadable
        DictionaryParseFailure: the bytes are not valid text in ENCODING
        EmptyInput: the file has no data lines
        DictionaryEmpty: data lines exist but none is a valid entry
    """
    source = os.fspath(path) if path else ""
    if not source:
        raise DictionaryNotFound(source, "no dictionary path given")
    try:
        with open(source, "r", encoding=ENCODING) as f:
            lines = f.read().splitlines()
    except UnicodeDecodeError as e:
        raise DictionaryParseFailure(source, f"cannot decode {source}: {e.reason}") from e
    except OSError as e:
        raise DictionaryNotFound(source, f"cannot open {source}: {e.strerror or e}") from e
    return _build(lines, source, generation)


def load_dictionary_text(text: str, *, source: str = "<text>", generation: int = 0) -> Dictionary:
    """Parse dictionary content already held in memory."""
    return _build((text or "").splitlines(), source, generation)
