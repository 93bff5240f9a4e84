from __future__ import annotations
import os
from pathlib import Path

# project root: the directory holding pyproject.toml
PROJECT_ROOT = Path(__file__).resolve().parents[2]

TOP_K: int = 5
ENCODING: str = "utf-8-sig"   # tolerates a leading BOM

# Dictionary shipped with the repo; SWIPE_DICTIONARY overrides it
BUNDLED_DICTIONARY = Path(os.environ.get("SWIPE_DICTIONARY", PROJECT_ROOT / "data" / "word_freq.txt"))

# Progress logging (set SWIPE_VERBOSE=1 to enable)
VERBOSE = os.environ.get("SWIPE_VERBOSE") == "1"

# /* ~~~ query cap: longer traces are truncated, bounding the DP table ~~~ */
MAX_QUERY_LENGTH: int = 64

# /* ~~~ candidate selection: canonical length within +/- this of the query ~~~ */
LENGTH_WINDOW: int = 2

# Alignment tuning
INSERTION_PENALTY: float = 0.3   # extra query letter (gesture grazed a key)
DELETION_PENALTY: float = 0.6    # word letter never sampled
SIMILARITY_SCALE: float = 1.0    # S = exp(-D / scale)

# score = S ** alpha * freq_norm ** (1 - alpha)
BLEND_ALPHA: float = 0.7
