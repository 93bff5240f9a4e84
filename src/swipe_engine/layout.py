"""
Reference QWERTY layout and the key-proximity substitution cost.

Key centres use one unit per key pitch: the top row starts at x=0, the home
row is staggered half a key right and the bottom row one and a half keys, with
rows one unit apart. Only the 26 letter keys exist here; anything else has no
position and is never matched.
"""
from __future__ import annotations

import math
from itertools import combinations
from typing import Dict, Optional, Tuple

# Row definitions: x-offset of the first key (in key pitches) and its letters
ROWS = [
    {"offset": 0.0, "keys": "qwertyuiop", "y_index": 0},
    {"offset": 0.5, "keys": "asdfghjkl", "y_index": 1},
    {"offset": 1.5, "keys": "zxcvbnm", "y_index": 2},
]


def _compute_layout() -> Dict[str, Tuple[float, float]]:
    """Compute the centre coordinates for every letter key."""
    layout: Dict[str, Tuple[float, float]] = {}
    for row in ROWS:
        for i, key in enumerate(row["keys"]):
            layout[key] = (row["offset"] + i, float(row["y_index"]))
    return layout


KEY_POSITIONS: Dict[str, Tuple[float, float]] = _compute_layout()


def position(letter: str) -> Optional[Tuple[float, float]]:
    """Key centre for `letter`, or None when it is not a key on the layout."""
    return KEY_POSITIONS.get(letter.lower())


def distance(a: str, b: str) -> float:
    """Euclidean distance between two key centres; inf when either key is unknown."""
    pa, pb = position(a), position(b)
    if pa is None or pb is None:
        return math.inf
    return math.hypot(pa[0] - pb[0], pa[1] - pb[1])


MAX_KEY_DISTANCE: float = max(distance(a, b) for a, b in combinations(KEY_POSITIONS, 2))

# /* ~~~ every pairwise cost, computed once; the aligner reads this in its inner loop ~~~ */
_COSTS: Dict[Tuple[str, str], float] = {
    (a, b): (0.0 if a == b else distance(a, b) / MAX_KEY_DISTANCE)
    for a in KEY_POSITIONS
    for b in KEY_POSITIONS
}


def cost(a: str, b: str) -> float:
    """
    Substitution cost in [0, 1] for reading `a` where `b` was meant.
    0 for the same key, growing linearly with key distance, 1 for the two
    farthest keys. Unknown letters cost the maximum.
    """
    if a == b:
        return 0.0
    return _COSTS.get((a, b), 1.0)
