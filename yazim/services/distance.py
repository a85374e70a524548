"""
Edit distances used by the dictionary index and suggestion ranking.

``levenshtein`` is the BK-tree metric (integer, a true metric).
``keyboard_distance`` is the ranking score: a weighted Levenshtein where
diacritic look-alikes and physically adjacent keys are cheap substitutions.
"""
import math
from functools import lru_cache
from typing import Dict, List, Tuple

from symspellpy.editdistance import DistanceAlgorithm, EditDistance

from yazim.utils.turkish import is_lookalike

# Turkish Q layout, row offsets follow a standard staggered keyboard
KEYBOARD_ROWS: Tuple[Tuple[str, float], ...] = (
    ("qwertyuıopğü", 0.0),
    ("asdfghjklşi", 0.25),
    ("zxcvbnmöç", 0.75),
)

# Covers horizontal neighbours and both diagonals
KEYBOARD_NEIGHBOR_RADIUS = 1.3

LOOKALIKE_COST = 0.25
SUBSTITUTION_BASE_COST = 0.5
KEYBOARD_PENALTY_PER_KEY = 0.25
MAX_SUBSTITUTION_COST = 1.0
INDEL_COST = 1.0


def _build_key_positions() -> Dict[str, Tuple[float, float]]:
    positions = {}
    for row_index, (keys, offset) in enumerate(KEYBOARD_ROWS):
        for col_index, key in enumerate(keys):
            positions[key] = (col_index + offset, float(row_index))
    return positions


KEY_POSITIONS = _build_key_positions()

_edit_distance = EditDistance(DistanceAlgorithm.LEVENSHTEIN)


def levenshtein(a: str, b: str) -> int:
    """Exact Levenshtein distance between two strings."""
    if a == b:
        return 0
    # Any distance fits under this bound, so compare() never returns -1
    return _edit_distance.compare(a, b, max(len(a), len(b)))


def key_distance(a: str, b: str) -> float:
    """Euclidean distance between two keys, ``inf`` for unmapped characters."""
    pos_a = KEY_POSITIONS.get(a)
    pos_b = KEY_POSITIONS.get(b)
    if pos_a is None or pos_b is None:
        return math.inf
    return math.hypot(pos_a[0] - pos_b[0], pos_a[1] - pos_b[1])


@lru_cache(maxsize=None)
def keyboard_neighbors(ch: str) -> List[str]:
    """Keys within KEYBOARD_NEIGHBOR_RADIUS of ``ch``, nearest first."""
    if ch not in KEY_POSITIONS:
        return []
    scored = [
        (key_distance(ch, other), other)
        for other in KEY_POSITIONS
        if other != ch
    ]
    return [key for dist, key in sorted(scored) if dist <= KEYBOARD_NEIGHBOR_RADIUS]


def substitution_cost(a: str, b: str) -> float:
    if a == b:
        return 0.0
    if is_lookalike(a, b):
        return LOOKALIKE_COST
    dist = key_distance(a, b)
    if math.isinf(dist):
        return MAX_SUBSTITUTION_COST
    return min(
        SUBSTITUTION_BASE_COST + KEYBOARD_PENALTY_PER_KEY * dist,
        MAX_SUBSTITUTION_COST,
    )


def keyboard_distance(a: str, b: str) -> float:
    """
    Weighted edit distance between two canonical (lower-case) words.

    Costs:
    - exact match: 0
    - diacritic look-alike (c/ç, ı/i, a/â ...): 0.25
    - other substitution: 0.5 plus 0.25 per key of physical distance, capped at 1
    - insertion / deletion: 1

    Never larger than the plain Levenshtein distance.
    """
    if a == b:
        return 0.0

    previous = [j * INDEL_COST for j in range(len(b) + 1)]
    for i, ch_a in enumerate(a, start=1):
        current = [i * INDEL_COST]
        for j, ch_b in enumerate(b, start=1):
            current.append(min(
                previous[j] + INDEL_COST,
                current[j - 1] + INDEL_COST,
                previous[j - 1] + substitution_cost(ch_a, ch_b),
            ))
        previous = current
    return previous[-1]
