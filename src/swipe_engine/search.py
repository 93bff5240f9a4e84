from __future__ import annotations
import logging
from typing import List, Optional

from .align import Aligner
from .config import TOP_K
from .dictionary import Dictionary
from .models import Candidate, ScoringParams
from .normalize import normalize
from .prune import candidates
from .rank import rank

log = logging.getLogger(__name__)


def predict_query(trace: str,
                  dictionary: Optional[Dictionary],
                  limit: int = TOP_K,
                  params: Optional[ScoringParams] = None) -> List[Candidate]:
    """
    normalize -> prune -> align/score -> rank, against one snapshot.
    No dictionary, an empty query or no candidates all give [].
    """
    if dictionary is None or limit <= 0:
        return []
    params = params or ScoringParams.from_config()

    query = normalize(trace)
    if not query:
        return []

    pool = candidates(query, dictionary, window=params.length_window)
    log.debug("query=%r candidates=%d generation=%d", query, len(pool), dictionary.generation)
    if not pool:
        return []

    aligner = Aligner(params)
    max_freq = dictionary.max_frequency
    gen = dictionary.generation
    scored = [aligner.score(query, e, max_freq, generation=gen) for e in pool]
    return rank(scored, limit)
