"""Strategy selection -- the candidate set with the most candidates wins.

Candidate count is the only signal comparable across strategies that read
different views of the document. Sets arrive in priority order, and on a
tie the earlier set wins. Candidates with a defaulted count of 0 weigh the
same as parsed ones.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .models import CandidateSet

logger = logging.getLogger(__name__)


def select_best(candidate_sets: Sequence[CandidateSet]) -> CandidateSet:
    """Return the largest set; ties go to the earliest (highest priority).

    An empty input yields an empty ``CandidateSet`` named ``"none"``.
    """
    if not candidate_sets:
        return CandidateSet(strategy="none")

    best = candidate_sets[0]
    for candidate_set in candidate_sets[1:]:
        if len(candidate_set) > len(best):
            best = candidate_set

    logger.debug(
        "Candidate counts: %s",
        ", ".join(f"{cs.strategy}={len(cs)}" for cs in candidate_sets),
    )
    return best
