"""LinkedIn skill endorsement extraction and ranking."""
from .models import (
    Candidate,
    CandidateSet,
    SkillRecord,
    Ranking,
    ExtractionResult,
)
from .normalizer import normalize_name
from .ranking import rank
from .reconcile import reconcile
from .selection import select_best
from .session import SkillSession, extract_skills

__all__ = [
    "Candidate",
    "CandidateSet",
    "SkillRecord",
    "Ranking",
    "ExtractionResult",
    "normalize_name",
    "rank",
    "reconcile",
    "select_best",
    "SkillSession",
    "extract_skills",
]
