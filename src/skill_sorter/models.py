"""Core data models: Candidate, CandidateSet, SkillRecord, ExtractionResult."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator


# ---------------------------------------------------------------------------
# Frozen dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Candidate:
    """One unreconciled (name, count) observation from a single strategy.

    ``raw_name`` is the label as it appeared in the document, ``name`` the
    normalized display name.
    """

    raw_name: str
    name: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable dict."""
        return {"raw_name": self.raw_name, "name": self.name, "count": self.count}


@dataclass(frozen=True)
class CandidateSet:
    """Candidates produced by one extraction strategy, in document order."""

    strategy: str
    candidates: tuple[Candidate, ...] = ()

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable dict."""
        return {
            "strategy": self.strategy,
            "candidates": [c.to_dict() for c in self.candidates],
        }


# ---------------------------------------------------------------------------
# SkillRecord - mutable through SkillSession.update_count only
# ---------------------------------------------------------------------------

@dataclass
class SkillRecord:
    """A deduplicated skill and its endorsement count."""

    name: str
    count: int

    def copy(self) -> SkillRecord:
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable dict."""
        return {"name": self.name, "count": self.count}


# Sorted snapshot of records; see ranking.rank().
Ranking = tuple[SkillRecord, ...]


# ---------------------------------------------------------------------------
# ExtractionResult - mutable accumulator
# ---------------------------------------------------------------------------

@dataclass
class ExtractionResult:
    """Mutable accumulator for one pipeline run."""

    candidate_sets: list[CandidateSet] = field(default_factory=list)
    winner: CandidateSet | None = None
    records: list[SkillRecord] = field(default_factory=list)
    method_errors: list[tuple[str, str]] = field(default_factory=list)
    timing: dict[str, float] = field(default_factory=dict)
    notice: str | None = None

    @property
    def winning_strategy(self) -> str | None:
        return self.winner.strategy if self.winner is not None else None

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable dict (tracebacks reduced to strategy names)."""
        return {
            "candidate_sets": [cs.to_dict() for cs in self.candidate_sets],
            "winning_strategy": self.winning_strategy,
            "records": [r.to_dict() for r in self.records],
            "failed_strategies": [name for name, _ in self.method_errors],
            "timing": dict(self.timing),
            "notice": self.notice,
        }
