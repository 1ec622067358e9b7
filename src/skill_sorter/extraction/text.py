"""Text strategy -- pattern-matches ``Name: N endorsements`` lines.

The line pattern is permissive, so header and metadata rows can match it
too; any candidate whose name contains a denylisted word is dropped.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from ..documents import ProfileDocument
from ..models import Candidate, CandidateSet
from ..normalizer import normalize_name

logger = logging.getLogger(__name__)

DEFAULT_TEXT_DENYLIST: tuple[str, ...] = ("index", "rank", "skill", "endorsement")

# Optional "4. " / "4: " index, a name, a colon, then "N endorsement(s)".
SKILL_LINE_RE = re.compile(
    r"(?:\d+[.:]\s+)?([\w\s()\-.,']+?):\s+(\d+)\s+endorsements?",
    re.IGNORECASE,
)


def contains_denied(name: str, denylist: Iterable[str]) -> bool:
    """True if *name* contains any denylisted word (case-insensitive)."""
    lowered = name.lower()
    return any(word in lowered for word in denylist)


def extract_from_text(
    full_text: str,
    *,
    denylist: Iterable[str] = DEFAULT_TEXT_DENYLIST,
    strategy: str = "text",
) -> CandidateSet:
    """Build candidates from matching lines of *full_text*."""
    denylist = tuple(word.lower() for word in denylist)
    candidates: list[Candidate] = []

    for line in full_text.splitlines():
        match = SKILL_LINE_RE.search(line)
        if match is None:
            continue

        raw_name = match.group(1)
        name = normalize_name(raw_name)
        if contains_denied(name, denylist):
            logger.debug("Skipping header-like line %r", line)
            continue

        candidates.append(Candidate(
            raw_name=raw_name,
            name=name,
            count=int(match.group(2)),
        ))

    return CandidateSet(strategy=strategy, candidates=tuple(candidates))


class TextExtraction:
    """Strategy over ``document.visible_text``."""

    def __init__(self, denylist: Iterable[str] = DEFAULT_TEXT_DENYLIST) -> None:
        self.denylist = tuple(denylist)

    @property
    def name(self) -> str:
        return "text"

    def extract(self, document: ProfileDocument) -> CandidateSet:
        return extract_from_text(
            document.visible_text, denylist=self.denylist, strategy=self.name,
        )
