"""Reconciliation -- one record per skill name, highest count wins.

Endorsement counts only grow, so when the same skill is observed more than
once the larger reading is kept.
"""

from __future__ import annotations

from typing import Iterable

from .models import Candidate, SkillRecord

# Strings a renderer emits for a missing value.
DEFAULT_PLACEHOLDER_NAMES: tuple[str, ...] = ("None", "undefined", "null")


def reconcile(
    candidates: Iterable[Candidate],
    placeholder_names: Iterable[str] = DEFAULT_PLACEHOLDER_NAMES,
) -> list[SkillRecord]:
    """Merge candidates by name, keeping the maximum count.

    Records with an empty or placeholder name are dropped. Output follows
    first-seen order, which carries no ranking meaning.
    """
    counts: dict[str, int] = {}
    for candidate in candidates:
        previous = counts.get(candidate.name)
        if previous is None or candidate.count > previous:
            counts[candidate.name] = candidate.count

    placeholders = set(placeholder_names)
    return [
        SkillRecord(name=name, count=count)
        for name, count in counts.items()
        if name and name not in placeholders
    ]
