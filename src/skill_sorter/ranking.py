"""Ranking -- count descending, name ascending on ties."""

from __future__ import annotations

from typing import Iterable

from .models import Ranking, SkillRecord


def _rank_key(record: SkillRecord) -> tuple[int, str, str]:
    # Case-insensitive name order first, exact spelling as the final tie-break.
    return (-record.count, record.name.casefold(), record.name)


def rank(records: Iterable[SkillRecord]) -> Ranking:
    """Sorted snapshot of *records*.

    The returned records are copies, so later count overrides do not change
    a ranking that has already been handed out.
    """
    return tuple(r.copy() for r in sorted(records, key=_rank_key))
