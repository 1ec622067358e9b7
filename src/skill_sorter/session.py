"""SkillSession -- reconciled records plus the manual override and ranking calls."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .config import Config
from .documents import ProfileDocument
from .models import ExtractionResult, Ranking, SkillRecord
from .pipeline import Pipeline
from .ranking import rank

logger = logging.getLogger(__name__)


def _coerce_count(value: Any) -> int | None:
    """Accept ints and integer strings; reject bools, negatives and the rest."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        count = value
    elif isinstance(value, str):
        try:
            count = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return count if count >= 0 else None


class SkillSession:
    """Handle on one extraction run.

    Holds the pre-sort record list. ``update_count`` corrects a count by its
    position in that list; ``rank`` (re)computes the sorted view on demand.
    """

    def __init__(
        self,
        records: Sequence[SkillRecord],
        result: ExtractionResult | None = None,
    ) -> None:
        self._records = [record.copy() for record in records]
        self.result = result if result is not None else ExtractionResult(records=[r.copy() for r in self._records])

    @property
    def records(self) -> tuple[SkillRecord, ...]:
        """Snapshot of the pre-sort records; positions are what ``update_count`` takes."""
        return tuple(record.copy() for record in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def update_count(self, index: Any, new_count: Any) -> bool:
        """Set the count of the record at *index*.

        Returns ``False`` and changes nothing when *index* is out of range
        or *new_count* is not a non-negative integer.
        """
        count = _coerce_count(new_count)
        valid_index = (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._records)
        )
        if not valid_index or count is None:
            logger.error(
                "Invalid override (index=%r, count=%r); %d skills available",
                index, new_count, len(self._records),
            )
            return False

        record = self._records[index]
        record.count = count
        logger.info("Updated %r to %d endorsements", record.name, count)
        return True

    def rank(self) -> Ranking:
        return rank(self._records)


def extract_skills(document: ProfileDocument, config: Config | None = None) -> SkillSession:
    """Run the pipeline over *document* and open a session on the result.

    Without *config* the built-in defaults are used; no file is read.
    """
    pipeline = Pipeline(config.pipeline_config()) if config is not None else Pipeline()
    result = pipeline.extract(document)
    return SkillSession(result.records, result)
