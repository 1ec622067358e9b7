"""Pipeline class -- runs every strategy, selects one, reconciles its candidates.

Orchestrates the full extraction flow:
1. Run each strategy in priority order (no early exit)
2. Select the candidate set with the most candidates
3. Reconcile the winner into one record per skill name

Also defines the default pipeline configuration (DEFAULT_CONFIG).
"""

from __future__ import annotations

import logging
import time
import traceback
from dataclasses import dataclass, field
from typing import Any

from .documents import ProfileDocument
from .extraction.protocols import ExtractionStrategy
from .extraction.structured import StructuredExtraction
from .extraction.tabular import TabularExtraction
from .extraction.text import TextExtraction
from .models import CandidateSet, ExtractionResult
from .reconcile import DEFAULT_PLACEHOLDER_NAMES, reconcile
from .selection import select_best

logger = logging.getLogger(__name__)

NO_SKILLS_NOTICE = (
    "No skills found. Please ensure the document is a LinkedIn profile "
    "page with the skills section visible."
)


# ---------------------------------------------------------------------------
# PipelineConfig -- frozen dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pipeline configuration.

    strategies: protocol-conforming objects in priority order (earlier wins
    ties during selection).
    """

    strategies: tuple[ExtractionStrategy, ...]
    placeholder_names: tuple[str, ...] = field(default=DEFAULT_PLACEHOLDER_NAMES)

    def with_overrides(self, **kwargs: Any) -> PipelineConfig:
        """Return a new PipelineConfig with specified fields replaced."""
        current = {
            "strategies": self.strategies,
            "placeholder_names": self.placeholder_names,
        }
        current.update(kwargs)
        return PipelineConfig(**current)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable dict."""
        return {
            "strategies": [s.name for s in self.strategies],
            "placeholder_names": list(self.placeholder_names),
        }


DEFAULT_CONFIG: PipelineConfig = PipelineConfig(
    strategies=(
        StructuredExtraction(),
        TextExtraction(),
        TabularExtraction(),
    ),
)


class Pipeline:
    """Runs all extraction strategies over one document.

    Parameters
    ----------
    config:
        Immutable pipeline configuration; defaults to ``DEFAULT_CONFIG``.
    """

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_CONFIG

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def extract(self, document: ProfileDocument) -> ExtractionResult:
        """Run the full pipeline for *document*.

        Returns
        -------
        ExtractionResult
            Every strategy's candidates, the winner, the reconciled records,
            strategy errors and timing. ``notice`` is set when no skill
            was found.
        """
        result = ExtractionResult()

        # ------------------------------------------------------------------
        # Step 1: run every strategy
        # ------------------------------------------------------------------
        for strategy in self._config.strategies:
            t0 = time.perf_counter()
            try:
                candidate_set = strategy.extract(document)
            except Exception as exc:
                result.timing[strategy.name] = time.perf_counter() - t0
                result.method_errors.append((strategy.name, traceback.format_exc()))
                logger.warning("Strategy %s crashed: %s", strategy.name, exc)
                candidate_set = CandidateSet(strategy=strategy.name)
            else:
                result.timing[strategy.name] = time.perf_counter() - t0

            logger.debug(
                "Strategy %s produced %d candidates", strategy.name, len(candidate_set),
            )
            result.candidate_sets.append(candidate_set)

        # ------------------------------------------------------------------
        # Step 2: select
        # ------------------------------------------------------------------
        result.winner = select_best(result.candidate_sets)
        logger.info(
            "Selected strategy %s with %d candidates",
            result.winner.strategy, len(result.winner),
        )

        # ------------------------------------------------------------------
        # Step 3: reconcile
        # ------------------------------------------------------------------
        result.records = reconcile(result.winner, self._config.placeholder_names)
        logger.info("Reconciled %d unique skills", len(result.records))

        if not result.records:
            result.notice = NO_SKILLS_NOTICE
        return result
