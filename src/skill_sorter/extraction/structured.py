"""Structured strategy -- reads skill list items from the document tree.

Each item carries its label in one of a few known element shapes, tried in
priority order, and its endorsement count in a hidden accessibility span
(or, failing that, in any span of the item).
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Sequence

from ..documents import ProfileDocument
from ..models import Candidate, CandidateSet
from ..normalizer import normalize_name

logger = logging.getLogger(__name__)

DEFAULT_LABEL_SELECTORS: tuple[str, ...] = (
    ".hoverable-link-text",
    'span[aria-hidden="true"]',
)
DEFAULT_HIDDEN_COUNT_SELECTOR = ".visually-hidden"
DEFAULT_COUNT_SELECTOR = "span"
DEFAULT_COUNT_KEYWORD = "endorsement"

_FIRST_INT_RE = re.compile(r"(\d+)")

LabelLookup = Callable[[Any], Any]


def label_lookups(selectors: Sequence[str]) -> list[LabelLookup]:
    """One lookup function per selector, in priority order."""
    return [lambda item, css=css: item.select_one(css) for css in selectors]


def _find_label(item: Any, lookups: Sequence[LabelLookup]) -> Any:
    for lookup in lookups:
        element = lookup(item)
        if element is not None:
            return element
    return None


def _count_from_spans(spans: Sequence[Any], keyword: str) -> int | None:
    """First integer in the first span mentioning *keyword*."""
    for span in spans:
        text = span.get_text().strip()
        if keyword not in text:
            continue
        match = _FIRST_INT_RE.search(text)
        if match:
            return int(match.group(1))
    return None


def extract_structured(
    items: Sequence[Any],
    *,
    label_selectors: Sequence[str] = DEFAULT_LABEL_SELECTORS,
    hidden_count_selector: str = DEFAULT_HIDDEN_COUNT_SELECTOR,
    count_selector: str = DEFAULT_COUNT_SELECTOR,
    count_keyword: str = DEFAULT_COUNT_KEYWORD,
    strategy: str = "structured",
) -> CandidateSet:
    """Build candidates from list item handles.

    Items without a label are skipped; a missing count becomes 0. An item
    that raises while being read is logged and skipped.
    """
    lookups = label_lookups(label_selectors)
    candidates: list[Candidate] = []

    for idx, item in enumerate(items):
        try:
            label = _find_label(item, lookups)
            if label is None:
                logger.debug("Item %d has no label element, skipping", idx)
                continue

            raw_name = label.get_text().strip()
            count = _count_from_spans(item.select(hidden_count_selector), count_keyword)
            if count is None:
                count = _count_from_spans(item.select(count_selector), count_keyword)

            candidates.append(Candidate(
                raw_name=raw_name,
                name=normalize_name(raw_name),
                count=count or 0,
            ))
        except Exception:
            logger.warning("Failed to read skill item %d", idx, exc_info=True)
            continue

    return CandidateSet(strategy=strategy, candidates=tuple(candidates))


class StructuredExtraction:
    """Strategy over ``document.items()``."""

    def __init__(
        self,
        label_selectors: Sequence[str] = DEFAULT_LABEL_SELECTORS,
        hidden_count_selector: str = DEFAULT_HIDDEN_COUNT_SELECTOR,
        count_selector: str = DEFAULT_COUNT_SELECTOR,
        count_keyword: str = DEFAULT_COUNT_KEYWORD,
    ) -> None:
        self.label_selectors = tuple(label_selectors)
        self.hidden_count_selector = hidden_count_selector
        self.count_selector = count_selector
        self.count_keyword = count_keyword

    @property
    def name(self) -> str:
        return "structured"

    def extract(self, document: ProfileDocument) -> CandidateSet:
        return extract_structured(
            document.items(),
            label_selectors=self.label_selectors,
            hidden_count_selector=self.hidden_count_selector,
            count_selector=self.count_selector,
            count_keyword=self.count_keyword,
            strategy=self.name,
        )
