"""Tabular strategy -- TAB-separated lines and literal table rows.

Both sources follow the ``index, rank, name, count`` column layout of the
sorter's own table output, so a re-rendered result can be read back:

* a line with at least ``min_fields`` TAB-separated fields whose count field
  parses as an integer;
* a row of the first literal table with at least ``min_cells`` cells; an
  unparseable or missing count becomes 0.

Header rows are dropped by a denylist.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from ..documents import ProfileDocument, TableRows
from ..models import Candidate, CandidateSet
from ..normalizer import normalize_name

logger = logging.getLogger(__name__)

DEFAULT_TABULAR_DENYLIST: tuple[str, ...] = ("index", "rank", "name")
DEFAULT_TABULAR_EXACT_DENYLIST: tuple[str, ...] = ("skill",)

DEFAULT_TAB_MIN_FIELDS = 4
DEFAULT_TAB_NAME_FIELD = 2
DEFAULT_TAB_COUNT_FIELD = 3

DEFAULT_TABLE_MIN_CELLS = 3
DEFAULT_TABLE_NAME_CELL = 2
DEFAULT_TABLE_COUNT_CELL = 3

# Leading integer, the way a lenient number parse reads "12 endorsements".
_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


def parse_leading_int(text: str | None) -> int | None:
    """Integer at the start of *text*, or ``None``."""
    if not text:
        return None
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else None


def is_header_name(
    name: str,
    contains: Iterable[str] = DEFAULT_TABULAR_DENYLIST,
    exact: Iterable[str] = DEFAULT_TABULAR_EXACT_DENYLIST,
) -> bool:
    lowered = name.lower()
    if lowered in {word.lower() for word in exact}:
        return True
    return any(word.lower() in lowered for word in contains)


class TabularExtraction:
    """Strategy over TAB-separated lines and ``document.tables()``."""

    def __init__(
        self,
        denylist: Iterable[str] = DEFAULT_TABULAR_DENYLIST,
        exact_denylist: Iterable[str] = DEFAULT_TABULAR_EXACT_DENYLIST,
        tab_min_fields: int = DEFAULT_TAB_MIN_FIELDS,
        tab_name_field: int = DEFAULT_TAB_NAME_FIELD,
        tab_count_field: int = DEFAULT_TAB_COUNT_FIELD,
        table_min_cells: int = DEFAULT_TABLE_MIN_CELLS,
        table_name_cell: int = DEFAULT_TABLE_NAME_CELL,
        table_count_cell: int = DEFAULT_TABLE_COUNT_CELL,
    ) -> None:
        self.denylist = tuple(denylist)
        self.exact_denylist = tuple(exact_denylist)
        self.tab_min_fields = tab_min_fields
        self.tab_name_field = tab_name_field
        self.tab_count_field = tab_count_field
        self.table_min_cells = table_min_cells
        self.table_name_cell = table_name_cell
        self.table_count_cell = table_count_cell

    @property
    def name(self) -> str:
        return "tabular"

    def _candidate(self, raw_name: str, count: int, source: str) -> Candidate | None:
        name = normalize_name(raw_name.strip())
        if not name or is_header_name(name, self.denylist, self.exact_denylist):
            logger.debug("Skipping header-like %s row %r", source, raw_name)
            return None
        return Candidate(raw_name=raw_name, name=name, count=count)

    def from_tab_lines(self, full_text: str) -> list[Candidate]:
        candidates: list[Candidate] = []
        for line in full_text.splitlines():
            if "\t" not in line:
                continue
            fields = line.split("\t")
            if len(fields) < self.tab_min_fields:
                continue
            count = parse_leading_int(fields[self.tab_count_field])
            if count is None:
                continue
            candidate = self._candidate(fields[self.tab_name_field], count, "tab")
            if candidate is not None:
                candidates.append(candidate)
        return candidates

    def from_table(self, rows: TableRows) -> list[Candidate]:
        candidates: list[Candidate] = []
        for row in rows:
            if len(row) < self.table_min_cells:
                continue
            count = None
            if len(row) > self.table_count_cell:
                count = parse_leading_int(row[self.table_count_cell])
            candidate = self._candidate(row[self.table_name_cell], count or 0, "table")
            if candidate is not None:
                candidates.append(candidate)
        return candidates

    def extract_tabular(self, full_text: str, tables: Sequence[TableRows]) -> CandidateSet:
        """Candidates from TAB lines, then from the first table (if any)."""
        candidates = self.from_tab_lines(full_text)
        if tables:
            candidates.extend(self.from_table(tables[0]))
        return CandidateSet(strategy=self.name, candidates=tuple(candidates))

    def extract(self, document: ProfileDocument) -> CandidateSet:
        return self.extract_tabular(document.visible_text, document.tables())


def extract_tabular(full_text: str, tables: Sequence[TableRows]) -> CandidateSet:
    """Module-level shortcut using the default column layout."""
    return TabularExtraction().extract_tabular(full_text, tables)
