"""Text and table rendering of skill lists."""
from __future__ import annotations

from typing import Any, Sequence

from .models import SkillRecord

RANKING_TITLE = "LinkedIn Skills Sorted by Endorsement Count:"
RULE = "-" * 48


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def format_ranking(ranking: Sequence[SkillRecord]) -> str:
    """Numbered ``"1. Name: N endorsements"`` listing under a title."""
    lines = [RANKING_TITLE, RULE]
    for position, record in enumerate(ranking, start=1):
        lines.append(
            f"{position}. {record.name}: {record.count} endorsement{_plural(record.count)}"
        )
    return "\n".join(lines) + "\n"


def ranking_rows(ranking: Sequence[SkillRecord]) -> list[dict[str, Any]]:
    """Rows for the ranked table (1-based rank)."""
    return [
        {"rank": position, "skill": record.name, "endorsements": record.count}
        for position, record in enumerate(ranking, start=1)
    ]


def index_rows(records: Sequence[SkillRecord]) -> list[dict[str, Any]]:
    """Rows for the pre-sort table (0-based index, as taken by overrides)."""
    return [
        {"index": idx, "skill": record.name, "endorsements": record.count}
        for idx, record in enumerate(records)
    ]


def render_table(rows: Sequence[dict[str, Any]]) -> str:
    """Fixed-width table with a header row; empty string for no rows."""
    if not rows:
        return ""
    columns = list(rows[0].keys())
    widths = {
        col: max(len(str(col)), *(len(str(row[col])) for row in rows))
        for col in columns
    }

    def _line(values: dict[str, Any]) -> str:
        cells = []
        for col in columns:
            value = values[col]
            text = str(value)
            cells.append(text.rjust(widths[col]) if isinstance(value, int) else text.ljust(widths[col]))
        return " | ".join(cells).rstrip()

    header = _line({col: col for col in columns})
    separator = "-+-".join("-" * widths[col] for col in columns)
    body = [_line(row) for row in rows]
    return "\n".join([header, separator, *body])
