"""Read-only views of a rendered profile: list items, visible text, tables.

Two sources are supported:

* ``HtmlProfileDocument`` -- a saved or rendered profile page (BeautifulSoup).
* ``PdfProfileDocument`` -- a profile exported as PDF (PyMuPDF).  A PDF has
  no DOM, so ``items()`` is always empty and extraction falls back to the
  text and tabular strategies.
"""

from __future__ import annotations

import copy
import logging
import re
from functools import cached_property
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import pymupdf
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from .exceptions import UnsupportedDocumentError

logger = logging.getLogger(__name__)

DEFAULT_ITEM_SELECTOR = 'li[id^="profilePagedListComponent-"]'

# One table: rows of cell strings.
TableRows = tuple[tuple[str, ...], ...]

_WHITESPACE_RE = re.compile(r"\s+")
_SPACES_RE = re.compile(r" {2,}")

_HIDDEN_TAGS = ("script", "style", "noscript", "template", "head")

_BLOCK_TAGS = (
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl",
    "dt", "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2",
    "h3", "h4", "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p",
    "pre", "section", "table", "tr", "ul",
)

_HTML_SUFFIXES = {".html", ".htm"}
_PDF_SUFFIXES = {".pdf"}


@runtime_checkable
class ProfileDocument(Protocol):
    """Structural contract for a document the strategies can read.

    ``items()`` returns element handles exposing ``select_one``, ``select``
    and ``get_text`` (BeautifulSoup ``Tag`` semantics).
    """

    @property
    def visible_text(self) -> str:
        """Flattened visible text, one rendered line per ``\\n``."""
        ...

    def items(self) -> list[Any]:
        """Skill list items in document order."""
        ...

    def tables(self) -> list[TableRows]:
        """Literal tables in document order."""
        ...


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def _html_visible_text(soup: BeautifulSoup) -> str:
    """Approximate ``innerText``: blocks end lines, row cells are TAB-separated.

    Works on a copy so the caller's tree is not modified.
    """
    soup = copy.copy(soup)
    for tag in soup.find_all(_HIDDEN_TAGS):
        tag.decompose()
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    # Source formatting whitespace collapses to single spaces, as in a browser.
    for text in soup.find_all(string=True):
        text.replace_with(_WHITESPACE_RE.sub(" ", str(text)))

    for row in soup.find_all("tr"):
        cells = row.find_all(["td", "th"], recursive=False)
        for cell in cells[1:]:
            cell.insert_before(NavigableString("\t"))

    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_after(NavigableString("\n"))

    lines = []
    for line in soup.get_text().split("\n"):
        line = _SPACES_RE.sub(" ", line).strip(" ")
        if line.strip():
            lines.append(line)
    return "\n".join(lines)


def _html_table_rows(table: Tag) -> TableRows:
    """Rows of *table* itself; rows and cells of nested tables are left out."""
    rows = []
    for tr in table.find_all("tr"):
        if tr.find_parent("table") is not table:
            continue
        cells = tr.find_all(["td", "th"], recursive=False)
        rows.append(tuple(cell.get_text(" ", strip=True) for cell in cells))
    return tuple(rows)


class HtmlProfileDocument:
    """Profile page parsed with BeautifulSoup."""

    def __init__(self, html: str, item_selector: str = DEFAULT_ITEM_SELECTOR) -> None:
        self.soup = BeautifulSoup(html, "html.parser")
        self.item_selector = item_selector

    @classmethod
    def from_path(cls, path: Path | str, item_selector: str = DEFAULT_ITEM_SELECTOR) -> HtmlProfileDocument:
        text = Path(path).read_text(encoding="utf-8", errors="ignore")
        return cls(text, item_selector=item_selector)

    @cached_property
    def visible_text(self) -> str:
        root = self.soup.body or self.soup
        return _html_visible_text(root)

    def items(self) -> list[Tag]:
        return self.soup.select(self.item_selector)

    def tables(self) -> list[TableRows]:
        return [_html_table_rows(t) for t in self.soup.find_all("table")]


# ---------------------------------------------------------------------------
# PDF
# ---------------------------------------------------------------------------

def _pdf_page_tables(page: pymupdf.Page) -> list[TableRows]:
    """Tables on one page via ``page.find_tables()``; empty list on error."""
    try:
        found = page.find_tables()
    except Exception:
        logger.warning("find_tables failed on page %s", page.number, exc_info=True)
        return []
    tables = []
    for tab in found.tables:
        rows = tab.extract()
        tables.append(tuple(
            tuple((cell or "").strip() for cell in row) for row in rows
        ))
    return tables


class PdfProfileDocument:
    """Profile exported as PDF, read with PyMuPDF."""

    def __init__(self, doc: pymupdf.Document) -> None:
        self.doc = doc

    @classmethod
    def from_path(cls, path: Path | str) -> PdfProfileDocument:
        return cls(pymupdf.open(str(path)))

    @cached_property
    def visible_text(self) -> str:
        parts = [page.get_text("text") for page in self.doc]
        return "\n".join(part.rstrip("\n") for part in parts)

    def items(self) -> list[Any]:
        return []

    def tables(self) -> list[TableRows]:
        result: list[TableRows] = []
        for page in self.doc:
            result.extend(_pdf_page_tables(page))
        return result


def load_document(
    path: Path | str,
    item_selector: str = DEFAULT_ITEM_SELECTOR,
) -> ProfileDocument:
    """Open *path* as HTML or PDF depending on its suffix.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    UnsupportedDocumentError
        If the suffix is neither HTML nor PDF.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Profile document not found: {path}")

    suffix = path.suffix.lower()
    if suffix in _HTML_SUFFIXES:
        return HtmlProfileDocument.from_path(path, item_selector=item_selector)
    if suffix in _PDF_SUFFIXES:
        return PdfProfileDocument.from_path(path)
    raise UnsupportedDocumentError(
        f"Unsupported document type {suffix!r} (expected .html, .htm or .pdf)"
    )
