"""Extraction strategies: structured items, free text, TAB/table rows."""

from .protocols import ExtractionStrategy
from .structured import StructuredExtraction, extract_structured
from .tabular import TabularExtraction, extract_tabular
from .text import TextExtraction, extract_from_text

__all__ = [
    "ExtractionStrategy",
    "StructuredExtraction",
    "TabularExtraction",
    "TextExtraction",
    "extract_from_text",
    "extract_structured",
    "extract_tabular",
]
