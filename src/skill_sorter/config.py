"""Configuration management."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import json
import logging
import os

from .documents import DEFAULT_ITEM_SELECTOR
from .extraction.structured import (
    DEFAULT_COUNT_KEYWORD,
    DEFAULT_COUNT_SELECTOR,
    DEFAULT_HIDDEN_COUNT_SELECTOR,
    DEFAULT_LABEL_SELECTORS,
    StructuredExtraction,
)
from .extraction.tabular import (
    DEFAULT_TAB_COUNT_FIELD,
    DEFAULT_TAB_MIN_FIELDS,
    DEFAULT_TAB_NAME_FIELD,
    DEFAULT_TABLE_COUNT_CELL,
    DEFAULT_TABLE_MIN_CELLS,
    DEFAULT_TABLE_NAME_CELL,
    DEFAULT_TABULAR_DENYLIST,
    DEFAULT_TABULAR_EXACT_DENYLIST,
    TabularExtraction,
)
from .extraction.text import DEFAULT_TEXT_DENYLIST, TextExtraction
from .pipeline import PipelineConfig
from .reconcile import DEFAULT_PLACEHOLDER_NAMES

DEFAULT_CONFIG_PATH = "~/.config/skill-sorter/config.json"
STRATEGY_NAMES = ("structured", "text", "tabular")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration."""
    # Document structure
    item_selector: str
    label_selectors: tuple[str, ...]  # tried in order, first match wins
    hidden_count_selector: str
    count_selector: str
    count_keyword: str
    # Text strategy
    text_denylist: tuple[str, ...]
    # Tabular strategy
    tabular_denylist: tuple[str, ...]  # substring match
    tabular_exact_denylist: tuple[str, ...]  # whole-name match
    tab_min_fields: int
    tab_name_field: int
    tab_count_field: int
    table_min_cells: int
    table_name_cell: int
    table_count_cell: int
    # Reconciliation
    placeholder_names: tuple[str, ...]
    # Strategy priority order (earlier wins ties)
    strategies: tuple[str, ...]
    log_level: str

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Load config from file and/or environment."""
        if path is not None:
            config_path = Path(path).expanduser()
        else:
            config_path = Path(DEFAULT_CONFIG_PATH).expanduser()

        data = {}
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)

        return cls(
            item_selector=data.get("item_selector", DEFAULT_ITEM_SELECTOR),
            label_selectors=tuple(data.get("label_selectors", DEFAULT_LABEL_SELECTORS)),
            hidden_count_selector=data.get("hidden_count_selector", DEFAULT_HIDDEN_COUNT_SELECTOR),
            count_selector=data.get("count_selector", DEFAULT_COUNT_SELECTOR),
            count_keyword=data.get("count_keyword", DEFAULT_COUNT_KEYWORD),
            text_denylist=tuple(data.get("text_denylist", DEFAULT_TEXT_DENYLIST)),
            tabular_denylist=tuple(data.get("tabular_denylist", DEFAULT_TABULAR_DENYLIST)),
            tabular_exact_denylist=tuple(data.get("tabular_exact_denylist", DEFAULT_TABULAR_EXACT_DENYLIST)),
            tab_min_fields=data.get("tab_min_fields", DEFAULT_TAB_MIN_FIELDS),
            tab_name_field=data.get("tab_name_field", DEFAULT_TAB_NAME_FIELD),
            tab_count_field=data.get("tab_count_field", DEFAULT_TAB_COUNT_FIELD),
            table_min_cells=data.get("table_min_cells", DEFAULT_TABLE_MIN_CELLS),
            table_name_cell=data.get("table_name_cell", DEFAULT_TABLE_NAME_CELL),
            table_count_cell=data.get("table_count_cell", DEFAULT_TABLE_COUNT_CELL),
            placeholder_names=tuple(data.get("placeholder_names", DEFAULT_PLACEHOLDER_NAMES)),
            strategies=tuple(data.get("strategies", STRATEGY_NAMES)),
            # Environment wins over the file for log level
            log_level=(os.environ.get("SKILL_SORTER_LOG_LEVEL") or data.get("log_level", "INFO")).upper(),
        )

    def validate(self) -> list[str]:
        """Return list of validation errors, empty if valid."""
        errors = []
        if not self.item_selector.strip():
            errors.append("item_selector must not be empty")
        if not self.label_selectors or not all(s.strip() for s in self.label_selectors):
            errors.append("label_selectors must be a non-empty list of selectors")
        if not self.count_keyword:
            errors.append("count_keyword must not be empty")

        bad_positions = []
        for field_name in ("tab_name_field", "tab_count_field", "table_name_cell", "table_count_cell"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or value < 0:
                bad_positions.append(field_name)
                errors.append(f"{field_name} must be a non-negative integer, got {value!r}")

        if not isinstance(self.tab_min_fields, int) or self.tab_min_fields < 1:
            errors.append(f"tab_min_fields must be a positive integer, got {self.tab_min_fields!r}")
        elif not bad_positions and max(self.tab_name_field, self.tab_count_field) >= self.tab_min_fields:
            errors.append(
                f"tab_name_field/tab_count_field must be below tab_min_fields ({self.tab_min_fields})"
            )
        if not isinstance(self.table_min_cells, int) or self.table_min_cells < 1:
            errors.append(f"table_min_cells must be a positive integer, got {self.table_min_cells!r}")
        elif not bad_positions and self.table_name_cell >= self.table_min_cells:
            errors.append(f"table_name_cell must be below table_min_cells ({self.table_min_cells})")

        if not self.strategies:
            errors.append("strategies must name at least one strategy")
        unknown = [s for s in self.strategies if s not in STRATEGY_NAMES]
        if unknown:
            errors.append(
                f"Unknown strategies: {', '.join(unknown)}. Must be one of {', '.join(STRATEGY_NAMES)}"
            )

        if self.log_level not in _LOG_LEVELS:
            errors.append(f"Invalid log_level: {self.log_level}. Must be one of {', '.join(_LOG_LEVELS)}")
        return errors

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)

    def pipeline_config(self) -> PipelineConfig:
        """Strategies built from this config, in priority order."""
        builders = {
            "structured": lambda: StructuredExtraction(
                label_selectors=self.label_selectors,
                hidden_count_selector=self.hidden_count_selector,
                count_selector=self.count_selector,
                count_keyword=self.count_keyword,
            ),
            "text": lambda: TextExtraction(denylist=self.text_denylist),
            "tabular": lambda: TabularExtraction(
                denylist=self.tabular_denylist,
                exact_denylist=self.tabular_exact_denylist,
                tab_min_fields=self.tab_min_fields,
                tab_name_field=self.tab_name_field,
                tab_count_field=self.tab_count_field,
                table_min_cells=self.table_min_cells,
                table_name_cell=self.table_name_cell,
                table_count_cell=self.table_count_cell,
            ),
        }
        strategies = tuple(builders[name]() for name in self.strategies if name in builders)
        return PipelineConfig(
            strategies=strategies,
            placeholder_names=self.placeholder_names,
        )
