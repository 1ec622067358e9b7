"""Tests for configuration loading and validation."""
from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

import pytest

from skill_sorter.config import STRATEGY_NAMES, Config
from skill_sorter.documents import DEFAULT_ITEM_SELECTOR
from skill_sorter.extraction import StructuredExtraction, TabularExtraction, TextExtraction
from skill_sorter.reconcile import DEFAULT_PLACEHOLDER_NAMES


def _write(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoad:
    def test_defaults_without_file(self, default_config: Config) -> None:
        assert default_config.item_selector == DEFAULT_ITEM_SELECTOR
        assert default_config.strategies == STRATEGY_NAMES
        assert default_config.placeholder_names == DEFAULT_PLACEHOLDER_NAMES
        assert default_config.log_level == "INFO"
        assert default_config.validate() == []

    def test_file_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SKILL_SORTER_LOG_LEVEL", raising=False)
        path = _write(tmp_path, {
            "item_selector": "li.skill",
            "label_selectors": ["span.name"],
            "strategies": ["text", "structured"],
            "tab_min_fields": 5,
            "log_level": "debug",
        })
        config = Config.load(path)
        assert config.item_selector == "li.skill"
        assert config.label_selectors == ("span.name",)
        assert config.strategies == ("text", "structured")
        assert config.tab_min_fields == 5
        assert config.log_level == "DEBUG"

    def test_environment_overrides_log_level(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SKILL_SORTER_LOG_LEVEL", "warning")
        config = Config.load(_write(tmp_path, {"log_level": "DEBUG"}))
        assert config.log_level == "WARNING"
        assert config.log_level_value == logging.WARNING


class TestValidate:
    def test_unknown_strategy(self, default_config: Config) -> None:
        errors = replace(default_config, strategies=("structured", "ocr")).validate()
        assert len(errors) == 1
        assert "ocr" in errors[0]

    def test_no_strategies(self, default_config: Config) -> None:
        errors = replace(default_config, strategies=()).validate()
        assert any("at least one" in e for e in errors)

    def test_bad_log_level(self, default_config: Config) -> None:
        errors = replace(default_config, log_level="LOUD").validate()
        assert any("log_level" in e for e in errors)

    def test_negative_position(self, default_config: Config) -> None:
        errors = replace(default_config, tab_name_field=-1).validate()
        assert any("tab_name_field" in e for e in errors)

    def test_position_beyond_min_fields(self, default_config: Config) -> None:
        errors = replace(default_config, tab_min_fields=2, tab_count_field=3).validate()
        assert any("below tab_min_fields" in e for e in errors)

    def test_empty_selectors(self, default_config: Config) -> None:
        errors = replace(default_config, item_selector=" ", label_selectors=()).validate()
        assert len(errors) == 2


class TestPipelineConfig:
    def test_default_order(self, default_config: Config) -> None:
        strategies = default_config.pipeline_config().strategies
        assert [type(s) for s in strategies] == [StructuredExtraction, TextExtraction, TabularExtraction]

    def test_custom_order(self, default_config: Config) -> None:
        config = replace(default_config, strategies=("tabular", "text"))
        assert [s.name for s in config.pipeline_config().strategies] == ["tabular", "text"]

    def test_placeholders_passed_through(self, default_config: Config) -> None:
        config = replace(default_config, placeholder_names=("N/A",))
        assert config.pipeline_config().placeholder_names == ("N/A",)
