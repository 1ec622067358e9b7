"""
Shared pytest fixtures for skill-sorter tests.

All fixtures that need to be shared across test modules should be defined here.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from skill_sorter.config import Config


# =============================================================================
# HTML fixtures
# =============================================================================

def _skill_item(item_id: int, label_html: str, count_html: str = "") -> str:
    """One skill list item in the profile's markup convention."""
    return (
        f'<li id="profilePagedListComponent-ACoAA-SKILLS-{item_id}">'
        f"<div>{label_html}</div><div>{count_html}</div></li>"
    )


def _hoverable_label(name: str) -> str:
    """Label as rendered: visible and hidden copies inside one link text."""
    return (
        '<div class="hoverable-link-text">'
        f'<span aria-hidden="true">{name}</span>'
        f'<span class="visually-hidden">{name}</span>'
        "</div>"
    )


def _hidden_count(count: int) -> str:
    suffix = "" if count == 1 else "s"
    return f'<span class="visually-hidden">{count} endorsement{suffix}</span>'


@pytest.fixture
def profile_html() -> str:
    """Profile page with four structured skill items."""
    items = [
        _skill_item(0, _hoverable_label("Python"), _hidden_count(12)),
        _skill_item(1, _hoverable_label("REST APIs"), _hidden_count(3)),
        _skill_item(2, _hoverable_label("Docker"), _hidden_count(12)),
        _skill_item(3, '<span aria-hidden="true">Leadership</span>'),
    ]
    return (
        "<html><head><title>Profile</title><script>var x = 1;</script></head>"
        "<body><main><h2>Skills</h2><ul>" + "".join(items) + "</ul></main></body></html>"
    )


@pytest.fixture
def text_only_html() -> str:
    """Page without skill items; skills only appear as text lines."""
    return (
        "<html><body>"
        "<p>1. REST APIsREST APIs: 3 endorsements</p>"
        "<p>REST APIs: 3 endorsements</p>"
        "<p>Index: 3 endorsements</p>"
        "<p>Unrelated paragraph</p>"
        "</body></html>"
    )


# =============================================================================
# Config fixtures
# =============================================================================

@pytest.fixture
def default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Config:
    """Defaults only -- no file on disk, no environment override."""
    monkeypatch.delenv("SKILL_SORTER_LOG_LEVEL", raising=False)
    return Config.load(tmp_path / "missing.json")
