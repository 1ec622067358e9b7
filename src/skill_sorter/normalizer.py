"""Skill name normalization.

Rendered profile labels pick up three kinds of artifact:

* the label rendered twice with no separator (``"GoGo"``),
* the label repeated around a colon (``"Go: Go"``),
* a list or table index glued to the front (``"4. Go"``, ``"3:Go"``).

Each step below fires only on an exact match so that legitimate names with
repeated words survive untouched.
"""
from __future__ import annotations

import re

# Index prefix: digits followed by at least one of ``.``, ``:`` or whitespace.
_INDEX_PREFIX_RE = re.compile(r"^\d+[.:\s]+")


def _collapse_doubled(text: str) -> str:
    """``"SS"`` -> ``"S"`` when both halves match character for character."""
    length = len(text)
    if length == 0 or length % 2:
        return text
    half = length // 2
    if text[:half] == text[half:]:
        return text[:half]
    return text


def _collapse_colon_repeat(text: str) -> str:
    """``"A : A"`` -> ``"A"`` when the first two colon segments match."""
    parts = text.split(":")
    if len(parts) >= 2 and parts[0].strip() == parts[1].strip():
        return parts[0].strip()
    return text


def _strip_index_prefix(text: str) -> str:
    return _INDEX_PREFIX_RE.sub("", text, count=1)


def _one_pass(text: str) -> str:
    name = _collapse_doubled(text)
    name = _collapse_colon_repeat(name)
    name = _strip_index_prefix(name)
    return name.strip()


def normalize_name(raw: str) -> str:
    """Canonicalize a raw extracted label into a display name.

    The steps repeat until the name stops changing, so nested artifacts
    (``"GoGoGoGo"``, ``"1. 2. Go"``) are removed in one call and the result
    is a fixed point. Never returns an empty string for non-empty input: a
    pass that would consume everything is discarded and the name from
    before it is returned.
    """
    name = raw.strip()
    while name:
        cleaned = _one_pass(name)
        if not cleaned or cleaned == name:
            break
        name = cleaned
    return name
