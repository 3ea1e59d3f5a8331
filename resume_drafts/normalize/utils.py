from __future__ import annotations

import re
import uuid
from collections.abc import Mapping
from typing import Any

_WHITESPACE_RE = re.compile(r"\s+")


def generate_id() -> str:
    return uuid.uuid4().hex


def normalize_space(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def coerce_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def first_present(record: Mapping[str, Any], keys: tuple[str, ...], default: Any = "") -> Any:
    """Return the first truthy value among ``keys``; earlier keys win."""
    for key in keys:
        value = record.get(key)
        if isinstance(value, str):
            if value.strip():
                return value
            continue
        if value:
            return value
    return default


def parse_string_list(text: str) -> list[str]:
    """Split free text on newlines when present, otherwise on commas."""
    if not isinstance(text, str) or not text.strip():
        return []
    if "\n" in text:
        parts = text.split("\n")
    elif "," in text:
        parts = text.split(",")
    else:
        parts = [text]
    return [part.strip() for part in parts if part.strip()]


def string_items(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def parse_highlights(record: Mapping[str, Any]) -> list[str]:
    """Read ``highlights`` or ``achievements`` as a list or a delimited string."""
    highlights = record.get("highlights")
    achievements = record.get("achievements")
    if isinstance(highlights, list):
        return string_items(highlights)
    if isinstance(achievements, list):
        return string_items(achievements)
    if isinstance(highlights, str) and highlights.strip():
        return parse_string_list(highlights)
    if isinstance(achievements, str) and achievements.strip():
        return parse_string_list(achievements)
    return []


def format_industry_name(industry: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in industry.split("-"))
