"""Configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import DEFAULT_AMENITIES, DEFAULT_BARANGAYS, Vocabulary


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load config from YAML file."""
    path = Path(config_path) if config_path else Path(__file__).parent.parent.parent / "config.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _string_list(values: Any, default: tuple[str, ...]) -> list[str]:
    """Keep non-blank strings in order, dropping case-insensitive duplicates."""
    if not isinstance(values, list):
        return list(default)
    out: list[str] = []
    seen: set[str] = set()
    for v in values:
        if not isinstance(v, str) or not v.strip():
            continue
        key = v.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(v.strip())
    return out


def get_vocabulary(config: dict[str, Any]) -> Vocabulary:
    """Extract barangay and amenity vocabularies from config."""
    vocab = config.get("vocabulary", {}) or {}
    return Vocabulary(
        barangays=_string_list(vocab.get("barangays"), DEFAULT_BARANGAYS),
        amenities=_string_list(vocab.get("amenities"), DEFAULT_AMENITIES),
    )


def get_suggestion_limit(config: dict[str, Any]) -> int:
    """Max recent/popular terms offered as suggestions."""
    sg = config.get("suggestions", {}) or {}
    return max(0, int(sg.get("limit", 6)))


def get_keep_recent_order(config: dict[str, Any]) -> bool:
    sg = config.get("suggestions", {}) or {}
    return bool(sg.get("keep_recent_order", False))


def get_debounce_delay_ms(config: dict[str, Any]) -> int:
    return max(0, int(config.get("debounce_ms", 300)))


def get_storage_path(config: dict[str, Any]) -> Path:
    """DuckDB file holding listings and search history."""
    st = config.get("storage", {}) or {}
    return Path(st.get("path", "output/rent_search.duckdb"))
