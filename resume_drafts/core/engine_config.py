from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from resume_drafts.core.config import settings

REQUIRED_SECTIONS = ("placeholders", "default_document", "generation", "selector", "recommendation")
SCORE_DIMENSIONS = ("industry", "experience_level", "job_type", "style", "completeness")
MAX_RECOMMENDATION_SCORE = 100


def _config_path() -> Path:
    return Path(settings.engine_config_path)


def _read_tables(path: Path) -> dict[str, Any]:
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise RuntimeError(f"Engine config not found at '{path}'. Set ENGINE_CONFIG_PATH.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read engine config '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in engine config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid engine config '{path}': expected a top-level mapping.")
    return parsed


def _check_sections(tables: dict[str, Any], path: Path) -> None:
    missing = [name for name in REQUIRED_SECTIONS if not isinstance(tables.get(name), dict)]
    if missing:
        raise RuntimeError(f"Invalid engine config '{path}': missing sections {', '.join(missing)}.")


def _check_ceilings(tables: dict[str, Any], path: Path) -> None:
    """Per-dimension ceilings must be non-negative integers that fit a 0-100 score."""
    ceilings = tables["recommendation"].get("ceilings")
    if not isinstance(ceilings, dict):
        raise RuntimeError(f"Invalid engine config '{path}': recommendation.ceilings must be a mapping.")

    for dimension in SCORE_DIMENSIONS:
        value = ceilings.get(dimension)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise RuntimeError(
                f"Invalid engine config '{path}': recommendation.ceilings.{dimension} "
                "must be a non-negative integer."
            )

    total = sum(ceilings[dimension] for dimension in SCORE_DIMENSIONS)
    if total > MAX_RECOMMENDATION_SCORE:
        raise RuntimeError(
            f"Invalid engine config '{path}': recommendation ceilings add up to {total}, "
            f"above {MAX_RECOMMENDATION_SCORE}."
        )


@lru_cache(maxsize=4)
def _load_engine_config(path: Path) -> dict[str, Any]:
    tables = _read_tables(path)
    _check_sections(tables, path)
    _check_ceilings(tables, path)
    return tables


def get_engine_config() -> dict[str, Any]:
    """Engine tables from ENGINE_CONFIG_PATH, validated once per path and cached."""
    return _load_engine_config(_config_path())


def get_engine_value(path: str, default: Any = None) -> Any:
    """Dot-path lookup, e.g. 'selector.base_score'; missing keys give ``default``."""
    if not path:
        return default

    node: Any = get_engine_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def reset_engine_config_cache() -> None:
    _load_engine_config.cache_clear()
