from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from resume_drafts.core.engine_config import get_engine_value
from resume_drafts.normalize import NormalizedProfile, normalize_profile
from resume_drafts.schemas.profile import UserProfile

from .strategies import (
    CAREER_CHANGER,
    DEFAULT_STRATEGIES,
    EXPERIENCED_JOB_SEEKER,
    EXPERIENCED_PROFESSIONAL,
    FIRST_TIME_JOB_SEEKER,
    STUDENT,
    ResumeStrategy,
)

logger = logging.getLogger(__name__)

MANUAL_OVERRIDE_REASON = "Manual override selected"
NOT_APPLICABLE_REASON = "Not applicable for this profile"

ProfileInput = NormalizedProfile | UserProfile | Mapping[str, Any] | None
Bonus = tuple[float, str]


@dataclass(frozen=True, slots=True)
class StrategySelection:
    strategy: ResumeStrategy
    strategy_name: str
    confidence: float
    reasons: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class StrategyRegistry:
    """Ordered, immutable set of strategies; order breaks ties."""

    strategies: tuple[ResumeStrategy, ...]

    def __post_init__(self) -> None:
        if not self.strategies:
            raise ValueError("StrategyRegistry requires at least one strategy")

    def names(self) -> list[str]:
        return [strategy.name for strategy in self.strategies]

    def find(self, name: str | None) -> ResumeStrategy | None:
        if not name:
            return None
        for strategy in self.strategies:
            if strategy.name == name:
                return strategy
        return None

    def get_by_name(self, name: str | None) -> ResumeStrategy:
        return self.find(name) or self.strategies[0]

    def with_strategy(self, strategy: ResumeStrategy) -> StrategyRegistry:
        return StrategyRegistry(strategies=self.strategies + (strategy,))


@lru_cache(maxsize=1)
def get_default_registry() -> StrategyRegistry:
    return StrategyRegistry(strategies=DEFAULT_STRATEGIES)


def _weight(strategy_key: str, bonus_key: str) -> float:
    return float(get_engine_value(f"selector.bonuses.{strategy_key}.{bonus_key}", 0.0) or 0.0)


def _career_changer_bonuses(profile: NormalizedProfile) -> list[Bonus]:
    bonuses: list[Bonus] = []
    # Bonuses match the stage exactly as written; applicability is case-insensitive.
    stage = profile.career_stage
    markers = {str(marker) for marker in get_engine_value("generation.career_change_markers", []) or []}
    if stage in markers:
        bonuses.append((_weight("career_changer", "explicit_marker"), "Explicitly marked as career changer"))
    if "transition" in stage:
        bonuses.append((_weight("career_changer", "transition"), "Career transition detected"))
    if profile.target_industry:
        bonuses.append((_weight("career_changer", "target_industry"), "Has target industry specified"))
    if profile.has_work_experience:
        bonuses.append((_weight("career_changer", "work_experience"), "Has work experience to adapt"))
    return bonuses


def _experienced_professional_bonuses(profile: NormalizedProfile) -> list[Bonus]:
    bonuses: list[Bonus] = []
    level = profile.experience_level_lower
    if "senior" in level:
        bonuses.append((_weight("experienced_professional", "senior"), "Senior level experience"))
    elif "lead" in level or "principal" in level:
        bonuses.append((_weight("experienced_professional", "leadership"), "Leadership level position"))
    elif "staff" in level or "architect" in level:
        bonuses.append((_weight("experienced_professional", "advanced_role"), "Advanced technical role"))
    if profile.has_work_experience:
        bonuses.append((_weight("experienced_professional", "work_experience"), "Has substantial work experience"))
    return bonuses


def _experienced_job_seeker_bonuses(profile: NormalizedProfile) -> list[Bonus]:
    bonuses: list[Bonus] = []
    level = profile.experience_level_lower
    if "mid" in level or "junior" in level:
        bonuses.append((_weight("experienced_job_seeker", "mid_or_junior"), "Mid-level or junior experience"))
    elif "intermediate" in level:
        bonuses.append((_weight("experienced_job_seeker", "intermediate"), "Intermediate experience level"))
    if profile.has_work_experience:
        bonuses.append((_weight("experienced_job_seeker", "work_experience"), "Has work experience"))
    if profile.professional_summary:
        bonuses.append((_weight("experienced_job_seeker", "professional_summary"), "Has professional summary"))
    return bonuses


def _first_time_job_seeker_bonuses(profile: NormalizedProfile) -> list[Bonus]:
    bonuses: list[Bonus] = []
    if "entry" in profile.experience_level_lower:
        bonuses.append((_weight("first_time_job_seeker", "entry_level"), "Entry-level position seeker"))
    if not profile.has_work_experience:
        bonuses.append((_weight("first_time_job_seeker", "no_work_experience"), "No work experience - needs examples"))
    if profile.academic_projects or profile.volunteer_experience:
        bonuses.append((_weight("first_time_job_seeker", "academic_or_volunteer"), "Has academic or volunteer experience"))
    return bonuses


def _student_bonuses(profile: NormalizedProfile) -> list[Bonus]:
    bonuses: list[Bonus] = []
    if "student" in profile.experience_level_lower or profile.career_stage_lower == "student":
        bonuses.append((_weight("student", "currently_student"), "Currently a student"))
    if profile.education_level:
        bonuses.append((_weight("student", "education_level"), "Has education level specified"))
    if profile.academic_projects or profile.personal_projects:
        bonuses.append((_weight("student", "projects"), "Has academic or personal projects"))
    return bonuses


STRATEGY_BONUSES: dict[str, Callable[[NormalizedProfile], list[Bonus]]] = {
    CAREER_CHANGER: _career_changer_bonuses,
    EXPERIENCED_PROFESSIONAL: _experienced_professional_bonuses,
    EXPERIENCED_JOB_SEEKER: _experienced_job_seeker_bonuses,
    FIRST_TIME_JOB_SEEKER: _first_time_job_seeker_bonuses,
    STUDENT: _student_bonuses,
}


def _as_normalized(profile: ProfileInput) -> NormalizedProfile:
    if isinstance(profile, NormalizedProfile):
        return profile
    return normalize_profile(profile)


def score_strategy(strategy: ResumeStrategy, profile: ProfileInput) -> tuple[float, list[str]]:
    """Confidence in [0, 1] that ``strategy`` fits ``profile``, with reasons."""
    normalized = _as_normalized(profile)
    if not strategy.is_applicable(normalized):
        return 0.0, [NOT_APPLICABLE_REASON]

    score = float(get_engine_value("selector.base_score", 0.5))
    reasons: list[str] = []
    bonus_rule = STRATEGY_BONUSES.get(strategy.name)
    if bonus_rule is not None:
        for weight, reason in bonus_rule(normalized):
            score += weight
            reasons.append(reason)

    confidence = round(min(1.0, max(0.0, score)), 4)
    return confidence, reasons


def get_all_strategy_scores(
    profile: ProfileInput,
    registry: StrategyRegistry | None = None,
) -> list[StrategySelection]:
    registry = registry or get_default_registry()
    normalized = _as_normalized(profile)
    selections = []
    for strategy in registry.strategies:
        confidence, reasons = score_strategy(strategy, normalized)
        selections.append(
            StrategySelection(
                strategy=strategy,
                strategy_name=strategy.name,
                confidence=confidence,
                reasons=reasons,
            )
        )
    return sorted(selections, key=lambda selection: selection.confidence, reverse=True)


def select_strategy(
    profile: ProfileInput,
    manual_override: str | None = None,
    registry: StrategyRegistry | None = None,
) -> StrategySelection:
    registry = registry or get_default_registry()
    override = registry.find(manual_override)
    if override is not None:
        logger.info("strategy_selected name=%s confidence=1.0 override=true", override.name)
        return StrategySelection(
            strategy=override,
            strategy_name=override.name,
            confidence=1.0,
            reasons=[MANUAL_OVERRIDE_REASON],
        )
    if manual_override:
        logger.info("strategy_override_ignored name=%s", manual_override)

    best = get_all_strategy_scores(profile, registry)[0]
    logger.info("strategy_selected name=%s confidence=%.2f override=false", best.strategy_name, best.confidence)
    return best


def get_strategy(profile: ProfileInput, registry: StrategyRegistry | None = None) -> ResumeStrategy:
    """First applicable strategy in registry order, else the first registered one."""
    registry = registry or get_default_registry()
    normalized = _as_normalized(profile)
    for strategy in registry.strategies:
        if strategy.is_applicable(normalized):
            return strategy
    return registry.strategies[0]
