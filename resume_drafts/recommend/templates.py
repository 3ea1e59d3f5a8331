from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from resume_drafts.core.engine_config import get_engine_value
from resume_drafts.normalize import NormalizedProfile, normalize_profile
from resume_drafts.normalize.utils import format_industry_name
from resume_drafts.schemas.profile import UserProfile
from resume_drafts.schemas.recommendation import RecommendationResult, ScoreBreakdown, TemplateScore
from resume_drafts.schemas.template import ResumeTemplate

logger = logging.getLogger(__name__)

ProfileInput = NormalizedProfile | UserProfile | Mapping[str, Any] | None


@dataclass(frozen=True, slots=True)
class ProfileSignals:
    """What the scorer needs to know about a profile, computed once per request."""

    industry: str
    experience_level: str
    job_type: str
    is_complete: bool


def _ceiling(dimension: str) -> int:
    return int(get_engine_value(f"recommendation.ceilings.{dimension}", 0))


def _styles(table: str, key: str) -> list[str]:
    return [str(style).lower() for style in get_engine_value(f"recommendation.{table}.{key}", []) or []]


def _tag_set(name: str) -> set[str]:
    return {str(tag).lower() for tag in get_engine_value(f"recommendation.{name}", []) or []}


def _template_tags(template: ResumeTemplate) -> list[str]:
    return [tag.strip().lower() for tag in template.tags if tag.strip()]


def _matching_styles(preferred: Iterable[str], tags: Sequence[str]) -> list[str]:
    return [style for style in preferred if any(tag in style or style in tag for tag in tags)]


def _parse_date(value: str, now: datetime) -> datetime:
    text = value.strip()
    if not text:
        return now
    if len(text) == 4:
        text = f"{text}-01-01"
    elif len(text) == 7:
        text = f"{text}-01"
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return now
    return parsed.replace(tzinfo=None)


def work_experience_years(profile: NormalizedProfile, now: datetime | None = None) -> int:
    """Whole years across structured work history; ongoing roles run until ``now``."""
    now = now or datetime.now()
    total_months = 0
    for entry in profile.experience:
        start = _parse_date(entry.get("start_date", ""), now)
        end = now if entry.get("current") else _parse_date(entry.get("end_date", ""), now)
        months = (end.year - start.year) * 12 + (end.month - start.month)
        total_months += max(0, months)
    return total_months // 12


def infer_experience_level(profile: NormalizedProfile, now: datetime | None = None) -> str:
    if profile.experience_level_lower:
        return profile.experience_level_lower
    years = work_experience_years(profile, now)
    if years == 0:
        return "entry"
    if years < 2:
        return "junior"
    if years < 5:
        return "mid"
    if years < 10:
        return "senior"
    return "executive"


def infer_job_type(profile: NormalizedProfile) -> str:
    if profile.job_type:
        return profile.job_type.lower()
    industry = profile.target_industry.lower()
    if "freelance" in industry or "consultant" in industry:
        return "freelance"
    return "full-time"


def profile_signals(profile: ProfileInput, now: datetime | None = None) -> ProfileSignals:
    normalized = profile if isinstance(profile, NormalizedProfile) else normalize_profile(profile)
    is_complete = (
        work_experience_years(normalized, now) > 0
        and bool(normalized.education)
        and bool(normalized.skill_names)
    )
    return ProfileSignals(
        industry=normalized.target_industry.lower(),
        experience_level=infer_experience_level(normalized, now),
        job_type=infer_job_type(normalized),
        is_complete=is_complete,
    )


def score_industry(template: ResumeTemplate, signals: ProfileSignals, reasons: list[str]) -> int:
    industry = signals.industry
    if not industry:
        return int(get_engine_value("recommendation.neutral_industry_score", 15))

    tags = _template_tags(template)
    category = template.category.strip().lower()
    score = 0

    if category and (industry in category or category in industry):
        score += 15
        reasons.append(f"Designed for {format_industry_name(industry)} professionals")

    matching = _matching_styles(_styles("industry_styles", industry), tags)
    if matching:
        score += min(15, len(matching) * 5)
        reasons.append(f"{matching[0].capitalize()} style suits {format_industry_name(industry)}")

    if industry in template.description.lower():
        score += 5

    return min(_ceiling("industry"), score)


def score_experience_level(template: ResumeTemplate, signals: ProfileSignals, reasons: list[str]) -> int:
    level = signals.experience_level
    tags = _template_tags(template)
    score = 0

    matching = _matching_styles(_styles("experience_styles", level), tags)
    if matching:
        score += min(20, len(matching) * 7)
        reasons.append(f"Appropriate for {level}-level professionals")

    is_simple = any(tag in _tag_set("simple_tags") for tag in tags)
    is_complex = any(tag in _tag_set("complex_tags") for tag in tags)
    if level == "entry" and is_simple:
        score += 5
        reasons.append("Clean layout perfect for entry-level resumes")
    elif level in ("senior", "executive") and is_complex:
        score += 5
        reasons.append("Sophisticated design for experienced professionals")

    return min(_ceiling("experience_level"), score)


def score_job_type(template: ResumeTemplate, signals: ProfileSignals, reasons: list[str]) -> int:
    job_type = signals.job_type
    matching = _matching_styles(_styles("job_type_styles", job_type), _template_tags(template))
    if not matching:
        return 0
    if job_type != "full-time":
        reasons.append(f"Optimized for {job_type} positions")
    return min(_ceiling("job_type"), len(matching) * 5)


def score_style(template: ResumeTemplate, reasons: list[str]) -> int:
    score = 0
    if template.popularity > 80:
        score += 10
        reasons.append("Highly popular template")
    elif template.popularity > 50:
        score += 5

    tags = _template_tags(template)
    if "modern" in tags or "contemporary" in tags:
        score += 5
        reasons.append("Modern, up-to-date design")
    if "ats-friendly" in tags or "ats" in tags:
        score += 5
        reasons.append("ATS-friendly format")

    return min(_ceiling("style"), score)


def score_completeness(template: ResumeTemplate, signals: ProfileSignals, reasons: list[str]) -> int:
    tags = _template_tags(template)
    if signals.is_complete:
        if any(tag in _tag_set("comprehensive_tags") for tag in tags):
            reasons.append("Showcases your complete profile")
            score = 10
        else:
            score = 5
    elif any(tag in _tag_set("focused_tags") for tag in tags):
        reasons.append("Clean design works well with focused content")
        score = 10
    else:
        score = 5
    return min(_ceiling("completeness"), score)


def score_template(template: ResumeTemplate, signals: ProfileSignals) -> TemplateScore:
    reasons: list[str] = []
    breakdown = ScoreBreakdown(
        industry=score_industry(template, signals, reasons),
        experience_level=score_experience_level(template, signals, reasons),
        job_type=score_job_type(template, signals, reasons),
        style=score_style(template, reasons),
        completeness=score_completeness(template, signals, reasons),
    )
    return TemplateScore(
        template_id=template.id,
        score=breakdown.total(),
        reasons=reasons,
        breakdown=breakdown,
    )


def _coerce_templates(templates: Iterable[ResumeTemplate | Mapping[str, Any]]) -> list[ResumeTemplate]:
    return [
        template if isinstance(template, ResumeTemplate) else ResumeTemplate.model_validate(dict(template))
        for template in templates
    ]


def get_template_recommendations(
    profile: ProfileInput,
    templates: Iterable[ResumeTemplate | Mapping[str, Any]],
) -> list[RecommendationResult]:
    """Every template ranked by fit, best first; the leading few are flagged."""
    signals = profile_signals(profile)
    scored = [(template, score_template(template, signals)) for template in _coerce_templates(templates)]
    scored.sort(key=lambda item: item[1].score, reverse=True)

    top_count = int(get_engine_value("recommendation.top_count", 3))
    results = [
        RecommendationResult(
            template=template,
            score=score,
            is_recommended=index < top_count,
            rank=index + 1,
        )
        for index, (template, score) in enumerate(scored)
    ]
    if results:
        logger.info(
            "templates_ranked count=%s top=%s score=%s",
            len(results),
            results[0].template.id,
            results[0].score.score,
        )
    return results


def get_top_recommendations(
    profile: ProfileInput,
    templates: Iterable[ResumeTemplate | Mapping[str, Any]],
    count: int = 3,
) -> list[RecommendationResult]:
    return get_template_recommendations(profile, templates)[: max(0, count)]


def is_template_recommended(
    template_id: str,
    profile: ProfileInput,
    templates: Iterable[ResumeTemplate | Mapping[str, Any]],
) -> bool:
    top_count = int(get_engine_value("recommendation.top_count", 3))
    return any(
        result.template.id == template_id
        for result in get_top_recommendations(profile, templates, top_count)
    )


def get_recommendation_reasons(
    template_id: str,
    profile: ProfileInput,
    templates: Iterable[ResumeTemplate | Mapping[str, Any]],
) -> list[str]:
    for template in _coerce_templates(templates):
        if template.id == template_id:
            return score_template(template, profile_signals(profile)).reasons
    return []
