from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from resume_drafts.schemas.profile import UserProfile

from .utils import (
    coerce_text,
    first_present,
    normalize_space,
    parse_highlights,
    parse_string_list,
    string_items,
)

logger = logging.getLogger(__name__)

_COMPANY_KEYS = ("company", "employer")
_POSITION_KEYS = ("position", "title", "role")
_START_KEYS = ("start_date", "startDate")
_END_KEYS = ("end_date", "endDate")
_CURRENT_KEYS = ("current", "is_current")
_INSTITUTION_KEYS = ("institution", "school", "university")
_DEGREE_KEYS = ("degree", "degree_type")
_FIELD_KEYS = ("field", "field_of_study", "major")
_GPA_KEYS = ("gpa", "grade")
_PROJECT_NAME_KEYS = ("name", "title")
_URL_KEYS = ("url", "link")
_GITHUB_KEYS = ("github", "github_url")
_DESCRIPTION_KEYS = ("description", "summary")


@dataclass(frozen=True, slots=True)
class NormalizedProfile:
    """Profile view consumed by strategies; every field has a safe default."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    portfolio_url: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    target_industry: str = ""
    experience_level: str = ""
    career_stage: str = ""
    professional_summary: str = ""
    education_level: str = ""
    job_type: str = ""
    academic_projects: str = ""
    personal_projects: str = ""
    volunteer_experience: str = ""
    extracurricular_activities: str = ""
    has_work_experience: bool = False
    experience: list[dict[str, Any]] = field(default_factory=list)
    education: list[dict[str, Any]] = field(default_factory=list)
    projects: list[dict[str, Any]] = field(default_factory=list)
    skill_names: list[str] = field(default_factory=list)
    technical_proficiencies: list[str] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return normalize_space(f"{self.first_name} {self.last_name}")

    @property
    def experience_level_lower(self) -> str:
        return self.experience_level.lower()

    @property
    def career_stage_lower(self) -> str:
        return self.career_stage.lower()


def parse_record_list(raw: Any, *, field_name: str) -> list[dict[str, Any]]:
    """Coerce a stored list field into a list of plain records.

    Accepts a native list, a JSON-encoded list, or nothing. Malformed JSON is
    logged and treated as an empty list.
    """
    if raw is None:
        return []
    if isinstance(raw, list):
        return [dict(item) for item in raw if isinstance(item, Mapping)]
    if not isinstance(raw, str):
        return []
    text = raw.strip()
    if not text:
        return []
    try:
        parsed = json.loads(text)
    except (ValueError, TypeError) as exc:
        logger.warning("profile_field_parse_failed field=%s: %s", field_name, exc)
        return []
    if not isinstance(parsed, list):
        logger.warning("profile_field_parse_failed field=%s: expected a JSON array", field_name)
        return []
    return [dict(item) for item in parsed if isinstance(item, Mapping)]


def parse_name_list(raw: Any, *, field_name: str) -> list[str]:
    """Read skill-like names from free text, a JSON array, or a native list."""
    if raw is None:
        return []
    items: list[Any]
    if isinstance(raw, list):
        items = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return []
        if not text.startswith("["):
            return parse_string_list(text)
        try:
            parsed = json.loads(text)
        except (ValueError, TypeError) as exc:
            logger.warning("profile_field_parse_failed field=%s: %s", field_name, exc)
            return []
        if not isinstance(parsed, list):
            return []
        items = parsed
    else:
        return []

    names: list[str] = []
    for item in items:
        if isinstance(item, str):
            name = item.strip()
        elif isinstance(item, Mapping):
            name = coerce_text(item.get("name"))
        else:
            name = ""
        if name:
            names.append(name)
    return names


def is_populated(raw: Any) -> bool:
    """True when a stored list field carries anything at all, parsed or not."""
    if isinstance(raw, str):
        return bool(raw.strip())
    if isinstance(raw, list):
        return len(raw) > 0
    return False


def canonical_experience(record: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "company": coerce_text(first_present(record, _COMPANY_KEYS)),
        "position": coerce_text(first_present(record, _POSITION_KEYS)),
        "location": coerce_text(record.get("location")),
        "start_date": coerce_text(first_present(record, _START_KEYS)),
        "end_date": coerce_text(first_present(record, _END_KEYS)),
        "current": bool(first_present(record, _CURRENT_KEYS, False)),
        "description": coerce_text(first_present(record, _DESCRIPTION_KEYS)),
        "highlights": parse_highlights(record),
    }


def canonical_education(record: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "institution": coerce_text(first_present(record, _INSTITUTION_KEYS)),
        "degree": coerce_text(first_present(record, _DEGREE_KEYS)),
        "field": coerce_text(first_present(record, _FIELD_KEYS)),
        "location": coerce_text(record.get("location")),
        "start_date": coerce_text(first_present(record, _START_KEYS)),
        "end_date": coerce_text(first_present(record, _END_KEYS)),
        "current": bool(first_present(record, _CURRENT_KEYS, False)),
        "gpa": coerce_text(first_present(record, _GPA_KEYS)),
        "honors": string_items(record.get("honors")),
        "description": coerce_text(record.get("description")),
    }


def canonical_project(record: Mapping[str, Any]) -> dict[str, Any]:
    technologies = record.get("technologies")
    if isinstance(technologies, str):
        technology_names = parse_string_list(technologies)
    else:
        technology_names = string_items(technologies)
    return {
        "name": coerce_text(first_present(record, _PROJECT_NAME_KEYS)) or "Project",
        "description": coerce_text(first_present(record, _DESCRIPTION_KEYS)),
        "technologies": technology_names,
        "url": coerce_text(first_present(record, _URL_KEYS)),
        "github": coerce_text(first_present(record, _GITHUB_KEYS)),
        "start_date": coerce_text(first_present(record, _START_KEYS)),
        "end_date": coerce_text(first_present(record, _END_KEYS)),
        "highlights": string_items(record.get("highlights")),
    }


def normalize_experience(raw: Any) -> list[dict[str, Any]]:
    return [canonical_experience(item) for item in parse_record_list(raw, field_name="work_experience")]


def normalize_education(raw: Any) -> list[dict[str, Any]]:
    return [canonical_education(item) for item in parse_record_list(raw, field_name="education")]


def normalize_projects(raw: Any) -> list[dict[str, Any]]:
    return [canonical_project(item) for item in parse_record_list(raw, field_name="projects")]


def normalize_skill_names(profile: UserProfile) -> list[str]:
    names: list[str] = []
    seen: set[str] = set()
    for raw, field_name in ((profile.key_skills, "key_skills"), (profile.skills, "skills")):
        for name in parse_name_list(raw, field_name=field_name):
            key = name.lower()
            if key in seen:
                continue
            seen.add(key)
            names.append(name)
    return names


def _to_profile(profile: UserProfile | Mapping[str, Any] | None) -> UserProfile:
    if isinstance(profile, UserProfile):
        return profile
    if profile is None:
        return UserProfile()
    return UserProfile.model_validate(dict(profile))


def normalize_profile(profile: UserProfile | Mapping[str, Any] | None) -> NormalizedProfile:
    source = _to_profile(profile)
    return NormalizedProfile(
        first_name=coerce_text(source.first_name),
        last_name=coerce_text(source.last_name),
        email=coerce_text(source.email),
        phone=coerce_text(source.phone),
        location=coerce_text(source.location),
        portfolio_url=coerce_text(source.portfolio_url),
        linkedin_url=coerce_text(source.linkedin_url),
        github_url=coerce_text(source.github_url),
        target_industry=coerce_text(source.target_industry),
        experience_level=coerce_text(source.experience_level),
        career_stage=coerce_text(source.career_stage),
        professional_summary=coerce_text(source.professional_summary),
        education_level=coerce_text(source.education_level),
        job_type=coerce_text(source.job_type) or coerce_text(source.preferred_work_type),
        academic_projects=coerce_text(source.academic_projects),
        personal_projects=coerce_text(source.personal_projects),
        volunteer_experience=coerce_text(source.volunteer_experience),
        extracurricular_activities=coerce_text(source.extracurricular_activities),
        has_work_experience=is_populated(source.work_experience),
        experience=normalize_experience(source.work_experience),
        education=normalize_education(source.education),
        projects=normalize_projects(source.projects),
        skill_names=normalize_skill_names(source),
        technical_proficiencies=parse_string_list(coerce_text(source.technical_proficiencies)),
    )
