from __future__ import annotations

from collections.abc import Iterable, Sequence

from resume_drafts.core.engine_config import get_engine_value
from resume_drafts.schemas.draft import PersonalInfo, ResumeBuilderData

MERGEABLE_SECTIONS = ("personalInfo", "summary", "experience", "education", "skills", "projects", "settings")

_SECTION_ALIASES = {section.lower(): section for section in MERGEABLE_SECTIONS}
_SECTION_ALIASES.update({"personal": "personalInfo", "personal_info": "personalInfo"})


def smart_merge_field(
    profile_value: str | None,
    template_value: str | None,
    placeholders: Sequence[str] = (),
) -> str:
    """Prefer the user's value; accept a template value only if it is not sample text."""
    if profile_value and profile_value.strip():
        return profile_value.strip()

    if template_value and template_value.strip():
        normalized = template_value.strip().lower()
        if not any(normalized == placeholder.lower() for placeholder in placeholders):
            return template_value.strip()

    return ""


def placeholders_for(field_name: str) -> list[str]:
    values = get_engine_value(f"placeholders.{field_name}", [])
    return [str(value) for value in values] if isinstance(values, list) else []


def _default_text(key: str) -> str:
    return str(get_engine_value(f"default_document.{key}", "") or "").strip().lower()


def _is_default_full_name(value: str) -> bool:
    sentinel = _default_text("full_name")
    return bool(sentinel) and value.strip().lower() == sentinel


def _is_default_summary(value: str) -> bool:
    prefix = _default_text("summary_prefix")
    return bool(prefix) and value.strip().lower().startswith(prefix)


def _is_default_experience(document: ResumeBuilderData) -> bool:
    sentinel = _default_text("company")
    return bool(sentinel) and all(item.company.strip().lower() == sentinel for item in document.experience)


def _is_default_education(document: ResumeBuilderData) -> bool:
    sentinel = _default_text("institution")
    return bool(sentinel) and all(item.institution.strip().lower() == sentinel for item in document.education)


def _is_default_skills(document: ResumeBuilderData) -> bool:
    defaults = {str(name).strip().lower() for name in get_engine_value("default_document.skill_names", []) or []}
    return bool(defaults) and all(skill.name.strip().lower() in defaults for skill in document.skills)


def _merge_personal_info(current: PersonalInfo, generated: PersonalInfo) -> PersonalInfo:
    merged = current.model_copy()
    for name in PersonalInfo.model_fields:
        existing = getattr(current, name)
        candidate = getattr(generated, name)
        if not candidate:
            continue
        if not existing.strip() or (name == "full_name" and _is_default_full_name(existing)):
            setattr(merged, name, candidate)
    return merged


def normalize_sections(sections: Iterable[str]) -> list[str]:
    resolved: list[str] = []
    for section in sections:
        key = _SECTION_ALIASES.get(section.strip().lower())
        if key and key not in resolved:
            resolved.append(key)
    return resolved


def merge_draft_into_document(
    current: ResumeBuilderData,
    draft: ResumeBuilderData,
    sections: Iterable[str],
) -> ResumeBuilderData:
    """Copy the chosen sections of ``draft`` into ``current`` without clobbering edits.

    A section is replaced only when it is empty or still holds the built-in
    starter content. Neither input is mutated.
    """
    merged = current.model_copy(deep=True)
    generated = draft.model_copy(deep=True)

    for section in normalize_sections(sections):
        if section == "personalInfo":
            merged.personal_info = _merge_personal_info(merged.personal_info, generated.personal_info)
        elif section == "summary":
            if not merged.summary.strip() or _is_default_summary(merged.summary):
                merged.summary = generated.summary
        elif section == "experience":
            if not merged.experience or _is_default_experience(merged):
                merged.experience = generated.experience
        elif section == "education":
            if not merged.education or _is_default_education(merged):
                merged.education = generated.education
        elif section == "skills":
            if not merged.skills or _is_default_skills(merged):
                merged.skills = generated.skills
        elif section == "projects":
            if not merged.projects:
                merged.projects = generated.projects
        elif section == "settings":
            merged.settings = generated.settings

    return merged
