from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from resume_drafts.core.engine_config import get_engine_value
from resume_drafts.normalize import NormalizedProfile, normalize_profile
from resume_drafts.normalize.utils import format_industry_name, generate_id
from resume_drafts.schemas.draft import (
    BuilderSettings,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeBuilderData,
    Skill,
    SkillLevel,
)
from resume_drafts.schemas.profile import UserProfile
from resume_drafts.schemas.template import ResumeTemplate, StarterData

from .merge import placeholders_for, smart_merge_field

EXPERIENCED_PROFESSIONAL = "ExperiencedProfessional"
EXPERIENCED_JOB_SEEKER = "ExperiencedJobSeeker"
CAREER_CHANGER = "CareerChanger"
FIRST_TIME_JOB_SEEKER = "FirstTimeJobSeeker"
STUDENT = "Student"

_FREE_TEXT_PROJECTS = (
    ("academic_projects", "Academic Project"),
    ("personal_projects", "Personal Project"),
    ("volunteer_experience", "Volunteer Experience"),
)
_EXTRACURRICULAR = ("extracurricular_activities", "Extracurricular Activity")


@dataclass(frozen=True, slots=True)
class GenerationContext:
    profile: NormalizedProfile
    template: ResumeTemplate
    target_industry: str

    @property
    def starter(self) -> StarterData:
        return self.template.starter_data or StarterData()


def generate_resume(
    strategy: ResumeStrategy,
    profile: NormalizedProfile | UserProfile | Mapping[str, Any] | None,
    template: ResumeTemplate,
    target_industry: str | None = None,
) -> ResumeBuilderData:
    normalized = profile if isinstance(profile, NormalizedProfile) else normalize_profile(profile)
    context = GenerationContext(
        profile=normalized,
        template=template,
        target_industry=(target_industry or "").strip() or normalized.target_industry,
    )
    return ResumeBuilderData(
        personal_info=strategy.generate_personal_info(context),
        summary=strategy.generate_summary(context),
        experience=strategy.generate_experience(context),
        education=strategy.generate_education(context),
        skills=strategy.generate_skills(context),
        projects=strategy.generate_projects(context),
        settings=strategy.generate_settings(context),
        current_step="personal",
        completed_steps=[],
    )


# Shared section builders


def default_personal_info(context: GenerationContext) -> PersonalInfo:
    profile = context.profile
    starter = context.starter.personal_info or PersonalInfo()
    return PersonalInfo(
        full_name=smart_merge_field(profile.full_name, starter.full_name, placeholders_for("full_name")),
        email=smart_merge_field(profile.email, starter.email, placeholders_for("email")),
        phone=smart_merge_field(profile.phone, starter.phone, placeholders_for("phone")),
        location=smart_merge_field(profile.location, starter.location, placeholders_for("location")),
        website=smart_merge_field(profile.portfolio_url, starter.website, placeholders_for("website")),
        linkedin=smart_merge_field(profile.linkedin_url, starter.linkedin, placeholders_for("linkedin")),
        github=smart_merge_field(profile.github_url, starter.github, placeholders_for("github")),
        summary=starter.summary or "",
    )


def default_summary(context: GenerationContext) -> str:
    if context.profile.professional_summary:
        return context.profile.professional_summary
    return context.starter.summary or ""


def default_settings(context: GenerationContext) -> BuilderSettings:
    starter_settings = context.starter.settings
    template_settings = context.template.settings
    return BuilderSettings(
        layout=(starter_settings.layout if starter_settings else None)
        or get_engine_value("generation.default_layout", "1-page"),
        mode=(starter_settings.mode if starter_settings else None)
        or get_engine_value("generation.default_mode", "simple"),
        template=template_settings.template,
        color_scheme=template_settings.color_scheme,
        font_size=template_settings.font_size,
        spacing=template_settings.spacing,
        show_profile_image=template_settings.show_profile_image,
        section_order=list(template_settings.section_order),
    )


def default_skill_level(profile: NormalizedProfile) -> SkillLevel:
    level = profile.experience_level_lower
    if "student" in level or "entry" in level:
        return "beginner"
    if "junior" in level or "mid" in level or "intermediate" in level:
        return "intermediate"
    if "senior" in level or "lead" in level:
        return "advanced"
    if any(marker in level for marker in ("principal", "staff", "architect", "expert")):
        return "expert"
    return "intermediate"


def prioritize_transferable(highlights: list[str]) -> list[str]:
    """Move bullets mentioning transferable skills to the front, keeping relative order."""
    keywords = [str(keyword).lower() for keyword in get_engine_value("generation.transferable_keywords", []) or []]

    def _transferable(text: str) -> bool:
        lowered = text.lower()
        return any(keyword in lowered for keyword in keywords)

    first = [item for item in highlights if _transferable(item)]
    rest = [item for item in highlights if not _transferable(item)]
    return first + rest


@dataclass(frozen=True, slots=True)
class ResumeStrategy:
    """One way of turning a profile and a template into a draft.

    A strategy is a record of plain functions. ``generate_resume`` runs the
    section builders in a fixed order (personal info, summary, experience,
    education, skills, projects, settings), so a strategy only supplies the
    sections it treats differently.
    """

    name: str
    is_applicable: Callable[[NormalizedProfile], bool]
    generate_experience: Callable[[GenerationContext], list[Experience]]
    generate_education: Callable[[GenerationContext], list[Education]]
    generate_skills: Callable[[GenerationContext], list[Skill]]
    generate_projects: Callable[[GenerationContext], list[Project]]
    generate_summary: Callable[[GenerationContext], str] = default_summary
    generate_personal_info: Callable[[GenerationContext], PersonalInfo] = default_personal_info
    generate_settings: Callable[[GenerationContext], BuilderSettings] = default_settings


def _starter_experience(context: GenerationContext) -> list[Experience]:
    return [item.model_copy(deep=True) for item in context.starter.experience]


def _starter_education(context: GenerationContext) -> list[Education]:
    return [item.model_copy(deep=True) for item in context.starter.education]


def _starter_projects(context: GenerationContext) -> list[Project]:
    return [item.model_copy(deep=True) for item in context.starter.projects]


def _profile_experience(
    context: GenerationContext,
    reorder: Callable[[list[str]], list[str]] | None = None,
) -> list[Experience]:
    records = context.profile.experience
    if not records:
        return _starter_experience(context)
    entries: list[Experience] = []
    for record in records:
        entry = Experience(id=generate_id(), **record)
        if reorder is not None:
            entry.highlights = reorder(entry.highlights)
        entries.append(entry)
    return entries


def _profile_education(context: GenerationContext) -> list[Education]:
    return [Education(id=generate_id(), **record) for record in context.profile.education]


def _education_or_starter(context: GenerationContext) -> list[Education]:
    return _profile_education(context) or _starter_education(context)


def _education_from_level(context: GenerationContext) -> list[Education]:
    raw_level = context.profile.education_level
    if raw_level:
        degree_names = get_engine_value("generation.degree_names", {}) or {}
        degree = str(degree_names.get(raw_level.lower(), raw_level))
        if len(degree) >= 3:
            return [Education(id=generate_id(), degree=degree, current=True)]
    return _starter_education(context)


def _education_or_level(context: GenerationContext) -> list[Education]:
    return _profile_education(context) or _education_from_level(context)


def _profile_projects(
    context: GenerationContext,
    reorder: Callable[[list[str]], list[str]] | None = None,
) -> list[Project]:
    records = context.profile.projects
    if not records:
        return _starter_projects(context)
    projects: list[Project] = []
    for record in records:
        project = Project(id=generate_id(), **record)
        if reorder is not None:
            project.highlights = reorder(project.highlights)
        projects.append(project)
    return projects


def _free_text_projects(context: GenerationContext, *, include_extracurricular: bool) -> list[Project]:
    sources = list(_FREE_TEXT_PROJECTS)
    if include_extracurricular:
        sources.append(_EXTRACURRICULAR)
    projects = [
        Project(id=generate_id(), name=label, description=getattr(context.profile, attr))
        for attr, label in sources
        if getattr(context.profile, attr)
    ]
    return projects or _starter_projects(context)


def _starter_skill_map(context: GenerationContext) -> dict[str, Skill]:
    skills: dict[str, Skill] = {}
    for skill in context.starter.skills:
        skills[skill.name.strip().lower()] = skill.model_copy(update={"id": generate_id()})
    return skills


def _fill_from_starter(skills: dict[str, Skill], context: GenerationContext) -> list[Skill]:
    for key, skill in _starter_skill_map(context).items():
        skills.setdefault(key, skill)
    return list(skills.values())


def _profile_skills_first(
    context: GenerationContext,
    names: list[str],
    *,
    level: SkillLevel,
    category: str,
) -> list[Skill]:
    skills: dict[str, Skill] = {}
    for name in names:
        key = name.strip().lower()
        if key and key not in skills:
            skills[key] = Skill(id=generate_id(), name=name, level=level, category=category)
    return _fill_from_starter(skills, context)


def _starter_skills_first(
    context: GenerationContext,
    *,
    level: SkillLevel,
    category: str,
    relevel_existing: bool,
) -> list[Skill]:
    skills = _starter_skill_map(context)
    for name in context.profile.skill_names:
        key = name.strip().lower()
        if not key:
            continue
        if key in skills:
            if relevel_existing:
                skills[key] = skills[key].model_copy(update={"level": level})
            continue
        skills[key] = Skill(id=generate_id(), name=name, level=level, category=category)
    return list(skills.values())


# Applicability predicates


def _is_student(profile: NormalizedProfile) -> bool:
    return "student" in profile.experience_level_lower or profile.career_stage_lower == "student"


def _is_career_change_marker(profile: NormalizedProfile) -> bool:
    markers = get_engine_value("generation.career_change_markers", ["career_change", "career-change"]) or []
    return profile.career_stage_lower in {str(marker).lower() for marker in markers}


def experienced_professional_applicable(profile: NormalizedProfile) -> bool:
    level = profile.experience_level_lower
    return any(marker in level for marker in ("senior", "lead", "principal", "staff", "architect"))


def experienced_job_seeker_applicable(profile: NormalizedProfile) -> bool:
    if _is_student(profile) or not profile.has_work_experience:
        return False
    level = profile.experience_level_lower
    return (
        any(marker in level for marker in ("junior", "mid", "intermediate", "entry"))
        or profile.career_stage_lower in {"professional", "entry"}
    )


def career_changer_applicable(profile: NormalizedProfile) -> bool:
    if not profile.has_work_experience:
        return False
    if _is_career_change_marker(profile):
        return True
    return "transition" in profile.career_stage_lower and bool(profile.target_industry)


def first_time_job_seeker_applicable(profile: NormalizedProfile) -> bool:
    level = profile.experience_level_lower
    first_timer = (
        "entry" in level
        or "first" in level
        or profile.career_stage_lower in {"entry", "first-time"}
    )
    return first_timer and not profile.has_work_experience and not _is_student(profile)


def student_applicable(profile: NormalizedProfile) -> bool:
    level = profile.experience_level_lower
    return "student" in level or "entry" in level or profile.career_stage_lower == "student"


# Experienced professional: trusts structured history, user skills lead.


def _experienced_professional_skills(context: GenerationContext) -> list[Skill]:
    return _profile_skills_first(
        context,
        context.profile.skill_names,
        level=default_skill_level(context.profile),
        category="Technical",
    )


# Experienced job seeker: template skills are the base, profile skills extend them.


def _experienced_job_seeker_skills(context: GenerationContext) -> list[Skill]:
    return _starter_skills_first(
        context,
        level=default_skill_level(context.profile),
        category="Technical Skills",
        relevel_existing=True,
    )


# Career changer


def _career_changer_summary(context: GenerationContext) -> str:
    if context.profile.professional_summary:
        return context.profile.professional_summary
    if context.target_industry:
        industry = format_industry_name(context.target_industry)
        return (
            f"Professional transitioning to {industry} with proven track record of success. "
            "Bringing transferable skills in problem-solving, communication, and leadership. "
            "Eager to apply diverse experience to drive results in a new industry."
        )
    return context.starter.summary or ""


def _career_changer_experience(context: GenerationContext) -> list[Experience]:
    return _profile_experience(context, reorder=prioritize_transferable)


def _career_changer_skills(context: GenerationContext) -> list[Skill]:
    return _starter_skills_first(
        context,
        level=default_skill_level(context.profile),
        category="Transferable Skills",
        relevel_existing=True,
    )


def _career_changer_projects(context: GenerationContext) -> list[Project]:
    return _profile_projects(context, reorder=prioritize_transferable)


# First-time job seeker: no history of their own, so starter examples stand in.


def _first_time_experience(context: GenerationContext) -> list[Experience]:
    return _starter_experience(context)


def _first_time_skills(context: GenerationContext) -> list[Skill]:
    return _starter_skills_first(
        context,
        level="beginner",
        category="Technical Skills",
        relevel_existing=False,
    )


def _first_time_projects(context: GenerationContext) -> list[Project]:
    return _free_text_projects(context, include_extracurricular=False)


# Student: never shows professional experience.


def _student_experience(context: GenerationContext) -> list[Experience]:
    return []


def _student_skills(context: GenerationContext) -> list[Skill]:
    names = list(context.profile.technical_proficiencies) + list(context.profile.skill_names)
    return _profile_skills_first(context, names, level="beginner", category="Technical")


def _student_projects(context: GenerationContext) -> list[Project]:
    return _free_text_projects(context, include_extracurricular=True)


EXPERIENCED_PROFESSIONAL_STRATEGY = ResumeStrategy(
    name=EXPERIENCED_PROFESSIONAL,
    is_applicable=experienced_professional_applicable,
    generate_experience=_profile_experience,
    generate_education=_education_or_starter,
    generate_skills=_experienced_professional_skills,
    generate_projects=_profile_projects,
)

EXPERIENCED_JOB_SEEKER_STRATEGY = ResumeStrategy(
    name=EXPERIENCED_JOB_SEEKER,
    is_applicable=experienced_job_seeker_applicable,
    generate_experience=_profile_experience,
    generate_education=_education_or_starter,
    generate_skills=_experienced_job_seeker_skills,
    generate_projects=_profile_projects,
)

CAREER_CHANGER_STRATEGY = ResumeStrategy(
    name=CAREER_CHANGER,
    is_applicable=career_changer_applicable,
    generate_summary=_career_changer_summary,
    generate_experience=_career_changer_experience,
    generate_education=_education_or_starter,
    generate_skills=_career_changer_skills,
    generate_projects=_career_changer_projects,
)

FIRST_TIME_JOB_SEEKER_STRATEGY = ResumeStrategy(
    name=FIRST_TIME_JOB_SEEKER,
    is_applicable=first_time_job_seeker_applicable,
    generate_experience=_first_time_experience,
    generate_education=_education_or_level,
    generate_skills=_first_time_skills,
    generate_projects=_first_time_projects,
)

STUDENT_STRATEGY = ResumeStrategy(
    name=STUDENT,
    is_applicable=student_applicable,
    generate_experience=_student_experience,
    generate_education=_education_or_level,
    generate_skills=_student_skills,
    generate_projects=_student_projects,
)

DEFAULT_STRATEGIES: tuple[ResumeStrategy, ...] = (
    EXPERIENCED_PROFESSIONAL_STRATEGY,
    CAREER_CHANGER_STRATEGY,
    EXPERIENCED_JOB_SEEKER_STRATEGY,
    FIRST_TIME_JOB_SEEKER_STRATEGY,
    STUDENT_STRATEGY,
)
