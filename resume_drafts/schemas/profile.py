from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

_SCALAR_FIELDS = (
    "id",
    "user",
    "email",
    "first_name",
    "last_name",
    "phone",
    "location",
    "linkedin_url",
    "portfolio_url",
    "github_url",
    "target_industry",
    "experience_level",
    "career_stage",
    "target_job_titles",
    "professional_summary",
    "education_level",
    "academic_projects",
    "personal_projects",
    "volunteer_experience",
    "extracurricular_activities",
    "technical_proficiencies",
    "job_type",
    "preferred_work_type",
)


class UserProfile(BaseModel):
    """Stored career data for one user.

    List-like fields (``work_experience``, ``education``, ``projects``,
    ``skills``, ``key_skills``) are kept exactly as they arrive from storage:
    a JSON-encoded string, a native list, or nothing. They are only read
    through ``resume_drafts.normalize``.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    user: str | None = None
    email: str | None = None

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin_url: str | None = None
    portfolio_url: str | None = None
    github_url: str | None = None

    target_industry: str | None = None
    experience_level: str | None = None
    career_stage: str | None = None
    target_job_titles: str | None = None
    professional_summary: str | None = None
    education_level: str | None = None
    job_type: str | None = None
    preferred_work_type: str | None = None

    academic_projects: str | None = None
    personal_projects: str | None = None
    volunteer_experience: str | None = None
    extracurricular_activities: str | None = None
    technical_proficiencies: str | None = None

    key_skills: Any = None
    skills: Any = None
    work_experience: Any = None
    education: Any = None
    projects: Any = None

    @field_validator(*_SCALAR_FIELDS, mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        return None
